"""Tool input schemas - centralized validation

One model per tool. Attributes are snake_case; the wire names callers send
are the camelCase aliases (``businessName``), generated by ``to_camel``.
Required fields are plain ``str``/``float``; optional ones default to None.

The registry checks presence and blankness of required fields itself (so it
can name the field), then hands the arguments to ``model_validate`` for type
coercion: numeric strings such as "25000" are accepted, anything else raises.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def Number(description: str, default=...):
    """A finite number field (NaN and infinity are rejected)"""
    return Field(default, description=description, allow_inf_nan=False)


class ToolInput(BaseModel):
    """Base for every tool input: camelCase on the wire, extras ignored"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )


# =============================================================================
# BUSINESS CONSULTANT
# =============================================================================

class SwotAnalysisInput(ToolInput):
    """Used by: perform-swot-analysis"""
    model_config = ConfigDict(json_schema_extra={
        "example": {"businessName": "Acme Analytics", "industry": "technology"}
    })

    business_name: str = Field(..., description="Name of the business")
    industry: str = Field(..., description="Industry sector")
    business_type: Optional[str] = Field(None, description="Type of business (e.g., retail, SaaS, manufacturing)")
    target_market: Optional[str] = Field(None, description="Target market description")
    location: Optional[str] = Field(None, description="Business location")


class PestAnalysisInput(ToolInput):
    """Used by: perform-pest-analysis"""
    business_name: str = Field(..., description="Name of the business")
    industry: str = Field(..., description="Industry sector")
    location: Optional[str] = Field(None, description="Business location/market")
    target_market: Optional[str] = Field(None, description="Target market description")


class FinancialProjectionsInput(ToolInput):
    """Used by: generate-financial-projections

    Negative amounts are accepted as-is; only non-numeric values are rejected.
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {"startupCosts": 24000, "monthlyExpenses": 5000, "year1Revenue": 120000}
    })

    startup_costs: float = Number("Initial startup costs")
    monthly_expenses: float = Number("Monthly operating expenses")
    year1_revenue: float = Number("Year 1 revenue projection")
    year2_revenue: Optional[float] = Number("Year 2 revenue projection", None)
    industry_growth_rate: Optional[float] = Number("Expected industry growth rate (%)", None)
    profit_margin: Optional[float] = Number("Expected profit margin (%)", None)


class MarketResearchInput(ToolInput):
    """Used by: generate-market-research"""
    industry: str = Field(..., description="Industry sector")
    target_market: str = Field(..., description="Target market description")
    location: Optional[str] = Field(None, description="Geographic market")
    business_type: Optional[str] = Field(None, description="Type of business")


class InnovationInput(ToolInput):
    """Used by: suggest-innovations"""
    industry: str = Field(..., description="Industry sector")
    business_type: str = Field(..., description="Type of business")
    target_market: Optional[str] = Field(None, description="Target market")
    current_offering: Optional[str] = Field(None, description="Current product/service offering")


class SupplyChainInput(ToolInput):
    """Used by: analyze-supply-chain"""
    industry: str = Field(..., description="Industry sector")
    business_type: str = Field(..., description="Type of business")
    location: Optional[str] = Field(None, description="Business location")
    product_type: Optional[str] = Field(None, description="Type of product/service")


# =============================================================================
# DOCUMENT GENERATION
# =============================================================================

class ExecutiveSummaryInput(ToolInput):
    """Used by: generate-executive-summary"""
    business_name: str = Field(..., description="Business name")
    business_idea: str = Field(..., description="Core business idea/concept")
    target_market: str = Field(..., description="Target market description")
    competitive_advantage: Optional[str] = Field(None, description="Key competitive advantages")
    financial_highlights: Optional[str] = Field(None, description="Key financial projections")
    funding_request: Optional[float] = Number("Funding amount requested", None)


class CompanyDescriptionInput(ToolInput):
    """Used by: generate-company-description"""
    business_name: str = Field(..., description="Business name")
    industry: str = Field(..., description="Industry sector")
    business_type: str = Field(..., description="Type of business")
    mission_statement: Optional[str] = Field(None, description="Company mission statement")
    vision_statement: Optional[str] = Field(None, description="Company vision statement")
    core_values: Optional[str] = Field(None, description="Company core values")
    location: Optional[str] = Field(None, description="Business location")
    founding_story: Optional[str] = Field(None, description="Founding story or background")


class MarketingStrategyInput(ToolInput):
    """Used by: generate-marketing-strategy"""
    target_market: str = Field(..., description="Target market segments")
    marketing_channels: Optional[str] = Field(None, description="Preferred marketing channels")
    sales_strategy: Optional[str] = Field(None, description="Sales approach and strategy")
    pricing_strategy: Optional[str] = Field(None, description="Pricing model and strategy")
    brand_positioning: Optional[str] = Field(None, description="Brand positioning strategy")
    customer_acquisition: Optional[str] = Field(None, description="Customer acquisition approach")


class OperationsPlanInput(ToolInput):
    """Used by: generate-operations-plan"""
    business_type: str = Field(..., description="Type of business")
    operational_model: Optional[str] = Field(None, description="Operational approach")
    technology_needs: Optional[str] = Field(None, description="Technology requirements")
    staffing_plan: Optional[str] = Field(None, description="Staffing and team structure")
    facilities_needs: Optional[str] = Field(None, description="Facility requirements")
    quality_control: Optional[str] = Field(None, description="Quality control processes")


class CompileBusinessPlanInput(ToolInput):
    """Used by: compile-business-plan"""
    business_name: str = Field(..., description="Business name for document")
    executive_summary: Optional[str] = Field(None, description="Executive summary content")
    company_description: Optional[str] = Field(None, description="Company description content")
    market_analysis: Optional[str] = Field(None, description="Market analysis content")
    organization_management: Optional[str] = Field(None, description="Organization & management content")
    marketing_strategy: Optional[str] = Field(None, description="Marketing strategy content")
    operations_plan: Optional[str] = Field(None, description="Operations plan content")
    financial_projections: Optional[str] = Field(None, description="Financial projections content")
    funding_request: Optional[str] = Field(None, description="Funding request content")


SaveFormat = Literal["markdown", "html", "text"]


class SaveBusinessPlanInput(ToolInput):
    """Used by: save-business-plan"""
    model_config = ConfigDict(json_schema_extra={
        "example": {"businessPlan": "# Title", "filename": "acme-plan", "format": "html"}
    })

    business_plan: str = Field(..., description="Complete business plan content")
    filename: str = Field(..., description="Filename for saved document")
    format: Optional[SaveFormat] = Field(None, description="Output format")


# =============================================================================
# KNOWLEDGE BASE
# =============================================================================

class IndustryKnowledgeInput(ToolInput):
    """Used by: query-industry-knowledge"""
    industry: str = Field(..., description="Industry sector to research")
    query: str = Field(..., description="Specific research question")
    focus_area: Optional[str] = Field(None, description="Focus area (trends, competition, regulations, etc.)")


class BusinessModelInput(ToolInput):
    """Used by: research-business-models"""
    business_type: str = Field(..., description="Type of business model")
    industry: str = Field(..., description="Industry context")
    revenue_model: Optional[str] = Field(None, description="Revenue model type")
    target_market: Optional[str] = Field(None, description="Target market segment")


class RegulationsInput(ToolInput):
    """Used by: research-regulations"""
    industry: str = Field(..., description="Industry sector")
    location: str = Field(..., description="Geographic location")
    business_type: Optional[str] = Field(None, description="Type of business")
    regulatory_area: Optional[str] = Field(None, description="Specific regulatory area of interest")


class FinancialBenchmarksInput(ToolInput):
    """Used by: query-financial-benchmarks"""
    industry: str = Field(..., description="Industry sector")
    business_size: Optional[str] = Field(None, description="Business size category")
    metric_type: Optional[str] = Field(None, description="Type of financial metric")
    region: Optional[str] = Field(None, description="Geographic region")


class BestPracticesInput(ToolInput):
    """Used by: research-best-practices"""
    area: str = Field(..., description="Business area (marketing, operations, etc.)")
    industry: str = Field(..., description="Industry context")
    business_stage: Optional[str] = Field(None, description="Business stage (startup, growth, mature)")
    challenge: Optional[str] = Field(None, description="Specific challenge or goal")


class TechnologyTrendsInput(ToolInput):
    """Used by: research-technology-trends"""
    industry: str = Field(..., description="Industry sector")
    timeframe: Optional[str] = Field(None, description="Time horizon (short-term, long-term)")
    technology_area: Optional[str] = Field(None, description="Specific technology area")
    business_impact: Optional[str] = Field(None, description="Type of business impact")


class StoreKnowledgeInput(ToolInput):
    """Used by: store-knowledge"""
    category: str = Field(..., description="Knowledge category")
    topic: str = Field(..., description="Specific topic")
    content: str = Field(..., description="Knowledge content to store")
    source: Optional[str] = Field(None, description="Source of information")
    tags: Optional[str] = Field(None, description="Comma-separated tags")


# =============================================================================
# MARKET RESEARCH
# =============================================================================

class DeepMarketAnalysisInput(ToolInput):
    """Used by: conduct-deep-market-analysis"""
    industry: str = Field(..., description="Industry sector")
    business_idea: str = Field(..., description="Detailed business idea description")
    target_market: str = Field(..., description="Target market description")
    location: Optional[str] = Field(None, description="Geographic market")
    business_model: Optional[str] = Field(None, description="Proposed business model")


class CompetitiveLandscapeInput(ToolInput):
    """Used by: analyze-competitive-landscape"""
    industry: str = Field(..., description="Industry sector")
    business_type: str = Field(..., description="Type of business")
    target_market: str = Field(..., description="Target market")
    location: Optional[str] = Field(None, description="Geographic area")
    unique_value_prop: Optional[str] = Field(None, description="Proposed unique value proposition")


class CustomerPersonasInput(ToolInput):
    """Used by: research-customer-personas"""
    target_market: str = Field(..., description="Target market description")
    business_type: str = Field(..., description="Type of business")
    industry: str = Field(..., description="Industry sector")
    price_point: Optional[str] = Field(None, description="Expected price point or range")


class MarketValidationInput(ToolInput):
    """Used by: validate-market-opportunity"""
    business_idea: str = Field(..., description="Business idea to validate")
    target_market: str = Field(..., description="Target market")
    industry: str = Field(..., description="Industry sector")
    investment_level: Optional[float] = Number("Planned investment amount", None)


# =============================================================================
# ORCHESTRATION
# =============================================================================

class CompleteBusinessPlanInput(ToolInput):
    """Used by: generate-complete-business-plan"""
    business_name: str = Field(..., description="Business name")
    business_idea: str = Field(..., description="Core business idea/concept")
    industry: str = Field(..., description="Industry sector")
    target_market: str = Field(..., description="Target market description")
    location: Optional[str] = Field(None, description="Business location")
    funding_request: Optional[float] = Number("Funding amount requested", None)
    startup_costs: Optional[float] = Number("Initial startup costs", None)
    monthly_expenses: Optional[float] = Number("Monthly operating expenses", None)
    year1_revenue: Optional[float] = Number("Year 1 revenue projection", None)


ResearchDepth = Literal["basic", "comprehensive", "deep"]


class AgenticResearchInput(ToolInput):
    """Used by: run-agentic-research"""
    business_idea: str = Field(..., description="Business idea to research")
    industry: str = Field(..., description="Industry sector")
    target_market: str = Field(..., description="Target market")
    research_depth: Optional[ResearchDepth] = Field(None, description="Research depth level")
    focus_areas: Optional[str] = Field(None, description="Comma-separated focus areas")


class BusinessViabilityInput(ToolInput):
    """Used by: assess-business-viability"""
    business_name: str = Field(..., description="Business name")
    business_idea: str = Field(..., description="Business concept")
    industry: str = Field(..., description="Industry sector")
    target_market: str = Field(..., description="Target market")
    investment_level: Optional[float] = Number("Planned investment", None)
    timeframe: Optional[str] = Field(None, description="Business launch timeframe")


class ResearchStrategyInput(ToolInput):
    """Used by: develop-research-strategy"""
    business_context: str = Field(..., description="Business context and background")
    research_findings: str = Field(..., description="Key research findings")
    market_opportunities: Optional[str] = Field(None, description="Identified market opportunities")
    competitive_advantages: Optional[str] = Field(None, description="Potential competitive advantages")
    strategic_goals: Optional[str] = Field(None, description="Strategic goals and objectives")


class GenerationProgressInput(ToolInput):
    """Used by: track-generation-progress"""
    business_name: str = Field(..., description="Business name for tracking")
    session_id: Optional[str] = Field(None, description="Session identifier")
