"""Knowledge Base Tools - industry, business model, regulatory and technology research

Lookups against the static tables in knowledge_base.py. Unknown industries,
business models, practice areas and technology areas fall back to a default
bucket, so every query produces a report.

store-knowledge builds a record and confirms it, but never writes it
anywhere: the knowledge base is read-only.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Tuple

from .. import knowledge_base as kb
from ..schemas import (
    BestPracticesInput,
    BusinessModelInput,
    FinancialBenchmarksInput,
    IndustryKnowledgeInput,
    RegulationsInput,
    StoreKnowledgeInput,
    TechnologyTrendsInput,
)
from ..utils.formatting import capitalize_key, epoch_millis, humanize_key, labelled

if TYPE_CHECKING:
    from ..registry import ToolRegistry

logger = logging.getLogger(__name__)

SUITE = "knowledge-base"

PREVIEW_LENGTH = 200


def _now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds: 2025-01-02T03:04:05.678Z"""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


# =============================================================================
# LOOKUP REPORTS
# =============================================================================

def render_industry_knowledge(params: IndustryKnowledgeInput) -> str:
    industry = params.industry
    profile = kb.industry_profile(industry)
    focus = f"**Focus Area**: {params.focus_area}" if params.focus_area else ""
    benchmarks = "\n".join(
        f"- **{capitalize_key(metric)}**: {value}" for metric, value in profile["benchmarks"].items()
    )

    return f"""# Industry Knowledge: {industry}

## Query: {params.query}
{focus}

## Industry Overview
The {industry} industry is experiencing significant transformation driven by technological advancement, changing customer expectations, and evolving market dynamics.

## Current Trends
{labelled(profile["trends"], "Major trend shaping the industry landscape")}

## Regulatory Environment
Key regulatory considerations for {industry} businesses:
{labelled(profile["regulations"], "Important compliance requirement")}

## Market Dynamics
**Growth Drivers:**
- Digital transformation acceleration
- Changing consumer behaviors and preferences
- Technology adoption and innovation
- Regulatory changes creating opportunities
- Economic factors influencing demand

**Market Challenges:**
- Increased competition and market saturation
- Regulatory compliance complexity
- Technology integration and upgrade costs
- Talent acquisition and retention
- Economic uncertainty and market volatility

## Industry Benchmarks
{benchmarks}

## Specific Insights for Query: "{params.query}"

Based on current industry knowledge and trends:

### Analysis
The query relates to critical aspects of {industry} business operations. Current market conditions suggest:

1. **Market Opportunity**: Strong demand for innovative solutions addressing industry pain points
2. **Competitive Landscape**: Established players with emerging challengers disrupting traditional models
3. **Technology Impact**: Emerging technologies creating new possibilities and business models
4. **Customer Expectations**: Rising expectations for quality, convenience, and value
5. **Regulatory Considerations**: Evolving compliance requirements affecting operations

### Recommendations
1. **Market Research**: Conduct thorough market validation before major investments
2. **Technology Strategy**: Develop clear technology roadmap aligned with business goals
3. **Compliance Planning**: Establish robust compliance framework early
4. **Competitive Analysis**: Continuous monitoring of competitive landscape
5. **Customer Focus**: Maintain strong customer feedback loops and adaptation capability

## Related Knowledge Areas
- Business model innovations in {industry}
- Technology trends affecting {industry}
- Regulatory updates and compliance requirements
- Financial benchmarks and performance metrics
- Best practices for {industry} operations

This analysis provides foundational knowledge for {industry} business planning and strategic decision-making.
"""


def render_business_models(params: BusinessModelInput) -> str:
    business_type = params.business_type
    industry = params.industry
    model = kb.business_model_profile(business_type)

    if params.revenue_model:
        revenue = f"""**{params.revenue_model} Model Analysis:**
- Revenue predictability and scalability assessment
- Customer lifetime value optimization opportunities
- Pricing strategy and competitive positioning
- Payment terms and cash flow implications
- Growth potential and market expansion possibilities"""
    else:
        revenue = f"""**Revenue Model Options for {business_type}:**
- Subscription/recurring revenue model
- Transaction-based or commission model
- License or usage-based pricing
- Freemium with premium upgrade path
- Hybrid model combining multiple revenue streams"""

    return f"""# Business Model Research: {business_type}

## Model Overview
**Business Type**: {business_type}
**Industry Context**: {industry}
**Revenue Model**: {params.revenue_model or 'To be determined'}
**Target Market**: {params.target_market or 'To be defined'}

## Business Model Description
{model["description"]}

This model has proven successful across various industries and market segments, with specific adaptations for different contexts and customer needs.

## Key Success Metrics
Essential metrics for tracking {business_type} business performance:
{labelled(model["keyMetrics"], "Critical performance indicator")}

## Success Factors
Critical elements for {business_type} model success:
{labelled(model["successFactors"], "Essential for sustainable growth")}

## Common Challenges
Typical challenges faced by {business_type} businesses:
{labelled(model["challenges"], "Requires strategic planning and execution")}

## Industry-Specific Adaptations

### {industry} Industry Context
**Model Adaptations for {industry}:**
1. **Value Proposition**: Tailored to industry-specific pain points and needs
2. **Revenue Streams**: Optimized for industry purchasing patterns and budgets
3. **Customer Segments**: Focused on industry-specific decision makers and influencers
4. **Distribution Channels**: Leveraging industry-preferred sales and marketing channels
5. **Key Partnerships**: Strategic alliances with industry ecosystem players

## Revenue Model Analysis

### Primary Revenue Streams
{revenue}

### Revenue Optimization Strategies
1. **Pricing Strategy**: Value-based pricing aligned with customer ROI
2. **Customer Segmentation**: Tiered offerings for different customer segments
3. **Upselling/Cross-selling**: Expansion revenue from existing customers
4. **Market Expansion**: Geographic or vertical market growth
5. **Partnership Revenue**: Strategic alliances and channel partnerships

## Implementation Roadmap

### Phase 1: Foundation (Months 1-6)
- Business model validation and refinement
- Initial product/service development
- Core team building and infrastructure
- Early customer acquisition and feedback

### Phase 2: Growth (Months 7-18)
- Market expansion and customer scaling
- Product/service enhancement and optimization
- Operational efficiency improvements
- Strategic partnership development

### Phase 3: Scale (Months 19+)
- Geographic or vertical market expansion
- Advanced product/service capabilities
- Strategic acquisitions or partnerships
- Market leadership positioning

## Recommendations
1. **Validate Early**: Continuous market validation and customer development
2. **Focus on Metrics**: Track key performance indicators religiously
3. **Build for Scale**: Design operations and technology for growth
4. **Customer Success**: Prioritize customer success and retention
5. **Iterate Rapidly**: Maintain agility and continuous improvement

This business model research provides a foundation for strategic planning and execution in the {industry} industry using the {business_type} model.
"""


def render_regulations(params: RegulationsInput) -> str:
    industry = params.industry
    location = params.location
    profile = kb.industry_profile(industry)
    requirement = f"Important compliance requirement for {industry} businesses"

    return f"""# Regulatory Research: {industry} Industry

## Regulatory Overview
**Industry**: {industry}
**Location**: {location}
**Business Type**: {params.business_type or 'General business'}
**Regulatory Focus**: {params.regulatory_area or 'General compliance'}

## Key Regulatory Requirements

### Industry-Specific Regulations
{labelled(profile["regulations"], requirement)}

### Location-Specific Considerations for {location}
**Federal/National Requirements:**
- Business registration and licensing requirements
- Tax obligations and reporting requirements
- Employment law and workplace safety regulations
- Environmental compliance and sustainability requirements
- Consumer protection and advertising standards

**State/Provincial Requirements:**
- Professional licensing and certification requirements
- Industry-specific permits and approvals
- Sales tax registration and collection requirements
- Workers' compensation and insurance requirements
- Zoning and land use considerations

**Local Requirements:**
- Business permits and local licensing
- Building codes and safety inspections
- Local tax obligations and assessments
- Signage and advertising restrictions
- Parking and accessibility requirements

## Business Type Specific Regulations

### {params.business_type or 'General Business'} Regulatory Framework
**Licensing Requirements:**
- Professional licenses and certifications
- Industry-specific permits and approvals
- Federal, state, and local business licenses
- Special use permits and zoning approvals

## Employment & Labor Laws

### {location} Employment Regulations
- Minimum wage and overtime requirements
- Workplace safety and health standards
- Anti-discrimination and equal opportunity obligations
- Employee benefits and leave policies

## Industry-Specific Deep Dive

### {industry} Regulatory Landscape
The {industry} industry operates in a complex regulatory environment with evolving requirements and increasing oversight.

## Compliance Strategy
1. **Compliance Audit**: Identify every requirement that applies to the business
2. **Policies & Procedures**: Document compliance processes and controls
3. **Training**: Educate the team on regulatory obligations
4. **Monitoring**: Track regulatory changes and compliance status
5. **Professional Support**: Engage legal and compliance advisors

This regulatory research provides a comprehensive foundation for compliance planning and implementation in the {industry} industry within {location}.
"""


def render_financial_benchmarks(params: FinancialBenchmarksInput) -> str:
    industry = params.industry
    benchmarks = kb.industry_profile(industry)["benchmarks"]
    core = "\n".join(f"**{humanize_key(metric)}**: {value}" for metric, value in benchmarks.items())

    return f"""# Financial Benchmarks: {industry} Industry

## Benchmark Overview
**Industry**: {industry}
**Business Size**: {params.business_size or 'All sizes'}
**Metric Type**: {params.metric_type or 'General financial metrics'}
**Region**: {params.region or 'Global'}

## Industry Financial Benchmarks

### Core Financial Metrics
{core}

### Profitability Metrics
**Gross Profit Margin:**
- Industry Average: {benchmarks.get("grossMargin", "40-60%")}
- Top Quartile: 70-85%
- Bottom Quartile: 20-40%
- Growth Stage: Often lower due to investment in growth

**Net Profit Margin:**
- Industry Average: 10-20%
- Top Quartile: 20-30%
- Bottom Quartile: 5-10%
- Startup Stage: Often negative during growth phase

### Growth Metrics
**Revenue Growth Rate:**
- Annual Growth: {benchmarks.get("growthRate", "15-25%")}
- High Growth Companies: 50-100%+
- Mature Companies: 5-15%
- Market Leaders: 20-40%

### Efficiency Metrics
**Customer Acquisition Cost (CAC):**
- Average CAC: {benchmarks.get("customerAcquisitionCost", "$500-2000")}
- CAC Payback Period: 6-18 months
- CAC/LTV Ratio: 1:3 to 1:5 target
- Channel Variation: 50-200% difference by channel

**Customer Lifetime Value (LTV):**
- LTV Calculation: (ARPU × Gross Margin) ÷ Churn Rate
- LTV/CAC Ratio: 3:1 to 5:1 target
- Payback Period: 12-24 months ideal
- Retention Impact: 95% vs 85% retention = 50% LTV increase

## Business Size Segmentation

### {params.business_size or 'Startup'} Stage Benchmarks
- Revenue growth prioritized over profitability
- Burn multiple and runway tracked monthly
- Unit economics validated before scaling

## Regional Variations

### {params.region or 'North America'} Market Characteristics
- Cost structures and wage levels vary by market
- Pricing power depends on local competition
- Tax and regulatory costs affect net margins

## Industry-Specific Deep Dive

### {industry} Financial Characteristics
- Benchmarks above reflect typical {industry} businesses
- Compare against peers of similar size and stage
- Revisit targets as the business matures

These financial benchmarks provide a foundation for performance measurement, goal setting, and strategic planning in the {industry} industry.
"""


def render_best_practices(params: BestPracticesInput) -> str:
    area = params.area
    industry = params.industry
    practices = kb.best_practices_for(area)
    core = "\n".join(f"**{humanize_key(name)}**: {text}" for name, text in practices.items())
    stage = params.business_stage or "Growth stage"

    if params.challenge:
        challenge_text = (
            f'The specific challenge of "{params.challenge}" requires targeted strategies and solutions '
            "that address root causes while building long-term capabilities."
        )
    else:
        challenge_text = (
            f"Performance optimization in {area} requires systematic analysis and improvement "
            "of key processes and outcomes."
        )

    return f"""# Best Practices Research: {area}

## Overview
**Focus Area**: {area}
**Industry**: {industry}
**Business Stage**: {stage}
**Challenge**: {params.challenge or 'General optimization'}

## Core Best Practices for {area}

### Fundamental Principles
{core}

## Industry-Specific Applications

### {industry} Industry Best Practices for {area}
The {industry} industry requires specialized approaches to {area} that account for unique customer behaviors, market dynamics, and competitive landscapes.

## Business Stage Considerations

### {params.business_stage or 'Growth Stage'} Best Practices
- Match process maturity to the size of the team
- Invest in repeatable systems before scaling
- Review results regularly and adjust priorities

## Challenge-Specific Solutions

### Addressing: {params.challenge or 'Performance Optimization'}
{challenge_text}

## Technology and Tools

### {area} Technology Stack
- Core platform or software for primary {area} activities
- Analytics and reporting tools for measuring results
- Automation tools for repetitive tasks

## Team and Organizational Considerations

### Team Structure for {area}
- {area} leader or manager with strategic oversight
- Specialist roles for key {area} functions and capabilities
- Cross-functional collaboration with related teams

## Measurement and Optimization
- Core outcome metrics specific to {area} objectives
- Leading indicators that predict future performance
- Regular benchmarking against industry peers

## Implementation Roadmap
1. **Assess**: Audit current {area} practices and results
2. **Prioritize**: Select the highest-impact improvements
3. **Implement**: Implement core tools and systems for {area}
4. **Measure**: Track results against baseline metrics
5. **Iterate**: Refine practices based on outcomes

These best practices provide a comprehensive framework for excellence in {area} within the {industry} industry, tailored for {params.business_stage or 'growth stage'} businesses addressing {params.challenge or 'performance optimization'}.
"""


def render_technology_trends(params: TechnologyTrendsInput) -> str:
    industry = params.industry
    tech = kb.technology_profile(params.technology_area)
    impact = params.business_impact or "Operational efficiency and growth"
    timeframe = params.timeframe or "Next 2-3 years"

    return f"""# Technology Trends Research: {industry} Industry

## Technology Landscape Overview
**Industry**: {industry}
**Timeframe**: {timeframe}
**Technology Focus**: {params.technology_area or 'Emerging technologies'}
**Business Impact**: {impact}

## Current Technology Trends

### {params.technology_area or 'Artificial Intelligence'} in {industry}
**Impact Areas**: {tech["impact"]}
**Adoption Timeline**: {tech["timeline"]}
**Current Adoption**: {tech["adoption"]}
**Key Considerations**: {tech["considerations"]}

## Industry-Specific Technology Applications

### {industry} Technology Priorities
- Customer experience and personalization
- Process automation and operational efficiency
- Data analytics and decision support
- Security and compliance tooling

## Business Impact Analysis

### {params.business_impact or 'Operational Efficiency'} Impact
- Cost reduction through automation
- Revenue growth from new capabilities
- Faster, better-informed decisions

## Implementation Strategy
1. **Assessment**: Evaluate current technology maturity
2. **Pilot**: Start with a focused, measurable use case
3. **Scale**: Expand proven solutions across the business
4. **Govern**: Establish data, security and ethics policies

## Future Technology Outlook

### {params.timeframe or 'Next 2-3 Years'} Predictions
- Wider adoption of AI-assisted workflows
- Increasing integration between platforms
- Growing regulatory attention to data and AI

This technology trends research provides a comprehensive foundation for technology strategy and implementation planning in the {industry} industry, focusing on {params.business_impact or 'operational efficiency and growth'} over the {params.timeframe or 'next 2-3 years'}.
"""


# =============================================================================
# STORE KNOWLEDGE (confirmation only)
# =============================================================================

@dataclass(frozen=True)
class KnowledgeEntry:
    """A knowledge record as it would be stored"""

    id: str
    category: str
    topic: str
    content: str
    source: str
    tags: Tuple[str, ...]
    created_at: str
    updated_at: str


def build_entry(params: StoreKnowledgeInput, moment: datetime) -> KnowledgeEntry:
    timestamp = iso_timestamp(moment)
    tags = tuple(tag.strip() for tag in params.tags.split(",")) if params.tags else ()
    return KnowledgeEntry(
        id=f"{params.category}_{params.topic}_{epoch_millis(moment)}",
        category=params.category,
        topic=params.topic,
        content=params.content,
        source=params.source or "User input",
        tags=tags,
        created_at=timestamp,
        updated_at=timestamp,
    )


def render_store_confirmation(entry: KnowledgeEntry) -> str:
    preview = entry.content[:PREVIEW_LENGTH]
    if len(entry.content) > PREVIEW_LENGTH:
        preview += "..."
    tags = ", ".join(entry.tags) or "None"

    return f"""✅ Knowledge Successfully Stored

**Entry Details:**
- **ID**: {entry.id}
- **Category**: {entry.category}
- **Topic**: {entry.topic}
- **Source**: {entry.source}
- **Tags**: {tags}
- **Created**: {entry.created_at}

**Content Preview:**
{preview}

**Storage Confirmation:**
The knowledge has been stored in the {entry.category} category and can be retrieved for future queries related to {entry.topic}.

**Next Steps:**
- The stored knowledge will be available for future research queries
- Consider adding related knowledge entries for comprehensive coverage
- Regular updates ensure information remains current and accurate
- Knowledge can be enhanced with additional sources and validation

**Query Examples:**
- "Query industry knowledge about {entry.topic}"
- "Research best practices for {entry.topic}"
- "Find regulations related to {entry.topic}"

The knowledge base is continuously growing to provide better research and analysis capabilities for business plan generation."""


def register_knowledge_tools(registry: "ToolRegistry") -> None:
    """Register the knowledge base tools with the registry"""

    @registry.tool(
        "query-industry-knowledge",
        title="Industry Knowledge Query",
        description="Query business intelligence and industry knowledge base",
        input_model=IndustryKnowledgeInput,
        suite=SUITE,
    )
    def query_industry_knowledge(params: IndustryKnowledgeInput) -> str:
        """Trends, regulations and benchmarks for an industry

        Industries outside the table get the technology profile.
        """
        return render_industry_knowledge(params)

    @registry.tool(
        "research-business-models",
        title="Business Model Research",
        description="Research successful business models and best practices",
        input_model=BusinessModelInput,
        suite=SUITE,
    )
    def research_business_models(params: BusinessModelInput) -> str:
        return render_business_models(params)

    @registry.tool(
        "research-regulations",
        title="Regulatory Research",
        description="Research regulatory requirements and compliance considerations",
        input_model=RegulationsInput,
        suite=SUITE,
    )
    def research_regulations(params: RegulationsInput) -> str:
        return render_regulations(params)

    @registry.tool(
        "query-financial-benchmarks",
        title="Financial Benchmarks Query",
        description="Query industry financial benchmarks and metrics",
        input_model=FinancialBenchmarksInput,
        suite=SUITE,
    )
    def query_financial_benchmarks(params: FinancialBenchmarksInput) -> str:
        return render_financial_benchmarks(params)

    @registry.tool(
        "research-best-practices",
        title="Best Practices Research",
        description="Research industry best practices and success strategies",
        input_model=BestPracticesInput,
        suite=SUITE,
    )
    def research_best_practices(params: BestPracticesInput) -> str:
        return render_best_practices(params)

    @registry.tool(
        "research-technology-trends",
        title="Technology Trends Research",
        description="Research emerging technology trends and their business impact",
        input_model=TechnologyTrendsInput,
        suite=SUITE,
    )
    def research_technology_trends(params: TechnologyTrendsInput) -> str:
        return render_technology_trends(params)

    @registry.tool(
        "store-knowledge",
        title="Store Knowledge",
        description="Store new knowledge and insights in the knowledge base",
        input_model=StoreKnowledgeInput,
        suite=SUITE,
    )
    def store_knowledge(params: StoreKnowledgeInput) -> str:
        """Confirm a knowledge entry without persisting it

        The returned ID and timestamps come from the current time.
        """
        entry = build_entry(params, _now())
        logger.debug(f"Knowledge entry {entry.id} confirmed (not persisted)")
        return render_store_confirmation(entry)
