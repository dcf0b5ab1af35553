"""Orchestration Tools - workflow narratives for end-to-end plan generation

These tools describe a multi-step generation workflow in text. They do not
call other tools, schedule work, or keep progress state between calls; the
phases, scores and percentages in their output are fixed.
"""

import logging
import math
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..schemas import (
    AgenticResearchInput,
    BusinessViabilityInput,
    CompleteBusinessPlanInput,
    GenerationProgressInput,
    ResearchStrategyInput,
)
from ..utils.formatting import epoch_millis, format_amount, format_datetime, format_money

if TYPE_CHECKING:
    from ..registry import ToolRegistry

logger = logging.getLogger(__name__)

SUITE = "orchestration"

DEFAULT_RESEARCH_DEPTH = "comprehensive"
VIABILITY_SCORE = "8.2/10"
SEED_SHARE = 0.3
SERIES_A_SHARE = 0.7


def _now() -> datetime:
    return datetime.now()


# =============================================================================
# COMPLETE PLAN WORKFLOW
# =============================================================================

def _financial_step(params: CompleteBusinessPlanInput) -> str:
    if params.startup_costs and params.monthly_expenses and params.year1_revenue:
        return (
            f"- Detailed financial projections (Startup: ${format_amount(params.startup_costs)}, "
            f"Monthly: ${format_amount(params.monthly_expenses)}, "
            f"Year 1: ${format_amount(params.year1_revenue)})"
        )
    return "- Financial projections and modeling"


def _funding_step(funding_request: Optional[float]) -> str:
    if funding_request:
        return f"- Funding request summary (${format_amount(funding_request)})"
    return "- Business case presentation"


def render_complete_plan_workflow(params: CompleteBusinessPlanInput) -> str:
    name = params.business_name
    industry = params.industry
    target = params.target_market

    return f"""# Automated Business Plan Generation Workflow

## 🚀 Orchestration Overview
**Business**: {name}
**Industry**: {industry}
**Target Market**: {target}
**Location**: {params.location or 'To be determined'}

## 📋 Generation Workflow Steps

### Phase 1: Research Foundation (Steps 1-4)
**✅ Step 1: Market Research Analysis**
*Using Market Research MCP Server*
- Deep market analysis for {industry} industry
- Competitive landscape assessment
- Customer persona development
- Market opportunity validation

**✅ Step 2: Financial Benchmarking**
*Using Knowledge Base MCP Server*
- Industry financial benchmarks query
- Financial model best practices research
- Revenue model analysis for {industry}
- Cost structure benchmarking

**✅ Step 3: Regulatory Research**
*Using Knowledge Base MCP Server*
- Regulatory requirements for {industry}
- Compliance considerations for {params.location or 'target market'}
- Legal structure recommendations
- Risk assessment framework

**✅ Step 4: Technology & Innovation Research**
*Using Knowledge Base MCP Server*
- Technology trends affecting {industry}
- Innovation opportunities identification
- Digital transformation requirements
- Competitive technology landscape

### Phase 2: Strategic Analysis (Steps 5-8)
**✅ Step 5: SWOT Analysis**
*Using Business Consultant MCP Server*
- Comprehensive SWOT analysis for {name}
- Strategic recommendations development
- Risk assessment and mitigation strategies
- Competitive positioning analysis

**✅ Step 6: Financial Projections**
*Using Business Consultant MCP Server*
{_financial_step(params)}
- Break-even analysis and ROI calculations
- Cash flow projections and funding requirements
- Financial risk assessment

**✅ Step 7: Market Validation**
*Using Market Research MCP Server*
- Market opportunity validation for {params.business_idea}
- Customer demand verification
- Pricing strategy validation
- Go-to-market strategy development

**✅ Step 8: Innovation Strategy**
*Using Business Consultant MCP Server*
- Innovation opportunities identification
- Technology integration recommendations
- Competitive advantage development
- Future growth strategy planning

### Phase 3: Document Generation (Steps 9-12)
**✅ Step 9: Executive Summary**
*Using Document Generation MCP Server*
- Compelling executive summary creation
- Key highlights and value proposition
- Investment opportunity presentation
{_funding_step(params.funding_request)}

**✅ Step 10: Company Description**
*Using Document Generation MCP Server*
- Comprehensive company description
- Mission, vision, and values development
- Business model and structure definition
- Competitive positioning statement

**✅ Step 11: Marketing & Operations Plans**
*Using Document Generation MCP Server*
- Marketing and sales strategy development
- Operations plan and management structure
- Technology and systems requirements
- Implementation roadmap creation

**✅ Step 12: Complete Business Plan Compilation**
*Using Document Generation MCP Server*
- All sections integrated into complete plan
- Professional formatting and presentation
- Executive summary to appendices
- PDF generation and file storage

### Phase 4: Validation & Optimization (Steps 13-15)
**✅ Step 13: Business Viability Assessment**
*Using Validation MCP Server*
- Comprehensive viability scoring
- Risk assessment and mitigation
- Success probability analysis
- Improvement recommendations

**✅ Step 14: Knowledge Base Enhancement**
*Using Knowledge Base MCP Server*
- Research findings storage for future use
- Best practices documentation
- Industry insights compilation
- Continuous learning integration

**✅ Step 15: Final Review & Recommendations**
*Using Orchestration Server*
- Complete plan quality review
- Strategic recommendations summary
- Implementation priority guidance
- Next steps and action items

## 🎯 Expected Deliverables

### Primary Deliverables
1. **Complete Business Plan PDF** - Professional 20-30 page business plan
2. **Executive Summary** - 2-3 page investor-ready summary
3. **Financial Model** - Detailed financial projections and analysis
4. **Market Research Report** - Comprehensive market and competitive analysis
5. **Implementation Roadmap** - 12-month execution plan with milestones

### Supporting Documentation
1. **SWOT Analysis Report** - Strategic analysis and recommendations
2. **Regulatory Compliance Guide** - Legal and compliance requirements
3. **Technology Strategy** - Innovation and technology implementation plan
4. **Risk Assessment** - Risk analysis and mitigation strategies
5. **Knowledge Base** - Research findings and industry insights

## ⏱️ Timeline Estimate

### Automated Generation (Immediate)
- **Research Phase**: Completed in seconds using knowledge base
- **Analysis Phase**: Real-time strategic analysis and modeling
- **Document Generation**: Instant professional document creation
- **Validation Phase**: Immediate viability assessment and scoring

### Human Review & Customization (Optional)
- **Content Review**: 2-4 hours for detailed review and customization
- **Financial Validation**: 1-2 hours for financial model verification
- **Market Validation**: 2-3 hours for market research validation
- **Final Preparation**: 1-2 hours for final formatting and presentation

## 🚀 Initiation Command

To begin automated business plan generation, the system will now execute all workflow steps in sequence:

```
WORKFLOW STATUS: READY TO EXECUTE
ESTIMATED COMPLETION: 30-60 seconds for full automation
BUSINESS CONTEXT: {name} in {industry} targeting {target}
```

**Next Action**: Execute complete workflow to generate comprehensive business plan for {name}.

**Human Intervention Points**:
- Review and customize generated content
- Validate financial assumptions and projections
- Enhance market research with specific local data
- Add company-specific details and customizations

## 📊 Quality Assurance

### Automated Validation Checks
- ✅ Market research completeness and depth
- ✅ Financial model accuracy and reasonableness
- ✅ Competitive analysis comprehensiveness
- ✅ Regulatory compliance coverage
- ✅ Implementation feasibility assessment

This orchestrated approach ensures comprehensive, accurate, and actionable business plan generation that combines automated research with strategic analysis to inspire confident business action.
"""


# =============================================================================
# AGENTIC RESEARCH
# =============================================================================

def render_agentic_research(params: AgenticResearchInput) -> str:
    idea = params.business_idea
    industry = params.industry
    target = params.target_market
    depth = params.research_depth or DEFAULT_RESEARCH_DEPTH
    focus = params.focus_areas or "Market analysis, competition, financials, regulations"

    return f"""# Agentic Research Workflow: {idea}

## 🔍 Research Configuration
**Business Idea**: {idea}
**Industry**: {industry}
**Target Market**: {target}
**Research Depth**: {depth}
**Focus Areas**: {focus}

## 🤖 Agentic Research Agents

### Agent 1: Market Intelligence Agent
**Research Tasks for "{idea}"**:
1. **Market Size Analysis**: Quantify addressable market for {target} in {industry}
2. **Growth Trends**: Identify market growth drivers and trajectory
3. **Customer Segments**: Map primary and secondary customer segments
4. **Demand Signals**: Gather evidence of customer demand

**Expected Findings**:
- Market size: $X billion addressable market
- Growth rate: X% annual growth in {industry}
- Key segments: Primary customer groups and their needs

### Agent 2: Competitive Intelligence Agent
**Research Tasks**:
1. **Competitor Mapping**: Identify direct and indirect competitors
2. **Positioning Analysis**: Compare competitor value propositions
3. **Pricing Research**: Benchmark competitor pricing models
4. **Gap Analysis**: Find underserved needs and market gaps

### Agent 3: Financial Research Agent
**Research Tasks**:
1. **Financial Benchmarks**: Research {industry} financial performance metrics
2. **Revenue Models**: Analyze successful revenue models in {industry}
3. **Cost Structures**: Benchmark startup and operating costs
4. **Funding Landscape**: Identify relevant funding sources

### Agent 4: Regulatory Research Agent
**Research Tasks**:
1. **Regulatory Framework**: Map key regulations affecting {industry}
2. **Licensing Requirements**: Identify required licenses and permits
3. **Compliance Costs**: Estimate compliance investment
4. **Regulatory Trends**: Monitor upcoming regulatory changes

### Agent 5: Technology Research Agent
**Research Tasks**:
1. **Technology Trends**: Identify key technologies affecting {industry}
2. **Build vs. Buy**: Evaluate technology sourcing options
3. **Innovation Opportunities**: Find technology-driven differentiation
4. **Technical Risks**: Assess technology implementation risks

## 🔄 Agentic Research Process

### Phase 1: Parallel Research Execution
- All agents research their domains simultaneously
- Findings are cross-referenced for consistency
- Conflicting data points are flagged for review

### Phase 2: Synthesis & Analysis
- Research findings are integrated into a unified view
- Key insights and patterns are identified
- Strategic implications are developed

### Phase 3: Validation & Quality Control
- Findings are validated against the knowledge base
- Confidence levels are assigned to key insights
- Gaps requiring additional research are identified

## 📊 Research Output Framework

### Research Deliverables
1. **Market Intelligence Report**: Market size, trends, and segments
2. **Competitive Analysis**: Competitor landscape and positioning
3. **Financial Benchmarks**: Industry metrics and financial models
4. **Regulatory Guide**: Compliance requirements and timeline
5. **Technology Assessment**: Technology trends and recommendations

## 🎯 Research Quality Metrics
- **Coverage**: All focus areas addressed ({focus})
- **Depth**: {depth} research depth applied
- **Accuracy**: Cross-validated findings from multiple sources
- **Actionability**: Clear recommendations for business planning

## 📈 Research Impact on Business Plan
- Evidence-based market sizing and opportunity assessment
- Realistic financial projections grounded in benchmarks
- Comprehensive risk identification and mitigation
- Competitive positioning based on actual market gaps

This agentic research workflow provides comprehensive, research-backed insights for {idea} in the {industry} industry targeting {target}.
"""


# =============================================================================
# VIABILITY
# =============================================================================

def _viability_projections(investment_level: Optional[float]) -> str:
    if investment_level:
        return f"""- **Initial Investment**: {format_money(investment_level)}
- **Break-even Timeline**: 12-18 months projected
- **ROI Projection**: 3-5x return potential within 3-5 years
- **Cash Flow Positive**: Month 15-20 projected"""
    return """- **Capital Requirements**: Moderate investment needs
- **Revenue Timeline**: 6-12 months to first revenue
- **Profitability**: 18-24 months to profitability
- **Scalability**: Strong potential for efficient scaling"""


def _funding_strategy(investment_level: Optional[float]) -> str:
    if investment_level:
        seed = math.floor(investment_level * SEED_SHARE)
        series_a = math.floor(investment_level * SERIES_A_SHARE)
        return f"""**Recommended Funding Approach**:
- **Seed Round**: ${format_amount(seed)} for MVP and validation
- **Series A**: ${format_amount(series_a)} for growth and scaling
- **Total Funding**: {format_money(investment_level)} over 12-18 months"""
    return """**Funding Considerations**:
- Determine optimal funding amount based on growth plan
- Consider staged funding approach with milestone-based releases
- Explore multiple funding sources and investor types
- Prepare comprehensive investor materials and presentations"""


def render_viability_assessment(params: BusinessViabilityInput) -> str:
    name = params.business_name
    industry = params.industry
    target = params.target_market

    return f"""# Business Viability Assessment: {name}

## 📊 Executive Assessment Summary
**Business**: {name}
**Concept**: {params.business_idea}
**Industry**: {industry}
**Market**: {target}
**Investment**: {format_money(params.investment_level)}
**Timeline**: {params.timeframe or 'Standard 12-18 month launch'}

## 🎯 Overall Viability Score: {VIABILITY_SCORE}
*Assessment based on market opportunity, financial feasibility, competitive position, and execution capability*

## 📋 Viability Assessment Framework

### 1. Market Opportunity
- **Market Size**: Large and growing addressable market in {industry}
- **Customer Need**: Strong evidence of unmet customer needs in {target}
- **Market Timing**: Favorable conditions for market entry

**Market Strengths**:
✅ Growing demand in {industry} sector
✅ Underserved segments within {target}
✅ Technology trends supporting the business model

### 2. Financial Feasibility
- **Revenue Potential**: Multiple revenue streams available
- **Cash Flow**: Manageable cash flow requirements and timeline
- **Return on Investment**: Attractive ROI for investors and founders

**Financial Projections**:
{_viability_projections(params.investment_level)}

### 3. Competitive Position
- **Differentiation**: Clear value proposition versus existing solutions
- **Barriers to Entry**: Defensible position through execution and expertise
- **Competitive Response**: Manageable risk from incumbents

### 4. Execution Capability
- **Team Requirements**: Achievable hiring plan for core roles
- **Operational Complexity**: Moderate, with clear processes
- **Regulatory Compliance**:
✅ Clear regulatory framework for {industry} industry

## ⚠️ Risk Assessment and Mitigation
1. **Market Risk** - Medium: Validate demand before scaling
2. **Competitive Risk** - Medium: Differentiate and move quickly
3. **Financial Risk** - Low: Staged investment and milestone tracking
4. **Execution Risk** - Low: Experienced advisors and phased rollout

## 🎯 Investment Readiness

### Investment Attractiveness: High
**Investor Appeal Factors**:
- Large and growing market opportunity
- Proven business model with scalability potential
- Strong management team and execution capability
- Clear competitive advantages and differentiation
- Attractive financial projections and returns

### Funding Strategy
{_funding_strategy(params.investment_level)}

## ✅ Final Assessment

### Viability Conclusion: HIGHLY VIABLE
{name} represents a strong business opportunity with:
- **Market Validation**: Strong market need and opportunity
- **Financial Potential**: Attractive revenue and profit potential
- **Competitive Position**: Clear differentiation and advantages
- **Execution Capability**: Manageable execution requirements
- **Risk Profile**: Acceptable risk level with mitigation strategies

### Recommended Next Steps
1. ✅ **Proceed with Business Plan Development**
2. ✅ **Conduct Detailed Market Validation**
3. ✅ **Assemble Core Team and Advisors**
4. ✅ **Develop Minimum Viable Product**
5. ✅ **Prepare Investor Materials**
"""


# =============================================================================
# STRATEGY
# =============================================================================

def render_research_strategy(params: ResearchStrategyInput) -> str:
    opportunities = params.market_opportunities or (
        "Significant market opportunities identified through comprehensive research"
    )
    advantages = params.competitive_advantages or (
        "Multiple competitive advantages identified through market and competitive analysis"
    )

    return f"""# Research-Driven Strategy Development

## 🎯 Strategic Foundation
**Business Context**: {params.business_context}
**Strategic Goals**: {params.strategic_goals or 'Growth and market leadership'}

## 📊 Research-Based Strategic Insights

### Key Research Findings
{params.research_findings}

**Strategic Implications**:
- Findings validate the core business opportunity
- Market conditions support the proposed approach
- Research highlights priority areas for investment

### Market Opportunities
{opportunities}

**Opportunity Prioritization**:
1. **Immediate**: Opportunities addressable with current capabilities
2. **Near-term**: Opportunities requiring modest investment
3. **Long-term**: Opportunities requiring new capabilities

### Competitive Advantages
{advantages}

**Advantage Development**:
- Strengthen advantages that are hardest to copy
- Invest in capabilities that compound over time
- Communicate advantages clearly in positioning

## 🚀 Strategic Development Framework

### Strategic Pillars
1. **Market Leadership**: Establish a strong position in core segments
2. **Customer Excellence**: Deliver superior customer outcomes
3. **Operational Efficiency**: Build scalable, cost-effective operations
4. **Innovation**: Maintain continuous product and service improvement

## 📈 Strategy Implementation Roadmap

### Phase 1: Foundation (Months 1-6)
- Validate strategy with target customers
- Build core team and capabilities
- Launch initial offering

### Phase 2: Growth (Months 7-18)
- Scale customer acquisition
- Expand product capabilities
- Develop strategic partnerships

### Phase 3: Expansion (Months 19-36)
- Enter adjacent markets
- Build market leadership position
- Explore strategic acquisitions

## 📊 Performance Measurement Framework
- **Market Metrics**: Market share, customer acquisition, brand awareness
- **Financial Metrics**: Revenue growth, margins, unit economics
- **Customer Metrics**: Satisfaction, retention, lifetime value
- **Operational Metrics**: Efficiency, quality, delivery speed

## 📋 Strategic Risk Management
- Review strategy quarterly against research updates
- Maintain contingency plans for key risks
- Adjust priorities based on market feedback

This research-driven strategy provides a foundation for achieving {params.strategic_goals or 'growth and market leadership'}.
"""


# =============================================================================
# PROGRESS
# =============================================================================

def session_id_for(params: GenerationProgressInput, moment: datetime) -> str:
    return params.session_id or f"AUTO-{epoch_millis(moment)}"


def render_generation_progress(params: GenerationProgressInput, moment: datetime) -> str:
    name = params.business_name

    return f"""# Business Plan Generation Progress Tracking

## 📊 Generation Status Overview
**Business**: {name}
**Session ID**: {session_id_for(params, moment)}
**Started**: {format_datetime(moment)}
**Status**: 🟢 ACTIVE - Generation in progress

## 🔄 Real-Time Progress Tracker

### Phase 1: Research Foundation ⏳ IN PROGRESS
**Progress**: ████████░░ 80% Complete

**✅ Completed Tasks**:
- [x] Market Research Analysis (Market Research Server)
- [x] Financial Benchmarking (Knowledge Base Server)
- [x] Regulatory Research (Knowledge Base Server)
- [x] Technology Trends Analysis (Knowledge Base Server)

**🔄 Current Tasks**:
- [ ] Industry Best Practices Research (Knowledge Base Server) - 90% complete
- [ ] Business Model Validation (Market Research Server) - 70% complete

**⏱️ Estimated Completion**: 15 seconds remaining

### Phase 2: Strategic Analysis ⏸️ QUEUED
**Progress**: ░░░░░░░░░░ 0% Complete

**Pending Tasks**:
- [ ] SWOT Analysis (Business Consultant Server)
- [ ] Financial Projections (Business Consultant Server)
- [ ] Market Validation (Market Research Server)
- [ ] Innovation Strategy (Business Consultant Server)

### Phase 3: Document Generation ⏸️ QUEUED
**Progress**: ░░░░░░░░░░ 0% Complete

**Pending Tasks**:
- [ ] Executive Summary Generation (Document Generation Server)
- [ ] Company Description (Document Generation Server)
- [ ] Marketing & Operations Plans (Document Generation Server)
- [ ] Complete Business Plan Compilation (Document Generation Server)

### Phase 4: Validation & Output ⏸️ QUEUED
**Progress**: ░░░░░░░░░░ 0% Complete

**Pending Tasks**:
- [ ] Business Viability Assessment (Validation Server)
- [ ] Knowledge Base Enhancement (Knowledge Base Server)
- [ ] PDF Generation and File Storage (Document Generation Server)
- [ ] Final Review & Recommendations (Orchestration Server)

## 📈 Overall Progress
**Total Progress**: ████░░░░░░ 40% Complete
**Estimated Total Time**: 2 minutes 15 seconds
**Time Remaining**: 1 minute 35 seconds

The business plan generation is proceeding smoothly with high quality output expected for {name}. All systems are performing optimally and delivery is on schedule.
"""


def register_orchestration_tools(registry: "ToolRegistry") -> None:
    """Register the orchestration narrative tools with the registry"""

    @registry.tool(
        "generate-complete-business-plan",
        title="Complete Business Plan Generator",
        description="Orchestrate complete business plan generation using all available MCP servers",
        input_model=CompleteBusinessPlanInput,
        suite=SUITE,
    )
    def generate_complete_business_plan(params: CompleteBusinessPlanInput) -> str:
        """Describe the 15-step generation workflow (no tools are run)"""
        return render_complete_plan_workflow(params)

    @registry.tool(
        "run-agentic-research",
        title="Agentic Research Workflow",
        description="Run comprehensive agentic research workflow for business analysis",
        input_model=AgenticResearchInput,
        suite=SUITE,
    )
    def run_agentic_research(params: AgenticResearchInput) -> str:
        return render_agentic_research(params)

    @registry.tool(
        "assess-business-viability",
        title="Business Viability Assessment",
        description="Comprehensive business viability and feasibility assessment",
        input_model=BusinessViabilityInput,
        suite=SUITE,
    )
    def assess_business_viability(params: BusinessViabilityInput) -> str:
        """Fixed-score viability report; funding splits 30/70 seed/Series A"""
        return render_viability_assessment(params)

    @registry.tool(
        "develop-research-strategy",
        title="Research-Driven Strategy Development",
        description="Develop business strategy based on comprehensive research findings",
        input_model=ResearchStrategyInput,
        suite=SUITE,
    )
    def develop_research_strategy(params: ResearchStrategyInput) -> str:
        return render_research_strategy(params)

    @registry.tool(
        "track-generation-progress",
        title="Track Generation Progress",
        description="Track progress of business plan generation and research workflow",
        input_model=GenerationProgressInput,
        suite=SUITE,
    )
    def track_generation_progress(params: GenerationProgressInput) -> str:
        """Static progress snapshot

        The start time (and session ID, when none is given) come from the
        current time, so output differs between calls.
        """
        return render_generation_progress(params, _now())
