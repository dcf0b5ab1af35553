"""Strategic Analysis Tools - SWOT, PEST, market research, innovation, supply chain

Template generators for the business-consultant suite. Each report is a fixed
list of generic statements with the caller's industry, market and location
interpolated into specific items; missing optionals get fallback wording.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from ..schemas import (
    InnovationInput,
    MarketResearchInput,
    PestAnalysisInput,
    SupplyChainInput,
    SwotAnalysisInput,
)
from ..utils.formatting import bullets

if TYPE_CHECKING:
    from ..registry import ToolRegistry

logger = logging.getLogger(__name__)

SUITE = "business-consultant"


# =============================================================================
# SWOT / PEST FACTOR LISTS
# =============================================================================

WEAKNESSES = (
    "New business with limited market presence",
    "Potential cash flow challenges in early stages",
    "Limited brand recognition initially",
    "Dependence on key personnel",
    "Need to establish supplier/vendor relationships",
)

THREATS = (
    "Established competitors with market share",
    "Economic uncertainty affecting consumer spending",
    "Regulatory changes in industry",
    "Supply chain disruptions",
    "Technology changes requiring adaptation",
    "Market saturation risks",
)

SOCIAL_FACTORS = (
    "Demographic trends affecting target market",
    "Cultural shifts and changing consumer preferences",
    "Lifestyle changes post-pandemic",
    "Social media influence on purchasing decisions",
    "Education levels and awareness in target market",
    "Environmental consciousness and sustainability concerns",
)

TECHNOLOGICAL_FACTORS = (
    "Digital transformation accelerating across industries",
    "Mobile-first consumer behavior",
    "AI and automation opportunities",
    "Cybersecurity requirements and challenges",
    "Cloud computing and remote work technologies",
    "Emerging technologies disrupting traditional models",
)


def _is_digital(business_type: Optional[str]) -> bool:
    # Case-sensitive substring match
    return bool(business_type) and ("digital" in business_type or "online" in business_type)


def swot_strengths(industry: str, business_type: Optional[str] = None,
                   location: Optional[str] = None) -> List[str]:
    return [
        f"Market opportunity in {industry} sector",
        "Focused target market approach",
        "Clear business model and structure",
        "Digital-first approach with scalability potential" if _is_digital(business_type)
        else "Established business model with proven track record",
        f"Strategic location advantage in {location}" if location else "Flexible location strategy",
    ]


def swot_opportunities(industry: str, target_market: Optional[str] = None) -> List[str]:
    return [
        f"Growing demand in {industry} market",
        "Digital transformation trends creating new possibilities",
        "Potential for strategic partnerships",
        f"Underserved segments within {target_market}" if target_market else "Market segmentation opportunities",
        "Technology adoption enabling new service delivery methods",
        "Post-pandemic market shifts creating new opportunities",
    ]


def render_swot(params: SwotAnalysisInput) -> str:
    strengths = swot_strengths(params.industry, params.business_type, params.location)
    opportunities = swot_opportunities(params.industry, params.target_market)

    return f"""# SWOT Analysis for {params.business_name}

## 💪 Strengths
{bullets(strengths)}

## ⚠️ Weaknesses
{bullets(WEAKNESSES)}

## 🚀 Opportunities
{bullets(opportunities)}

## ⚡ Threats
{bullets(THREATS)}

## Strategic Recommendations
1. **Leverage Strengths**: Focus on core competencies and market positioning
2. **Address Weaknesses**: Develop mitigation strategies for identified gaps
3. **Capitalize on Opportunities**: Create action plans for high-potential areas
4. **Monitor Threats**: Establish early warning systems and contingency plans
"""


def render_pest(params: PestAnalysisInput) -> str:
    political = [
        "Government regulations affecting business operations",
        "Tax policies and incentives for small businesses",
        "Trade policies and international relations",
        f"Local government support in {params.location}" if params.location else "Regional political stability",
        "Industry-specific regulatory environment",
        "Data protection and privacy legislation",
    ]
    economic = [
        "Current economic climate and growth trends",
        "Interest rates affecting financing options",
        "Consumer spending patterns and confidence",
        "Inflation impact on costs and pricing",
        f"{params.industry} market growth projections",
        "Employment rates and labor market conditions",
    ]

    return f"""# PEST Analysis for {params.business_name}

## 🏛️ Political Factors
{bullets(political)}

## 💰 Economic Factors
{bullets(economic)}

## 👥 Social Factors
{bullets(SOCIAL_FACTORS)}

## 🔬 Technological Factors
{bullets(TECHNOLOGICAL_FACTORS)}

## Strategic Implications
- **Political**: Monitor regulatory changes and maintain compliance
- **Economic**: Develop flexible pricing and financing strategies
- **Social**: Align product/service offerings with evolving consumer needs
- **Technological**: Invest in technology adoption and digital capabilities
"""


def render_market_research(params: MarketResearchInput) -> str:
    industry = params.industry
    target_market = params.target_market

    return f"""# Market Research Analysis

## 🎯 Market Overview
**Industry**: {industry}
**Target Market**: {target_market}
**Geographic Focus**: {params.location or 'To be determined'}
**Business Type**: {params.business_type or 'Standard business model'}

## 📊 Market Size & Opportunity
- **Total Addressable Market (TAM)**: Research suggests {industry} market continues growing
- **Serviceable Addressable Market (SAM)**: Focus on {target_market} segments
- **Serviceable Obtainable Market (SOM)**: Initial market penetration targets

## 🏢 Competitive Landscape
### Direct Competitors
- Established players with significant market share
- Local/regional competitors with geographic advantages
- New entrants leveraging technology

### Indirect Competitors
- Alternative solutions addressing same customer needs
- Substitute products or services
- DIY or in-house solutions

## 👥 Customer Segmentation
### Primary Segment: {target_market}
- **Demographics**: Target age groups, income levels, education
- **Psychographics**: Values, interests, lifestyle preferences
- **Behavioral**: Purchase patterns, brand loyalty, decision-making process
- **Geographic**: Regional preferences and accessibility

## 🚀 Market Trends
1. **Digital Transformation**: Accelerated adoption across {industry}
2. **Customer Experience**: Increased expectations for personalization
3. **Sustainability**: Growing demand for environmentally conscious options
4. **Mobile-First**: Preference for mobile-accessible solutions
5. **Value-Based**: Focus on ROI and measurable outcomes

## 📈 Growth Opportunities
- **Underserved Segments**: Identify gaps in current market offerings
- **Geographic Expansion**: Potential for location-based growth
- **Product Extensions**: Adjacent markets and cross-selling opportunities
- **Partnership Channels**: Strategic alliances for market access

## ⚠️ Market Risks
- **Market Saturation**: Potential for overcrowding in {industry}
- **Economic Sensitivity**: Customer spending patterns during downturns
- **Technology Disruption**: Emerging solutions changing market dynamics
- **Regulatory Changes**: Compliance requirements affecting operations

## 🎯 Recommended Strategy
1. **Focus** on clearly defined customer segments initially
2. **Differentiate** through unique value proposition
3. **Monitor** competitor activities and market changes
4. **Invest** in customer acquisition and retention
5. **Scale** gradually based on market feedback and performance
"""


def render_innovations(params: InnovationInput) -> str:
    return f"""# Innovation Opportunities & Competitive Advantages

## 🚀 Technology Integration Opportunities
### Digital Innovation
- **AI/ML Integration**: Automate processes and enhance customer experience
- **Mobile Apps**: Create customer-facing mobile applications
- **IoT Solutions**: Connect physical products with digital experiences
- **Cloud-Based Services**: Offer scalable, accessible solutions

### Data Analytics
- **Customer Intelligence**: Leverage data for personalized experiences
- **Predictive Analytics**: Anticipate market trends and customer needs
- **Performance Optimization**: Use data to improve operational efficiency
- **Real-time Insights**: Provide immediate feedback and adjustments

## 💡 Business Model Innovation
### Service Delivery
- **Subscription Models**: Create recurring revenue streams
- **Platform Approach**: Connect multiple stakeholders in {params.industry}
- **Freemium Strategy**: Attract users with free tier, monetize premium features
- **Marketplace Model**: Facilitate transactions between parties

### Customer Experience
- **Self-Service Options**: Empower customers with autonomy
- **24/7 Availability**: Offer round-the-clock service access
- **Personalization**: Tailor experiences to individual preferences
- **Community Building**: Create user communities around your brand

## 🌱 Sustainability & Social Innovation
### Environmental Impact
- **Green Technology**: Implement eco-friendly solutions
- **Circular Economy**: Design for reuse, recycling, and sustainability
- **Carbon Neutral**: Offset environmental impact of operations
- **Sustainable Supply Chain**: Partner with environmentally responsible vendors

### Social Responsibility
- **Community Impact**: Create positive local community effects
- **Inclusive Design**: Ensure accessibility for diverse user groups
- **Fair Trade**: Support ethical business practices
- **Social Enterprise**: Integrate social mission with business goals

## 🎯 Implementation Roadmap
1. **Assess Current State**: Evaluate existing capabilities and gaps
2. **Prioritize Opportunities**: Focus on high-impact, feasible innovations
3. **Pilot Testing**: Start with small-scale experiments
4. **Resource Allocation**: Dedicate budget and team to innovation
5. **Continuous Improvement**: Iterate based on market feedback
"""


def render_supply_chain(params: SupplyChainInput) -> str:
    return f"""# Supply Chain Analysis & Optimization

## 🔗 Supply Chain Overview
**Industry**: {params.industry}
**Business Type**: {params.business_type}
**Location**: {params.location or 'Multiple locations'}
**Product/Service Type**: {params.product_type or 'Standard offerings'}

## 📦 Supply Chain Components

### Suppliers & Sourcing
- **Raw Materials**: Key material suppliers and alternatives
- **Components**: Critical component providers
- **Services**: Essential service providers (logistics, IT, professional)

### Manufacturing & Production
- **Production Capacity**: Existing production capabilities
- **Scalability**: Ability to increase/decrease production
- **Quality Control**: Processes for maintaining quality standards
- **Efficiency Metrics**: OEE, throughput, waste reduction

### Distribution & Logistics
- **Warehousing**: Inventory management and space needs
- **Transportation**: Delivery optimization and last-mile solutions
- **Technology Systems**: WMS, inventory tracking, automation

## ⚠️ Risk Assessment
- **Supplier Reliability**: Financial stability and performance history
- **Geographic Concentration**: Risks from single-location dependencies
- **Quality Issues**: Impact of supplier quality problems
- **Capacity Constraints**: Supplier ability to meet demand fluctuations

## 🛠️ Optimization Opportunities
- **Cost Reduction**: Supplier negotiation and process efficiency
- **Service Improvement**: Delivery speed and reliability
- **Sustainability**: Environmental impact and social responsibility
- **Technology Investment**: Automation and digital transformation

## 🎯 Strategic Recommendations
1. **Supplier Assessment**: Evaluate current supplier performance
2. **Risk Mapping**: Identify critical vulnerabilities
3. **Cost Analysis**: Detailed cost breakdown and opportunities
4. **Technology Audit**: Current systems and upgrade needs
"""


def register_analysis_tools(registry: "ToolRegistry") -> None:
    """Register the strategic analysis tools with the registry"""

    @registry.tool(
        "perform-swot-analysis",
        title="SWOT Analysis Generator",
        description="Generate comprehensive SWOT (Strengths, Weaknesses, Opportunities, Threats) analysis for a business",
        input_model=SwotAnalysisInput,
        suite=SUITE,
    )
    def perform_swot_analysis(params: SwotAnalysisInput) -> str:
        """SWOT report; strengths and opportunities reflect the optional inputs

        Examples:
            registry.invoke("perform-swot-analysis", {"businessName": "Acme", "industry": "retail"})
        """
        return render_swot(params)

    @registry.tool(
        "perform-pest-analysis",
        title="PEST Analysis Generator",
        description="Generate PEST (Political, Economic, Social, Technological) analysis for strategic planning",
        input_model=PestAnalysisInput,
        suite=SUITE,
    )
    def perform_pest_analysis(params: PestAnalysisInput) -> str:
        return render_pest(params)

    @registry.tool(
        "generate-market-research",
        title="Market Research Generator",
        description="Generate comprehensive market research insights and recommendations",
        input_model=MarketResearchInput,
        suite=SUITE,
    )
    def generate_market_research(params: MarketResearchInput) -> str:
        return render_market_research(params)

    @registry.tool(
        "suggest-innovations",
        title="Innovation Opportunities Finder",
        description="Identify innovation opportunities and competitive advantages for the business",
        input_model=InnovationInput,
        suite=SUITE,
    )
    def suggest_innovations(params: InnovationInput) -> str:
        return render_innovations(params)

    @registry.tool(
        "analyze-supply-chain",
        title="Supply Chain Analysis",
        description="Analyze and optimize supply chain operations and identify potential risks",
        input_model=SupplyChainInput,
        suite=SUITE,
    )
    def analyze_supply_chain(params: SupplyChainInput) -> str:
        return render_supply_chain(params)
