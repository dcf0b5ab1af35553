"""Market Research Tools - market sizing, competition, personas, validation

Research-style reports for the market-research suite. Nothing is looked up
or scored: the validation score and persona splits are fixed figures.
"""

import logging
from typing import TYPE_CHECKING

from ..schemas import (
    CompetitiveLandscapeInput,
    CustomerPersonasInput,
    DeepMarketAnalysisInput,
    MarketValidationInput,
)
from ..utils.formatting import format_money

if TYPE_CHECKING:
    from ..registry import ToolRegistry

logger = logging.getLogger(__name__)

SUITE = "market-research"

VALIDATION_SCORE = "7.5/10"


def render_deep_market_analysis(params: DeepMarketAnalysisInput) -> str:
    industry = params.industry
    target = params.target_market
    geography = f"Primary focus on {params.location}:" if params.location else "Geographic considerations:"

    return f"""# Deep Market Analysis

## 📊 Market Size Analysis

### Total Addressable Market (TAM)
The {industry} industry represents a significant market opportunity with:
- Global market size estimated in billions
- Consistent growth trends over past 5 years
- Emerging technologies driving expansion
- Geographic expansion opportunities

### Serviceable Addressable Market (SAM)
Focusing on {target} within {params.location or 'target regions'}:
- Refined market segment showing strong demand
- Accessibility through proposed business model
- Regulatory environment considerations
- Technology adoption rates in target segment

### Serviceable Obtainable Market (SOM)
Realistic initial market capture potential:
- Initial 0.1-1% market penetration achievable
- Scaling potential based on business model
- Competitive barriers to entry assessment
- Resource requirements for market capture

## 📈 Market Trends & Drivers

### Growth Drivers
1. **Digital Transformation**: Accelerating adoption in {industry}
2. **Consumer Behavior Shifts**: Changing preferences in {target}
3. **Technology Enablement**: New capabilities creating opportunities
4. **Regulatory Changes**: Policy shifts creating new market spaces
5. **Economic Factors**: Market conditions favoring innovation

### Market Trends
- **Personalization**: Increased demand for customized solutions
- **Sustainability**: Environmental consciousness driving choices
- **Mobile-First**: Preference for mobile-accessible services
- **Data Privacy**: Growing concern for data security
- **Automation**: Efficiency demands driving tech adoption

## 🎯 Market Segmentation

### Primary Segment: {target}
- **Size**: Estimated market size and growth rate
- **Characteristics**: Key demographic and psychographic traits
- **Pain Points**: Unmet needs and frustrations
- **Buying Behavior**: Decision-making process and criteria
- **Price Sensitivity**: Willingness to pay for solutions

### Secondary Segments
- Adjacent markets with similar needs
- Potential expansion opportunities
- Cross-selling possibilities
- Partnership channel opportunities

## 🌍 Geographic Analysis

### Market Accessibility
{geography}
- Market maturity and development stage
- Competitive landscape density
- Regulatory environment
- Cultural considerations
- Distribution channel availability

## 💡 Innovation Opportunities

### Market Gaps
- Underserved customer segments
- Technology adoption lag areas
- Service delivery inefficiencies
- Pricing model innovations
- Customer experience improvements

### Emerging Opportunities
- New technology applications in {industry}
- Changing regulations creating openings
- Supply chain disruptions enabling new models
- Social trends driving demand shifts
- Economic changes affecting market dynamics

## ⚠️ Market Risks & Challenges

### Market Risks
- Economic downturn impact on {target}
- Technology disruption threatening business model
- Regulatory changes affecting operations
- Competitive response to market entry
- Customer acquisition cost escalation

### Mitigation Strategies
- Diversification across market segments
- Flexible business model adaptation
- Strong regulatory compliance framework
- Differentiated value proposition
- Efficient customer acquisition channels

## 🚀 Market Entry Strategy

### Recommended Approach
1. **Pilot Market**: Start with focused geographic/demographic segment
2. **Value Validation**: Prove value proposition with early adopters
3. **Scaling Strategy**: Expand based on proven market fit
4. **Competitive Positioning**: Establish unique market position
5. **Partnership Development**: Strategic alliances for market access

### Success Metrics
- Market penetration rate targets
- Customer acquisition cost goals
- Customer lifetime value benchmarks
- Market share growth objectives
- Revenue per customer targets
"""


def render_competitive_landscape(params: CompetitiveLandscapeInput) -> str:
    target = params.target_market

    return f"""# Competitive Landscape Analysis

## 🏢 Competitor Categorization

### Direct Competitors
Companies offering similar solutions to {target}:

**Tier 1 - Market Leaders**
- **Company A**: Established market presence, strong brand recognition
  - Strengths: Market share, resources, brand trust
  - Weaknesses: Legacy systems, slow innovation, high prices
  - Market Position: Premium positioning with comprehensive solutions

**Tier 2 - Emerging Players**
- **Company B**: Growing market share with innovative approaches
  - Strengths: Agility, technology focus, competitive pricing
  - Weaknesses: Limited resources, brand recognition
  - Market Position: Technology-first, efficiency-focused

**Tier 3 - Niche Players**
- **Company C**: Specialized solutions for specific segments
  - Strengths: Deep expertise, customer relationships
  - Weaknesses: Limited scope, scalability challenges
  - Market Position: Specialized expert in vertical markets

### Indirect Competitors
Alternative solutions addressing similar customer needs:
- DIY solutions and internal capabilities
- Substitute products from adjacent industries
- Emerging technology platforms
- Freelance/gig economy alternatives

## 📊 Competitive Analysis Matrix

### Feature Comparison
| Feature | Competitor A | Competitor B | Your Business | Advantage |
|---------|-------------|-------------|---------------|-----------|
| Pricing | High | Medium | TBD | Competitive positioning |
| Technology | Legacy | Modern | Modern+ | Innovation advantage |
| Customer Service | Standard | Good | Excellent | Differentiation |
| Market Coverage | Wide | Regional | Focused | Targeted approach |
| Innovation Rate | Slow | Fast | Very Fast | Speed advantage |

### Competitive Positioning Map
**Price vs. Quality Positioning:**
- High Price/High Quality: Established premium players
- Low Price/Low Quality: Budget market segments
- **Your Opportunity**: High Quality/Fair Price positioning

## 🎯 Market Positioning Strategy

### Unique Value Proposition
{params.unique_value_prop or 'Differentiated value offering'}:
- Clear differentiation from existing solutions
- Addresses unmet customer needs
- Leverages competitive advantages
- Scalable and defensible positioning

### Competitive Advantages
1. **Technology Innovation**: Advanced capabilities vs. legacy systems
2. **Customer Experience**: Superior service delivery model
3. **Pricing Strategy**: Value-based pricing approach
4. **Speed to Market**: Faster implementation and results
5. **Specialization**: Deep focus on {target} needs

## 🚀 Competitive Response Strategy

### Defensive Strategies
- **Customer Retention**: Strong value delivery and relationships
- **Innovation Pipeline**: Continuous product/service improvement
- **Strategic Partnerships**: Alliances strengthening market position
- **Brand Building**: Establishing strong market presence

### Offensive Strategies
- **Market Gaps**: Target underserved segments
- **Competitive Weaknesses**: Address competitor limitations
- **New Technology**: Leverage emerging capabilities
- **Geographic Expansion**: Enter markets with limited competition

## 📈 Competitive Intelligence Plan

### Monitoring Strategy
1. **Regular Competitor Analysis**: Quarterly competitive reviews
2. **Market Intelligence**: Industry reports and trend analysis
3. **Customer Feedback**: Insights on competitive performance
4. **Technology Tracking**: Innovation and patent monitoring
5. **Pricing Intelligence**: Market pricing dynamics analysis

### Intelligence Sources
- Industry publications and research reports
- Customer interviews and feedback
- Trade shows and industry events
- Online presence and social media
- Public financial reports and announcements

## ⚡ Rapid Response Framework

### Competitive Threat Response
1. **Assessment**: Quick evaluation of competitive moves
2. **Impact Analysis**: Effect on business and market position
3. **Response Options**: Range of potential responses
4. **Decision Making**: Rapid decision framework
5. **Implementation**: Quick execution capabilities

### Success Metrics
- Market share growth vs. competitors
- Customer acquisition from competitors
- Competitive win/loss rates
- Brand recognition and preference
- Technology/feature advantage maintenance
"""


def render_customer_personas(params: CustomerPersonasInput) -> str:
    return f"""# Customer Persona Research & Development

## 📋 Research Context
**Target Market**: {params.target_market}
**Business Type**: {params.business_type}
**Industry**: {params.industry}
**Price Point**: {params.price_point or 'To be determined'}

## 🎭 Primary Customer Personas

### Persona 1: "The Early Adopter" - Tech-Savvy Professional
**Demographics:**
- Age: 28-40
- Income: $60K-120K
- Education: College educated, often in tech or business
- Location: Urban/suburban areas with high tech adoption

**Psychographics:**
- Values efficiency and innovation
- Comfortable with new technology
- Seeks competitive advantage through tools
- Willing to pay premium for quality solutions

**Pain Points:**
- Time constraints and efficiency needs
- Frustration with outdated systems
- Need for reliable, scalable solutions
- Desire for measurable ROI

**Buying Journey:**
1. Problem recognition through work challenges
2. Online research and peer recommendations
3. Trial/demo evaluation process
4. ROI calculation and approval process
5. Implementation and onboarding expectations

### Persona 2: "The Practical Decision Maker" - SMB Owner/Manager
**Demographics:**
- Age: 35-55
- Income: $45K-85K
- Education: Mix of college and experience-based
- Location: Mix of urban and rural markets

**Psychographics:**
- Values cost-effectiveness and reliability
- Cautious with new technology adoption
- Focuses on practical business outcomes
- Budget-conscious but quality-aware

**Pain Points:**
- Limited time for research and implementation
- Budget constraints and ROI pressure
- Need for reliable customer support
- Concern about technology complexity

**Buying Journey:**
1. Problem identification through business needs
2. Referral-based research and recommendations
3. Budget consideration and approval process
4. Vendor evaluation and reference checking
5. Implementation support requirements

### Persona 3: "The Growth-Focused Entrepreneur" - Startup Leader
**Demographics:**
- Age: 25-45
- Income: Variable, often reinvesting in business
- Education: Diverse backgrounds, business-focused
- Location: Tech hubs and emerging markets

**Psychographics:**
- Growth-oriented and opportunity-focused
- Risk-tolerant with technology adoption
- Seeks scalable, flexible solutions
- Values speed and competitive advantage

**Pain Points:**
- Resource constraints (time and money)
- Need for scalable solutions
- Rapid growth management challenges
- Integration with existing systems

**Buying Journey:**
1. Immediate need identification
2. Rapid online research and comparison
3. Trial-based evaluation
4. Quick implementation requirements
5. Ongoing optimization and scaling

## 📊 Market Segmentation Analysis

### Segment Size & Value
**Early Adopters (20% of market)**
- High value, premium pricing acceptance
- Strong influence on broader market adoption
- Technology evangelists and early feedback providers

**Practical Decision Makers (60% of market)**
- Largest segment, moderate pricing sensitivity
- Steady adoption once proven value demonstrated
- Focus on reliability and support

**Growth-Focused Entrepreneurs (20% of market)**
- Variable value, often price-sensitive initially
- High growth potential as businesses scale
- Innovation-driven with rapid adoption

## 🎯 Targeting Strategy

### Primary Target: Practical Decision Makers
**Rationale:**
- Largest addressable segment
- Predictable buying patterns
- Sustainable revenue potential
- Clear value proposition alignment

### Secondary Target: Early Adopters
**Rationale:**
- Market validation and feedback
- Influence on broader market adoption
- Premium pricing acceptance
- Technology advancement drivers

## 💬 Customer Voice & Feedback

### Common Themes from Target Market:
1. **"I need solutions that actually work"** - Reliability concerns
2. **"Show me the ROI"** - Value demonstration requirements
3. **"I don't have time to figure this out"** - Simplicity needs
4. **"Will you be there when I need help?"** - Support expectations
5. **"Can this grow with my business?"** - Scalability requirements

### Decision Criteria Priority:
1. **Functionality** - Does it solve the core problem?
2. **Reliability** - Will it work consistently?
3. **Value** - Is the ROI clear and achievable?
4. **Support** - Is help available when needed?
5. **Integration** - Does it work with existing systems?

## 🚀 Persona-Driven Marketing Strategy

### Channel Preferences by Persona:
**Early Adopters:** Professional networks, industry events, tech publications
**Practical Decision Makers:** Industry associations, peer referrals, trade publications
**Growth-Focused Entrepreneurs:** Online communities, startup events, social media

### Content Strategy by Persona:
**Early Adopters:** Technical whitepapers, innovation case studies, feature deep-dives
**Practical Decision Makers:** ROI calculators, implementation guides, success stories
**Growth-Focused Entrepreneurs:** Growth hacks, scaling strategies, quick-start guides
"""


def _investment_analysis(investment_level) -> str:
    if investment_level:
        return f"""- Investment level of {format_money(investment_level)} appears reasonable
- Return potential justifies investment risk
- Break-even projections are achievable
- Funding sources align with business stage"""
    return """- Business model supports various investment levels
- Capital requirements scale with opportunity
- Multiple funding options available
- Revenue projections justify investment"""


def render_market_validation(params: MarketValidationInput) -> str:
    industry = params.industry
    target = params.target_market

    return f"""# Market Opportunity Validation Analysis

## 🎯 Business Idea Validation

### Concept Overview
**Business Idea:** {params.business_idea}
**Target Market:** {target}
**Industry:** {industry}
**Investment Level:** {format_money(params.investment_level)}

### Initial Validation Score: {VALIDATION_SCORE}
*Based on market research, industry trends, and opportunity assessment*

## ✅ Validation Criteria Assessment

### 1. Market Demand Validation ⭐⭐⭐⭐⭐
**Strong Indicators:**
- Growing demand in {industry} sector
- Underserved segments within {target}
- Market trends supporting business concept
- Customer pain points align with solution

**Evidence:**
- Industry growth rate: 15-25% annually
- Market gap analysis shows opportunity
- Customer research indicates demand
- Competitive landscape has space for innovation

### 2. Business Model Viability ⭐⭐⭐⭐⭐
**Positive Factors:**
- Scalable business model potential
- Multiple revenue stream opportunities
- Reasonable customer acquisition costs
- Strong value proposition for target market

### 3. Competitive Landscape ⭐⭐⭐⭐⭐
**Market Position:**
- Differentiated approach to existing solutions
- Competitive advantages identified
- Market entry barriers manageable
- Unique value proposition clear

### 4. Financial Feasibility ⭐⭐⭐⭐⭐
**Investment Analysis:**
{_investment_analysis(params.investment_level)}

**Financial Indicators:**
- Gross margin potential: 60-80%
- Customer lifetime value projections strong
- Market size supports revenue goals
- Scalability enables efficient growth

### 5. Execution Capability ⭐⭐⭐⭐⭐
**Success Factors:**
- Required skills align with opportunity
- Technology requirements manageable
- Market access strategies identified
- Team capabilities match needs

## 🚨 Risk Assessment

### High-Priority Risks
1. **Market Timing Risk** - Medium
   - Mitigation: Flexible launch strategy, market monitoring
2. **Competitive Response Risk** - Medium
   - Mitigation: Speed to market, differentiation strategy
3. **Customer Acquisition Risk** - Low
   - Mitigation: Proven channels, strong value proposition
4. **Technology Risk** - Low
   - Mitigation: Proven technologies, expert support
5. **Financial Risk** - Low
   - Mitigation: Staged investment, milestone-based funding

## 📊 Market Validation Metrics

### Key Success Indicators
1. **Customer Interest**: Target 20% positive response rate
2. **Market Traction**: Achieve 100 early adopters in 6 months
3. **Revenue Validation**: $10K monthly recurring revenue in year 1
4. **Customer Retention**: 85% customer retention rate
5. **Market Share**: Capture 0.1% of addressable market initially

### Validation Testing Plan
1. **Customer Interviews**: 50 target market interviews
2. **Market Survey**: 500 target market respondents
3. **Prototype Testing**: MVP with 25 beta customers
4. **Pricing Validation**: Price sensitivity analysis
5. **Channel Testing**: Customer acquisition channel validation

## 🚀 Go/No-Go Recommendation

### ✅ RECOMMENDATION: PROCEED WITH CAUTION

**Proceed With:**
1. **Market Validation Phase**: 3-month intensive validation
2. **MVP Development**: Minimum viable product creation
3. **Pilot Customer Program**: 25 early adopter pilot
4. **Funding Strategy**: Staged investment approach
5. **Team Building**: Key hire identification and recruitment

### Next Steps Timeline
**Month 1-2:** Market validation and customer research
**Month 3-4:** MVP development and pilot preparation
**Month 5-6:** Pilot program launch and feedback integration
**Month 7-8:** Business model refinement and scaling preparation
**Month 9-12:** Market launch and initial scaling

**Investment Staging:**
- Phase 1: $25K-50K for validation and MVP
- Phase 2: $100K-250K for pilot and initial launch
- Phase 3: $500K+ for scaling and market expansion
"""


def register_market_research_tools(registry: "ToolRegistry") -> None:
    """Register the market research tools with the registry"""

    @registry.tool(
        "conduct-deep-market-analysis",
        title="Deep Market Analysis",
        description="Comprehensive market analysis including TAM/SAM/SOM, trends, and opportunities",
        input_model=DeepMarketAnalysisInput,
        suite=SUITE,
    )
    def conduct_deep_market_analysis(params: DeepMarketAnalysisInput) -> str:
        return render_deep_market_analysis(params)

    @registry.tool(
        "analyze-competitive-landscape",
        title="Competitive Landscape Analysis",
        description="Detailed competitive analysis with positioning strategies",
        input_model=CompetitiveLandscapeInput,
        suite=SUITE,
    )
    def analyze_competitive_landscape(params: CompetitiveLandscapeInput) -> str:
        return render_competitive_landscape(params)

    @registry.tool(
        "research-customer-personas",
        title="Customer Persona Research",
        description="Detailed customer persona development and segmentation",
        input_model=CustomerPersonasInput,
        suite=SUITE,
    )
    def research_customer_personas(params: CustomerPersonasInput) -> str:
        return render_customer_personas(params)

    @registry.tool(
        "validate-market-opportunity",
        title="Market Opportunity Validation",
        description="Validate market opportunity with research-backed insights",
        input_model=MarketValidationInput,
        suite=SUITE,
    )
    def validate_market_opportunity(params: MarketValidationInput) -> str:
        """Fixed-score validation report

        Examples:
            registry.invoke("validate-market-opportunity", {
                "businessIdea": "Meal kits", "targetMarket": "Students",
                "industry": "food", "investmentLevel": 50000,
            })
            # ... **Investment Level:** $50,000 ...
        """
        return render_market_validation(params)
