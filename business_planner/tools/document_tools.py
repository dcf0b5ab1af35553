"""Document Generation Tools - business plan sections, compilation, saving

Section generators fill fixed prose with the caller's fields, substituting
default paragraphs where optional content was not provided.
compile-business-plan stitches sections into one document (embedding the
current date) and save-business-plan is the only tool that writes to disk.
"""

import logging
from datetime import date
from typing import TYPE_CHECKING

from ..errors import ERROR_MARKER, FilesystemError
from ..schemas import (
    CompanyDescriptionInput,
    CompileBusinessPlanInput,
    ExecutiveSummaryInput,
    MarketingStrategyInput,
    OperationsPlanInput,
    SaveBusinessPlanInput,
)
from ..utils.file_utils import DEFAULT_FORMAT, extension_for, write_document
from ..utils.formatting import format_amount, format_date
from ..utils.markdown import markdown_to_html

if TYPE_CHECKING:
    from ..registry import ToolRegistry

logger = logging.getLogger(__name__)

SUITE = "document-generation"


def _today() -> date:
    return date.today()


# =============================================================================
# SECTION TEMPLATES
# =============================================================================

def render_executive_summary(params: ExecutiveSummaryInput) -> str:
    name = params.business_name
    competitive = params.competitive_advantage or f"{name} will compete effectively through:"
    highlights = params.financial_highlights or "Financial projections demonstrate strong business potential:"
    if params.funding_request:
        funding = f"We are seeking ${format_amount(params.funding_request)} in funding to:"
    else:
        funding = "Investment requirements include:"

    return f"""# Executive Summary

## Business Overview
**{name}** {params.business_idea}

Our mission is to serve the {params.target_market} market by providing innovative solutions that address critical market needs and create sustainable competitive advantages.

## Business Concept
{params.business_idea}

The business addresses a significant market opportunity by leveraging proven business models while introducing innovative approaches that differentiate us from existing competitors.

## Market Opportunity
The target market consists of {params.target_market}, representing a substantial and growing opportunity. Market research indicates strong demand for our proposed solution, with limited competition in our specific market positioning.

Key market drivers include:
- Growing demand for innovative solutions
- Technology adoption trends
- Changing customer preferences
- Market inefficiencies creating opportunities
- Economic conditions favoring new business models

## Competitive Advantages
{competitive}
- **Innovation Leadership**: Cutting-edge solutions addressing unmet market needs
- **Customer Focus**: Deep understanding of target market requirements
- **Operational Excellence**: Efficient business model and execution capabilities
- **Strategic Positioning**: Unique market position with sustainable advantages
- **Technology Integration**: Advanced technology enabling superior value delivery

## Products/Services
Our core offering includes:
- Primary product/service solving key customer problems
- Complementary offerings enhancing customer value
- Scalable solutions supporting business growth
- Technology-enabled capabilities providing competitive advantage

## Marketing & Sales Strategy
Market penetration will be achieved through:
- **Target Market Focus**: Concentrated efforts on high-value customer segments
- **Multi-Channel Approach**: Integrated marketing and sales channels
- **Value-Based Selling**: Clear demonstration of customer ROI
- **Strategic Partnerships**: Alliances accelerating market access
- **Digital Marketing**: Cost-effective customer acquisition strategies

## Management Team
The founding team brings together complementary skills and experience essential for business success:
- Proven track record in relevant industries
- Technical expertise and market knowledge
- Leadership and execution capabilities
- Network of industry relationships
- Commitment to business vision and growth

## Financial Highlights
{highlights}
- **Year 1 Revenue**: Projected strong initial market traction
- **Growth Trajectory**: Substantial revenue growth in years 2-3
- **Profitability**: Path to profitability within 18-24 months
- **Market Share**: Realistic market penetration goals
- **Return on Investment**: Attractive returns for investors

### Key Financial Metrics
- Gross margins: 60-80% depending on product mix
- Customer acquisition cost: Efficient and scalable
- Customer lifetime value: Strong retention and expansion
- Break-even point: Achievable within reasonable timeframe
- Cash flow positive: Sustainable business model

## Funding Requirements
{funding}
- **Product Development**: Technology development and refinement
- **Market Launch**: Marketing and customer acquisition
- **Operations**: Infrastructure and team building
- **Working Capital**: Cash flow support during growth phase
- **Growth Capital**: Scaling operations and market expansion

## Investment Opportunity
This represents an attractive investment opportunity based on:
- Large and growing target market
- Proven business model with competitive advantages
- Experienced management team
- Clear path to profitability and growth
- Multiple exit strategy options
- Strong return potential for investors

## Success Factors
Key factors for success include:
- Execution of go-to-market strategy
- Product development and market fit
- Team building and organizational development
- Customer acquisition and retention
- Financial management and capital efficiency
- Strategic partnerships and alliances

{name} is positioned to capture significant value in a growing market through innovative solutions, strong execution, and strategic positioning. We invite investors to join us in building a successful and sustainable business.
"""


DEFAULT_CORE_VALUES = """Our core values guide every aspect of our business:
- **Customer Success**: We prioritize customer success above all else
- **Innovation**: We continuously seek better ways to serve our market
- **Integrity**: We conduct business with honesty and transparency
- **Excellence**: We strive for excellence in everything we do
- **Community**: We contribute positively to our community and industry"""

LOCATION_STRATEGY = """**Location Strategy**: Strategic location selection based on:
- Market access and customer proximity
- Talent availability and cost considerations
- Supplier and partner ecosystem
- Infrastructure and logistics capabilities
- Business climate and regulatory environment"""


def _primary_location(location: str) -> str:
    return f"""**Primary Location**: {location}

Our location provides strategic advantages including:
- Access to target market and customers
- Proximity to key suppliers and partners
- Talent pool and workforce availability
- Transportation and logistics advantages
- Business climate and regulatory environment"""


def render_company_description(params: CompanyDescriptionInput) -> str:
    name = params.business_name
    industry = params.industry
    location = params.location

    overview_story = params.founding_story or (
        f"Founded with the vision of transforming how businesses and customers interact in the {industry} space."
    )
    history = params.founding_story or f"{name} was founded to address significant gaps in the {industry} market."
    mission = params.mission_statement or (
        f"Our mission is to provide exceptional value to customers in the {industry} industry through "
        "innovative solutions, superior service, and sustainable business practices."
    )
    vision = params.vision_statement or (
        f"To become the leading provider of innovative solutions in the {industry} industry, known for "
        "exceptional customer service, technological excellence, and positive community impact."
    )
    based = f"Based in {location}, we" if location else "We"
    facilities = _primary_location(location) if location else LOCATION_STRATEGY

    return f"""# Company Description

## Company Overview
**{name}** is a {params.business_type} company operating in the {industry} industry. {overview_story}

{based} are positioned to serve our target market through innovative solutions and exceptional customer service.

## Mission Statement
{mission}

## Vision Statement
{vision}

## Core Values
{params.core_values or DEFAULT_CORE_VALUES}

## Business Philosophy
Our business philosophy centers on creating sustainable value for all stakeholders - customers, employees, partners, and shareholders. We believe that success comes from:

- **Customer-Centric Approach**: Understanding and exceeding customer expectations
- **Continuous Improvement**: Always seeking ways to enhance our offerings
- **Innovation Leadership**: Staying ahead of market trends and customer needs
- **Sustainable Practices**: Building a business that creates long-term value
- **Community Engagement**: Contributing positively to our local and industry communities

## Company History & Milestones
{history}

**Key Milestones:**
- Company founding and initial concept development
- Market research and validation completion
- Product/service development and testing
- Initial customer acquisition and feedback
- Business model refinement and optimization
- Team building and organizational development

## Legal Structure
**Business Structure**: {params.business_type}
**Incorporation**: [State/Country of incorporation]
**Ownership**: [Ownership structure details]
**Governance**: [Board structure and key advisors]

## Location & Facilities
{facilities}

**Facilities Requirements:**
- Office space for team and operations
- Technology infrastructure and equipment
- Meeting and collaboration spaces
- Storage and inventory capabilities (if applicable)
- Future expansion capabilities

## Products & Services Overview
{name} offers:

**Primary Offerings:**
- Core products/services addressing key market needs
- Complementary solutions enhancing customer value
- Technology-enabled capabilities providing advantages
- Service support and customer success programs

**Value Proposition:**
- Clear customer benefits and advantages
- Differentiated approach to market problems
- Measurable return on investment for customers
- Scalable solutions supporting customer growth

## Target Market & Customers
Our target market consists of:
- Primary customer segments with highest value potential
- Secondary markets for expansion opportunities
- Geographic focus areas for initial market entry
- Customer size and profile characteristics

**Customer Needs We Address:**
- Specific problems our solutions solve
- Pain points eliminated through our offerings
- Value creation opportunities for customers
- Efficiency and cost savings delivered

## Competitive Positioning
{name} competes in the market through:
- **Differentiation Strategy**: Unique value proposition and market approach
- **Quality Focus**: Superior product/service quality and reliability
- **Customer Service**: Exceptional customer experience and support
- **Innovation**: Continuous improvement and new capability development
- **Efficiency**: Cost-effective operations and competitive pricing

## Growth Strategy
Our growth strategy includes:
- **Market Penetration**: Deeper penetration of existing markets
- **Geographic Expansion**: Entry into new geographic markets
- **Product Development**: New product/service offerings
- **Strategic Partnerships**: Alliances accelerating growth
- **Acquisition Opportunities**: Strategic acquisitions for expansion

## Future Outlook
{name} is positioned for significant growth based on:
- Large and growing market opportunity
- Proven business model and competitive advantages
- Strong management team and organizational capabilities
- Technology trends supporting our approach
- Customer demand validation and market traction

We anticipate achieving significant milestones including market leadership, geographic expansion, and sustainable profitability while maintaining our commitment to customer success and community contribution.
"""


def render_marketing_strategy(params: MarketingStrategyInput) -> str:
    target = params.target_market
    positioning = params.brand_positioning or (
        f"We position ourselves as the innovative leader in providing high-quality, reliable solutions for {target}."
    )
    pricing = params.pricing_strategy or "Our pricing strategy balances value delivery with market competitiveness:"
    if params.marketing_channels:
        channels = f"Utilizing {params.marketing_channels} as primary distribution channels:"
    else:
        channels = "Multi-channel distribution approach:"
    sales = params.sales_strategy or "Our sales approach focuses on consultative selling and customer success:"
    acquisition = params.customer_acquisition or "Multi-channel lead generation approach:"

    return f"""# Marketing & Sales Strategy

## Market Segmentation & Targeting

### Primary Target Market
**Target Segments**: {target}

**Segment Characteristics:**
- **Demographics**: Age, income, education, location profiles
- **Psychographics**: Values, interests, lifestyle preferences
- **Behavioral**: Purchase patterns, brand loyalty, decision criteria
- **Geographic**: Regional focus areas and market coverage
- **Firmographics**: Business size, industry, technology adoption (B2B)

**Segment Prioritization:**
1. **Primary Segment**: Highest value, best fit customers
2. **Secondary Segment**: Growth expansion opportunities
3. **Tertiary Segment**: Future market development potential

### Customer Personas
**Persona 1: "The Innovation Seeker"**
- Early adopters looking for competitive advantage
- Higher price tolerance for premium solutions
- Influence others in their network/industry
- Seek cutting-edge solutions and capabilities

**Persona 2: "The Practical Decision Maker"**
- Focus on proven solutions and clear ROI
- Careful evaluation and comparison process
- Value reliability and strong support
- Budget-conscious but quality-focused

**Persona 3: "The Growth Driver"**
- Rapidly scaling businesses needing scalable solutions
- Speed and efficiency priorities
- Partnership and integration focused
- Growth trajectory creating increasing needs

## Brand Positioning & Value Proposition

### Brand Positioning
{positioning}

**Key Positioning Elements:**
- **Quality Leadership**: Superior product/service quality
- **Innovation Focus**: Cutting-edge solutions and capabilities
- **Customer Success**: Proven track record of customer results
- **Reliability**: Dependable solutions and support
- **Value Creation**: Clear ROI and business impact

### Unique Value Proposition
**Primary Value Proposition:**
"We help [target market] achieve [key benefit] through [unique approach], delivering [measurable outcome] while [key differentiator]."

**Supporting Value Drivers:**
- Cost savings and efficiency improvements
- Revenue growth and competitive advantages
- Risk reduction and reliability enhancement
- Time savings and process optimization
- Innovation enablement and future-proofing

### Brand Messaging Framework
**Core Message**: Transform your business with innovative solutions designed specifically for [target market]

**Supporting Messages:**
- **Quality**: "Built for reliability and performance"
- **Innovation**: "Leading-edge solutions for competitive advantage"
- **Results**: "Proven results and measurable ROI"
- **Support**: "Exceptional service and customer success"
- **Partnership**: "Your trusted partner for growth and success"

## Marketing Mix Strategy

### Product Strategy
**Core Product/Service Features:**
- Primary functionality addressing key customer needs
- Differentiated capabilities providing competitive advantage
- Quality and reliability standards exceeding market expectations
- Scalable solutions supporting customer growth
- Integration capabilities with existing customer systems

**Product Development Roadmap:**
- Version 1.0: Core functionality and market entry
- Version 2.0: Enhanced features based on customer feedback
- Version 3.0: Advanced capabilities and market expansion
- Future Versions: Innovation leadership and market disruption

### Pricing Strategy
{pricing}

**Pricing Model:**
- **Value-Based Pricing**: Price based on customer value received
- **Competitive Positioning**: Competitive with premium for added value
- **Tiered Options**: Multiple pricing tiers for different customer segments
- **Flexible Terms**: Payment options supporting customer needs

**Pricing Tiers:**
- **Starter**: Entry-level pricing for small customers/trials
- **Professional**: Standard pricing for main target market
- **Enterprise**: Premium pricing for large customers with custom needs
- **Custom**: Tailored pricing for unique requirements

### Distribution Strategy
**Primary Channels:**
{channels}
- **Direct Sales**: Direct relationship with key customers
- **Online Channels**: Website, e-commerce, and digital platforms
- **Partner Channels**: Strategic partnerships and resellers
- **Channel Partners**: Distribution networks and affiliates

**Channel Management:**
- Channel partner recruitment and training
- Performance monitoring and optimization
- Conflict resolution and territory management
- Support and enablement programs

### Promotion Strategy
**Integrated Marketing Communications:**

**Digital Marketing:**
- **Website & SEO**: Professional website optimized for search
- **Content Marketing**: Valuable content demonstrating expertise
- **Social Media**: Targeted social media presence and engagement
- **Email Marketing**: Nurture campaigns and customer communication
- **Online Advertising**: Targeted digital advertising campaigns

**Traditional Marketing:**
- **Industry Events**: Trade shows, conferences, and networking
- **Print Advertising**: Industry publications and magazines
- **Direct Mail**: Targeted direct mail campaigns
- **Public Relations**: Media relations and thought leadership

**Sales Enablement:**
- Sales collateral and presentation materials
- Customer case studies and testimonials
- Competitive intelligence and positioning
- Sales training and support programs

## Sales Strategy

### Sales Process & Methodology
{sales}

**Sales Process Stages:**
1. **Lead Generation**: Identifying and qualifying prospects
2. **Discovery**: Understanding customer needs and requirements
3. **Solution Design**: Customizing solutions for customer needs
4. **Proposal**: Presenting value proposition and pricing
5. **Negotiation**: Working through terms and conditions
6. **Closing**: Finalizing agreement and implementation planning
7. **Onboarding**: Ensuring successful customer implementation
8. **Success Management**: Ongoing customer success and expansion

**Sales Methodology:**
- **Consultative Selling**: Understanding before proposing
- **Value-Based Selling**: Focus on customer ROI and outcomes
- **Solution Selling**: Addressing customer problems and needs
- **Relationship Building**: Long-term customer relationships
- **Data-Driven Approach**: Using analytics to optimize performance

### Sales Team Structure
**Sales Organization:**
- **Sales Leadership**: VP Sales and sales management
- **Account Executives**: Direct sales to target customers
- **Sales Development**: Lead generation and qualification
- **Customer Success**: Onboarding and retention
- **Sales Support**: Proposal support and enablement

**Compensation Plan:**
- Base salary plus performance incentives
- Commission structure aligned with business goals
- Team incentives for collaborative success
- Recognition programs for top performers

## Customer Acquisition Strategy

### Lead Generation
{acquisition}

**Digital Lead Generation:**
- Search engine optimization and marketing
- Content marketing and thought leadership
- Social media marketing and engagement
- Email marketing and nurture campaigns
- Webinars and online events

**Traditional Lead Generation:**
- Industry events and trade shows
- Referral and partner programs
- Cold outreach and prospecting
- Print advertising and PR
- Direct mail campaigns

**Lead Qualification:**
- Lead scoring and qualification criteria
- Marketing qualified leads (MQL) definition
- Sales qualified leads (SQL) process
- Lead nurturing and follow-up
- Conversion optimization

### Customer Acquisition Cost (CAC) Management
**CAC Targets by Channel:**
- Digital channels: $X per customer
- Event marketing: $Y per customer
- Referral programs: $Z per customer
- Partner channels: $A per customer

**CAC Optimization:**
- Channel performance measurement
- Conversion rate optimization
- Customer lifetime value maximization
- Retention and expansion focus
- Referral program development

## Performance Measurement

### Key Marketing Metrics
- **Lead Generation**: Volume, quality, and cost per lead
- **Conversion Rates**: Lead to opportunity to customer conversion
- **Customer Acquisition Cost**: Cost per customer by channel
- **Customer Lifetime Value**: Total customer value over time
- **Market Share**: Share of target market and growth
- **Brand Awareness**: Recognition and consideration metrics

### Sales Metrics
- **Revenue**: Total sales revenue and growth
- **Pipeline**: Sales pipeline volume and velocity
- **Win Rate**: Percentage of opportunities won
- **Sales Cycle**: Average time from lead to customer
- **Customer Retention**: Renewal and expansion rates
- **Sales Productivity**: Revenue per salesperson

### Return on Marketing Investment
- **Marketing ROI**: Revenue generated per marketing dollar
- **Channel ROI**: Return by marketing channel
- **Campaign Performance**: Individual campaign effectiveness
- **Customer Acquisition**: Cost vs. lifetime value analysis
- **Market Investment**: Geographic and segment ROI

Our marketing and sales strategy positions us for sustainable growth through focused targeting, clear value proposition, and efficient customer acquisition while building strong customer relationships and market presence.
"""


def render_operations_plan(params: OperationsPlanInput) -> str:
    model = params.operational_model or "Efficient, scalable operations focused on quality and customer satisfaction"
    staffing = params.staffing_plan or "Our staffing strategy focuses on building a high-performing team:"
    technology = params.technology_needs or "Our technology strategy supports business operations and growth:"
    facilities = params.facilities_needs or (
        "Our facility strategy balances cost efficiency with operational effectiveness:"
    )
    quality = params.quality_control or (
        "Our quality management approach ensures consistent delivery of exceptional value:"
    )

    return f"""# Operations & Management Plan

## Operations Overview

### Business Operations Model
**Business Type**: {params.business_type}
**Operational Approach**: {model}

Our operations strategy emphasizes efficiency, quality, and scalability while maintaining flexibility to adapt to market changes and growth opportunities.

## Organizational Structure

### Management Team Structure
**Executive Leadership:**
- **Chief Executive Officer (CEO)**: Overall strategy and leadership
- **Chief Operating Officer (COO)**: Operations and execution
- **Chief Technology Officer (CTO)**: Technology and product development
- **Chief Financial Officer (CFO)**: Financial management and planning
- **Chief Marketing Officer (CMO)**: Marketing and customer acquisition

**Department Structure:**
- **Operations**: Day-to-day business operations and delivery
- **Technology**: Product development and technical infrastructure
- **Sales & Marketing**: Customer acquisition and revenue generation
- **Finance & Administration**: Financial management and business support
- **Customer Success**: Customer onboarding, support, and retention

### Staffing Plan
{staffing}

**Phase 1 (Months 1-6): Core Team**
- 5-8 employees covering essential functions
- Founder/CEO and key leadership positions
- Core technical and operational staff
- Part-time and contract resources as needed

**Phase 2 (Months 7-12): Growth Team**
- 12-15 employees expanding capabilities
- Department managers and team leads
- Additional technical and sales staff
- Customer success and support roles

**Phase 3 (Year 2+): Scale Team**
- 20+ employees supporting growth
- Specialized roles and expertise
- Regional and market expansion staff
- Advanced technical and management capabilities

**Hiring Priorities:**
1. Technical talent for product development
2. Sales and marketing professionals
3. Operations and customer success staff
4. Financial and administrative support
5. Industry expertise and advisory roles

### Advisory Board
**Strategic Advisors:**
- Industry veterans with market knowledge
- Technology experts and thought leaders
- Business development and partnership specialists
- Financial and investment professionals
- Customer representatives and user advocates

## Technology Infrastructure

### Technology Needs Assessment
{technology}

**Core Technology Requirements:**
- **Product Development**: Development tools and platforms
- **Customer Management**: CRM and customer success platforms
- **Financial Management**: Accounting and financial reporting systems
- **Communication**: Collaboration and communication tools
- **Security**: Cybersecurity and data protection measures

**Technology Architecture:**
- **Cloud-First**: Scalable cloud-based infrastructure
- **Mobile-Ready**: Mobile-responsive and mobile-first design
- **Integration-Capable**: API-first architecture for integrations
- **Security-Focused**: Enterprise-grade security measures
- **Analytics-Enabled**: Data collection and analytics capabilities

**Technology Roadmap:**
- **Phase 1**: Core infrastructure and MVP development
- **Phase 2**: Enhanced capabilities and integrations
- **Phase 3**: Advanced features and automation
- **Phase 4**: AI/ML integration and innovation

### Data Management & Analytics
**Data Strategy:**
- Customer data collection and management
- Product usage and performance analytics
- Financial and operational metrics tracking
- Market research and competitive intelligence
- Compliance and data governance

**Analytics Capabilities:**
- Real-time dashboards and reporting
- Customer behavior and usage analysis
- Financial performance and forecasting
- Operational efficiency and optimization
- Market trends and opportunity identification

## Facilities & Infrastructure

### Facility Requirements
{facilities}

**Physical Space Needs:**
- **Office Space**: Team collaboration and meeting areas
- **Technology Infrastructure**: Reliable internet and communication
- **Security**: Physical and digital security measures
- **Accessibility**: ADA compliance and accessibility features
- **Expansion Capability**: Room for growth and scaling

**Location Considerations:**
- Proximity to target market and customers
- Access to talent pool and workforce
- Transportation and logistics connectivity
- Business climate and regulatory environment
- Cost considerations and budget constraints

**Remote Work Policy:**
- Hybrid work model balancing flexibility and collaboration
- Technology support for remote work capabilities
- Communication and collaboration protocols
- Performance management and accountability
- Company culture and team building initiatives

### Supply Chain & Vendor Management
**Supplier Strategy:**
- Key vendor identification and qualification
- Supplier diversity and inclusion programs
- Performance monitoring and management
- Risk assessment and contingency planning
- Cost optimization and negotiation

**Vendor Categories:**
- **Technology Vendors**: Software, hardware, and cloud services
- **Professional Services**: Legal, accounting, consulting
- **Marketing Services**: Advertising, design, content creation
- **Operational Services**: Facilities, equipment, logistics
- **Customer Support**: Support tools and outsourcing options

## Quality Control & Assurance

### Quality Management System
{quality}

**Quality Standards:**
- **Product Quality**: Rigorous testing and quality assurance
- **Service Quality**: Customer service standards and metrics
- **Process Quality**: Standardized processes and procedures
- **Compliance Quality**: Regulatory and industry compliance
- **Continuous Improvement**: Regular review and optimization

**Quality Assurance Processes:**
- **Design Review**: Quality considerations in product design
- **Testing Protocols**: Comprehensive testing procedures
- **Customer Feedback**: Regular customer feedback collection
- **Performance Monitoring**: Real-time quality metrics tracking
- **Corrective Action**: Rapid response to quality issues

### Performance Metrics & KPIs
**Operational KPIs:**
- **Productivity**: Output per employee and efficiency metrics
- **Quality**: Error rates, customer satisfaction, defect rates
- **Cost**: Operational costs and cost per unit/customer
- **Time**: Cycle times, delivery times, response times
- **Customer Success**: Retention, satisfaction, and expansion

**Management Reporting:**
- Daily operational dashboards
- Weekly performance reviews
- Monthly management reports
- Quarterly business reviews
- Annual strategic planning sessions

## Risk Management & Contingency Planning

### Operational Risk Assessment
**Key Risk Categories:**
- **Technology Risk**: System failures, cybersecurity threats
- **Personnel Risk**: Key person dependency, talent retention
- **Supplier Risk**: Vendor failures, supply chain disruption
- **Financial Risk**: Cash flow, payment processing issues
- **Regulatory Risk**: Compliance failures, regulatory changes

**Risk Mitigation Strategies:**
- **Redundancy**: Backup systems and alternative suppliers
- **Insurance**: Comprehensive business insurance coverage
- **Documentation**: Process documentation and knowledge transfer
- **Training**: Cross-training and skill development
- **Monitoring**: Early warning systems and response protocols

### Business Continuity Planning
**Continuity Measures:**
- **Data Backup**: Regular data backup and recovery procedures
- **Remote Work**: Capability for remote operations
- **Communication**: Emergency communication protocols
- **Financial**: Emergency funding and cash reserves
- **Customer Service**: Maintained service during disruptions

## Compliance & Legal Considerations

### Regulatory Compliance
**Compliance Requirements:**
- Industry-specific regulations and standards
- Data protection and privacy regulations
- Employment law and workplace safety
- Financial reporting and tax compliance
- International trade and export controls

**Compliance Management:**
- Regular compliance audits and assessments
- Legal counsel and professional advice
- Employee training and awareness programs
- Documentation and record keeping
- Incident response and reporting procedures

### Intellectual Property Protection
**IP Strategy:**
- Trade secrets and confidential information protection
- Trademark and brand protection
- Patent considerations for innovations
- Copyright protection for content and materials
- Non-disclosure and confidentiality agreements

Our operations and management plan establishes a foundation for efficient, scalable, and compliant business operations while maintaining focus on quality, customer success, and sustainable growth.
"""


# =============================================================================
# COMPILATION
# =============================================================================

def _placeholder(title: str) -> str:
    return f"## {title}\n\n*[{title} section to be completed]*"


def _default_organization(business_name: str) -> str:
    return f"""## Organization & Management

### Organizational Structure
The organizational structure of {business_name} is designed to support efficient operations and sustainable growth.

### Management Team
The management team brings together complementary skills and experience essential for business success.

### Personnel Plan
Our staffing strategy focuses on building a high-performing team with the skills and experience necessary to execute our business plan.

### Advisory Board
Strategic advisors provide industry expertise, market knowledge, and business guidance to support company growth and success."""


DEFAULT_FINANCIALS = """## Financial Projections

### Revenue Projections
Detailed financial projections demonstrate the business potential and path to profitability.

### Expense Forecasts
Comprehensive expense planning ensures efficient resource allocation and cost management.

### Profitability Analysis
Break-even analysis and profitability projections show the timeline to sustainable profitability.

### Cash Flow Analysis
Cash flow projections ensure adequate working capital and financial sustainability.

### Financial Ratios
Key financial ratios and metrics demonstrate business performance and investment attractiveness."""

DEFAULT_FUNDING = """## Funding Request

### Funding Requirements
Investment requirements to support business launch and growth.

### Use of Funds
Detailed allocation of investment funds across key business areas.

### Return on Investment
Projected returns for investors based on business growth and profitability.

### Exit Strategy
Potential exit strategies and value creation for investors."""

APPENDICES = """## Appendices

### Appendix A: Market Research Data
- Industry analysis and trends
- Competitive analysis details
- Customer research findings
- Market size and opportunity assessment

### Appendix B: Financial Models
- Detailed financial spreadsheets
- Assumptions and methodology
- Sensitivity analysis
- Scenario planning

### Appendix C: Operational Details
- Process flows and procedures
- Technology specifications
- Organizational charts
- Vendor and supplier information

### Appendix D: Legal and Regulatory
- Corporate structure documents
- Intellectual property portfolio
- Regulatory compliance framework
- Risk assessment and mitigation"""


def render_business_plan(params: CompileBusinessPlanInput, today: date) -> str:
    """Assemble the full plan; missing sections get placeholders or default prose"""
    name = params.business_name
    current_date = format_date(today)

    sections = [
        params.executive_summary or _placeholder("Executive Summary"),
        params.company_description or _placeholder("Company Description"),
        params.market_analysis or _placeholder("Market Analysis"),
        params.organization_management or _default_organization(name),
        params.marketing_strategy or _placeholder("Marketing & Sales Strategy"),
        params.operations_plan or _placeholder("Operations Plan"),
        params.financial_projections or DEFAULT_FINANCIALS,
        params.funding_request or DEFAULT_FUNDING,
        APPENDICES,
    ]
    body = "\n\n---\n\n".join(sections)

    return f"""# {name} - Comprehensive Business Plan

*Generated on {current_date}*

---

## Table of Contents

1. [Executive Summary](#executive-summary)
2. [Company Description](#company-description)
3. [Market Analysis](#market-analysis)
4. [Organization & Management](#organization--management)
5. [Marketing & Sales Strategy](#marketing--sales-strategy)
6. [Operations Plan](#operations-plan)
7. [Financial Projections](#financial-projections)
8. [Funding Request](#funding-request)
9. [Appendices](#appendices)

---

{body}

---

*This business plan contains confidential and proprietary information. Distribution is restricted to authorized parties only.*

**Document Version**: 1.0
**Last Updated**: {current_date}
**Prepared By**: {name} Management Team

---

© {today.year} {name}. All rights reserved.
"""


# =============================================================================
# SAVING
# =============================================================================

def save_business_plan_text(params: SaveBusinessPlanInput) -> str:
    """Write the plan and describe the result

    Filesystem failures are reported in the returned text rather than raised,
    so callers always receive a normal result envelope.
    """
    format = params.format or DEFAULT_FORMAT
    extension = extension_for(format)
    content = markdown_to_html(params.business_plan) if format == "html" else params.business_plan

    try:
        path = write_document(content, params.filename, extension)
    except FilesystemError as e:
        logger.warning(f"save-business-plan failed for {params.filename!r}: {e}")
        return f"{ERROR_MARKER} Error saving business plan: {e}\n\n{e.hint}"

    return f"""✅ Business plan successfully saved!

**File Details:**
- **Filename**: {path.name}
- **Location**: {path}
- **Format**: {format}
- **Size**: {len(content)} characters

The business plan has been saved to your local file system and is ready for use, sharing, or further editing.

**Next Steps:**
- Review the generated business plan
- Customize sections as needed
- Share with stakeholders or advisors
- Use for funding applications or business development

**File Location**: {path}"""


def register_document_tools(registry: "ToolRegistry") -> None:
    """Register the document generation tools with the registry"""

    @registry.tool(
        "generate-executive-summary",
        title="Executive Summary Generator",
        description="Generate compelling executive summary for business plan",
        input_model=ExecutiveSummaryInput,
        suite=SUITE,
    )
    def generate_executive_summary(params: ExecutiveSummaryInput) -> str:
        return render_executive_summary(params)

    @registry.tool(
        "generate-company-description",
        title="Company Description Generator",
        description="Generate detailed company description section",
        input_model=CompanyDescriptionInput,
        suite=SUITE,
    )
    def generate_company_description(params: CompanyDescriptionInput) -> str:
        return render_company_description(params)

    @registry.tool(
        "generate-marketing-strategy",
        title="Marketing Strategy Generator",
        description="Generate comprehensive marketing and sales strategy",
        input_model=MarketingStrategyInput,
        suite=SUITE,
    )
    def generate_marketing_strategy(params: MarketingStrategyInput) -> str:
        return render_marketing_strategy(params)

    @registry.tool(
        "generate-operations-plan",
        title="Operations Plan Generator",
        description="Generate detailed operations and management plan",
        input_model=OperationsPlanInput,
        suite=SUITE,
    )
    def generate_operations_plan(params: OperationsPlanInput) -> str:
        return render_operations_plan(params)

    @registry.tool(
        "compile-business-plan",
        title="Complete Business Plan Compiler",
        description="Compile all sections into a complete, formatted business plan",
        input_model=CompileBusinessPlanInput,
        suite=SUITE,
    )
    def compile_business_plan(params: CompileBusinessPlanInput) -> str:
        """Full plan document

        The only section tool whose output varies between calls: the
        generation date and copyright year come from today's date.
        """
        return render_business_plan(params, _today())

    @registry.tool(
        "save-business-plan",
        title="Save Business Plan to File",
        description="Save formatted business plan to local file system",
        input_model=SaveBusinessPlanInput,
        suite=SUITE,
        read_only=False,
    )
    def save_business_plan(params: SaveBusinessPlanInput) -> str:
        """Save a plan as <output dir>/<filename>.{md|html|txt}

        Examples:
            registry.invoke("save-business-plan", {
                "businessPlan": "# Title", "filename": "test", "format": "html",
            })
            # writes generated-business-plans/test.html containing <h1>Title</h1>
        """
        return save_business_plan_text(params)
