"""
Static industry knowledge

Reference data consulted by the knowledge-base tools. Built once at import
and frozen (read-only mappings, tuples); nothing writes to it at runtime,
including store-knowledge.

Lookups are case-insensitive and fall back to a default bucket when the key
is unknown, so any industry or model name yields content.
"""

from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_INDUSTRY = "technology"
DEFAULT_BUSINESS_MODEL = "saas"
DEFAULT_PRACTICE_AREA = "marketing"
DEFAULT_TECHNOLOGY_AREA = "artificial_intelligence"


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


INDUSTRIES: Mapping[str, Mapping[str, Any]] = _freeze({
    "technology": {
        "trends": [
            "AI and machine learning adoption",
            "Cloud-first infrastructure",
            "Remote work technologies",
            "Cybersecurity focus",
            "IoT and edge computing",
        ],
        "regulations": [
            "Data protection (GDPR, CCPA)",
            "AI ethics and governance",
            "Cybersecurity compliance",
            "International data transfer",
            "Platform liability",
        ],
        "benchmarks": {
            "grossMargin": "70-85%",
            "customerAcquisitionCost": "$100-2000",
            "churnRate": "5-15% monthly",
            "growthRate": "20-50% annually",
        },
    },
    "healthcare": {
        "trends": [
            "Telemedicine and digital health",
            "AI in diagnostics",
            "Personalized medicine",
            "Value-based care",
            "Patient experience focus",
        ],
        "regulations": [
            "HIPAA compliance",
            "FDA medical device approval",
            "Clinical trial regulations",
            "Quality management systems",
            "Patient safety requirements",
        ],
        "benchmarks": {
            "grossMargin": "40-60%",
            "customerAcquisitionCost": "$500-5000",
            "paymentCycle": "60-90 days",
            "growthRate": "10-25% annually",
        },
    },
    "retail": {
        "trends": [
            "E-commerce acceleration",
            "Omnichannel experiences",
            "Sustainability focus",
            "Personalization technology",
            "Social commerce",
        ],
        "regulations": [
            "Consumer protection laws",
            "Product safety standards",
            "Advertising regulations",
            "Data privacy compliance",
            "Environmental regulations",
        ],
        "benchmarks": {
            "grossMargin": "20-50%",
            "customerAcquisitionCost": "$20-200",
            "inventoryTurnover": "4-12x annually",
            "growthRate": "5-20% annually",
        },
    },
})

BUSINESS_MODELS: Mapping[str, Mapping[str, Any]] = _freeze({
    "saas": {
        "description": "Software as a Service model",
        "keyMetrics": ["MRR", "CAC", "LTV", "Churn", "NPS"],
        "successFactors": ["Product-market fit", "Customer success", "Scalable sales", "Strong retention"],
        "challenges": ["Customer acquisition", "Churn management", "Pricing optimization", "Feature bloat"],
    },
    "marketplace": {
        "description": "Platform connecting buyers and sellers",
        "keyMetrics": ["GMV", "Take rate", "Network effects", "Liquidity"],
        "successFactors": ["Network effects", "Trust and safety", "User experience", "Supply-demand balance"],
        "challenges": ["Chicken-and-egg problem", "Quality control", "Disintermediation", "Competition"],
    },
    "subscription": {
        "description": "Recurring payment model for ongoing value",
        "keyMetrics": ["Subscriber growth", "ARPU", "Retention", "CLV"],
        "successFactors": ["Consistent value delivery", "Low friction", "Community", "Content quality"],
        "challenges": ["Content creation", "Churn prevention", "Pricing strategy", "Customer engagement"],
    },
})

BEST_PRACTICES: Mapping[str, Mapping[str, str]] = _freeze({
    "marketing": {
        "contentMarketing": "Create valuable content that educates and engages target audience",
        "socialMedia": "Build authentic relationships and provide customer value",
        "emailMarketing": "Segment audiences and personalize messaging",
        "seo": "Focus on user intent and create high-quality, relevant content",
    },
    "operations": {
        "processOptimization": "Map processes, identify bottlenecks, and automate repetitive tasks",
        "qualityControl": "Implement systematic quality checks and continuous improvement",
        "customerService": "Provide proactive, personalized, and multi-channel support",
        "supplyChain": "Build resilient, flexible, and cost-effective supply chains",
    },
    "finance": {
        "cashFlowManagement": "Maintain 3-6 months operating expenses in reserve",
        "pricingStrategy": "Use value-based pricing aligned with customer willingness to pay",
        "financialPlanning": "Create rolling forecasts with scenario planning",
        "investmentDecisions": "Use NPV and IRR analysis for capital allocation",
    },
})

TECHNOLOGY_TRENDS: Mapping[str, Mapping[str, str]] = _freeze({
    "artificial_intelligence": {
        "impact": "Automation, personalization, decision support, predictive analytics",
        "timeline": "Immediate to 3 years",
        "adoption": "Early adopters gaining competitive advantage",
        "considerations": "Data quality, ethics, talent acquisition, integration complexity",
    },
    "blockchain": {
        "impact": "Trust, transparency, decentralization, smart contracts",
        "timeline": "2-5 years for mainstream adoption",
        "adoption": "Experimental to early production use cases",
        "considerations": "Scalability, energy consumption, regulatory uncertainty",
    },
    "iot": {
        "impact": "Real-time data, automation, remote monitoring, predictive maintenance",
        "timeline": "Immediate to 2 years",
        "adoption": "Rapid adoption in industrial and consumer applications",
        "considerations": "Security, connectivity, data management, device lifecycle",
    },
})


def industry_profile(industry: str) -> Mapping[str, Any]:
    """Trends, regulations and benchmarks for an industry (default: technology)"""
    return INDUSTRIES.get(industry.lower(), INDUSTRIES[DEFAULT_INDUSTRY])


def business_model_profile(business_type: str) -> Mapping[str, Any]:
    return BUSINESS_MODELS.get(business_type.lower(), BUSINESS_MODELS[DEFAULT_BUSINESS_MODEL])


def best_practices_for(area: str) -> Mapping[str, str]:
    return BEST_PRACTICES.get(area.lower(), BEST_PRACTICES[DEFAULT_PRACTICE_AREA])


def technology_key(technology_area: str) -> str:
    """'Artificial Intelligence' -> 'artificial_intelligence' (first space only)"""
    return technology_area.lower().replace(" ", "_", 1)


def technology_profile(technology_area: str = None) -> Mapping[str, str]:
    key = technology_key(technology_area) if technology_area else DEFAULT_TECHNOLOGY_AREA
    return TECHNOLOGY_TRENDS.get(key, TECHNOLOGY_TRENDS[DEFAULT_TECHNOLOGY_AREA])
