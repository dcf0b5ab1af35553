"""Tests for the knowledge base tools."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now(monkeypatch):
    from business_planner.tools import knowledge_tools

    moment = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
    monkeypatch.setattr(knowledge_tools, "_now", lambda: moment)
    return moment


def test_industry_knowledge_known_industry(invoke):
    text = invoke("query-industry-knowledge", industry="Healthcare", query="What drives growth?")

    assert text.startswith("# Industry Knowledge: Healthcare")
    assert "## Query: What drives growth?" in text
    assert "- **Telemedicine and digital health**: Major trend shaping the industry landscape" in text
    assert "- **HIPAA compliance**: Important compliance requirement" in text
    assert "- **PaymentCycle**: 60-90 days" in text


def test_industry_knowledge_unknown_industry_uses_technology(invoke):
    aerospace = invoke("query-industry-knowledge", industry="aerospace", query="q")
    technology = invoke("query-industry-knowledge", industry="technology", query="q")

    assert "- **AI and machine learning adoption**" in aerospace
    assert "- **GrossMargin**: 70-85%" in aerospace
    assert aerospace.replace("aerospace", "technology") == technology


def test_industry_knowledge_focus_area(invoke):
    with_focus = invoke("query-industry-knowledge", industry="retail", query="q", focusArea="pricing")
    without = invoke("query-industry-knowledge", industry="retail", query="q")

    assert "**Focus Area**: pricing" in with_focus
    assert "**Focus Area**" not in without


def test_business_models(invoke):
    text = invoke("research-business-models", businessType="Marketplace", industry="travel")

    assert text.startswith("# Business Model Research: Marketplace")
    assert "Platform connecting buyers and sellers" in text
    assert "- **GMV**: Critical performance indicator" in text
    assert "**Revenue Model**: To be determined" in text
    assert "**Target Market**: To be defined" in text


def test_business_models_unknown_type_uses_saas(invoke):
    text = invoke("research-business-models", businessType="franchise", industry="food")
    assert "Software as a Service model" in text


def test_regulations(invoke):
    text = invoke("research-regulations", industry="retail", location="California")

    assert text.startswith("# Regulatory Research: retail Industry")
    assert "**Business Type**: General business" in text
    assert "- **Consumer protection laws**: Important compliance requirement for retail businesses" in text
    assert "### Location-Specific Considerations for California" in text


def test_regulations_requires_location(registry):
    result = registry.dispatch("research-regulations", {"industry": "retail"})
    assert result.is_error is True
    assert "location" in result.text


def test_financial_benchmarks(invoke):
    text = invoke("query-financial-benchmarks", industry="retail")

    assert "**Gross Margin**: 20-50%" in text
    assert "**Inventory Turnover**: 4-12x annually" in text
    assert "- Industry Average: 20-50%" in text
    assert "**Region**: Global" in text


def test_best_practices(invoke):
    text = invoke("research-best-practices", area="Finance", industry="retail")

    assert text.startswith("# Best Practices Research: Finance")
    assert "**Cash Flow Management**: Maintain 3-6 months operating expenses in reserve" in text
    assert "**Challenge**: General optimization" in text


def test_best_practices_challenge(invoke):
    text = invoke("research-best-practices", area="operations", industry="retail", challenge="slow shipping")
    assert 'The specific challenge of "slow shipping"' in text


def test_best_practices_unknown_area_uses_marketing(invoke):
    text = invoke("research-best-practices", area="legal", industry="retail")
    assert "**Content Marketing**:" in text


def test_technology_trends_named_area(invoke):
    text = invoke("research-technology-trends", industry="logistics", technologyArea="Blockchain")

    assert "### Blockchain in logistics" in text
    assert "**Impact Areas**: Trust, transparency, decentralization, smart contracts" in text


def test_technology_trends_default_area(invoke):
    text = invoke("research-technology-trends", industry="logistics")

    assert "**Technology Focus**: Emerging technologies" in text
    assert "### Artificial Intelligence in logistics" in text
    assert "**Adoption Timeline**: Immediate to 3 years" in text


def test_store_knowledge(invoke, fixed_now):
    text = invoke(
        "store-knowledge",
        category="market", topic="pricing", content="Customers prefer annual plans.",
        tags="pricing, saas ,plans",
    )

    assert text.startswith("✅ Knowledge Successfully Stored")
    assert "- **ID**: market_pricing_1735787045678" in text
    assert "- **Source**: User input" in text
    assert "- **Tags**: pricing, saas, plans" in text
    assert "- **Created**: 2025-01-02T03:04:05.678Z" in text
    assert "Customers prefer annual plans." in text


def test_store_knowledge_truncates_preview(invoke, fixed_now):
    content = "x" * 250
    text = invoke("store-knowledge", category="c", topic="t", content=content, source="Survey")

    assert "x" * 200 + "..." in text
    assert "x" * 201 not in text
    assert "- **Source**: Survey" in text
    assert "- **Tags**: None" in text


def test_build_entry_is_not_persisted(fixed_now):
    from business_planner.schemas import StoreKnowledgeInput
    from business_planner.tools.knowledge_tools import build_entry

    params = StoreKnowledgeInput(category="c", topic="t", content="body")
    entry = build_entry(params, fixed_now)

    assert entry.created_at == entry.updated_at
    assert entry.tags == ()
