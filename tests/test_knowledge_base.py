"""Tests for the static knowledge tables and their lookups."""

import pytest

from business_planner import knowledge_base as kb


def test_known_industry_lookup_is_case_insensitive():
    assert kb.industry_profile("HealthCare") is kb.INDUSTRIES["healthcare"]


def test_unknown_industry_falls_back_to_technology():
    assert kb.industry_profile("aerospace") is kb.INDUSTRIES["technology"]


def test_business_model_fallback():
    assert kb.business_model_profile("Marketplace") is kb.BUSINESS_MODELS["marketplace"]
    assert kb.business_model_profile("franchise") is kb.BUSINESS_MODELS["saas"]


def test_best_practices_fallback():
    assert kb.best_practices_for("FINANCE") is kb.BEST_PRACTICES["finance"]
    assert kb.best_practices_for("legal") is kb.BEST_PRACTICES["marketing"]


@pytest.mark.parametrize("area,expected", [
    ("Artificial Intelligence", "artificial_intelligence"),
    ("blockchain", "blockchain"),
    ("IoT", "iot"),
    ("quantum computing", "artificial_intelligence"),
    (None, "artificial_intelligence"),
])
def test_technology_profile(area, expected):
    assert kb.technology_profile(area) is kb.TECHNOLOGY_TRENDS[expected]


def test_technology_key_replaces_first_space_only():
    assert kb.technology_key("Edge AI Chips") == "edge_ai chips"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        kb.INDUSTRIES["energy"] = {}
    with pytest.raises(TypeError):
        kb.INDUSTRIES["technology"]["benchmarks"]["grossMargin"] = "100%"
    assert isinstance(kb.INDUSTRIES["technology"]["trends"], tuple)
