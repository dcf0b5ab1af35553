"""Tests for the orchestration workflow tools."""

from datetime import datetime

import pytest


PLAN_ARGS = {
    "businessName": "Acme",
    "businessIdea": "analytics for bakeries",
    "industry": "food",
    "targetMarket": "independent bakeries",
}


@pytest.fixture
def fixed_now(monkeypatch):
    from business_planner.tools import orchestration_tools

    moment = datetime(2025, 3, 7, 14, 5, 9)
    monkeypatch.setattr(orchestration_tools, "_now", lambda: moment)
    return moment


def test_complete_plan_overview(invoke):
    text = invoke("generate-complete-business-plan", **PLAN_ARGS)

    assert text.startswith("# Automated Business Plan Generation Workflow")
    assert "**Location**: To be determined" in text
    assert "- Compliance considerations for target market" in text
    assert "- Financial projections and modeling" in text
    assert "- Business case presentation" in text
    assert "BUSINESS CONTEXT: Acme in food targeting independent bakeries" in text


def test_complete_plan_lists_fifteen_steps(invoke):
    text = invoke("generate-complete-business-plan", **PLAN_ARGS)

    for step in range(1, 16):
        assert f"**✅ Step {step}:" in text


def test_complete_plan_with_financials(invoke):
    text = invoke(
        "generate-complete-business-plan",
        **PLAN_ARGS, location="Boston",
        startupCosts=50000, monthlyExpenses=8000, year1Revenue=250000, fundingRequest=150000,
    )

    assert "- Compliance considerations for Boston" in text
    assert "- Detailed financial projections (Startup: $50,000, Monthly: $8,000, Year 1: $250,000)" in text
    assert "- Funding request summary ($150,000)" in text
    assert "- Market opportunity validation for analytics for bakeries" in text


def test_complete_plan_needs_all_three_financials(invoke):
    text = invoke("generate-complete-business-plan", **PLAN_ARGS, startupCosts=50000, monthlyExpenses=8000)
    assert "- Financial projections and modeling" in text


def test_agentic_research_defaults(invoke):
    text = invoke(
        "run-agentic-research",
        businessIdea="drone delivery", industry="logistics", targetMarket="rural towns",
    )

    assert text.startswith("# Agentic Research Workflow: drone delivery")
    assert "**Research Depth**: comprehensive" in text
    assert "**Focus Areas**: Market analysis, competition, financials, regulations" in text


def test_agentic_research_depth_choice(invoke, registry):
    text = invoke(
        "run-agentic-research",
        businessIdea="drone delivery", industry="logistics", targetMarket="rural towns",
        researchDepth="deep", focusAreas="regulations",
    )
    assert "**Research Depth**: deep" in text

    rejected = registry.dispatch("run-agentic-research", {
        "businessIdea": "drone delivery", "industry": "logistics", "targetMarket": "rural towns",
        "researchDepth": "extreme",
    })
    assert rejected.is_error is True
    assert "basic, comprehensive, deep" in rejected.text


def test_viability_with_investment(invoke):
    text = invoke(
        "assess-business-viability",
        businessName="Acme", businessIdea="analytics", industry="food", targetMarket="bakeries",
        investmentLevel=100001,
    )

    assert text.startswith("# Business Viability Assessment: Acme")
    assert "**Investment**: $100,001" in text
    assert "## 🎯 Overall Viability Score: 8.2/10" in text
    assert "- **Seed Round**: $30,000 for MVP and validation" in text
    assert "- **Series A**: $70,000 for growth and scaling" in text
    assert "- **Total Funding**: $100,001 over 12-18 months" in text
    assert "### Viability Conclusion: HIGHLY VIABLE" in text


def test_viability_without_investment(invoke):
    text = invoke(
        "assess-business-viability",
        businessName="Acme", businessIdea="analytics", industry="food", targetMarket="bakeries",
    )

    assert "**Investment**: To be determined" in text
    assert "**Timeline**: Standard 12-18 month launch" in text
    assert "**Funding Considerations**:" in text
    assert "Seed Round" not in text


def test_research_strategy_defaults(invoke):
    text = invoke(
        "develop-research-strategy",
        businessContext="Bakery analytics startup", researchFindings="Bakeries lack demand forecasting",
    )

    assert text.startswith("# Research-Driven Strategy Development")
    assert "**Strategic Goals**: Growth and market leadership" in text
    assert "Bakeries lack demand forecasting" in text
    assert "Significant market opportunities identified through comprehensive research" in text
    assert "Multiple competitive advantages identified through market and competitive analysis" in text


def test_progress_with_session_id(invoke, fixed_now):
    text = invoke("track-generation-progress", businessName="Acme", sessionId="S-42")

    assert text.startswith("# Business Plan Generation Progress Tracking")
    assert "**Session ID**: S-42" in text
    assert "**Started**: 3/7/2025, 2:05:09 PM" in text
    assert "**Status**: 🟢 ACTIVE - Generation in progress" in text
    assert "80% Complete" in text
    assert "**Total Progress**: ████░░░░░░ 40% Complete" in text


def test_progress_generates_session_id(invoke, fixed_now):
    from business_planner.utils.formatting import epoch_millis

    text = invoke("track-generation-progress", businessName="Acme")
    assert f"**Session ID**: AUTO-{epoch_millis(fixed_now)}" in text
