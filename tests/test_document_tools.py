"""Tests for the document generation tools."""

from datetime import date

import pytest


@pytest.fixture
def fixed_today(monkeypatch):
    from business_planner.tools import document_tools

    monkeypatch.setattr(document_tools, "_today", lambda: date(2025, 3, 7))


def test_executive_summary_defaults(invoke):
    text = invoke(
        "generate-executive-summary",
        businessName="Acme", businessIdea="builds analytics dashboards", targetMarket="retailers",
    )

    assert text.startswith("# Executive Summary")
    assert "**Acme** builds analytics dashboards" in text
    assert "Acme will compete effectively through:" in text
    assert "Investment requirements include:" in text


def test_executive_summary_funding_request(invoke):
    text = invoke(
        "generate-executive-summary",
        businessName="Acme", businessIdea="analytics", targetMarket="retailers",
        fundingRequest=250000, competitiveAdvantage="Proprietary data",
    )

    assert "We are seeking $250,000 in funding to:" in text
    assert "Proprietary data" in text
    assert "will compete effectively through" not in text


def test_company_description_location(invoke):
    text = invoke(
        "generate-company-description",
        businessName="Acme", industry="retail", businessType="LLC", location="Portland",
    )

    assert "**Acme** is a LLC company operating in the retail industry." in text
    assert "Based in Portland, we are positioned" in text
    assert "**Primary Location**: Portland" in text


def test_company_description_defaults(invoke):
    from business_planner.tools.document_tools import DEFAULT_CORE_VALUES, LOCATION_STRATEGY

    text = invoke("generate-company-description", businessName="Acme", industry="retail", businessType="LLC")

    assert "We are positioned" in text
    assert LOCATION_STRATEGY in text
    assert DEFAULT_CORE_VALUES in text


def test_company_description_custom_values(invoke):
    text = invoke(
        "generate-company-description",
        businessName="Acme", industry="retail", businessType="LLC",
        coreValues="Speed above all", missionStatement="Make retail simple",
    )

    assert "Speed above all" in text
    assert "Make retail simple" in text


def test_marketing_strategy_channels(invoke):
    default = invoke("generate-marketing-strategy", targetMarket="students")
    custom = invoke("generate-marketing-strategy", targetMarket="students", marketingChannels="campus events")

    assert default.startswith("# Marketing & Sales Strategy")
    assert "Multi-channel distribution approach:" in default
    assert "Utilizing campus events as primary distribution channels:" in custom


def test_operations_plan(invoke):
    text = invoke("generate-operations-plan", businessType="bakery", staffingPlan="Two bakers")

    assert text.startswith("# Operations & Management Plan")
    assert "**Business Type**: bakery" in text
    assert "Two bakers" in text


def test_compile_uses_placeholders(invoke, fixed_today):
    text = invoke("compile-business-plan", businessName="Acme")

    assert text.startswith("# Acme - Comprehensive Business Plan")
    assert "*Generated on 3/7/2025*" in text
    assert "*[Executive Summary section to be completed]*" in text
    assert "*[Operations Plan section to be completed]*" in text
    assert "The organizational structure of Acme" in text
    assert "## Appendices" in text
    assert "**Last Updated**: 3/7/2025" in text
    assert "**Prepared By**: Acme Management Team" in text
    assert "© 2025 Acme. All rights reserved." in text


def test_compile_includes_supplied_sections(invoke, fixed_today):
    text = invoke(
        "compile-business-plan",
        businessName="Acme",
        executiveSummary="## Executive Summary\n\nWe sell widgets.",
        fundingRequest="## Funding Request\n\nSeeking $1M.",
    )

    assert "We sell widgets." in text
    assert "Seeking $1M." in text
    assert "Executive Summary section to be completed" not in text
    assert "Potential exit strategies" not in text


def test_compile_section_order(invoke, fixed_today):
    text = invoke("compile-business-plan", businessName="Acme")

    markers = [
        "*[Executive Summary section", "*[Company Description section", "*[Market Analysis section",
        "## Organization & Management", "*[Marketing & Sales Strategy section", "*[Operations Plan section",
        "## Financial Projections", "## Funding Request", "## Appendices",
    ]
    body = text.split("## Table of Contents")[1]
    body = body[body.index("---"):]
    positions = [body.index(m) for m in markers]
    assert positions == sorted(positions)


def test_compile_is_stable_for_a_given_day(invoke, fixed_today):
    assert invoke("compile-business-plan", businessName="Acme") == invoke("compile-business-plan", businessName="Acme")


def test_save_markdown_by_default(invoke, output_dir):
    text = invoke("save-business-plan", businessPlan="# Plan\n- item", filename="acme-plan")

    saved = output_dir / "acme-plan.md"
    assert saved.read_text(encoding="utf-8") == "# Plan\n- item"
    assert text.startswith("✅ Business plan successfully saved!")
    assert "- **Filename**: acme-plan.md" in text
    assert "- **Format**: markdown" in text
    assert "- **Size**: 13 characters" in text
    assert f"**File Location**: {saved.resolve()}" in text


def test_save_html(invoke, output_dir):
    text = invoke("save-business-plan", businessPlan="# Title", filename="test", format="html")

    saved = output_dir / "test.html"
    assert saved.read_text(encoding="utf-8") == "<h1>Title</h1>"
    assert "- **Format**: html" in text
    assert "- **Size**: 14 characters" in text


def test_save_text(invoke, output_dir):
    invoke("save-business-plan", businessPlan="# Plain", filename="notes", format="text")
    assert (output_dir / "notes.txt").read_text(encoding="utf-8") == "# Plain"


def test_save_overwrites(invoke, output_dir):
    invoke("save-business-plan", businessPlan="first", filename="plan")
    invoke("save-business-plan", businessPlan="second", filename="plan")

    assert (output_dir / "plan.md").read_text(encoding="utf-8") == "second"


@pytest.mark.parametrize("filename", ["../escape", "nested/plan", "..", "back\\slash"])
def test_save_rejects_unsafe_filenames(registry, output_dir, filename):
    result = registry.invoke("save-business-plan", {"businessPlan": "# Plan", "filename": filename})

    assert result.is_error is False
    assert result.text.startswith("❌ Error saving business plan:")
    assert "write permissions" in result.text
    assert not (output_dir.parent / "escape.md").exists()


def test_save_reports_write_failure(invoke, tmp_path, monkeypatch):
    from business_planner.config import Config

    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied")
    monkeypatch.setattr(Config, "OUTPUT_DIR", blocker)

    text = invoke("save-business-plan", businessPlan="# Plan", filename="plan")

    assert text.startswith("❌ Error saving business plan:")
    assert text.endswith("Please ensure you have write permissions to the output directory and try again.")
