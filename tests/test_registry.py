"""Tests for the tool registry and dispatcher."""

import pytest

from business_planner.errors import (
    DuplicateToolError,
    InvalidChoiceError,
    MissingRequiredFieldError,
    NumericInputError,
    UnknownToolError,
)
from business_planner.registry import ToolDefinition, ToolRegistry, field_kind
from business_planner.schemas import SwotAnalysisInput


EXPECTED_TOOLS = {
    "business-consultant": {
        "perform-swot-analysis", "perform-pest-analysis", "generate-financial-projections",
        "generate-market-research", "suggest-innovations", "analyze-supply-chain",
    },
    "document-generation": {
        "generate-executive-summary", "generate-company-description", "generate-marketing-strategy",
        "generate-operations-plan", "compile-business-plan", "save-business-plan",
    },
    "knowledge-base": {
        "query-industry-knowledge", "research-business-models", "research-regulations",
        "query-financial-benchmarks", "research-best-practices", "research-technology-trends",
        "store-knowledge",
    },
    "market-research": {
        "conduct-deep-market-analysis", "analyze-competitive-landscape",
        "research-customer-personas", "validate-market-opportunity",
    },
    "orchestration": {
        "generate-complete-business-plan", "run-agentic-research", "assess-business-viability",
        "develop-research-strategy", "track-generation-progress",
    },
}


def _swot_definition(name="perform-swot-analysis"):
    return ToolDefinition(
        name=name,
        title="SWOT Analysis Generator",
        description="Generate comprehensive SWOT analysis for business planning",
        input_model=SwotAnalysisInput,
    )


def test_all_suites_registered(registry):
    assert len(registry) == 28
    for suite, names in EXPECTED_TOOLS.items():
        assert set(registry.names(suite)) == names


def test_names_are_unique(registry):
    names = registry.names()
    assert len(names) == len(set(names))


def test_every_tool_has_title_and_description(registry):
    for definition in registry.definitions():
        assert definition.title
        assert definition.description


def test_only_save_writes_files(registry):
    writers = [d.name for d in registry.definitions() if not d.read_only]
    assert writers == ["save-business-plan"]


def test_duplicate_registration_rejected():
    registry = ToolRegistry()
    registry.register(_swot_definition(), lambda params: "first")

    with pytest.raises(DuplicateToolError):
        registry.register(_swot_definition(), lambda params: "second")


def test_decorator_returns_handler():
    registry = ToolRegistry()

    def handler(params):
        return f"hello {params.business_name}"

    decorated = registry.tool(
        "greet", title="Greeter", description="Say hello", input_model=SwotAnalysisInput
    )(handler)

    assert decorated is handler
    assert "greet" in registry
    assert registry.invoke("greet", {"businessName": "Acme", "industry": "retail"}).text == "hello Acme"


def test_get_unknown_tool(registry):
    with pytest.raises(UnknownToolError):
        registry.get("no-such-tool")


def test_invoke_unknown_tool(registry):
    with pytest.raises(UnknownToolError):
        registry.invoke("no-such-tool", {})


def test_dispatch_unknown_tool_returns_error_envelope(registry):
    result = registry.dispatch("no-such-tool", {})

    assert result.is_error is True
    assert result.text.startswith("❌")
    assert "no-such-tool" in result.text


def test_invoke_returns_single_text_block(registry):
    result = registry.invoke("perform-swot-analysis", {"businessName": "Acme", "industry": "retail"})

    assert result.is_error is False
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.text.startswith("# SWOT Analysis for Acme")


def test_envelope_serializes_with_wire_names(registry):
    result = registry.invoke("perform-swot-analysis", {"businessName": "Acme", "industry": "retail"})
    dumped = result.model_dump(by_alias=True)

    assert dumped["isError"] is False
    assert dumped["content"][0]["type"] == "text"


def test_missing_required_field(registry):
    with pytest.raises(MissingRequiredFieldError) as exc:
        registry.invoke("perform-swot-analysis", {"industry": "retail"})

    assert exc.value.field == "businessName"
    assert exc.value.tool_name == "perform-swot-analysis"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_required_field_is_missing(registry, value):
    with pytest.raises(MissingRequiredFieldError):
        registry.invoke("perform-swot-analysis", {"businessName": value, "industry": "retail"})


def test_missing_required_field_is_error_envelope_via_dispatch(registry):
    result = registry.dispatch("perform-swot-analysis", {"industry": "retail"})

    assert result.is_error is True
    assert "businessName" in result.text


def test_non_numeric_value_rejected(registry):
    with pytest.raises(NumericInputError) as exc:
        registry.invoke("generate-financial-projections", {
            "startupCosts": "lots", "monthlyExpenses": 5000, "year1Revenue": 120000,
        })

    assert exc.value.field == "startupCosts"


@pytest.mark.parametrize("field", ["startupCosts", "industryGrowthRate"])
@pytest.mark.parametrize("value", [True, False])
def test_boolean_rejected_for_numeric_field(registry, field, value):
    arguments = {"startupCosts": 24000, "monthlyExpenses": 5000, "year1Revenue": 120000}
    arguments[field] = value

    with pytest.raises(NumericInputError) as exc:
        registry.invoke("generate-financial-projections", arguments)

    assert exc.value.field == field


def test_numeric_strings_are_coerced(registry):
    text = registry.invoke("generate-financial-projections", {
        "startupCosts": "24000", "monthlyExpenses": "5000", "year1Revenue": "120000",
    }).text

    assert "**Break-even Point**: 5 months" in text


def test_invalid_choice_rejected(registry, output_dir):
    with pytest.raises(InvalidChoiceError) as exc:
        registry.invoke("save-business-plan", {
            "businessPlan": "# Plan", "filename": "plan", "format": "pdf",
        })

    assert exc.value.field == "format"
    assert exc.value.choices == ("markdown", "html", "text")
    assert not output_dir.exists()


def test_blank_optional_behaves_as_absent(registry):
    blank = registry.invoke("perform-swot-analysis", {
        "businessName": "Acme", "industry": "retail", "location": "  ",
    }).text
    absent = registry.invoke("perform-swot-analysis", {"businessName": "Acme", "industry": "retail"}).text

    assert blank == absent
    assert "Flexible location strategy" in blank


def test_unknown_arguments_ignored(registry):
    text = registry.invoke("perform-swot-analysis", {
        "businessName": "Acme", "industry": "retail", "colour": "blue",
    }).text

    assert "blue" not in text


def test_snake_case_names_accepted(registry):
    text = registry.invoke("perform-swot-analysis", {"business_name": "Acme", "industry": "retail"}).text
    assert text.startswith("# SWOT Analysis for Acme")


def test_input_schema_describes_fields(registry):
    schema = registry.get("save-business-plan").input_schema()

    assert list(schema) == ["businessPlan", "filename", "format"]
    assert schema["businessPlan"]["required"] is True
    assert schema["format"]["kind"] == "enum"
    assert schema["format"]["enumValues"] == ("markdown", "html", "text")
    assert schema["format"]["required"] is False


def test_required_fields_in_declaration_order(registry):
    definition = registry.get("generate-financial-projections")
    assert definition.required_fields() == ["startupCosts", "monthlyExpenses", "year1Revenue"]


def test_field_kind():
    from typing import Literal, Optional

    assert field_kind(str) == ("string", None)
    assert field_kind(Optional[float]) == ("number", None)
    assert field_kind(Optional[Literal["a", "b"]]) == ("enum", ("a", "b"))


def test_handlers_are_idempotent(registry):
    args = {"businessName": "Acme", "businessIdea": "Analytics", "targetMarket": "SMBs"}
    first = registry.invoke("generate-executive-summary", args).text
    second = registry.invoke("generate-executive-summary", args).text
    assert first == second


def test_invocation_request_accepts_wire_names(registry):
    from business_planner.schemas import InvocationRequest

    request = InvocationRequest.model_validate({
        "toolName": "perform-pest-analysis",
        "arguments": {"businessName": "Acme", "industry": "retail"},
    })
    result = registry.dispatch(request.tool_name, request.arguments)

    assert result.is_error is False
    assert result.text.startswith("# PEST Analysis for Acme")


TIME_DEPENDENT = {"compile-business-plan", "store-knowledge", "track-generation-progress"}


def _minimal_arguments(definition):
    args = {}
    for field, entry in definition.input_schema().items():
        if entry["required"]:
            args[field] = 1000 if entry["kind"] == "number" else "sample"
    return args


def test_every_narrative_tool_is_idempotent(registry):
    for definition in registry.definitions():
        if definition.name in TIME_DEPENDENT or not definition.read_only:
            continue
        args = _minimal_arguments(definition)

        first = registry.invoke(definition.name, args).text
        second = registry.invoke(definition.name, args).text

        assert first == second, definition.name
        assert first.strip(), definition.name
