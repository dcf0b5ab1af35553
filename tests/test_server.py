"""Tests for the FastMCP bridge."""

import asyncio
import inspect

import pytest


def test_create_server_registers_every_tool(registry):
    from business_planner.server import create_server

    mcp = create_server(registry)
    tools = asyncio.run(mcp.list_tools())

    assert {tool.name for tool in tools} == set(registry.names())


def test_listed_tool_carries_schema_and_annotations(registry):
    from business_planner.server import create_server

    mcp = create_server(registry)
    tools = {tool.name: tool for tool in asyncio.run(mcp.list_tools())}

    swot = tools["perform-swot-analysis"]
    assert swot.title == "SWOT Analysis Generator"
    properties = swot.inputSchema["properties"]
    assert swot.inputSchema.get("required", []) == []
    assert properties["businessName"]["description"].endswith("(required)")
    assert not properties["targetMarket"]["description"].endswith("(required)")
    assert swot.annotations.readOnlyHint is True
    assert tools["save-business-plan"].annotations.readOnlyHint is False


def test_tool_function_signature(registry):
    from business_planner.server import make_tool_function

    fn = make_tool_function(registry, registry.get("generate-financial-projections"))
    params = inspect.signature(fn).parameters

    assert fn.__name__ == "generate_financial_projections"
    assert list(params)[:3] == ["startupCosts", "monthlyExpenses", "year1Revenue"]
    assert all(p.default is None for p in params.values())


def test_tool_function_forwards_arguments(registry):
    from business_planner.server import make_tool_function

    fn = make_tool_function(registry, registry.get("perform-swot-analysis"))
    text = fn(businessName="Acme", industry="retail", location=None, businessType=None, targetMarket=None)

    assert text.startswith("# SWOT Analysis for Acme")
    assert "Flexible location strategy" in text


def test_tool_function_raises_on_rejection(registry):
    from mcp.server.fastmcp.exceptions import ToolError

    from business_planner.server import make_tool_function

    fn = make_tool_function(registry, registry.get("perform-swot-analysis"))

    with pytest.raises(ToolError, match="businessName"):
        fn(businessName="  ", industry="retail")


def test_listed_schema_hints_field_kinds(registry):
    from business_planner.server import create_server

    mcp = create_server(registry)
    tools = {tool.name: tool for tool in asyncio.run(mcp.list_tools())}

    projections = tools["generate-financial-projections"].inputSchema["properties"]
    assert projections["startupCosts"]["type"] == "number"

    save = tools["save-business-plan"].inputSchema["properties"]
    assert save["format"]["enum"] == ["markdown", "html", "text"]


def test_call_tool_missing_required_field_uses_registry_message(registry):
    from mcp.server.fastmcp.exceptions import ToolError

    from business_planner.server import create_server

    mcp = create_server(registry)

    with pytest.raises(ToolError, match="❌ Missing required field 'businessName'"):
        asyncio.run(mcp.call_tool("perform-swot-analysis", {"industry": "tech"}))


@pytest.mark.parametrize("value", ["lots", True])
def test_call_tool_rejects_non_numeric_value(registry, value):
    from mcp.server.fastmcp.exceptions import ToolError

    from business_planner.server import create_server

    mcp = create_server(registry)

    with pytest.raises(ToolError, match="❌ Field 'startupCosts' must be a number"):
        asyncio.run(mcp.call_tool("generate-financial-projections", {
            "startupCosts": value, "monthlyExpenses": 5000, "year1Revenue": 120000,
        }))


def test_call_tool_rejects_unknown_format(registry, output_dir):
    from mcp.server.fastmcp.exceptions import ToolError

    from business_planner.server import create_server

    mcp = create_server(registry)

    with pytest.raises(ToolError, match="❌") as exc:
        asyncio.run(mcp.call_tool("save-business-plan", {
            "businessPlan": "# Plan", "filename": "plan", "format": "pdf",
        }))

    assert "format" in str(exc.value)
    assert not output_dir.exists()


def test_call_tool_returns_report_text(registry):
    from business_planner.server import create_server

    mcp = create_server(registry)
    result = asyncio.run(mcp.call_tool("perform-swot-analysis", {"businessName": "Acme", "industry": "retail"}))

    content = result[0] if isinstance(result, tuple) else result
    assert content[0].text.startswith("# SWOT Analysis for Acme")
