"""
Business Planner MCP Server
FastMCP front end over the tool registry

Architecture:
- Tools are declared once, in the registry (tools/*)
- This module only exposes them over MCP: one FastMCP tool per definition,
  with a keyword signature built from the tool's input model
- Validation, defaults and error text stay in the registry; the MCP
  signature only advertises field kinds and required flags
"""

import inspect
from typing import Annotated, Any, Callable, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError as MCPToolError
from mcp.types import ToolAnnotations
from pydantic import Field

from .config import Config
from .registry import ToolDefinition, ToolRegistry, field_kind
from .tools import build_registry
from .utils.logging import logger


def _parameter(wire: str, info) -> inspect.Parameter:
    """Loose MCP parameter for one input field

    Every parameter is optional and untyped so raw values reach
    ``ToolDefinition.parse``; the kind and required flag are advertised
    in the listed schema only.
    """
    kind, choices = field_kind(info.annotation)
    hints = {"type": kind if kind == "number" else "string"}
    if choices:
        hints["enum"] = list(choices)

    description = info.description or ""
    if info.is_required():
        description = f"{description} (required)".lstrip()

    annotation = Annotated[Any, Field(description=description, json_schema_extra=hints)]
    return inspect.Parameter(wire, inspect.Parameter.KEYWORD_ONLY, default=None, annotation=annotation)


def make_tool_function(registry: ToolRegistry, definition: ToolDefinition) -> Callable[..., str]:
    """
    Build the function FastMCP introspects for one registry tool

    The function takes the tool's wire names as keyword arguments, drops
    the ones left unset, and forwards them to ``registry.dispatch``.
    Rejected calls surface as MCP tool errors carrying the registry's text.
    """
    name = definition.name

    def tool_function(**kwargs) -> str:
        arguments = {k: v for k, v in kwargs.items() if v is not None}
        result = registry.dispatch(name, arguments)
        if result.is_error:
            raise MCPToolError(result.text)
        return result.text

    tool_function.__name__ = name.replace("-", "_")
    tool_function.__doc__ = definition.description
    tool_function.__signature__ = inspect.Signature(
        [_parameter(wire, info) for wire, _, info in definition.fields()],
        return_annotation=str,
    )
    return tool_function


def register_registry_tools(mcp: FastMCP, registry: ToolRegistry) -> None:
    """Expose every registry tool on the FastMCP server"""
    for definition in registry.definitions():
        mcp.add_tool(
            make_tool_function(registry, definition),
            name=definition.name,
            title=definition.title,
            description=definition.description,
            annotations=ToolAnnotations(
                title=definition.title,
                readOnlyHint=definition.read_only,
                idempotentHint=True,
                openWorldHint=False,
            ),
            structured_output=False,
        )


def create_server(registry: Optional[ToolRegistry] = None) -> FastMCP:
    """
    Create and configure the MCP server

    Args:
        registry: Pre-built registry (default: build from Config.ENABLED_SUITES)

    Returns:
        Configured FastMCP server instance
    """
    # Validate configuration
    try:
        Config.validate()
        if Config.DEBUG:
            logger.info(Config.display())
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    if registry is None:
        registry = build_registry()

    # Create server
    mcp = FastMCP(Config.SERVER_NAME)

    logger.info("Registering tools...")
    register_registry_tools(mcp, registry)

    logger.info(f"Server '{Config.SERVER_NAME}' initialized with {len(registry)} tools")
    return mcp


def main():
    """Main entry point"""
    try:
        logger.info("Starting Business Planner MCP Server...")
        mcp = create_server()
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
