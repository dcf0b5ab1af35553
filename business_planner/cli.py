"""Business Planner CLI."""

import json
import sys

import click
from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def parse_assignments(assignments) -> dict:
    """Turn ``key=value`` pairs into an argument map (values stay strings)"""
    arguments = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got {item!r}", param_hint="ARGUMENTS")
        arguments[key.strip()] = value
    return arguments


@click.group()
def main():
    """Business Planner - template-driven business plan tools."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"business-planner v{__version__}")


@main.command()
def config():
    """Show the active configuration."""
    from .config import Config
    console.print(Config.display(), markup=False)


@main.command()
@click.option("--suite", "-s", default=None, help="Only list tools from this suite")
def tools(suite: str):
    """List registered tools."""
    from .tools import build_registry

    registry = build_registry()
    definitions = registry.definitions(suite)

    if not definitions:
        console.print(f"[yellow]No tools registered{' in ' + suite if suite else ''}[/yellow]")
        return

    table = Table(title=f"Tools ({len(definitions)})")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Suite", style="dim")
    table.add_column("Required")

    for definition in definitions:
        table.add_row(
            definition.name,
            definition.title,
            definition.suite or "",
            ", ".join(definition.required_fields()) or "-",
        )

    console.print(table)


@main.command()
@click.argument("name")
def describe(name: str):
    """Show a tool's description and input fields."""
    from .errors import ToolError
    from .tools import build_registry

    registry = build_registry()
    try:
        definition = registry.get(name)
    except ToolError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)

    console.print(f"\n[bold]{definition.title}[/bold] ({definition.name})")
    console.print(f"  {definition.description}")
    if not definition.read_only:
        console.print("  [yellow]Writes files[/yellow]")
    console.print()

    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Kind")
    table.add_column("Required")
    table.add_column("Description")

    for field, entry in definition.input_schema().items():
        kind = entry["kind"]
        if "enumValues" in entry:
            kind = f"enum ({' | '.join(entry['enumValues'])})"
        table.add_row(
            field,
            kind,
            "[green]yes[/green]" if entry["required"] else "no",
            entry["description"],
        )

    console.print(table)


@main.command()
@click.argument("name")
@click.argument("arguments", nargs=-1)
@click.option("--json", "json_args", default=None, help="Arguments as a JSON object")
def invoke(name: str, arguments, json_args: str):
    """Run a tool and print its text.

    ARGUMENTS are key=value pairs using the tool's field names, e.g.
    businessName="Acme Analytics" industry=technology
    """
    from .schemas import InvocationRequest
    from .tools import build_registry

    args = {}
    if json_args:
        try:
            args = json.loads(json_args)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--json")
        if not isinstance(args, dict):
            raise click.BadParameter("Expected a JSON object", param_hint="--json")
    args.update(parse_assignments(arguments))

    request = InvocationRequest(tool_name=name, arguments=args)
    registry = build_registry()
    result = registry.dispatch(request.tool_name, request.arguments)

    # Tool text is markdown, not rich markup
    click.echo(result.text)
    if result.is_error:
        sys.exit(1)


@main.command()
def serve():
    """Run the MCP server over stdio."""
    from .server import main as run_server
    run_server()


if __name__ == "__main__":
    main()
