import json
import sys
from typing import Optional

import click
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from mcp_seed import __version__
from mcp_seed.config import settings
from mcp_seed.core.batch import build_servers
from mcp_seed.core.transform import transform_entry
from mcp_seed.errors import SeedError
from mcp_seed.logger import configure_logging
from mcp_seed.services.catalog_source import load_catalog
from mcp_seed.services.seed_writer import write_seed

console = Console()

# ============= Print Helpers =============

def status_panel(title: str, message: str, style: str = "cyan"):
    console.print(
        Panel(
            message,
            title=title,
            border_style=style,
            box=box.ROUNDED,
            padding=(1, 2),
        )
    )

def print_success(message: str):
    status_panel("SUCCESS", f"✅ {message}", "green")

def print_error(message: str):
    status_panel("ERROR", f"❌ {message}", "red")

def print_summary(result, output_path):
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Key", style="dim")
    table.add_column("Value")
    table.add_row("Servers written", f"[green]{len(result.servers)}[/green]")
    table.add_row("Remote skipped", f"[yellow]{len(result.skipped_remote)}[/yellow]")
    table.add_row("Failed", f"[red]{len(result.failed)}[/red]")
    table.add_row("Output", str(output_path))
    console.print(table)

    if result.failed:
        console.print(f"[red]Failed entries:[/red] {', '.join(result.failed)}")

def load_with_spinner(source: Optional[str]):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Loading MCP catalog...", total=None)
        return load_catalog(source, settings)

# ============= Commands =============

@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Log level (defaults to MCP_SEED_LOG_LEVEL or INFO)")
def cli(log_level: Optional[str]):
    """Convert the Docker MCP catalog into MCP registry seed data."""
    configure_logging(log_level or settings.log_level)


@cli.command()
@click.option("--source", "-s", default=None, help='"docker", a catalog file, or a URL')
@click.option("--output", "-o", default=None, help="Where to write the seed file")
@click.option("--include-remote/--exclude-remote", default=None, help="Also convert remote servers")
@click.option("--sort/--no-sort", "sort_entries", default=None, help="Order servers by name")
@click.option("--namespace", default=None, help="Registry namespace prefix for server names")
def build(source, output, include_remote, sort_entries, namespace):
    """Build the registry seed file from the catalog."""
    output_path = output or settings.output_path

    try:
        catalog = load_with_spinner(source)
        result = build_servers(
            catalog,
            include_remote=settings.include_remote if include_remote is None else include_remote,
            sort_entries=settings.sort_entries if sort_entries is None else sort_entries,
            namespace=namespace or settings.registry_namespace
        )
        written = write_seed(result.servers, output_path)
    except SeedError as e:
        print_error(str(e))
        sys.exit(1)

    print_success(f"Successfully created {written}")
    print_summary(result, written)


@cli.command("inspect")
@click.argument("name")
@click.option("--source", "-s", default=None, help='"docker", a catalog file, or a URL')
@click.option("--namespace", default=None, help="Registry namespace prefix for server names")
def inspect_entry(name, source, namespace):
    """Show the registry descriptor for a single catalog entry."""
    try:
        catalog = load_with_spinner(source)
    except SeedError as e:
        print_error(str(e))
        sys.exit(1)

    entry = catalog.registry.get(name)
    if entry is None:
        print_error(f"Server '{name}' not found in catalog")
        sys.exit(1)

    server = transform_entry(name, entry, namespace=namespace or settings.registry_namespace)
    rendered = json.dumps(server.to_json_dict(), indent=2, ensure_ascii=False)
    console.print(Syntax(rendered, "json", theme="monokai", word_wrap=True))


if __name__ == "__main__":
    cli()
