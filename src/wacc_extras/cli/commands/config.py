"""
wacc-extras config - Configuration inspection commands.

Usage:
    wacc-extras config show
    wacc-extras config show runner
    wacc-extras config show --json
    wacc-extras config path
"""

import json
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from wacc_extras.config import ConfigurationError, get_nested_value, load_config
from wacc_extras.storage.paths import get_global_config_path

app = typer.Typer(
    name="config",
    help="Configuration inspection.",
)

console = Console()


@app.command()
def show(
    section: Annotated[
        str | None,
        typer.Argument(
            help="Config section or key to show (e.g., 'runner', 'logging.level').",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    config_dict = config.model_dump(mode="json")
    value = config_dict
    if section:
        parent, _, leaf = section.rpartition(".")
        container = get_nested_value(config_dict, parent) if parent else config_dict
        if not isinstance(container, dict) or leaf not in container:
            console.print(f"[red]Section '{section}' not found in configuration.[/red]")
            raise typer.Exit(1)
        value = container[leaf]

    if json_output:
        console.print_json(json.dumps(value))
        return

    output = yaml.dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if section:
        console.print(Panel(Syntax(output, "yaml", theme="monokai"), title=f"[cyan]{section}[/cyan]"))
    else:
        console.print(Syntax(output, "yaml", theme="monokai"))


@app.command()
def path() -> None:
    """Show the configuration file location."""
    config_path = get_global_config_path()
    status = "[green]exists[/green]" if config_path.exists() else "[dim]not found[/dim]"
    console.print(f"{config_path} ({status})")
