"""Admin commands for initializing configuration."""

import sys
from datetime import date

from rich.console import Console
from rich.markup import escape

from periodpick.config import create_default_config, get_config_path, parse_period
from periodpick.dates import default_bounds

console = Console()


def init_command(force: bool = False, minimum: str | None = None, maximum: str | None = None) -> None:
    """Write the config file with the given or default bounds."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite[/dim]")
        sys.exit(1)

    try:
        fallback = default_bounds(date.today())
        lower = parse_period(minimum) if minimum else fallback[0]
        upper = parse_period(maximum) if maximum else fallback[1]
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path, (lower, upper))
    except OSError as e:
        console.print(f"[red]Could not write config: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Bounds: {lower.description} to {upper.description}[/dim]")
