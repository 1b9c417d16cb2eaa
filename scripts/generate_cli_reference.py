#!/usr/bin/env python3
"""Generate CLI reference documentation from typer app."""

import inspect
import sys
from pathlib import Path

# Add parent directory to path to import periodpick
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import Any

from typer.models import ArgumentInfo, OptionInfo

from periodpick.cli import app


def format_option(param_name: str, option: OptionInfo) -> str:
    """Format an option with its flags and help text."""
    flags = list(option.param_decls or []) or [f"--{param_name.replace('_', '-')}"]
    parts = [f"- {', '.join(f'`{flag}`' for flag in flags)}"]

    if option.help:
        parts.append(f": {option.help}")

    if option.default is not None and option.default is not False and option.default is not ...:
        parts.append(f" (default: {option.default})")

    return "".join(parts)


def format_argument(param_name: str, argument: ArgumentInfo) -> str:
    """Format a positional argument with its help text."""
    line = f"- `{param_name.upper()}` (required)"
    if argument.help:
        line += f": {argument.help}"
    return line


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        f"periodpick {command_name}",
        "```",
        "",
    ]

    params = inspect.signature(callback).parameters
    arguments = [(name, p.default) for name, p in params.items() if isinstance(p.default, ArgumentInfo)]
    options = [(name, p.default) for name, p in params.items() if isinstance(p.default, OptionInfo)]

    if arguments:
        lines.append("**Arguments:**")
        lines.append("")
        lines.extend(format_argument(name, argument) for name, argument in arguments)
        lines.append("")

    if options:
        lines.append("**Options:**")
        lines.append("")
        lines.extend(format_option(name, option) for name, option in options)
        lines.append("")

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all periodpick CLI commands and options.",
        "",
        "Periods are written as `all`, `YYYY` or `YYYY-MM`.",
        "",
        "## Usage",
        "",
        "```bash",
        "periodpick [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda x: x.name or (x.callback.__name__ if x.callback else ""),
    )
    for command_obj in commands:
        command_name = command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")
        lines.append(generate_command_doc(command_name, command_obj))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
