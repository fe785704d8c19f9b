"""Shared CLI utilities for dpp-http commands."""

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dpp_http.config import HttpConfig, load_config
from dpp_http.exceptions import DppHttpError
from dpp_http.planner.probe import FixedProbe, ToolProbe, WhichProbe
from dpp_http.planner.types import CommandPlan

console = Console()

# Placeholder shown instead of embedded python3 programs
SCRIPT_PLACEHOLDER = "<script>"


def get_config(ctx: typer.Context) -> HttpConfig:
    """Return the configuration loaded by the root callback."""
    obj = ctx.find_root().obj or {}
    config = obj.get("config")
    if config is None:
        config = load_config()
    return config


def read_config(path: Path | None) -> HttpConfig:
    """Load configuration, turning errors into a clean exit."""
    try:
        return load_config(path)
    except DppHttpError as e:
        fail(str(e))


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def make_probe(tools: list[str] | None) -> ToolProbe:
    """Use a fixed tool set when given, otherwise look tools up on PATH."""
    if tools:
        names = [name.strip() for item in tools for name in item.split(",")]
        return FixedProbe(name for name in names if name)
    return WhichProbe()


def echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


def display_args(args: tuple[str, ...]) -> str:
    shown = [SCRIPT_PLACEHOLDER if "\n" in arg else arg for arg in args]
    return " ".join(shown)


def print_plan(plan: CommandPlan) -> None:
    """Render a command plan as a table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Command", style="cyan")
    table.add_column("Arguments", overflow="fold")
    for i, cmd in enumerate(plan, start=1):
        table.add_row(str(i), cmd.command, escape(display_args(cmd.args)))
    console.print(table)
    if plan.temp_file:
        console.print(f"[dim]Temp file: {escape(plan.temp_file)}[/dim]")
    if plan.temp_dir:
        console.print(f"[dim]Staging dir: {escape(plan.temp_dir)}[/dim]")
