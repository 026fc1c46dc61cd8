"""
envkit show - Display resolved variables.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envkit.cli.common import load_isolated, prepare
from envkit.exceptions import EnvkitError
from envkit.values import render_scalar, type_of

console = Console(soft_wrap=True)

MASK = "***"


def show(
    files: list[str] | None = typer.Argument(None, help="Dotenv files to load (default: from envkit.yaml, else .env)"),
    mask: bool = typer.Option(False, "--mask", "-m", help="Hide values"),
    env: str | None = typer.Option(None, "--env", "-e", help="Environment overlay for envkit.yaml"),
    project_dir: Path | None = typer.Option(None, "--project-dir", "-d", help="Project directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """
    Load dotenv files and print every resolved variable with its type.
    """
    try:
        project_dir, config = prepare(project_dir, env, verbose)
        store, _ = load_isolated(files, project_dir, config)
    except EnvkitError as e:
        console.print(f"Error: {e.message}", style="red", markup=False)
        raise typer.Exit(1) from e

    if not len(store):
        console.print("[yellow]No variables found[/yellow]")
        return

    table = Table(title=f"Variables ({len(store)})", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Value", style="dim")

    for name, value in store.items():
        table.add_row(Text(name), type_of(value).value, Text(MASK if mask else render_scalar(value)))

    console.print(table)
