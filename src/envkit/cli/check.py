"""
envkit check - Validate dotenv files.

Loads the files into an isolated store and verifies required variables.
"""

from pathlib import Path

import typer
from rich.console import Console

from envkit.cli.common import load_isolated, prepare
from envkit.exceptions import EnvkitError
from envkit.utils.logging import get_logger
from envkit.validation import check_required

logger = get_logger("envkit.cli.check")

console = Console(soft_wrap=True)


def check(
    files: list[str] | None = typer.Argument(None, help="Dotenv files to load (default: from envkit.yaml, else .env)"),
    require: list[str] | None = typer.Option(None, "--require", "-r", help="Variable that must be set (repeatable)"),
    env: str | None = typer.Option(None, "--env", "-e", help="Environment overlay for envkit.yaml"),
    project_dir: Path | None = typer.Option(None, "--project-dir", "-d", help="Project directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """
    Load dotenv files and check that required variables are set.
    """
    try:
        project_dir, config = prepare(project_dir, env, verbose)
        store, loaded = load_isolated(files, project_dir, config)
        check_required([*config.required, *(require or [])], store)
    except EnvkitError as e:
        logger.debug(f"Check failed: {e.message}")
        console.print(f"Error: {e.message}", style="red", markup=False)
        raise typer.Exit(1) from e

    console.print(
        f"OK: {len(store)} variable(s) loaded from {len(loaded)} file(s)",
        style="green",
        markup=False,
    )
