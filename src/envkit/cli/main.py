"""
Main CLI entry point.
"""

import typer

from envkit import __version__
from envkit.cli import check, show


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"envkit version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="envkit",
    help="envkit - Load and validate dotenv files",
    add_completion=False,
)

# Register subcommands
app.command("check")(check.check)
app.command("show")(show.show)


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    envkit - Load and validate dotenv files.

    Run 'envkit <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
