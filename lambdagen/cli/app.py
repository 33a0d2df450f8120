"""Typer application and shared console."""

import typer
from rich.console import Console

from .. import __version__
from ..config import configure_logging, load_settings

app = typer.Typer(
    name="lambdagen",
    help="Generate specialized functional interface descriptors.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"lambdagen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level."),
) -> None:
    """lambdagen: functional interface generator."""
    level = "INFO" if verbose else load_settings().log_level
    configure_logging(level)


# Register commands
from .commands import config, generate, validate  # noqa: E402,F401
