"""Show or change persisted settings."""

from typing import Optional

import typer
from pydantic import ValidationError
from rich.table import Table

from ...config import CONFIG_KEYS, config_path, load_settings, save_settings, set_value
from ..app import app, console


def _show() -> None:
    settings = load_settings()

    generator = Table(title="Generator")
    generator.add_column("Key")
    generator.add_column("Value")
    generator.add_row("generator.base_package", settings.base_package)
    generator.add_row("generator.workers", str(settings.workers))
    generator.add_row("generator.equivalents_file", settings.equivalents_file or "(bundled)")
    console.print(generator)

    logging_table = Table(title="Logging")
    logging_table.add_column("Key")
    logging_table.add_column("Value")
    logging_table.add_row("logging.level", settings.log_level)
    console.print(logging_table)

    console.print(f"Config file: {config_path()}")


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show | set"),
    key: Optional[str] = typer.Argument(None, help="Dotted setting key"),
    value: Optional[str] = typer.Argument(None, help="New value"),
) -> None:
    """Show or change lambdagen settings."""
    if action == "show":
        _show()
        return

    if action != "set":
        console.print(f"[red]✗[/red] Unknown action: {action} (expected show or set)")
        raise typer.Exit(1)

    if key is None or value is None:
        console.print("[red]✗[/red] Usage: lambdagen config set KEY VALUE")
        raise typer.Exit(1)

    if key not in CONFIG_KEYS:
        console.print(f"[red]✗[/red] Unknown key: {key}")
        console.print(f"Valid keys: {', '.join(CONFIG_KEYS)}")
        raise typer.Exit(1)

    try:
        settings = set_value(load_settings(), key, value)
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    path = save_settings(settings)
    console.print(f"[green]✓[/green] {key} = {value} (saved to {path})")
