"""Validate a domain configuration file."""

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from ...core.models import DomainConfig
from ...validation import validate_domain
from ..app import app, console


@app.command("validate")
def validate_command(
    domain_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Domain configuration YAML file"
    ),
) -> None:
    """Check a domain configuration without generating anything."""
    try:
        config = DomainConfig.from_yaml(domain_file)
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]✗[/red] Could not parse {domain_file}: {e}")
        raise typer.Exit(1)

    result = validate_domain(config)
    for issue in result.errors:
        console.print(f"[red]ERROR[/red] {issue}")
    for issue in result.warnings:
        console.print(f"[yellow]WARNING[/yellow] {issue}")

    if not result.valid:
        console.print(f"[red]✗[/red] {domain_file} is invalid ({len(result.errors)} error(s))")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] {domain_file} is valid ({config.seed_count()} candidate signatures)"
    )
