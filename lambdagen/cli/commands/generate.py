"""Run the generation pipeline over a domain file."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.table import Table

from ...config import load_settings
from ...core.errors import DomainConfigurationError
from ...core.models import DomainConfig, EquivalenceRegistry
from ...generator import GeneratorCache, describe, generate, load_equivalents
from ..app import app, console

MAX_FAILURES_SHOWN = 20


@app.command("generate")
def generate_command(
    domain_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Domain configuration YAML file"
    ),
    equivalents: Optional[Path] = typer.Option(
        None, "--equivalents", "-e", help="Standard-library seed data (default: bundled JDK list)"
    ),
    no_standard: bool = typer.Option(
        False, "--no-standard", help="Do not skip signatures the standard library provides"
    ),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker threads"),
    manifest: Optional[Path] = typer.Option(
        None, "--manifest", "-m", help="Write renderer metadata for accepted interfaces"
    ),
) -> None:
    """Enumerate a domain and report accepted, equivalent and rejected variants."""
    settings = load_settings()

    try:
        config = DomainConfig.from_yaml(domain_file)
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]✗[/red] Could not parse {domain_file}: {e}")
        raise typer.Exit(1)

    if no_standard:
        registry = EquivalenceRegistry()
    else:
        try:
            registry = load_equivalents(equivalents or settings.equivalents_file)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            console.print(f"[red]✗[/red] Could not load equivalents: {e}")
            raise typer.Exit(1)

    cache = GeneratorCache.get_instance()
    cache.set_equivalents(registry)

    try:
        report = generate(config, cache=cache, workers=workers or settings.workers)
    except DomainConfigurationError as e:
        for issue in e.issues:
            console.print(f"[red]ERROR[/red] {issue}")
        raise typer.Exit(1)

    table = Table(title="Generation")
    table.add_column("Result")
    table.add_column("Count", justify="right")
    table.add_row("Seeds", str(report.seed_count))
    table.add_row("Accepted", str(report.accepted_count))
    table.add_row("Equivalent", str(report.equivalent_count))
    table.add_row("Rejected", str(report.rejected_count))
    console.print(table)

    for failure in report.failures[:MAX_FAILURES_SHOWN]:
        console.print(f"[yellow]rejected[/yellow] [{failure.stage}] {failure.signature}: {failure.reason}")
    hidden = report.rejected_count - MAX_FAILURES_SHOWN
    if hidden > 0:
        console.print(f"... and {hidden} more")

    if manifest is not None:
        records = [describe(entity, settings.base_package) for entity in cache.get_accepted()]
        manifest.parent.mkdir(parents=True, exist_ok=True)
        with open(manifest, "w") as f:
            yaml.safe_dump({"interfaces": records}, f, sort_keys=False)
        console.print(f"[green]✓[/green] Wrote {len(records)} interface(s) to {manifest}")
