"""User settings and logging setup for lambdagen.

Settings live in ``config.json`` under ``$LAMBDAGEN_CONFIG_DIR``
(default ``~/.config/lambdagen``) and are addressed with dotted keys:

    generator.base_package     Java package the interfaces are placed in
    generator.workers          Threads used by generate
    generator.equivalents_file Seed data file (empty = bundled JDK list)
    logging.level              Root log level for CLI runs
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from rich.logging import RichHandler

CONFIG_DIR_ENV = "LAMBDAGEN_CONFIG_DIR"
CONFIG_FILENAME = "config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class GeneratorSettings(BaseModel):
    base_package: str = "org.lambda4j"
    workers: int = Field(default=1, ge=1)
    equivalents_file: str | None = None
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


# Dotted key -> (field name, type)
CONFIG_KEYS: dict[str, tuple[str, type]] = {
    "generator.base_package": ("base_package", str),
    "generator.workers": ("workers", int),
    "generator.equivalents_file": ("equivalents_file", str),
    "logging.level": ("log_level", str),
}


def config_path() -> Path:
    base = os.environ.get(CONFIG_DIR_ENV)
    directory = Path(base) if base else Path.home() / ".config" / "lambdagen"
    return directory / CONFIG_FILENAME


def load_settings() -> GeneratorSettings:
    """Load settings from disk, falling back to defaults if none are saved."""
    path = config_path()
    if not path.exists():
        return GeneratorSettings()
    with open(path) as f:
        return GeneratorSettings.model_validate(json.load(f))


def save_settings(settings: GeneratorSettings) -> Path:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(settings.model_dump(mode="json"), f, indent=2)
    return path


def set_value(settings: GeneratorSettings, key: str, raw: str) -> GeneratorSettings:
    """Return a copy of settings with one dotted key changed.

    Raises:
        KeyError: If the key is unknown
        ValueError: If the value has the wrong type or is out of range
    """
    if key not in CONFIG_KEYS:
        raise KeyError(key)
    field, field_type = CONFIG_KEYS[key]

    value: object = raw
    if field_type is int:
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"Invalid integer for {key}: {raw}") from None
    elif field == "equivalents_file" and raw == "":
        value = None

    data = settings.model_dump()
    data[field] = value
    return GeneratorSettings.model_validate(data)


def configure_logging(level: str = "WARNING") -> None:
    """Route log records through rich. Safe to call more than once."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
