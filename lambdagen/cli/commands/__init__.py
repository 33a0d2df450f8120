"""CLI commands for lambdagen."""

from . import (
    config,
    generate,
    validate,
)

__all__ = [
    "config",
    "generate",
    "validate",
]
