"""Loading the standard-library equivalence seed data."""

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from ..core.models import EquivalenceEntry, EquivalenceRegistry, Signature

logger = logging.getLogger(__name__)

BUNDLED_EQUIVALENTS = "jdk_functional.yaml"


def parse_equivalents(data: dict[str, Any]) -> EquivalenceRegistry:
    """Build a registry from parsed seed data.

    Expected layout::

        equivalents:
          - name: java.util.function.IntPredicate
            parameters: [int]
            returns: boolean
            throwing: false      # optional

    Raises:
        ValueError: If an entry is malformed or two entries share a signature
    """
    raw_entries = data.get("equivalents")
    if not isinstance(raw_entries, list):
        raise ValueError("equivalence data must contain an 'equivalents' list")

    entries = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict) or "name" not in raw or "returns" not in raw:
            raise ValueError(f"equivalent #{index} needs 'name' and 'returns'")
        signature = Signature.of(
            raw.get("parameters") or [],
            raw["returns"],
            throwing=bool(raw.get("throwing", False)),
        )
        entries.append(EquivalenceEntry(signature=signature, name=raw["name"]))

    return EquivalenceRegistry(entries=tuple(entries))


def load_equivalents(path: Path | str | None = None) -> EquivalenceRegistry:
    """Load seed data from a YAML file, or the bundled JDK list when path is None."""
    if path is None:
        text = resources.files("lambdagen.data").joinpath(BUNDLED_EQUIVALENTS).read_text()
        source = BUNDLED_EQUIVALENTS
    else:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"equivalence file not found: {path}")
        text = path.read_text()
        source = str(path)

    registry = parse_equivalents(yaml.safe_load(text) or {})
    logger.info(f"[equivalents] loaded {len(registry)} entries from {source}")
    return registry
