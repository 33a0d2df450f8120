"""Data models for lambdagen.

This package contains the Pydantic models used across the generator:
- kinds.py: Parameter/return kinds and interface families
- entity.py: Signatures, entities and their lifecycle
- equivalence.py: Standard-library equivalence registry
- domain.py: Domain configuration for enumeration
- results.py: Stage results, failures and run reports
- validation.py: Validation issues and results
"""

from .kinds import Kind, LambdaType, PRIMITIVE_KINDS, sort_kinds
from .entity import (
    MAX_ARITY,
    Signature,
    Entity,
    EntityStatus,
    classify,
    package_path,
)
from .equivalence import EquivalenceEntry, EquivalenceRegistry
from .domain import DomainConfig
from .results import (
    StageOutcome,
    StageResult,
    GenerationFailure,
    EquivalentMatch,
    GenerationReport,
)
from .validation import Severity, ValidationIssue, ValidationResult

__all__ = [
    # Kinds
    "Kind",
    "LambdaType",
    "PRIMITIVE_KINDS",
    "sort_kinds",
    # Entity
    "MAX_ARITY",
    "Signature",
    "Entity",
    "EntityStatus",
    "classify",
    "package_path",
    # Equivalence
    "EquivalenceEntry",
    "EquivalenceRegistry",
    # Domain
    "DomainConfig",
    # Results
    "StageOutcome",
    "StageResult",
    "GenerationFailure",
    "EquivalentMatch",
    "GenerationReport",
    # Validation
    "Severity",
    "ValidationIssue",
    "ValidationResult",
]
