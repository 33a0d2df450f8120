"""Validation for lambdagen inputs.

Modules:
    domain: Arity range and kind checks for DomainConfig
"""

from ..core.models import Severity, ValidationIssue, ValidationResult
from .domain import LARGE_DOMAIN_THRESHOLD, validate_domain

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "LARGE_DOMAIN_THRESHOLD",
    "validate_domain",
]
