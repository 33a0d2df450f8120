"""Structural checks for domain configurations.

Errors block a generation run; warnings are reported but the run proceeds.
"""

from ..core.models import DomainConfig, Kind, MAX_ARITY, ValidationResult

LARGE_DOMAIN_THRESHOLD = 10_000


def validate_domain(config: DomainConfig) -> ValidationResult:
    """Validate a DomainConfig before any entity is seeded.

    Args:
        config: The domain to check

    Returns:
        ValidationResult with errors and warnings

    Example:
        >>> result = validate_domain(config)
        >>> if not result.valid:
        ...     for err in result.errors:
        ...         print(f"ERROR: {err}")
    """
    result = ValidationResult()
    low, high = config.arity_range

    # Arity range
    if low < 0:
        result.add_error("arity", f"minimum arity {low} is negative")
    if low > high:
        result.add_error("arity", f"minimum arity {low} is greater than maximum arity {high}")
    if high > MAX_ARITY:
        result.add_error("arity", f"maximum arity {high} exceeds the supported maximum of {MAX_ARITY}")

    # Parameter kinds
    if Kind.VOID in config.parameter_kinds:
        result.add_error("parameter_kinds", "void is only valid as a return kind")
    if high > 0 and not config.parameter_kinds:
        result.add_error(
            "parameter_kinds",
            f"no parameter kinds given but arities up to {high} were requested",
        )
    if high == 0 and config.parameter_kinds:
        result.add_warning(
            "parameter_kinds",
            "parameter kinds are unused because the maximum arity is 0",
        )

    # Return kinds
    if not config.return_kinds:
        result.add_error("return_kinds", "at least one return kind is required")

    if result.valid and config.seed_count() > LARGE_DOMAIN_THRESHOLD:
        result.add_warning(
            "size",
            f"domain has {config.seed_count()} cells, generation may take a while",
        )

    return result
