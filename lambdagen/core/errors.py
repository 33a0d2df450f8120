"""Exception hierarchy for the generator.

Only NotProcessableError is entity-scoped: the drivers catch it, record a
failure and move on to the next candidate. Every other error aborts the run.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.entity import Signature
    from .models.results import GenerationFailure
    from .models.validation import ValidationIssue


class GeneratorError(Exception):
    """Base exception for all generator errors."""


class NotProcessableError(GeneratorError):
    """A stage declared that one entity cannot be produced.

    Args:
        stage_id: Identifier of the stage raising the error
        signature: Signature of the offending entity
        reason: Human-readable explanation
        cause: Optional underlying exception
    """

    def __init__(
        self,
        stage_id: str,
        signature: "Signature",
        reason: str,
        cause: BaseException | None = None,
    ):
        super().__init__(f"[{stage_id}] {signature}: {reason}")
        self.stage_id = stage_id
        self.signature = signature
        self.reason = reason
        self.cause = cause

    def to_failure(self) -> "GenerationFailure":
        from .models.results import GenerationFailure

        return GenerationFailure(
            stage=self.stage_id,
            signature=self.signature,
            reason=self.reason,
            cause=repr(self.cause) if self.cause is not None else None,
        )


class ChainConfigurationError(GeneratorError):
    """The stage chain is malformed (empty, duplicate ids, unmet requirements)."""


class DomainConfigurationError(ChainConfigurationError):
    """The domain configuration is contradictory or out of range."""

    def __init__(self, issues: list["ValidationIssue"]):
        self.issues = issues
        details = "; ".join(issue.message for issue in issues)
        super().__init__(f"invalid domain configuration: {details}")


class UnsupportedOperationError(GeneratorError):
    """The requested operation is not supported on this object."""


class DuplicateSignatureError(GeneratorError):
    """Two accepted entities share a signature."""


class InvalidTransitionError(GeneratorError):
    """An entity status change that the lifecycle does not allow."""
