"""Stage results, failure records and run reports."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .entity import Entity, Signature


class StageOutcome(str, Enum):
    CONTINUE = "continue"
    ACCEPT = "accept"
    REJECT = "reject"


class StageResult(BaseModel):
    """Tagged result every stage returns.

    ``CONTINUE`` hands the entity to the next stage, ``ACCEPT`` ends the
    chain with an accepted entity and ``REJECT`` ends it with a failure.
    """

    model_config = ConfigDict(frozen=True)

    outcome: StageOutcome
    reason: str | None = None

    @classmethod
    def proceed(cls) -> "StageResult":
        return cls(outcome=StageOutcome.CONTINUE)

    @classmethod
    def accept(cls) -> "StageResult":
        return cls(outcome=StageOutcome.ACCEPT)

    @classmethod
    def reject(cls, reason: str) -> "StageResult":
        return cls(outcome=StageOutcome.REJECT, reason=reason)


class GenerationFailure(BaseModel):
    """Why one candidate was not produced."""

    model_config = ConfigDict(frozen=True)

    stage: str
    signature: Signature
    reason: str
    cause: str | None = None


class EquivalentMatch(BaseModel):
    """A candidate skipped because the standard library already has it."""

    model_config = ConfigDict(frozen=True)

    signature: Signature
    name: str


class GenerationReport(BaseModel):
    """Summary of one generation run."""

    seed_count: int = 0
    accepted: list[Entity] = Field(default_factory=list)
    equivalents: list[EquivalentMatch] = Field(default_factory=list)
    failures: list[GenerationFailure] = Field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)

    @property
    def equivalent_count(self) -> int:
        return len(self.equivalents)

    @property
    def rejected_count(self) -> int:
        return len(self.failures)
