"""The ordered stage chain and its per-entity driver."""

import logging
from typing import Sequence

from ..core.errors import ChainConfigurationError, NotProcessableError
from ..core.models import Entity, GenerationFailure, StageOutcome, StageResult
from .stages import Stage, StageContext, default_stages

logger = logging.getLogger(__name__)

# Capabilities every seed entity has before the first stage runs
SEED_CAPABILITIES = frozenset({"signature"})


class Chain:
    """Fixed, ordered sequence of stages.

    The order is validated once: ids must be unique and each stage's
    requirements must be provided by a stage that runs before it.

    Raises:
        ChainConfigurationError: If the stage list is malformed
    """

    def __init__(self, stages: Sequence[Stage]):
        self._stages = tuple(stages)
        self._validate()

    def _validate(self) -> None:
        if not self._stages:
            raise ChainConfigurationError("chain must contain at least one stage")

        seen_ids: set[str] = set()
        available = set(SEED_CAPABILITIES)
        for position, stage in enumerate(self._stages, start=1):
            if not isinstance(stage, Stage):
                raise ChainConfigurationError(
                    f"chain entry {position} is {type(stage).__name__}, not a Stage"
                )
            if not stage.stage_id:
                raise ChainConfigurationError(f"stage at position {position} has no stage_id")
            if stage.stage_id in seen_ids:
                raise ChainConfigurationError(f"duplicate stage id '{stage.stage_id}'")
            seen_ids.add(stage.stage_id)

            missing = stage.requires - available
            if missing:
                raise ChainConfigurationError(
                    f"stage '{stage.stage_id}' requires {sorted(missing)} "
                    f"which no earlier stage provides"
                )
            available |= stage.provides

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    @property
    def stage_ids(self) -> list[str]:
        return [stage.stage_id for stage in self._stages]

    def run(self, entity: Entity, context: StageContext) -> GenerationFailure | None:
        """Push one entity through the chain.

        Returns:
            None when the entity was accepted, otherwise the failure that
            rejected it. The entity's status is updated either way.
        """
        entity.mark_in_progress()

        for stage in self._stages:
            try:
                result = stage.process(entity, context)
            except NotProcessableError as e:
                entity.reject()
                logger.debug(f"[chain] {stage.stage_id} rejected {entity.signature}: {e.reason}")
                return e.to_failure()

            if not isinstance(result, StageResult):
                raise TypeError(
                    f"stage '{stage.stage_id}' returned {type(result).__name__}, expected StageResult"
                )

            if result.outcome is StageOutcome.REJECT:
                entity.reject()
                logger.debug(f"[chain] {stage.stage_id} rejected {entity.signature}: {result.reason}")
                return GenerationFailure(
                    stage=stage.stage_id,
                    signature=entity.signature,
                    reason=result.reason or "rejected",
                )
            if result.outcome is StageOutcome.ACCEPT:
                logger.debug(f"[chain] {stage.stage_id} accepted {entity.signature} early")
                break

        entity.accept()
        return None


def default_chain() -> Chain:
    return Chain(default_stages())
