"""Processing stages for the generation chain.

A stage inspects one entity and either enriches it (returning
``StageResult.proceed()``), ends the chain with an accepted entity
(``StageResult.accept()``) or declares it unprocessable (returning
``StageResult.reject(reason)`` or raising ``NotProcessableError``).
"""

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import NotProcessableError
from ..core.models import Entity, EquivalenceRegistry, StageResult
from .naming import COLLISION_SUFFIX, check_shape, derive_name

logger = logging.getLogger(__name__)


class StageContext(BaseModel):
    """Read-only collaborators handed to every stage invocation."""

    model_config = ConfigDict(frozen=True)

    equivalents: EquivalenceRegistry = Field(default_factory=EquivalenceRegistry)


class Stage(ABC):
    """Abstract base class for chain stages.

    Subclasses declare a stable ``stage_id`` plus the capabilities they
    need from earlier stages (``requires``) and the ones they add
    (``provides``). The chain checks these once, at construction.
    """

    stage_id: str = ""
    requires: frozenset[str] = frozenset()
    provides: frozenset[str] = frozenset()

    @abstractmethod
    def process(self, entity: Entity, context: StageContext) -> StageResult:
        """Enrich or validate one entity in place."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.stage_id!r})"


class ShapeStage(Stage):
    """Rejects parameter lists that have no interface naming scheme."""

    stage_id = "shape"
    provides = frozenset({"shape"})

    def process(self, entity: Entity, context: StageContext) -> StageResult:
        problem = check_shape(entity.signature)
        if problem is not None:
            return StageResult.reject(problem)
        return StageResult.proceed()


class NamingStage(Stage):
    """Assigns ``derived_name``."""

    stage_id = "naming"
    requires = frozenset({"shape"})
    provides = frozenset({"derived_name"})

    def process(self, entity: Entity, context: StageContext) -> StageResult:
        signature = entity.signature
        try:
            entity.derived_name = derive_name(signature)
        except ValueError as e:
            raise NotProcessableError(self.stage_id, signature, "cannot derive a name", cause=e) from e
        return StageResult.proceed()


class CollisionStage(Stage):
    """Suffixes names that would shadow a standard-library interface.

    Only reachable for extended copies of standard interfaces
    (``Function`` becomes ``Function2``) or when the registry names a
    different signature than the one the naming rules produce.
    """

    stage_id = "collision"
    requires = frozenset({"derived_name"})
    provides = frozenset({"unique_name"})

    def process(self, entity: Entity, context: StageContext) -> StageResult:
        name = entity.derived_name
        if name in context.equivalents.simple_names:
            entity.derived_name = name + COLLISION_SUFFIX
            logger.debug(f"[collision] renamed {name} -> {entity.derived_name}")
        return StageResult.proceed()


def default_stages() -> list[Stage]:
    """Stages in their production order."""
    return [ShapeStage(), NamingStage(), CollisionStage()]
