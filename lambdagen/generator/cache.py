"""Process-wide store of accepted entities and the equivalence registry.

The renderer reads from ``GeneratorCache.get_instance()``. Tests and
embedding code may also build their own instance and pass it to
``generate`` explicitly.
"""

import logging
import threading
from typing import Iterable

from ..core.errors import DuplicateSignatureError, UnsupportedOperationError
from ..core.models import Entity, EquivalenceRegistry, Signature

logger = logging.getLogger(__name__)


class GeneratorCache:
    """Accepted entities plus the equivalence registry.

    Both collections are read and replaced in bulk. The cache cannot be
    copied or pickled: two diverging copies would defeat its purpose.
    """

    _instance: "GeneratorCache | None" = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._accepted: tuple[Entity, ...] = ()
        self._equivalents = EquivalenceRegistry()

    @classmethod
    def get_instance(cls) -> "GeneratorCache":
        """Return the process-wide cache, creating it on first access."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("[cache] created process-wide cache")
        return cls._instance

    # -------------------------------------------------------------------------
    # Accepted entities
    # -------------------------------------------------------------------------

    def get_accepted(self) -> list[Entity]:
        with self._lock:
            return list(self._accepted)

    def set_accepted(self, entities: Iterable[Entity]) -> None:
        """Replace the accepted collection wholesale.

        Raises:
            DuplicateSignatureError: If two entities share a signature
        """
        entities = tuple(entities)
        seen: set[Signature] = set()
        for entity in entities:
            signature = entity.signature
            if signature in seen:
                raise DuplicateSignatureError(f"signature {signature} appears more than once")
            seen.add(signature)

        with self._lock:
            self._accepted = entities

    # -------------------------------------------------------------------------
    # Equivalence registry
    # -------------------------------------------------------------------------

    def get_equivalents(self) -> EquivalenceRegistry:
        with self._lock:
            return self._equivalents

    def set_equivalents(self, registry: EquivalenceRegistry) -> None:
        """Install the equivalence registry. Meant to happen once per process."""
        with self._lock:
            if len(self._equivalents) and registry is not self._equivalents:
                logger.warning(
                    f"[cache] replacing a populated equivalence registry "
                    f"({len(self._equivalents)} -> {len(registry)} entries)"
                )
            self._equivalents = registry

    # -------------------------------------------------------------------------
    # Duplication is unsupported
    # -------------------------------------------------------------------------

    def copy(self) -> "GeneratorCache":
        raise UnsupportedOperationError("GeneratorCache cannot be duplicated")

    def __copy__(self) -> "GeneratorCache":
        raise UnsupportedOperationError("GeneratorCache cannot be duplicated")

    def __deepcopy__(self, memo: dict) -> "GeneratorCache":
        raise UnsupportedOperationError("GeneratorCache cannot be duplicated")

    def __reduce_ex__(self, protocol):
        raise UnsupportedOperationError("GeneratorCache cannot be pickled")

    def __repr__(self) -> str:
        return (
            f"GeneratorCache(accepted={len(self._accepted)}, "
            f"equivalents={len(self._equivalents)})"
        )
