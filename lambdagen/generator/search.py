"""Lookups over accepted entities.

Every filter is optional; ``None`` means "any". Positional parameter
filters also accept ``None`` per position, so ``[Kind.OBJECT, None]``
matches every arity-2 entity whose first parameter is an object.
"""

from typing import Iterable, Sequence

from ..core.models import Entity, Kind, LambdaType
from .cache import GeneratorCache


def _matches(
    entity: Entity,
    lambda_type: LambdaType | None,
    arity: int | None,
    throwing: bool | None,
    primitive: bool | None,
    return_kind: Kind | None,
    parameter_kinds: Sequence[Kind | None] | None,
) -> bool:
    if lambda_type is not None and entity.lambda_type is not lambda_type:
        return False
    if arity is not None and entity.arity != arity:
        return False
    if throwing is not None and entity.throwing != throwing:
        return False
    if primitive is not None and entity.is_primitive != primitive:
        return False
    if return_kind is not None and entity.return_kind is not return_kind:
        return False
    if parameter_kinds is not None:
        if len(parameter_kinds) > entity.arity:
            return False
        for wanted, actual in zip(parameter_kinds, entity.parameter_kinds):
            if wanted is not None and wanted is not actual:
                return False
    return True


def search_all(
    entities: Iterable[Entity] | None = None,
    *,
    lambda_type: LambdaType | str | None = None,
    arity: int | None = None,
    throwing: bool | None = None,
    primitive: bool | None = None,
    return_kind: Kind | str | None = None,
    parameter_kinds: Sequence[Kind | str | None] | None = None,
) -> list[Entity]:
    """Return every entity matching all given filters, in cache order.

    Args:
        entities: Entities to search (defaults to the cache's accepted set)

    Raises:
        ValueError: If arity is negative or a type or kind is unknown
    """
    if arity is not None and arity < 0:
        raise ValueError("arity must not be negative")
    if entities is None:
        entities = GeneratorCache.get_instance().get_accepted()
    if lambda_type is not None:
        lambda_type = LambdaType(lambda_type)
    if return_kind is not None:
        return_kind = Kind.parse(return_kind)
    if parameter_kinds is not None:
        parameter_kinds = [None if k is None else Kind.parse(k) for k in parameter_kinds]

    return [
        entity
        for entity in entities
        if _matches(entity, lambda_type, arity, throwing, primitive, return_kind, parameter_kinds)
    ]


def search(entities: Iterable[Entity] | None = None, **filters) -> Entity | None:
    """Return the first entity matching the filters, or None."""
    found = search_all(entities, **filters)
    return found[0] if found else None
