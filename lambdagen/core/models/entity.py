"""Entity model: one candidate functional interface variant.

An Entity is seeded by the enumeration driver, enriched in place by the
stage chain, and finally accepted into the cache or rejected. Only
``status`` and ``derived_name`` may change after construction; everything
that makes up the signature is frozen.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..errors import InvalidTransitionError
from .kinds import Kind, LambdaType

MAX_ARITY = 3

ARITY_SEGMENTS = {2: "bi", 3: "tri"}
OPERATOR_SEGMENTS = {1: "unary", 2: "binary", 3: "ternary"}


# =============================================================================
# Signature
# =============================================================================


def _parse_kinds(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(Kind.parse(k) for k in value)
    return value


def _check_parameters(arity: int, parameter_kinds: tuple[Kind, ...]) -> None:
    if len(parameter_kinds) != arity:
        raise ValueError(
            f"arity {arity} does not match {len(parameter_kinds)} parameter kind(s)"
        )
    for position, kind in enumerate(parameter_kinds, start=1):
        if kind is Kind.VOID:
            raise ValueError(f"void is only valid as a return kind (parameter {position})")


class Signature(BaseModel):
    """Uniqueness key of an entity."""

    model_config = ConfigDict(frozen=True)

    arity: int = Field(ge=0)
    parameter_kinds: tuple[Kind, ...] = ()
    return_kind: Kind
    throwing: bool = False

    @field_validator("parameter_kinds", mode="before")
    @classmethod
    def parse_parameter_kinds(cls, v: Any) -> Any:
        return _parse_kinds(v)

    @field_validator("return_kind", mode="before")
    @classmethod
    def parse_return_kind(cls, v: Any) -> Any:
        return Kind.parse(v)

    @model_validator(mode="after")
    def check_parameters(self) -> "Signature":
        _check_parameters(self.arity, self.parameter_kinds)
        return self

    @classmethod
    def of(cls, parameter_kinds, return_kind, throwing: bool = False) -> "Signature":
        """Build a signature, inferring the arity from the parameter kinds."""
        kinds = _parse_kinds(list(parameter_kinds))
        return cls(
            arity=len(kinds),
            parameter_kinds=kinds,
            return_kind=return_kind,
            throwing=throwing,
        )

    @property
    def lambda_type(self) -> LambdaType:
        return classify(self)

    def __str__(self) -> str:
        params = ", ".join(k.value for k in self.parameter_kinds)
        suffix = " throws" if self.throwing else ""
        return f"({params}) -> {self.return_kind.value}{suffix}"


def classify(signature: Signature) -> LambdaType:
    """Return the interface family of a signature."""
    params = signature.parameter_kinds
    ret = signature.return_kind

    if signature.arity == 0:
        return LambdaType.RUNNABLE if ret is Kind.VOID else LambdaType.SUPPLIER
    if ret is Kind.VOID:
        return LambdaType.CONSUMER
    # Operators win over predicates: (boolean) -> boolean is BooleanUnaryOperator
    if ret.is_primitive and signature.arity in OPERATOR_SEGMENTS and all(p is ret for p in params):
        return LambdaType.OPERATOR
    if ret is Kind.BOOLEAN:
        return LambdaType.PREDICATE
    return LambdaType.FUNCTION


def package_path(signature: Signature) -> str:
    """Return the slash-separated sub-package of a signature.

    Examples:
        ``(object, int, int) -> int`` lives under ``function/tri/obj`` and
        ``(int) -> int`` under ``operator/unary``.
    """
    lambda_type = classify(signature)
    if lambda_type is LambdaType.OPERATOR:
        return f"operator/{OPERATOR_SEGMENTS[signature.arity]}"

    parts = [lambda_type.value]
    if signature.arity in ARITY_SEGMENTS:
        parts.append(ARITY_SEGMENTS[signature.arity])

    params = signature.parameter_kinds
    has_objects = any(p is Kind.OBJECT for p in params)
    has_primitives = any(p.is_primitive for p in params)
    if has_objects and has_primitives:
        parts.append("obj")
    elif lambda_type is LambdaType.FUNCTION and signature.return_kind.is_primitive:
        parts.append("conversion" if has_primitives else "to")
    return "/".join(parts)


# =============================================================================
# Entity
# =============================================================================


class EntityStatus(str, Enum):
    SEED = "seed"
    IN_PROGRESS = "in_progress"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


_TRANSITIONS = {
    EntityStatus.SEED: {EntityStatus.IN_PROGRESS},
    EntityStatus.IN_PROGRESS: {EntityStatus.ACCEPTED, EntityStatus.REJECTED},
    EntityStatus.ACCEPTED: set(),
    EntityStatus.REJECTED: set(),
}


class Entity(BaseModel):
    """A generatable variant descriptor.

    Equality and hashing use the signature only, so two entities that differ
    just in ``derived_name`` or ``status`` compare equal.
    """

    model_config = ConfigDict(validate_assignment=True)

    arity: int = Field(ge=0, frozen=True)
    parameter_kinds: tuple[Kind, ...] = Field(default=(), frozen=True)
    return_kind: Kind = Field(frozen=True)
    throwing: bool = Field(default=False, frozen=True)
    equivalent_of: str | None = Field(
        default=None,
        frozen=True,
        description="Standard-library interface with the same signature, if any",
    )
    derived_name: str | None = None
    status: EntityStatus = EntityStatus.SEED

    @field_validator("parameter_kinds", mode="before")
    @classmethod
    def parse_parameter_kinds(cls, v: Any) -> Any:
        return _parse_kinds(v)

    @field_validator("return_kind", mode="before")
    @classmethod
    def parse_return_kind(cls, v: Any) -> Any:
        return Kind.parse(v)

    @model_validator(mode="after")
    def check_parameters(self) -> "Entity":
        _check_parameters(self.arity, self.parameter_kinds)
        return self

    @classmethod
    def from_signature(cls, signature: Signature, equivalent_of: str | None = None) -> "Entity":
        return cls(
            arity=signature.arity,
            parameter_kinds=signature.parameter_kinds,
            return_kind=signature.return_kind,
            throwing=signature.throwing,
            equivalent_of=equivalent_of,
        )

    @property
    def signature(self) -> Signature:
        return Signature(
            arity=self.arity,
            parameter_kinds=self.parameter_kinds,
            return_kind=self.return_kind,
            throwing=self.throwing,
        )

    @property
    def lambda_type(self) -> LambdaType:
        return classify(self.signature)

    @property
    def is_primitive(self) -> bool:
        """True if any parameter or the return value is a primitive kind."""
        return self.return_kind.is_primitive or any(p.is_primitive for p in self.parameter_kinds)

    @property
    def package_path(self) -> str:
        return package_path(self.signature)

    def qualified_name(self, base_package: str) -> str | None:
        """Fully qualified interface name, or None before naming has run."""
        if self.derived_name is None:
            return None
        package = ".".join([base_package, *self.package_path.split("/")])
        return f"{package}.{self.derived_name}"

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def _transition(self, target: EntityStatus) -> None:
        if target not in _TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"cannot move entity {self.signature} from {self.status.value} to {target.value}"
            )
        self.status = target

    def mark_in_progress(self) -> None:
        self._transition(EntityStatus.IN_PROGRESS)

    def accept(self) -> None:
        self._transition(EntityStatus.ACCEPTED)

    def reject(self) -> None:
        self._transition(EntityStatus.REJECTED)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.signature == other.signature

    def __hash__(self) -> int:
        return hash(self.signature)
