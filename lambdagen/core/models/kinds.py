"""Parameter and return kinds, and the functional interface families."""

from enum import Enum


class Kind(str, Enum):
    """Kind of a single parameter or of the return value.

    Declaration order is the canonical order used whenever kinds are
    enumerated, so it must stay stable.
    """

    OBJECT = "object"
    BOOLEAN = "boolean"
    BYTE = "byte"
    CHAR = "char"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    VOID = "void"

    @property
    def is_primitive(self) -> bool:
        return self not in (Kind.OBJECT, Kind.VOID)

    @property
    def order(self) -> int:
        return _KIND_ORDER[self]

    @property
    def label(self) -> str:
        """Capitalized form used inside derived names (``int`` -> ``Int``)."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "str | Kind") -> "Kind":
        """Parse a kind from user input, accepting common generic aliases."""
        if isinstance(value, Kind):
            return value
        if not isinstance(value, str):
            raise ValueError(f"kind must be a string, got {type(value).__name__}")
        token = value.strip()
        if token.lower() in _GENERIC_ALIASES:
            return cls.OBJECT
        try:
            return cls(token.lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"unknown kind '{value}' (expected one of: {valid})") from None


_KIND_ORDER = {kind: index for index, kind in enumerate(Kind)}

_GENERIC_ALIASES = {"obj", "generic", "t"}

PRIMITIVE_KINDS = tuple(kind for kind in Kind if kind.is_primitive)


def sort_kinds(kinds) -> list[Kind]:
    """Deduplicate kinds and return them in canonical order."""
    return sorted({Kind.parse(k) for k in kinds}, key=lambda k: k.order)


class LambdaType(str, Enum):
    """Family a functional interface belongs to."""

    CONSUMER = "consumer"
    FUNCTION = "function"
    OPERATOR = "operator"
    PREDICATE = "predicate"
    RUNNABLE = "runnable"
    SUPPLIER = "supplier"
