"""Derived interface names.

Names follow the java.util.function conventions and extend them to every
supported shape:

    (int) -> long              IntToLongFunction
    (object, int) -> void      ObjIntConsumer
    (object, int, int) -> int  ObjBiIntToIntFunction
    (object, object) -> int    ToIntBiFunction
    (short, short) -> short    ShortBinaryOperator
    throwing variants          Throwable + name
"""

from ..core.models import Kind, LambdaType, MAX_ARITY, Signature, classify

THROWABLE_PREFIX = "Throwable"
COLLISION_SUFFIX = "2"

ARITY_PREFIXES = {0: "", 1: "", 2: "Bi", 3: "Tri"}
OPERATOR_PREFIXES = {1: "Unary", 2: "Binary", 3: "Ternary"}


def check_shape(signature: Signature) -> str | None:
    """Return why a signature cannot be named, or None if it can.

    Supported parameter lists are any number of leading object parameters
    followed by parameters of a single primitive kind.
    """
    if signature.arity > MAX_ARITY:
        return f"arity {signature.arity} exceeds the maximum supported arity of {MAX_ARITY}"

    seen_primitive = False
    primitives: list[Kind] = []
    for position, kind in enumerate(signature.parameter_kinds, start=1):
        if kind is Kind.OBJECT:
            if seen_primitive:
                return f"object parameter at position {position} follows a primitive parameter"
        else:
            seen_primitive = True
            if kind not in primitives:
                primitives.append(kind)

    if len(primitives) > 1:
        mixed = ", ".join(k.value for k in primitives)
        return f"mixed primitive parameter kinds ({mixed})"
    return None


def parameter_prefix(parameter_kinds: tuple[Kind, ...]) -> str:
    """Name fragment describing the parameter list (``ObjBiInt``, ``Tri``...)."""
    objects = [k for k in parameter_kinds if k is Kind.OBJECT]
    primitives = [k for k in parameter_kinds if k.is_primitive]

    if not primitives:
        return ARITY_PREFIXES[len(objects)]
    primitive_part = ARITY_PREFIXES[len(primitives)] + primitives[0].label
    if not objects:
        return primitive_part
    return ARITY_PREFIXES[len(objects)] + "Obj" + primitive_part


def derive_name(signature: Signature) -> str:
    """Derive the interface name of a signature.

    Raises:
        ValueError: If the signature has a shape that cannot be named
    """
    problem = check_shape(signature)
    if problem is not None:
        raise ValueError(problem)

    params = signature.parameter_kinds
    ret = signature.return_kind
    lambda_type = classify(signature)

    if lambda_type is LambdaType.RUNNABLE:
        name = "Runnable"
    elif lambda_type is LambdaType.SUPPLIER:
        name = ("" if ret is Kind.OBJECT else ret.label) + "Supplier"
    elif lambda_type is LambdaType.OPERATOR:
        name = ret.label + OPERATOR_PREFIXES[signature.arity] + "Operator"
    elif lambda_type is LambdaType.CONSUMER:
        name = parameter_prefix(params) + "Consumer"
    elif lambda_type is LambdaType.PREDICATE:
        name = parameter_prefix(params) + "Predicate"
    elif ret is Kind.OBJECT:
        name = parameter_prefix(params) + "Function"
    elif all(p is Kind.OBJECT for p in params):
        name = "To" + ret.label + ARITY_PREFIXES[signature.arity] + "Function"
    else:
        name = parameter_prefix(params) + "To" + ret.label + "Function"

    if signature.throwing:
        name = THROWABLE_PREFIX + name
    return name
