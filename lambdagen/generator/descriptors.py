"""Renderer-facing metadata for accepted entities.

The renderer turns these strings into source text; nothing here formats
or writes files.
"""

from typing import Any

from ..core.models import Entity, Kind, LambdaType, Signature

TYPE_VARIABLES = ("T", "U", "V")
RETURN_TYPE_VARIABLE = "R"


def type_parameters(signature: Signature) -> list[str]:
    """Generic type variables in declaration order, e.g. ``["T", "U", "R"]``."""
    objects = sum(1 for k in signature.parameter_kinds if k is Kind.OBJECT)
    variables = list(TYPE_VARIABLES[:objects])
    if signature.return_kind is Kind.OBJECT:
        variables.append(RETURN_TYPE_VARIABLE)
    return variables


def parameter_types(signature: Signature) -> list[str]:
    types, objects = [], 0
    for kind in signature.parameter_kinds:
        if kind is Kind.OBJECT:
            types.append(TYPE_VARIABLES[objects])
            objects += 1
        else:
            types.append(kind.value)
    return types


def parameter_names(signature: Signature) -> list[str]:
    """Argument names: ``t``/``u``/``v`` for objects, ``value``/``valueN`` for primitives."""
    primitive_count = sum(1 for k in signature.parameter_kinds if k.is_primitive)
    names, objects, primitives = [], 0, 0
    for kind in signature.parameter_kinds:
        if kind is Kind.OBJECT:
            names.append(TYPE_VARIABLES[objects].lower())
            objects += 1
        else:
            primitives += 1
            names.append("value" if primitive_count == 1 else f"value{primitives}")
    return names


def parameter_declarations(signature: Signature) -> list[str]:
    """Typed argument declarations such as ``["T t", "int value"]``."""
    return [f"{t} {n}" for t, n in zip(parameter_types(signature), parameter_names(signature))]


def return_type(signature: Signature) -> str:
    if signature.return_kind is Kind.OBJECT:
        return RETURN_TYPE_VARIABLE
    return signature.return_kind.value


def generic_type_string(signature: Signature, erasure: bool = False) -> str:
    """Generic clause of the interface, empty when it has no type variables.

    With erasure on, inputs become ``? super X`` and the return
    ``? extends R``, the form used for composition method arguments.
    """
    variables = type_parameters(signature)
    if not variables:
        return ""
    if erasure:
        variables = [
            f"? extends {v}" if v == RETURN_TYPE_VARIABLE else f"? super {v}"
            for v in variables
        ]
    return "<" + ", ".join(variables) + ">"


def functional_method_name(signature: Signature) -> str:
    """Name of the single abstract method (``apply``, ``applyAsInt``, ``test``...)."""
    lambda_type = signature.lambda_type
    ret = signature.return_kind

    if lambda_type is LambdaType.RUNNABLE:
        return "run"
    if lambda_type is LambdaType.CONSUMER:
        return "accept"
    if lambda_type is LambdaType.PREDICATE:
        return "test"
    if lambda_type is LambdaType.SUPPLIER:
        return "get" if ret is Kind.OBJECT else f"getAs{ret.label}"
    return "apply" if ret is Kind.OBJECT else f"applyAs{ret.label}"


def describe(entity: Entity, base_package: str) -> dict[str, Any]:
    """Everything a template needs to render one interface."""
    signature = entity.signature
    return {
        "name": entity.derived_name,
        "qualified_name": entity.qualified_name(base_package),
        "package": ".".join([base_package, *entity.package_path.split("/")]),
        "type": entity.lambda_type.value,
        "arity": entity.arity,
        "throwing": entity.throwing,
        "primitive": entity.is_primitive,
        "parameter_kinds": [k.value for k in entity.parameter_kinds],
        "return_kind": entity.return_kind.value,
        "type_parameters": type_parameters(signature),
        "generic_type": generic_type_string(signature),
        "parameters": parameter_declarations(signature),
        "return_type": return_type(signature),
        "method": functional_method_name(signature),
        "extends": entity.equivalent_of,
    }
