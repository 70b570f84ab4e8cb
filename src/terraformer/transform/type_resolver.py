"""Resolve IDL type nodes into Rust type expressions.

Resolution is a recursive descent with one case per type code. Primitives map
through a fixed table, containers wrap their resolved children, and class or
enumeration references resolve by name only. References owned by another
service are qualified with that service's module name and reported as
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from terraformer.casing import to_snake_case
from terraformer.errors import MalformedTypeError
from terraformer.models.types import (
    ClassType,
    DictionaryType,
    EnumerationType,
    ListType,
    PrimitiveType,
    SetType,
    TupleType,
    Type,
    TypeCode,
)


class TypeKind(Enum):
    """Shape of a resolved type, used to pick calling conventions."""

    PRIMITIVE = "primitive"
    TUPLE = "tuple"
    ENUM = "enum"
    LIST = "list"
    DICT = "dict"
    SET = "set"
    CLASS = "class"


# Kinds handed to generated functions by reference rather than by value
BY_REFERENCE_KINDS = frozenset({TypeKind.LIST, TypeKind.DICT, TypeKind.SET, TypeKind.CLASS})

PRIMITIVE_TO_RUST: dict[TypeCode, str] = {
    TypeCode.BOOL: "bool",
    TypeCode.SINT32: "i32",
    TypeCode.UINT32: "u32",
    TypeCode.DOUBLE: "f64",
    TypeCode.FLOAT: "f32",
    TypeCode.STRING: "String",
}

# Expected number of child types per container code; None means any number
CONTAINER_ARITY: dict[TypeCode, int | None] = {
    TypeCode.LIST: 1,
    TypeCode.SET: 1,
    TypeCode.DICTIONARY: 2,
    TypeCode.TUPLE: None,
}

SET_PATH = "std::collections::HashSet"
MAP_PATH = "std::collections::HashMap"


@dataclass(frozen=True)
class ResolvedType:
    """A Rust type expression and the foreign symbols it references.

    Attributes
    ----------
        expr: The Rust type expression (e.g. ``Vec<space_center::Part>``).
        kind: Shape of the outermost constructor.
        dependencies: Qualified names of classes/enumerations owned by
            other services.

    """

    expr: str
    kind: TypeKind
    dependencies: frozenset[str] = field(default_factory=frozenset)

    @property
    def by_ref(self) -> bool:
        """Whether values of this type are passed by reference."""
        return self.kind in BY_REFERENCE_KINDS


def module_name(service: str) -> str:
    """Name of the generated module for a service."""
    return to_snake_case(service)


def qualified_name(service: str, name: str) -> str:
    """Qualify a class or enumeration name with its service's module name."""
    return f"{module_name(service)}::{name}"


def child_types(type_: Type) -> list[Type]:
    """Return the child types of a container, checking its arity.

    Primitives and class/enumeration references have no children.

    Raises
    ------
        MalformedTypeError: If a list or set does not have exactly one child,
            or a dictionary does not have exactly two.

    """
    try:
        code = TypeCode(type_.code)
    except ValueError:
        raise MalformedTypeError(f"Unknown type '{type_.code}'", code=str(type_.code)) from None
    if code not in CONTAINER_ARITY:
        return []

    children = type_.types
    expected = CONTAINER_ARITY[code]
    if expected is not None and len(children) != expected:
        construct = code.value.lower()
        raise MalformedTypeError(
            f"Malformed '{construct}' type: expected {expected} child "
            f"type{'s' if expected != 1 else ''}, found {len(children)}",
            code=code.value,
            found=len(children),
        )
    return list(children)


def resolve_type(type_: Type, current_service: str) -> ResolvedType:
    """Resolve a type node relative to the service being generated.

    Args:
    ----
        type_: The IDL type node.
        current_service: Name of the service whose module is being generated.

    Returns:
    -------
        The resolved expression with the dependencies it introduced.

    Raises:
    ------
        MalformedTypeError: On arity violations or unknown type codes.

    """
    if isinstance(type_, PrimitiveType):
        try:
            rust_type = PRIMITIVE_TO_RUST[TypeCode(type_.code)]
        except (KeyError, ValueError):
            raise MalformedTypeError(
                f"Unknown primitive type '{type_.code}'", code=str(type_.code)
            ) from None
        return ResolvedType(rust_type, TypeKind.PRIMITIVE)

    if isinstance(type_, (ClassType, EnumerationType)):
        kind = TypeKind.CLASS if isinstance(type_, ClassType) else TypeKind.ENUM
        if type_.service == current_service:
            return ResolvedType(type_.name, kind)
        full_name = qualified_name(type_.service, type_.name)
        return ResolvedType(full_name, kind, frozenset({full_name}))

    if isinstance(type_, (ListType, SetType, TupleType, DictionaryType)):
        members = [resolve_type(child, current_service) for child in child_types(type_)]
        dependencies = frozenset().union(*(m.dependencies for m in members))
        exprs = [m.expr for m in members]

        if isinstance(type_, ListType):
            return ResolvedType(f"Vec<{exprs[0]}>", TypeKind.LIST, dependencies)
        if isinstance(type_, SetType):
            return ResolvedType(f"{SET_PATH}<{exprs[0]}>", TypeKind.SET, dependencies)
        if isinstance(type_, DictionaryType):
            key_type, value_type = exprs
            return ResolvedType(
                f"{MAP_PATH}<{key_type}, {value_type}>", TypeKind.DICT, dependencies
            )
        # A one-element tuple needs a trailing comma to stay a tuple
        if len(exprs) == 1:
            return ResolvedType(f"({exprs[0]},)", TypeKind.TUPLE, dependencies)
        return ResolvedType(f"({', '.join(exprs)})", TypeKind.TUPLE, dependencies)

    code = getattr(type_, "code", type(type_).__name__)
    raise MalformedTypeError(f"Unknown type '{code}'", code=str(code))
