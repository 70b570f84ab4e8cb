"""Models for the IDL type algebra.

A type is a tagged object distinguished by its ``code`` field:

    ```json
    {"code": "LIST", "types": [{"code": "CLASS", "service": "SpaceCenter", "name": "Part"}]}
    ```

Primitive codes carry no payload; LIST, SET, TUPLE and DICTIONARY carry a
``types`` array; CLASS and ENUMERATION carry ``service`` and ``name``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TypeCode(str, Enum):
    """Type codes understood by the compiler."""

    BOOL = "BOOL"
    SINT32 = "SINT32"
    UINT32 = "UINT32"
    DOUBLE = "DOUBLE"
    FLOAT = "FLOAT"
    STRING = "STRING"
    LIST = "LIST"
    TUPLE = "TUPLE"
    CLASS = "CLASS"
    ENUMERATION = "ENUMERATION"
    DICTIONARY = "DICTIONARY"
    SET = "SET"


PRIMITIVE_CODES = frozenset(
    {
        TypeCode.BOOL,
        TypeCode.SINT32,
        TypeCode.UINT32,
        TypeCode.DOUBLE,
        TypeCode.FLOAT,
        TypeCode.STRING,
    }
)

CONTAINER_CODES = frozenset(
    {
        TypeCode.LIST,
        TypeCode.SET,
        TypeCode.TUPLE,
        TypeCode.DICTIONARY,
    }
)


class _TypeNode(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class PrimitiveType(_TypeNode):
    """A payload-free primitive type."""

    code: Literal["BOOL", "SINT32", "UINT32", "DOUBLE", "FLOAT", "STRING"]


class ListType(_TypeNode):
    """Ordered sequence. Exactly one child type is expected."""

    code: Literal["LIST"]
    types: list[Type]


class SetType(_TypeNode):
    """Unordered collection of unique elements. Exactly one child type is expected."""

    code: Literal["SET"]
    types: list[Type]


class TupleType(_TypeNode):
    """Fixed-size heterogeneous tuple with zero or more child types."""

    code: Literal["TUPLE"]
    types: list[Type]


class DictionaryType(_TypeNode):
    """Associative map. Exactly two child types are expected: key, then value."""

    code: Literal["DICTIONARY"]
    types: list[Type]


class ClassType(_TypeNode):
    """Symbolic reference to a class declared in some service."""

    code: Literal["CLASS"]
    service: str
    name: str


class EnumerationType(_TypeNode):
    """Symbolic reference to an enumeration declared in some service."""

    code: Literal["ENUMERATION"]
    service: str
    name: str


Type = Annotated[
    Union[
        PrimitiveType,
        ListType,
        SetType,
        TupleType,
        DictionaryType,
        ClassType,
        EnumerationType,
    ],
    Field(discriminator="code"),
]

ContainerType = Union[ListType, SetType, TupleType, DictionaryType]
ReferenceType = Union[ClassType, EnumerationType]

for _model in (ListType, SetType, TupleType, DictionaryType):
    _model.model_rebuild()
