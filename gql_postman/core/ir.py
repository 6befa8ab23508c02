"""Intermediate Representation (IR) for introspected GraphQL schemas.

Type references are modelled as a tagged union: a named leaf, or a LIST /
NON_NULL wrapper around exactly one inner reference.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class TypeKind(str, Enum):
    """The `__TypeKind` values reported by introspection."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


def kind_name(kind: "TypeKind | str") -> str:
    """Introspection spelling of a kind; unrecognized kinds are kept as raw strings."""
    return kind.value if isinstance(kind, TypeKind) else kind


@dataclass(frozen=True)
class NamedTypeRef:
    """A reference to a named type (the leaf of a wrapper chain)."""
    name: str
    kind: TypeKind | str


@dataclass(frozen=True)
class ListTypeRef:
    """`[of_type]`"""
    of_type: "TypeRef"

    @property
    def kind(self) -> TypeKind:
        return TypeKind.LIST


@dataclass(frozen=True)
class NonNullTypeRef:
    """`of_type!`"""
    of_type: "TypeRef"

    @property
    def kind(self) -> TypeKind:
        return TypeKind.NON_NULL


TypeRef = Union[NamedTypeRef, ListTypeRef, NonNullTypeRef]


@dataclass(frozen=True)
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type: TypeRef
    description: str | None = None
    default_value: Any = None


@dataclass(frozen=True)
class IRField:
    """Represents a field of an object, interface or input type."""
    name: str
    type: TypeRef
    description: str | None = None
    arguments: tuple[IRArgument, ...] = ()


@dataclass
class IRType:
    """Represents a named type definition from `__schema.types`."""
    name: str
    kind: TypeKind | str
    fields: list[IRField] = field(default_factory=list)
    description: str | None = None


@dataclass
class IRSchema:
    """Complete intermediate representation of an introspected schema.

    Types keep the order in which introspection reported them.
    """
    types: list[IRType] = field(default_factory=list)

    def get_type_by_name(self, name: str) -> IRType | None:
        """Look up a named type, returning None when absent."""
        for ir_type in self.types:
            if ir_type.name == name:
                return ir_type
        return None

    @property
    def query_type(self) -> IRType | None:
        return self.get_type_by_name("Query")

    @property
    def mutation_type(self) -> IRType | None:
        return self.get_type_by_name("Mutation")
