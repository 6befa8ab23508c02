"""Type resolution and per-name formatting for request synthesis."""

from dataclasses import dataclass
from typing import NamedTuple

from .ir import IRArgument, IRField, ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeKind, TypeRef, kind_name

# Placeholder for variables the server requires; makes the request fail until filled in.
REQUIRED_PLACEHOLDER = "#"
OPTIONAL_PLACEHOLDER = "null"


class BaseType(NamedTuple):
    """A type reference with every wrapper stripped."""
    name: str
    kind: TypeKind | str


@dataclass(frozen=True)
class FormattedArgument:
    """An argument rendered for the operation and its variables payload."""
    formatted_type: str  # e.g. "[String!]!"
    formatted_variable: str  # e.g. '"id": #'
    default_value: str  # REQUIRED_PLACEHOLDER or OPTIONAL_PLACEHOLDER


@dataclass(frozen=True)
class FormattedField:
    """A selection-set line for one field of a returned object type."""
    formatted_field: str


class TypeResolver:
    """Resolves wrapped type references and formats arguments and fields.

    Formatted arguments and fields are cached by name only. When two fields
    declare a same-named argument with different types, the last one
    formatted wins the cache slot; lookups never read from the cache, so
    rendered output is unaffected.
    """

    def __init__(self):
        self.args: dict[str, FormattedArgument] = {}
        self.fields: dict[str, FormattedField] = {}

    def unwrap_to_base(self, type_ref: TypeRef) -> BaseType:
        """Strip LIST and NON_NULL wrappers down to the named leaf."""
        if isinstance(type_ref, (ListTypeRef, NonNullTypeRef)):
            return self.unwrap_to_base(type_ref.of_type)
        return BaseType(type_ref.name, type_ref.kind)

    def render_type_signature(self, type_ref: TypeRef) -> str:
        """Render a type reference in GraphQL syntax, e.g. `[Int!]!`."""
        if isinstance(type_ref, ListTypeRef):
            return f"[{self.render_type_signature(type_ref.of_type)}]"
        if isinstance(type_ref, NonNullTypeRef):
            return f"{self.render_type_signature(type_ref.of_type)}!"
        return type_ref.name

    def format_argument(self, arg: IRArgument) -> FormattedArgument:
        """Format an argument and remember it under its name."""
        if arg.type.kind == TypeKind.NON_NULL:
            default_value = REQUIRED_PLACEHOLDER
        else:
            default_value = OPTIONAL_PLACEHOLDER

        formatted = FormattedArgument(
            formatted_type=self.render_type_signature(arg.type),
            formatted_variable=f'"{arg.name}": {default_value}',
            default_value=default_value,
        )
        self.args[arg.name] = formatted
        return formatted

    def format_field(self, field: IRField) -> FormattedField:
        """Format one selection line and remember it under the field name.

        Scalars and enums are selected; object fields are left commented
        out so the selection stays one level deep. Interfaces, unions and
        anything else are commented out with their type kind noted.
        """
        description = self._description_suffix(field.description)
        base = self.unwrap_to_base(field.type)

        if base.kind in (TypeKind.SCALAR, TypeKind.ENUM):
            line = f"\t\t{field.name}{description}"
        elif base.kind == TypeKind.OBJECT:
            line = f"\t\t# {field.name}{description}"
        else:
            line = f"\t\t# {field.name}{description} # Type: {kind_name(base.kind)}\n"

        formatted = FormattedField(formatted_field=line)
        self.fields[field.name] = formatted
        return formatted

    @staticmethod
    def _description_suffix(description: str | None) -> str:
        """Turn a description into a trailing comment, or a bare newline."""
        if not description or description == "undefined":
            return "\n"
        flat = description.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
        return f" # {flat}\n"
