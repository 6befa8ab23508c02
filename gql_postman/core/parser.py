"""Introspection result parser.

Turns the JSON produced by the standard introspection query into an
IRSchema. The result can come from a live endpoint, from a saved
introspection dump, or be built locally from SDL with graphql-core.
"""

import json
import logging
from pathlib import Path
from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema

from .errors import SchemaIntegrityError
from .ir import (
    IRArgument,
    IRField,
    IRSchema,
    IRType,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    TypeKind,
    TypeRef,
    kind_name,
)

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


class IntrospectionParser:
    """Parses an introspection result into IR."""

    def __init__(self, result: dict[str, Any]):
        """Initialize with an introspection result.

        Accepts the full response body (`{"data": {"__schema": ...}}`),
        its `data` member, or a bare `{"__schema": ...}` mapping.
        """
        self.result = result

    @classmethod
    def from_file(cls, path: str | Path) -> "IntrospectionParser":
        """Load an introspection JSON dump or an SDL schema file.

        Raises:
            SchemaIntegrityError: The file is not valid JSON or SDL
        """
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        if path.suffix.lower() in SDL_SUFFIXES:
            logger.debug("Building introspection from SDL file %s", path)
            try:
                return cls(introspection_from_schema(build_schema(content)))
            except (GraphQLError, TypeError) as e:
                raise SchemaIntegrityError(f"Invalid SDL in {path.name}: {e}") from e
        try:
            return cls(json.loads(content))
        except json.JSONDecodeError as e:
            raise SchemaIntegrityError(f"Invalid introspection JSON in {path.name}: {e}") from e

    def parse(self) -> IRSchema:
        """Parse every named type and return the complete IR."""
        schema = self._schema_node()
        raw_types = schema.get("types")
        if not isinstance(raw_types, list):
            raise SchemaIntegrityError("Introspection result has no __schema.types list")

        ir = IRSchema(types=[self._parse_type(raw) for raw in raw_types])
        logger.debug("Parsed %d types from introspection", len(ir.types))
        return ir

    def _schema_node(self) -> dict[str, Any]:
        node = self.result
        if isinstance(node, dict) and "data" in node:
            node = node["data"]
        if not isinstance(node, dict) or not isinstance(node.get("__schema"), dict):
            raise SchemaIntegrityError("Introspection result has no __schema member")
        return node["__schema"]

    def _parse_type(self, raw: dict[str, Any]) -> IRType:
        kind = self._parse_kind(raw.get("kind"))
        # Input objects list their members under inputFields
        raw_fields = raw.get("inputFields") if kind == TypeKind.INPUT_OBJECT else raw.get("fields")
        return IRType(
            name=raw["name"],
            kind=kind,
            fields=[self._parse_field(f) for f in raw_fields or []],
            description=raw.get("description"),
        )

    def _parse_field(self, raw: dict[str, Any]) -> IRField:
        return IRField(
            name=raw["name"],
            type=self.parse_type_ref(raw["type"]),
            description=raw.get("description"),
            arguments=tuple(self._parse_argument(a) for a in raw.get("args") or []),
        )

    def _parse_argument(self, raw: dict[str, Any]) -> IRArgument:
        return IRArgument(
            name=raw["name"],
            type=self.parse_type_ref(raw["type"]),
            description=raw.get("description"),
            default_value=raw.get("defaultValue"),
        )

    @classmethod
    def parse_type_ref(cls, raw: dict[str, Any] | None) -> TypeRef:
        """Convert a nested `{kind, name, ofType}` mapping into a TypeRef."""
        if not isinstance(raw, dict):
            raise SchemaIntegrityError("Type reference is missing")
        kind = cls._parse_kind(raw.get("kind"))
        if kind == TypeKind.LIST:
            return ListTypeRef(cls._parse_inner(raw))
        if kind == TypeKind.NON_NULL:
            return NonNullTypeRef(cls._parse_inner(raw))
        if not raw.get("name"):
            raise SchemaIntegrityError(f"Named type reference of kind {kind_name(kind)} has no name")
        return NamedTypeRef(name=raw["name"], kind=kind)

    @classmethod
    def _parse_inner(cls, raw: dict[str, Any]) -> TypeRef:
        inner = raw.get("ofType")
        if inner is None:
            raise SchemaIntegrityError(
                f"{raw['kind']} wrapper has no ofType; the introspection query may be too shallow"
            )
        return cls.parse_type_ref(inner)

    @staticmethod
    def _parse_kind(value: Any) -> TypeKind | str:
        """Map a kind string onto TypeKind, keeping unrecognized named kinds as-is."""
        if not isinstance(value, str) or not value:
            raise SchemaIntegrityError(f"Type kind is missing or not a string: {value!r}")
        try:
            return TypeKind(value)
        except ValueError:
            logger.debug("Keeping unrecognized type kind %s", value)
            return value
