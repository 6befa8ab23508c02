"""Exceptions raised while turning a GraphQL schema into a collection.

Every failure is fatal for the conversion that raised it; there is no
partial collection.
"""

from typing import Any


class GqlPostmanError(Exception):
    """Base class for all gql-postman errors."""


class SchemaIntegrityError(GqlPostmanError):
    """The introspection result is missing something every schema must have."""


class TypeLookupError(GqlPostmanError):
    """A field refers to a type that is absent from the schema's type list."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Type not found in schema: {type_name}")


class CompositionError(GqlPostmanError):
    """A synthesized operation is not valid GraphQL."""

    def __init__(self, message: str, source: str):
        self.message = message
        self.source = source
        super().__init__(message)


class TransportError(GqlPostmanError):
    """The introspection request failed or returned an unusable response."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.errors = errors or []
        self.status_code = status_code
        super().__init__(message)
