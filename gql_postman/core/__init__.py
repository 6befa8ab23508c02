"""Core modules for GraphQL-to-Postman collection synthesis."""

from .assembler import CollectionAssembler, collection_name, create_collection
from .auth import ApiKeyAuth, Auth, BearerAuth, CombinedAuth, HeaderAuth, NoAuth
from .collection import (
    POSTMAN_SCHEMA_URL,
    PostmanCollection,
    PostmanItem,
    save_collection,
)
from .errors import (
    CompositionError,
    GqlPostmanError,
    SchemaIntegrityError,
    TransportError,
    TypeLookupError,
)
from .fetcher import IntrospectionFetcher
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
from .parser import IntrospectionParser
from .synthesizer import RequestSynthesizer, split_url
from .type_resolver import BaseType, FormattedArgument, FormattedField, TypeResolver

__all__ = [
    # Auth
    "Auth",
    "ApiKeyAuth",
    "BearerAuth",
    "CombinedAuth",
    "HeaderAuth",
    "NoAuth",
    # Errors
    "GqlPostmanError",
    "SchemaIntegrityError",
    "TypeLookupError",
    "CompositionError",
    "TransportError",
    # IR types
    "IRArgument",
    "IRField",
    "IRSchema",
    "IRType",
    "ListTypeRef",
    "NamedTypeRef",
    "NonNullTypeRef",
    "TypeKind",
    "TypeRef",
    "kind_name",
    # Parsing and fetching
    "IntrospectionParser",
    "IntrospectionFetcher",
    # Synthesis
    "BaseType",
    "FormattedArgument",
    "FormattedField",
    "TypeResolver",
    "RequestSynthesizer",
    "split_url",
    # Collection
    "POSTMAN_SCHEMA_URL",
    "PostmanCollection",
    "PostmanItem",
    "CollectionAssembler",
    "collection_name",
    "create_collection",
    "save_collection",
]
