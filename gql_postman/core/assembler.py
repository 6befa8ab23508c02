"""Collection assembly from the Query and Mutation root types."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .auth import Auth
from .collection import PostmanCollection, PostmanInfo, PostmanItem
from .errors import SchemaIntegrityError
from .fetcher import IntrospectionFetcher
from .ir import IRSchema
from .parser import IntrospectionParser
from .synthesizer import RequestSynthesizer, split_url
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)

COLLECTION_NAME_SUFFIX = "-autoGQL"

FetchFunc = Callable[[str], Awaitable[dict[str, Any]]]


def collection_name(url: str) -> str:
    """Name a collection after the endpoint's authority, e.g. `api.example.com-autoGQL`."""
    return ".".join(split_url(url).host) + COLLECTION_NAME_SUFFIX


class CollectionAssembler:
    """Builds a collection with one request per Query and Mutation field."""

    def __init__(self, schema: IRSchema, url: str, template_dir: str | None = None):
        self.schema = schema
        self.url = url
        self.template_dir = template_dir

    def assemble(self) -> PostmanCollection:
        """Synthesize every root field, queries first, in declaration order.

        Raises:
            SchemaIntegrityError: The schema has no Query type
        """
        query_type = self.schema.query_type
        if query_type is None:
            raise SchemaIntegrityError("Query type not found")
        mutation_type = self.schema.mutation_type

        # One resolver per run: its caches must not outlive the collection
        synthesizer = RequestSynthesizer(self.schema, TypeResolver(), template_dir=self.template_dir)

        items: list[PostmanItem] = []
        for field in query_type.fields:
            items.append(synthesizer.synthesize(field, self.url, "query"))
        if mutation_type is not None:
            for field in mutation_type.fields:
                items.append(synthesizer.synthesize(field, self.url, "mutation"))
        else:
            logger.debug("Schema has no Mutation type")

        logger.info(
            "Synthesized %d queries and %d mutations",
            len(query_type.fields),
            len(mutation_type.fields) if mutation_type else 0,
        )
        return PostmanCollection(info=PostmanInfo(name=collection_name(self.url)), item=items)


async def create_collection(
    url: str,
    *,
    fetch: FetchFunc | None = None,
    auth: Auth | None = None,
    timeout: float = 30.0,
    template_dir: str | None = None,
) -> PostmanCollection:
    """Introspect an endpoint and build its collection.

    Args:
        url: GraphQL endpoint URL
        fetch: Coroutine function returning the introspection `data` for a URL;
            defaults to an IntrospectionFetcher using auth and timeout
        auth: Header provider for the default fetcher
        timeout: Request timeout for the default fetcher, in seconds
        template_dir: Optional directory with a custom operation.graphql.j2

    Raises:
        TransportError: The introspection request failed
        SchemaIntegrityError: The result is malformed or has no Query type
        TypeLookupError: A root field returns a type missing from the schema
    """
    if fetch is None:
        fetcher = IntrospectionFetcher(url, auth, timeout=timeout)

        async def fetch(_url: str) -> dict[str, Any]:
            return await fetcher.fetch()

    data = await fetch(url)
    schema = IntrospectionParser(data).parse()
    return CollectionAssembler(schema, url, template_dir=template_dir).assemble()
