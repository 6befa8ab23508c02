"""Request synthesis for single Query/Mutation fields.

Builds the operation source from a Jinja2 template, then parses and
reprints it with graphql-core so every emitted operation is valid GraphQL.

Supports custom templates via the template_dir parameter:
    synthesizer = RequestSynthesizer(schema, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
from pathlib import Path

from graphql import GraphQLSyntaxError, parse, print_ast
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .collection import PostmanBody, PostmanGraphQLBody, PostmanItem, PostmanRequest, PostmanUrl
from .errors import CompositionError, TypeLookupError
from .ir import IRField, IRSchema, IRType, TypeKind
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)

OPERATION_TEMPLATE = "operation.graphql.j2"

# Above this many arguments, declarations and call sites go one per line.
INLINE_ARGUMENT_LIMIT = 3


def split_url(url: str) -> PostmanUrl:
    """Split an absolute URL into Postman's protocol/host/path parts.

    >>> split_url("https://api.example.com/v1/graphql").path
    ['v1', 'graphql']
    """
    protocol, sep, rest = url.partition("://")
    if not sep:
        raise ValueError(f"URL must be absolute (scheme://host/...): {url}")
    authority, *path = rest.split("/")
    return PostmanUrl(raw=url, protocol=protocol, host=authority.split("."), path=path)


class RequestSynthesizer:
    """Synthesizes one example request per root field."""

    def __init__(
        self,
        schema: IRSchema,
        resolver: TypeResolver | None = None,
        template_dir: str | None = None,
    ):
        """Initialize the synthesizer.

        Args:
            schema: Schema used to look up returned types
            resolver: Resolver whose caches are shared across one run
            template_dir: Optional directory with a custom operation.graphql.j2
        """
        self.schema = schema
        self.resolver = resolver or TypeResolver()

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_postman", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
        )

    def synthesize(self, field: IRField, url: str, operation_type: str) -> PostmanItem:
        """Build the Postman request for a root field.

        Args:
            field: A field of the Query or Mutation type
            url: Endpoint the request is sent to
            operation_type: 'query' or 'mutation'

        Raises:
            TypeLookupError: The field's return type is not in the schema
            CompositionError: The composed operation is not valid GraphQL
        """
        declarations, call_arguments, variables = self._build_arguments(field)
        selection = self.build_selection(self._returned_type(field))

        source = self.env.get_template(OPERATION_TEMPLATE).render(
            operation_type=operation_type,
            name=field.name,
            has_arguments=bool(field.arguments),
            declarations=declarations,
            call_arguments=call_arguments,
            selection=selection,
        )
        query = self._normalize(source)
        logger.debug("Synthesized %s %s", operation_type, field.name)

        return PostmanItem(
            name=field.name,
            request=PostmanRequest(
                body=PostmanBody(
                    graphql=PostmanGraphQLBody(query=query, variables=f"{{\n{variables}\n}}"),
                ),
                url=split_url(url),
            ),
        )

    def _build_arguments(self, field: IRField) -> tuple[str, str, str]:
        """Build the variable declarations, call-site arguments and variables."""
        multiline = len(field.arguments) > INLINE_ARGUMENT_LIMIT
        declaration_prefix = "\n\t" if multiline else " "
        call_prefix = "\n\t\t" if multiline else " "
        declarations = ""
        call_arguments = ""
        variables = ""

        for index, arg in enumerate(field.arguments):
            formatted = self.resolver.format_argument(arg)
            if index:
                declarations += ","
                call_arguments += ", "
                variables += ",\n"
            declarations += f"{declaration_prefix}${arg.name}: {formatted.formatted_type}"
            call_arguments += f"{call_prefix}{arg.name}: ${arg.name}"
            variables += f"\t{formatted.formatted_variable}"

        if multiline:
            declarations += "\n"
            call_arguments += "\n\t"
        return declarations, call_arguments, variables

    def _returned_type(self, field: IRField) -> IRType:
        base = self.resolver.unwrap_to_base(field.type)
        returned = self.schema.get_type_by_name(base.name)
        if returned is None:
            raise TypeLookupError(base.name)
        return returned

    def build_selection(self, returned: IRType) -> str:
        """Build the selection block for a returned type, or "" for leaves.

        Only scalar and enum lines survive reprinting, so a block made
        entirely of commented lines also selects `__typename`.
        """
        if returned.kind != TypeKind.OBJECT or not returned.fields:
            return ""

        lines = [self.resolver.format_field(f).formatted_field for f in returned.fields]
        if all(line.lstrip("\t").startswith("#") for line in lines):
            lines.append("\t\t__typename\n")
        return "".join(lines)

    @staticmethod
    def _normalize(source: str) -> str:
        try:
            return print_ast(parse(source))
        except GraphQLSyntaxError as e:
            raise CompositionError(f"Synthesized operation is not valid GraphQL: {e.message}", source) from e
