"""Command-line interface for gql-postman."""

import asyncio
import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from . import __version__
from .core.assembler import CollectionAssembler, create_collection
from .core.auth import ApiKeyAuth, BearerAuth, CombinedAuth, HeaderAuth
from .core.collection import save_collection
from .core.errors import GqlPostmanError
from .core.parser import IntrospectionParser
from .core.synthesizer import split_url

logger = logging.getLogger("gql_postman")


def configure_logging(verbose: bool):
    """Route logs through Rich unless the root logger is already configured.

    gql_postman records propagate to the root handlers at DEBUG when verbose.
    """
    logging.basicConfig(
        level="INFO",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def default_output(url: str) -> Path:
    """Default output file named after the endpoint's authority."""
    return Path(f"{'.'.join(split_url(url).host)}.postman_collection.json")


@click.group()
@click.version_option(version=__version__)
def main():
    """Generate Postman collections from GraphQL schemas.

    Every Query and Mutation field becomes one ready-to-edit request.
    """
    pass


@main.command()
@click.option(
    "--url",
    "-u",
    required=True,
    help="GraphQL endpoint URL. Introspected unless --schema is given.",
)
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Offline introspection JSON or SDL (.graphql, .graphqls) file.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file (default: <host>.postman_collection.json).",
)
@click.option(
    "--token",
    envvar="GQL_POSTMAN_TOKEN",
    help="Bearer token for the introspection request.",
)
@click.option(
    "--api-key",
    envvar="GQL_POSTMAN_API_KEY",
    help="API key for the introspection request.",
)
@click.option(
    "--api-key-header",
    default="x-api-key",
    show_default=True,
    help="Header that carries --api-key.",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Extra request header as 'Name: value'. Repeatable.",
)
@click.option(
    "--timeout",
    default=30.0,
    show_default=True,
    type=float,
    help="Introspection request timeout in seconds.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom operation.graphql.j2 template.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    url: str,
    schema: str | None,
    output: str | None,
    token: str | None,
    api_key: str | None,
    api_key_header: str,
    headers: tuple[str, ...],
    timeout: float,
    template_dir: str | None,
    verbose: bool,
):
    """Generate a Postman collection for a GraphQL endpoint.

    Examples:

        gql-postman generate --url https://api.example.com/graphql

        gql-postman generate -u https://api.example.com/graphql -o api.json --token $TOKEN

        gql-postman generate -u http://localhost:4000/graphql -s ./schema.graphqls
    """
    configure_logging(verbose)

    try:
        output_path = Path(output) if output else default_output(url)
        split_url(url)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--url") from e

    try:
        if schema:
            logger.info("Loading schema from %s", schema)
            ir = IntrospectionParser.from_file(schema).parse()
            collection = CollectionAssembler(ir, url, template_dir=template_dir).assemble()
        else:
            try:
                header_auth = HeaderAuth.from_lines(list(headers))
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--header") from e
            providers = [header_auth]
            if api_key:
                providers.append(ApiKeyAuth(api_key, header_name=api_key_header))
            if token:
                providers.append(BearerAuth(token))
            collection = asyncio.run(
                create_collection(
                    url,
                    auth=CombinedAuth(*providers),
                    timeout=timeout,
                    template_dir=template_dir,
                )
            )
    except GqlPostmanError as e:
        logger.error("%s", e)
        raise click.ClickException(str(e)) from e

    save_collection(collection, output_path)
    click.echo(f"Done! Generated {len(collection.item)} requests in {output_path}")


if __name__ == "__main__":
    main()
