"""Introspection fetcher.

Sends the standard introspection query to an endpoint and returns the
`data` member of the response.
"""

import logging
from typing import Any

import httpx
from graphql import get_introspection_query

from .auth import Auth, NoAuth
from .errors import TransportError

logger = logging.getLogger(__name__)


class IntrospectionFetcher:
    """Fetches an introspection result over HTTP.

    Examples:
        fetcher = IntrospectionFetcher(url)
        fetcher = IntrospectionFetcher(url, auth=BearerAuth(token), timeout=10)
        data = await fetcher.fetch()
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the fetcher.

        Args:
            url: GraphQL endpoint URL
            auth: Header provider (defaults to NoAuth)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.url = url
        self.auth = auth or NoAuth()
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        headers.update(self.auth.get_headers())
        return headers

    async def fetch(self) -> dict[str, Any]:
        """Run the introspection query.

        Returns:
            The 'data' portion of the response

        Raises:
            TransportError: Network failure, non-2xx status, non-JSON body,
                GraphQL errors, or no data in the response
        """
        logger.info("Fetching introspection from %s", self.url)
        payload = {"query": get_introspection_query()}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._headers(),
                transport=self.transport,
            ) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Introspection request failed with HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Introspection request failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise TransportError("Introspection response is not valid JSON", status_code=response.status_code) from e

        if not isinstance(result, dict):
            raise TransportError("Introspection response is not a JSON object", status_code=response.status_code)

        errors = result.get("errors")
        if errors:
            if not isinstance(errors, list):
                raise TransportError(f"Malformed GraphQL errors member: {errors!r}", status_code=response.status_code)
            error_messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
            )
            raise TransportError(f"GraphQL errors: {error_messages}", errors, response.status_code)

        data = result.get("data")
        if not data:
            raise TransportError("Introspection response has no data", status_code=response.status_code)
        return data
