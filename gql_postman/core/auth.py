"""Header providers for the introspection request.

Anything with a `get_headers()` method satisfies the Auth protocol, so
endpoints with unusual schemes can pass their own object.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for objects that add headers to the introspection request."""

    def get_headers(self) -> dict[str, str]:
        """Return headers to send alongside the introspection query."""
        ...


class NoAuth:
    """Public endpoints."""

    def get_headers(self) -> dict[str, str]:
        return {}


class BearerAuth:
    """`Authorization: Bearer <token>`."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class ApiKeyAuth:
    """API key sent in a single header (default: x-api-key)."""

    def __init__(self, api_key: str, header_name: str = "x-api-key"):
        self.api_key = api_key
        self.header_name = header_name

    def get_headers(self) -> dict[str, str]:
        return {self.header_name: self.api_key}


class HeaderAuth:
    """Arbitrary headers, e.g. from repeated `--header "Name: value"` options."""

    def __init__(self, headers: dict[str, str]):
        self._headers = dict(headers)

    @classmethod
    def from_lines(cls, lines: list[str]) -> "HeaderAuth":
        """Build from `Name: value` strings.

        Raises:
            ValueError: A line has no colon or an empty name
        """
        headers = {}
        for line in lines:
            name, sep, value = line.partition(":")
            if not sep or not name.strip():
                raise ValueError(f"Header must look like 'Name: value', got {line!r}")
            headers[name.strip()] = value.strip()
        return cls(headers)

    def get_headers(self) -> dict[str, str]:
        return self._headers.copy()


class CombinedAuth:
    """Merges several providers; later providers override earlier ones."""

    def __init__(self, *providers: Auth):
        self.providers = providers

    def get_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        for provider in self.providers:
            headers.update(provider.get_headers())
        return headers
