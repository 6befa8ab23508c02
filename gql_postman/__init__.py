"""Generate Postman collections from GraphQL introspection."""

__version__ = "0.1.0"
