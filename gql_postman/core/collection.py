"""Postman collection (format v2.1) models and persistence."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

POSTMAN_SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"


class PostmanGraphQLBody(BaseModel):
    query: str
    variables: str


class PostmanBody(BaseModel):
    mode: str = "graphql"
    graphql: PostmanGraphQLBody


class PostmanUrl(BaseModel):
    raw: str
    protocol: str
    host: list[str]
    path: list[str]


class PostmanRequest(BaseModel):
    method: str = "POST"
    header: list[Any] = Field(default_factory=list)
    body: PostmanBody
    url: PostmanUrl


class PostmanItem(BaseModel):
    """One synthesized request, named after the field it calls."""
    name: str
    request: PostmanRequest
    response: list[Any] = Field(default_factory=list)


class PostmanInfo(BaseModel):
    name: str
    schema_: str = Field(default=POSTMAN_SCHEMA_URL, alias="schema")

    model_config = {"populate_by_name": True}


class PostmanCollection(BaseModel):
    """The importable collection document."""
    info: PostmanInfo
    item: list[PostmanItem] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready document using Postman's key names."""
        return self.model_dump(by_alias=True)


def save_collection(collection: PostmanCollection, path: str | Path) -> Path:
    """Write a collection as tab-indented JSON, creating parent directories.

    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(collection.to_dict(), indent="\t"), encoding="utf-8")
    logger.info("Wrote %d requests to %s", len(collection.item), path)
    return path
