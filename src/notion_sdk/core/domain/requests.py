"""Typed request payloads for the endpoint helpers.

Property, filter and block shapes are defined by the service, so they stay
plain dicts; only the envelope of each request body is modelled.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from notion_sdk.core.domain.pagination import PaginationParams


class RequestBody(BaseModel):
    def to_json(self) -> dict[str, Any]:
        """JSON-ready body with unset optional fields dropped."""

        return self.model_dump(mode="json", exclude_none=True)


class SearchSort(BaseModel):
    direction: Literal["ascending", "descending"] = "descending"
    timestamp: Literal["last_edited_time"] = "last_edited_time"


class SearchFilter(BaseModel):
    property: Literal["object"] = "object"
    value: Literal["page", "database"]


class SearchRequest(PaginationParams, RequestBody):
    query: str | None = None
    sort: SearchSort | None = None
    filter: SearchFilter | None = None


class QueryDatabaseRequest(PaginationParams, RequestBody):
    filter: dict[str, Any] | None = None
    sorts: list[dict[str, Any]] | None = None


class CreatePageRequest(RequestBody):
    parent: dict[str, Any] = Field(..., description="e.g. {'database_id': ...} or {'page_id': ...}.")
    properties: dict[str, Any] = Field(default_factory=dict)
    children: list[dict[str, Any]] | None = None
    icon: dict[str, Any] | None = None
    cover: dict[str, Any] | None = None


class UpdatePageRequest(RequestBody):
    properties: dict[str, Any] | None = None
    archived: bool | None = None
    icon: dict[str, Any] | None = None
    cover: dict[str, Any] | None = None


class CreateDatabaseRequest(RequestBody):
    parent: dict[str, Any] = Field(..., description="e.g. {'type': 'page_id', 'page_id': ...}.")
    title: list[dict[str, Any]] = Field(default_factory=list)
    properties: dict[str, Any] = Field(..., min_length=1, description="Schema; must contain one title property.")
    icon: dict[str, Any] | None = None
    cover: dict[str, Any] | None = None


class UpdateDatabaseRequest(RequestBody):
    title: list[dict[str, Any]] | None = None
    description: list[dict[str, Any]] | None = None
    properties: dict[str, Any] | None = None


class UpdateBlockRequest(RequestBody):
    """Block content goes under its type key, e.g. `UpdateBlockRequest(paragraph={...})`."""

    model_config = ConfigDict(extra="allow")

    archived: bool | None = None


class AppendBlockChildrenRequest(RequestBody):
    children: list[dict[str, Any]] = Field(..., min_length=1, max_length=100)


class CreateCommentRequest(RequestBody):
    parent: dict[str, Any] | None = None
    discussion_id: str | None = None
    rich_text: list[dict[str, Any]] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _one_target(self) -> "CreateCommentRequest":
        # The service accepts a page parent or an existing discussion, never both.
        if (self.parent is None) == (self.discussion_id is None):
            raise ValueError("exactly one of 'parent' or 'discussion_id' is required")
        return self

    @classmethod
    def text(cls, content: str, *, page_id: str | None = None, discussion_id: str | None = None) -> "CreateCommentRequest":
        return cls(
            parent={"page_id": page_id} if page_id else None,
            discussion_id=discussion_id,
            rich_text=[{"type": "text", "text": {"content": content}}],
        )
