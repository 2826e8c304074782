"""Response envelope models (Pydantic v2).

Every Notion response is a JSON object whose `object` field names its kind.
The union below is closed: a payload with an unknown or missing tag fails
validation instead of falling back to some default variant.

Note:
- Fields beyond the ones declared here are kept (`extra="allow"`); their
  shape belongs to the remote service.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict

from notion_sdk.core.domain.pagination import PaginationCursor


class EnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class NotionObject(EnvelopeModel):
    """Fields shared by every addressable remote object."""

    id: str = Field(..., min_length=1, description="Object UUID.")


class UserObject(NotionObject):
    object: Literal["user"] = "user"
    type: str | None = Field(default=None, description="'person' or 'bot'.")
    name: str | None = None
    avatar_url: str | None = None
    person: dict[str, Any] | None = None
    bot: dict[str, Any] | None = None


class PageObject(NotionObject):
    object: Literal["page"] = "page"
    created_time: datetime | None = None
    last_edited_time: datetime | None = None
    created_by: dict[str, Any] | None = None
    last_edited_by: dict[str, Any] | None = None
    archived: bool = False
    parent: dict[str, Any] | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    icon: dict[str, Any] | None = None
    cover: dict[str, Any] | None = None
    url: str | None = None


class DatabaseObject(NotionObject):
    object: Literal["database"] = "database"
    created_time: datetime | None = None
    last_edited_time: datetime | None = None
    title: list[dict[str, Any]] = Field(default_factory=list)
    description: list[dict[str, Any]] = Field(default_factory=list)
    archived: bool = False
    parent: dict[str, Any] | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    url: str | None = None

    def plain_title(self) -> str:
        return "".join(str(part.get("plain_text", "")) for part in self.title)


class BlockObject(NotionObject):
    object: Literal["block"] = "block"
    type: str | None = Field(default=None, description="Block type, e.g. 'paragraph'.")
    created_time: datetime | None = None
    last_edited_time: datetime | None = None
    has_children: bool = False
    archived: bool = False
    parent: dict[str, Any] | None = None


class CommentObject(NotionObject):
    object: Literal["comment"] = "comment"
    parent: dict[str, Any] | None = None
    discussion_id: str | None = None
    created_time: datetime | None = None
    created_by: dict[str, Any] | None = None
    rich_text: list[dict[str, Any]] = Field(default_factory=list)


class PropertyItemObject(NotionObject):
    object: Literal["property_item"] = "property_item"
    type: str | None = None


ResultObject = Annotated[
    Union[
        UserObject,
        PageObject,
        DatabaseObject,
        BlockObject,
        CommentObject,
        PropertyItemObject,
    ],
    Field(discriminator="object"),
]


class ListObject(EnvelopeModel):
    """One page of results plus its continuation cursor."""

    object: Literal["list"] = "list"
    results: list[ResultObject] = Field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False
    type: str | None = Field(default=None, description="Kind of the results, e.g. 'page_or_database'.")

    @property
    def cursor(self) -> PaginationCursor:
        return PaginationCursor(next_cursor=self.next_cursor, has_more=self.has_more)


class ErrorObject(EnvelopeModel):
    """Semantic failure reported by the remote service."""

    object: Literal["error"] = "error"
    status: int = Field(..., description="HTTP status the service associated with the error.")
    code: str = Field(..., min_length=1, description="Machine-readable code, e.g. 'object_not_found'.")
    message: str = Field(default="", description="Human-readable explanation.")
    request_id: str | None = None


Object = Annotated[
    Union[
        UserObject,
        PageObject,
        DatabaseObject,
        BlockObject,
        CommentObject,
        PropertyItemObject,
        ListObject,
        ErrorObject,
    ],
    Field(discriminator="object"),
]

OBJECT_ADAPTER: TypeAdapter[Object] = TypeAdapter(Object)


def decode_object(payload: str | bytes) -> Object:
    """Validate raw JSON text into exactly one envelope variant.

    Raises `pydantic.ValidationError` on malformed JSON, a missing or unknown
    `object` tag, or a variant whose required fields are absent.
    """

    return OBJECT_ADAPTER.validate_json(payload)


def encode_object(obj: EnvelopeModel) -> str:
    """JSON text for `obj`, in the same shape the service sends."""

    return obj.model_dump_json()
