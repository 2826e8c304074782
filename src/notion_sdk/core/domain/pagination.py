"""Pagination primitives.

The cursor is opaque: the client never interprets it, it only hands it back
to the caller so the next call can continue where the last one stopped.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PaginationCursor(BaseModel):
    """Continuation state carried by every `list` envelope."""

    model_config = ConfigDict(frozen=True)

    next_cursor: str | None = Field(
        default=None,
        description="Opaque token for the next page (None on the last page).",
    )
    has_more: bool = Field(
        default=False,
        description="True when further results exist past this page.",
    )


class PaginationParams(BaseModel):
    """Paging controls accepted by every paginated endpoint."""

    start_cursor: str | None = Field(
        default=None,
        description="Value of `next_cursor` from a previous response.",
    )
    page_size: int | None = Field(
        default=None,
        ge=1,
        le=100,
        description="Number of items per page (the service caps it at 100).",
    )

    @classmethod
    def after(cls, cursor: PaginationCursor, page_size: int | None = None) -> "PaginationParams":
        """Params for the page that follows `cursor`."""

        return cls(start_cursor=cursor.next_cursor, page_size=page_size)

    def as_query(self) -> dict[str, Any]:
        """Query-string form used by GET endpoints."""

        return self.model_dump(include={"start_cursor", "page_size"}, exclude_none=True)
