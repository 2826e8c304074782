"""Diagnostics contract for request dispatch.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- Tests can plug in a recording observer and assert on what was emitted
  (e.g. that the bearer token never shows up) without capturing log output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class RequestRecord:
    """What the dispatcher is about to send.

    `headers` is already redacted; `body` is the text body, or None with a
    `body_note` explaining why it is not shown.
    """

    method: str
    url: str
    headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    body: str | None = None
    body_note: str | None = None


@dataclass(frozen=True)
class ResponseRecord:
    """The raw response as received, before envelope decoding."""

    method: str
    url: str
    status_code: int
    body: str


@runtime_checkable
class RequestObserver(Protocol):
    """Receives diagnostic records. Must not block and must not raise."""

    def on_request(self, record: RequestRecord) -> None:
        ...

    def on_response(self, record: ResponseRecord) -> None:
        ...


class NullRequestObserver:
    """Discards every record."""

    def on_request(self, record: RequestRecord) -> None:
        return None

    def on_response(self, record: ResponseRecord) -> None:
        return None
