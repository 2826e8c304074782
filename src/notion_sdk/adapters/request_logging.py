"""Default request observer backed by loguru.

Records arrive already redacted, so this module only decides levels and
formatting. The library is disabled in loguru at import time; applications
opt in with `logger.enable("notion_sdk")`.
"""

from __future__ import annotations

import httpx
from loguru import logger

from notion_sdk.adapters.http_client import redact_headers
from notion_sdk.core.interfaces.observer import RequestRecord, ResponseRecord

NO_BODY = "no request body"
BODY_NOT_UTF8 = "request body is not valid UTF-8 and cannot be displayed as text"
BODY_STREAMED = "request body is not accessible as raw bytes (possibly streamed)"


def describe_request(request: httpx.Request) -> RequestRecord:
    """Snapshot of `request` for diagnostics, without touching its stream."""

    body: str | None = None
    note: str | None = None
    try:
        content = request.content
    except httpx.RequestNotRead:
        note = BODY_STREAMED
    else:
        if not content:
            note = NO_BODY
        else:
            try:
                body = content.decode("utf-8")
            except UnicodeDecodeError:
                note = BODY_NOT_UTF8

    return RequestRecord(
        method=request.method,
        url=str(request.url),
        headers=redact_headers(request.headers.items()),
        body=body,
        body_note=note,
    )


class LoguruRequestObserver:
    """Logs every request/response pair through a bound loguru logger."""

    def __init__(self) -> None:
        self._log = logger.bind(component="notion_sdk.dispatch")

    def on_request(self, record: RequestRecord) -> None:
        self._log.debug("Request method: {}", record.method)
        self._log.info("Request URL: {}", record.url)
        self._log.info("Request headers:")
        for name, value in record.headers:
            self._log.info("    {}: {}", name, value)
        if record.body is not None:
            self._log.info("Request body:\n{}", record.body)
        else:
            self._log.info("Request body: {}", record.body_note or NO_BODY)

    def on_response(self, record: ResponseRecord) -> None:
        self._log.info("Response {} for {} {}:\n{}", record.status_code, record.method, record.url, record.body)
