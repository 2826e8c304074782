"""httpx wrapper.

Why a wrapper:
- Bakes the fixed Notion headers (version + bearer auth) into one transport
  so no call has to re-authenticate.
- Makes testing easy: an `httpx.MockTransport` can replace the network.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

import httpx

from notion_sdk.core.config import NotionSettings
from notion_sdk.core.domain.errors import ClientBuildError, InvalidApiTokenError

NOTION_VERSION_HEADER = "Notion-Version"
AUTHORIZATION_HEADER = "Authorization"

# Header names compared lower-cased.
SENSITIVE_HEADERS: frozenset[str] = frozenset({"authorization", "proxy-authorization"})
REDACTED = "[secure]"

# RFC 7230 field-value, as h11 enforces it on the wire: visible ASCII runs
# joined by SP/HTAB, no leading or trailing whitespace.
_HEADER_VALUE_RE = re.compile(r"[\x21-\x7e]+(?:[ \t]+[\x21-\x7e]+)*")


def validate_header_value(value: str) -> str:
    if not isinstance(value, str) or _HEADER_VALUE_RE.fullmatch(value) is None:
        raise ValueError(
            "header values must be non-empty printable ASCII without control characters "
            "or surrounding whitespace"
        )
    return value


def build_default_headers(api_token: str, settings: NotionSettings) -> dict[str, str]:
    """Fixed headers carried by every request.

    Raises `InvalidApiTokenError` when the token cannot be encoded as a header
    value. The token itself never appears in the error message.
    """

    try:
        auth_value = validate_header_value(f"Bearer {api_token}")
    except ValueError as exc:
        raise InvalidApiTokenError("API token is not a valid HTTP header value", source=exc) from exc

    return {
        NOTION_VERSION_HEADER: settings.notion_version,
        AUTHORIZATION_HEADER: auth_value,
        "User-Agent": settings.user_agent,
    }


def build_async_client(
    settings: NotionSettings | None = None,
    *,
    headers: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared `httpx.AsyncClient`.

    Any failure while building it (bad TLS setup, invalid base URL, ...) is
    raised as `ClientBuildError`.
    """

    settings = settings or NotionSettings()
    try:
        return httpx.AsyncClient(
            base_url=settings.base_url,
            headers=dict(headers or {}),
            timeout=httpx.Timeout(settings.http_timeout_seconds),
            verify=settings.verify_tls,
            transport=transport,
        )
    except Exception as exc:
        raise ClientBuildError("could not build the HTTP client", source=exc) from exc


def is_sensitive_header(name: str) -> bool:
    return name.lower() in SENSITIVE_HEADERS


def redact_headers(headers: Iterable[tuple[str, str]]) -> tuple[tuple[str, str], ...]:
    """Header pairs safe to log: sensitive values replaced by `[secure]`."""

    return tuple((name, REDACTED if is_sensitive_header(name) else value) for name, value in headers)
