"""Notion API client.

Responsibility:
- Hold the authenticated transport (built once, shared read-only).
- Run each call through one linear pipeline: build, send, read, parse,
  classify. Every failure is raised at the step where it happens and is never
  retried here.
- Expose thin endpoint helpers that narrow the decoded envelope.

HTTP status codes are not inspected: a 4xx with a valid `error` envelope
becomes `ApiError`, a 2xx carrying an `error` envelope does too.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import httpx
from loguru import logger
from pydantic import ValidationError

from notion_sdk.adapters.http_client import build_async_client, build_default_headers, redact_headers
from notion_sdk.adapters.request_logging import LoguruRequestObserver, describe_request
from notion_sdk.core.config import NotionSettings
from notion_sdk.core.domain.envelope import (
    BlockObject,
    CommentObject,
    DatabaseObject,
    ErrorObject,
    ListObject,
    Object,
    PageObject,
    PropertyItemObject,
    UserObject,
    decode_object,
)
from notion_sdk.core.domain.errors import (
    ApiError,
    InvalidApiTokenError,
    RequestFailedError,
    ResponseParseError,
    ResponseReadError,
)
from notion_sdk.core.domain.pagination import PaginationParams
from notion_sdk.core.domain.requests import (
    AppendBlockChildrenRequest,
    CreateCommentRequest,
    CreateDatabaseRequest,
    CreatePageRequest,
    QueryDatabaseRequest,
    RequestBody,
    SearchRequest,
    UpdateBlockRequest,
    UpdateDatabaseRequest,
    UpdatePageRequest,
)
from notion_sdk.core.interfaces.observer import RequestObserver, ResponseRecord

T = TypeVar("T")

_log = logger.bind(component="notion_sdk.client")


class NotionApi:
    """Async Notion API client.

    ```python
    async with NotionApi("secret_...") as notion:
        me = await notion.users_me()
    ```
    """

    def __init__(
        self,
        api_token: str,
        *,
        settings: NotionSettings | None = None,
        observer: RequestObserver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or NotionSettings()
        headers = build_default_headers(api_token, self._settings)
        self._client = build_async_client(self._settings, headers=headers, transport=transport)
        self._observer: RequestObserver = observer or LoguruRequestObserver()
        self._base_path = self._settings.base_url

    @classmethod
    def from_settings(
        cls,
        settings: NotionSettings | None = None,
        *,
        observer: RequestObserver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "NotionApi":
        """Build a client whose token comes from `NOTION_API_TOKEN`."""

        settings = settings or NotionSettings()
        if settings.api_token is None:
            raise InvalidApiTokenError("NOTION_API_TOKEN is not set")
        return cls(
            settings.api_token.get_secret_value(),
            settings=settings,
            observer=observer,
            transport=transport,
        )

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def headers(self) -> httpx.Headers:
        """Copy of the fixed headers; `repr` masks the authorization value."""

        return self._client.headers.copy()

    def redacted_headers(self) -> tuple[tuple[str, str], ...]:
        return redact_headers(self._client.headers.items())

    def __repr__(self) -> str:
        return f"NotionApi(base_path={self._base_path!r})"

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "NotionApi":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # -- dispatch --------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: RequestBody | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Object:
        """Execute one call and return the decoded, non-error envelope."""

        if isinstance(json, RequestBody):
            json = json.to_json()
        request = self._client.build_request(method, path, json=json, params=params)
        self._notify(lambda: self._observer.on_request(describe_request(request)))

        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise RequestFailedError(f"{request.method} {request.url} failed", source=exc) from exc

        try:
            await response.aread()
            text = response.text
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise ResponseReadError(f"could not read response of {request.method} {request.url}", source=exc) from exc
        finally:
            await response.aclose()

        record = ResponseRecord(
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            body=text,
        )
        self._notify(lambda: self._observer.on_response(record))

        try:
            result = decode_object(text)
        except ValidationError as exc:
            raise ResponseParseError(
                f"response of {request.method} {request.url} is not a Notion object", source=exc
            ) from exc

        if isinstance(result, ErrorObject):
            raise ApiError(result)
        return result

    def _notify(self, emit: Callable[[], None]) -> None:
        # Diagnostics are best effort: an observer failure never fails the call.
        try:
            emit()
        except Exception:
            _log.opt(exception=True).warning("request observer failed")

    @staticmethod
    def _expect(result: Object, kind: type[T] | tuple[type, ...]) -> T:
        if not isinstance(result, kind):
            expected = kind.__name__ if isinstance(kind, type) else " | ".join(k.__name__ for k in kind)
            raise ResponseParseError(f"expected {expected}, got {type(result).__name__}")
        return result  # type: ignore[return-value]

    @staticmethod
    def _query(params: PaginationParams | None, **extra: Any) -> dict[str, Any] | None:
        query = params.as_query() if params else {}
        query.update({k: v for k, v in extra.items() if v is not None})
        return query or None

    # -- users -----------------------------------------------------------

    async def users_me(self) -> UserObject:
        return self._expect(await self.request("GET", "/users/me"), UserObject)

    async def get_user(self, user_id: str) -> UserObject:
        return self._expect(await self.request("GET", f"/users/{user_id}"), UserObject)

    async def list_users(self, params: PaginationParams | None = None) -> ListObject:
        return self._expect(await self.request("GET", "/users", params=self._query(params)), ListObject)

    # -- pages -----------------------------------------------------------

    async def get_page(self, page_id: str) -> PageObject:
        return self._expect(await self.request("GET", f"/pages/{page_id}"), PageObject)

    async def create_page(self, body: CreatePageRequest) -> PageObject:
        return self._expect(await self.request("POST", "/pages", json=body), PageObject)

    async def update_page(self, page_id: str, body: UpdatePageRequest) -> PageObject:
        return self._expect(await self.request("PATCH", f"/pages/{page_id}", json=body), PageObject)

    async def get_page_property(
        self,
        page_id: str,
        property_id: str,
        params: PaginationParams | None = None,
    ) -> PropertyItemObject | ListObject:
        """Single-value properties come back as one item, multi-value ones as a list."""

        result = await self.request(
            "GET",
            f"/pages/{page_id}/properties/{property_id}",
            params=self._query(params),
        )
        return self._expect(result, (PropertyItemObject, ListObject))

    # -- databases -------------------------------------------------------

    async def get_database(self, database_id: str) -> DatabaseObject:
        return self._expect(await self.request("GET", f"/databases/{database_id}"), DatabaseObject)

    async def query_database(self, database_id: str, body: QueryDatabaseRequest | None = None) -> ListObject:
        result = await self.request(
            "POST",
            f"/databases/{database_id}/query",
            json=body or QueryDatabaseRequest(),
        )
        return self._expect(result, ListObject)

    async def create_database(self, body: CreateDatabaseRequest) -> DatabaseObject:
        return self._expect(await self.request("POST", "/databases", json=body), DatabaseObject)

    async def update_database(self, database_id: str, body: UpdateDatabaseRequest) -> DatabaseObject:
        result = await self.request("PATCH", f"/databases/{database_id}", json=body)
        return self._expect(result, DatabaseObject)

    # -- blocks ----------------------------------------------------------

    async def get_block(self, block_id: str) -> BlockObject:
        return self._expect(await self.request("GET", f"/blocks/{block_id}"), BlockObject)

    async def update_block(self, block_id: str, body: UpdateBlockRequest) -> BlockObject:
        return self._expect(await self.request("PATCH", f"/blocks/{block_id}", json=body), BlockObject)

    async def get_block_children(self, block_id: str, params: PaginationParams | None = None) -> ListObject:
        result = await self.request("GET", f"/blocks/{block_id}/children", params=self._query(params))
        return self._expect(result, ListObject)

    async def append_block_children(self, block_id: str, body: AppendBlockChildrenRequest) -> ListObject:
        result = await self.request("PATCH", f"/blocks/{block_id}/children", json=body)
        return self._expect(result, ListObject)

    async def delete_block(self, block_id: str) -> BlockObject:
        return self._expect(await self.request("DELETE", f"/blocks/{block_id}"), BlockObject)

    # -- comments --------------------------------------------------------

    async def list_comments(self, block_id: str, params: PaginationParams | None = None) -> ListObject:
        result = await self.request("GET", "/comments", params=self._query(params, block_id=block_id))
        return self._expect(result, ListObject)

    async def create_comment(self, body: CreateCommentRequest) -> CommentObject:
        return self._expect(await self.request("POST", "/comments", json=body), CommentObject)

    # -- search ----------------------------------------------------------

    async def search(self, body: SearchRequest | None = None) -> ListObject:
        return self._expect(await self.request("POST", "/search", json=body or SearchRequest()), ListObject)
