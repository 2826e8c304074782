"""Async client for the Notion REST API.

```python
from notion_sdk import NotionApi

async with NotionApi("secret_...") as notion:
    me = await notion.users_me()
```
"""

from loguru import logger

from notion_sdk.adapters.notion_api import NotionApi
from notion_sdk.core.config import NOTION_API_VERSION, NotionSettings
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
)
from notion_sdk.core.domain.errors import (
    ApiError,
    ClientBuildError,
    ErrorKind,
    InvalidApiTokenError,
    NotionError,
    RequestFailedError,
    ResponseParseError,
    ResponseReadError,
)
from notion_sdk.core.domain.pagination import PaginationCursor, PaginationParams
from notion_sdk.core.interfaces.observer import RequestObserver, RequestRecord, ResponseRecord

# Library code stays quiet until the application calls logger.enable("notion_sdk").
logger.disable("notion_sdk")

__all__ = [
    "NOTION_API_VERSION",
    "ApiError",
    "BlockObject",
    "ClientBuildError",
    "CommentObject",
    "DatabaseObject",
    "ErrorKind",
    "ErrorObject",
    "InvalidApiTokenError",
    "ListObject",
    "NotionApi",
    "NotionError",
    "NotionSettings",
    "Object",
    "PageObject",
    "PaginationCursor",
    "PaginationParams",
    "PropertyItemObject",
    "RequestFailedError",
    "RequestObserver",
    "RequestRecord",
    "ResponseParseError",
    "ResponseReadError",
    "ResponseRecord",
    "UserObject",
]
