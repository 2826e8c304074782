import asyncio
import json
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from notion_sdk import NotionApi
from notion_sdk.core.config import NotionSettings
from notion_sdk.core.interfaces.observer import RequestRecord, ResponseRecord

TOKEN = "secret_abc"


class RecordingObserver:
    def __init__(self):
        self.requests: list[RequestRecord] = []
        self.responses: list[ResponseRecord] = []

    def on_request(self, record: RequestRecord) -> None:
        self.requests.append(record)

    def on_response(self, record: ResponseRecord) -> None:
        self.responses.append(record)


@pytest.fixture
def settings():
    # Explicit values so a developer's NOTION_* env vars cannot leak into tests.
    return NotionSettings(
        api_token=None,
        base_url="https://api.notion.com/v1",
        notion_version="2022-02-22",
        http_timeout_seconds=None,
        verify_tls=True,
        user_agent="notion-sdk-tests",
    )


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def make_api(settings, observer) -> Callable[..., NotionApi]:
    """Build a client whose transport answers with `handler`."""

    def _make(handler: Callable[[httpx.Request], Any], token: str = TOKEN) -> NotionApi:
        return NotionApi(
            token,
            settings=settings,
            observer=observer,
            transport=httpx.MockTransport(handler),
        )

    return _make


def json_handler(payload: dict, status_code: int = 200, seen: list | None = None):
    def _handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, text=json.dumps(payload))

    return _handler


@pytest.fixture
def respond():
    return json_handler


@pytest_asyncio.fixture
async def loopback_server():
    """Start a one-shot HTTP/1.1 server on 127.0.0.1 answering with `payload`.

    Returns `(base_url, received)`; `received` collects the raw request heads.
    """

    servers = []

    async def _start(payload: dict, status_line: str = "200 OK"):
        received: list[bytes] = []
        body = json.dumps(payload).encode("utf-8")

        async def handle(reader, writer):
            received.append(await reader.readuntil(b"\r\n\r\n"))
            writer.write(
                f"HTTP/1.1 {status_line}\r\n"
                "Content-Type: application/json\r\n"
                f"Content-Length: {len(body)}\r\n"
                "Connection: close\r\n\r\n".encode("ascii")
                + body
            )
            await writer.drain()
            writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        servers.append(server)
        port = server.sockets[0].getsockname()[1]
        return f"http://127.0.0.1:{port}/v1", received

    yield _start

    for server in servers:
        server.close()
        await server.wait_closed()
