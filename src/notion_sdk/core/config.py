"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the client.
- Lets adapters (HTTP transport, logging) read config consistently.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

NOTION_API_VERSION = "2022-02-22"
NOTION_BASE_URL = "https://api.notion.com/v1"


class NotionSettings(BaseSettings):
    """Central client configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into the Core.
    - The defaults are the fixed wire constants, so `NotionApi(token)` needs
      nothing else.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTION_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_token: SecretStr | None = Field(
        default=None,
        description="Integration token (only read by `NotionApi.from_settings`).",
    )
    base_url: str = Field(
        default=NOTION_BASE_URL,
        min_length=8,
        description="Base path every endpoint is joined to.",
    )
    notion_version: str = Field(
        default=NOTION_API_VERSION,
        min_length=1,
        description="Pinned value of the `Notion-Version` header.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout (seconds). None disables client timeouts.",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify the server TLS certificate.",
    )
    user_agent: str = Field(
        default="notion-sdk-python/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
