"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    search_url: str = _get_env("SEARCH_URL", "https://core.dxpapi.com/api/v1/core/")
    # Static query string sent with every search, e.g. "account_id=1&domain_key=x".
    search_params: str = _get_env("SEARCH_PARAMS", "request_type=search&search_type=keyword")
    search_query_param: str = _get_env("SEARCH_QUERY_PARAM", "q")
    # Empty means filter_query is accepted but not sent to the backend.
    search_filter_param: str = _get_env("SEARCH_FILTER_PARAM", "")
    search_timeout_seconds: float = float(_get_env("SEARCH_TIMEOUT_SECONDS", "10"))
    registry_path: str = _get_env("REGISTRY_PATH", "assets/functions.json")
    manifest_path: str = _get_env("MANIFEST_PATH", "assets/tools.schema.yaml")
    log_level: str = _get_env("LOG_LEVEL", "INFO")

    def static_params(self) -> list[tuple[str, str]]:
        return parse_qsl(self.search_params, keep_blank_values=True)


settings = Settings()
