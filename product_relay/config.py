"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_UPSTREAM_URL = "https://angelesmillwork.com/graphql"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    upstream_url: str = _get_env("UPSTREAM_URL", DEFAULT_UPSTREAM_URL)
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()
