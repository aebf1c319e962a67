from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)
_SETTINGS: ClientSettings | None = None

DEFAULT_BASE_URL = "https://site.api.espn.com"
DEFAULT_TIMEOUT_SECONDS = 12.0
DEFAULT_USER_AGENT = "live-scores/1.0"


@dataclass(frozen=True)
class ClientSettings:
    base_url: str
    timeout_seconds: float
    user_agent: str


def _read_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "ESPN_TIMEOUT_SECONDS=%r is not a number. Using default %s.",
            raw,
            DEFAULT_TIMEOUT_SECONDS,
        )
        return DEFAULT_TIMEOUT_SECONDS
    if value <= 0:
        logger.warning(
            "ESPN_TIMEOUT_SECONDS must be positive, got %s. Using default %s.",
            value,
            DEFAULT_TIMEOUT_SECONDS,
        )
        return DEFAULT_TIMEOUT_SECONDS
    return value


def load_settings() -> ClientSettings:
    """Read client settings from the environment."""
    base_url = (os.getenv("ESPN_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/")
    user_agent = (os.getenv("ESPN_USER_AGENT") or "").strip() or DEFAULT_USER_AGENT
    return ClientSettings(
        base_url=base_url,
        timeout_seconds=_read_timeout(os.getenv("ESPN_TIMEOUT_SECONDS")),
        user_agent=user_agent,
    )


def get_settings() -> ClientSettings:
    global _SETTINGS
    if _SETTINGS is not None:
        return _SETTINGS
    _SETTINGS = load_settings()
    return _SETTINGS
