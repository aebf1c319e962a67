"""ESPN HTTP client for scoreboard and team endpoints."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Optional
from urllib.parse import urlencode

import requests

from live_scores.settings import ClientSettings, get_settings

logger = logging.getLogger(__name__)
SPORTS_BASE_PATH = "/apis/site/v2/sports"
MAX_BODY_SNIPPET = 300


class EspnClientError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        url: str,
        status: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body


def normalize_dates(value: str | date | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    cleaned = value.strip()
    if not cleaned:
        return None
    if cleaned.lower() == "today":
        return date.today().strftime("%Y%m%d")
    if re.fullmatch(r"\d{8}", cleaned):
        return cleaned
    if re.fullmatch(r"\d{8}-\d{8}", cleaned):
        return cleaned
    if re.fullmatch(r"\d{4}-\d{2}-\d{2}", cleaned):
        return cleaned.replace("-", "")
    if re.fullmatch(r"\d{4}-\d{2}-\d{2}-\d{4}-\d{2}-\d{2}", cleaned):
        parts = cleaned.split("-")
        start = "".join(parts[:3])
        end = "".join(parts[3:])
        return f"{start}-{end}"
    raise ValueError("dates must be YYYYMMDD or YYYYMMDD-YYYYMMDD")


def _league_base_url(sport: str, league: str, settings: ClientSettings | None) -> str:
    settings = settings or get_settings()
    return f"{settings.base_url}{SPORTS_BASE_PATH}/{sport}/{league}"


def build_scoreboard_url(
    sport: str,
    league: str,
    dates: str | date | None = None,
    event_id: Optional[str] = None,
    settings: ClientSettings | None = None,
) -> str:
    base_url = f"{_league_base_url(sport, league, settings)}/scoreboard"
    if event_id:
        base_url = f"{base_url}/{event_id}"
    normalized_dates = normalize_dates(dates)
    if normalized_dates:
        return f"{base_url}?{urlencode({'dates': normalized_dates})}"
    return base_url


def build_teams_url(
    sport: str,
    league: str,
    team_id: Optional[str] = None,
    settings: ClientSettings | None = None,
) -> str:
    base_url = f"{_league_base_url(sport, league, settings)}/teams"
    if team_id:
        return f"{base_url}/{team_id}"
    return base_url


def get_json(url: str, settings: ClientSettings | None = None) -> Any:
    """GET ``url`` once and return the decoded JSON body.

    Raises EspnClientError on transport errors, non-200 responses and
    bodies that are not JSON.
    """

    settings = settings or get_settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    try:
        response = requests.get(url, headers=headers, timeout=settings.timeout_seconds)
    except requests.RequestException as exc:
        raise EspnClientError(f"ESPN request failed: {exc}", url=url) from exc

    if response.status_code != 200:
        body_snippet = response.text[:MAX_BODY_SNIPPET]
        logger.error(
            "ESPN non-200 status=%s url=%s body=%s",
            response.status_code,
            url,
            body_snippet,
        )
        raise EspnClientError(
            f"ESPN returned non-200 response: {response.status_code}",
            url=url,
            status=response.status_code,
            body=body_snippet,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise EspnClientError(
            "ESPN returned non-JSON response",
            url=url,
            status=response.status_code,
            body=response.text[:MAX_BODY_SNIPPET],
        ) from exc
