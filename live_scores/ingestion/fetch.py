"""Fetch ESPN data and normalize it into score, event and team records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import ValidationError

from live_scores.ingestion.espn_client import (
    EspnClientError,
    build_scoreboard_url,
    build_teams_url,
    get_json,
)
from live_scores.ingestion.espn_parser import (
    EspnParseError,
    parse_game,
    parse_next_event,
    parse_scoreboard,
    parse_teams,
)
from live_scores.ingestion.leagues import get_espn_league_slug, get_sport_for_league
from live_scores.schemas import BaseballScoreInfo, GameEvent, GeneralScoreInfo, TeamInfo
from live_scores.settings import ClientSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")
ScoreInfo = GeneralScoreInfo | BaseballScoreInfo

# Failures that end a fetch with a failed result instead of an exception.
_FETCH_ERRORS = (EspnClientError, EspnParseError, ValidationError, ValueError)


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    status: FetchStatus
    value: T
    error: Optional[str] = None
    league: Optional[str] = None
    url: Optional[str] = None
    http_status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is not FetchStatus.FAILED


def _resolve(league: str) -> tuple[str, str, str]:
    """Return (league code, sport, ESPN league slug)."""
    code = league.strip().lower()
    return code, get_sport_for_league(code), get_espn_league_slug(code)


def _run(
    operation: str,
    league: str,
    fallback: T,
    fetch: Callable[[str, str, str], tuple[str, Any]],
    parse: Callable[[Any, str, str], T],
) -> FetchResult[T]:
    url: str | None = None
    try:
        code, sport, slug = _resolve(league)
        url, payload = fetch(code, sport, slug)
        value = parse(payload, code, sport)
    except EspnClientError as exc:
        logger.error(
            "%s failed league=%s url=%s status=%s error=%s",
            operation,
            league,
            exc.url,
            exc.status,
            exc,
        )
        return FetchResult(
            FetchStatus.FAILED,
            fallback,
            error=str(exc),
            league=league,
            url=exc.url,
            http_status=exc.status,
        )
    except _FETCH_ERRORS as exc:
        logger.error("%s failed league=%s url=%s error=%s", operation, league, url, exc)
        return FetchResult(FetchStatus.FAILED, fallback, error=str(exc), league=league, url=url)

    status = FetchStatus.OK if value else FetchStatus.EMPTY
    return FetchResult(status, value, league=code, url=url)


def fetch_active_games(
    league: str,
    dates: str | date | None = None,
    settings: ClientSettings | None = None,
) -> FetchResult[list[ScoreInfo]]:
    """Fetch the league scoreboard; one record per event.

    Baseball leagues yield BaseballScoreInfo records.
    """

    def _fetch(code: str, sport: str, slug: str) -> tuple[str, Any]:
        url = build_scoreboard_url(sport, slug, dates=dates, settings=settings)
        return url, get_json(url, settings)

    result = _run("fetch_active_games", league, [], _fetch, parse_scoreboard)
    if result.ok:
        logger.info("Fetched %s games for league=%s", len(result.value), result.league)
    return result


def fetch_next_event_for_team(
    team_id: str,
    league: str,
    settings: ClientSettings | None = None,
) -> FetchResult[Optional[GameEvent]]:
    """Fetch the team's next scheduled event (``team.nextEvent[0]``)."""

    def _fetch(code: str, sport: str, slug: str) -> tuple[str, Any]:
        url = build_teams_url(sport, slug, team_id=team_id, settings=settings)
        return url, get_json(url, settings)

    return _run("fetch_next_event_for_team", league, None, _fetch, parse_next_event)


def fetch_score_for_game(
    event_id: str,
    league: str,
    settings: ClientSettings | None = None,
) -> FetchResult[Optional[ScoreInfo]]:
    def _fetch(code: str, sport: str, slug: str) -> tuple[str, Any]:
        url = build_scoreboard_url(sport, slug, event_id=event_id, settings=settings)
        return url, get_json(url, settings)

    return _run("fetch_score_for_game", league, None, _fetch, parse_game)


def fetch_all_teams(
    league: str,
    settings: ClientSettings | None = None,
) -> FetchResult[list[TeamInfo]]:
    def _fetch(code: str, sport: str, slug: str) -> tuple[str, Any]:
        url = build_teams_url(sport, slug, settings=settings)
        return url, get_json(url, settings)

    def _parse(payload: Any, code: str, sport: str) -> list[TeamInfo]:
        return parse_teams(payload, code)

    return _run("fetch_all_teams", league, [], _fetch, _parse)
