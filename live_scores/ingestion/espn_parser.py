"""Parser for ESPN scoreboard and team payloads."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from live_scores.ingestion.schema import (
    RawCompetition,
    RawCompetitor,
    RawEvent,
    RawScoreboard,
    RawStatus,
    RawTeam,
    RawTeamDetail,
    RawTeamsPayload,
)
from live_scores.schemas import (
    BaseballScoreInfo,
    EventState,
    GameEvent,
    GeneralScoreInfo,
    InningState,
    TeamInfo,
    TimingInfo,
)

logger = logging.getLogger(__name__)

DEFAULT_TEAM_COLOR = "000000"
IN_PROGRESS_STATUS = "STATUS_IN_PROGRESS"

_EVENT_STATES: dict[str, EventState] = {
    "STATUS_SCHEDULED": EventState.PRE,
    IN_PROGRESS_STATUS: EventState.LIVE,
    "STATUS_FINAL": EventState.FINAL,
    "STATUS_DELAYED": EventState.DELAYED,
    "STATUS_RAIN_DELAY": EventState.DELAYED,
}

_INNING_MARKERS: tuple[tuple[str, InningState], ...] = (
    ("Top", InningState.TOP),
    ("Bot", InningState.BOTTOM),
    ("End", InningState.END),
    ("Mid", InningState.MID),
)


class EspnParseError(ValueError):
    pass


def _safe_int(value: Any) -> int:
    if isinstance(value, dict):
        value = value.get("value")
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def _parse_start_time(date_value: str) -> datetime | None:
    if date_value:
        try:
            return datetime.fromisoformat(date_value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return None


def logo_identifier(league: str, abbreviation: str) -> str:
    return f"{league}-{abbreviation.lower()}.png"


def team_color(raw_color: str | None) -> str:
    return "#" + (raw_color or DEFAULT_TEAM_COLOR)


def parse_team_info(league: str, team: RawTeam) -> TeamInfo:
    return TeamInfo(
        id=team.id,
        name=team.short_display_name,
        abbreviation=team.abbreviation,
        full_name=team.display_name,
        location=team.location,
        logo=logo_identifier(league, team.abbreviation),
        color=team_color(team.color),
    )


def parse_timing_info(status: RawStatus) -> TimingInfo:
    return TimingInfo(
        clock=status.clock,
        display_clock=status.display_clock,
        period=status.period,
    )


def parse_event_state(event: RawEvent) -> EventState:
    status_name = event.competitions[0].status.type.name
    return _EVENT_STATES.get(status_name, EventState.UNKNOWN)


def parse_inning(short_detail: str) -> int:
    # TODO: read situation.inning once ESPN exposes it on the scoreboard feed.
    match = re.search(r"\d+", short_detail)
    return int(match.group(0)) if match else 0


def parse_inning_state(short_detail: str) -> InningState:
    for marker, state in _INNING_MARKERS:
        if marker in short_detail:
            return state
    return InningState.UNKNOWN


def _split_competitors(competition: RawCompetition) -> tuple[RawCompetitor, RawCompetitor]:
    home = None
    away = None
    for competitor in competition.competitors:
        if competitor.home_away == "home" and home is None:
            home = competitor
        elif competitor.home_away == "away" and away is None:
            away = competitor
    if home is None or away is None:
        raise EspnParseError("competition is missing a home or away competitor")
    return home, away


def _build_event(
    event: RawEvent,
    home: RawCompetitor,
    away: RawCompetitor,
    league: str,
    sport: str,
) -> GameEvent:
    return GameEvent(
        id=event.id,
        name=event.name,
        date=event.date,
        start_time_utc=_parse_start_time(event.date),
        home_team=parse_team_info(league, home.team),
        away_team=parse_team_info(league, away.team),
        state=parse_event_state(event),
        sport=sport,
        league=league,
        timing=parse_timing_info(event.competitions[0].status),
    )


def parse_event(event: RawEvent, league: str, sport: str) -> GameEvent:
    home, away = _split_competitors(event.competitions[0])
    return _build_event(event, home, away, league, sport)


def _baseball_fields(competition: RawCompetition) -> dict[str, Any]:
    short_detail = competition.status.type.short_detail
    situation = competition.situation
    fields: dict[str, Any] = {
        "inning": parse_inning(short_detail),
        "inning_state": parse_inning_state(short_detail),
    }
    if situation is not None and situation.due_up:
        athlete = situation.due_up[0].athlete
        fields["due_up"] = athlete.display_name if athlete else ""

    if competition.status.type.name != IN_PROGRESS_STATUS or situation is None:
        return fields

    pitcher = situation.pitcher
    batter = situation.batter
    fields.update(
        runner_on_first=bool(situation.on_first),
        runner_on_second=bool(situation.on_second),
        runner_on_third=bool(situation.on_third),
        balls=situation.balls,
        strikes=situation.strikes,
        outs=situation.outs,
        pitcher=pitcher.athlete.display_name if pitcher and pitcher.athlete else "",
        batter=batter.athlete.display_name if batter and batter.athlete else "",
        pitcher_summary=pitcher.summary if pitcher else "",
        batter_summary=batter.summary if batter else "",
    )
    return fields


def parse_score_info(
    event: RawEvent, league: str, sport: str
) -> GeneralScoreInfo | BaseballScoreInfo:
    competition = event.competitions[0]
    home, away = _split_competitors(competition)
    general = {
        "event": _build_event(event, home, away, league, sport),
        "home_score": _safe_int(home.score),
        "away_score": _safe_int(away.score),
        "extra_content": competition.status.type.short_detail,
    }
    if "baseball" in sport:
        return BaseballScoreInfo(**general, **_baseball_fields(competition))
    return GeneralScoreInfo(**general)


def parse_game(payload: Any, league: str, sport: str) -> GeneralScoreInfo | BaseballScoreInfo:
    """Parse a single-event payload (``/scoreboard/{id}``)."""
    return parse_score_info(RawEvent.model_validate(payload), league, sport)


def parse_scoreboard(
    payload: Any, league: str, sport: str
) -> list[GeneralScoreInfo | BaseballScoreInfo]:
    """Parse ESPN scoreboard JSON into score records.

    Events that fail validation are logged and skipped.
    """

    scoreboard = RawScoreboard.model_validate(payload)
    parsed: list[GeneralScoreInfo | BaseballScoreInfo] = []
    for index, raw_event in enumerate(scoreboard.events):
        try:
            event = RawEvent.model_validate(raw_event)
            parsed.append(parse_score_info(event, league, sport))
        except (ValidationError, EspnParseError) as exc:
            logger.warning(
                "Skipping malformed event index=%s id=%s league=%s: %s",
                index,
                raw_event.get("id") if isinstance(raw_event, dict) else None,
                league,
                exc,
            )
    return parsed


def parse_teams(payload: Any, league: str) -> list[TeamInfo]:
    teams_payload = RawTeamsPayload.model_validate(payload)
    entries = teams_payload.sports[0].leagues[0].teams
    return [parse_team_info(league, entry.team) for entry in entries]


def parse_next_event(payload: Any, league: str, sport: str) -> GameEvent | None:
    detail = RawTeamDetail.model_validate(payload)
    if not detail.team.next_event:
        return None
    return parse_event(detail.team.next_event[0], league, sport)
