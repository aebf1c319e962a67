"""Quick probe for ESPN scoreboard and team endpoints."""

from __future__ import annotations

import argparse
import logging

from live_scores.display import event_state_label, period_label, period_ordinal
from live_scores.ingestion.fetch import (
    FetchResult,
    fetch_active_games,
    fetch_all_teams,
    fetch_next_event_for_team,
    fetch_score_for_game,
)
from live_scores.ingestion.leagues import LEAGUE_PATHS
from live_scores.schemas import BaseballScoreInfo, GameEvent, GeneralScoreInfo


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Probe ESPN for a league and print normalized records.",
    )
    parser.add_argument(
        "--league",
        type=str,
        default="mlb",
        help="League code (e.g., mlb, nfl, nba, nhl).",
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Scoreboard date in YYYY-MM-DD or YYYYMMDD format (default: ESPN's current day).",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--games",
        action="store_true",
        help="List the league scoreboard (default).",
    )
    target.add_argument(
        "--teams",
        action="store_true",
        help="List every team in the league.",
    )
    target.add_argument(
        "--team-id",
        type=str,
        help="Show the next event for this ESPN team id.",
    )
    target.add_argument(
        "--game-id",
        type=str,
        help="Show the score for this ESPN event id.",
    )
    return parser.parse_args(argv)


def _normalize_league(raw: str) -> str:
    value = raw.strip().lower()
    if value not in LEAGUE_PATHS:
        supported = ", ".join(sorted(LEAGUE_PATHS))
        raise SystemExit(
            f"Unsupported league: {value}. Supported leagues: {supported}"
        )
    return value


def _describe_event(event: GameEvent) -> str:
    timing = event.timing
    return (
        f"{event.id} {event.away_team.abbreviation} @ {event.home_team.abbreviation} "
        f"[{event_state_label(event.state) or 'Unknown'}] "
        f"{period_ordinal(timing.period)} {period_label(event.sport)} {timing.display_clock}"
    ).rstrip()


def _describe_score(score: GeneralScoreInfo) -> str:
    line = (
        f"{_describe_event(score.event)} "
        f"{score.away_score}-{score.home_score} {score.extra_content}"
    ).rstrip()
    if isinstance(score, BaseballScoreInfo) and score.pitcher:
        line += (
            f" | {score.balls}-{score.strikes}, {score.outs} out"
            f" | P: {score.pitcher} B: {score.batter}"
        )
    return line


def _report(result: FetchResult) -> int:
    if not result.ok:
        logging.error("ESPN error: %s", result.error)
        if result.url:
            logging.error("URL: %s", result.url)
        return 1
    if result.value is None:
        logging.info("Nothing found for league=%s", result.league)
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _parse_args(argv)
    league = _normalize_league(args.league)

    if args.teams:
        result = fetch_all_teams(league)
        for team in result.value:
            logging.info("%s %s (%s) %s", team.id, team.full_name, team.abbreviation, team.color)
    elif args.team_id:
        result = fetch_next_event_for_team(args.team_id, league)
        if result.value is not None:
            logging.info("%s", _describe_event(result.value))
    elif args.game_id:
        result = fetch_score_for_game(args.game_id, league)
        if result.value is not None:
            logging.info("%s", _describe_score(result.value))
    else:
        result = fetch_active_games(league, dates=args.date)
        for score in result.value:
            logging.info("%s", _describe_score(score))
        logging.info("Fetched %s events for league=%s", len(result.value), league)

    return _report(result)


if __name__ == "__main__":
    raise SystemExit(main())
