"""Supported leagues mapping for ESPN endpoints."""

LEAGUE_PATHS: dict[str, str] = {
    "mlb": "sports/baseball/mlb",
    "college-baseball": "sports/baseball/college-baseball",
    "nfl": "sports/football/nfl",
    "college-football": "sports/football/college-football",
    "nba": "sports/basketball/nba",
    "wnba": "sports/basketball/wnba",
    "mens-college-basketball": "sports/basketball/mens-college-basketball",
    "womens-college-basketball": "sports/basketball/womens-college-basketball",
    "nhl": "sports/hockey/nhl",
    "mls": "sports/soccer/usa.1",
    "usa.1": "sports/soccer/usa.1",
    "eng.1": "sports/soccer/eng.1",
}


class UnsupportedLeagueError(ValueError):
    pass


def get_league_path(league: str) -> str | None:
    """Return ESPN path segment for a league code (e.g., mlb).

    Returns None when the league is not supported.
    """

    return LEAGUE_PATHS.get(league.strip().lower())


def _split_league_path(league: str) -> tuple[str, str]:
    league_path = get_league_path(league)
    if league_path is None:
        raise UnsupportedLeagueError(f"Unsupported league: {league}")

    parts = league_path.split("/")
    if len(parts) < 3 or parts[0] != "sports":
        raise UnsupportedLeagueError(f"Unsupported league path: {league_path}")
    return parts[1], parts[2]


def get_sport_for_league(league: str) -> str:
    """Resolve the sport category (e.g., baseball) a league belongs to."""
    sport, _ = _split_league_path(league)
    return sport


def get_espn_league_slug(league: str) -> str:
    """Return the league segment ESPN expects in URLs (mls -> usa.1)."""
    _, slug = _split_league_path(league)
    return slug
