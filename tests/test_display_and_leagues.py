from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from live_scores.display import event_state_label, period_label, period_ordinal
from live_scores.ingestion.leagues import (
    UnsupportedLeagueError,
    get_espn_league_slug,
    get_league_path,
    get_sport_for_league,
)
from live_scores.schemas import EventState
from live_scores.settings import DEFAULT_TIMEOUT_SECONDS, load_settings


class DisplayHelperTests(unittest.TestCase):
    def test_event_state_label(self) -> None:
        self.assertEqual("Scheduled", event_state_label(EventState.PRE))
        self.assertEqual("In Progress", event_state_label(EventState.LIVE))
        self.assertEqual("Final", event_state_label(EventState.FINAL))
        self.assertEqual("Delayed", event_state_label(EventState.DELAYED))
        self.assertEqual("", event_state_label(EventState.UNKNOWN))

    def test_period_label(self) -> None:
        self.assertEqual("Quarter", period_label("football"))
        self.assertEqual("Quarter", period_label("basketball"))
        self.assertEqual("Period", period_label("hockey"))
        self.assertEqual("Half", period_label("soccer"))
        self.assertEqual("Period", period_label("baseball"))

    def test_period_ordinal(self) -> None:
        self.assertEqual("1st", period_ordinal(1))
        self.assertEqual("2nd", period_ordinal(2))
        self.assertEqual("3rd", period_ordinal(3))
        self.assertEqual("4th", period_ordinal(4))
        self.assertEqual("7", period_ordinal(7))
        self.assertEqual("0", period_ordinal(0))


class LeagueTests(unittest.TestCase):
    def test_sport_resolution_is_case_insensitive(self) -> None:
        self.assertEqual("baseball", get_sport_for_league("MLB"))
        self.assertEqual("hockey", get_sport_for_league(" nhl "))
        self.assertEqual("basketball", get_sport_for_league("mens-college-basketball"))

    def test_league_slug(self) -> None:
        self.assertEqual("nfl", get_espn_league_slug("nfl"))
        self.assertEqual("usa.1", get_espn_league_slug("mls"))

    def test_unknown_league(self) -> None:
        self.assertIsNone(get_league_path("xfl"))
        with self.assertRaises(UnsupportedLeagueError):
            get_sport_for_league("xfl")


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()

        self.assertEqual("https://site.api.espn.com", settings.base_url)
        self.assertEqual(DEFAULT_TIMEOUT_SECONDS, settings.timeout_seconds)
        self.assertEqual("live-scores/1.0", settings.user_agent)

    def test_environment_overrides(self) -> None:
        env = {
            "ESPN_BASE_URL": "http://localhost:9000/",
            "ESPN_TIMEOUT_SECONDS": "3.5",
            "ESPN_USER_AGENT": "scoreboard-widget/2.0",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()

        self.assertEqual("http://localhost:9000", settings.base_url)
        self.assertEqual(3.5, settings.timeout_seconds)
        self.assertEqual("scoreboard-widget/2.0", settings.user_agent)

    def test_invalid_timeout_falls_back_to_default(self) -> None:
        for raw in ("soon", "-1"):
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"ESPN_TIMEOUT_SECONDS": raw}, clear=True):
                    with self.assertLogs("live_scores.settings", level="WARNING"):
                        settings = load_settings()

                self.assertEqual(DEFAULT_TIMEOUT_SECONDS, settings.timeout_seconds)


if __name__ == "__main__":
    unittest.main()
