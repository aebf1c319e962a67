from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class EventState(str, Enum):
    UNKNOWN = ""
    PRE = "pre"
    LIVE = "live"
    FINAL = "final"
    DELAYED = "delayed"


class InningState(str, Enum):
    UNKNOWN = ""
    TOP = "top"
    BOTTOM = "bottom"
    MID = "mid"
    END = "end"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class TeamInfo(_Record):
    id: str
    name: str
    abbreviation: str
    full_name: str
    location: str
    logo: str
    color: str


class TimingInfo(_Record):
    clock: float = 0.0
    display_clock: str = ""
    period: int = 0


class GameEvent(_Record):
    id: str
    name: str
    date: str
    start_time_utc: Optional[datetime] = None
    home_team: TeamInfo
    away_team: TeamInfo
    state: EventState
    sport: str
    league: str
    timing: TimingInfo


class GeneralScoreInfo(_Record):
    event: GameEvent
    home_score: int = 0
    away_score: int = 0
    # status.type.shortDetail, e.g. "Bot 2nd" or "Final"
    extra_content: str = ""


class BaseballScoreInfo(GeneralScoreInfo):
    runner_on_first: bool = False
    runner_on_second: bool = False
    runner_on_third: bool = False
    balls: int = 0
    strikes: int = 0
    outs: int = 0
    pitcher: str = ""
    batter: str = ""
    pitcher_summary: str = ""
    batter_summary: str = ""
    inning: int = 0
    inning_state: InningState = InningState.UNKNOWN
    due_up: str = ""
