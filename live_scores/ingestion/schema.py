"""Boundary models for the ESPN site API payloads.

Only the JSON paths the parser reads are modelled. Unknown keys are
ignored, so upstream additions do not break parsing; missing or mistyped
required keys raise ``pydantic.ValidationError`` here instead of deep in
the parser.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _RawModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data: Any) -> Any:
        # ESPN sends null for blank display fields; treat it as the key being absent.
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, info in cls.model_fields.items():
            if info.is_required():
                continue
            for key in {info.alias or name, name}:
                if key in cleaned and cleaned[key] is None:
                    del cleaned[key]
        return cleaned


class RawTeam(_RawModel):
    id: str
    short_display_name: str = Field("", alias="shortDisplayName")
    abbreviation: str = ""
    display_name: str = Field("", alias="displayName")
    location: str = ""
    color: Optional[str] = None


class RawCompetitor(_RawModel):
    home_away: Optional[str] = Field(None, alias="homeAway")
    team: RawTeam
    # "3" on scoreboards, {"value": 3.0, "displayValue": "3"} on team pages
    score: Any = None


class RawStatusType(_RawModel):
    name: str = ""
    short_detail: str = Field("", alias="shortDetail")


class RawStatus(_RawModel):
    clock: float = 0.0
    display_clock: str = Field("", alias="displayClock")
    period: int = 0
    type: RawStatusType = Field(default_factory=RawStatusType)


class RawAthlete(_RawModel):
    display_name: str = Field("", alias="displayName")


class RawSituationPlayer(_RawModel):
    athlete: Optional[RawAthlete] = None
    summary: str = ""


class RawDueUp(_RawModel):
    athlete: Optional[RawAthlete] = None


class RawSituation(_RawModel):
    on_first: Any = Field(None, alias="onFirst")
    on_second: Any = Field(None, alias="onSecond")
    on_third: Any = Field(None, alias="onThird")
    balls: int = 0
    strikes: int = 0
    outs: int = 0
    pitcher: Optional[RawSituationPlayer] = None
    batter: Optional[RawSituationPlayer] = None
    due_up: list[RawDueUp] = Field(default_factory=list, alias="dueUp")


class RawCompetition(_RawModel):
    competitors: list[RawCompetitor] = Field(default_factory=list)
    status: RawStatus = Field(default_factory=RawStatus)
    situation: Optional[RawSituation] = None


class RawEvent(_RawModel):
    id: str
    name: str = ""
    date: str = ""
    competitions: list[RawCompetition] = Field(min_length=1)


class RawScoreboard(_RawModel):
    # Events are validated one at a time so a single bad event can be skipped.
    events: list[Any] = Field(default_factory=list)


class RawTeamEntry(_RawModel):
    team: RawTeam


class RawLeagueEntry(_RawModel):
    teams: list[RawTeamEntry] = Field(default_factory=list)


class RawSportEntry(_RawModel):
    leagues: list[RawLeagueEntry] = Field(min_length=1)


class RawTeamsPayload(_RawModel):
    sports: list[RawSportEntry] = Field(min_length=1)


class RawTeamWithSchedule(_RawModel):
    next_event: list[RawEvent] = Field(default_factory=list, alias="nextEvent")


class RawTeamDetail(_RawModel):
    team: RawTeamWithSchedule
