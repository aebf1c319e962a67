"""Display labels for event state, periods and period numbers."""

from live_scores.schemas import EventState

_STATE_LABELS: dict[EventState, str] = {
    EventState.PRE: "Scheduled",
    EventState.LIVE: "In Progress",
    EventState.FINAL: "Final",
    EventState.DELAYED: "Delayed",
}

_PERIOD_NAMES: dict[str, str] = {
    "football": "Quarter",
    "basketball": "Quarter",
    "hockey": "Period",
    "soccer": "Half",
}

_PERIOD_ORDINALS: dict[int, str] = {
    1: "1st",
    2: "2nd",
    3: "3rd",
    4: "4th",
}


def event_state_label(state: EventState) -> str:
    """Return the human label for an event state ("" when unknown)."""
    return _STATE_LABELS.get(state, "")


def period_label(sport: str) -> str:
    return _PERIOD_NAMES.get(sport, "Period")


def period_ordinal(period: int) -> str:
    # Overtime periods fall through to the bare number.
    return _PERIOD_ORDINALS.get(period, str(period))
