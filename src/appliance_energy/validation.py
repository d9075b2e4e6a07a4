"""Input validation for profiles, events and day numbers.

Profiles reach the calculations either as ``Profile`` instances or as plain
mappings such as ``{"initial": "on", "events": [{"state": "off", "timestamp": 50}]}``.
Both are checked the same way and normalised to a ``Profile``.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .models import DAYS_IN_YEAR, PERIOD_LENGTH, Event, Profile, State


class EnergyProfileError(ValueError):
    """Base exception for invalid calculation input."""
    pass


class InvalidProfile(EnergyProfileError):
    """The profile is not a record with an events list."""
    pass


class InvalidState(EnergyProfileError):
    """A state is outside the alphabet of the calculation."""

    def __init__(self, value: Any, allowed: Iterable[State]):
        self.value = value
        self.allowed = tuple(sorted(s.value for s in allowed))
        super().__init__(f"invalid state {value!r}: must be one of: {', '.join(self.allowed)}")


class InvalidTimestamp(EnergyProfileError):
    """An event timestamp is not an integer or is outside the period."""
    pass


class InvalidDay(EnergyProfileError):
    """A day number is not an integer or is outside the year."""
    pass


def _as_integer(value: Any) -> int | None:
    """Return value as an int if it is integer-valued, else None."""
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def parse_state(value: Any, allowed: Iterable[State]) -> State:
    """Convert a raw state to a State, checking it against the alphabet."""
    allowed = frozenset(allowed)
    try:
        state = State(value)
    except (ValueError, TypeError):
        raise InvalidState(value, allowed) from None
    if state not in allowed:
        raise InvalidState(value, allowed)
    return state


def parse_timestamp(value: Any, upper: int = PERIOD_LENGTH) -> int:
    """Check a timestamp is an integer in [0, upper)."""
    timestamp = _as_integer(value)
    if timestamp is None:
        raise InvalidTimestamp(f"timestamp must be an integer, got {value!r}")
    if not 0 <= timestamp < upper:
        raise InvalidTimestamp(f"timestamp {timestamp} out of range [0, {upper})")
    return timestamp


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def validate_profile(
    profile: Profile | Mapping,
    allowed: Iterable[State],
    upper: int = PERIOD_LENGTH,
) -> Profile:
    """Validate a profile and return it as a Profile.

    Args:
        profile: A Profile or a mapping with 'initial' and 'events' keys
        allowed: States valid for the calculation being performed
        upper: Exclusive upper bound for event timestamps

    Raises:
        InvalidProfile: profile is not a record or has no events sequence
        InvalidState: initial or an event state is not in ``allowed``
        InvalidTimestamp: an event timestamp is not an integer in [0, upper)
    """
    if not isinstance(profile, (Profile, Mapping)):
        raise InvalidProfile("profile must be a mapping with an 'events' list")

    raw_events = _field(profile, "events")
    if not isinstance(raw_events, Sequence) or isinstance(raw_events, (str, bytes)):
        raise InvalidProfile("profile must be a mapping with an 'events' list")

    allowed = frozenset(allowed)
    initial = parse_state(_field(profile, "initial"), allowed)

    events = []
    for raw in raw_events:
        if not isinstance(raw, (Event, Mapping)):
            raise InvalidProfile(f"event must be a mapping with 'state' and 'timestamp', got {raw!r}")
        events.append(
            Event(
                state=parse_state(_field(raw, "state"), allowed),
                timestamp=parse_timestamp(_field(raw, "timestamp"), upper),
            )
        )

    return Profile(initial=initial, events=tuple(events))


def validate_day(day: Any) -> int:
    """Check a day number is an integer in [1, DAYS_IN_YEAR]."""
    number = _as_integer(day)
    if number is None:
        raise InvalidDay("must be an integer")
    if not 1 <= number <= DAYS_IN_YEAR:
        raise InvalidDay("day out of range")
    return number
