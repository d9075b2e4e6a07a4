"""Data models for appliance state profiles."""

from dataclasses import dataclass
from enum import Enum

PERIOD_LENGTH = 1440  # minutes in a day
DAYS_IN_YEAR = 365


class State(str, Enum):
    """An appliance state as reported by an event."""

    ON = "on"
    OFF = "off"  # manual switch off
    AUTO_OFF = "auto-off"  # switched off by the energy-saving device


USAGE_STATES = frozenset({State.ON, State.OFF})
SAVINGS_STATES = frozenset({State.ON, State.OFF, State.AUTO_OFF})


@dataclass(frozen=True)
class Event:
    """A state change at a minute offset."""

    state: State
    timestamp: int


@dataclass(frozen=True)
class Profile:
    """Initial state plus the ordered events that follow it."""

    initial: State
    events: tuple[Event, ...] = ()


@dataclass(frozen=True)
class DailyUsage:
    """Minutes an appliance was on during one day of a month profile."""

    day: int
    minutes_on: int

    @property
    def minutes_off(self) -> int:
        return PERIOD_LENGTH - self.minutes_on

    @property
    def percent_on(self) -> float:
        """Share of the day spent on, as a percentage."""
        return round(self.minutes_on / PERIOD_LENGTH * 100, 1)
