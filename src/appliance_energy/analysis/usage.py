"""Appliance usage from on/off state-change events."""

import logging
from collections.abc import Mapping

from ..models import DAYS_IN_YEAR, PERIOD_LENGTH, USAGE_STATES, Event, Profile, State
from ..validation import validate_day, validate_profile

logger = logging.getLogger(__name__)

# Month profiles may address any minute of the year
MONTH_TIMESTAMP_LIMIT = DAYS_IN_YEAR * PERIOD_LENGTH


def usage(profile: Profile | Mapping) -> int:
    """Calculate the minutes an appliance was on during a single day.

    Algorithm:
    1. Start in the initial state at minute 0.
    2. At each event, add the time since the previous event if the
       appliance was on, then take the event's state.
    3. If still on after the last event, add the rest of the day.

    Duplicate events need no special handling: an event that repeats the
    current state, or one sharing a timestamp with its predecessor, adds
    nothing by construction.
    """
    profile = validate_profile(profile, USAGE_STATES)

    total = 0
    last_timestamp = 0
    currently_on = profile.initial == State.ON

    for event in profile.events:
        if currently_on:
            total += event.timestamp - last_timestamp

        currently_on = event.state == State.ON
        last_timestamp = event.timestamp

    if currently_on:
        total += PERIOD_LENGTH - last_timestamp

    return total


def day_bounds(day: int) -> tuple[int, int]:
    """Return the first and last minute of a day (1-based), inclusive."""
    day = validate_day(day)
    return (day - 1) * PERIOD_LENGTH, day * PERIOD_LENGTH - 1


def profile_for_day(month_profile: Profile | Mapping, day: int) -> Profile:
    """Slice a single day out of a month profile.

    The initial state is whatever the last event before the day left the
    appliance in (or the month's initial state if there was none). Events
    inside the day are rewritten relative to its first minute.
    """
    month_profile = validate_profile(month_profile, USAGE_STATES, MONTH_TIMESTAMP_LIMIT)
    day_start, day_end = day_bounds(day)

    initial = month_profile.initial
    events = []
    for event in month_profile.events:
        if event.timestamp < day_start:
            initial = event.state
        elif event.timestamp <= day_end:
            events.append(Event(state=event.state, timestamp=event.timestamp - day_start))
        else:
            # Events are ordered, nothing later can fall inside the day
            break

    logger.debug(
        "Day %s starts %s with %d events", day, initial.value, len(events)
    )
    return Profile(initial=initial, events=tuple(events))


def usage_for_day(month_profile: Profile | Mapping, day: int) -> int:
    """Calculate the minutes an appliance was on during one day of a month profile.

    Args:
        month_profile: Profile whose timestamps count minutes from midnight of day 1
        day: Day number, 1 to 365

    Returns:
        Minutes on during that day, 0 to 1440
    """
    return usage(profile_for_day(month_profile, day))
