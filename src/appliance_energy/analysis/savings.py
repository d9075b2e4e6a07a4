"""Energy savings attributable to the automatic shutoff device."""

from collections.abc import Mapping

from ..models import PERIOD_LENGTH, SAVINGS_STATES, Profile, State
from ..validation import validate_profile


def savings(profile: Profile | Mapping) -> int:
    """Calculate the minutes saved by automatic shutoffs during a single day.

    A saving starts when an auto-off event switches off an appliance that was
    on, and runs until the appliance is next switched on (or the day ends).
    Redundant events inside a saving, such as a manual off or a second
    auto-off, neither end it nor restart it: the device was the original
    trigger. Time switched off manually never counts.
    """
    profile = validate_profile(profile, SAVINGS_STATES)

    saved = 0
    currently_on = profile.initial == State.ON
    auto_off_active = profile.initial == State.AUTO_OFF
    auto_off_start = 0

    for event in profile.events:
        if auto_off_active and event.state == State.ON:
            saved += event.timestamp - auto_off_start
            auto_off_active = False
        elif event.state == State.AUTO_OFF and currently_on:
            auto_off_active = True
            auto_off_start = event.timestamp

        currently_on = event.state == State.ON

    if auto_off_active:
        saved += PERIOD_LENGTH - auto_off_start

    return saved
