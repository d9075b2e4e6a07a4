"""Multi-day usage summaries of month profiles."""

import logging
from collections.abc import Mapping

from ..models import PERIOD_LENGTH, USAGE_STATES, DailyUsage, Profile
from ..validation import InvalidDay, validate_day, validate_profile
from .usage import MONTH_TIMESTAMP_LIMIT, usage_for_day

logger = logging.getLogger(__name__)


def last_active_day(month_profile: Profile) -> int:
    """Return the day of the last event, or 1 for a profile without events."""
    if not month_profile.events:
        return 1
    return month_profile.events[-1].timestamp // PERIOD_LENGTH + 1


def get_daily_usage(
    month_profile: Profile | Mapping, start_day: int = 1, end_day: int | None = None
) -> list[DailyUsage]:
    """Calculate usage for each day in an inclusive range."""
    month_profile = validate_profile(month_profile, USAGE_STATES, MONTH_TIMESTAMP_LIMIT)
    start_day = validate_day(start_day)
    if end_day is None:
        end_day = max(start_day, last_active_day(month_profile))
    end_day = validate_day(end_day)
    if start_day > end_day:
        raise InvalidDay(f"start day {start_day} is after end day {end_day}")

    logger.debug("Calculating usage for days %d-%d", start_day, end_day)
    return [
        DailyUsage(day=day, minutes_on=usage_for_day(month_profile, day))
        for day in range(start_day, end_day + 1)
    ]


def get_month_summary(
    month_profile: Profile | Mapping, start_day: int = 1, end_day: int | None = None
) -> dict:
    """Generate a usage summary for a range of days.

    If end_day is omitted the summary runs to the last day with an event.
    """
    daily = get_daily_usage(month_profile, start_day, end_day)

    total_minutes = sum(d.minutes_on for d in daily)
    busiest = max(daily, key=lambda d: d.minutes_on)

    return {
        "period": {
            "start_day": daily[0].day,
            "end_day": daily[-1].day,
            "days": len(daily),
        },
        "days": [
            {
                "day": d.day,
                "minutes_on": d.minutes_on,
                "minutes_off": d.minutes_off,
                "percent_on": d.percent_on,
            }
            for d in daily
        ],
        "totals": {
            "minutes_on": total_minutes,
            "hours_on": round(total_minutes / 60, 1),
        },
        "averages": {
            "daily_minutes_on": round(total_minutes / len(daily), 1),
            "percent_on": round(total_minutes / (len(daily) * PERIOD_LENGTH) * 100, 1),
        },
        "busiest_day": {
            "day": busiest.day,
            "minutes_on": busiest.minutes_on,
        },
    }


def format_month_summary_text(summary: dict) -> str:
    """Format a month summary as human-readable text."""
    lines = [
        f"Usage Summary: day {summary['period']['start_day']} to {summary['period']['end_day']}",
        f"({summary['period']['days']} days)",
        "",
        "Totals:",
        f"  - Time on: {summary['totals']['minutes_on']} minutes ({summary['totals']['hours_on']} hours)",
        "",
        "Daily Averages:",
        f"  - Time on: {summary['averages']['daily_minutes_on']} minutes/day",
        f"  - Share of day: {summary['averages']['percent_on']}%",
    ]

    if summary["busiest_day"]["minutes_on"] > 0:
        lines.extend([
            "",
            f"Busiest day: {summary['busiest_day']['day']} "
            f"({summary['busiest_day']['minutes_on']} minutes)",
        ])
    else:
        lines.extend(["", "Appliance was off for the whole period"])

    return "\n".join(lines)
