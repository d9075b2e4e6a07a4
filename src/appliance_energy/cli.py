"""Command-line interface for appliance energy metrics."""

import json
import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .analysis import savings as savings_analysis
from .analysis import summary, usage as usage_analysis
from .models import PERIOD_LENGTH
from .profiles import load_profile
from .validation import EnergyProfileError

console = Console()


def fail(ctx: click.Context, error: Exception) -> NoReturn:
    """Report an error and exit with a non-zero status."""
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    ctx.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, verbose):
    """Appliance energy metrics - usage and auto-off savings from state events."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@cli.command()
@click.argument("profile")
@click.pass_context
def usage(ctx, profile):
    """Minutes on during a single day.

    PROFILE is a YAML/JSON file, or a name in ENERGY_PROFILE_DIR.
    """
    try:
        minutes = usage_analysis.usage(load_profile(profile))
    except (EnergyProfileError, FileNotFoundError) as e:
        fail(ctx, e)

    console.print(f"Usage: {minutes} of {PERIOD_LENGTH} minutes")


@cli.command()
@click.argument("profile")
@click.pass_context
def savings(ctx, profile):
    """Minutes saved by automatic shutoffs during a single day."""
    try:
        minutes = savings_analysis.savings(load_profile(profile))
    except (EnergyProfileError, FileNotFoundError) as e:
        fail(ctx, e)

    console.print(f"Savings: {minutes} of {PERIOD_LENGTH} minutes")


@cli.command()
@click.argument("profile")
@click.option("--day", "day", type=float, required=True, help="Day number (1-365)")
@click.pass_context
def day(ctx, profile, day):
    """Minutes on during one day of a month profile."""
    try:
        minutes = usage_analysis.usage_for_day(load_profile(profile), day)
    except (EnergyProfileError, FileNotFoundError) as e:
        fail(ctx, e)

    console.print(f"Day {int(day)} usage: {minutes} of {PERIOD_LENGTH} minutes")


@cli.command()
@click.argument("profile")
@click.option("--from-day", type=float, default=1, help="First day (default: 1)")
@click.option("--to-day", type=float, help="Last day (default: day of the last event)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--text", "as_text", is_flag=True, help="Output as plain text")
@click.pass_context
def month(ctx, profile, from_day, to_day, as_json, as_text):
    """Day-by-day usage for a month profile."""
    try:
        data = summary.get_month_summary(load_profile(profile), from_day, to_day)
    except (EnergyProfileError, FileNotFoundError) as e:
        fail(ctx, e)

    if as_json:
        print(json.dumps(data, indent=2))
        return
    if as_text:
        console.print(summary.format_month_summary_text(data))
        return

    table = Table(title=f"Daily Usage (days {data['period']['start_day']}-{data['period']['end_day']})")
    table.add_column("Day", style="cyan", justify="right")
    table.add_column("Minutes On", justify="right")
    table.add_column("Minutes Off", justify="right")
    table.add_column("% On", justify="right")

    for row in data["days"]:
        table.add_row(
            str(row["day"]),
            str(row["minutes_on"]),
            str(row["minutes_off"]),
            f"{row['percent_on']}%",
        )

    table.add_section()
    table.add_row(
        "Total",
        str(data["totals"]["minutes_on"]),
        "",
        f"{data['averages']['percent_on']}%",
    )

    console.print(table)


if __name__ == "__main__":
    cli()
