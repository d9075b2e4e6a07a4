"""Tests for auto-off savings."""

from appliance_energy.analysis.savings import savings
from appliance_energy.models import PERIOD_LENGTH


def test_savings_always_on():
    assert savings({"initial": "on", "events": []}) == 0


def test_savings_always_off_manually():
    assert savings({"initial": "off", "events": []}) == 0


def test_savings_always_off_automatically():
    """Test a day that starts switched off by the device."""
    assert savings({"initial": "auto-off", "events": []}) == PERIOD_LENGTH


def test_savings_sensible_data():
    """Test savings on a day with clean transitions."""
    profile = {
        "initial": "off",
        "events": [
            {"state": "on", "timestamp": 100},
            {"state": "off", "timestamp": 150},
            {"state": "on", "timestamp": 200},
            {"state": "auto-off", "timestamp": 500},
            {"state": "on", "timestamp": 933},
            {"state": "off", "timestamp": 1010},
            {"state": "on", "timestamp": 1250},
            {"state": "auto-off", "timestamp": 1320},
        ],
    }
    assert savings(profile) == (933 - 500) + (PERIOD_LENGTH - 1320)


def test_savings_redundant_off_after_auto_off():
    """Test that a manual off after an auto-off keeps the saving going."""
    profile = {
        "initial": "off",
        "events": [
            {"state": "on", "timestamp": 100},
            {"state": "off", "timestamp": 150},
            {"state": "on", "timestamp": 200},
            {"state": "auto-off", "timestamp": 500},
            {"state": "off", "timestamp": 800},
            {"state": "on", "timestamp": 933},
            {"state": "off", "timestamp": 1010},
            {"state": "on", "timestamp": 1250},
            {"state": "on", "timestamp": 1299},
            {"state": "auto-off", "timestamp": 1320},
        ],
    }
    assert savings(profile) == (933 - 500) + (PERIOD_LENGTH - 1320)


def test_savings_open_until_end_of_day():
    profile = {
        "initial": "off",
        "events": [
            {"state": "on", "timestamp": 250},
            {"state": "on", "timestamp": 299},
            {"state": "auto-off", "timestamp": 320},
            {"state": "off", "timestamp": 500},
        ],
    }
    assert savings(profile) == PERIOD_LENGTH - 320


def test_savings_consecutive_auto_off_keeps_start():
    """Test that a second auto-off does not restart the saving."""
    profile = {
        "initial": "on",
        "events": [
            {"state": "auto-off", "timestamp": 300},
            {"state": "auto-off", "timestamp": 500},
            {"state": "on", "timestamp": 600},
        ],
    }
    assert savings(profile) == 600 - 300


def test_savings_events_close_together():
    profile = {
        "initial": "off",
        "events": [
            {"state": "on", "timestamp": 100},
            {"state": "auto-off", "timestamp": 101},
            {"state": "off", "timestamp": 102},
            {"state": "on", "timestamp": 200},
        ],
    }
    assert savings(profile) == 200 - 101


def test_savings_last_event_auto_off():
    profile = {"initial": "on", "events": [{"state": "auto-off", "timestamp": 1430}]}
    assert savings(profile) == PERIOD_LENGTH - 1430


def test_savings_manual_off_before_auto_off():
    """Test that auto-off of an appliance already off manually saves nothing."""
    profile = {
        "initial": "on",
        "events": [
            {"state": "off", "timestamp": 300},
            {"state": "auto-off", "timestamp": 500},
            {"state": "on", "timestamp": 600},
        ],
    }
    assert savings(profile) == 0


def test_savings_manual_off_only():
    """Test that manual switch offs never count, whatever the pattern."""
    profile = {
        "initial": "on",
        "events": [
            {"state": "off", "timestamp": 10},
            {"state": "on", "timestamp": 200},
            {"state": "off", "timestamp": 210},
            {"state": "off", "timestamp": 900},
            {"state": "on", "timestamp": 1200},
            {"state": "off", "timestamp": 1300},
        ],
    }
    assert savings(profile) == 0


def test_savings_initial_auto_off_closed_by_on():
    profile = {
        "initial": "auto-off",
        "events": [
            {"state": "off", "timestamp": 60},
            {"state": "on", "timestamp": 90},
        ],
    }
    assert savings(profile) == 90
