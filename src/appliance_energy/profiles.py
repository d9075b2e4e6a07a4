"""Loading appliance profiles from YAML or JSON files."""

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .validation import InvalidProfile

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_DIR = Path("profiles")
PROFILE_SUFFIXES = (".yaml", ".yml", ".json")


def get_profile_dir() -> Path:
    """Get the profile directory from ENERGY_PROFILE_DIR, or the default."""
    return Path(os.environ.get("ENERGY_PROFILE_DIR", DEFAULT_PROFILE_DIR))


def resolve_profile_path(name: str | Path) -> Path:
    """Find a profile file by path, or by name in the profile directory.

    A bare name is tried with each of PROFILE_SUFFIXES in turn.
    """
    path = Path(name)
    if path.is_file():
        return path

    profile_dir = get_profile_dir()
    candidates = [profile_dir / path] + [profile_dir / f"{path}{suffix}" for suffix in PROFILE_SUFFIXES]
    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise FileNotFoundError(f"Could not find profile '{name}' (looked in {profile_dir})")


def load_profile(path: str | Path) -> dict:
    """Load a raw profile mapping from a YAML or JSON file.

    The mapping is returned as read; the calculations validate it.
    """
    path = resolve_profile_path(path)
    logger.debug("Loading profile from %s", path)

    # JSON is a subset of YAML, so one parser covers both formats
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise InvalidProfile(f"{path} is not a valid YAML/JSON profile: {e}") from e

    if not isinstance(data, dict):
        raise InvalidProfile(f"{path} does not contain a profile mapping")

    data["initial"] = _yaml_state(data.get("initial"))
    if isinstance(data.get("events"), list):
        for event in data["events"]:
            if isinstance(event, dict) and "state" in event:
                event["state"] = _yaml_state(event["state"])

    return data


def _yaml_state(value):
    """Undo YAML 1.1 reading bare on/off as booleans."""
    if value is True:
        return "on"
    if value is False:
        return "off"
    return value
