"""Load models from JSON-shaped data.

Every loader turns a missing key, a bad enum value or a wrong type into an
InvalidInputError naming what could not be read.
"""

import json
from pathlib import Path
from typing import Callable, TypeVar

from ..errors import InvalidInputError
from .goals import GoalSpec
from .profile import AthleteProfile
from .program import Program
from .schedule import CanonicalSchedule

T = TypeVar("T")


def _load(kind: str, factory: Callable[[dict], T], data: dict) -> T:
    if not isinstance(data, dict) and not (kind == "schedule" and isinstance(data, list)):
        raise InvalidInputError(f"{kind} must be a JSON object", field=kind)
    try:
        return factory(data)
    except KeyError as e:
        raise InvalidInputError(f"{kind} is missing required field {e.args[0]!r}",
                                field=str(e.args[0])) from e
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Invalid {kind}: {e}", field=kind) from e


def load_profile(data: dict) -> AthleteProfile:
    """Build an AthleteProfile from a dictionary."""
    return _load("profile", AthleteProfile.from_dict, data)


def load_goal_spec(data: dict) -> GoalSpec:
    """Build a GoalSpec from a dictionary (or a bare goal)."""
    return _load("goal", GoalSpec.from_dict, data)


def load_schedule(data: dict | list) -> CanonicalSchedule:
    """Build a CanonicalSchedule from ``{"days": [...]}`` or a bare list."""
    return _load("schedule", CanonicalSchedule.from_dict, data)


def load_program(data: dict) -> Program:
    """Build a Program from a dictionary."""
    return _load("program", Program.from_dict, data)


def read_json(path: str | Path) -> dict | list:
    """Read a JSON file.

    Raises:
        InvalidInputError: The file is not valid JSON
    """
    path = Path(path)
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"{path.name} is not valid JSON: {e}", field=path.name) from e
