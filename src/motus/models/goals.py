"""Goal models, one variant per program type."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Union

from ..utils.dates import format_date, parse_date


class ProgramType(str, Enum):
    """Primary program categories."""

    ENDURANCE = "endurance"
    STRENGTH = "strength"
    AESTHETIC = "aesthetic"
    FATLOSS = "fatloss"
    CHALLENGE = "challenge"  # Fixed-length program, e.g. a 30-day challenge


class RaceDistance(str, Enum):
    """Race distances for endurance goals."""

    FIVE_K = "5k"
    TEN_K = "10k"
    HALF = "half"
    FULL = "full"
    ULTRA = "ultra"


RACE_MILES = {
    RaceDistance.FIVE_K: 3.1,
    RaceDistance.TEN_K: 6.2,
    RaceDistance.HALF: 13.1,
    RaceDistance.FULL: 26.2,
    RaceDistance.ULTRA: 50.0,
}

RACE_LABELS = {
    RaceDistance.FIVE_K: "5K",
    RaceDistance.TEN_K: "10K",
    RaceDistance.HALF: "Half Marathon",
    RaceDistance.FULL: "Full Marathon",
    RaceDistance.ULTRA: "Ultra Marathon",
}


@dataclass
class EnduranceGoal:
    """Race goal: distance, date, and current volume."""

    type: ClassVar[ProgramType] = ProgramType.ENDURANCE

    distance: RaceDistance
    race_date: date | None
    current_weekly_mileage: float | None
    target_finish_time: int | None = None  # seconds
    current_pace: int | None = None  # seconds per mile
    subtype: str = "running"

    @property
    def goal_date(self) -> date | None:
        return self.race_date

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "subtype": self.subtype,
            "distance": self.distance.value,
            "race_date": format_date(self.race_date),
            "current_weekly_mileage": self.current_weekly_mileage,
            "target_finish_time": self.target_finish_time,
            "current_pace": self.current_pace,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EnduranceGoal":
        """Create from dictionary."""
        return cls(
            subtype=data.get("subtype", "running"),
            distance=RaceDistance(data.get("distance", "half")),
            race_date=parse_date(data.get("race_date")),
            current_weekly_mileage=data.get("current_weekly_mileage"),
            target_finish_time=data.get("target_finish_time"),
            current_pace=data.get("current_pace"),
        )


@dataclass
class LiftTarget:
    """Current and target one-rep max for a lift, in lb."""

    lift_id: str
    label: str
    current: float | None = None
    target: float | None = None

    @property
    def is_complete(self) -> bool:
        """Whether both values are set and usable."""
        return self.current is not None and self.target is not None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "lift_id": self.lift_id,
            "label": self.label,
            "current": self.current,
            "target": self.target,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LiftTarget":
        """Create from dictionary.

        Blank form values ("") are treated as unset.
        """
        lift_id = data.get("lift_id") or data.get("id", "")
        return cls(
            lift_id=lift_id,
            label=data.get("label") or lift_id.replace("_", " ").title(),
            current=optional_float(data.get("current")),
            target=optional_float(data.get("target")),
        )


@dataclass
class StrengthGoal:
    """Per-lift 1RM targets by a goal date."""

    type: ClassVar[ProgramType] = ProgramType.STRENGTH

    lifts: list[LiftTarget]
    goal_date: date | None = None
    subtype: str = "powerlifting"

    @property
    def complete_lifts(self) -> list[LiftTarget]:
        """Lifts with both current and target set."""
        return [lift for lift in self.lifts if lift.is_complete]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "subtype": self.subtype,
            "lifts": [lift.to_dict() for lift in self.lifts],
            "goal_date": format_date(self.goal_date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StrengthGoal":
        """Create from dictionary."""
        return cls(
            subtype=data.get("subtype", "powerlifting"),
            lifts=[LiftTarget.from_dict(lift) for lift in data.get("lifts", [])],
            goal_date=parse_date(data.get("goal_date")),
        )


@dataclass
class AestheticGoal:
    """Body-fat target by a goal date."""

    type: ClassVar[ProgramType] = ProgramType.AESTHETIC

    target_body_fat: float | None
    current_body_fat: float | None = None  # Falls back to the profile value
    goal_date: date | None = None
    subtype: str = "hypertrophy"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "subtype": self.subtype,
            "current_body_fat": self.current_body_fat,
            "target_body_fat": self.target_body_fat,
            "goal_date": format_date(self.goal_date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AestheticGoal":
        """Create from dictionary."""
        return cls(
            subtype=data.get("subtype", "hypertrophy"),
            current_body_fat=optional_float(data.get("current_body_fat")),
            target_body_fat=optional_float(data.get("target_body_fat")),
            goal_date=parse_date(data.get("goal_date")),
        )


@dataclass
class FatLossGoal:
    """Target body weight at a weekly loss rate."""

    type: ClassVar[ProgramType] = ProgramType.FATLOSS

    target_weight: float | None  # Same unit as the profile weight
    weekly_rate: float = 0.5  # lb/week
    goal_date: date | None = None
    subtype: str = "moderate"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "subtype": self.subtype,
            "target_weight": self.target_weight,
            "weekly_rate": self.weekly_rate,
            "goal_date": format_date(self.goal_date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FatLossGoal":
        """Create from dictionary."""
        return cls(
            subtype=data.get("subtype", "moderate"),
            target_weight=optional_float(data.get("target_weight")),
            weekly_rate=float(data.get("weekly_rate", 0.5)),
            goal_date=parse_date(data.get("goal_date")),
        )


@dataclass
class ChallengeGoal:
    """Fixed-length program with no measurable target."""

    type: ClassVar[ProgramType] = ProgramType.CHALLENGE

    days: int = 30
    focus: ProgramType = ProgramType.AESTHETIC  # Template family used for sessions
    subtype: str = "30-day"

    @property
    def goal_date(self) -> date | None:
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "subtype": self.subtype,
            "days": self.days,
            "focus": self.focus.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ChallengeGoal":
        """Create from dictionary."""
        return cls(
            subtype=data.get("subtype", "30-day"),
            days=int(data.get("days", 30)),
            focus=ProgramType(data.get("focus", "aesthetic")),
        )


Goal = Union[EnduranceGoal, StrengthGoal, AestheticGoal, FatLossGoal, ChallengeGoal]

GOAL_TYPES: dict[ProgramType, type] = {
    ProgramType.ENDURANCE: EnduranceGoal,
    ProgramType.STRENGTH: StrengthGoal,
    ProgramType.AESTHETIC: AestheticGoal,
    ProgramType.FATLOSS: FatLossGoal,
    ProgramType.CHALLENGE: ChallengeGoal,
}


def goal_from_dict(data: dict) -> Goal:
    """Create the right goal variant from its ``type`` tag."""
    goal_type = ProgramType(data["type"])
    return GOAL_TYPES[goal_type].from_dict(data)


@dataclass
class GoalSpec:
    """The active goal plus an optional secondary goal for hybrid training."""

    primary: Goal
    secondary: Goal | None = None

    @property
    def program_type(self) -> ProgramType:
        return self.primary.type

    @property
    def is_hybrid(self) -> bool:
        return self.secondary is not None

    @property
    def goals(self) -> list[Goal]:
        """Primary then secondary goal."""
        return [g for g in (self.primary, self.secondary) if g is not None]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict() if self.secondary else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GoalSpec":
        """Create from dictionary.

        A bare goal (a dict with a ``type`` key) is accepted as the primary goal.
        """
        if "type" in data:
            return cls(primary=goal_from_dict(data))

        secondary = data.get("secondary")
        return cls(
            primary=goal_from_dict(data["primary"]),
            secondary=goal_from_dict(secondary) if secondary else None,
        )


def optional_float(value) -> float | None:
    """Parse form-style numbers where blank means unset."""
    if value is None or value == "":
        return None
    return float(value)
