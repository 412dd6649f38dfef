"""Weekly schedule data models."""

from dataclasses import dataclass, field
from enum import Enum

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class SessionTime(str, Enum):
    """Time-of-day slot for a session."""

    AM = "AM"
    PM = "PM"
    ANY = "ANY"


@dataclass
class Exercise:
    """A prescribed exercise within a session."""

    name: str
    sets: int
    reps: int | str  # 5, "8-10", "3 miles", "30s work / 30s rest"
    rpe: float | None = None  # 6-10
    rest: str = ""
    notes: str = ""  # Coaching cues
    progression: str = ""  # How to progress, free text

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "rpe": self.rpe,
            "rest": self.rest,
            "notes": self.notes,
            "progression": self.progression,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            sets=int(data.get("sets", 1)),
            reps=data.get("reps", ""),
            rpe=data.get("rpe"),
            rest=data.get("rest", ""),
            notes=data.get("notes", ""),
            progression=data.get("progression", ""),
        )


@dataclass
class Session:
    """One training session on a day."""

    type: str  # "strength", "hypertrophy", "endurance", "metabolic", "accessory"
    focus: str
    exercises: list[Exercise]
    time: SessionTime = SessionTime.ANY
    duration: int = 60  # minutes

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "time": self.time.value,
            "type": self.type,
            "focus": self.focus,
            "duration": self.duration,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        """Create from dictionary."""
        return cls(
            time=SessionTime(data.get("time", "ANY")),
            type=data.get("type", ""),
            focus=data.get("focus", ""),
            duration=int(data.get("duration", 60)),
            exercises=[Exercise.from_dict(ex) for ex in data.get("exercises", [])],
        )


@dataclass
class DaySchedule:
    """A single day of the week (1 = Monday ... 7 = Sunday)."""

    day: int
    sessions: list[Session] = field(default_factory=list)
    name: str = ""
    is_rest_day: bool = False
    is_deload: bool = False

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day - 1]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day": self.day,
            "day_name": self.day_name,
            "name": self.name,
            "is_rest_day": self.is_rest_day,
            "is_deload": self.is_deload,
            "sessions": [s.to_dict() for s in self.sessions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DaySchedule":
        """Create from dictionary (snake_case or camelCase keys)."""
        is_rest = data.get("is_rest_day", data.get("isRestDay", False))
        return cls(
            day=int(data["day"]),
            name=data.get("name", ""),
            is_rest_day=is_rest,
            is_deload=data.get("is_deload", data.get("isDeload", False)),
            sessions=[Session.from_dict(s) for s in data.get("sessions", [])],
        )


@dataclass
class CanonicalSchedule:
    """The week-1 template every other week is projected from."""

    days: list[DaySchedule]

    @property
    def training_days(self) -> list[DaySchedule]:
        """Days that hold at least one session."""
        return [d for d in self.days if not d.is_rest_day and d.sessions]

    @property
    def session_count(self) -> int:
        return sum(len(d.sessions) for d in self.training_days)

    @property
    def exercise_count(self) -> int:
        return sum(len(s.exercises) for d in self.training_days for s in d.sessions)

    def get_day(self, day: int) -> DaySchedule | None:
        """Look up a day by number."""
        for d in self.days:
            if d.day == day:
                return d
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"days": [d.to_dict() for d in self.days]}

    def to_list(self) -> list[dict]:
        """Convert to the bare list used as ``weekly_schedule`` in programs."""
        return [d.to_dict() for d in self.days]

    @classmethod
    def from_dict(cls, data: dict | list) -> "CanonicalSchedule":
        """Create from a ``{"days": [...]}`` dict or a bare list of days."""
        days = data if isinstance(data, list) else data.get("days", [])
        return cls(days=[DaySchedule.from_dict(d) for d in days])
