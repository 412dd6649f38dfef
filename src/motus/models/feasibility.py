"""Goal feasibility verdict models."""

from dataclasses import dataclass, field


@dataclass
class GoalCheck:
    """Rate check for one measurable goal (a lift, mileage, body fat...)."""

    label: str
    required_weekly_rate: float
    max_safe_weekly_rate: float
    unit: str  # "lb/week", "%/week", ...
    weeks: int
    current: float | None = None
    target: float | None = None
    recommended_weeks: int | None = None  # Shortest timeline within the ceiling

    @property
    def is_realistic(self) -> bool:
        # Inclusive on the safe side: exactly the ceiling is allowed
        return self.required_weekly_rate <= self.max_safe_weekly_rate

    def describe(self) -> str:
        """One-line explanation, e.g. "Back Squat: 225→275 over 4 weeks requires ..."."""
        span = f"over {self.weeks} week{'s' if self.weeks != 1 else ''}"
        if self.current is not None and self.target is not None:
            span = f"{_num(self.current)}→{_num(self.target)} {span}"
        return (
            f"{self.label}: {span} requires {_rate(self.required_weekly_rate, self.unit)} "
            f"(safe maximum {_rate(self.max_safe_weekly_rate, self.unit)})"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "label": self.label,
            "required_weekly_rate": self.required_weekly_rate,
            "max_safe_weekly_rate": self.max_safe_weekly_rate,
            "unit": self.unit,
            "weeks": self.weeks,
            "current": self.current,
            "target": self.target,
            "recommended_weeks": self.recommended_weeks,
            "is_realistic": self.is_realistic,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GoalCheck":
        """Create from dictionary."""
        return cls(
            label=data["label"],
            required_weekly_rate=float(data["required_weekly_rate"]),
            max_safe_weekly_rate=float(data["max_safe_weekly_rate"]),
            unit=data.get("unit", ""),
            weeks=int(data.get("weeks", 1)),
            current=data.get("current"),
            target=data.get("target"),
            recommended_weeks=data.get("recommended_weeks"),
        )


@dataclass
class FeasibilityVerdict:
    """Whether the requested goals can be reached safely in time.

    Advisory: the verdict is returned to the caller, which decides whether to
    block. Nothing downstream rewrites a flagged goal.
    """

    is_realistic: bool
    details: list[GoalCheck] = field(default_factory=list)
    message: str = ""
    weeks_until_goal: int | None = None
    recommended_weeks: int | None = None

    @property
    def flagged(self) -> list[GoalCheck]:
        """Checks that exceed their safe ceiling."""
        return [d for d in self.details if not d.is_realistic]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "is_realistic": self.is_realistic,
            "details": [d.to_dict() for d in self.details],
            "message": self.message,
            "weeks_until_goal": self.weeks_until_goal,
            "recommended_weeks": self.recommended_weeks,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FeasibilityVerdict":
        """Create from dictionary."""
        return cls(
            is_realistic=data["is_realistic"],
            details=[GoalCheck.from_dict(d) for d in data.get("details", [])],
            message=data.get("message", ""),
            weeks_until_goal=data.get("weeks_until_goal"),
            recommended_weeks=data.get("recommended_weeks"),
        )


def _num(value: float) -> str:
    """Format 225.0 as "225" and 6.25 as "6.25"."""
    return f"{round(value, 2):g}"


def _rate(value: float, unit: str) -> str:
    sep = "" if unit.startswith("%") else " "
    return f"{_num(value)}{sep}{unit}"
