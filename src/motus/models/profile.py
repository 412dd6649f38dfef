"""Athlete profile data models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from ..utils.dates import format_date, parse_date
from .goals import optional_float

LB_TO_KG = 0.453592
IN_TO_CM = 2.54


class Sex(str, Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class WeightUnit(str, Enum):
    """Body weight unit."""

    LB = "lb"
    KG = "kg"


class HeightUnit(str, Enum):
    """Body height unit."""

    IN = "in"
    CM = "cm"


class ActivityLevel(str, Enum):
    """Daily activity outside of planned training."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class NutritionGoal(str, Enum):
    """What the calorie target should do to body weight."""

    MAINTAIN = "maintain"
    RECOMP = "recomp"  # Same weight, better composition
    LOSE = "lose"
    GAIN = "gain"


class Consistency(str, Enum):
    """How consistently the athlete has trained recently."""

    NEW = "new"  # Little or no recent training
    SOME = "some"
    CONSISTENT = "consistent"


class ExperienceLevel(str, Enum):
    """Athlete level derived from training history."""

    BEGINNER = "beginner"  # < 1 year
    INTERMEDIATE = "intermediate"  # 1-3 years
    ADVANCED = "advanced"  # 3-6 years
    ELITE = "elite"  # 6+ years


_LEVEL_ORDER = [
    ExperienceLevel.BEGINNER,
    ExperienceLevel.INTERMEDIATE,
    ExperienceLevel.ADVANCED,
    ExperienceLevel.ELITE,
]


@dataclass
class VacationPeriod:
    """Scheduled time off; overlapping program weeks become deloads."""

    start_date: date
    end_date: date
    name: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "start_date": format_date(self.start_date),
            "end_date": format_date(self.end_date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "VacationPeriod":
        """Create from dictionary."""
        return cls(
            name=data.get("name", ""),
            start_date=parse_date(data.get("start_date") or data.get("startDate")),
            end_date=parse_date(data.get("end_date") or data.get("endDate")),
        )


@dataclass
class AthleteProfile:
    """Complete athlete profile, read-only for the engine."""

    weight: float
    height: float
    age: int
    sex: Sex
    training_days: int
    weight_unit: WeightUnit = WeightUnit.LB
    height_unit: HeightUnit = HeightUnit.IN
    body_fat_pct: float | None = None
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    nutrition_goal: NutritionGoal = NutritionGoal.MAINTAIN
    weekly_weight_change: float = 0.5  # lb/week for lose/gain
    years_training: float = 1.0
    consistency: Consistency = Consistency.SOME
    measured_rmr: float | None = None  # Indirect calorimetry, kcal/day
    device_bmr: float | None = None  # InBody / DEXA estimate, kcal/day
    device_bmr_source: str = ""
    allow_double_days: bool = False
    session_duration: int = 60  # Minutes per session
    vacations: list[VacationPeriod] = field(default_factory=list)
    name: str = ""

    @property
    def weight_kg(self) -> float:
        """Body weight in kilograms."""
        if self.weight_unit == WeightUnit.KG:
            return self.weight
        return self.weight * LB_TO_KG

    @property
    def weight_lb(self) -> float:
        """Body weight in pounds."""
        if self.weight_unit == WeightUnit.LB:
            return self.weight
        return self.weight / LB_TO_KG

    @property
    def height_cm(self) -> float:
        """Height in centimeters."""
        if self.height_unit == HeightUnit.CM:
            return self.height
        return self.height * IN_TO_CM

    @property
    def athlete_level(self) -> ExperienceLevel:
        """Derive the athlete level from years training and consistency."""
        if self.years_training < 1:
            index = 0
        elif self.years_training < 3:
            index = 1
        elif self.years_training < 6:
            index = 2
        else:
            index = 3

        # Lapsed athletes start one tier lower
        if self.consistency == Consistency.NEW and index > 0:
            index -= 1

        return _LEVEL_ORDER[index]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "weight": self.weight,
            "weight_unit": self.weight_unit.value,
            "height": self.height,
            "height_unit": self.height_unit.value,
            "age": self.age,
            "sex": self.sex.value,
            "body_fat_pct": self.body_fat_pct,
            "training_days": self.training_days,
            "activity_level": self.activity_level.value,
            "nutrition_goal": self.nutrition_goal.value,
            "weekly_weight_change": self.weekly_weight_change,
            "years_training": self.years_training,
            "consistency": self.consistency.value,
            "measured_rmr": self.measured_rmr,
            "device_bmr": self.device_bmr,
            "device_bmr_source": self.device_bmr_source,
            "allow_double_days": self.allow_double_days,
            "session_duration": self.session_duration,
            "vacations": [v.to_dict() for v in self.vacations],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AthleteProfile":
        """Create from dictionary."""
        return cls(
            name=data.get("name", ""),
            weight=float(data["weight"]),
            weight_unit=WeightUnit(data.get("weight_unit", "lb")),
            height=float(data["height"]),
            height_unit=HeightUnit(data.get("height_unit", "in")),
            age=int(data["age"]),
            sex=Sex(data["sex"]),
            body_fat_pct=optional_float(data.get("body_fat_pct")),
            training_days=int(data["training_days"]),
            activity_level=ActivityLevel(data.get("activity_level", "moderate")),
            nutrition_goal=NutritionGoal(data.get("nutrition_goal", "maintain")),
            weekly_weight_change=float(data.get("weekly_weight_change", 0.5)),
            years_training=float(data.get("years_training", 1.0)),
            consistency=Consistency(data.get("consistency", "some")),
            measured_rmr=optional_float(data.get("measured_rmr")),
            device_bmr=optional_float(data.get("device_bmr")),
            device_bmr_source=data.get("device_bmr_source", ""),
            allow_double_days=data.get("allow_double_days", False),
            session_duration=int(data.get("session_duration", 60)),
            vacations=[VacationPeriod.from_dict(v) for v in data.get("vacations", [])],
        )

    def get_summary(self) -> str:
        """Generate a one-paragraph summary for display or an alternate generator."""
        summary = f"Athlete: {self.name or 'Unnamed'}\n"
        summary += f"Stats: {self.weight}{self.weight_unit.value}, {self.height}{self.height_unit.value}, "
        summary += f"{self.age}y, {self.sex.value}\n"
        if self.body_fat_pct:
            summary += f"Body fat: {self.body_fat_pct}%\n"
        summary += f"Level: {self.athlete_level.value} ({self.years_training:g} years, {self.consistency.value})\n"
        summary += f"Training days: {self.training_days}/week, {self.session_duration} min/session\n"
        summary += f"Nutrition goal: {self.nutrition_goal.value}\n"

        if self.vacations:
            summary += "Time off:\n"
            for v in self.vacations:
                label = v.name or "Trip"
                summary += f"  - {label}: {v.start_date} to {v.end_date}\n"

        return summary
