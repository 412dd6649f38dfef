"""Nutrition target data models."""

from dataclasses import dataclass, field
from enum import Enum

from ..errors import InputIssue


class BmrSource(str, Enum):
    """Where a BMR value came from, most to least trusted."""

    MEASURED = "measured_rmr"  # Indirect calorimetry
    DEVICE = "device_estimate"  # Bioimpedance, DEXA
    CALCULATED = "mifflin_st_jeor"


@dataclass
class BmrEstimate:
    """A resolved BMR with its provenance."""

    value: float
    source: BmrSource
    valid: bool = True
    issues: list[InputIssue] = field(default_factory=list)
    device_label: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "value": round(self.value, 1),
            "source": self.source.value,
            "device_label": self.device_label,
            "valid": self.valid,
            "issues": [i.to_dict() for i in self.issues],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BmrEstimate":
        """Create from dictionary."""
        return cls(
            value=float(data["value"]),
            source=BmrSource(data.get("source", "mifflin_st_jeor")),
            device_label=data.get("device_label", ""),
            valid=data.get("valid", True),
            issues=[InputIssue(**i) for i in data.get("issues", [])],
        )


@dataclass
class MacroTargets:
    """Daily calorie and macronutrient targets (grams)."""

    calories: int
    protein: int
    carbs: int
    fat: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MacroTargets":
        """Create from dictionary."""
        return cls(
            calories=int(data["calories"]),
            protein=int(data["protein"]),
            carbs=int(data["carbs"]),
            fat=int(data["fat"]),
        )


@dataclass
class NutritionTargets:
    """Everything the metabolic calculator derives for one profile."""

    bmr: BmrEstimate
    activity_multiplier: float
    tdee: float
    macros: MacroTargets

    @property
    def valid(self) -> bool:
        return self.bmr.valid

    @property
    def issues(self) -> list[InputIssue]:
        return self.bmr.issues

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "bmr": self.bmr.to_dict(),
            "activity_multiplier": round(self.activity_multiplier, 3),
            "tdee": round(self.tdee),
            "macros": self.macros.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NutritionTargets":
        """Create from dictionary."""
        return cls(
            bmr=BmrEstimate.from_dict(data["bmr"]),
            activity_multiplier=float(data["activity_multiplier"]),
            tdee=float(data["tdee"]),
            macros=MacroTargets.from_dict(data["macros"]),
        )
