"""Data models for motus."""

from .feasibility import FeasibilityVerdict, GoalCheck
from .goals import (
    AestheticGoal,
    ChallengeGoal,
    EnduranceGoal,
    FatLossGoal,
    GoalSpec,
    LiftTarget,
    ProgramType,
    RaceDistance,
    StrengthGoal,
)
from .nutrition import BmrEstimate, BmrSource, MacroTargets, NutritionTargets
from .profile import ActivityLevel, AthleteProfile, ExperienceLevel, NutritionGoal, Sex, VacationPeriod
from .program import Mesocycle, MesocycleWeek, Phase, Program, ProjectedWeek
from .schedule import CanonicalSchedule, DaySchedule, Exercise, Session, SessionTime

__all__ = [
    "ActivityLevel",
    "AestheticGoal",
    "AthleteProfile",
    "BmrEstimate",
    "BmrSource",
    "CanonicalSchedule",
    "ChallengeGoal",
    "DaySchedule",
    "EnduranceGoal",
    "Exercise",
    "ExperienceLevel",
    "FatLossGoal",
    "FeasibilityVerdict",
    "GoalCheck",
    "GoalSpec",
    "LiftTarget",
    "MacroTargets",
    "Mesocycle",
    "MesocycleWeek",
    "NutritionGoal",
    "NutritionTargets",
    "Phase",
    "Program",
    "ProgramType",
    "ProjectedWeek",
    "RaceDistance",
    "Session",
    "SessionTime",
    "Sex",
    "StrengthGoal",
    "VacationPeriod",
]
