"""Deterministic program engine."""

from .assembler import AssemblerConfig, assemble, assemble_or_placeholder
from .feasibility import validate_goal
from .metabolic import (
    activity_multiplier,
    compute_bmr,
    compute_macros,
    compute_nutrition_targets,
    compute_tdee,
    resolve_bmr,
)
from .periodization import default_deload_cadence, plan_mesocycle, plan_phases
from .projection import mileage_outline, peak_mileage_ceiling, project_mileage, project_week

__all__ = [
    "AssemblerConfig",
    "activity_multiplier",
    "assemble",
    "assemble_or_placeholder",
    "compute_bmr",
    "compute_macros",
    "compute_nutrition_targets",
    "compute_tdee",
    "default_deload_cadence",
    "mileage_outline",
    "peak_mileage_ceiling",
    "plan_mesocycle",
    "plan_phases",
    "project_mileage",
    "project_week",
    "resolve_bmr",
    "validate_goal",
]
