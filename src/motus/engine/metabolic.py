"""Metabolic calculator: BMR, TDEE and macro targets.

Every function here is pure and never raises on implausible body stats.
Bad values are replaced with safe defaults and reported through
``valid=False`` plus field-level issues, so the caller decides whether to
reject the input.
"""

import logging

from ..errors import InputIssue
from ..models.goals import FatLossGoal, GoalSpec
from ..models.nutrition import BmrEstimate, BmrSource, MacroTargets, NutritionTargets
from ..models.profile import LB_TO_KG, ActivityLevel, AthleteProfile, NutritionGoal, Sex
from . import constants

logger = logging.getLogger(__name__)


def compute_bmr(weight_kg: float, height_cm: float, age: float, sex: Sex | str) -> float:
    """Compute BMR with the Mifflin-St Jeor equation.

    Args:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters
        age: Age in years
        sex: "male" or "female"

    Returns:
        Basal metabolic rate in kcal/day

    Examples:
        >>> compute_bmr(80, 180, 30, "male")
        1780.0
    """
    offset = 5 if Sex(sex) == Sex.MALE else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def _checked_body_stats(profile: AthleteProfile) -> tuple[float, float, float, list[InputIssue]]:
    """Return usable (weight_kg, height_cm, age) plus issues for replaced values."""
    issues: list[InputIssue] = []

    weight_kg = profile.weight_kg
    if weight_kg is None or weight_kg <= 0:
        issues.append(InputIssue("weight", f"must be positive (got {profile.weight})"))
        weight_kg = constants.DEFAULT_WEIGHT_KG

    height_cm = profile.height_cm
    if height_cm is None or height_cm <= 0:
        issues.append(InputIssue("height", f"must be positive (got {profile.height})"))
        height_cm = constants.DEFAULT_HEIGHT_CM

    age = profile.age
    if age is None or age <= 0:
        issues.append(InputIssue("age", f"must be positive (got {profile.age})"))
        age = constants.DEFAULT_AGE

    return weight_kg, height_cm, age, issues


def resolve_bmr(profile: AthleteProfile) -> BmrEstimate:
    """Pick the most trusted BMR available for a profile.

    Precedence: measured RMR, then a device estimate (InBody, DEXA...),
    then the Mifflin-St Jeor value. The chosen source is kept on the result.
    """
    if profile.measured_rmr and profile.measured_rmr > 0:
        return BmrEstimate(value=float(profile.measured_rmr), source=BmrSource.MEASURED)

    if profile.device_bmr and profile.device_bmr > 0:
        return BmrEstimate(
            value=float(profile.device_bmr),
            source=BmrSource.DEVICE,
            device_label=profile.device_bmr_source,
        )

    weight_kg, height_cm, age, issues = _checked_body_stats(profile)
    if issues:
        logger.debug("Replaced implausible body stats: %s", issues)

    return BmrEstimate(
        value=compute_bmr(weight_kg, height_cm, age, profile.sex),
        source=BmrSource.CALCULATED,
        valid=not issues,
        issues=issues,
    )


def activity_multiplier(activity_level: ActivityLevel | str, training_days: int) -> float:
    """Base activity factor plus 0.05 per training day, capped at 2.0."""
    base = constants.ACTIVITY_FACTORS[ActivityLevel(activity_level)]
    days = min(max(training_days or 0, 0), constants.MAX_TRAINING_DAYS)
    multiplier = base + days * constants.TRAINING_DAY_ADJUSTMENT
    return min(round(multiplier, 4), constants.MAX_ACTIVITY_MULTIPLIER)


def compute_tdee(bmr: float, training_days: int, activity_level: ActivityLevel | str) -> float:
    """Total daily energy expenditure in kcal/day."""
    return bmr * activity_multiplier(activity_level, training_days)


def compute_macros(
    tdee: float,
    nutrition_goal: NutritionGoal | str,
    weight_lb: float,
    weekly_rate: float = 0.5,
) -> MacroTargets:
    """Split a calorie target into protein, carbs and fat (grams).

    Protein is set per lb of body weight; the remaining calories are split
    by calorie share between fat and carbs.
    """
    goal = NutritionGoal(nutrition_goal)
    adjustment = constants.KCAL_PER_LB_WEEKLY * weekly_rate
    if goal == NutritionGoal.LOSE:
        calories = tdee - adjustment
    elif goal == NutritionGoal.GAIN:
        calories = tdee + adjustment
    else:
        calories = tdee

    protein = weight_lb * constants.PROTEIN_PER_LB[goal]
    remaining = max(0.0, calories - protein * constants.KCAL_PER_G_PROTEIN)
    fat = remaining * constants.FAT_CALORIE_SHARE / constants.KCAL_PER_G_FAT
    carbs = remaining * constants.CARB_CALORIE_SHARE / constants.KCAL_PER_G_CARB

    return MacroTargets(
        calories=round(calories),
        protein=round(protein),
        carbs=round(carbs),
        fat=round(fat),
    )


def compute_nutrition_targets(
    profile: AthleteProfile,
    goal_spec: GoalSpec | None = None,
) -> NutritionTargets:
    """Derive BMR, TDEE and macros for a profile.

    A fat-loss primary goal sets a calorie deficit at the goal's own weekly
    rate, whatever the profile's nutrition goal says.
    """
    bmr = resolve_bmr(profile)
    multiplier = activity_multiplier(profile.activity_level, profile.training_days)
    tdee = bmr.value * multiplier

    weight_lb = profile.weight_lb if profile.weight and profile.weight > 0 else (
        constants.DEFAULT_WEIGHT_KG / LB_TO_KG
    )
    nutrition_goal = profile.nutrition_goal
    weekly_rate = profile.weekly_weight_change
    if goal_spec is not None and isinstance(goal_spec.primary, FatLossGoal):
        nutrition_goal = NutritionGoal.LOSE
        weekly_rate = goal_spec.primary.weekly_rate

    macros = compute_macros(tdee, nutrition_goal, weight_lb, weekly_rate=weekly_rate)

    logger.debug(
        "Nutrition targets: bmr=%.1f (%s) multiplier=%.3f tdee=%.0f",
        bmr.value,
        bmr.source.value,
        multiplier,
        tdee,
    )
    return NutritionTargets(bmr=bmr, activity_multiplier=multiplier, tdee=tdee, macros=macros)
