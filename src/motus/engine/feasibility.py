"""Goal feasibility validator.

Compares the weekly rate of change a goal requires against conservative
safe-progression ceilings. An unrealistic goal is a verdict, not an error:
only malformed input raises.
"""

import logging
import math
from datetime import date

from ..errors import InputIssue, InvalidInputError
from ..models.feasibility import FeasibilityVerdict, GoalCheck
from ..models.goals import (
    RACE_LABELS,
    RACE_MILES,
    AestheticGoal,
    ChallengeGoal,
    EnduranceGoal,
    FatLossGoal,
    Goal,
    GoalSpec,
    StrengthGoal,
)
from ..models.profile import LB_TO_KG, AthleteProfile, WeightUnit
from ..utils.dates import days_between, weeks_until
from . import constants

logger = logging.getLogger(__name__)

REALISTIC_MESSAGE = "All goals are achievable within safe progression rates."


def taper_weeks_for(total_weeks: int) -> int:
    """Taper length for an endurance program of the given length."""
    return 2 if total_weeks >= constants.LONG_TAPER_MIN_WEEKS else 1


def _ceil_weeks(value: float) -> int:
    # Round first so float noise (8.0000000001) does not add a week
    return max(1, math.ceil(round(value, 6)))


def _weeks_to_goal(goal_date: date | None, start_date: date, field: str) -> int | None:
    """Weeks from start to goal date, rejecting dates in the past."""
    if goal_date is None:
        return None
    if days_between(start_date, goal_date) < 0:
        raise InvalidInputError(
            f"{field} {goal_date.isoformat()} is before the start date {start_date.isoformat()}",
            field=field,
        )
    return weeks_until(start_date, goal_date)


def _require_positive(value: float | None, field: str) -> float:
    if value is None:
        raise InvalidInputError(f"{field} is required", field=field)
    if value <= 0:
        raise InvalidInputError(f"{field} must be positive (got {value})", field=field)
    return value


def check_strength(goal: StrengthGoal, start_date: date) -> tuple[list[GoalCheck], int | None]:
    """One check per lift that has both a current and a target 1RM."""
    weeks = _weeks_to_goal(goal.goal_date, start_date, "goal_date")
    lifts = goal.complete_lifts
    for lift in lifts:
        _require_positive(lift.current, f"lifts.{lift.lift_id}.current")
        _require_positive(lift.target, f"lifts.{lift.lift_id}.target")

    if weeks is None:
        # No date: size the timeline so the largest gain stays within the ceiling
        gains = [lift.target - lift.current for lift in lifts]
        weeks = _ceil_weeks(max(gains, default=0) / constants.MAX_STRENGTH_GAIN_LB_PER_WEEK)
        dated = False
    else:
        dated = True

    checks = []
    for lift in lifts:
        gain = lift.target - lift.current
        checks.append(GoalCheck(
            label=lift.label,
            required_weekly_rate=gain / weeks,
            max_safe_weekly_rate=constants.MAX_STRENGTH_GAIN_LB_PER_WEEK,
            unit="lb/week",
            weeks=weeks,
            current=lift.current,
            target=lift.target,
            recommended_weeks=_ceil_weeks(gain / constants.MAX_STRENGTH_GAIN_LB_PER_WEEK),
        ))
    return checks, weeks if dated else None


def check_endurance(goal: EnduranceGoal, start_date: date) -> tuple[list[GoalCheck], int]:
    """Mileage growth check plus an optional pace check."""
    if goal.race_date is None:
        raise InvalidInputError("race_date is required", field="race_date")
    weeks = _weeks_to_goal(goal.race_date, start_date, "race_date")
    current = _require_positive(goal.current_weekly_mileage, "current_weekly_mileage")

    taper = taper_weeks_for(weeks)
    build_weeks = max(1, weeks - taper)
    required_peak = constants.REQUIRED_PEAK_MILEAGE[goal.distance]
    ceiling = constants.MAX_MILEAGE_GROWTH

    if current >= required_peak:
        growth = 0.0
        recommended = taper + 1
    else:
        ratio = required_peak / current
        growth = ratio ** (1 / build_weeks) - 1
        recommended = _ceil_weeks(math.log(ratio) / math.log(1 + ceiling)) + taper

    checks = [GoalCheck(
        label=f"{RACE_LABELS[goal.distance]} weekly mileage",
        required_weekly_rate=growth * 100,
        max_safe_weekly_rate=ceiling * 100,
        unit="%/week",
        weeks=build_weeks,
        current=current,
        target=required_peak,
        recommended_weeks=recommended,
    )]

    if goal.target_finish_time and goal.current_pace:
        target_pace = goal.target_finish_time / RACE_MILES[goal.distance]
        improvement = max(0.0, (goal.current_pace - target_pace) / goal.current_pace * 100)
        max_rate = constants.MAX_PACE_IMPROVEMENT * 100
        checks.append(GoalCheck(
            label=f"{RACE_LABELS[goal.distance]} pace",
            required_weekly_rate=improvement / weeks,
            max_safe_weekly_rate=max_rate,
            unit="%/week",
            weeks=weeks,
            current=goal.current_pace,
            target=round(target_pace, 1),
            recommended_weeks=_ceil_weeks(improvement / max_rate),
        ))

    return checks, weeks


def check_aesthetic(
    goal: AestheticGoal,
    profile: AthleteProfile,
    start_date: date,
) -> tuple[list[GoalCheck], int | None]:
    """Body-fat change rate check."""
    current = goal.current_body_fat if goal.current_body_fat is not None else profile.body_fat_pct
    current = _require_positive(current, "current_body_fat")
    target = _require_positive(goal.target_body_fat, "target_body_fat")

    change = abs(current - target)
    ceiling = constants.MAX_BODY_FAT_CHANGE_PER_WEEK
    recommended = _ceil_weeks(change / ceiling)
    weeks = _weeks_to_goal(goal.goal_date, start_date, "goal_date")

    check = GoalCheck(
        label="Body fat",
        required_weekly_rate=change / (weeks or recommended),
        max_safe_weekly_rate=ceiling,
        unit="%/week",
        weeks=weeks or recommended,
        current=current,
        target=target,
        recommended_weeks=recommended,
    )
    return [check], weeks


def check_fatloss(
    goal: FatLossGoal,
    profile: AthleteProfile,
    start_date: date,
) -> tuple[list[GoalCheck], int]:
    """Weight-loss rate check against min(2 lb, 1% of body weight) per week."""
    weight_lb = _require_positive(profile.weight_lb, "weight")
    target = _require_positive(goal.target_weight, "target_weight")
    target_lb = target / LB_TO_KG if profile.weight_unit == WeightUnit.KG else target
    to_lose = max(0.0, weight_lb - target_lb)

    ceiling = min(
        constants.MAX_WEIGHT_LOSS_LB_PER_WEEK,
        weight_lb * constants.MAX_WEIGHT_LOSS_BODYWEIGHT_FRACTION,
    )

    weeks = _weeks_to_goal(goal.goal_date, start_date, "goal_date")
    if weeks is not None:
        rate = to_lose / weeks
    else:
        rate = _require_positive(goal.weekly_rate, "weekly_rate")
        weeks = _ceil_weeks(to_lose / rate)

    check = GoalCheck(
        label="Weight loss",
        required_weekly_rate=rate,
        max_safe_weekly_rate=round(ceiling, 2),
        unit="lb/week",
        weeks=weeks,
        current=round(weight_lb, 1),
        target=round(target_lb, 1),
        recommended_weeks=_ceil_weeks(to_lose / ceiling),
    )
    return [check], weeks


def check_goal(
    goal: Goal,
    profile: AthleteProfile,
    start_date: date,
) -> tuple[list[GoalCheck], int | None]:
    """Run the checks for a single goal variant.

    Returns:
        (checks, weeks until the goal, or None when the goal has no timeline)
    """
    if isinstance(goal, StrengthGoal):
        return check_strength(goal, start_date)
    if isinstance(goal, EnduranceGoal):
        return check_endurance(goal, start_date)
    if isinstance(goal, AestheticGoal):
        return check_aesthetic(goal, profile, start_date)
    if isinstance(goal, FatLossGoal):
        return check_fatloss(goal, profile, start_date)
    if isinstance(goal, ChallengeGoal):
        days = _require_positive(goal.days, "days")
        return [], _ceil_weeks(days / 7)
    raise InvalidInputError(f"Unsupported goal type: {type(goal).__name__}", field="type")


def validate_goal(
    goal_spec: GoalSpec,
    profile: AthleteProfile,
    start_date: date | None = None,
) -> FeasibilityVerdict:
    """Check the primary and secondary goals against the safe progression ceilings.

    Args:
        goal_spec: Primary goal plus optional secondary (hybrid) goal
        profile: Athlete profile (body weight and body fat fallbacks)
        start_date: Program start, defaults to today

    Returns:
        A single verdict covering primary and secondary goals

    Raises:
        InvalidInputError: A required field is missing or non-positive, or a
            goal date falls before the start date
    """
    start_date = start_date or date.today()

    details: list[GoalCheck] = []
    issues: list[InputIssue] = []
    weeks_until_goal = None
    for i, goal in enumerate(goal_spec.goals):
        try:
            checks, weeks = check_goal(goal, profile, start_date)
        except InvalidInputError as e:
            prefix = "primary" if i == 0 else "secondary"
            issues.extend(InputIssue(f"{prefix}.{x.field}", x.reason) for x in e.issues)
            continue
        details.extend(checks)
        if i == 0:
            weeks_until_goal = weeks

    if issues:
        raise InvalidInputError.from_issues(issues)

    flagged = [d for d in details if not d.is_realistic]
    if flagged:
        message = "Some goals exceed safe progression rates. " + "; ".join(
            d.describe() for d in flagged
        )
    else:
        message = REALISTIC_MESSAGE

    recommended = [d.recommended_weeks for d in details if d.recommended_weeks]
    verdict = FeasibilityVerdict(
        is_realistic=not flagged,
        details=details,
        message=message,
        weeks_until_goal=weeks_until_goal,
        recommended_weeks=max(recommended) if recommended else None,
    )
    logger.debug(
        "Validated %s goal: realistic=%s flagged=%d",
        goal_spec.program_type.value,
        verdict.is_realistic,
        len(flagged),
    )
    return verdict
