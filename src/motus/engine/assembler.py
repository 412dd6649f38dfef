"""Program assembler.

Ties the engine together: nutrition targets, the feasibility verdict, the
phase plan and the canonical week-1 schedule become one Program. Week-by-week
projection is left to ``Program.project_week`` so it only runs for the weeks
a caller actually views.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone

from ..errors import AssemblyFailure, InvalidInputError
from ..models.feasibility import FeasibilityVerdict
from ..models.goals import ChallengeGoal, EnduranceGoal, GoalSpec, ProgramType
from ..models.profile import AthleteProfile, VacationPeriod
from ..models.program import Mesocycle, Phase, Program
from ..models.schedule import CanonicalSchedule, DaySchedule
from ..utils.dates import week_number_of
from . import constants
from .feasibility import taper_weeks_for, validate_goal
from .metabolic import compute_nutrition_targets
from .periodization import default_deload_cadence, plan_mesocycle
from .projection import peak_mileage_ceiling
from .templates import build_canonical_schedule, program_name

logger = logging.getLogger(__name__)


@dataclass
class AssemblerConfig:
    """Configuration for program assembly."""

    deload_every: int | None = None  # Defaults by program length
    taper_weeks: int | None = None  # Defaults to 2 (8+ weeks) or 1
    default_strength_weeks: int = constants.DEFAULT_STRENGTH_WEEKS
    default_aesthetic_weeks: int = constants.DEFAULT_AESTHETIC_WEEKS
    max_weeks: int = constants.MAX_PROGRAM_WEEKS
    generator_timeout: float = 30.0  # Seconds to wait for an alternate generator


def total_weeks_for(goal_spec: GoalSpec, verdict: FeasibilityVerdict, config: AssemblerConfig) -> int:
    """Program length from the primary goal and its verdict.

    Raises:
        InvalidInputError: The program would run longer than ``config.max_weeks``
    """
    program_type = goal_spec.program_type
    weeks = verdict.weeks_until_goal

    if weeks is None and program_type == ProgramType.STRENGTH:
        weeks = max(config.default_strength_weeks, verdict.recommended_weeks or 0)
    elif weeks is None and program_type == ProgramType.AESTHETIC:
        weeks = max(config.default_aesthetic_weeks, verdict.recommended_weeks or 0)

    if weeks is None:
        raise InvalidInputError(f"Cannot determine the length of a {program_type.value} program",
                                field="goal_date")
    if weeks > config.max_weeks:
        raise InvalidInputError(
            f"Program would run {weeks} weeks (maximum {config.max_weeks}); choose a closer goal date",
            field="goal_date",
        )
    return weeks


def map_vacations(
    vacations: list[VacationPeriod],
    start_date: date,
    total_weeks: int,
) -> tuple[list[int], list[VacationPeriod]]:
    """Find the program weeks each vacation overlaps.

    Returns:
        (sorted vacation week numbers, vacations entirely outside the program)
    """
    weeks: set[int] = set()
    out_of_range = []
    for vacation in vacations:
        if vacation.start_date is None or vacation.end_date is None:
            raise InvalidInputError(f"Vacation {vacation.name!r} needs a start and end date",
                                    field="vacations")
        if vacation.end_date < vacation.start_date:
            raise InvalidInputError(f"Vacation {vacation.name!r} ends before it starts",
                                    field="vacations")

        first = max(1, week_number_of(start_date, vacation.start_date))
        last = min(total_weeks, week_number_of(start_date, vacation.end_date))
        if first > last:
            out_of_range.append(vacation)
            continue
        weeks.update(range(first, last + 1))

    return sorted(weeks), out_of_range


def validate_schedule(
    schedule: CanonicalSchedule,
    profile: AthleteProfile,
    goal_spec: GoalSpec,
) -> None:
    """Check a canonical schedule against the profile.

    Raises:
        AssemblyFailure: The schedule cannot back a valid program
    """
    if not schedule.days or not schedule.training_days:
        raise AssemblyFailure("Canonical schedule has no training sessions", field="weekly_schedule")

    numbers = [d.day for d in schedule.days]
    if len(numbers) != len(set(numbers)) or any(n < 1 or n > 7 for n in numbers):
        raise AssemblyFailure(f"Schedule days must be unique and within 1-7 (got {numbers})",
                              field="weekly_schedule")

    count = len(schedule.training_days)
    if count != profile.training_days:
        raise AssemblyFailure(
            f"Schedule has {count} training days but the profile declares {profile.training_days}",
            field="training_days",
        )

    doubles = [d.day_name for d in schedule.training_days if len(d.sessions) > 1]
    if doubles and not (goal_spec.is_hybrid and profile.allow_double_days):
        raise AssemblyFailure(
            f"Double sessions on {', '.join(doubles)} require a hybrid goal with double days enabled",
            field="allow_double_days",
        )


def progression_rules(
    program_type: ProgramType,
    deload_every: int,
    taper_weeks: int,
    peak_mileage: float | None = None,
) -> dict[str, str]:
    """Human-readable rules describing exactly what the engine applies."""
    rules = {
        "deload_protocol": (
            f"Deload every {deload_every} weeks counted from the last deload, and on every "
            f"vacation week: sets x{constants.DELOAD_SET_FACTOR:g} "
            f"(minimum {constants.DELOAD_MIN_SETS}), RPE -{constants.DELOAD_RPE_DROP} "
            f"(minimum {constants.MIN_RPE})"
        ),
        "volume_increase": (
            f"Build weeks: sets x{constants.BUILD_SET_FACTOR:g}; "
            f"Build 2 weeks: sets x{constants.BUILD_2_SET_FACTOR:g}"
        ),
        "peak_intensity": (
            f"Peak weeks: RPE +{constants.PEAK_RPE_BUMP:g} (maximum {constants.MAX_RPE})"
        ),
    }

    if program_type == ProgramType.STRENGTH:
        rules["strength_increase"] = (
            "Add load only when all reps are completed at target RPE; 1RM goals may not "
            f"require more than {constants.MAX_STRENGTH_GAIN_LB_PER_WEEK:g} lb/week"
        )

    if program_type == ProgramType.ENDURANCE:
        ceiling = f" up to {peak_mileage:g} miles" if peak_mileage else ""
        rules["endurance_progression"] = (
            f"Weekly mileage holds during Base, then grows at most "
            f"{constants.MILEAGE_GROWTH * 100:g}% per week{ceiling}; deload weeks run at "
            f"{constants.DELOAD_MILEAGE_FACTOR * 100:g}% of the curve"
        )
        rules["taper"] = (
            f"Final {taper_weeks} week{'s' if taper_weeks != 1 else ''}: taper to "
            f"{constants.TAPER_MILEAGE_FACTOR * 100:g}% of peak mileage"
        )
    else:
        rules["closing_week"] = "The final week is a deload"

    return rules


def _template_type(goal_spec: GoalSpec) -> ProgramType:
    primary = goal_spec.primary
    if isinstance(primary, ChallengeGoal):
        return primary.focus
    return goal_spec.program_type


def assemble(
    profile: AthleteProfile,
    goal_spec: GoalSpec,
    canonical_schedule: CanonicalSchedule | None = None,
    start_date: date | None = None,
    config: AssemblerConfig | None = None,
) -> Program:
    """Assemble a complete program.

    Args:
        profile: Athlete profile
        goal_spec: Primary goal plus optional secondary goal
        canonical_schedule: Week-1 schedule; built from templates when omitted
        start_date: Program start, defaults to today
        config: Assembly configuration

    Returns:
        The assembled Program, with the feasibility verdict attached. A
        flagged goal is assembled as stated, never rewritten.

    Raises:
        InvalidInputError: Implausible body stats, bad goal fields, or an
            over-long program
        AssemblyFailure: No valid schedule can be placed
    """
    config = config or AssemblerConfig()
    start_date = start_date or date.today()
    program_type = goal_spec.program_type

    nutrition = compute_nutrition_targets(profile, goal_spec)
    if not nutrition.valid:
        raise InvalidInputError.from_issues(nutrition.issues)

    if profile.training_days is None or profile.training_days < 1:
        raise AssemblyFailure("No training days: at least one training day is required",
                              field="training_days")
    if profile.training_days > 7:
        raise InvalidInputError(f"training_days must be 1-7 (got {profile.training_days})",
                                field="training_days")

    verdict = validate_goal(goal_spec, profile, start_date)
    if not verdict.is_realistic:
        logger.info("Assembling program for a flagged goal: %s", verdict.message)

    total_weeks = total_weeks_for(goal_spec, verdict, config)
    vacation_weeks, out_of_range = map_vacations(profile.vacations, start_date, total_weeks)
    if out_of_range:
        logger.warning("%d vacation(s) fall outside the %d-week program", len(out_of_range), total_weeks)

    deload_every = config.deload_every or default_deload_cadence(total_weeks)
    taper_weeks = config.taper_weeks or taper_weeks_for(total_weeks)
    mesocycle = plan_mesocycle(total_weeks, program_type, vacation_weeks, deload_every, taper_weeks)

    secondary_type = goal_spec.secondary.type if goal_spec.secondary else None
    metadata = {
        "athlete_level": profile.athlete_level.value,
        "weeks_until_goal": verdict.weeks_until_goal,
        "deload_every": deload_every,
    }

    weekly_mileage = None
    peak_mileage = None
    primary = goal_spec.primary
    if isinstance(primary, EnduranceGoal):
        weekly_mileage = primary.current_weekly_mileage
        peak_mileage = peak_mileage_ceiling(profile.athlete_level, weekly_mileage)
        metadata["starting_mileage"] = weekly_mileage
        metadata["peak_mileage"] = peak_mileage
        metadata["taper_weeks"] = min(taper_weeks, total_weeks)

    if canonical_schedule is None:
        canonical_schedule = build_canonical_schedule(
            _template_type(goal_spec),
            profile.training_days,
            subtype=primary.subtype,
            secondary_type=secondary_type,
            allow_double_days=profile.allow_double_days,
            weekly_mileage=weekly_mileage,
            session_duration=profile.session_duration,
        )
    validate_schedule(canonical_schedule, profile, goal_spec)

    name = program_name(program_type, primary.subtype)
    if secondary_type:
        name = f"{name} + {secondary_type.value.capitalize()}"

    program = Program(
        name=name,
        description=(
            f"Personalized {program_type.value} program with progressive overload "
            "and strategic deloads."
        ),
        program_type=program_type.value,
        subtype=primary.subtype,
        secondary_type=secondary_type.value if secondary_type else None,
        mesocycle=mesocycle,
        weekly_schedule=canonical_schedule,
        progression_rules=progression_rules(program_type, deload_every, taper_weeks, peak_mileage),
        current_week=1,
        days_per_week=profile.training_days,
        vacations=list(profile.vacations),
        out_of_range_vacations=out_of_range,
        feasibility=verdict,
        nutrition=nutrition,
        start_date=start_date,
        generated_at=datetime.now(timezone.utc),
        generator="deterministic",
        metadata=metadata,
    )

    logger.info(
        "Assembled %r: %d weeks, %d days/week, deloads at %s",
        program.name,
        program.total_weeks,
        program.days_per_week,
        mesocycle.deload_weeks,
    )
    return program


def placeholder_program(
    profile: AthleteProfile,
    goal_spec: GoalSpec,
    reason: str,
    start_date: date | None = None,
) -> Program:
    """Minimal, clearly-labeled program for when assembly fails."""
    program_type = goal_spec.program_type
    return Program(
        name=f"{program_type.value.capitalize()} Program (placeholder)",
        description=f"Placeholder program: {reason}. Adjust your profile and regenerate.",
        program_type=program_type.value,
        subtype=goal_spec.primary.subtype,
        secondary_type=goal_spec.secondary.type.value if goal_spec.secondary else None,
        mesocycle=Mesocycle.from_phases([Phase.BASE]),
        weekly_schedule=CanonicalSchedule(days=[
            DaySchedule(day=day, name="Rest Day", is_rest_day=True) for day in range(1, 8)
        ]),
        days_per_week=profile.training_days or 0,
        vacations=list(profile.vacations),
        start_date=start_date or date.today(),
        generated_at=datetime.now(timezone.utc),
        generator="placeholder",
        metadata={"placeholder_reason": reason},
        is_placeholder=True,
    )


def assemble_or_placeholder(
    profile: AthleteProfile,
    goal_spec: GoalSpec,
    canonical_schedule: CanonicalSchedule | None = None,
    start_date: date | None = None,
    config: AssemblerConfig | None = None,
) -> Program:
    """Assemble a program, falling back to a placeholder on AssemblyFailure.

    Invalid input still raises: only a schedule that cannot be placed is
    turned into a placeholder.
    """
    try:
        return assemble(profile, goal_spec, canonical_schedule, start_date, config)
    except AssemblyFailure as e:
        logger.warning("Assembly failed, returning placeholder: %s", e.message)
        return placeholder_program(profile, goal_spec, e.message, start_date)
