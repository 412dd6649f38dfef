"""Weekly workload projector.

Projects the canonical (week-1) schedule onto any later week by scaling
each exercise for that week's phase. Projection never mutates its input and
keeps no state between calls, so the same inputs always give the same week.
"""

import copy
import logging
import math
import re

from ..errors import InvalidInputError
from ..models.profile import ExperienceLevel
from ..models.program import Phase, ProjectedWeek
from ..models.schedule import CanonicalSchedule, DaySchedule, Exercise
from . import constants

logger = logging.getLogger(__name__)

WEEK_TOKEN = re.compile(r"\bWeek \d+\b")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _as_phase(phase: Phase | str) -> Phase:
    return phase if isinstance(phase, Phase) else Phase.parse(phase)


def _check_week(week_number: int, total_weeks: int | None) -> None:
    if week_number < 1:
        raise InvalidInputError(f"Week {week_number} is out of range (weeks start at 1)", field="week_number")
    if total_weeks is not None and week_number > total_weeks:
        raise InvalidInputError(
            f"Week {week_number} is out of range (program has {total_weeks} weeks)",
            field="week_number",
        )


def rewrite_week_tokens(text: str, week_number: int) -> str:
    """Replace "Week N" mentions with the viewed week number."""
    if not text:
        return text
    return WEEK_TOKEN.sub(f"Week {week_number}", text)


def scale_exercise(exercise: Exercise, phase: Phase, week_number: int) -> Exercise:
    """Return a scaled copy of one exercise for the given phase."""
    scaled = copy.deepcopy(exercise)

    if phase == Phase.DELOAD:
        reduced = max(constants.DELOAD_MIN_SETS, math.floor(scaled.sets * constants.DELOAD_SET_FACTOR))
        # The two-set floor never raises a single-set exercise (runs, walks)
        scaled.sets = min(scaled.sets, reduced)
        if scaled.rpe is not None:
            scaled.rpe = max(constants.MIN_RPE, scaled.rpe - constants.DELOAD_RPE_DROP)
    elif phase == Phase.PEAK:
        if scaled.rpe is not None:
            scaled.rpe = min(constants.MAX_RPE, scaled.rpe + constants.PEAK_RPE_BUMP)
    elif phase == Phase.BUILD_2:
        scaled.sets = _round_half_up(scaled.sets * constants.BUILD_2_SET_FACTOR)
    elif phase.is_build:
        scaled.sets = _round_half_up(scaled.sets * constants.BUILD_SET_FACTOR)

    scaled.notes = rewrite_week_tokens(scaled.notes, week_number)
    scaled.progression = rewrite_week_tokens(scaled.progression, week_number)
    return scaled


def project_day(day: DaySchedule, phase: Phase, week_number: int) -> DaySchedule:
    """Scale every exercise of a training day; rest days pass through."""
    projected = copy.deepcopy(day)
    if projected.is_rest_day:
        return projected

    for session in projected.sessions:
        session.exercises = [scale_exercise(ex, phase, week_number) for ex in session.exercises]
    projected.is_deload = phase == Phase.DELOAD
    return projected


def project_week(
    schedule: CanonicalSchedule,
    week_number: int,
    phase: Phase | str,
    previous_phase: Phase | str | None = None,
    total_weeks: int | None = None,
    is_vacation_week: bool = False,
) -> ProjectedWeek:
    """Project the canonical schedule onto one week.

    Args:
        schedule: Canonical week-1 schedule (not modified)
        week_number: 1-indexed week to project
        phase: Phase of that week
        previous_phase: Phase of the week before, for transition marking
        total_weeks: Program length; weeks past it are rejected
        is_vacation_week: Whether the week overlaps declared time off; such
            weeks are scaled as a deload whatever their phase label

    Returns:
        A freshly built ProjectedWeek

    Raises:
        InvalidInputError: week_number is below 1 or above total_weeks
    """
    _check_week(week_number, total_weeks)
    phase = _as_phase(phase)
    previous = _as_phase(previous_phase) if previous_phase is not None else None

    if week_number == 1:
        days = copy.deepcopy(schedule.days)
    else:
        load_phase = Phase.DELOAD if is_vacation_week else phase
        days = [project_day(day, load_phase, week_number) for day in schedule.days]

    return ProjectedWeek(
        week_number=week_number,
        phase=phase,
        days=days,
        is_vacation_week=is_vacation_week,
        phase_transition=week_number == 1 or (previous is not None and previous != phase),
    )


def peak_mileage_ceiling(level: ExperienceLevel | str, starting_mileage: float = 0) -> float:
    """Peak weekly mileage for an athlete level, never below current volume."""
    level = ExperienceLevel(level)
    ceiling = constants.PEAK_MILEAGE_BY_LEVEL.get(level, constants.DEFAULT_PEAK_MILEAGE)
    return max(float(ceiling), float(starting_mileage or 0))


def project_mileage(
    week_number: int,
    phases: list[Phase],
    starting_mileage: float,
    ceiling: float,
) -> float:
    """Planned weekly mileage for one week.

    Base weeks hold the starting volume. From the first Build or Peak week
    the volume grows 5% per week up to the ceiling; deloads take 70% of the
    curve and taper weeks sit at 60% of the ceiling.
    """
    _check_week(week_number, len(phases))
    phase = _as_phase(phases[week_number - 1])

    if phase == Phase.TAPER:
        return round(ceiling * constants.TAPER_MILEAGE_FACTOR, 1)

    growth_start = next(
        (i for i, p in enumerate(phases) if _as_phase(p).is_build or _as_phase(p) == Phase.PEAK),
        None,
    )
    index = week_number - 1
    if growth_start is None or index < growth_start:
        mileage = starting_mileage
    else:
        weeks_grown = index - growth_start + 1
        mileage = min(starting_mileage * (1 + constants.MILEAGE_GROWTH) ** weeks_grown, ceiling)

    if phase == Phase.DELOAD:
        mileage *= constants.DELOAD_MILEAGE_FACTOR
    return round(mileage, 1)


def mileage_outline(phases: list[Phase], starting_mileage: float, ceiling: float) -> list[float]:
    """Planned mileage for every week of the program."""
    return [
        project_mileage(week, phases, starting_mileage, ceiling)
        for week in range(1, len(phases) + 1)
    ]
