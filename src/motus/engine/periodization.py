"""Periodization planner: one phase per program week.

Planning happens in three passes over the week slots:

1. The closing convention (Taper for endurance, a final Deload otherwise).
2. Deloads, forced by vacations or placed on the regular cadence.
3. The remaining training weeks, split in order into Base, Build and Peak.
"""

import logging
from collections.abc import Iterable

from ..errors import InvalidInputError
from ..models.goals import ProgramType
from ..models.program import Mesocycle, Phase
from . import constants
from .feasibility import taper_weeks_for

logger = logging.getLogger(__name__)

PEAKING_TYPES = (ProgramType.ENDURANCE, ProgramType.STRENGTH)


def default_deload_cadence(total_weeks: int) -> int:
    """Deload every 4th week for short programs, every 5th for longer ones."""
    if total_weeks <= constants.SHORT_PROGRAM_WEEKS:
        return constants.SHORT_DELOAD_CADENCE
    return constants.LONG_DELOAD_CADENCE


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def split_training_weeks(count: int, program_type: ProgramType) -> list[Phase]:
    """Order ``count`` training weeks into Base, Build (1/2) and Peak blocks."""
    if count <= 0:
        return []

    base = _round_half_up(count * constants.BASE_SHARE)
    peak = _round_half_up(count * constants.PEAK_SHARE) if program_type in PEAKING_TYPES else 0
    build = count - base - peak
    while build < 1:
        if peak:
            peak -= 1
        else:
            base -= 1
        build += 1

    if build >= constants.SPLIT_BUILD_MIN_WEEKS:
        build_block = [Phase.BUILD_1] * ((build + 1) // 2) + [Phase.BUILD_2] * (build // 2)
    else:
        build_block = [Phase.BUILD] * build

    return [Phase.BASE] * base + build_block + [Phase.PEAK] * peak


def plan_phases(
    total_weeks: int,
    program_type: ProgramType | str,
    vacation_weeks: Iterable[int] = (),
    deload_every: int | None = None,
    taper_weeks: int | None = None,
) -> list[Phase]:
    """Assign a phase to every week of a program.

    Args:
        total_weeks: Program length in weeks
        program_type: Primary program type (sets the closing convention)
        vacation_weeks: 1-indexed weeks that overlap declared time off
        deload_every: Regular deload cadence, defaults by program length
        taper_weeks: Endurance taper length, defaults to 2 (8+ weeks) or 1

    Returns:
        List of phases, index 0 is week 1

    Raises:
        InvalidInputError: Non-positive length, bad cadence, or a vacation
            week outside the program
    """
    program_type = ProgramType(program_type)
    if total_weeks < 1:
        raise InvalidInputError(
            f"total_weeks must be at least 1 (got {total_weeks})", field="total_weeks"
        )

    vacations = set(vacation_weeks)
    out_of_range = sorted(w for w in vacations if w < 1 or w > total_weeks)
    if out_of_range:
        raise InvalidInputError(
            f"Vacation weeks {out_of_range} are outside weeks 1-{total_weeks}",
            field="vacation_weeks",
        )

    cadence = deload_every or default_deload_cadence(total_weeks)
    if cadence < 2:
        raise InvalidInputError(f"deload_every must be at least 2 (got {cadence})", field="deload_every")

    slots: list[Phase | None] = [None] * total_weeks

    # Closing convention
    if program_type == ProgramType.ENDURANCE:
        taper = min(taper_weeks or taper_weeks_for(total_weeks), total_weeks)
        closing_start = total_weeks - taper
        for i in range(closing_start, total_weeks):
            slots[i] = Phase.TAPER
    else:
        closing_start = total_weeks - 1
        slots[closing_start] = Phase.DELOAD

    # Vacation weeks are forced deloads (a vacation in the taper stays Taper)
    for week in vacations:
        if slots[week - 1] is None:
            slots[week - 1] = Phase.DELOAD

    # Regular cadence, counted from the last deload of either kind
    since_deload = 0
    for i in range(closing_start):
        if slots[i] == Phase.DELOAD:
            since_deload = 0
            continue
        since_deload += 1
        if since_deload < cadence:
            continue
        upcoming = slots[i + 1] if i + 1 < total_weeks else None
        if upcoming in (Phase.DELOAD, Phase.TAPER):
            # Next week already recovers; don't stack two deloads
            continue
        slots[i] = Phase.DELOAD
        since_deload = 0

    training = [i for i, slot in enumerate(slots) if slot is None]
    for i, phase in zip(training, split_training_weeks(len(training), program_type)):
        slots[i] = phase

    logger.debug(
        "Planned %d-week %s program (cadence %d, vacations %s): %s",
        total_weeks,
        program_type.value,
        cadence,
        sorted(vacations),
        [p.value for p in slots],
    )
    return slots


def plan_mesocycle(
    total_weeks: int,
    program_type: ProgramType | str,
    vacation_weeks: Iterable[int] = (),
    deload_every: int | None = None,
    taper_weeks: int | None = None,
) -> Mesocycle:
    """Plan phases and keep the vacation flag on each week."""
    vacation_weeks = sorted(set(vacation_weeks))
    phases = plan_phases(total_weeks, program_type, vacation_weeks, deload_every, taper_weeks)
    return Mesocycle.from_phases(phases, vacation_weeks)
