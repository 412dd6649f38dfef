"""Program routes."""

from fastapi import APIRouter, Body

from ...engine.assembler import AssemblerConfig, assemble, assemble_or_placeholder
from ...errors import InvalidInputError
from ...models.io import load_goal_spec, load_profile, load_program, load_schedule
from ..params import start_date_from

router = APIRouter(prefix="/programs", tags=["programs"])


@router.post("/assemble")
async def assemble_program(payload: dict = Body(...)):
    """Assemble a full program.

    Body: ``profile`` and ``goal`` (required), ``schedule``, ``start_date``,
    ``deload_every`` and ``allow_placeholder`` (optional). A schedule that
    cannot be placed returns a placeholder program with ``is_placeholder``
    set, or a 409 when ``allow_placeholder`` is false.
    """
    profile = load_profile(payload.get("profile"))
    goal_spec = load_goal_spec(payload.get("goal"))
    schedule = payload.get("schedule")

    deload_every = payload.get("deload_every")
    if deload_every is not None and (not isinstance(deload_every, int) or deload_every < 2):
        raise InvalidInputError(f"deload_every must be an integer of at least 2 (got {deload_every!r})",
                                field="deload_every")

    build = assemble_or_placeholder if payload.get("allow_placeholder", True) else assemble
    program = build(
        profile,
        goal_spec,
        load_schedule(schedule) if schedule is not None else None,
        start_date=start_date_from(payload),
        config=AssemblerConfig(deload_every=deload_every),
    )
    return program.to_dict()


@router.post("/project-week")
async def project_week(payload: dict = Body(...)):
    """Project one week of a program.

    Body: ``{"program": {...}, "week_number": N}``.
    """
    program = load_program(payload.get("program"))
    week_number = payload.get("week_number")
    if not isinstance(week_number, int) or isinstance(week_number, bool):
        raise InvalidInputError("week_number must be an integer", field="week_number")

    week = program.project_week(week_number)
    result = week.to_dict()
    mileage = program.mileage_outline()
    if mileage:
        result["mileage"] = mileage[week_number - 1]
    return result
