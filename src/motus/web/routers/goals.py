"""Goal feasibility routes."""

from fastapi import APIRouter, Body

from ...engine.feasibility import validate_goal
from ...models.io import load_goal_spec, load_profile
from ..params import start_date_from

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("/validate")
async def validate(payload: dict = Body(...)):
    """Check a goal against safe progression rates.

    Body: ``{"profile": {...}, "goal": {...}, "start_date": "YYYY-MM-DD"}``.
    An unrealistic goal is a 200 response with ``is_realistic`` false.
    """
    profile = load_profile(payload.get("profile"))
    goal_spec = load_goal_spec(payload.get("goal"))
    verdict = validate_goal(goal_spec, profile, start_date_from(payload))
    return verdict.to_dict()
