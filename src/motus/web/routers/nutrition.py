"""Nutrition routes."""

from fastapi import APIRouter, Body

from ...engine.metabolic import compute_nutrition_targets
from ...models.io import load_profile

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.post("/targets")
async def nutrition_targets(profile: dict = Body(...)):
    """Daily calorie and macro targets for a profile.

    Implausible body stats are reported in ``issues`` with ``valid`` false
    rather than rejected, so a form can show what was substituted.
    """
    targets = compute_nutrition_targets(load_profile(profile))
    return targets.to_dict()
