"""CLI commands for motus."""

from .check_goal import check_goal
from .nutrition import nutrition
from .plan import plan
from .serve import serve
from .week import week

__all__ = [
    "check_goal",
    "nutrition",
    "plan",
    "serve",
    "week",
]
