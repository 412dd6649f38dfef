"""Goal feasibility command."""

from pathlib import Path

import click

from ..engine.feasibility import validate_goal
from ..errors import MotusError
from ..models.io import load_goal_spec, load_profile
from .base import (
    echo_json,
    echo_success,
    echo_warning,
    fail,
    format_table,
    load_json_file,
    resolve_start_date,
)


@click.command(name="check-goal")
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("goal_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--start-date", "-s", help="Program start date (YYYY-MM-DD, default: today)")
@click.option("--strict", is_flag=True, help="Exit with status 2 when a goal is flagged")
@click.option("--json", "as_json", is_flag=True, help="Print the verdict as JSON")
@click.pass_context
def check_goal(
    ctx: click.Context,
    profile_file: Path,
    goal_file: Path,
    start_date: str | None,
    strict: bool,
    as_json: bool,
):
    """Check whether goals fit within safe progression rates.

    Example:

        motus check-goal profile.json goal.json --start-date 2025-01-06
    """
    start = resolve_start_date(ctx, start_date)
    try:
        profile = load_profile(load_json_file(ctx, profile_file))
        goal_spec = load_goal_spec(load_json_file(ctx, goal_file))
        verdict = validate_goal(goal_spec, profile, start)
    except MotusError as e:
        fail(ctx, e)

    if as_json:
        echo_json(verdict.to_dict())
    else:
        if verdict.details:
            rows = [
                [
                    d.label,
                    f"{d.required_weekly_rate:.2f} {d.unit}",
                    f"{d.max_safe_weekly_rate:g} {d.unit}",
                    str(d.weeks),
                    "yes" if d.is_realistic else "NO",
                ]
                for d in verdict.details
            ]
            click.echo()
            click.echo(format_table(["Goal", "Required", "Safe max", "Weeks", "Realistic"], rows))
            click.echo()

        if verdict.is_realistic:
            echo_success(verdict.message)
        else:
            echo_warning(verdict.message)
            if verdict.recommended_weeks:
                echo_warning(f"A safe timeline needs at least {verdict.recommended_weeks} weeks")

    if strict and not verdict.is_realistic:
        ctx.exit(2)
