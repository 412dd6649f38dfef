"""Program assembly command."""

import json
from pathlib import Path

import click

from ..engine.assembler import AssemblerConfig, assemble_or_placeholder
from ..errors import MotusError
from ..generators.text import render_overview
from ..models.io import load_goal_spec, load_profile, load_schedule
from .base import (
    echo_info,
    echo_json,
    echo_success,
    echo_warning,
    fail,
    load_json_file,
    resolve_start_date,
)


@click.command()
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("goal_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--schedule",
    "schedule_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Canonical week-1 schedule (default: built from templates)",
)
@click.option("--start-date", "-s", help="Program start date (YYYY-MM-DD, default: today)")
@click.option("--deload-every", type=click.IntRange(min=2), help="Override the deload cadence")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              help="Write the program JSON to this file")
@click.option("--json", "as_json", is_flag=True, help="Print the program as JSON")
@click.pass_context
def plan(
    ctx: click.Context,
    profile_file: Path,
    goal_file: Path,
    schedule_file: Path | None,
    start_date: str | None,
    deload_every: int | None,
    output: Path | None,
    as_json: bool,
):
    """Assemble a full training program.

    Examples:

        # Build a program from templates
        motus plan profile.json goal.json

        # Use your own week-1 schedule and save the result
        motus plan profile.json goal.json --schedule week1.json -o program.json
    """
    start = resolve_start_date(ctx, start_date)
    try:
        profile = load_profile(load_json_file(ctx, profile_file))
        goal_spec = load_goal_spec(load_json_file(ctx, goal_file))
        schedule = load_schedule(load_json_file(ctx, schedule_file)) if schedule_file else None
        program = assemble_or_placeholder(
            profile,
            goal_spec,
            schedule,
            start_date=start,
            config=AssemblerConfig(deload_every=deload_every),
        )
    except MotusError as e:
        fail(ctx, e)

    if as_json:
        echo_json(program.to_dict())
    else:
        click.echo()
        click.echo(render_overview(program))
        click.echo()

    if output:
        output.write_text(json.dumps(program.to_dict(), indent=2))
        echo_success(f"Program saved to {output}")
        echo_info(f"View a week with: motus week {output} <week>")

    if program.is_placeholder:
        echo_warning(f"Placeholder program: {program.metadata.get('placeholder_reason')}")
