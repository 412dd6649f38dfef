"""Week projection command."""

from pathlib import Path

import click

from ..errors import MotusError
from ..generators.text import render_week
from ..models.io import load_program
from .base import echo_json, fail, load_json_file


@click.command()
@click.argument("program_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("week_number", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print the week as JSON")
@click.pass_context
def week(ctx: click.Context, program_file: Path, week_number: int, as_json: bool):
    """Show one week of a saved program.

    The week is projected from the program's week-1 schedule on every call.

    Example:

        motus week program.json 5
    """
    try:
        program = load_program(load_json_file(ctx, program_file))
        projected = program.project_week(week_number)
    except MotusError as e:
        fail(ctx, e)

    if as_json:
        echo_json(projected.to_dict())
        return

    click.echo()
    click.echo(render_week(projected))
    mileage = program.mileage_outline()
    if mileage:
        click.echo()
        click.echo(f"Planned mileage: {mileage[week_number - 1]:g} miles")
