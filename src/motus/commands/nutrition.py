"""Nutrition targets command."""

from pathlib import Path

import click

from ..engine.metabolic import compute_nutrition_targets
from ..errors import MotusError
from ..models.io import load_profile
from .base import echo_json, echo_warning, fail, format_table, load_json_file


@click.command()
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the targets as JSON")
@click.pass_context
def nutrition(ctx: click.Context, profile_file: Path, as_json: bool):
    """Compute BMR, TDEE and daily macro targets.

    PROFILE_FILE is a JSON athlete profile.

    Example:

        motus nutrition profile.json
    """
    try:
        profile = load_profile(load_json_file(ctx, profile_file))
    except MotusError as e:
        fail(ctx, e)

    targets = compute_nutrition_targets(profile)

    if as_json:
        echo_json(targets.to_dict())
        return

    if not targets.valid:
        echo_warning("Some body stats were implausible and replaced with defaults:")
        for issue in targets.issues:
            click.echo(f"  - {issue.field}: {issue.reason}")

    bmr = targets.bmr
    source = bmr.source.value
    if bmr.device_label:
        source += f" ({bmr.device_label})"

    click.echo()
    click.echo(f"BMR:        {bmr.value:.0f} kcal/day [{source}]")
    click.echo(f"Multiplier: {targets.activity_multiplier:g}")
    click.echo(f"TDEE:       {targets.tdee:.0f} kcal/day")
    click.echo()

    macros = targets.macros
    click.echo(format_table(
        ["Calories", "Protein (g)", "Carbs (g)", "Fat (g)"],
        [[str(macros.calories), str(macros.protein), str(macros.carbs), str(macros.fat)]],
    ))
