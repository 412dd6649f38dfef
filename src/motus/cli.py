"""CLI entry point for motus."""

import click

from . import __version__
from .commands import check_goal, nutrition, plan, serve, week
from .commands.base import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="motus")
@click.option("--verbose", "-v", is_flag=True, help="Show engine debug logs")
def main(verbose: bool):
    """motus: periodized training programs from an athlete profile.

    Profiles, goals and schedules are JSON files.

    Example usage:

        # Daily calorie and macro targets
        motus nutrition profile.json

        # Check a goal against safe progression rates
        motus check-goal profile.json goal.json

        # Assemble a program and view a week
        motus plan profile.json goal.json -o program.json
        motus week program.json 5
    """
    setup_logging(verbose)


# Register commands
main.add_command(nutrition)
main.add_command(check_goal)
main.add_command(plan)
main.add_command(week)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
