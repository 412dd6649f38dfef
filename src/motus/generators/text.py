"""Plain-text rendering of programs and projected weeks.

Example week output:
```
# Week 5 - Build 2
## Monday - Heavy Squat
Back Squat / 4x6-8 @RPE7 / rest 3-4 min  // Control descent, drive through heels
## Tuesday - Rest
```
"""

from dataclasses import dataclass

from ..models.program import Program, ProjectedWeek
from ..models.schedule import DaySchedule, Exercise


@dataclass
class RendererConfig:
    """Configuration for text rendering."""

    include_notes: bool = True
    include_rest: bool = True
    include_rest_days: bool = True
    include_mileage: bool = True


class ProgramRenderer:
    """Renders programs and weeks as readable text."""

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()

    def render_overview(self, program: Program) -> str:
        """Render the program header, phase blocks and progression rules."""
        lines: list[str] = [f"// {program.name}"]
        if program.is_placeholder:
            lines.append("// PLACEHOLDER: this program could not be assembled")
        if program.description:
            lines.append(f"// {program.description}")
        lines.append("")

        lines.append(f"Weeks: {program.total_weeks}  Days/week: {program.days_per_week}")
        if program.current_phase:
            lines.append(f"Current: Week {program.current_week} ({program.current_phase.value})")
        lines.append("")

        lines.append("Phases:")
        mileage = program.mileage_outline() if self.config.include_mileage else None
        for block in program.mesocycle.phase_blocks():
            span = (
                f"Week {block['start_week']}"
                if block["weeks"] == 1
                else f"Weeks {block['start_week']}-{block['end_week']}"
            )
            lines.append(f"  {span}: {block['phase']}")
        if program.vacation_weeks:
            lines.append(f"  Vacation weeks: {', '.join(str(w) for w in program.vacation_weeks)}")
        for vacation in program.out_of_range_vacations:
            label = vacation.name or "Vacation"
            lines.append(f"  {label} ({vacation.start_date} to {vacation.end_date}) is outside the program")

        if mileage:
            lines.append("")
            lines.append("Weekly mileage: " + ", ".join(f"{m:g}" for m in mileage))

        if program.progression_rules:
            lines.append("")
            lines.append("Progression rules:")
            for key, rule in program.progression_rules.items():
                lines.append(f"  {key.replace('_', ' ').capitalize()}: {rule}")

        if program.feasibility and not program.feasibility.is_realistic:
            lines.append("")
            lines.append(f"Warning: {program.feasibility.message}")

        return "\n".join(lines).strip()

    def render_week(self, week: ProjectedWeek) -> str:
        """Render one projected week."""
        header = f"# Week {week.week_number} - {week.phase.value}"
        if week.is_vacation_week:
            header += " (Vacation)"
        lines: list[str] = [header]

        for day in week.days:
            lines.extend(self._render_day(day))

        return "\n".join(lines).strip()

    def _render_day(self, day: DaySchedule) -> list[str]:
        """Render a single day."""
        if day.is_rest_day or not day.sessions:
            return [f"## {day.day_name} - Rest"] if self.config.include_rest_days else []

        lines = [f"## {day.day_name} - {day.name}" if day.name else f"## {day.day_name}"]
        multiple = len(day.sessions) > 1
        for session in day.sessions:
            if multiple:
                lines.append(f"### {session.time.value}: {session.focus} ({session.duration} min)")
            lines.extend(self._render_exercise(ex) for ex in session.exercises)
        return lines

    def _render_exercise(self, exercise: Exercise) -> str:
        """Format: Name / SetsxReps @RPE / rest  // notes"""
        sets_reps = f"{exercise.sets}x{exercise.reps}"
        if exercise.rpe is not None:
            sets_reps += f" @RPE{exercise.rpe:g}"

        parts = [exercise.name, sets_reps]
        if self.config.include_rest and exercise.rest and exercise.rest != "N/A":
            parts.append(f"rest {exercise.rest}")

        line = " / ".join(parts)
        if self.config.include_notes and exercise.notes:
            line += f"  // {exercise.notes}"
        return line


def render_week(week: ProjectedWeek, config: RendererConfig | None = None) -> str:
    """Convenience function to render a projected week."""
    return ProgramRenderer(config).render_week(week)


def render_overview(program: Program, config: RendererConfig | None = None) -> str:
    """Convenience function to render a program overview."""
    return ProgramRenderer(config).render_overview(program)
