"""Alternate program generation with a deterministic fallback.

An alternate generator (for example an LLM-backed service) may produce the
program instead of the deterministic assembler. It must return a payload in
the Program shape. Whenever it times out, fails, or returns a malformed
payload, the deterministic assembler produces the program instead.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Awaitable, Callable, Protocol

from ..engine.assembler import AssemblerConfig, assemble_or_placeholder
from ..engine.feasibility import validate_goal
from ..engine.metabolic import compute_nutrition_targets
from ..errors import InvalidInputError, ProgramFormatError
from ..models.goals import GoalSpec
from ..models.nutrition import NutritionTargets
from ..models.profile import AthleteProfile
from ..models.program import Program
from ..models.schedule import CanonicalSchedule

logger = logging.getLogger(__name__)

# Type for progress callback: (event_type, message)
ProgressCallback = Callable[[str, str], Awaitable[None]]


class ProgramSource(Protocol):
    """An alternate implementation of program assembly."""

    name: str

    async def generate(
        self,
        profile: AthleteProfile,
        goal_spec: GoalSpec,
        nutrition: NutritionTargets,
    ) -> dict | str:
        """Return a Program-shaped payload (dict or JSON text)."""
        ...


@dataclass
class GenerationResult:
    """Result from program generation."""

    program: Program
    source: str  # Name of the alternate source, or "deterministic"
    fallback_reason: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.fallback_reason is not None


def program_from_payload(payload: dict | str) -> Program:
    """Validate an alternate generator's payload and build a Program.

    Raises:
        ProgramFormatError: The payload does not match the Program contract
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ProgramFormatError(f"Program payload is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ProgramFormatError(f"Program payload must be an object, got {type(payload).__name__}")

    if not any(key in payload for key in ("phases", "weeks")):
        raise ProgramFormatError("Program payload has no phases", field="phases")
    if not any(key in payload for key in ("weekly_schedule", "weeklySchedule")):
        raise ProgramFormatError("Program payload has no weekly schedule", field="weekly_schedule")

    try:
        program = Program.from_dict(payload)
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        raise ProgramFormatError(f"Program payload is malformed: {e}") from e

    if program.total_weeks < 1:
        raise ProgramFormatError("Program payload has no weeks", field="phases")
    if not program.weekly_schedule.training_days:
        raise ProgramFormatError("Program payload has no training sessions", field="weekly_schedule")
    if not 1 <= program.current_week <= program.total_weeks:
        raise ProgramFormatError(
            f"current_week {program.current_week} is outside the program", field="current_week"
        )
    return program


class ProgramGenerator:
    """Runs an optional alternate source, falling back to the assembler."""

    def __init__(self, source: ProgramSource | None = None, config: AssemblerConfig | None = None):
        self.source = source
        self.config = config or AssemblerConfig()

    async def generate(
        self,
        profile: AthleteProfile,
        goal_spec: GoalSpec,
        canonical_schedule: CanonicalSchedule | None = None,
        start_date: date | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Generate a program for the profile and goals.

        Args:
            profile: Athlete profile
            goal_spec: Primary goal plus optional secondary goal
            canonical_schedule: Week-1 schedule for the deterministic path
            start_date: Program start, defaults to today
            on_progress: Optional callback for progress updates

        Returns:
            GenerationResult with the program and where it came from

        Raises:
            InvalidInputError: Profile or goals are invalid (never retried)
        """
        start_date = start_date or date.today()

        async def notify(event_type: str, message: str):
            if on_progress:
                await on_progress(event_type, message)

        nutrition = compute_nutrition_targets(profile, goal_spec)
        if not nutrition.valid:
            raise InvalidInputError.from_issues(nutrition.issues)
        verdict = validate_goal(goal_spec, profile, start_date)

        reason = None
        if self.source is not None:
            await notify("phase", f"Requesting program from {self.source.name}...")
            try:
                payload = await asyncio.wait_for(
                    self.source.generate(profile, goal_spec, nutrition),
                    timeout=self.config.generator_timeout,
                )
                program = program_from_payload(payload)
            except asyncio.TimeoutError:
                reason = f"{self.source.name} timed out after {self.config.generator_timeout:g}s"
                logger.warning("Alternate generator timed out: %s", reason)
            except ProgramFormatError as e:
                reason = f"{self.source.name} returned an invalid program: {e.message}"
                logger.warning("Alternate generator payload rejected: %s", e.message)
            except Exception as e:
                reason = f"{self.source.name} failed: {e}"
                logger.warning("Alternate generator failed", exc_info=True)
            else:
                program.generator = self.source.name
                program.feasibility = program.feasibility or verdict
                program.nutrition = program.nutrition or nutrition
                program.start_date = program.start_date or start_date
                program.generated_at = program.generated_at or datetime.now(timezone.utc)
                await notify("done", f"Program generated by {self.source.name}")
                return GenerationResult(program=program, source=self.source.name)

            await notify("fallback", reason)

        await notify("phase", "Assembling program...")
        program = assemble_or_placeholder(
            profile,
            goal_spec,
            canonical_schedule,
            start_date=start_date,
            config=self.config,
        )
        await notify("done", "Program assembled")
        return GenerationResult(program=program, source="deterministic", fallback_reason=reason)


async def generate_program(
    profile: AthleteProfile,
    goal_spec: GoalSpec,
    source: ProgramSource | None = None,
    canonical_schedule: CanonicalSchedule | None = None,
    start_date: date | None = None,
    config: AssemblerConfig | None = None,
) -> Program:
    """Convenience function to generate a program."""
    generator = ProgramGenerator(source, config)
    result = await generator.generate(profile, goal_spec, canonical_schedule, start_date)
    return result.program
