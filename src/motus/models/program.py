"""Training program data models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from ..errors import InvalidInputError
from ..utils.dates import format_date, parse_date
from .feasibility import FeasibilityVerdict
from .nutrition import NutritionTargets
from .profile import VacationPeriod
from .schedule import CanonicalSchedule, DaySchedule


class Phase(str, Enum):
    """Training phases, in the order they normally occur."""

    BASE = "Base"
    BUILD = "Build"
    BUILD_1 = "Build 1"
    BUILD_2 = "Build 2"  # Second, higher-intensity build block
    PEAK = "Peak"
    TAPER = "Taper"  # Endurance only, before the race
    DELOAD = "Deload"

    @property
    def is_build(self) -> bool:
        return self in (Phase.BUILD, Phase.BUILD_1, Phase.BUILD_2)

    @classmethod
    def parse(cls, value: str) -> "Phase":
        """Parse a phase name, tolerating "Build1" / "build 2" spellings."""
        normalized = value.strip().lower().replace("_", " ")
        if normalized in ("build1", "build2"):
            normalized = f"build {normalized[-1]}"
        for phase in cls:
            if phase.value.lower() == normalized:
                return phase
        raise ValueError(f"Unknown phase: {value!r}")


@dataclass
class MesocycleWeek:
    """One planned week."""

    week_number: int
    phase: Phase
    is_vacation_week: bool = False

    @property
    def is_deload_equivalent(self) -> bool:
        """Deloads and vacation weeks are both recovery weeks."""
        return self.phase == Phase.DELOAD or self.is_vacation_week

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_number": self.week_number,
            "phase": self.phase.value,
            "is_vacation_week": self.is_vacation_week,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MesocycleWeek":
        """Create from dictionary."""
        return cls(
            week_number=int(data["week_number"]),
            phase=Phase.parse(data["phase"]),
            is_vacation_week=data.get("is_vacation_week", False),
        )


@dataclass
class Mesocycle:
    """The full week-by-week phase plan."""

    weeks: list[MesocycleWeek]

    @property
    def total_weeks(self) -> int:
        return len(self.weeks)

    @property
    def phases(self) -> list[Phase]:
        return [w.phase for w in self.weeks]

    @property
    def vacation_weeks(self) -> list[int]:
        return [w.week_number for w in self.weeks if w.is_vacation_week]

    @property
    def deload_weeks(self) -> list[int]:
        return [w.week_number for w in self.weeks if w.phase == Phase.DELOAD]

    def get_week(self, week_number: int) -> MesocycleWeek:
        """Look up a week, rejecting numbers outside the mesocycle."""
        if week_number < 1 or week_number > self.total_weeks:
            raise InvalidInputError(
                f"Week {week_number} is out of range (program has {self.total_weeks} weeks)",
                field="week_number",
            )
        return self.weeks[week_number - 1]

    def phase_blocks(self) -> list[dict]:
        """Group consecutive weeks of the same phase for overview display."""
        blocks: list[dict] = []
        for week in self.weeks:
            if blocks and blocks[-1]["phase"] == week.phase.value:
                blocks[-1]["end_week"] = week.week_number
                blocks[-1]["weeks"] += 1
            else:
                blocks.append({
                    "phase": week.phase.value,
                    "start_week": week.week_number,
                    "end_week": week.week_number,
                    "weeks": 1,
                })
        return blocks

    @classmethod
    def from_phases(
        cls,
        phases: list[Phase],
        vacation_weeks: list[int] | None = None,
    ) -> "Mesocycle":
        """Build a mesocycle from a bare phase list."""
        vacation = set(vacation_weeks or [])
        return cls(weeks=[
            MesocycleWeek(week_number=i, phase=phase, is_vacation_week=i in vacation)
            for i, phase in enumerate(phases, 1)
        ])


@dataclass
class ProjectedWeek:
    """A derived, never-persisted view of one week of the program."""

    week_number: int
    phase: Phase
    days: list[DaySchedule]
    is_vacation_week: bool = False
    phase_transition: bool = False  # First week of a new phase

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_number": self.week_number,
            "phase": self.phase.value,
            "is_vacation_week": self.is_vacation_week,
            "phase_transition": self.phase_transition,
            "days": [d.to_dict() for d in self.days],
        }


@dataclass
class Program:
    """A complete training program.

    Produced by the deterministic assembler or by an alternate generator;
    both must fill the same fields.
    """

    name: str
    description: str
    program_type: str
    mesocycle: Mesocycle
    weekly_schedule: CanonicalSchedule
    progression_rules: dict[str, str] = field(default_factory=dict)
    subtype: str = ""
    secondary_type: str | None = None
    current_week: int = 1
    days_per_week: int = 0
    vacations: list[VacationPeriod] = field(default_factory=list)
    out_of_range_vacations: list[VacationPeriod] = field(default_factory=list)
    feasibility: FeasibilityVerdict | None = None
    nutrition: NutritionTargets | None = None
    start_date: date | None = None
    generated_at: datetime | None = None
    generator: str = "deterministic"
    metadata: dict = field(default_factory=dict)
    is_placeholder: bool = False

    @property
    def total_weeks(self) -> int:
        return self.mesocycle.total_weeks

    @property
    def phases(self) -> list[Phase]:
        return self.mesocycle.phases

    @property
    def current_phase(self) -> Phase | None:
        if not self.mesocycle.weeks:
            return None
        return self.mesocycle.get_week(self.current_week).phase

    @property
    def vacation_weeks(self) -> list[int]:
        return self.mesocycle.vacation_weeks

    @property
    def is_hybrid(self) -> bool:
        return self.secondary_type is not None

    def project_week(self, week_number: int):
        """Project the canonical schedule onto a week of this program.

        Args:
            week_number: 1-indexed week to view

        Returns:
            ProjectedWeek for that week (recomputed on every call)
        """
        from ..engine.projection import project_week

        week = self.mesocycle.get_week(week_number)
        previous = self.mesocycle.weeks[week_number - 2].phase if week_number > 1 else None
        return project_week(
            self.weekly_schedule,
            week_number,
            week.phase,
            previous_phase=previous,
            total_weeks=self.total_weeks,
            is_vacation_week=week.is_vacation_week,
        )

    def mileage_outline(self) -> list[float] | None:
        """Planned weekly mileage for endurance programs, else None."""
        from ..engine.projection import mileage_outline

        starting = self.metadata.get("starting_mileage")
        ceiling = self.metadata.get("peak_mileage")
        if self.program_type != "endurance" or not starting or not ceiling:
            return None
        return mileage_outline(self.phases, starting, ceiling)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "description": self.description,
            "program_type": self.program_type,
            "subtype": self.subtype,
            "secondary_type": self.secondary_type,
            "is_hybrid": self.is_hybrid,
            "total_weeks": self.total_weeks,
            "current_week": self.current_week,
            "current_phase": self.current_phase.value if self.current_phase else None,
            "phases": [p.value for p in self.phases],
            "weeks": [w.to_dict() for w in self.mesocycle.weeks],
            "vacation_weeks": self.vacation_weeks,
            "days_per_week": self.days_per_week,
            "weekly_schedule": self.weekly_schedule.to_list(),
            "progression_rules": self.progression_rules,
            "vacations": [v.to_dict() for v in self.vacations],
            "out_of_range_vacations": [v.to_dict() for v in self.out_of_range_vacations],
            "feasibility": self.feasibility.to_dict() if self.feasibility else None,
            "nutrition": self.nutrition.to_dict() if self.nutrition else None,
            "start_date": format_date(self.start_date),
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
            "generator": self.generator,
            "metadata": self.metadata,
            "is_placeholder": self.is_placeholder,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Program":
        """Create from dictionary.

        Unknown keys are ignored and missing optional keys take defaults, so
        older and newer payloads both load. camelCase keys (as emitted by an
        alternate generator) are accepted for the contract fields.
        """
        weeks_data = data.get("weeks")
        if weeks_data:
            mesocycle = Mesocycle(weeks=[MesocycleWeek.from_dict(w) for w in weeks_data])
        else:
            mesocycle = Mesocycle.from_phases(
                [Phase.parse(p) for p in data.get("phases", [])],
                _pick(data, "vacation_weeks", "vacationWeeks", default=[]),
            )

        feasibility = data.get("feasibility")
        nutrition = data.get("nutrition")
        generated_at = _pick(data, "generated_at", "generatedAt")

        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            program_type=_pick(data, "program_type", "primaryGoal", default=""),
            subtype=_pick(data, "subtype", "primarySubtype", default="") or "",
            secondary_type=_pick(data, "secondary_type", "secondaryGoal"),
            mesocycle=mesocycle,
            weekly_schedule=CanonicalSchedule.from_dict(
                _pick(data, "weekly_schedule", "weeklySchedule", default=[])
            ),
            progression_rules=_pick(data, "progression_rules", "progressionRules", default={}),
            current_week=int(_pick(data, "current_week", "currentWeek", default=1)),
            days_per_week=int(_pick(data, "days_per_week", "daysPerWeek", default=0)),
            vacations=[VacationPeriod.from_dict(v) for v in data.get("vacations", [])],
            out_of_range_vacations=[
                VacationPeriod.from_dict(v) for v in data.get("out_of_range_vacations", [])
            ],
            feasibility=FeasibilityVerdict.from_dict(feasibility) if feasibility else None,
            nutrition=NutritionTargets.from_dict(nutrition) if nutrition else None,
            start_date=parse_date(data.get("start_date")),
            generated_at=datetime.fromisoformat(generated_at.replace("Z", "+00:00"))
            if generated_at
            else None,
            generator=data.get("generator", "deterministic"),
            metadata=data.get("metadata", {}),
            is_placeholder=data.get("is_placeholder", False),
        )

    def get_summary(self) -> str:
        """Generate a short text summary of the program."""
        summary = f"Program: {self.name}\n"
        summary += f"Description: {self.description}\n"
        summary += f"Duration: {self.total_weeks} weeks, {self.days_per_week} days/week\n"
        if self.current_phase:
            summary += f"Current: Week {self.current_week} ({self.current_phase.value})\n"
        return summary


def _pick(data: dict, *keys: str, default=None):
    """Return the first present key's value."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default
