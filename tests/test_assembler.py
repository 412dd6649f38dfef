"""Tests for schedule templates and the program assembler."""

from datetime import timedelta

import pytest

from motus.engine.assembler import (
    AssemblerConfig,
    assemble,
    assemble_or_placeholder,
    map_vacations,
    progression_rules,
)
from motus.engine.templates import build_canonical_schedule, program_name
from motus.errors import AssemblyFailure, InvalidInputError
from motus.models.goals import (
    AestheticGoal,
    ChallengeGoal,
    FatLossGoal,
    GoalSpec,
    LiftTarget,
    ProgramType,
    StrengthGoal,
)
from motus.models.profile import VacationPeriod
from motus.models.program import Phase
from motus.models.schedule import Session, SessionTime


class TestTemplates:
    """Tests for canonical schedule templates."""

    def test_strength_five_days(self):
        """Test training days and rest days are laid out Monday first."""
        schedule = build_canonical_schedule(ProgramType.STRENGTH, 5)

        assert len(schedule.days) == 7
        assert [d.day for d in schedule.training_days] == [1, 2, 3, 5, 6]
        assert schedule.days[0].name == "Heavy Squat"
        assert schedule.days[3].is_rest_day

    def test_endurance_sessions(self):
        """Test running templates and the long run sized from mileage."""
        schedule = build_canonical_schedule(ProgramType.ENDURANCE, 4, weekly_mileage=30)
        focuses = [d.sessions[0].focus for d in schedule.training_days]

        assert focuses == ["Easy Run", "Tempo Run", "Intervals", "Long Run"]
        assert schedule.training_days[-1].sessions[0].exercises[0].reps == "9 miles"

    def test_triathlon(self):
        """Test triathlon subtype uses its own template."""
        schedule = build_canonical_schedule(ProgramType.ENDURANCE, 3, subtype="triathlon")
        assert [d.name for d in schedule.training_days] == ["Swim", "Bike", "Run"]

    def test_double_days(self):
        """Test hybrid double days add a PM session."""
        schedule = build_canonical_schedule(
            ProgramType.STRENGTH, 3,
            secondary_type=ProgramType.ENDURANCE,
            allow_double_days=True,
        )
        monday = schedule.days[0]

        assert [s.time for s in monday.sessions] == [SessionTime.AM, SessionTime.PM]
        assert monday.name == "Squat Focus / Easy Run"

    def test_fatloss_session(self):
        """Test fat-loss sessions open with a circuit and close with a walk."""
        schedule = build_canonical_schedule(ProgramType.FATLOSS, 3)
        exercises = schedule.training_days[0].sessions[0].exercises

        assert exercises[0].name == "HIIT Circuit"
        assert exercises[-1].name == "Incline Walk"

    def test_training_day_bounds(self):
        """Test zero days cannot be placed and more than seven is invalid."""
        with pytest.raises(AssemblyFailure):
            build_canonical_schedule(ProgramType.STRENGTH, 0)
        with pytest.raises(InvalidInputError):
            build_canonical_schedule(ProgramType.STRENGTH, 8)

    def test_program_name(self):
        """Test names by subtype with a generic fallback."""
        assert program_name(ProgramType.STRENGTH, "powerlifting") == "Powerlifting Protocol"
        assert program_name(ProgramType.STRENGTH, "unknown") == "Strength Program"


class TestVacations:
    """Tests for vacation week mapping."""

    def test_overlap(self, start_date):
        """Test a vacation spanning two weeks marks both."""
        vacation = VacationPeriod(start_date + timedelta(days=12), start_date + timedelta(days=16))
        weeks, outside = map_vacations([vacation], start_date, 8)

        assert weeks == [2, 3]
        assert outside == []

    def test_outside_program(self, start_date):
        """Test vacations entirely outside the program are reported."""
        vacation = VacationPeriod(start_date + timedelta(weeks=20), start_date + timedelta(weeks=21))
        weeks, outside = map_vacations([vacation], start_date, 8)

        assert weeks == []
        assert outside == [vacation]

    def test_reversed_dates(self, start_date):
        """Test a vacation ending before it starts is invalid."""
        vacation = VacationPeriod(start_date + timedelta(days=5), start_date)
        with pytest.raises(InvalidInputError):
            map_vacations([vacation], start_date, 8)


class TestProgressionRules:
    """Tests for generated rule text."""

    def test_rules_match_constants(self):
        """Test the rule text states the factors the projector applies."""
        rules = progression_rules(ProgramType.STRENGTH, 4, 2)

        assert "Deload every 4 weeks" in rules["deload_protocol"]
        assert "sets x0.6" in rules["deload_protocol"]
        assert "x1.08" in rules["volume_increase"]
        assert "10 lb/week" in rules["strength_increase"]
        assert "closing_week" in rules

    def test_endurance_rules(self):
        """Test endurance programs describe mileage and taper."""
        rules = progression_rules(ProgramType.ENDURANCE, 5, 2, peak_mileage=40)

        assert "5% per week up to 40 miles" in rules["endurance_progression"]
        assert "Final 2 weeks" in rules["taper"]
        assert "closing_week" not in rules


class TestAssemble:
    """Tests for full program assembly."""

    def test_strength_program(self, sample_profile, strength_goal, start_date):
        """Test an 8-week strength program from templates."""
        program = assemble(sample_profile, strength_goal, start_date=start_date)

        assert program.name == "Powerlifting Protocol"
        assert program.total_weeks == 8
        assert program.phases == [
            Phase.BASE, Phase.BASE, Phase.BUILD, Phase.DELOAD,
            Phase.BUILD, Phase.BUILD, Phase.PEAK, Phase.DELOAD,
        ]
        assert program.current_week == 1
        assert program.current_phase == Phase.BASE
        assert program.days_per_week == 5
        assert len(program.weekly_schedule.training_days) == 5
        assert program.feasibility.is_realistic
        assert program.nutrition.macros.protein == 180
        assert program.metadata["athlete_level"] == "intermediate"
        assert "strength_increase" in program.progression_rules

    def test_endurance_program(self, sample_profile, endurance_goal, start_date):
        """Test an endurance program closes with a taper and plans mileage."""
        program = assemble(sample_profile, endurance_goal, start_date=start_date)

        assert program.total_weeks == 16
        assert program.phases[-2:] == [Phase.TAPER, Phase.TAPER]
        assert program.metadata["peak_mileage"] == 40
        outline = program.mileage_outline()
        assert len(outline) == 16
        assert outline[0] == 20
        assert outline[-1] == 24.0

    def test_flagged_goal_kept_as_stated(self, sample_profile, start_date):
        """Test an unrealistic goal is assembled with the verdict attached."""
        goal = GoalSpec(primary=StrengthGoal(
            lifts=[LiftTarget(lift_id="squat", label="Back Squat", current=225, target=275)],
            goal_date=start_date + timedelta(weeks=4),
        ))
        program = assemble(sample_profile, goal, start_date=start_date)

        assert program.total_weeks == 4
        assert not program.feasibility.is_realistic
        assert program.feasibility.recommended_weeks == 5

    def test_default_lengths(self, sample_profile, start_date):
        """Test undated goals fall back to default lengths."""
        sample_profile.body_fat_pct = 20
        aesthetic = assemble(sample_profile, GoalSpec(primary=AestheticGoal(target_body_fat=15)),
                             start_date=start_date)
        strength = assemble(sample_profile, GoalSpec(primary=StrengthGoal(lifts=[])),
                            start_date=start_date)

        assert aesthetic.total_weeks == 12
        assert strength.total_weeks == 8

    def test_challenge_program(self, sample_profile, start_date):
        """Test a 30-day challenge runs five weeks and closes with a deload."""
        program = assemble(sample_profile, GoalSpec(primary=ChallengeGoal(days=30)),
                           start_date=start_date)

        assert program.name == "30-Day Challenge"
        assert program.phases == [Phase.BASE, Phase.BUILD, Phase.BUILD, Phase.BUILD, Phase.DELOAD]
        assert program.weekly_schedule.training_days[0].sessions[0].type == "hypertrophy"

    def test_fatloss_program(self, sample_profile, start_date):
        """Test fat-loss length from the weekly rate."""
        program = assemble(sample_profile, GoalSpec(primary=FatLossGoal(target_weight=170, weekly_rate=1)),
                           start_date=start_date)

        assert program.total_weeks == 10
        assert program.program_type == "fatloss"
        assert program.nutrition.macros.calories == round(program.nutrition.tdee) - 500

    def test_hybrid_name(self, sample_profile, strength_goal, endurance_goal, start_date):
        """Test hybrid programs name the secondary goal."""
        spec = GoalSpec(primary=strength_goal.primary, secondary=endurance_goal.primary)
        program = assemble(sample_profile, spec, start_date=start_date)

        assert program.name == "Powerlifting Protocol + Endurance"
        assert program.is_hybrid

    def test_vacation_weeks(self, sample_profile, strength_goal, start_date):
        """Test vacations become deload weeks and far-off trips are reported."""
        sample_profile.vacations = [
            VacationPeriod(start_date + timedelta(days=14), start_date + timedelta(days=18), "Beach"),
            VacationPeriod(start_date + timedelta(weeks=30), start_date + timedelta(weeks=31), "Later"),
        ]
        program = assemble(sample_profile, strength_goal, start_date=start_date)

        assert program.vacation_weeks == [3]
        assert program.phases[2] == Phase.DELOAD
        assert [v.name for v in program.out_of_range_vacations] == ["Later"]

    def test_custom_schedule(self, sample_profile, strength_goal, sample_schedule, start_date):
        """Test a caller schedule is kept as week 1."""
        sample_profile.training_days = 3
        program = assemble(sample_profile, strength_goal, sample_schedule, start_date=start_date)

        assert program.weekly_schedule == sample_schedule
        assert program.project_week(1).days == sample_schedule.days

    def test_config_cadence(self, sample_profile, start_date):
        """Test the cadence override reaches the planner."""
        goal = GoalSpec(primary=StrengthGoal(lifts=[], goal_date=start_date + timedelta(weeks=12)))
        program = assemble(sample_profile, goal, start_date=start_date,
                           config=AssemblerConfig(deload_every=3))

        assert program.mesocycle.deload_weeks == [3, 6, 9, 12]
        assert program.metadata["deload_every"] == 3

    def test_too_long(self, sample_profile, start_date):
        """Test programs over 60 weeks are rejected."""
        goal = GoalSpec(primary=StrengthGoal(lifts=[], goal_date=start_date + timedelta(weeks=70)))
        with pytest.raises(InvalidInputError) as exc:
            assemble(sample_profile, goal, start_date=start_date)
        assert exc.value.field == "goal_date"

    def test_invalid_body_stats(self, sample_profile, strength_goal, start_date):
        """Test implausible stats are rejected by the assembler."""
        sample_profile.height = 0
        with pytest.raises(InvalidInputError) as exc:
            assemble_or_placeholder(sample_profile, strength_goal, start_date=start_date)
        assert exc.value.field == "height"


class TestAssemblyFailure:
    """Tests for schedules that cannot be placed."""

    def test_training_day_mismatch(self, sample_profile, strength_goal, sample_schedule, start_date):
        """Test a schedule that disagrees with the profile fails."""
        with pytest.raises(AssemblyFailure) as exc:
            assemble(sample_profile, strength_goal, sample_schedule, start_date=start_date)
        assert exc.value.field == "training_days"

    def test_double_sessions_need_hybrid(self, sample_profile, strength_goal, sample_schedule, start_date):
        """Test two sessions on a day need a hybrid goal with double days."""
        sample_profile.training_days = 3
        sample_schedule.days[0].sessions.append(Session(type="endurance", focus="Run", exercises=[]))

        with pytest.raises(AssemblyFailure) as exc:
            assemble(sample_profile, strength_goal, sample_schedule, start_date=start_date)
        assert exc.value.field == "allow_double_days"

    def test_no_training_days(self, sample_profile, strength_goal, start_date):
        """Test zero training days fails assembly."""
        sample_profile.training_days = 0
        with pytest.raises(AssemblyFailure):
            assemble(sample_profile, strength_goal, start_date=start_date)

    def test_placeholder(self, sample_profile, strength_goal, sample_schedule, start_date):
        """Test assembly failures become a labeled placeholder."""
        program = assemble_or_placeholder(sample_profile, strength_goal, sample_schedule,
                                          start_date=start_date)

        assert program.is_placeholder
        assert program.name == "Strength Program (placeholder)"
        assert program.total_weeks == 1
        assert program.weekly_schedule.training_days == []
        assert "training days" in program.metadata["placeholder_reason"]
