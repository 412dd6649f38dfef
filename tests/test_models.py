"""Tests for data models."""

import json
from datetime import date

import pytest

from motus.errors import InvalidInputError
from motus.models.feasibility import FeasibilityVerdict, GoalCheck
from motus.models.goals import (
    AestheticGoal,
    ChallengeGoal,
    EnduranceGoal,
    GoalSpec,
    LiftTarget,
    ProgramType,
    StrengthGoal,
)
from motus.models.io import load_goal_spec, load_profile, load_program, load_schedule, read_json
from motus.models.profile import (
    AthleteProfile,
    Consistency,
    ExperienceLevel,
    HeightUnit,
    Sex,
    VacationPeriod,
    WeightUnit,
)
from motus.models.program import Mesocycle, Phase, Program
from motus.models.schedule import CanonicalSchedule, DaySchedule


class TestAthleteProfile:
    """Tests for AthleteProfile model."""

    def test_unit_conversions(self, sample_profile):
        """Test imperial values convert to metric."""
        assert sample_profile.weight_kg == pytest.approx(81.647, abs=0.001)
        assert sample_profile.height_cm == pytest.approx(177.8)
        assert sample_profile.weight_lb == 180

    def test_metric_profile(self):
        """Test metric values pass through."""
        profile = AthleteProfile(
            weight=80, height=180, age=30, sex=Sex.FEMALE, training_days=3,
            weight_unit=WeightUnit.KG, height_unit=HeightUnit.CM,
        )
        assert profile.weight_kg == 80
        assert profile.height_cm == 180
        assert profile.weight_lb == pytest.approx(176.37, abs=0.01)

    def test_athlete_level(self):
        """Test level from years training, one tier lower for lapsed athletes."""
        def level(years, consistency=Consistency.SOME):
            return AthleteProfile(
                weight=180, height=70, age=30, sex=Sex.MALE, training_days=3,
                years_training=years, consistency=consistency,
            ).athlete_level

        assert level(0.5) == ExperienceLevel.BEGINNER
        assert level(2) == ExperienceLevel.INTERMEDIATE
        assert level(4) == ExperienceLevel.ADVANCED
        assert level(8) == ExperienceLevel.ELITE
        assert level(8, Consistency.NEW) == ExperienceLevel.ADVANCED
        assert level(0.5, Consistency.NEW) == ExperienceLevel.BEGINNER

    def test_round_trip_keeps_vacations(self):
        """Test profile serialization keeps vacation dates."""
        profile = AthleteProfile(
            weight=150, height=65, age=40, sex=Sex.FEMALE, training_days=4,
            vacations=[VacationPeriod(date(2026, 3, 1), date(2026, 3, 8), "Ski trip")],
        )
        restored = AthleteProfile.from_dict(profile.to_dict())

        assert restored.vacations == profile.vacations
        assert restored.sex == Sex.FEMALE

    def test_vacation_camel_case(self):
        """Test vacations accept camelCase date keys."""
        vacation = VacationPeriod.from_dict({"startDate": "2026-03-01", "endDate": "2026-03-08"})
        assert vacation.start_date == date(2026, 3, 1)
        assert vacation.end_date == date(2026, 3, 8)


class TestGoals:
    """Tests for goal models."""

    def test_bare_goal_is_primary(self):
        """Test a dict with a type tag loads as the primary goal."""
        spec = GoalSpec.from_dict({"type": "aesthetic", "target_body_fat": 12})

        assert isinstance(spec.primary, AestheticGoal)
        assert spec.program_type == ProgramType.AESTHETIC
        assert not spec.is_hybrid

    def test_hybrid_goal(self):
        """Test primary plus secondary goal."""
        spec = GoalSpec.from_dict({
            "primary": {"type": "strength", "lifts": []},
            "secondary": {"type": "endurance", "distance": "10k"},
        })

        assert isinstance(spec.primary, StrengthGoal)
        assert isinstance(spec.secondary, EnduranceGoal)
        assert spec.is_hybrid
        assert len(spec.goals) == 2

    def test_blank_lift_values_are_unset(self):
        """Test form-style blank strings count as missing."""
        lift = LiftTarget.from_dict({"id": "bench_press", "current": "", "target": "250"})

        assert lift.label == "Bench Press"
        assert lift.current is None
        assert lift.target == 250
        assert not lift.is_complete

    def test_challenge_defaults(self):
        """Test challenge goals default to a 30-day aesthetic focus."""
        goal = ChallengeGoal.from_dict({"type": "challenge"})
        assert goal.days == 30
        assert goal.focus == ProgramType.AESTHETIC
        assert goal.goal_date is None


class TestSchedule:
    """Tests for schedule models."""

    def test_training_days(self, sample_schedule):
        """Test rest days are excluded from training days."""
        assert [d.day for d in sample_schedule.training_days] == [1, 3, 5]
        assert sample_schedule.exercise_count == 4

    def test_from_bare_list(self, sample_schedule):
        """Test loading from the list form used inside programs."""
        restored = CanonicalSchedule.from_dict(sample_schedule.to_list())
        assert restored == sample_schedule

    def test_camel_case_day(self):
        """Test camelCase day flags."""
        day = DaySchedule.from_dict({"day": 2, "isRestDay": True})
        assert day.is_rest_day
        assert day.day_name == "Tuesday"


class TestMesocycle:
    """Tests for Phase and Mesocycle."""

    def test_phase_parse(self):
        """Test phase names parse leniently."""
        assert Phase.parse("Build1") == Phase.BUILD_1
        assert Phase.parse("build 2") == Phase.BUILD_2
        assert Phase.parse("DELOAD") == Phase.DELOAD
        with pytest.raises(ValueError):
            Phase.parse("Recovery")

    def test_get_week_out_of_range(self):
        """Test week lookups outside the plan are rejected."""
        mesocycle = Mesocycle.from_phases([Phase.BASE, Phase.BUILD, Phase.DELOAD])

        assert mesocycle.get_week(3).phase == Phase.DELOAD
        with pytest.raises(InvalidInputError) as exc:
            mesocycle.get_week(4)
        assert exc.value.field == "week_number"
        with pytest.raises(InvalidInputError):
            mesocycle.get_week(0)

    def test_phase_blocks(self):
        """Test consecutive weeks are grouped."""
        mesocycle = Mesocycle.from_phases(
            [Phase.BASE, Phase.BASE, Phase.BUILD, Phase.DELOAD], vacation_weeks=[4]
        )

        assert mesocycle.phase_blocks() == [
            {"phase": "Base", "start_week": 1, "end_week": 2, "weeks": 2},
            {"phase": "Build", "start_week": 3, "end_week": 3, "weeks": 1},
            {"phase": "Deload", "start_week": 4, "end_week": 4, "weeks": 1},
        ]
        assert mesocycle.vacation_weeks == [4]
        assert mesocycle.deload_weeks == [4]


class TestProgram:
    """Tests for Program model."""

    def test_from_camel_case_payload(self, sample_schedule):
        """Test the camelCase contract fields load."""
        program = Program.from_dict({
            "name": "Imported",
            "primaryGoal": "strength",
            "primarySubtype": "powerlifting",
            "secondaryGoal": "endurance",
            "phases": ["Base", "Build1", "Deload"],
            "currentWeek": 2,
            "daysPerWeek": 3,
            "weeklySchedule": sample_schedule.to_list(),
            "progressionRules": {"deload_protocol": "Every 4 weeks"},
            "generatedAt": "2026-01-05T12:00:00Z",
        })

        assert program.program_type == "strength"
        assert program.phases == [Phase.BASE, Phase.BUILD_1, Phase.DELOAD]
        assert program.current_phase == Phase.BUILD_1
        assert program.is_hybrid
        assert program.generated_at.year == 2026
        assert len(program.weekly_schedule.training_days) == 3

    def test_round_trip(self, sample_schedule):
        """Test serialization keeps the plan and schedule."""
        program = Program(
            name="Test",
            description="",
            program_type="strength",
            mesocycle=Mesocycle.from_phases([Phase.BASE, Phase.DELOAD], vacation_weeks=[2]),
            weekly_schedule=sample_schedule,
            days_per_week=3,
            start_date=date(2026, 1, 5),
        )
        data = program.to_dict()
        restored = Program.from_dict(data)

        assert data["current_phase"] == "Base"
        assert restored.mesocycle == program.mesocycle
        assert restored.weekly_schedule == program.weekly_schedule
        assert restored.start_date == date(2026, 1, 5)

    def test_unknown_keys_ignored(self, sample_schedule):
        """Test newer payloads with extra keys still load."""
        program = Program.from_dict({
            "name": "Future",
            "program_type": "aesthetic",
            "phases": ["Base"],
            "weekly_schedule": sample_schedule.to_list(),
            "coach_notes": "not a known field",
        })
        assert program.total_weeks == 1

    def test_mileage_outline_only_for_endurance(self, sample_schedule):
        """Test non-endurance programs have no mileage curve."""
        program = Program(
            name="Test",
            description="",
            program_type="strength",
            mesocycle=Mesocycle.from_phases([Phase.BASE]),
            weekly_schedule=sample_schedule,
            metadata={"starting_mileage": 20, "peak_mileage": 40},
        )
        assert program.mileage_outline() is None


class TestFeasibilityModels:
    """Tests for verdict models."""

    def test_describe(self):
        """Test the one-line explanation names the lift, span and rates."""
        check = GoalCheck(
            label="Back Squat", required_weekly_rate=12.5, max_safe_weekly_rate=10,
            unit="lb/week", weeks=4, current=225, target=275,
        )
        assert check.describe() == (
            "Back Squat: 225→275 over 4 weeks requires 12.5 lb/week (safe maximum 10 lb/week)"
        )

    def test_percent_units(self):
        """Test percentage rates have no space before the unit."""
        check = GoalCheck(label="Mileage", required_weekly_rate=7.25, max_safe_weekly_rate=5,
                          unit="%/week", weeks=1)
        assert "requires 7.25%/week" in check.describe()
        assert "over 1 week " in check.describe()

    def test_ceiling_is_inclusive(self):
        """Test exactly the ceiling is realistic."""
        at = GoalCheck(label="x", required_weekly_rate=10, max_safe_weekly_rate=10,
                       unit="lb/week", weeks=1)
        over = GoalCheck(label="x", required_weekly_rate=10.01, max_safe_weekly_rate=10,
                         unit="lb/week", weeks=1)
        assert at.is_realistic
        assert not over.is_realistic

    def test_verdict_round_trip(self):
        """Test verdict serialization."""
        verdict = FeasibilityVerdict(
            is_realistic=False,
            details=[GoalCheck(label="x", required_weekly_rate=12, max_safe_weekly_rate=10,
                               unit="lb/week", weeks=4)],
            message="Too fast",
            weeks_until_goal=4,
            recommended_weeks=5,
        )
        restored = FeasibilityVerdict.from_dict(verdict.to_dict())

        assert restored.flagged[0].label == "x"
        assert restored.recommended_weeks == 5

    def test_barely_flagged_rate_survives_round_trip(self):
        """Test a rate just over the ceiling is still flagged after reloading."""
        check = GoalCheck(label="Back Squat", required_weekly_rate=10.0002, max_safe_weekly_rate=10,
                          unit="lb/week", weeks=8)
        verdict = FeasibilityVerdict(is_realistic=False, details=[check])

        restored = FeasibilityVerdict.from_dict(json.loads(json.dumps(verdict.to_dict())))

        assert not restored.details[0].is_realistic
        assert not restored.is_realistic
        assert restored.details[0].required_weekly_rate == 10.0002


class TestLoaders:
    """Tests for JSON loaders."""

    def test_missing_field(self):
        """Test a missing required field names the field."""
        with pytest.raises(InvalidInputError) as exc:
            load_profile({"weight": 180, "height": 70, "sex": "male", "training_days": 3})
        assert exc.value.field == "age"

    def test_bad_enum(self):
        """Test a bad enum value is invalid input."""
        with pytest.raises(InvalidInputError):
            load_goal_spec({"type": "yoga"})

    def test_not_an_object(self):
        """Test non-object input is rejected."""
        with pytest.raises(InvalidInputError):
            load_program(["not", "a", "program"])

    def test_profile_numbers_from_strings(self, sample_profile_data):
        """Test optional body numbers given as strings load as floats."""
        sample_profile_data.update(measured_rmr="1800", device_bmr="", body_fat_pct="18.5")
        profile = load_profile(sample_profile_data)

        assert profile.measured_rmr == 1800.0
        assert profile.device_bmr is None
        assert profile.body_fat_pct == 18.5

    def test_profile_number_not_numeric(self, sample_profile_data):
        """Test a non-numeric RMR is invalid input, not a TypeError."""
        sample_profile_data["measured_rmr"] = "lots"
        with pytest.raises(InvalidInputError):
            load_profile(sample_profile_data)

    def test_schedule_list(self, sample_schedule):
        """Test schedules may be a bare list."""
        assert load_schedule(sample_schedule.to_list()) == sample_schedule

    def test_read_json_invalid(self, tmp_path):
        """Test malformed JSON files raise invalid input."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(InvalidInputError) as exc:
            read_json(path)
        assert "broken.json" in exc.value.message
