"""Tests for the periodization planner."""

import pytest

from motus.engine.periodization import (
    default_deload_cadence,
    plan_mesocycle,
    plan_phases,
    split_training_weeks,
)
from motus.errors import InvalidInputError
from motus.models.goals import ProgramType
from motus.models.program import Phase

B, B1, B2 = Phase.BASE, Phase.BUILD_1, Phase.BUILD_2
BLD, PK, D, T = Phase.BUILD, Phase.PEAK, Phase.DELOAD, Phase.TAPER


class TestCadence:
    """Tests for the default deload cadence."""

    def test_short_and_long_programs(self):
        """Test 4-week cadence up to 12 weeks, 5 beyond."""
        assert default_deload_cadence(8) == 4
        assert default_deload_cadence(12) == 4
        assert default_deload_cadence(13) == 5


class TestSplitTrainingWeeks:
    """Tests for ordering training weeks."""

    def test_strength_split(self):
        """Test base, split build and peak blocks."""
        assert split_training_weeks(9, ProgramType.STRENGTH) == [B, B, B1, B1, B1, B2, B2, PK, PK]

    def test_no_peak_for_aesthetic(self):
        """Test only endurance and strength programs peak."""
        phases = split_training_weeks(9, ProgramType.AESTHETIC)
        assert PK not in phases
        assert phases[:2] == [B, B]

    def test_short_build_not_split(self):
        """Test builds under four weeks stay a single block."""
        assert split_training_weeks(6, ProgramType.STRENGTH) == [B, B, BLD, BLD, BLD, PK]

    def test_always_one_build_week(self):
        """Test tiny programs still build."""
        assert split_training_weeks(1, ProgramType.STRENGTH) == [BLD]
        assert split_training_weeks(0, ProgramType.STRENGTH) == []


class TestPlanPhases:
    """Tests for full phase plans."""

    def test_strength_12_weeks(self):
        """Test deloads every 4th week and a closing deload."""
        assert plan_phases(12, ProgramType.STRENGTH) == [
            B, B, B1, D, B1, B1, B2, D, B2, PK, PK, D,
        ]

    def test_endurance_16_weeks(self):
        """Test a two-week taper closes endurance programs."""
        phases = plan_phases(16, "endurance")

        assert phases == [B, B, B, B1, D, B1, B1, B1, B2, D, B2, B2, PK, PK, T, T]

    def test_one_week_programs(self):
        """Test single-week programs hold only the closing phase."""
        assert plan_phases(1, ProgramType.AESTHETIC) == [D]
        assert plan_phases(1, ProgramType.ENDURANCE) == [T]

    def test_length_matches(self):
        """Test one phase per week for every length and type."""
        for program_type in ProgramType:
            for weeks in range(1, 30):
                assert len(plan_phases(weeks, program_type)) == weeks

    def test_no_back_to_back_deloads(self):
        """Test the cadence never stacks a deload before the closing deload."""
        for weeks in range(2, 40):
            phases = plan_phases(weeks, ProgramType.STRENGTH)
            pairs = zip(phases, phases[1:])
            assert not any(a == D and b == D for a, b in pairs), weeks

    def test_vacation_is_deload(self):
        """Test vacation weeks become deloads."""
        phases = plan_phases(8, ProgramType.STRENGTH, vacation_weeks=[3])
        assert phases == [B, B, D, BLD, BLD, BLD, PK, D]

    def test_vacation_resets_cadence(self):
        """Test a vacation deload counts toward the cadence."""
        phases = plan_phases(10, ProgramType.STRENGTH, vacation_weeks=[4], deload_every=5)

        deloads = [i for i, p in enumerate(phases, 1) if p == D]
        assert deloads == [4, 10]

    def test_vacation_on_cadence_week(self):
        """Test a vacation on a cadence week gives a single deload."""
        phases = plan_phases(10, ProgramType.STRENGTH, vacation_weeks=[5], deload_every=5)

        assert phases[4] == D
        assert phases[3] != D
        assert phases[5] != D

    def test_vacation_in_taper_stays_taper(self):
        """Test the taper is never replaced by a vacation deload."""
        phases = plan_phases(10, ProgramType.ENDURANCE, vacation_weeks=[10])
        assert phases[-1] == T

    def test_custom_cadence(self):
        """Test the cadence override."""
        phases = plan_phases(9, ProgramType.AESTHETIC, deload_every=3)
        assert [i for i, p in enumerate(phases, 1) if p == D] == [3, 6, 9]

    def test_invalid_inputs(self):
        """Test bad lengths, vacations and cadences are rejected."""
        with pytest.raises(InvalidInputError):
            plan_phases(0, ProgramType.STRENGTH)
        with pytest.raises(InvalidInputError) as exc:
            plan_phases(8, ProgramType.STRENGTH, vacation_weeks=[9])
        assert exc.value.field == "vacation_weeks"
        with pytest.raises(InvalidInputError):
            plan_phases(8, ProgramType.STRENGTH, deload_every=1)


class TestPlanMesocycle:
    """Tests for mesocycle planning."""

    def test_vacation_flags(self):
        """Test vacation weeks are flagged on the mesocycle."""
        mesocycle = plan_mesocycle(8, ProgramType.STRENGTH, vacation_weeks=[3, 3])

        assert mesocycle.total_weeks == 8
        assert mesocycle.vacation_weeks == [3]
        assert mesocycle.get_week(3).is_deload_equivalent
