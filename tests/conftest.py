"""Pytest configuration and fixtures."""

from datetime import date, timedelta

import pytest

from motus.models.goals import EnduranceGoal, GoalSpec, LiftTarget, RaceDistance, StrengthGoal
from motus.models.profile import ActivityLevel, AthleteProfile, NutritionGoal, Sex
from motus.models.schedule import CanonicalSchedule, DaySchedule, Exercise, Session

START_DATE = date(2026, 1, 5)  # A Monday


@pytest.fixture
def start_date():
    """Fixed program start date."""
    return START_DATE


@pytest.fixture
def sample_profile():
    """180 lb, 5'10", 30 year old male training 5 days a week."""
    return AthleteProfile(
        name="Test Athlete",
        weight=180,
        height=70,
        age=30,
        sex=Sex.MALE,
        training_days=5,
        activity_level=ActivityLevel.MODERATE,
        nutrition_goal=NutritionGoal.RECOMP,
        years_training=2,
    )


@pytest.fixture
def sample_profile_data(sample_profile):
    """The sample profile as JSON-shaped data."""
    return sample_profile.to_dict()


@pytest.fixture
def strength_goal(start_date):
    """Squat 225 -> 275 over 8 weeks."""
    return GoalSpec(primary=StrengthGoal(
        lifts=[LiftTarget(lift_id="squat", label="Back Squat", current=225, target=275)],
        goal_date=start_date + timedelta(weeks=8),
    ))


@pytest.fixture
def endurance_goal(start_date):
    """Half marathon in 16 weeks from 20 miles/week."""
    return GoalSpec(primary=EnduranceGoal(
        distance=RaceDistance.HALF,
        race_date=start_date + timedelta(weeks=16),
        current_weekly_mileage=20,
    ))


@pytest.fixture
def sample_schedule():
    """Three training days (Mon/Wed/Fri) with a mix of set counts."""
    def training_day(day, name, exercises):
        return DaySchedule(day=day, name=name, sessions=[
            Session(type="strength", focus=name, exercises=exercises),
        ])

    return CanonicalSchedule(days=[
        training_day(1, "Heavy Squat", [
            Exercise(name="Back Squat", sets=6, reps="5", rpe=7, rest="3 min",
                     notes="Week 1: find a heavy triple"),
            Exercise(name="Leg Curl", sets=1, reps="12", rpe=8),
        ]),
        DaySchedule(day=2, name="Rest Day", is_rest_day=True),
        training_day(3, "Bench", [
            Exercise(name="Bench Press", sets=8, reps="3", rpe=9.5, rest="3 min"),
        ]),
        DaySchedule(day=4, name="Rest Day", is_rest_day=True),
        training_day(5, "Deadlift", [
            Exercise(name="Deadlift", sets=4, reps="5", rpe=6,
                     progression="Add 5lbs from Week 2"),
        ]),
        DaySchedule(day=6, name="Rest Day", is_rest_day=True),
        DaySchedule(day=7, name="Rest Day", is_rest_day=True),
    ])
