"""Pytest configuration for integration tests."""

import pytest


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def athlete_data():
    """A hybrid athlete profile as a client would send it."""
    return {
        "name": "Integration Athlete",
        "weight": 72,
        "weight_unit": "kg",
        "height": 175,
        "height_unit": "cm",
        "age": 34,
        "sex": "female",
        "body_fat_pct": 24,
        "training_days": 4,
        "activity_level": "active",
        "nutrition_goal": "lose",
        "weekly_weight_change": 0.5,
        "years_training": 5,
        "consistency": "consistent",
        "allow_double_days": True,
        "vacations": [
            {"name": "Conference", "startDate": "2026-02-16", "endDate": "2026-02-20"},
        ],
    }
