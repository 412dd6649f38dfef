"""Safety ceilings, scaling factors and defaults used across the engine.

Progression-rule text is generated from these values so the rules a user
reads always match what the engine applies.
"""

from ..models.goals import RaceDistance
from ..models.profile import ActivityLevel, ExperienceLevel, NutritionGoal

# Metabolic
ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
TRAINING_DAY_ADJUSTMENT = 0.05
MAX_TRAINING_DAYS = 7
MAX_ACTIVITY_MULTIPLIER = 2.0

KCAL_PER_LB_WEEKLY = 500  # Daily deficit/surplus per lb/week of change
PROTEIN_PER_LB = {
    NutritionGoal.MAINTAIN: 0.8,
    NutritionGoal.RECOMP: 1.0,
    NutritionGoal.LOSE: 1.0,
    NutritionGoal.GAIN: 0.9,
}
FAT_CALORIE_SHARE = 0.35
CARB_CALORIE_SHARE = 0.65
KCAL_PER_G_FAT = 9
KCAL_PER_G_CARB = 4
KCAL_PER_G_PROTEIN = 4

# Fallbacks for implausible body stats
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_AGE = 30

# Feasibility ceilings (not configurable)
MAX_STRENGTH_GAIN_LB_PER_WEEK = 10.0
MAX_MILEAGE_GROWTH = 0.05  # Compound weekly growth, shared with the projector
MAX_PACE_IMPROVEMENT = 0.005  # Fraction of current pace per week
MAX_BODY_FAT_CHANGE_PER_WEEK = 0.5  # Percentage points
MAX_WEIGHT_LOSS_LB_PER_WEEK = 2.0
MAX_WEIGHT_LOSS_BODYWEIGHT_FRACTION = 0.01

REQUIRED_PEAK_MILEAGE = {
    RaceDistance.FIVE_K: 20,
    RaceDistance.TEN_K: 25,
    RaceDistance.HALF: 30,
    RaceDistance.FULL: 40,
    RaceDistance.ULTRA: 50,
}

# Periodization
SHORT_PROGRAM_WEEKS = 12
SHORT_DELOAD_CADENCE = 4
LONG_DELOAD_CADENCE = 5
LONG_TAPER_MIN_WEEKS = 8  # Programs this long get a 2-week taper
BASE_SHARE = 0.25
PEAK_SHARE = 0.20
SPLIT_BUILD_MIN_WEEKS = 4
MAX_PROGRAM_WEEKS = 60

# Week projection
DELOAD_SET_FACTOR = 0.6
DELOAD_MIN_SETS = 2
DELOAD_RPE_DROP = 2
MIN_RPE = 5
MAX_RPE = 10
PEAK_RPE_BUMP = 0.5
BUILD_SET_FACTOR = 1.08
BUILD_2_SET_FACTOR = 1.15

# Mileage
MILEAGE_GROWTH = MAX_MILEAGE_GROWTH
DELOAD_MILEAGE_FACTOR = 0.7
TAPER_MILEAGE_FACTOR = 0.6
PEAK_MILEAGE_BY_LEVEL = {
    ExperienceLevel.ELITE: 60,
    ExperienceLevel.ADVANCED: 50,
}
DEFAULT_PEAK_MILEAGE = 40

# Program lengths when no goal date is set
DEFAULT_STRENGTH_WEEKS = 8
DEFAULT_AESTHETIC_WEEKS = 12
