"""Canonical week-1 schedule templates.

Used by the assembler when the caller does not bring its own canonical
schedule. Every template is the Base-phase version of a session; later weeks
are derived from it by the projector.
"""

from ..errors import AssemblyFailure, InvalidInputError
from ..models.goals import ProgramType
from ..models.schedule import DAY_NAMES, CanonicalSchedule, DaySchedule, Exercise, Session, SessionTime

# Weekday indexes (0 = Monday) used for each training-days count
WORKOUT_DAY_INDEXES = {
    1: [0],
    2: [0, 3],
    3: [0, 2, 4],
    4: [0, 1, 3, 4],
    5: [0, 1, 2, 4, 5],
    6: [0, 1, 2, 3, 4, 5],
    7: [0, 1, 2, 3, 4, 5, 6],
}

# (day name, muscle focus tags) per training-days count and template family
SPLIT_TEMPLATES = {
    1: {
        "strength": [("Full Body", ["legs", "chest", "posterior", "back"])],
        "aesthetic": [("Full Body", ["legs", "chest", "back", "shoulders"])],
    },
    2: {
        "strength": [
            ("Full Body A", ["legs", "chest", "back"]),
            ("Full Body B", ["legs", "shoulders", "back"]),
        ],
        "aesthetic": [
            ("Upper Body", ["chest", "back", "shoulders", "arms"]),
            ("Lower Body", ["legs", "glutes", "core"]),
        ],
    },
    3: {
        "strength": [
            ("Squat Focus", ["legs", "core"]),
            ("Bench Focus", ["chest", "shoulders", "triceps"]),
            ("Deadlift Focus", ["posterior", "back", "biceps"]),
        ],
        "aesthetic": [
            ("Push", ["chest", "shoulders", "triceps"]),
            ("Pull", ["back", "biceps", "rear-delts"]),
            ("Legs", ["legs", "glutes", "core"]),
        ],
    },
    4: {
        "strength": [
            ("Squat + Accessories", ["legs", "core"]),
            ("Bench + Accessories", ["chest", "shoulders", "triceps"]),
            ("Deadlift + Accessories", ["posterior", "back"]),
            ("OHP + Accessories", ["shoulders", "chest", "arms"]),
        ],
        "aesthetic": [
            ("Upper Push", ["chest", "shoulders", "triceps"]),
            ("Lower", ["legs", "glutes"]),
            ("Upper Pull", ["back", "biceps", "rear-delts"]),
            ("Arms + Shoulders", ["shoulders", "biceps", "triceps"]),
        ],
    },
    5: {
        "strength": [
            ("Heavy Squat", ["legs"]),
            ("Heavy Bench", ["chest", "triceps"]),
            ("Heavy Deadlift", ["posterior", "back"]),
            ("Volume Upper", ["shoulders", "back", "arms"]),
            ("Volume Lower", ["legs", "core"]),
        ],
        "aesthetic": [
            ("Chest", ["chest", "triceps"]),
            ("Back", ["back", "biceps"]),
            ("Shoulders", ["shoulders", "rear-delts"]),
            ("Legs", ["legs", "glutes"]),
            ("Arms + Weak Points", ["biceps", "triceps", "core"]),
        ],
    },
    6: {
        "strength": [
            ("Squat Heavy", ["legs"]),
            ("Bench Heavy", ["chest", "triceps"]),
            ("Deadlift Heavy", ["posterior", "back"]),
            ("Squat Volume", ["legs", "core"]),
            ("Bench Volume", ["chest", "shoulders"]),
            ("Back + Arms", ["back", "biceps", "triceps"]),
        ],
        "aesthetic": [
            ("Push A", ["chest", "shoulders", "triceps"]),
            ("Pull A", ["back", "biceps"]),
            ("Legs A", ["legs", "glutes"]),
            ("Push B", ["chest", "shoulders", "triceps"]),
            ("Pull B", ["back", "rear-delts", "biceps"]),
            ("Legs B", ["legs", "core"]),
        ],
    },
}

ENDURANCE_TEMPLATES = {
    "running": {
        1: ["Long Run"],
        2: ["Easy Run", "Tempo Run"],
        3: ["Easy Run", "Intervals", "Long Run"],
        4: ["Easy Run", "Tempo Run", "Intervals", "Long Run"],
        5: ["Easy Run", "Tempo Run", "Easy Run", "Intervals", "Long Run"],
        6: ["Easy Run", "Tempo Run", "Easy Run", "Intervals", "Easy Run", "Long Run"],
        7: ["Easy Run", "Tempo Run", "Easy Run", "Intervals", "Easy Run", "Long Run", "Recovery Run"],
    },
    "triathlon": {
        3: ["Swim", "Bike", "Run"],
        4: ["Swim", "Bike", "Run", "Brick Workout"],
        5: ["Swim", "Bike", "Run", "Swim + Strength", "Long Ride"],
        6: ["Swim", "Bike", "Run", "Swim", "Bike", "Long Run"],
    },
}

PROGRAM_NAMES = {
    ProgramType.ENDURANCE: {
        "running": "Runner's Foundation",
        "marathon": "Marathon Prep",
        "cycling": "Cycling Performance",
        "swimming": "Swim Strong",
        "triathlon": "Triathlon Builder",
    },
    ProgramType.STRENGTH: {
        "powerlifting": "Powerlifting Protocol",
        "olympic": "Olympic Lifting Program",
        "strongman": "Strongman Training",
    },
    ProgramType.AESTHETIC: {
        "hypertrophy": "Hypertrophy Builder",
        "lean-muscle": "Lean Gains Program",
        "recomp": "Body Recomposition",
    },
    ProgramType.FATLOSS: {
        "aggressive": "Rapid Fat Loss",
        "moderate": "Sustainable Shred",
        "slow": "Gradual Cut",
    },
    ProgramType.CHALLENGE: {
        "30-day": "30-Day Challenge",
    },
}


def program_name(program_type: ProgramType, subtype: str = "") -> str:
    """Display name for a program type and subtype."""
    names = PROGRAM_NAMES.get(program_type, {})
    return names.get(subtype) or f"{program_type.value.capitalize()} Program"


def _ex(name, sets, reps, rpe, rest, notes, progression="") -> Exercise:
    return Exercise(
        name=name,
        sets=sets,
        reps=reps,
        rpe=rpe,
        rest=rest,
        notes=notes,
        progression=progression,
    )


def strength_exercises(focus: list[str]) -> list[Exercise]:
    """Main lifts for the focus tags, then accessories while there's room."""
    exercises = []

    if "legs" in focus:
        exercises.append(_ex("Back Squat", 4, "6-8", 7, "3-4 min",
                             "Control descent, drive through heels",
                             "Add 5lbs when all reps completed at target RPE"))
    if "chest" in focus:
        exercises.append(_ex("Bench Press", 4, "6-8", 7, "3-4 min",
                             "Arch back, retract scapula",
                             "Add 2.5lbs when all reps completed at target RPE"))
    if "posterior" in focus:
        exercises.append(_ex("Deadlift", 3, "5-6", 7, "4-5 min",
                             "Brace core, hinge at hips",
                             "Add 5-10lbs when all reps completed at target RPE"))
    if "shoulders" in focus:
        exercises.append(_ex("Overhead Press", 4, "6-8", 7, "2-3 min",
                             "Squeeze glutes, press straight up",
                             "Add 2.5lbs when all reps completed"))
    if "back" in focus:
        exercises.append(_ex("Barbell Row", 4, "6-8", 6, "2-3 min",
                             "Pull to lower chest, squeeze at top",
                             "Add 5lbs when form stays solid"))

    if ("triceps" in focus or "arms" in focus) and len(exercises) < 5:
        exercises.append(_ex("Tricep Pushdowns", 3, "10-12", 7, "60-90s",
                             "Keep elbows pinned",
                             "Increase weight when 12 reps feels easy"))
    if ("biceps" in focus or "arms" in focus) and len(exercises) < 5:
        exercises.append(_ex("Bicep Curls", 3, "10-12", 7, "60-90s",
                             "Full range of motion",
                             "Increase weight when 12 reps feels easy"))
    if "core" in focus and len(exercises) < 6:
        exercises.append(_ex("Hanging Leg Raises", 3, "10-15", 7, "60s",
                             "Control the movement, no swinging",
                             "Add weight when 15 reps is easy"))

    return exercises


def aesthetic_exercises(focus: list[str]) -> list[Exercise]:
    """Hypertrophy work for each focus tag."""
    exercises = []

    if "chest" in focus:
        exercises += [
            _ex("Bench Press", 4, "8-10", 8, "2-3 min",
                "Focus on chest squeeze at top", "Add weight or reps each week"),
            _ex("Incline Dumbbell Press", 3, "10-12", 7, "90s",
                "30-45 degree incline, control the negative",
                "Increase weight when 12 reps feels easy"),
            _ex("Cable Chest Fly", 3, "12-15", 7, "60s",
                "Squeeze hard at contraction", "Add 1 rep per session"),
        ]
    if "back" in focus:
        exercises += [
            _ex("Pull-ups", 4, "6-10", 8, "2-3 min",
                "Full stretch at bottom, chin over bar", "Add weight when 10 reps is easy"),
            _ex("Barbell Row", 4, "8-10", 7, "2 min",
                "Squeeze lats at top", "Add 5lbs when form is solid"),
            _ex("Lat Pulldown", 3, "10-12", 7, "90s",
                "Drive elbows down, chest up", "Increase weight when 12 reps feels easy"),
        ]
    if "shoulders" in focus:
        exercises += [
            _ex("Overhead Press", 4, "8-10", 8, "2-3 min",
                "Strict form, no leg drive", "Add 2.5lbs when all reps completed"),
            _ex("Lateral Raises", 4, "12-15", 7, "60s",
                "Lead with elbows, control the negative", "Add 1 rep then increase weight"),
        ]
    if "legs" in focus or "glutes" in focus:
        exercises += [
            _ex("Back Squat", 4, "8-10", 8, "3 min",
                "Deep squat, drive through heels", "Add 5lbs when all reps completed"),
            _ex("Romanian Deadlift", 3, "10-12", 7, "2 min",
                "Feel the hamstring stretch", "Add 5lbs when form is solid"),
            _ex("Leg Press", 3, "10-12", 8, "2 min",
                "Full range of motion", "Increase weight when 12 reps feels easy"),
            _ex("Leg Curls", 3, "12-15", 7, "60s",
                "Squeeze at top", "Add reps then weight"),
        ]
    if "biceps" in focus or "arms" in focus:
        exercises += [
            _ex("Barbell Curl", 3, "10-12", 8, "90s",
                "No swinging, squeeze at top", "Add weight when 12 reps is easy"),
            _ex("Hammer Curls", 3, "10-12", 7, "60s",
                "Control throughout", "Add reps then weight"),
        ]
    if "triceps" in focus or "arms" in focus:
        exercises += [
            _ex("Tricep Pushdowns", 3, "10-12", 8, "90s",
                "Lock out at bottom", "Add weight when 12 reps is easy"),
            _ex("Overhead Tricep Extension", 3, "12-15", 7, "60s",
                "Feel the stretch at bottom", "Add reps then weight"),
        ]
    if "rear-delts" in focus:
        exercises.append(_ex("Face Pulls", 3, "15-20", 7, "60s",
                             "External rotation at top", "Add reps before weight"))
    if "core" in focus:
        exercises.append(_ex("Cable Crunches", 3, "15-20", 7, "60s",
                             "Curl spine, don't hip flex", "Add weight when 20 reps is easy"))

    return exercises


def fatloss_exercises(focus: list[str]) -> list[Exercise]:
    """Metabolic circuit, muscle-preserving lifts, then a low-intensity finisher."""
    exercises = [_ex("HIIT Circuit", 4, "30s work / 30s rest", 9, "2 min between rounds",
                     "Max effort during work intervals", "Add 1 round or reduce rest")]
    exercises += aesthetic_exercises(focus)[:4]
    exercises.append(_ex("Incline Walk", 1, "15-20 min", 5, "N/A",
                         "10-12% incline, 3.0-3.5 mph", "Add 5 min or increase incline"))
    return exercises


def endurance_session(kind: str, weekly_mileage: float | None = None) -> Session:
    """Base-phase endurance session of the given kind."""
    base_mileage = weekly_mileage or 20

    if kind == "Easy Run":
        return Session(type="endurance", focus=kind, duration=40, time=SessionTime.AM, exercises=[
            _ex("Easy Run", 1, "4 miles", 5, "N/A", "Conversational pace, Zone 2",
                "Add 0.5 miles every 2 weeks"),
        ])
    if kind == "Tempo Run":
        return Session(type="endurance", focus=kind, duration=45, time=SessionTime.AM, exercises=[
            _ex("Warm-up Jog", 1, "10 min", 5, "N/A", "Easy pace"),
            _ex("Tempo Effort", 1, "20 min", 7, "N/A",
                "Comfortably hard, can speak in short sentences",
                "Add 2 min tempo every 2 weeks"),
            _ex("Cool-down Jog", 1, "10 min", 4, "N/A", "Very easy pace"),
        ])
    if kind == "Intervals":
        return Session(type="endurance", focus=kind, duration=50, time=SessionTime.AM, exercises=[
            _ex("Warm-up", 1, "15 min", 5, "N/A", "Include dynamic stretches"),
            _ex("400m Repeats", 6, "400m fast", 9, "90s jog", "Consistent pace each rep",
                "Add 1 rep every 2 weeks or reduce rest"),
            _ex("Cool-down", 1, "10 min", 4, "N/A", "Easy jog + stretching"),
        ])
    if kind == "Long Run":
        miles = round(base_mileage * 0.3)
        return Session(type="endurance", focus=kind, duration=90, time=SessionTime.AM, exercises=[
            _ex("Long Run", 1, f"{miles} miles", 6, "N/A",
                "Steady, comfortable pace, practice race nutrition",
                "Add 1 mile per week (max 5% weekly volume increase)"),
        ])
    if kind == "Recovery Run":
        return Session(type="endurance", focus=kind, duration=30, time=SessionTime.AM, exercises=[
            _ex("Recovery Run", 1, "3 miles", 4, "N/A", "Very easy, shake out the legs"),
        ])
    return Session(type="endurance", focus=kind, duration=45, time=SessionTime.AM, exercises=[
        _ex(kind, 1, "45 min", 6, "N/A", "Moderate steady effort"),
    ])


def secondary_session(secondary_type: ProgramType, workout_index: int) -> Session:
    """PM session for a hybrid goal trained on double days."""
    if secondary_type == ProgramType.ENDURANCE:
        return Session(type="endurance", focus="Easy Run", duration=30, time=SessionTime.PM, exercises=[
            _ex("Easy Run", 1, "30 min", 5, "N/A", "Recovery pace"),
        ])
    _, focus = SPLIT_TEMPLATES[3]["aesthetic"][workout_index % 3]
    return Session(
        type="accessory",
        focus="Supplemental Work",
        duration=30,
        time=SessionTime.PM,
        exercises=aesthetic_exercises(focus)[:3],
    )


def primary_session(
    program_type: ProgramType,
    training_days: int,
    workout_index: int,
    subtype: str = "",
    weekly_mileage: float | None = None,
    session_duration: int = 60,
) -> Session:
    """Main session for one training day."""
    if program_type == ProgramType.ENDURANCE:
        family = ENDURANCE_TEMPLATES["triathlon"] if subtype == "triathlon" else {}
        kinds = family.get(training_days) or ENDURANCE_TEMPLATES["running"][training_days]
        return endurance_session(kinds[workout_index], weekly_mileage)

    family = "strength" if program_type == ProgramType.STRENGTH else "aesthetic"
    split = SPLIT_TEMPLATES[min(training_days, 6)][family]
    name, focus = split[workout_index % len(split)]

    if program_type == ProgramType.STRENGTH:
        return Session(type="strength", focus=name, duration=session_duration,
                       exercises=strength_exercises(focus))
    if program_type == ProgramType.FATLOSS:
        return Session(type="metabolic", focus=name, duration=min(session_duration, 50),
                       exercises=fatloss_exercises(focus))
    return Session(type="hypertrophy", focus=name, duration=session_duration,
                   exercises=aesthetic_exercises(focus))


def build_canonical_schedule(
    program_type: ProgramType | str,
    training_days: int,
    subtype: str = "",
    secondary_type: ProgramType | str | None = None,
    allow_double_days: bool = False,
    weekly_mileage: float | None = None,
    session_duration: int = 60,
) -> CanonicalSchedule:
    """Build the week-1 schedule for a program.

    Args:
        program_type: Template family for the main sessions (a challenge is
            built with its focus type)
        training_days: Training days per week, 1-7
        subtype: Program subtype, e.g. "triathlon"
        secondary_type: Hybrid goal type, if any
        allow_double_days: Add a PM session for the hybrid goal
        weekly_mileage: Current weekly mileage, sizes the long run
        session_duration: Minutes per main session

    Returns:
        Seven DaySchedule entries, Monday first

    Raises:
        AssemblyFailure: No training days
        InvalidInputError: More than seven training days
    """
    program_type = ProgramType(program_type)
    if not training_days or training_days < 1:
        raise AssemblyFailure("No training days: at least one training day is required",
                              field="training_days")
    if training_days > 7:
        raise InvalidInputError(f"training_days must be 1-7 (got {training_days})",
                                field="training_days")

    secondary = ProgramType(secondary_type) if secondary_type else None
    workout_days = WORKOUT_DAY_INDEXES[training_days]

    days = []
    for index in range(len(DAY_NAMES)):
        if index not in workout_days:
            days.append(DaySchedule(day=index + 1, name="Rest Day", is_rest_day=True))
            continue

        workout_index = workout_days.index(index)
        sessions = [primary_session(program_type, training_days, workout_index, subtype,
                                    weekly_mileage, session_duration)]
        if secondary and allow_double_days:
            sessions[0].time = SessionTime.AM
            sessions.append(secondary_session(secondary, workout_index))

        days.append(DaySchedule(
            day=index + 1,
            name=" / ".join(s.focus for s in sessions),
            sessions=sessions,
        ))

    return CanonicalSchedule(days=days)
