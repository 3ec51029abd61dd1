"""
Deterministic progression of exercise prescriptions for the next block.

One lever moves per exercise: load when it is known, otherwise reps, then sets.
"""

import math
from dataclasses import replace

from program_builder.models import Block, Day, DifficultyRating


DEFAULT_SETS = 3
DEFAULT_REPS = 6

MIN_SETS, MAX_SETS = 2, 6
MAX_REPS = 12

EASY_LOAD_FACTOR = 1.05
HARD_LOAD_FACTOR = 0.95
JUST_RIGHT_LOAD_FACTOR = 1.02

RPE_STEP = 0.5
RPE_CEILING = 9.0
RPE_FLOOR = 6.0


def _has_load(load):
    return load is not None and math.isfinite(load)


def _scale_load(load, factor):
    return round(load * factor, 1)


def progress(entry, difficulty):
    """
    Compute next block's prescription for one exercise.

    Args:
        entry: ExerciseEntry parsed from the previous block
        difficulty: DifficultyRating (or its string value)

    Returns:
        New ExerciseEntry; the input is left untouched.
    """
    difficulty = DifficultyRating.from_value(difficulty)
    sets = entry.sets if entry.sets is not None else DEFAULT_SETS
    reps = entry.reps if entry.reps is not None else DEFAULT_REPS
    load = entry.load
    rpe = entry.rpe

    if difficulty is DifficultyRating.EASY:
        if _has_load(load):
            load = _scale_load(load, EASY_LOAD_FACTOR)
        elif reps < MAX_REPS:
            reps += 1
        elif sets < MAX_SETS:
            sets += 1
        if rpe is not None:
            rpe = min(RPE_CEILING, rpe + RPE_STEP)
    elif difficulty is DifficultyRating.HARD:
        if _has_load(load):
            load = _scale_load(load, HARD_LOAD_FACTOR)
        elif sets > MIN_SETS:
            sets -= 1
        # Reps hold; the RPE target comes down instead.
        if rpe is not None:
            rpe = max(RPE_FLOOR, rpe - RPE_STEP)
    else:
        if _has_load(load):
            load = _scale_load(load, JUST_RIGHT_LOAD_FACTOR)

    return replace(entry, sets=sets, reps=reps, load=load, rpe=rpe)


def progress_block(block, difficulty):
    """Progress every entry of a block, keeping day and exercise order."""
    difficulty = DifficultyRating.from_value(difficulty)
    return Block(
        days=[
            Day(title=day.title, items=[progress(item, difficulty) for item in day.items])
            for day in block.days
        ]
    )
