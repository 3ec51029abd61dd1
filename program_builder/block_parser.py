"""
Parse free-text training blocks into days and exercise entries.

Expected rough format:

    Day 1 – Lower
    Squat 3x6 @ RPE7 60kg
    Deadlift 3x5 @ RPE8

Parsing is permissive: lines that carry no exercise name are dropped and
missing numbers stay ``None`` so later stages can tell "unspecified" from zero.
"""

import re

from loguru import logger

from program_builder.models import Block, Day, ExerciseEntry


LINE_SPLIT_RE = re.compile(r"\r?\n")
DAY_NUMBER_RE = re.compile(r"^day\s*[0-9]+", re.IGNORECASE)
DASH_RE = re.compile(r"[-–—]")

# Trailing tokens of an exercise line, peeled off right to left.
LOAD_TOKEN_RE = re.compile(r"\s+(?P<load>[0-9.]+)\s*kg$", re.IGNORECASE)
RPE_TOKEN_RE = re.compile(r"\s*@\s*RPE\s*(?P<rpe>[0-9.]+)$", re.IGNORECASE)
SETS_REPS_TOKEN_RE = re.compile(r"\s+(?P<sets>[0-9]+)x(?P<reps>[0-9]+)$", re.IGNORECASE)

NUMBER_PREFIX_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

DEFAULT_DAY_TITLE = "Day 1"

BLANK = "blank"
DAY_HEADER = "day_header"
EXERCISE = "exercise"


def _parse_int(value):
    if value is None:
        return None
    return int(value)


def _parse_float(value):
    """Parse the leading numeric part of a token such as ``7.5`` or ``1.2.3``."""
    if value is None:
        return None
    match = NUMBER_PREFIX_RE.match(value)
    if not match:
        return None
    return float(match.group(0))


def is_day_header(line):
    text = (line or "").strip()
    if DAY_NUMBER_RE.match(text):
        return True
    return bool(DASH_RE.search(text)) and "day" in text.lower()


def classify_line(line):
    """
    Classify one physical line.

    Returns:
        One of ``"blank"``, ``"day_header"`` or ``"exercise"``.
    """
    text = (line or "").strip()
    if not text:
        return BLANK
    if is_day_header(text):
        return DAY_HEADER
    return EXERCISE


def tokenize_exercise_line(line):
    """
    Split an exercise line into its name and optional trailing tokens.

    Returns:
        dict with keys name, sets, reps, rpe, load (raw strings or None)
    """
    rest = (line or "").strip()
    tokens = {"sets": None, "reps": None, "rpe": None, "load": None}

    for pattern in (LOAD_TOKEN_RE, RPE_TOKEN_RE, SETS_REPS_TOKEN_RE):
        match = pattern.search(rest)
        if not match:
            continue
        tokens.update(match.groupdict())
        rest = rest[: match.start()]

    tokens["name"] = rest.strip()
    return tokens


def parse_exercise_line(line):
    """Parse one exercise line, or return None when it has no name."""
    raw = (line or "").strip()
    tokens = tokenize_exercise_line(raw)
    if not tokens["name"]:
        return None

    return ExerciseEntry(
        name=tokens["name"],
        sets=_parse_int(tokens["sets"]),
        reps=_parse_int(tokens["reps"]),
        rpe=_parse_float(tokens["rpe"]),
        load=_parse_float(tokens["load"]),
        raw_text=raw,
    )


def parse_block(text):
    """
    Parse a previous block (or an instantiated template) into a Block.

    Never raises: unrecognised lines are skipped.
    """
    block = Block()
    current = None

    for raw in LINE_SPLIT_RE.split(text or ""):
        kind = classify_line(raw)
        if kind == BLANK:
            continue

        line = raw.strip()
        if kind == DAY_HEADER:
            current = Day(title=line)
            block.days.append(current)
            continue

        if current is None:
            current = Day(title=DEFAULT_DAY_TITLE)
            block.days.append(current)

        entry = parse_exercise_line(line)
        if entry is None:
            logger.debug(f"Dropped line without an exercise name: {line!r}")
            continue
        current.items.append(entry)

    logger.debug(f"Parsed {len(block.days)} day(s), {block.entry_count()} exercise(s)")
    return block
