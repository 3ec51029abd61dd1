"""
Flag disliked or injury-conflicting exercises and propose close variations.
"""

import re

from loguru import logger

from program_builder.models import InjuryFlags


DISLIKED_SPLIT_RE = re.compile(r"[,\n]+")

KNEE_RISK_RE = re.compile(r"squat|lunge|step|split", re.IGNORECASE)
BACK_RISK_RE = re.compile(r"deadlift|good ?morning|barbell row|back squat", re.IGNORECASE)
SHOULDER_RISK_RE = re.compile(r"press|overhead|ohp|snatch", re.IGNORECASE)

# Ordered: the first keyword found in the exercise name wins, so
# "back squat" must stay ahead of "squat".
ALTERNATIVES = [
    ("back squat", ["front squat", "goblet squat", "hack squat (machine)"]),
    ("squat", ["front squat", "goblet squat", "leg press"]),
    ("deadlift", ["trap bar deadlift", "RDL", "semi-sumo deadlift"]),
    ("bench", ["DB bench", "incline DB press", "machine chest press"]),
    ("overhead press", ["DB shoulder press", "seated machine press"]),
    ("lunge", ["split squat", "reverse lunge", "leg press single-leg"]),
    ("row", ["chest-supported row", "seated cable row", "single-arm DB row"]),
]


def parse_disliked_terms(text):
    """Split a comma/newline separated list into lower-cased search terms."""
    terms = []
    for part in DISLIKED_SPLIT_RE.split((text or "").lower()):
        term = part.strip()
        if term:
            terms.append(term)
    return terms


def derive_injury_flags(injury_text):
    return InjuryFlags.from_text(injury_text)


def is_disliked(name, disliked_terms):
    lowered = (name or "").lower()
    return any(term and term.lower() in lowered for term in disliked_terms or [])


def is_risky(name, injury_flags):
    if injury_flags is None:
        return False
    text = name or ""
    if injury_flags.avoid_knee and KNEE_RISK_RE.search(text):
        return True
    if injury_flags.avoid_back and BACK_RISK_RE.search(text):
        return True
    if injury_flags.avoid_shoulder and SHOULDER_RISK_RE.search(text):
        return True
    return False


def should_flag(entry, disliked_terms, injury_flags):
    """
    Decide whether an exercise should carry a swap suggestion.

    Args:
        entry: ExerciseEntry to check
        disliked_terms: iterable of disliked search terms
        injury_flags: InjuryFlags for this run

    Returns:
        True when the name contains a disliked term or matches the risk
        pattern of an active injury flag.
    """
    if is_disliked(entry.name, disliked_terms):
        logger.debug(f"Flagging {entry.name!r}: disliked")
        return True
    if is_risky(entry.name, injury_flags):
        logger.debug(f"Flagging {entry.name!r}: injury risk")
        return True
    return False


def suggest_alternatives(name):
    """Return close variations for an exercise, falling back to generic swaps."""
    lowered = (name or "").lower()
    for keyword, alternatives in ALTERNATIVES:
        if keyword in lowered:
            return list(alternatives)
    return [f"variation of {name}", "machine alternative", "unilateral version"]
