"""
Structured records for parsed and progressed training blocks.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


KNEE_INJURY_RE = re.compile(r"knee|patella|itb|quad", re.IGNORECASE)
BACK_INJURY_RE = re.compile(r"back|disc|spine|lumbar", re.IGNORECASE)
SHOULDER_INJURY_RE = re.compile(r"shoulder|rotator|ac joint", re.IGNORECASE)


class DifficultyRating(Enum):
    EASY = "easy"
    JUST_RIGHT = "just-right"
    HARD = "hard"

    @classmethod
    def from_value(cls, value):
        """Resolve a form/CLI value; anything unrecognised is just-right."""
        if isinstance(value, cls):
            return value
        text = (value or "").strip().lower()
        if text == "easy":
            return cls.EASY
        if text == "hard":
            return cls.HARD
        return cls.JUST_RIGHT


class EnjoymentRating(Enum):
    LOVED = "loved"
    NEUTRAL = "neutral"
    DISLIKED = "disliked"

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        text = (value or "").strip().lower()
        for rating in cls:
            if rating.value == text:
                return rating
        return cls.NEUTRAL


@dataclass(frozen=True)
class ExerciseEntry:
    name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    rpe: Optional[float] = None
    load: Optional[float] = None
    raw_text: str = ""


@dataclass
class Day:
    title: str
    items: List[ExerciseEntry] = field(default_factory=list)


@dataclass
class Block:
    days: List[Day] = field(default_factory=list)

    def __len__(self):
        return len(self.days)

    def __iter__(self):
        return iter(self.days)

    def entry_count(self):
        return sum(len(day.items) for day in self.days)


@dataclass(frozen=True)
class InjuryFlags:
    avoid_knee: bool = False
    avoid_back: bool = False
    avoid_shoulder: bool = False

    @classmethod
    def from_text(cls, injury_text):
        """Keyword-match free-text injury notes into avoidance flags."""
        text = injury_text or ""
        return cls(
            avoid_knee=bool(KNEE_INJURY_RE.search(text)),
            avoid_back=bool(BACK_INJURY_RE.search(text)),
            avoid_shoulder=bool(SHOULDER_INJURY_RE.search(text)),
        )

    def any(self):
        return self.avoid_knee or self.avoid_back or self.avoid_shoulder
