"""
Heuristic password strength scoring.

score_password() is a pure function of the password text: the same string
always yields the same report, whatever configuration produced it.
"""

from __future__ import annotations

import math
import re
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .charset import CHARSETS
from .config import CharClass

SYMBOLS = CHARSETS[CharClass.SYMBOLS]

_REPEATED_RE = re.compile(r"(.)\1\1", re.DOTALL)

DIGIT_RUNS = ("012", "123", "234", "345", "456", "567", "678", "789", "890")
ALPHA_RUNS = tuple(string.ascii_lowercase[i : i + 3] for i in range(24))
KEYBOARD_RUNS = ("qwerty", "asdfgh", "zxcvbn")

PATTERN_PENALTY = 5


class StrengthLevel(Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very strong"


@dataclass(frozen=True)
class StrengthReport:
    score: int
    # None for the empty password; callers decide how to show "no rating".
    level: Optional[StrengthLevel]
    patterns: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.level.value if self.level else "–"


@dataclass(frozen=True)
class PasswordStats:
    length: int = 0
    uppercase: int = 0
    lowercase: int = 0
    digits: int = 0
    symbols: int = 0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def level_for_score(score: int) -> StrengthLevel:
    if score < 30:
        return StrengthLevel.WEAK
    if score < 60:
        return StrengthLevel.MEDIUM
    if score < 80:
        return StrengthLevel.STRONG
    return StrengthLevel.VERY_STRONG


def detect_patterns(password: str) -> tuple[str, ...]:
    """
    Names of the weak-pattern families present in the password.
    Each family counts once, however often it occurs.
    """
    lowered = password.lower()
    found = []
    if _REPEATED_RE.search(password):
        found.append("repeated")
    if any(run in password for run in DIGIT_RUNS):
        found.append("digit_sequence")
    if any(run in lowered for run in ALPHA_RUNS):
        found.append("alpha_sequence")
    if any(run in lowered for run in KEYBOARD_RUNS):
        found.append("keyboard")
    return tuple(found)


def _length_points(length: int) -> int:
    points = 0
    if length >= 8:
        points += 10
    if length >= 12:
        points += 5
    if length >= 16:
        points += 5
    if length >= 20:
        points += 5
    return points


def _class_flags(password: str) -> tuple[bool, bool, bool, bool]:
    return (
        any(c in string.ascii_uppercase for c in password),
        any(c in string.ascii_lowercase for c in password),
        any(c in string.digits for c in password),
        any(c in SYMBOLS for c in password),
    )


def score_password(password: str) -> StrengthReport:
    """
    Score a password from 0 to 100.

    - Length: +10 at 8 chars, +5 more at 12, 16 and 20 (max 25).
    - Diversity: +10 per class present (max 40).
    - Uniqueness: distinct/length * 25 (max 25).
    - Patterns: -5 per weak-pattern family found.
    """
    if not password:
        return StrengthReport(score=0, level=None)

    length = len(password)
    total: float = _length_points(length)
    total += 10 * sum(_class_flags(password))
    total += min(25.0, len(set(password)) / length * 25)

    patterns = detect_patterns(password)
    total -= PATTERN_PENALTY * len(patterns)

    score = _round_half_up(max(0.0, min(100.0, total)))
    return StrengthReport(score=score, level=level_for_score(score), patterns=patterns)


def character_stats(password: str) -> PasswordStats:
    """Per-class character counts shown alongside a generated password."""
    return PasswordStats(
        length=len(password),
        uppercase=sum(c in string.ascii_uppercase for c in password),
        lowercase=sum(c in string.ascii_lowercase for c in password),
        digits=sum(c in string.digits for c in password),
        symbols=sum(c in SYMBOLS for c in password),
    )
