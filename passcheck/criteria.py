"""
passcheck.criteria

Password criteria predicates:
- length_and_no_space_met(text): 8-32 characters, no whitespace
- uppercase_met / lowercase_met / digit_met: at least one A-Z / a-z / 0-9
- special_character_met(text): at least one symbol from SPECIAL_CHARACTERS
- evaluate(text, policy): all five results keyed by Criterion

Every predicate is total: any str (including "") gives True or False.
"""

import re
from typing import Any, Dict, Optional

from .models import Criterion

MIN_LENGTH = 8
MAX_LENGTH = 32

# punctuation/symbols only; letters, digits and whitespace never count
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+[]{};:,.<>/?\\|~`'\""

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_WHITESPACE = re.compile(r"\s")


def length_and_no_space_met(text: str, min_length: int = MIN_LENGTH, max_length: int = MAX_LENGTH) -> bool:
    """Both bounds are inclusive."""
    # len() counts code points, so a multi-code-point emoji counts more than once
    if not min_length <= len(text) <= max_length:
        return False
    return _WHITESPACE.search(text) is None


def uppercase_met(text: str) -> bool:
    return _UPPERCASE.search(text) is not None


def lowercase_met(text: str) -> bool:
    return _LOWERCASE.search(text) is not None


def digit_met(text: str) -> bool:
    return _DIGIT.search(text) is not None


def special_character_met(text: str, symbols: str = SPECIAL_CHARACTERS) -> bool:
    return any(c in symbols for c in text)


def evaluate(text: str, policy: Optional[Dict[str, Any]] = None) -> Dict[Criterion, bool]:
    """
    Run every predicate over text.

    policy may override min_length, max_length and special_characters
    (see passcheck.config.DEFAULTS); missing keys use the module defaults.
    """
    policy = policy or {}
    return {
        Criterion.MIN_LENGTH_NO_SPACE: length_and_no_space_met(
            text,
            min_length=int(policy.get("min_length", MIN_LENGTH)),
            max_length=int(policy.get("max_length", MAX_LENGTH)),
        ),
        Criterion.UPPERCASE: uppercase_met(text),
        Criterion.LOWERCASE: lowercase_met(text),
        Criterion.DIGIT: digit_met(text),
        Criterion.SPECIAL_CHARACTER: special_character_met(
            text, policy.get("special_characters") or SPECIAL_CHARACTERS
        ),
    }
