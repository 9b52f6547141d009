"""
passcheck.models

Criterion identities, the tri-state status, and the mutable session record
the state machine in passcheck.status works on.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class Criterion(str, Enum):
    MIN_LENGTH_NO_SPACE = "min_length_no_space"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL_CHARACTER = "special_character"


class CriterionStatus(str, Enum):
    UNSET = "unset"   # neutral: not evaluated yet, or reset
    MET = "met"
    UNMET = "unmet"   # shown as an error


# display order; the mandatory criterion comes first
CRITERIA = tuple(Criterion)

# the optional pool for the "N of 4" rule
CHARACTER_CLASSES = (
    Criterion.UPPERCASE,
    Criterion.LOWERCASE,
    Criterion.DIGIT,
    Criterion.SPECIAL_CHARACTER,
)


def _unset_statuses() -> Dict[Criterion, CriterionStatus]:
    return {c: CriterionStatus.UNSET for c in CRITERIA}


@dataclass
class ValidationSession:
    """
    Per-field validation state.

    live is True while unmet criteria should stay neutral (the user is still
    typing and has never left the field or failed validation). It only ever goes from True to
    False; a new session is the only way back.
    """

    statuses: Dict[Criterion, CriterionStatus] = field(default_factory=_unset_statuses)
    live: bool = True
    policy: Dict[str, Any] = field(default_factory=dict)

    def snapshot(self) -> Dict[Criterion, CriterionStatus]:
        return dict(self.statuses)
