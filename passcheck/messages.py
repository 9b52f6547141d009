"""
passcheck.messages

Turn a validation session into display lines: label, status and marker for
each criterion, plus the headline shown above the optional criteria.
"""

from typing import Dict, List, Optional

from .criteria import MAX_LENGTH, MIN_LENGTH
from .models import CRITERIA, Criterion, CriterionStatus, ValidationSession
from .status import MIN_CHARACTER_CLASSES

CRITERIA_LABELS: Dict[Criterion, str] = {
    Criterion.MIN_LENGTH_NO_SPACE: "8-32 characters (no spaces)",
    Criterion.UPPERCASE: "uppercase letter (A-Z)",
    Criterion.LOWERCASE: "lowercase (a-z)",
    Criterion.DIGIT: "digit (0-9)",
    Criterion.SPECIAL_CHARACTER: "special character (e.g. !@#$%^)",
}

HEADLINE_TEMPLATE = "Use at least {required} of these 4 criteria when setting your password:"

STATUS_MARKERS: Dict[CriterionStatus, str] = {
    CriterionStatus.UNSET: "⚪️",
    CriterionStatus.MET: "✅",
    CriterionStatus.UNMET: "❌",
}


def criterion_label(criterion: Criterion, policy: Optional[Dict] = None) -> str:
    policy = policy or {}
    if criterion is Criterion.MIN_LENGTH_NO_SPACE:
        low = policy.get("min_length", MIN_LENGTH)
        high = policy.get("max_length", MAX_LENGTH)
        return f"{low}-{high} characters (no spaces)"
    return CRITERIA_LABELS[criterion]


def headline(policy: Optional[Dict] = None) -> str:
    required = (policy or {}).get("min_character_classes", MIN_CHARACTER_CLASSES)
    return HEADLINE_TEMPLATE.format(required=required)


def describe_session(session: ValidationSession) -> List[Dict]:
    """
    One entry per criterion in display order:
    {"criterion": Criterion, "label": str, "status": CriterionStatus, "marker": str}
    """
    lines = []
    for criterion in CRITERIA:
        status = session.statuses[criterion]
        lines.append({
            "criterion": criterion,
            "label": criterion_label(criterion, session.policy),
            "status": status,
            "marker": STATUS_MARKERS[status],
        })
    return lines


def missing_criteria(session: ValidationSession) -> List[str]:
    """Labels of the criteria currently flagged UNMET, mandatory first."""
    return [
        criterion_label(c, session.policy)
        for c in CRITERIA
        if session.statuses[c] is CriterionStatus.UNMET
    ]
