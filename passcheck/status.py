"""
passcheck.status

Validation state machine for a password field.

- on_text_changed(session, text): re-evaluate every criterion. While the
  session is live a failing criterion goes back to UNSET; once strict it is
  flagged UNMET straight away.
- validate(session): mandatory length rule plus N of the 4 character classes
  (N = policy "min_character_classes", 3 by default). Failing flags every
  missing criterion and switches the session to strict.
- reset(session): clear every status, keep the mode.
- on_focus_lost(session): the field lost focus; validate, then stay strict
  whatever the verdict.
"""

import logging
from typing import Any, Dict, Optional

from .criteria import evaluate
from .models import CHARACTER_CLASSES, Criterion, CriterionStatus, ValidationSession

log = logging.getLogger(__name__)

MIN_CHARACTER_CLASSES = 3


def new_session(policy: Optional[Dict[str, Any]] = None) -> ValidationSession:
    """Start a session in live mode with every criterion UNSET."""
    return ValidationSession(policy=dict(policy or {}))


def on_text_changed(session: ValidationSession, text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")

    results = evaluate(text, session.policy)
    failed = CriterionStatus.UNSET if session.live else CriterionStatus.UNMET
    for criterion, met in results.items():
        session.statuses[criterion] = CriterionStatus.MET if met else failed
    log.debug("text changed (live=%s): %s", session.live, _summary(session))


def met_count(session: ValidationSession) -> int:
    """Number of character-class criteria currently MET."""
    return sum(1 for c in CHARACTER_CLASSES if session.statuses[c] is CriterionStatus.MET)


def validate(session: ValidationSession) -> bool:
    """
    Check the current statuses (not the text) and return the verdict.

    Failure re-assigns UNMET to every criterion that is not MET, even those
    already UNMET, so hosts can redraw unconditionally after each call.
    On success a live session clears the unused criteria back to UNSET;
    a strict session keeps their UNMET marks.
    """
    required = int(session.policy.get("min_character_classes", MIN_CHARACTER_CLASSES))
    length_met = session.statuses[Criterion.MIN_LENGTH_NO_SPACE] is CriterionStatus.MET
    count = met_count(session)

    if not (length_met and count >= required):
        for criterion, status in session.statuses.items():
            if status is not CriterionStatus.MET:
                session.statuses[criterion] = CriterionStatus.UNMET
        if session.live:
            log.debug("validation failed, switching to strict mode")
        session.live = False
        log.debug("invalid (%d of %d classes): %s", count, required, _summary(session))
        return False

    if session.live:
        for criterion, status in session.statuses.items():
            if status is not CriterionStatus.MET:
                session.statuses[criterion] = CriterionStatus.UNSET
    log.debug("valid (%d of %d classes): %s", count, required, _summary(session))
    return True


def on_focus_lost(session: ValidationSession) -> bool:
    """Validate, then switch to strict mode even when the password passed."""
    valid = validate(session)
    session.live = False
    return valid


def reset(session: ValidationSession) -> None:
    """Clear every status to UNSET. The live/strict mode is left alone."""
    for criterion in session.statuses:
        session.statuses[criterion] = CriterionStatus.UNSET
    log.debug("statuses reset (live=%s)", session.live)


def _summary(session: ValidationSession) -> str:
    return ", ".join(f"{c.value}={s.value}" for c, s in session.statuses.items())
