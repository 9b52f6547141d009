"""PassCheck: password criteria checks and the field validation state machine."""

from .models import CHARACTER_CLASSES, CRITERIA, Criterion, CriterionStatus, ValidationSession
from .status import new_session, on_focus_lost, on_text_changed, reset, validate

__version__ = "0.1.0"
