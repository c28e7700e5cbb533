"""Feedback incorporation and the feedback audit log."""

from .incorporator import (
    ADJUSTABLE,
    Adjustment,
    FeedbackIncorporator,
    FeedbackLog,
    apply_adjustment,
    parse_suggestions,
)

__all__ = [
    "ADJUSTABLE",
    "Adjustment",
    "FeedbackIncorporator",
    "FeedbackLog",
    "apply_adjustment",
    "parse_suggestions",
]
