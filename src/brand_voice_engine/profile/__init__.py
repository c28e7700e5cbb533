"""
Profile Module

Build brand voice profiles from samples or templates, retrain them, and
manage which profile is active.
"""

from .builder import (
    ProfileBuilder,
    activate,
    base_confidence,
    compute_confidence,
    get_active_profile,
    normalized_impurity,
)
from .templates import VOICE_TEMPLATES, get_template

__all__ = [
    # Builder
    "ProfileBuilder",
    "activate",
    "get_active_profile",
    # Confidence
    "base_confidence",
    "compute_confidence",
    "normalized_impurity",
    # Templates
    "VOICE_TEMPLATES",
    "get_template",
]
