"""Training session workflow."""

from .session import (
    DEFAULT_STEPS,
    TRANSITIONS,
    SessionEvent,
    TrainingSessionManager,
    default_steps,
    next_status,
)

__all__ = [
    "DEFAULT_STEPS",
    "TRANSITIONS",
    "SessionEvent",
    "TrainingSessionManager",
    "default_steps",
    "next_status",
]
