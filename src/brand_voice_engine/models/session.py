"""Training session workflow state."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class SessionStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class VoiceTrainingStep(BaseModel):
    """One step of a training session with its arbitrary payload."""

    id: str
    title: str
    description: str = ""
    is_completed: bool = False
    is_active: bool = False
    data: Any = None


class VoiceTrainingSession(BaseModel):
    id: str
    profile_id: str
    steps: list[VoiceTrainingStep]
    current_step: int = 0
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: datetime | None = None
    status: SessionStatus = SessionStatus.ACTIVE

    @model_validator(mode="after")
    def _current_step_in_range(self) -> "VoiceTrainingSession":
        if not self.steps:
            raise ValueError("A training session needs at least one step")
        if not 0 <= self.current_step < len(self.steps):
            raise ValueError(
                f"current_step {self.current_step} outside 0..{len(self.steps) - 1}"
            )
        return self

    @property
    def highest_completed(self) -> int:
        """Index of the last completed step, or -1 if none."""
        completed = [i for i, step in enumerate(self.steps) if step.is_completed]
        return max(completed) if completed else -1

    @property
    def active_step(self) -> VoiceTrainingStep:
        return self.steps[self.current_step]
