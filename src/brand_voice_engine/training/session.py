"""
Training Session Manager

Walks a user through the ordered training steps (collect samples,
extract, review, confirm). Sessions are immutable pydantic values: every
operation returns an updated copy for the caller to persist.
"""

from datetime import datetime
from enum import Enum
import logging
from typing import Any, Iterable, Optional, Sequence
import uuid

from ..errors import InvalidStep, InvalidTransition
from ..models.profile import BrandVoiceProfile
from ..models.session import SessionStatus, VoiceTrainingSession, VoiceTrainingStep
from ..profile.builder import ProfileBuilder, as_sources

logger = logging.getLogger(__name__)


class SessionEvent(str, Enum):
    ADVANCE = "advance"
    PAUSE = "pause"
    RESUME = "resume"
    JUMP = "jump"


# (state, event) -> next state. Missing pairs are illegal. Advancing from the
# last step goes to COMPLETED instead (see advance()).
TRANSITIONS: dict[tuple[SessionStatus, SessionEvent], SessionStatus] = {
    (SessionStatus.ACTIVE, SessionEvent.ADVANCE): SessionStatus.ACTIVE,
    (SessionStatus.ACTIVE, SessionEvent.PAUSE): SessionStatus.PAUSED,
    (SessionStatus.ACTIVE, SessionEvent.JUMP): SessionStatus.ACTIVE,
    (SessionStatus.PAUSED, SessionEvent.RESUME): SessionStatus.ACTIVE,
    (SessionStatus.PAUSED, SessionEvent.JUMP): SessionStatus.PAUSED,
}

DEFAULT_STEPS: list[tuple[str, str, str]] = [
    ("collect_samples", "Collect samples", "Add posts, articles or emails written in your voice."),
    ("extract", "Analyze voice", "Extract tone, vocabulary and structure from the samples."),
    ("review", "Review", "Check the extracted characteristics and adjust avoided words."),
    ("confirm", "Confirm", "Save the profile and make it available for generation."),
]


def default_steps() -> list[VoiceTrainingStep]:
    steps = [VoiceTrainingStep(id=i, title=t, description=d) for i, t, d in DEFAULT_STEPS]
    steps[0].is_active = True
    return steps


def next_status(status: SessionStatus, event: SessionEvent) -> SessionStatus:
    """Look up a transition, raising InvalidTransition for illegal pairs."""
    try:
        return TRANSITIONS[(status, event)]
    except KeyError:
        raise InvalidTransition(f"Cannot {event.value} a {status.value} session") from None


class TrainingSessionManager:
    """
    State machine for voice training sessions.

    States are active, paused and completed; completed is terminal, so
    retraining a profile means starting a new session.
    """

    def __init__(self, builder: Optional[ProfileBuilder] = None):
        self.builder = builder or ProfileBuilder()

    def start(
        self,
        profile_id: str,
        existing_sessions: Iterable[VoiceTrainingSession] = (),
        steps: Optional[Sequence[VoiceTrainingStep]] = None,
        session_id: Optional[str] = None,
    ) -> VoiceTrainingSession:
        """
        Open a session at step 0.

        Raises:
            InvalidTransition: the profile already has an unfinished session
        """
        for existing in existing_sessions:
            if existing.profile_id == profile_id and existing.status != SessionStatus.COMPLETED:
                raise InvalidTransition(
                    f"Profile {profile_id!r} already has an open session {existing.id!r}",
                    user_message="Finish or resume the training session already in progress.",
                )

        if steps is None:
            step_list = default_steps()
        else:
            step_list = [
                s.model_copy(update={"is_active": i == 0, "is_completed": False})
                for i, s in enumerate(steps)
            ]

        session = VoiceTrainingSession(
            id=session_id or str(uuid.uuid4()),
            profile_id=profile_id,
            steps=step_list,
        )
        logger.info("Started training session %s for profile %s", session.id, profile_id)
        return session

    def advance(self, session: VoiceTrainingSession) -> VoiceTrainingSession:
        """Complete the current step and move on; completes the session after the last step."""
        status = next_status(session.status, SessionEvent.ADVANCE)
        steps = [s.model_copy() for s in session.steps]
        current = session.current_step
        steps[current].is_completed = True
        steps[current].is_active = False

        update: dict[str, Any] = {"steps": steps}
        if current == len(steps) - 1:
            update["status"] = SessionStatus.COMPLETED
            update["completed_at"] = datetime.now()
        else:
            steps[current + 1].is_active = True
            update["status"] = status
            update["current_step"] = current + 1

        updated = session.model_copy(update=update)
        logger.debug(
            "Session %s advanced past step %d (%s)", session.id, current, updated.status.value
        )
        return updated

    def pause(self, session: VoiceTrainingSession) -> VoiceTrainingSession:
        status = next_status(session.status, SessionEvent.PAUSE)
        logger.debug("Session %s paused at step %d", session.id, session.current_step)
        return session.model_copy(update={"status": status})

    def resume(self, session: VoiceTrainingSession) -> VoiceTrainingSession:
        status = next_status(session.status, SessionEvent.RESUME)
        logger.debug("Session %s resumed at step %d", session.id, session.current_step)
        return session.model_copy(update={"status": status})

    def jump_to(self, session: VoiceTrainingSession, step_index: int) -> VoiceTrainingSession:
        """
        Move to ``step_index``.

        Only steps up to one past the highest completed step are reachable.

        Raises:
            InvalidTransition: the session is completed
            InvalidStep: the target is out of range or skips ahead
        """
        status = next_status(session.status, SessionEvent.JUMP)
        limit = session.highest_completed + 1
        if not 0 <= step_index < len(session.steps) or step_index > limit:
            raise InvalidStep(
                f"Cannot jump to step {step_index}; reachable steps are 0..{min(limit, len(session.steps) - 1)}"
            )

        steps = [s.model_copy(update={"is_active": i == step_index}) for i, s in enumerate(session.steps)]
        return session.model_copy(
            update={"steps": steps, "current_step": step_index, "status": status}
        )

    def record(self, session: VoiceTrainingSession, data: Any) -> VoiceTrainingSession:
        """Store a payload on the current step without advancing."""
        if session.status == SessionStatus.COMPLETED:
            raise InvalidTransition("Cannot record data on a completed session")
        steps = [s.model_copy() for s in session.steps]
        steps[session.current_step].data = data
        return session.model_copy(update={"steps": steps})

    def submit_samples(self, session: VoiceTrainingSession, sources: Iterable) -> VoiceTrainingSession:
        """Record samples on the collect step and move to extraction."""
        self._expect_step(session, "collect_samples")
        samples = as_sources(sources)
        session = self.record(session, [s.model_dump(mode="json") for s in samples])
        return self.advance(session)

    def run_extraction(
        self,
        session: VoiceTrainingSession,
        name: str,
        owner_id: str = "default",
        profile: Optional[BrandVoiceProfile] = None,
    ) -> tuple[VoiceTrainingSession, BrandVoiceProfile]:
        """
        Build (or retrain) the profile from the collected samples.

        The profile is stored on the extract step and the session moves on
        to review.
        """
        self._expect_step(session, "extract")
        samples = self.step_data(session, "collect_samples") or []
        if profile is None:
            profile = self.builder.build(name, samples, owner_id=owner_id, profile_id=session.profile_id)
        else:
            profile = self.builder.retrain(profile, samples)

        session = self.record(session, profile.model_dump(mode="json"))
        return self.advance(session), profile

    def confirm(self, session: VoiceTrainingSession) -> VoiceTrainingSession:
        """Advance through review and confirm, completing the session."""
        while session.status != SessionStatus.COMPLETED:
            session = self.advance(session)
        logger.info("Training session %s completed", session.id)
        return session

    @staticmethod
    def step_data(session: VoiceTrainingSession, step_id: str) -> Any:
        for step in session.steps:
            if step.id == step_id:
                return step.data
        return None

    @staticmethod
    def _expect_step(session: VoiceTrainingSession, step_id: str) -> None:
        active = session.active_step
        if active.id != step_id:
            raise InvalidStep(f"Current step is {active.id!r}, not {step_id!r}")
