"""Typed failures raised by the voice engine core."""


class VoiceEngineError(Exception):
    """Base class for all voice engine errors.

    ``user_message`` is the actionable text a UI should show instead of a
    generic failure.
    """

    user_message = "Something went wrong while processing the brand voice."

    def __init__(self, message: str = "", user_message: str | None = None):
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


class InsufficientData(VoiceEngineError):
    """No usable content sources were supplied."""

    user_message = "Add at least one sample before training."


class MalformedSource(VoiceEngineError):
    """A content source failed basic shape validation."""

    user_message = "One of the samples is malformed. Check that every sample has an id and text."


class InvalidTransition(VoiceEngineError):
    """Illegal training-session state change."""

    user_message = "This training session cannot do that right now."


class InvalidStep(VoiceEngineError):
    """Out-of-order jump inside a training session."""

    user_message = "Finish the earlier training steps first."


class ProfileNotActive(VoiceEngineError):
    """An operation needs an active profile but none exists."""

    user_message = "Activate a brand voice profile first."


class ProfileNotFound(VoiceEngineError):
    """A profile id does not match any known profile."""

    user_message = "That brand voice profile does not exist."
