"""Voice-guided generation.

Builds voice prompts for an external text generator and regenerates
drafts that drift from the target voice.
"""

from .generator import TextGenerator, VoiceGuidedGenerator
from .prompt import build_revision_prompt, build_voice_prompt, describe_voice

__all__ = [
    "TextGenerator",
    "VoiceGuidedGenerator",
    "build_revision_prompt",
    "build_voice_prompt",
    "describe_voice",
]
