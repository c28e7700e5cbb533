"""
Feedback Incorporator

Folds user ratings and free-text suggestions back into a profile.
"""

from dataclasses import dataclass
import logging
import re
from typing import Iterator, Optional, Sequence

from pydantic import BaseModel
from rapidfuzz import fuzz, process

from ..config import DEFAULT_CONFIG, VoiceEngineConfig
from ..models.characteristics import (
    DataUsage,
    EmojiUsage,
    Intensity,
    UsageLevel,
    VocabularyComplexity,
    VoiceCharacteristics,
)
from ..models.generation import VoiceFeedback
from ..models.profile import BrandVoiceProfile
from ..scoring.scorer import FORMALITY_SCALE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Adjustable:
    """A characteristic feedback may shift, and the ordering it moves along."""
    path: tuple[str, ...]
    order: Optional[tuple] = None  # None for the numeric sentence length


ADJUSTABLE: dict[str, Adjustable] = {
    "formality": Adjustable(("formality",), FORMALITY_SCALE),
    "complexity": Adjustable(("vocabulary_level", "complexity"), tuple(VocabularyComplexity)),
    "exclamation": Adjustable(("sentence_structure", "punctuation_style", "exclamation_usage"), tuple(UsageLevel)),
    "question": Adjustable(("sentence_structure", "punctuation_style", "question_usage"), tuple(UsageLevel)),
    "emoji": Adjustable(("sentence_structure", "punctuation_style", "emojis_usage"), tuple(EmojiUsage)),
    "intensity": Adjustable(("emotional_range", "intensity"), tuple(Intensity)),
    "data": Adjustable(("content_patterns", "data_usage"), tuple(DataUsage)),
    "length": Adjustable(("sentence_structure", "average_length")),
}

# Word after "more" -> (field, direction of "more" along the field's order)
QUANTIFIED_TERMS: dict[str, tuple[str, int]] = {
    "formal": ("formality", -1),
    "professional": ("formality", -1),
    "casual": ("formality", 1),
    "relaxed": ("formality", 1),
    "conversational": ("formality", 1),
    # Negated forms must match exactly; otherwise they fuzzy-match "formal"
    "informal": ("formality", 1),
    "unprofessional": ("formality", 1),
    "colloquial": ("formality", 1),
    "complex": ("complexity", 1),
    "technical": ("complexity", 1),
    "advanced": ("complexity", 1),
    "sophisticated": ("complexity", 1),
    "jargon": ("complexity", 1),
    "exclamation": ("exclamation", 1),
    "exclamation marks": ("exclamation", 1),
    "exclamation points": ("exclamation", 1),
    "question": ("question", 1),
    "questions": ("question", 1),
    "emoji": ("emoji", 1),
    "emojis": ("emoji", 1),
    "emotion": ("intensity", 1),
    "emotional": ("intensity", 1),
    "energy": ("intensity", 1),
    "enthusiasm": ("intensity", 1),
    "enthusiastic": ("intensity", 1),
    "data": ("data", 1),
    "statistics": ("data", 1),
    "numbers": ("data", 1),
}

# Stand-alone comparatives ("simpler", "shorter sentences")
COMPARATIVES: dict[str, tuple[str, int]] = {
    "simpler": ("complexity", -1),
    "plainer": ("complexity", -1),
    "shorter": ("length", -1),
    "punchier": ("length", -1),
    "longer": ("length", 1),
    "calmer": ("intensity", -1),
    "friendlier": ("formality", 1),
    "looser": ("formality", 1),
    "stiffer": ("formality", -1),
}

# The optional second word sits in a lookahead so "more casual, fewer emojis"
# yields two matches
_QUANTIFIER = re.compile(r"\b(more|less|fewer)\s+([a-z][a-z'-]*)(?=(?:\s+([a-z][a-z'-]*))?)")


@dataclass(frozen=True)
class Adjustment:
    field: str
    direction: int  # +1 or -1 along ADJUSTABLE[field].order


class FeedbackLog:
    """Append-only audit log of feedback records."""

    def __init__(self, entries: Sequence[VoiceFeedback] = ()):
        self._entries: list[VoiceFeedback] = list(entries)

    def append(self, feedback: VoiceFeedback) -> None:
        self._entries.append(feedback)

    @property
    def entries(self) -> tuple[VoiceFeedback, ...]:
        return tuple(self._entries)

    def for_profile(self, profile_id: str) -> list[VoiceFeedback]:
        return [f for f in self._entries if f.voice_profile_id == profile_id]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[VoiceFeedback]:
        return iter(tuple(self._entries))


def parse_suggestions(
    suggestions: Sequence[str],
    cutoff: float = DEFAULT_CONFIG.suggestion_match_cutoff,
) -> list[Adjustment]:
    """
    Turn free-text suggestions into at most one adjustment per field.

    Recognizes "more X", "less X", "fewer X" and stand-alone comparatives.
    X is fuzzy-matched so "more casul" or "fewer emoji's" still count. When
    suggestions disagree about a field the first one wins.
    """
    found: dict[str, int] = {}

    for suggestion in suggestions:
        text = suggestion.lower()
        for quantifier, first, second in _QUANTIFIER.findall(text):
            match = _match_term(f"{first} {second}".strip(), cutoff)
            if match is None:
                continue
            field, direction = QUANTIFIED_TERMS[match]
            if quantifier != "more":
                direction = -direction
            found.setdefault(field, direction)

        for word in re.findall(r"[a-z]+", text):
            result = process.extractOne(word, COMPARATIVES.keys(), scorer=fuzz.ratio, score_cutoff=cutoff)
            if result:
                field, direction = COMPARATIVES[result[0]]
                found.setdefault(field, direction)

    return [Adjustment(field, direction) for field, direction in found.items()]


def _match_term(rest: str, cutoff: float) -> Optional[str]:
    words = rest.replace("'", "").split()
    # Try the two-word phrase first ("exclamation marks"), then the single word
    for n in (2, 1):
        if len(words) < n:
            continue
        result = process.extractOne(
            " ".join(words[:n]),
            QUANTIFIED_TERMS.keys(),
            scorer=fuzz.ratio,
            score_cutoff=cutoff,
        )
        if result:
            return result[0]
    return None


def apply_adjustment(
    characteristics: VoiceCharacteristics,
    adjustment: Adjustment,
    config: VoiceEngineConfig = DEFAULT_CONFIG,
) -> VoiceCharacteristics:
    """Move one field a single step; values at the end of their ordering stay put."""
    adjustable = ADJUSTABLE[adjustment.field]
    current = _get(characteristics, adjustable.path)
    if adjustable.order is None:
        value = max(1.0, current + adjustment.direction * config.sentence_length_step)
    else:
        index = adjustable.order.index(current) + adjustment.direction
        value = adjustable.order[min(len(adjustable.order) - 1, max(0, index))]
    return _replace(characteristics, adjustable.path, value)


def _get(model: BaseModel, path: tuple[str, ...]):
    for name in path:
        model = getattr(model, name)
    return model


def _replace(model: BaseModel, path: tuple[str, ...], value) -> BaseModel:
    head, *rest = path
    if rest:
        value = _replace(getattr(model, head), tuple(rest), value)
    return model.model_copy(update={head: value})


class FeedbackIncorporator:
    """
    Applies feedback to profiles.

    Every feedback record lands in the log, whether or not it changes the
    profile.
    """

    def __init__(
        self,
        config: Optional[VoiceEngineConfig] = None,
        log: Optional[FeedbackLog] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.log = log if log is not None else FeedbackLog()

    def incorporate(self, profile: BrandVoiceProfile, feedback: VoiceFeedback) -> BrandVoiceProfile:
        """
        Return the profile updated by one feedback item.

        Rating 4-5 nudges confidence up, 1-2 nudges it down and applies any
        suggested adjustments (one step per field), 3 changes nothing.

        Raises:
            ValueError: the feedback belongs to a different profile
        """
        if feedback.voice_profile_id != profile.id:
            raise ValueError(
                f"Feedback for profile {feedback.voice_profile_id!r} cannot update profile {profile.id!r}"
            )
        self.log.append(feedback)

        cfg = self.config
        if feedback.rating >= 4:
            confidence = min(1.0, profile.confidence + cfg.reinforce_delta)
            logger.info("Reinforced profile %s: confidence %.3f", profile.id, confidence)
            return profile.model_copy(
                update={"confidence": confidence, "updated_at": feedback.created_at}
            )

        if feedback.rating > 2:
            logger.debug("Neutral feedback on %s recorded without changes", profile.id)
            return profile

        characteristics = profile.characteristics
        adjustments = parse_suggestions(feedback.suggestions or [], cfg.suggestion_match_cutoff)
        for adjustment in adjustments:
            characteristics = apply_adjustment(characteristics, adjustment, cfg)

        confidence = max(0.0, profile.confidence - cfg.penalty_delta)
        logger.info(
            "Penalized profile %s: confidence %.3f, adjusted %s",
            profile.id,
            confidence,
            ", ".join(a.field for a in adjustments) or "nothing",
        )
        return profile.model_copy(
            update={
                "characteristics": characteristics,
                "confidence": confidence,
                "updated_at": feedback.created_at,
            }
        )
