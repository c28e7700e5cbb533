"""Voice characteristics: the structured encoding of a writing style."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VoiceTone(str, Enum):
    """Overall tone of a voice."""

    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    AUTHORITATIVE = "authoritative"
    CONVERSATIONAL = "conversational"
    INSPIRING = "inspiring"
    ANALYTICAL = "analytical"
    EMPATHETIC = "empathetic"
    CONFIDENT = "confident"


class VoiceFormality(str, Enum):
    """Register of a voice, most formal first."""

    FORMAL = "formal"
    SEMI_FORMAL = "semi-formal"
    CASUAL = "casual"
    CONVERSATIONAL = "conversational"


class VoicePerspective(str, Enum):
    """Grammatical person the voice writes in."""

    FIRST_PERSON = "first-person"
    SECOND_PERSON = "second-person"
    THIRD_PERSON = "third-person"
    MIXED = "mixed"


class Intensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EmotionalVariability(str, Enum):
    CONSISTENT = "consistent"
    MODERATE = "moderate"
    DYNAMIC = "dynamic"


class VocabularyComplexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class StructureVariability(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class UsageLevel(str, Enum):
    """Frequency tier for exclamation, question and ellipsis usage."""

    RARE = "rare"
    MODERATE = "moderate"
    FREQUENT = "frequent"


class EmojiUsage(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    FREQUENT = "frequent"


class DataUsage(str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    HEAVY = "heavy"


class AnecdoteFrequency(str, Enum):
    RARE = "rare"
    OCCASIONAL = "occasional"
    FREQUENT = "frequent"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class EmotionalRange(_Frozen):
    """Primary emotion tags plus how strongly and how evenly they show."""

    primary: list[str] = Field(default_factory=list)  # e.g. optimistic, grateful
    intensity: Intensity = Intensity.MEDIUM
    variability: EmotionalVariability = EmotionalVariability.CONSISTENT


class VocabularyLevel(_Frozen):
    complexity: VocabularyComplexity = VocabularyComplexity.MODERATE
    industry_terms: list[str] = Field(default_factory=list)
    common_phrases: list[str] = Field(default_factory=list)
    # Only ever supplied by a collaborator, never inferred from absence
    avoided_words: list[str] = Field(default_factory=list)


class PunctuationStyle(_Frozen):
    exclamation_usage: UsageLevel = UsageLevel.RARE
    question_usage: UsageLevel = UsageLevel.RARE
    ellipsis_usage: UsageLevel = UsageLevel.RARE
    emojis_usage: EmojiUsage = EmojiUsage.NONE


class SentenceStructure(_Frozen):
    average_length: float = 0.0  # tokens per sentence, full precision
    variability: StructureVariability = StructureVariability.MEDIUM
    preferred_structures: list[str] = Field(default_factory=list)
    punctuation_style: PunctuationStyle = Field(default_factory=PunctuationStyle)


class ContentPatterns(_Frozen):
    opening_style: list[str] = Field(default_factory=list)
    closing_style: list[str] = Field(default_factory=list)
    transition_phrases: list[str] = Field(default_factory=list)
    storytelling_elements: bool = False
    data_usage: DataUsage = DataUsage.MINIMAL
    personal_anecdotes: AnecdoteFrequency = AnecdoteFrequency.RARE


class VoiceCharacteristics(_Frozen):
    """Multi-dimensional encoding of a writing voice.

    Immutable: a single extraction pass produces one value, and profile
    updates replace it wholesale (see ``model_copy``).
    """

    tone: VoiceTone = VoiceTone.PROFESSIONAL
    formality: VoiceFormality = VoiceFormality.SEMI_FORMAL
    perspective: VoicePerspective = VoicePerspective.MIXED
    emotional_range: EmotionalRange = Field(default_factory=EmotionalRange)
    vocabulary_level: VocabularyLevel = Field(default_factory=VocabularyLevel)
    sentence_structure: SentenceStructure = Field(default_factory=SentenceStructure)
    content_patterns: ContentPatterns = Field(default_factory=ContentPatterns)

    def with_avoided_words(self, words: list[str]) -> "VoiceCharacteristics":
        """Return a copy with a collaborator-supplied avoided-word list."""
        vocabulary = self.vocabulary_level.model_copy(
            update={"avoided_words": sorted({w.lower().strip() for w in words if w.strip()})}
        )
        return self.model_copy(update={"vocabulary_level": vocabulary})
