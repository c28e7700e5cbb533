"""Data model for brand voices, training sessions and generation."""

from .characteristics import (
    AnecdoteFrequency,
    ContentPatterns,
    DataUsage,
    EmojiUsage,
    EmotionalRange,
    EmotionalVariability,
    Intensity,
    PunctuationStyle,
    SentenceStructure,
    StructureVariability,
    UsageLevel,
    VocabularyComplexity,
    VocabularyLevel,
    VoiceCharacteristics,
    VoiceFormality,
    VoicePerspective,
    VoiceTone,
)
from .generation import (
    AlignmentScores,
    ContentType,
    VoiceComparison,
    VoiceFeedback,
    VoiceGenerationRequest,
    VoiceGenerationResult,
)
from .profile import (
    BrandVoiceProfile,
    ContentSource,
    Engagement,
    SourceMetadata,
    SourceType,
    TrainingData,
)
from .session import SessionStatus, VoiceTrainingSession, VoiceTrainingStep

__all__ = [
    # Characteristics
    "VoiceCharacteristics",
    "VoiceTone",
    "VoiceFormality",
    "VoicePerspective",
    "EmotionalRange",
    "Intensity",
    "EmotionalVariability",
    "VocabularyLevel",
    "VocabularyComplexity",
    "SentenceStructure",
    "StructureVariability",
    "PunctuationStyle",
    "UsageLevel",
    "EmojiUsage",
    "ContentPatterns",
    "DataUsage",
    "AnecdoteFrequency",
    # Profiles
    "BrandVoiceProfile",
    "ContentSource",
    "SourceType",
    "SourceMetadata",
    "Engagement",
    "TrainingData",
    # Sessions
    "VoiceTrainingSession",
    "VoiceTrainingStep",
    "SessionStatus",
    # Generation
    "ContentType",
    "VoiceGenerationRequest",
    "VoiceGenerationResult",
    "VoiceComparison",
    "AlignmentScores",
    "VoiceFeedback",
]
