"""Predefined starter voices for LinkedIn-style writing."""

from ..errors import ProfileNotFound
from ..models.characteristics import (
    AnecdoteFrequency,
    ContentPatterns,
    DataUsage,
    EmojiUsage,
    EmotionalRange,
    Intensity,
    PunctuationStyle,
    SentenceStructure,
    UsageLevel,
    VocabularyComplexity,
    VocabularyLevel,
    VoiceCharacteristics,
    VoiceFormality,
    VoicePerspective,
    VoiceTone,
)

VOICE_TEMPLATES: dict[str, VoiceCharacteristics] = {
    "thought_leader": VoiceCharacteristics(
        tone=VoiceTone.AUTHORITATIVE,
        formality=VoiceFormality.SEMI_FORMAL,
        perspective=VoicePerspective.FIRST_PERSON,
        emotional_range=EmotionalRange(primary=["thoughtful", "optimistic"]),
        vocabulary_level=VocabularyLevel(complexity=VocabularyComplexity.ADVANCED),
        sentence_structure=SentenceStructure(
            average_length=18.0,
            punctuation_style=PunctuationStyle(
                question_usage=UsageLevel.MODERATE,
                emojis_usage=EmojiUsage.MINIMAL,
            ),
        ),
        content_patterns=ContentPatterns(
            storytelling_elements=True,
            data_usage=DataUsage.HEAVY,
            personal_anecdotes=AnecdoteFrequency.OCCASIONAL,
        ),
    ),
    "entrepreneur": VoiceCharacteristics(
        tone=VoiceTone.CONVERSATIONAL,
        formality=VoiceFormality.CASUAL,
        perspective=VoicePerspective.FIRST_PERSON,
        emotional_range=EmotionalRange(
            primary=["excited", "determined"],
            intensity=Intensity.HIGH,
        ),
        vocabulary_level=VocabularyLevel(complexity=VocabularyComplexity.SIMPLE),
        sentence_structure=SentenceStructure(
            average_length=11.0,
            punctuation_style=PunctuationStyle(
                exclamation_usage=UsageLevel.MODERATE,
                question_usage=UsageLevel.MODERATE,
                emojis_usage=EmojiUsage.MODERATE,
            ),
        ),
        content_patterns=ContentPatterns(
            storytelling_elements=True,
            data_usage=DataUsage.MODERATE,
            personal_anecdotes=AnecdoteFrequency.FREQUENT,
        ),
    ),
    "corporate": VoiceCharacteristics(
        tone=VoiceTone.PROFESSIONAL,
        formality=VoiceFormality.FORMAL,
        perspective=VoicePerspective.THIRD_PERSON,
        emotional_range=EmotionalRange(intensity=Intensity.LOW),
        vocabulary_level=VocabularyLevel(complexity=VocabularyComplexity.EXPERT),
        sentence_structure=SentenceStructure(
            average_length=20.0,
            punctuation_style=PunctuationStyle(emojis_usage=EmojiUsage.NONE),
        ),
        content_patterns=ContentPatterns(
            data_usage=DataUsage.MODERATE,
            personal_anecdotes=AnecdoteFrequency.RARE,
        ),
    ),
    "consultant": VoiceCharacteristics(
        tone=VoiceTone.EMPATHETIC,
        formality=VoiceFormality.SEMI_FORMAL,
        perspective=VoicePerspective.SECOND_PERSON,
        emotional_range=EmotionalRange(primary=["thoughtful"]),
        vocabulary_level=VocabularyLevel(complexity=VocabularyComplexity.MODERATE),
        sentence_structure=SentenceStructure(
            average_length=16.0,
            punctuation_style=PunctuationStyle(
                question_usage=UsageLevel.FREQUENT,
                emojis_usage=EmojiUsage.MINIMAL,
            ),
        ),
        content_patterns=ContentPatterns(
            data_usage=DataUsage.MODERATE,
            personal_anecdotes=AnecdoteFrequency.OCCASIONAL,
        ),
    ),
}


def get_template(name: str) -> VoiceCharacteristics:
    """Look up a template by name ("thought-leader" and "thought_leader" both work)."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return VOICE_TEMPLATES[key]
    except KeyError:
        raise ProfileNotFound(
            f"Unknown voice template {name!r}",
            user_message=f"Pick one of the templates: {', '.join(sorted(VOICE_TEMPLATES))}.",
        ) from None
