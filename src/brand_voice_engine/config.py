"""Configuration management for the Brand Voice Engine."""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.characteristics import VoiceFormality, VoicePerspective, VoiceTone


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BVE_",
    )

    # Extraction
    analysis_version: str = Field(default="1.0.0", description="Extractor version tag stored on profiles")
    spacy_language: str = Field(default="en", description="Language code for the blank spaCy tokenizer")
    top_n_terms: int = Field(default=10, description="Industry terms / common phrases to keep")

    # Confidence
    min_sample_count: int = Field(default=3, description="Sample count at which base confidence is 0.5")

    # Scoring and generation
    alignment_threshold: float = Field(default=0.6, description="Below this a dimension is reported as a difference")
    max_generation_attempts: int = Field(default=3)

    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class VoiceEngineConfig:
    """Every threshold, weight and delta the core uses.

    Passed explicitly to each component so tests can probe boundary values.
    """

    analysis_version: str = "1.0.0"
    spacy_language: str = "en"
    top_n_terms: int = 10

    # Tie-break priorities for the plurality vote (earlier wins)
    tone_priority: tuple[VoiceTone, ...] = (
        VoiceTone.PROFESSIONAL,
        VoiceTone.CONVERSATIONAL,
        VoiceTone.FRIENDLY,
        VoiceTone.AUTHORITATIVE,
        VoiceTone.ANALYTICAL,
        VoiceTone.CONFIDENT,
        VoiceTone.INSPIRING,
        VoiceTone.EMPATHETIC,
    )
    formality_priority: tuple[VoiceFormality, ...] = tuple(VoiceFormality)
    perspective_priority: tuple[VoicePerspective, ...] = tuple(VoicePerspective)

    # Formality score (rates per 100 words); see classify_formality
    formal_score_threshold: float = 1.5
    semi_formal_score_threshold: float = 0.0
    conversational_rate_threshold: float = 3.0
    baseline_word_length: float = 4.5

    # Perspective: share of pronouns a class needs to win
    perspective_share: float = 0.6

    # Vocabulary complexity score = avg word length + weight * advanced ratio
    advanced_word_weight: float = 20.0
    complexity_thresholds: tuple[float, float, float] = (4.5, 5.5, 6.5)

    # Sentence length coefficient of variation
    variability_thresholds: tuple[float, float] = (0.3, 0.6)

    # Punctuation per 1000 words
    usage_thresholds: tuple[float, float] = (5.0, 20.0)
    emoji_thresholds: tuple[float, float] = (5.0, 20.0)

    # Emotion
    intensity_thresholds: tuple[float, float] = (15.0, 40.0)
    emotion_variability_thresholds: tuple[float, float] = (0.3, 0.6)
    primary_emotion_count: int = 3

    # Content patterns
    storytelling_density: float = 1.5  # narrative markers per 100 words
    data_usage_thresholds: tuple[float, float] = (1.0, 3.0)  # per 100 words
    anecdote_share_thresholds: tuple[float, float] = (0.25, 0.6)
    preferred_structure_count: int = 3

    # Confidence
    min_sample_count: int = 3

    # Scoring
    adjacent_credit: float = 0.3
    sentence_length_scale: float = 20.0
    tone_weights: tuple[float, float, float] = (0.5, 0.3, 0.2)  # tone, formality, perspective
    vocabulary_weights: tuple[float, float] = (0.7, 0.3)  # complexity, term usage
    avoided_word_penalty: float = 0.1
    overall_weights: tuple[float, float, float] = (0.4, 0.3, 0.3)  # tone, vocabulary, structure
    alignment_threshold: float = 0.6

    # Feedback
    reinforce_delta: float = 0.02
    penalty_delta: float = 0.05
    suggestion_match_cutoff: float = 80.0
    sentence_length_step: float = 3.0  # words per "shorter"/"longer" suggestion

    # Generation
    max_generation_attempts: int = 3

    def __post_init__(self):
        for name in ("overall_weights", "tone_weights", "vocabulary_weights"):
            weights = getattr(self, name)
            if abs(sum(weights) - 1.0) > 1e-9:
                raise ValueError(f"{name} must sum to 1, got {sum(weights)}")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "VoiceEngineConfig":
        """Build a config using environment overrides for the tunable values."""
        settings = settings or get_settings()
        return cls(
            analysis_version=settings.analysis_version,
            spacy_language=settings.spacy_language,
            top_n_terms=settings.top_n_terms,
            min_sample_count=settings.min_sample_count,
            alignment_threshold=settings.alignment_threshold,
            max_generation_attempts=settings.max_generation_attempts,
        )


DEFAULT_CONFIG = VoiceEngineConfig()
