"""Content sources, training data and the durable brand voice profile."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from ..errors import MalformedSource
from .characteristics import VoiceCharacteristics


class SourceType(str, Enum):
    """Where a sample came from."""

    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    BLOG = "blog"
    EMAIL = "email"
    OTHER = "other"


class Engagement(BaseModel):
    likes: int | None = None
    comments: int | None = None
    shares: int | None = None


class SourceMetadata(BaseModel):
    platform: str | None = None
    date: datetime | None = None
    engagement: Engagement | None = None


class ContentSource(BaseModel):
    """One ingested sample. Never edited after ingestion."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: SourceType = SourceType.OTHER
    content: str
    metadata: SourceMetadata | None = None

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    @classmethod
    def parse(cls, data: dict) -> "ContentSource":
        """Build a source from plain data, reporting bad shapes as MalformedSource."""
        try:
            source = cls.model_validate(data)
        except ValidationError as e:
            raise MalformedSource(f"Invalid content source: {e.errors()[0]['msg']}") from e
        if not source.id.strip():
            raise MalformedSource("Content source has an empty id")
        return source


class TrainingData(BaseModel):
    """Ordered sample corpus behind a profile.

    ``total_words`` and ``total_posts`` are derived from ``sources`` and
    cannot be set independently.
    """

    sources: list[ContentSource] = Field(default_factory=list)
    analysis_version: str = "1.0.0"
    last_analyzed: datetime | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_words(self) -> int:
        return sum(s.word_count for s in self.sources)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_posts(self) -> int:
        return len(self.sources)


class BrandVoiceProfile(BaseModel):
    """The durable, named representation of a user's writing voice."""

    id: str
    owner_id: str = "default"
    name: str
    description: str | None = None
    characteristics: VoiceCharacteristics = Field(default_factory=VoiceCharacteristics)
    training_data: TrainingData = Field(default_factory=TrainingData)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    is_active: bool = False

    def summary(self) -> str:
        """Human-readable summary of the profile."""
        c = self.characteristics
        structure = c.sentence_structure
        punctuation = structure.punctuation_style
        vocabulary = c.vocabulary_level
        lines = [
            f"=== Brand Voice: {self.name} ===",
            "",
            "[Training]",
            f"   Samples: {self.training_data.total_posts:,}",
            f"   Words: {self.training_data.total_words:,}",
            f"   Confidence: {self.confidence:.0%}",
            f"   Active: {'yes' if self.is_active else 'no'}",
            "",
            "[Voice]",
            f"   Tone: {c.tone.value}",
            f"   Formality: {c.formality.value}",
            f"   Perspective: {c.perspective.value}",
            f"   Emotion: {', '.join(c.emotional_range.primary) or 'neutral'}"
            f" ({c.emotional_range.intensity.value} intensity)",
            "",
            "[Structure]",
            f"   Avg sentence length: {structure.average_length:.2f} words",
            f"   Variability: {structure.variability.value}",
            f"   Exclamations: {punctuation.exclamation_usage.value}",
            f"   Questions: {punctuation.question_usage.value}",
            f"   Emojis: {punctuation.emojis_usage.value}",
            "",
            "[Vocabulary]",
            f"   Complexity: {vocabulary.complexity.value}",
        ]
        if vocabulary.industry_terms:
            lines.append(f"   Key terms: {', '.join(vocabulary.industry_terms[:10])}")
        if vocabulary.avoided_words:
            lines.append(f"   Avoid: {', '.join(vocabulary.avoided_words)}")
        return "\n".join(lines)
