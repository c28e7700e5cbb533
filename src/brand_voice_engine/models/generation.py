"""Generation requests and results, comparisons and feedback records."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    BLOG = "blog"
    EMAIL = "email"


class VoiceGenerationRequest(BaseModel):
    prompt: str
    # None means "use the owner's active profile"
    voice_profile_id: str | None = None
    content_type: ContentType = ContentType.LINKEDIN
    target_length: int | None = Field(default=None, gt=0)
    additional_instructions: str | None = None


class VoiceGenerationResult(BaseModel):
    """Transient result of a voice-guided generation; never persisted here."""

    content: str
    voice_alignment: float = Field(ge=0.0, le=1.0)
    applied_characteristics: list[str] = Field(default_factory=list)
    suggestions: list[str] | None = None
    attempts: int = 1


class AlignmentScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    tone: float = Field(ge=0.0, le=1.0)
    vocabulary: float = Field(ge=0.0, le=1.0)
    structure: float = Field(ge=0.0, le=1.0)
    overall: float = Field(ge=0.0, le=1.0)


class VoiceComparison(BaseModel):
    """Pairwise diff between a target voice and a generated text."""

    model_config = ConfigDict(frozen=True)

    original_content: str = ""
    generated_content: str
    profile_id: str | None = None
    alignment: AlignmentScores
    differences: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)

    @property
    def overall(self) -> float:
        return self.alignment.overall


class VoiceFeedback(BaseModel):
    """User judgment on a generated item. Append-only, never edited."""

    model_config = ConfigDict(frozen=True)

    content_id: str
    voice_profile_id: str
    rating: int = Field(ge=1, le=5)
    feedback: str = ""
    suggestions: list[str] | None = None
    created_at: datetime = Field(default_factory=datetime.now)
