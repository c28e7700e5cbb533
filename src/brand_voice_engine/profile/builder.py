"""
Profile Builder

Aggregates an extraction over a sample corpus into a BrandVoiceProfile
with a confidence score, and enforces the one-active-profile-per-owner
rule.
"""

from collections import Counter
from datetime import datetime
from enum import Enum
import logging
from typing import Iterable, Optional, Sequence, Union
import uuid

from ..config import DEFAULT_CONFIG, VoiceEngineConfig
from ..errors import MalformedSource, ProfileNotActive, ProfileNotFound
from ..models.characteristics import VoiceFormality, VoiceTone
from ..models.profile import BrandVoiceProfile, ContentSource, TrainingData
from ..style.extractor import CharacteristicExtractor
from .templates import get_template

logger = logging.getLogger(__name__)

SourceInput = Union[ContentSource, dict]


def base_confidence(total_posts: int, min_sample_count: int) -> float:
    """Saturating volume term: 0.5 at ``min_sample_count``, tends to 1."""
    if total_posts <= 0:
        return 0.0
    return total_posts / (total_posts + min_sample_count)


def normalized_impurity(labels: Sequence[Enum], n_categories: int) -> float:
    """
    Gini-Simpson impurity scaled to [0, 1].

    0 when every label agrees, 1 when labels are spread evenly over all
    ``n_categories`` values.
    """
    if not labels or n_categories < 2:
        return 0.0
    n = len(labels)
    impurity = 1.0 - sum((c / n) ** 2 for c in Counter(labels).values())
    return impurity / (1.0 - 1.0 / n_categories)


def compute_confidence(
    total_posts: int,
    tone_labels: Sequence[VoiceTone],
    formality_labels: Sequence[VoiceFormality],
    config: VoiceEngineConfig = DEFAULT_CONFIG,
) -> float:
    """confidence = clamp(0, 1, base(total_posts) * consistency)."""
    consistency = 1.0 - (
        normalized_impurity(tone_labels, len(VoiceTone))
        + normalized_impurity(formality_labels, len(VoiceFormality))
    ) / 2
    confidence = base_confidence(total_posts, config.min_sample_count) * consistency
    return min(1.0, max(0.0, confidence))


def as_sources(sources: Iterable[SourceInput]) -> list[ContentSource]:
    """Accept ContentSource objects or plain dicts from a collaborator."""
    return [s if isinstance(s, ContentSource) else ContentSource.parse(s) for s in sources]


class ProfileBuilder:
    """
    Builds and maintains brand voice profiles.

    Usage:
        builder = ProfileBuilder()
        profile = builder.build("My voice", sources)
        profile = builder.retrain(profile, more_sources)
        profiles = builder.activate(profiles, profile.id)
    """

    def __init__(
        self,
        config: Optional[VoiceEngineConfig] = None,
        extractor: Optional[CharacteristicExtractor] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.extractor = extractor or CharacteristicExtractor(self.config)

    def build(
        self,
        name: str,
        sources: Iterable[SourceInput],
        owner_id: str = "default",
        description: Optional[str] = None,
        profile_id: Optional[str] = None,
    ) -> BrandVoiceProfile:
        """
        Create a profile from a sample corpus.

        Raises:
            InsufficientData: no usable samples
            MalformedSource: a sample fails validation
        """
        sources = as_sources(sources)
        check_unique_ids(sources)
        characteristics, confidence, sources = self._analyze(sources)

        now = datetime.now()
        profile = BrandVoiceProfile(
            id=profile_id or str(uuid.uuid4()),
            owner_id=owner_id,
            name=name,
            description=description,
            characteristics=characteristics,
            training_data=TrainingData(
                sources=sources,
                analysis_version=self.config.analysis_version,
                last_analyzed=now,
            ),
            confidence=confidence,
            created_at=now,
            updated_at=now,
        )
        logger.info(
            "Built profile %s (%s) from %d samples, confidence %.3f",
            profile.id, name, len(sources), confidence,
        )
        return profile

    def retrain(
        self,
        profile: BrandVoiceProfile,
        new_sources: Iterable[SourceInput],
    ) -> BrandVoiceProfile:
        """
        Add samples and re-extract over the whole combined corpus.

        Existing samples are never edited: a sample reusing an existing id is
        rejected. Collaborator-supplied avoided words carry over.
        """
        new_sources = as_sources(new_sources)
        combined = list(profile.training_data.sources) + new_sources
        check_unique_ids(combined)

        characteristics, confidence, combined = self._analyze(combined)
        avoided = profile.characteristics.vocabulary_level.avoided_words
        if avoided:
            characteristics = characteristics.with_avoided_words(avoided)

        now = datetime.now()
        updated = profile.model_copy(
            update={
                "characteristics": characteristics,
                "training_data": TrainingData(
                    sources=combined,
                    analysis_version=self.config.analysis_version,
                    last_analyzed=now,
                ),
                "confidence": confidence,
                "updated_at": now,
            }
        )
        logger.info(
            "Retrained profile %s: %d -> %d samples, confidence %.3f -> %.3f",
            profile.id,
            profile.training_data.total_posts,
            len(combined),
            profile.confidence,
            confidence,
        )
        return updated

    def from_template(
        self,
        name: str,
        template: str,
        owner_id: str = "default",
        profile_id: Optional[str] = None,
    ) -> BrandVoiceProfile:
        """Start a profile from a predefined voice; no samples, zero confidence."""
        characteristics = get_template(template)
        return BrandVoiceProfile(
            id=profile_id or str(uuid.uuid4()),
            owner_id=owner_id,
            name=name,
            description=f"Started from the {template} template",
            characteristics=characteristics,
            training_data=TrainingData(analysis_version=self.config.analysis_version),
            confidence=0.0,
        )

    def _analyze(self, sources: list[ContentSource]):
        """Extract a voice; blank samples are dropped and never count as evidence."""
        result = self.extractor.analyze(sources)
        skipped = set(result.skipped)
        used = [s for s in sources if s.id not in skipped]
        confidence = compute_confidence(
            len(result.metrics),
            [c.tone for c in result.classifications],
            [c.formality for c in result.classifications],
            self.config,
        )
        return result.characteristics, confidence, used


def check_unique_ids(sources: Sequence[ContentSource]) -> None:
    seen: set[str] = set()
    for source in sources:
        if source.id in seen:
            raise MalformedSource(
                f"Duplicate content source id {source.id!r}",
                user_message="Each sample needs its own id. Add corrections as new samples.",
            )
        seen.add(source.id)


def activate(profiles: Sequence[BrandVoiceProfile], profile_id: str) -> list[BrandVoiceProfile]:
    """
    Make ``profile_id`` the owner's only active profile.

    Returns a new list; the input is left untouched, so callers never see a
    state with two (or zero) active profiles for the owner. Other owners'
    profiles pass through unchanged.

    Raises:
        ProfileNotFound: no profile has that id
    """
    target = next((p for p in profiles if p.id == profile_id), None)
    if target is None:
        raise ProfileNotFound(f"No profile with id {profile_id!r}")

    now = datetime.now()
    result = []
    for profile in profiles:
        if profile.owner_id != target.owner_id:
            result.append(profile)
            continue
        should_be_active = profile.id == profile_id
        if profile.is_active == should_be_active:
            result.append(profile)
        else:
            result.append(profile.model_copy(update={"is_active": should_be_active, "updated_at": now}))

    logger.info("Activated profile %s for owner %s", profile_id, target.owner_id)
    return result


def get_active_profile(profiles: Iterable[BrandVoiceProfile], owner_id: str = "default") -> BrandVoiceProfile:
    """The owner's active profile. Raises ProfileNotActive if there is none."""
    for profile in profiles:
        if profile.owner_id == owner_id and profile.is_active:
            return profile
    raise ProfileNotActive(f"Owner {owner_id!r} has no active profile")
