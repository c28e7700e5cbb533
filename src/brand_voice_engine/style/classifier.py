"""
Per-sample voice classification

Classify each sample's tone, formality and perspective with rule-based
heuristics; the extractor then takes a plurality vote across samples.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TypeVar

from ..config import VoiceEngineConfig
from ..models.characteristics import VoiceFormality, VoicePerspective, VoiceTone
from .lexicon import TONE_INDICATORS, count_phrases
from .metrics import SourceMetrics

E = TypeVar("E", bound=Enum)


@dataclass
class SourceClassification:
    """Independent classification of one sample."""
    source_id: str
    tone: VoiceTone
    formality: VoiceFormality
    perspective: VoicePerspective

    # Feature scores that led to classification
    tone_scores: dict[VoiceTone, float] = field(default_factory=dict)
    formality_score: float = 0.0


def classify_source(metrics: SourceMetrics, config: VoiceEngineConfig) -> SourceClassification:
    """Classify a single sample along the categorical dimensions."""
    tone, tone_scores = classify_tone(metrics, config)
    score = formality_score(metrics, config)
    return SourceClassification(
        source_id=metrics.source_id,
        tone=tone,
        formality=classify_formality(metrics, config),
        perspective=classify_perspective(metrics, config),
        tone_scores=tone_scores,
        formality_score=score,
    )


def score_tones(metrics: SourceMetrics) -> dict[VoiceTone, float]:
    """Indicator hits per tone plus structural bonuses."""
    text_lower = metrics.text.lower()
    scores = {
        tone: float(count_phrases(text_lower, indicators))
        for tone, indicators in TONE_INDICATORS.items()
    }

    scores[VoiceTone.PROFESSIONAL] += 0.5 * metrics.formal_markers
    scores[VoiceTone.CONVERSATIONAL] += 0.5 * metrics.questions + 0.25 * metrics.contractions
    scores[VoiceTone.FRIENDLY] += 0.25 * metrics.exclamations
    scores[VoiceTone.AUTHORITATIVE] += 0.5 * metrics.imperatives
    scores[VoiceTone.ANALYTICAL] += 0.5 * metrics.data_markers

    # Hedging undercuts authority and confidence
    for tone in (VoiceTone.AUTHORITATIVE, VoiceTone.CONFIDENT):
        scores[tone] = max(0.0, scores[tone] - 0.5 * metrics.hedges)

    return scores


def classify_tone(
    metrics: SourceMetrics,
    config: VoiceEngineConfig,
) -> tuple[VoiceTone, dict[VoiceTone, float]]:
    """Highest scoring tone; ties (including all-zero) go to the priority order."""
    scores = score_tones(metrics)
    best = max(scores.values())
    candidates = [tone for tone, score in scores.items() if score == best]
    return first_by_priority(candidates, config.tone_priority), scores


def formality_score(metrics: SourceMetrics, config: VoiceEngineConfig) -> float:
    """
    Higher is more formal.

    Rates are per 100 words: formal markers and longer words push the score
    up; contractions, casual markers and exclamations pull it down.
    """
    return (
        2.0 * metrics.per_100(metrics.formal_markers)
        + 1.5 * (metrics.avg_word_length - config.baseline_word_length)
        - 1.0 * metrics.per_100(metrics.contractions)
        - 2.0 * metrics.per_100(metrics.casual_markers)
        - 0.5 * metrics.per_100(metrics.exclamations)
    )


def classify_formality(metrics: SourceMetrics, config: VoiceEngineConfig) -> VoiceFormality:
    score = formality_score(metrics, config)
    if score >= config.formal_score_threshold:
        return VoiceFormality.FORMAL
    if score >= config.semi_formal_score_threshold:
        return VoiceFormality.SEMI_FORMAL

    # Informal: addressing the reader and asking questions reads as conversation
    dialogue_rate = metrics.per_100(metrics.second_person + metrics.questions)
    if dialogue_rate >= config.conversational_rate_threshold:
        return VoiceFormality.CONVERSATIONAL
    return VoiceFormality.CASUAL


def classify_perspective(metrics: SourceMetrics, config: VoiceEngineConfig) -> VoicePerspective:
    """Grammatical person from pronoun shares."""
    counts = {
        VoicePerspective.FIRST_PERSON: metrics.first_person,
        VoicePerspective.SECOND_PERSON: metrics.second_person,
        VoicePerspective.THIRD_PERSON: metrics.third_person,
    }
    total = sum(counts.values())
    if total == 0:
        # No personal pronouns at all reads as impersonal, third-person prose
        return VoicePerspective.THIRD_PERSON

    for perspective, count in counts.items():
        if count / total >= config.perspective_share:
            return perspective
    return VoicePerspective.MIXED


def first_by_priority(candidates: Sequence[E], priority: Sequence[E]) -> E:
    """The candidate that appears earliest in ``priority``."""
    return min(candidates, key=priority.index)


def plurality(labels: Sequence[E], priority: Sequence[E]) -> E:
    """Most common label; ties broken by ``priority``."""
    counts = Counter(labels)
    best = max(counts.values())
    return first_by_priority([label for label, n in counts.items() if n == best], priority)
