"""
Alignment Scorer

Compare a candidate text's inferred characteristics with a target voice
and explain the mismatches.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Optional, Sequence, Union

from ..config import DEFAULT_CONFIG, VoiceEngineConfig
from ..models.characteristics import (
    EmojiUsage,
    UsageLevel,
    VocabularyComplexity,
    VoiceCharacteristics,
    VoiceFormality,
    VoicePerspective,
    VoiceTone,
)
from ..models.generation import AlignmentScores, VoiceComparison
from ..models.profile import BrandVoiceProfile
from ..style.extractor import CharacteristicExtractor
from ..style.lexicon import count_phrases

logger = logging.getLogger(__name__)

# Tones that read as close relatives. Symmetric; see are_adjacent().
TONE_NEIGHBOURS: dict[VoiceTone, frozenset[VoiceTone]] = {
    VoiceTone.PROFESSIONAL: frozenset({VoiceTone.AUTHORITATIVE, VoiceTone.ANALYTICAL, VoiceTone.CONFIDENT}),
    VoiceTone.FRIENDLY: frozenset({VoiceTone.CONVERSATIONAL, VoiceTone.EMPATHETIC, VoiceTone.INSPIRING}),
    VoiceTone.AUTHORITATIVE: frozenset({VoiceTone.CONFIDENT}),
    VoiceTone.INSPIRING: frozenset({VoiceTone.CONFIDENT}),
}

FORMALITY_SCALE: tuple[VoiceFormality, ...] = (
    VoiceFormality.FORMAL,
    VoiceFormality.SEMI_FORMAL,
    VoiceFormality.CASUAL,
    VoiceFormality.CONVERSATIONAL,
)


def are_adjacent(a: Enum, b: Enum) -> bool:
    """Whether two different categorical values earn partial credit."""
    if isinstance(a, VoiceTone):
        return b in TONE_NEIGHBOURS.get(a, ()) or a in TONE_NEIGHBOURS.get(b, ())
    if isinstance(a, VoiceFormality):
        return abs(FORMALITY_SCALE.index(a) - FORMALITY_SCALE.index(b)) == 1
    if isinstance(a, VoicePerspective):
        return VoicePerspective.MIXED in (a, b)
    return False


def categorical_similarity(target: Enum, candidate: Enum, adjacent_credit: float) -> float:
    if target == candidate:
        return 1.0
    return adjacent_credit if are_adjacent(target, candidate) else 0.0


def tier_similarity(target: Enum, candidate: Enum, order: Sequence[Enum]) -> float:
    """1 - |index difference| / tier span."""
    span = len(order) - 1
    return 1.0 - min(1.0, abs(order.index(target) - order.index(candidate)) / span)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass
class FieldScore:
    """Similarity of one sub-field, with its explanation if it falls short."""
    name: str
    score: float
    difference: str = ""
    improvement: str = ""


@dataclass
class DimensionBreakdown:
    tone: list[FieldScore] = field(default_factory=list)
    vocabulary: list[FieldScore] = field(default_factory=list)
    structure: list[FieldScore] = field(default_factory=list)

    @property
    def fields(self) -> list[FieldScore]:
        return self.tone + self.vocabulary + self.structure


class AlignmentScorer:
    """
    Scores candidate text against a voice.

    Pure: the same candidate and target always give the same VoiceComparison.
    """

    def __init__(
        self,
        config: Optional[VoiceEngineConfig] = None,
        extractor: Optional[CharacteristicExtractor] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.extractor = extractor or CharacteristicExtractor(self.config)

    def score(
        self,
        candidate_text: str,
        target: Union[BrandVoiceProfile, VoiceCharacteristics],
    ) -> VoiceComparison:
        """
        Score ``candidate_text`` against a profile (or bare characteristics).

        Raises:
            InsufficientData: the candidate has no words
        """
        profile_id = None
        if isinstance(target, BrandVoiceProfile):
            profile_id = target.id
            target = target.characteristics

        candidate = self.extractor.extract_text(candidate_text).characteristics
        comparison = self.compare_characteristics(target, candidate, candidate_text)
        comparison = comparison.model_copy(update={"profile_id": profile_id})
        logger.debug("Scored candidate against %s: overall %.3f", profile_id or "characteristics", comparison.overall)
        return comparison

    def compare(self, original_text: str, generated_text: str) -> VoiceComparison:
        """Score a generated text against the voice of an original text."""
        target = self.extractor.extract_text(original_text, source_id="original").characteristics
        comparison = self.score(generated_text, target)
        return comparison.model_copy(update={"original_content": original_text})

    def compare_characteristics(
        self,
        target: VoiceCharacteristics,
        candidate: VoiceCharacteristics,
        candidate_text: str = "",
    ) -> VoiceComparison:
        cfg = self.config
        breakdown = DimensionBreakdown(
            tone=self._tone_fields(target, candidate),
            vocabulary=self._vocabulary_fields(target, candidate, candidate_text),
            structure=self._structure_fields(target, candidate),
        )

        tone_weights = dict(zip(("tone", "formality", "perspective"), cfg.tone_weights))
        tone = sum(tone_weights[f.name] * f.score for f in breakdown.tone)

        vocab_scores = {f.name: f.score for f in breakdown.vocabulary}
        vocabulary = (
            cfg.vocabulary_weights[0] * vocab_scores["complexity"]
            + cfg.vocabulary_weights[1] * vocab_scores["terms"]
            - (1.0 - vocab_scores.get("avoided words", 1.0))
        )

        structure = sum(f.score for f in breakdown.structure) / len(breakdown.structure)

        tone, vocabulary, structure = _clamp(tone), _clamp(vocabulary), _clamp(structure)
        w_tone, w_vocab, w_structure = cfg.overall_weights
        overall = _clamp(w_tone * tone + w_vocab * vocabulary + w_structure * structure)

        # Any avoided word is reported, however small its penalty
        short = [
            f for f in breakdown.fields
            if f.score < cfg.alignment_threshold or f.name == "avoided words"
        ]
        return VoiceComparison(
            generated_content=candidate_text,
            alignment=AlignmentScores(
                tone=tone, vocabulary=vocabulary, structure=structure, overall=overall
            ),
            differences=[f.difference for f in short],
            improvements=[f.improvement for f in short],
        )

    def _tone_fields(self, target: VoiceCharacteristics, candidate: VoiceCharacteristics) -> list[FieldScore]:
        credit = self.config.adjacent_credit
        return [
            FieldScore(
                "tone",
                categorical_similarity(target.tone, candidate.tone, credit),
                f"Tone reads as {candidate.tone.value}; the voice is {target.tone.value}",
                f"Write in a more {target.tone.value} tone",
            ),
            FieldScore(
                "formality",
                categorical_similarity(target.formality, candidate.formality, credit),
                f"Formality is {candidate.formality.value}; the voice is {target.formality.value}",
                _formality_instruction(target.formality, candidate.formality),
            ),
            FieldScore(
                "perspective",
                categorical_similarity(target.perspective, candidate.perspective, credit),
                f"Perspective is {candidate.perspective.value}; the voice writes in {target.perspective.value}",
                f"Rewrite in the {target.perspective.value} perspective",
            ),
        ]

    def _vocabulary_fields(
        self,
        target: VoiceCharacteristics,
        candidate: VoiceCharacteristics,
        candidate_text: str,
    ) -> list[FieldScore]:
        target_vocab = target.vocabulary_level
        candidate_complexity = candidate.vocabulary_level.complexity
        order = list(VocabularyComplexity)
        simpler = order.index(candidate_complexity) > order.index(target_vocab.complexity)

        fields = [
            FieldScore(
                "complexity",
                tier_similarity(target_vocab.complexity, candidate_complexity, order),
                f"Vocabulary is {candidate_complexity.value}; the voice is {target_vocab.complexity.value}",
                "Use simpler, shorter words" if simpler else "Use more precise, specialised vocabulary",
            ),
        ]

        text_lower = candidate_text.lower()
        terms = target_vocab.industry_terms
        if terms:
            hits = sum(1 for term in terms if count_phrases(text_lower, [term]))
            usage = min(1.0, hits / min(3, len(terms)))
        else:
            usage = 1.0
        fields.append(
            FieldScore(
                "terms",
                usage,
                "Few of the voice's characteristic terms appear",
                f"Work in characteristic terms such as {', '.join(terms[:3])}",
            )
        )

        found = [w for w in target_vocab.avoided_words if count_phrases(text_lower, [w])]
        if found:
            penalty = self.config.avoided_word_penalty * len(found)
            fields.append(
                FieldScore(
                    "avoided words",
                    _clamp(1.0 - penalty),
                    f"Uses avoided words: {', '.join(found)}",
                    f"Remove {', '.join(repr(w) for w in found)}",
                )
            )
        return fields

    def _structure_fields(self, target: VoiceCharacteristics, candidate: VoiceCharacteristics) -> list[FieldScore]:
        t = target.sentence_structure
        c = candidate.sentence_structure
        diff = c.average_length - t.average_length
        length = 1.0 - min(1.0, abs(diff) / self.config.sentence_length_scale)

        fields = [
            FieldScore(
                "sentence length",
                length,
                f"Sentences average {c.average_length:.2f} words; the voice averages {t.average_length:.2f}",
                "Use shorter sentences" if diff > 0 else "Use longer, more developed sentences",
            ),
        ]

        usage = list(UsageLevel)
        for name, label in (
            ("exclamation_usage", "exclamation marks"),
            ("question_usage", "questions"),
            ("ellipsis_usage", "ellipses"),
        ):
            fields.append(
                _usage_field(label, getattr(t.punctuation_style, name), getattr(c.punctuation_style, name), usage)
            )
        fields.append(
            _usage_field("emojis", t.punctuation_style.emojis_usage, c.punctuation_style.emojis_usage, list(EmojiUsage))
        )
        return fields


def _usage_field(label: str, target: Enum, candidate: Enum, order: list) -> FieldScore:
    more = order.index(candidate) > order.index(target)
    return FieldScore(
        label,
        tier_similarity(target, candidate, order),
        f"Punctuation mismatch: {label} are {candidate.value}; the voice uses them {target.value}",
        f"Use {'fewer' if more else 'more'} {label}",
    )


def _formality_instruction(target: VoiceFormality, candidate: VoiceFormality) -> str:
    if FORMALITY_SCALE.index(candidate) < FORMALITY_SCALE.index(target):
        return f"Loosen the register to {target.value}: contractions and plain words are fine"
    return f"Raise the register to {target.value}: drop slang and keep sentences complete"
