"""
Characteristic Extractor

Main entry point for voice analysis. Turns a corpus of content samples
into a VoiceCharacteristics value.
"""

from collections import Counter
from dataclasses import dataclass, field
import logging
from typing import Iterable, Optional, Sequence

import spacy

from ..config import DEFAULT_CONFIG, VoiceEngineConfig
from ..errors import InsufficientData, MalformedSource
from ..models.characteristics import (
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
)
from ..models.profile import ContentSource
from .classifier import SourceClassification, classify_source, plurality
from .metrics import Distribution, SourceMetrics, calculate_source_metrics, classify_sentence_structure

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Characteristics plus the per-sample evidence behind them."""
    characteristics: VoiceCharacteristics
    metrics: list[SourceMetrics] = field(default_factory=list)
    classifications: list[SourceClassification] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # ids of unusable samples


def tier(value: float, thresholds: Sequence[float], tiers: Sequence):
    """Bucket ``value``: below thresholds[i] maps to tiers[i], else the last tier."""
    for threshold, name in zip(thresholds, tiers):
        if value < threshold:
            return name
    return tiers[len(thresholds)]


class CharacteristicExtractor:
    """
    Extracts voice characteristics from content samples.

    Usage:
        extractor = CharacteristicExtractor()
        characteristics = extractor.extract(sources)

    The result depends only on the set of samples and the config: the
    order samples arrive in never changes it.
    """

    def __init__(
        self,
        config: Optional[VoiceEngineConfig] = None,
        nlp: Optional[spacy.Language] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._nlp = nlp

    @property
    def nlp(self) -> spacy.Language:
        """Lazy-load a blank spaCy pipeline (tokenizer only, no model download)."""
        if self._nlp is None:
            self._nlp = spacy.blank(self.config.spacy_language)
        return self._nlp

    @property
    def stop_words(self) -> set[str]:
        return self.nlp.Defaults.stop_words

    def extract(self, sources: Sequence[ContentSource]) -> VoiceCharacteristics:
        """
        Extract characteristics from a corpus.

        Raises:
            InsufficientData: no sources, or none with usable text
            MalformedSource: a source has no id
        """
        return self.analyze(sources).characteristics

    def analyze(self, sources: Sequence[ContentSource]) -> ExtractionResult:
        """Extract characteristics and keep the per-sample metrics and votes."""
        if not sources:
            raise InsufficientData("No content sources supplied")

        validate_sources(sources)

        # Canonical order makes every aggregate below permutation-independent
        ordered = sorted(sources, key=lambda s: (s.id, s.content))

        metrics: list[SourceMetrics] = []
        skipped: list[str] = []
        for source in ordered:
            if not source.content.strip():
                skipped.append(source.id)
                continue
            m = calculate_source_metrics(source.id, source.content, self.nlp)
            if m.word_count == 0:
                skipped.append(source.id)
                continue
            metrics.append(m)

        if skipped:
            logger.debug("Skipped %d unusable source(s): %s", len(skipped), ", ".join(skipped))
        if not metrics:
            raise InsufficientData(f"None of the {len(sources)} source(s) contain usable text")

        classifications = [classify_source(m, self.config) for m in metrics]
        characteristics = self._aggregate(metrics, classifications)

        logger.info(
            "Extracted voice from %d source(s): tone=%s formality=%s perspective=%s",
            len(metrics),
            characteristics.tone.value,
            characteristics.formality.value,
            characteristics.perspective.value,
        )
        return ExtractionResult(
            characteristics=characteristics,
            metrics=metrics,
            classifications=classifications,
            skipped=skipped,
        )

    def extract_text(self, text: str, source_id: str = "candidate") -> ExtractionResult:
        """Analyze a single piece of text as a one-sample corpus."""
        return self.analyze([ContentSource(id=source_id, content=text)])

    def _aggregate(
        self,
        metrics: list[SourceMetrics],
        classifications: list[SourceClassification],
    ) -> VoiceCharacteristics:
        cfg = self.config
        return VoiceCharacteristics(
            tone=plurality([c.tone for c in classifications], cfg.tone_priority),
            formality=plurality([c.formality for c in classifications], cfg.formality_priority),
            perspective=plurality([c.perspective for c in classifications], cfg.perspective_priority),
            emotional_range=self._emotional_range(metrics),
            vocabulary_level=self._vocabulary_level(metrics),
            sentence_structure=self._sentence_structure(metrics),
            content_patterns=self._content_patterns(metrics),
        )

    def _emotional_range(self, metrics: list[SourceMetrics]) -> EmotionalRange:
        cfg = self.config
        emotions: Counter = Counter()
        for m in metrics:
            emotions.update(m.emotion_counts)
        primary = [e for e, _ in sorted(emotions.items(), key=lambda x: (-x[1], x[0]))]

        total_words = sum(m.word_count for m in metrics)
        signal = sum(m.exclamations + m.intensifiers + m.emotion_words for m in metrics)
        intensity = tier(signal * 1000 / total_words, cfg.intensity_thresholds, list(Intensity))

        if len(metrics) < 2:
            variability = EmotionalVariability.CONSISTENT
        else:
            spread = Distribution.from_values([m.intensity for m in metrics])
            variability = tier(
                spread.coefficient_of_variation,
                cfg.emotion_variability_thresholds,
                list(EmotionalVariability),
            )

        return EmotionalRange(
            primary=primary[: cfg.primary_emotion_count],
            intensity=intensity,
            variability=variability,
        )

    def _vocabulary_level(self, metrics: list[SourceMetrics]) -> VocabularyLevel:
        cfg = self.config
        total_words = sum(m.word_count for m in metrics)
        avg_word_length = sum(m.char_count for m in metrics) / total_words
        advanced_ratio = sum(m.advanced_words for m in metrics) / total_words
        complexity = tier(
            avg_word_length + cfg.advanced_word_weight * advanced_ratio,
            cfg.complexity_thresholds,
            list(VocabularyComplexity),
        )

        unigrams: Counter = Counter()
        phrases: Counter = Counter()
        for m in metrics:
            for tokens in m.sentence_tokens:
                unigrams.update(tokens)
                phrases.update(ngrams(tokens, 2))
                phrases.update(ngrams(tokens, 3))

        stop = self.stop_words
        terms = [
            (word, n) for word, n in unigrams.items()
            if n >= 2 and word not in stop and len(word) >= 3 and _is_wordlike(word)
        ]
        common = [
            (phrase, n) for phrase, n in phrases.items()
            if n >= 2 and _is_phrase(phrase, stop)
        ]

        return VocabularyLevel(
            complexity=complexity,
            industry_terms=top_n(terms, cfg.top_n_terms),
            common_phrases=top_n(common, cfg.top_n_terms),
            avoided_words=[],
        )

    def _sentence_structure(self, metrics: list[SourceMetrics]) -> SentenceStructure:
        cfg = self.config
        lengths = [length for m in metrics for length in m.sentence_lengths]
        dist = Distribution.from_values(lengths)
        variability = tier(
            dist.coefficient_of_variation,
            cfg.variability_thresholds,
            list(StructureVariability),
        )

        structures: Counter = Counter()
        for m in metrics:
            for sentence, tokens in zip(m.sentences, m.sentence_tokens):
                structures[classify_sentence_structure(sentence, tokens)] += 1

        total_words = sum(m.word_count for m in metrics)

        def per_1000(attr: str) -> float:
            return sum(getattr(m, attr) for m in metrics) * 1000 / total_words

        usage = list(UsageLevel)
        punctuation = PunctuationStyle(
            exclamation_usage=tier(per_1000("exclamations"), cfg.usage_thresholds, usage),
            question_usage=tier(per_1000("questions"), cfg.usage_thresholds, usage),
            ellipsis_usage=tier(per_1000("ellipses"), cfg.usage_thresholds, usage),
            emojis_usage=(
                EmojiUsage.NONE
                if per_1000("emojis") == 0
                else tier(per_1000("emojis"), cfg.emoji_thresholds, list(EmojiUsage)[1:])
            ),
        )

        return SentenceStructure(
            average_length=sum(lengths) / len(lengths),
            variability=variability,
            preferred_structures=top_n(list(structures.items()), cfg.preferred_structure_count),
            punctuation_style=punctuation,
        )

    def _content_patterns(self, metrics: list[SourceMetrics]) -> ContentPatterns:
        cfg = self.config
        total_words = sum(m.word_count for m in metrics)

        transitions: Counter = Counter()
        for m in metrics:
            transitions.update(m.transition_counts)

        narrative_density = sum(m.narrative_markers for m in metrics) * 100 / total_words
        data_density = sum(m.data_markers for m in metrics) * 100 / total_words
        anecdote_share = sum(1 for m in metrics if m.first_person_narrative) / len(metrics)

        return ContentPatterns(
            opening_style=sorted({m.sentences[0] for m in metrics}),
            closing_style=sorted({m.sentences[-1] for m in metrics}),
            transition_phrases=top_n(list(transitions.items()), cfg.top_n_terms),
            storytelling_elements=narrative_density >= cfg.storytelling_density,
            data_usage=tier(data_density, cfg.data_usage_thresholds, list(DataUsage)),
            personal_anecdotes=tier(
                anecdote_share, cfg.anecdote_share_thresholds, list(AnecdoteFrequency)
            ),
        )


def validate_sources(sources: Iterable[ContentSource]) -> None:
    """Basic shape checks; raises MalformedSource."""
    for source in sources:
        if not isinstance(source, ContentSource):
            raise MalformedSource(f"Expected a ContentSource, got {type(source).__name__}")
        if not source.id or not source.id.strip():
            raise MalformedSource("Content source has an empty id")


def ngrams(tokens: list[str], n: int) -> list[str]:
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


def top_n(counts: list[tuple[str, int]], n: int) -> list[str]:
    """Keys ordered by count (descending) then alphabetically, first ``n``."""
    return [key for key, _ in sorted(counts, key=lambda x: (-x[1], x[0]))[:n]]


def _is_wordlike(token: str) -> bool:
    return token[0].isalpha() and all(ch.isalpha() or ch in "-'" for ch in token)


def _is_phrase(phrase: str, stop_words: set[str]) -> bool:
    tokens = phrase.split()
    if tokens[0] in stop_words or tokens[-1] in stop_words:
        return False
    return all(_is_wordlike(t) for t in tokens)
