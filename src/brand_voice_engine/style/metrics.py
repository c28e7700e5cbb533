"""
Per-sample metrics

Lexical and structural counts for one content sample. Everything the
classifier and the extractor need is derived from these numbers.
"""

from collections import Counter
from dataclasses import dataclass, field
import re
import statistics

import spacy

from .lexicon import (
    ADVANCED_WORDS,
    CASUAL_MARKERS,
    CONTRACTION,
    DATA_MARKER,
    ELLIPSIS,
    EMOJI,
    EMOTION_WORDS,
    FIRST_PERSON,
    FIRST_PERSON_NARRATIVE,
    FORMAL_MARKERS,
    HEDGES,
    IMPERATIVE_VERBS,
    INTENSIFIERS,
    SECOND_PERSON,
    SUBORDINATORS,
    THIRD_PERSON,
    TIME_MARKERS,
    TRANSITION_PHRASES,
    count_phrases,
    phrase_counts,
)
from .splitter import split_into_sentences


@dataclass
class Distribution:
    """Statistical distribution of a metric."""
    mean: float
    std: float
    min: float
    max: float
    median: float
    count: int

    @classmethod
    def from_values(cls, values: list[float]) -> "Distribution":
        """Create distribution from a list of values."""
        if not values:
            return cls(0, 0, 0, 0, 0, 0)

        n = len(values)

        return cls(
            mean=statistics.mean(values),
            std=statistics.stdev(values) if n > 1 else 0,
            min=min(values),
            max=max(values),
            median=statistics.median(values),
            count=n,
        )

    @property
    def coefficient_of_variation(self) -> float:
        """std / mean, 0 for an empty or zero-mean distribution."""
        return self.std / self.mean if self.mean else 0.0


@dataclass
class SourceMetrics:
    """Counts for a single content sample."""
    source_id: str
    text: str
    sentences: list[str]
    sentence_tokens: list[list[str]]  # lowercased word tokens per sentence

    word_count: int = 0
    char_count: int = 0  # characters in word tokens

    # Pronouns
    first_person: int = 0
    second_person: int = 0
    third_person: int = 0

    # Punctuation
    exclamations: int = 0
    questions: int = 0
    ellipses: int = 0
    emojis: int = 0

    # Register
    contractions: int = 0
    formal_markers: int = 0
    casual_markers: int = 0
    hedges: int = 0
    imperatives: int = 0
    advanced_words: int = 0

    # Content
    first_person_narrative: int = 0
    time_markers: int = 0
    data_markers: int = 0
    intensifiers: int = 0
    emotion_counts: dict[str, int] = field(default_factory=dict)
    transition_counts: dict[str, int] = field(default_factory=dict)

    @property
    def words(self) -> list[str]:
        return [w for sent in self.sentence_tokens for w in sent]

    @property
    def sentence_lengths(self) -> list[int]:
        return [len(tokens) for tokens in self.sentence_tokens]

    @property
    def avg_word_length(self) -> float:
        return self.char_count / self.word_count if self.word_count else 0.0

    @property
    def narrative_markers(self) -> int:
        return self.first_person_narrative + self.time_markers

    @property
    def emotion_words(self) -> int:
        return sum(self.emotion_counts.values())

    def per_100(self, count: float) -> float:
        """Rate per 100 words."""
        return count * 100 / self.word_count if self.word_count else 0.0

    def per_1000(self, count: float) -> float:
        """Rate per 1000 words."""
        return count * 1000 / self.word_count if self.word_count else 0.0

    @property
    def intensity(self) -> float:
        """Emotional intensity: exclamations, intensifiers and emotion words per 1000 words."""
        return self.per_1000(self.exclamations + self.intensifiers + self.emotion_words)


def tokenize_words(text: str, nlp: spacy.Language) -> list[str]:
    """Lowercased word tokens (tokens with at least one letter or digit)."""
    return [
        token.lower_
        for token in nlp.make_doc(text)
        if any(ch.isalnum() for ch in token.text)
    ]


def normalize_text(text: str) -> str:
    """Straighten curly quotes so contractions and phrases match."""
    return text.replace("’", "'").replace("‘", "'").replace("“", '"').replace("”", '"')


def calculate_source_metrics(source_id: str, text: str, nlp: spacy.Language) -> SourceMetrics:
    """
    Calculate voice metrics for one sample.

    Args:
        source_id: Id of the content source
        text: Raw sample text
        nlp: spaCy language (only the tokenizer is used)

    Returns:
        SourceMetrics with all counts filled in
    """
    text = normalize_text(text)
    text_lower = text.lower()

    sentences = split_into_sentences(text)
    sentence_tokens = [tokenize_words(s, nlp) for s in sentences]
    # Drop sentences the tokenizer found no words in
    kept = [(s, toks) for s, toks in zip(sentences, sentence_tokens) if toks]
    sentences = [s for s, _ in kept]
    sentence_tokens = [toks for _, toks in kept]

    metrics = SourceMetrics(
        source_id=source_id,
        text=text,
        sentences=sentences,
        sentence_tokens=sentence_tokens,
    )

    words = metrics.words
    word_counts = Counter(words)
    metrics.word_count = len(words)
    metrics.char_count = sum(len(w) for w in words)

    metrics.first_person = sum(word_counts[w] for w in FIRST_PERSON)
    metrics.second_person = sum(word_counts[w] for w in SECOND_PERSON)
    metrics.third_person = sum(word_counts[w] for w in THIRD_PERSON)

    metrics.exclamations = text.count("!")
    metrics.questions = text.count("?")
    metrics.ellipses = len(ELLIPSIS.findall(text))
    metrics.emojis = len(EMOJI.findall(text))

    metrics.contractions = len(CONTRACTION.findall(text_lower))
    metrics.formal_markers = count_phrases(text_lower, FORMAL_MARKERS)
    metrics.casual_markers = count_phrases(text_lower, CASUAL_MARKERS)
    metrics.hedges = count_phrases(text_lower, HEDGES)
    metrics.imperatives = sum(1 for toks in sentence_tokens if toks[0] in IMPERATIVE_VERBS)
    metrics.advanced_words = sum(word_counts[w] for w in ADVANCED_WORDS)

    metrics.first_person_narrative = len(FIRST_PERSON_NARRATIVE.findall(text_lower))
    metrics.time_markers = len(TIME_MARKERS.findall(text_lower))
    metrics.data_markers = len(DATA_MARKER.findall(text_lower))
    metrics.intensifiers = count_phrases(text_lower, INTENSIFIERS)
    metrics.emotion_counts = {
        emotion: n
        for emotion, phrases in EMOTION_WORDS.items()
        if (n := count_phrases(text_lower, phrases))
    }
    metrics.transition_counts = phrase_counts(text_lower, TRANSITION_PHRASES)

    return metrics


def classify_sentence_structure(sentence: str, tokens: list[str]) -> str:
    """
    Structural type of a sentence.

    One of: question, exclamation, complex (subordinate clause),
    compound (joined independent clauses) or simple.
    """
    stripped = sentence.rstrip()
    if stripped.endswith("?"):
        return "question"
    if stripped.endswith("!"):
        return "exclamation"
    if any(t in SUBORDINATORS for t in tokens):
        return "complex"
    if ";" in sentence or re.search(r",\s+(?:and|but|or|so|yet)\b", sentence.lower()):
        return "compound"
    return "simple"
