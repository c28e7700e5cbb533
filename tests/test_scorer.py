"""Tests for alignment scoring."""

import pytest

from brand_voice_engine.errors import InsufficientData
from brand_voice_engine.models import (
    EmojiUsage,
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
from brand_voice_engine.scoring import AlignmentScorer, are_adjacent, categorical_similarity, tier_similarity

from conftest import EXCITED_TEXT, FORMAL_TEXTS

FORMAL_TARGET = VoiceCharacteristics(
    tone=VoiceTone.PROFESSIONAL,
    formality=VoiceFormality.FORMAL,
    perspective=VoicePerspective.THIRD_PERSON,
    vocabulary_level=VocabularyLevel(
        complexity=VocabularyComplexity.ADVANCED,
        industry_terms=["governance", "compliance", "framework"],
    ),
    sentence_structure=SentenceStructure(
        average_length=20.0,
        punctuation_style=PunctuationStyle(
            exclamation_usage=UsageLevel.RARE,
            question_usage=UsageLevel.RARE,
            ellipsis_usage=UsageLevel.RARE,
            emojis_usage=EmojiUsage.NONE,
        ),
    ),
)


@pytest.fixture(scope="module")
def scorer():
    return AlignmentScorer()


class TestSimilarityTables:

    def test_categorical(self):
        assert categorical_similarity(VoiceFormality.FORMAL, VoiceFormality.FORMAL, 0.3) == 1.0
        assert categorical_similarity(VoiceFormality.FORMAL, VoiceFormality.SEMI_FORMAL, 0.3) == 0.3
        assert categorical_similarity(VoiceFormality.FORMAL, VoiceFormality.CASUAL, 0.3) == 0.0

    def test_adjacency_is_symmetric(self):
        assert are_adjacent(VoiceTone.PROFESSIONAL, VoiceTone.ANALYTICAL)
        assert are_adjacent(VoiceTone.ANALYTICAL, VoiceTone.PROFESSIONAL)
        assert not are_adjacent(VoiceTone.PROFESSIONAL, VoiceTone.FRIENDLY)

    def test_mixed_perspective_is_adjacent_to_all(self):
        for perspective in (
            VoicePerspective.FIRST_PERSON,
            VoicePerspective.SECOND_PERSON,
            VoicePerspective.THIRD_PERSON,
        ):
            assert are_adjacent(VoicePerspective.MIXED, perspective)
        assert not are_adjacent(VoicePerspective.FIRST_PERSON, VoicePerspective.THIRD_PERSON)

    def test_tier_similarity(self):
        order = list(UsageLevel)
        assert tier_similarity(UsageLevel.RARE, UsageLevel.RARE, order) == 1.0
        assert tier_similarity(UsageLevel.RARE, UsageLevel.MODERATE, order) == 0.5
        assert tier_similarity(UsageLevel.RARE, UsageLevel.FREQUENT, order) == 0.0


class TestScore:

    def test_heavy_exclamations_against_formal_voice(self, scorer):
        comparison = scorer.score(EXCITED_TEXT, FORMAL_TARGET)

        assert comparison.overall < 0.6
        assert any("exclamation" in d.lower() for d in comparison.differences)
        assert "Use fewer exclamation marks" in comparison.improvements
        assert len(comparison.improvements) == len(comparison.differences)

    def test_deterministic(self, scorer):
        first = scorer.score(EXCITED_TEXT, FORMAL_TARGET)
        second = scorer.score(EXCITED_TEXT, FORMAL_TARGET)
        assert first == second

    def test_scores_in_range(self, scorer):
        alignment = scorer.score(EXCITED_TEXT, FORMAL_TARGET).alignment
        for value in (alignment.tone, alignment.vocabulary, alignment.structure, alignment.overall):
            assert 0.0 <= value <= 1.0

    def test_matching_text_scores_high(self, scorer, formal_profile):
        comparison = scorer.score(FORMAL_TEXTS["report-1"], formal_profile)

        assert comparison.overall > 0.8
        assert comparison.profile_id == formal_profile.id
        assert not any("exclamation" in d.lower() for d in comparison.differences)

    def test_avoided_words_penalized(self, scorer):
        target = FORMAL_TARGET.with_avoided_words(["synergy"])
        text = "The board reviewed the governance framework. Synergy across divisions improved compliance."

        with_word = scorer.score(text, target)
        without_word = scorer.score(text, FORMAL_TARGET)

        assert with_word.alignment.vocabulary < without_word.alignment.vocabulary
        assert any("synergy" in d for d in with_word.differences)
        assert "Remove 'synergy'" in with_word.improvements

    def test_empty_candidate(self, scorer):
        with pytest.raises(InsufficientData):
            scorer.score("   ", FORMAL_TARGET)


class TestCompare:

    def test_compare_two_texts(self, scorer):
        comparison = scorer.compare(FORMAL_TEXTS["report-1"], EXCITED_TEXT)

        assert comparison.original_content == FORMAL_TEXTS["report-1"]
        assert comparison.generated_content == EXCITED_TEXT
        assert comparison.profile_id is None
        assert comparison.overall < 0.6

    def test_identical_texts(self, scorer):
        comparison = scorer.compare(FORMAL_TEXTS["report-2"], FORMAL_TEXTS["report-2"])

        assert comparison.overall == pytest.approx(1.0)
        assert comparison.differences == []
