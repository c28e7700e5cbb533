"""Tests for feedback incorporation."""

import pytest

from brand_voice_engine.feedback import (
    Adjustment,
    FeedbackIncorporator,
    FeedbackLog,
    apply_adjustment,
    parse_suggestions,
)
from brand_voice_engine.models import (
    UsageLevel,
    VocabularyComplexity,
    VoiceCharacteristics,
    VoiceFeedback,
    VoiceFormality,
)


def make_feedback(profile, rating, suggestions=None):
    return VoiceFeedback(
        content_id="post-1",
        voice_profile_id=profile.id,
        rating=rating,
        feedback="",
        suggestions=suggestions,
    )


class TestParseSuggestions:

    def test_more_and_less(self):
        assert parse_suggestions(["more casual"]) == [Adjustment("formality", 1)]
        assert parse_suggestions(["less formal"]) == [Adjustment("formality", 1)]
        assert parse_suggestions(["more formal"]) == [Adjustment("formality", -1)]

    def test_two_word_terms(self):
        assert parse_suggestions(["fewer exclamation marks"]) == [Adjustment("exclamation", -1)]

    def test_typos_tolerated(self):
        assert parse_suggestions(["more casul please"]) == [Adjustment("formality", 1)]

    def test_comparatives(self):
        assert parse_suggestions(["simpler words"]) == [Adjustment("complexity", -1)]
        assert parse_suggestions(["make it shorter"]) == [Adjustment("length", -1)]

    def test_several_fields_in_one_suggestion(self):
        adjustments = parse_suggestions(["more casual, fewer emojis"])
        assert set(adjustments) == {Adjustment("formality", 1), Adjustment("emoji", -1)}

    def test_one_adjustment_per_field(self):
        assert parse_suggestions(["more casual", "more formal"]) == [Adjustment("formality", 1)]

    def test_negated_formality(self):
        assert parse_suggestions(["more informal"]) == [Adjustment("formality", 1)]
        assert parse_suggestions(["less informal"]) == [Adjustment("formality", -1)]
        assert parse_suggestions(["more unprofessional please"]) == [Adjustment("formality", 1)]

    def test_unrecognized(self):
        assert parse_suggestions(["great post", "more cowbell"]) == []


class TestApplyAdjustment:

    def test_single_step(self):
        characteristics = VoiceCharacteristics(formality=VoiceFormality.FORMAL)
        shifted = apply_adjustment(characteristics, Adjustment("formality", 1))
        assert shifted.formality == VoiceFormality.SEMI_FORMAL

    def test_clamped_at_ends(self):
        characteristics = VoiceCharacteristics(formality=VoiceFormality.FORMAL)
        assert apply_adjustment(characteristics, Adjustment("formality", -1)).formality == VoiceFormality.FORMAL

    def test_nested_field(self):
        characteristics = VoiceCharacteristics()
        shifted = apply_adjustment(characteristics, Adjustment("exclamation", 1))

        assert shifted.sentence_structure.punctuation_style.exclamation_usage == UsageLevel.MODERATE
        assert characteristics.sentence_structure.punctuation_style.exclamation_usage == UsageLevel.RARE

    def test_sentence_length(self):
        characteristics = VoiceCharacteristics()
        characteristics = characteristics.model_copy(
            update={"sentence_structure": characteristics.sentence_structure.model_copy(update={"average_length": 12.0})}
        )
        shifted = apply_adjustment(characteristics, Adjustment("length", -1))
        assert shifted.sentence_structure.average_length == pytest.approx(9.0)


class TestIncorporate:

    @pytest.fixture
    def incorporator(self):
        return FeedbackIncorporator()

    def test_more_informal_moves_toward_casual(self, incorporator, formal_profile):
        updated = incorporator.incorporate(formal_profile, make_feedback(formal_profile, 1, ["more informal"]))
        assert updated.characteristics.formality == VoiceFormality.SEMI_FORMAL

    def test_more_casual_twice_moves_one_step_each(self, incorporator, formal_profile):
        assert formal_profile.characteristics.formality == VoiceFormality.FORMAL

        once = incorporator.incorporate(formal_profile, make_feedback(formal_profile, 1, ["more casual"]))
        assert once.characteristics.formality == VoiceFormality.SEMI_FORMAL

        twice = incorporator.incorporate(once, make_feedback(once, 1, ["more casual"]))
        assert twice.characteristics.formality == VoiceFormality.CASUAL

    def test_low_rating_lowers_confidence(self, incorporator, formal_profile):
        updated = incorporator.incorporate(formal_profile, make_feedback(formal_profile, 2))

        assert updated.confidence == pytest.approx(formal_profile.confidence - 0.05)
        assert updated.characteristics == formal_profile.characteristics

    def test_high_rating_reinforces(self, incorporator, formal_profile):
        updated = incorporator.incorporate(formal_profile, make_feedback(formal_profile, 5, ["more casual"]))

        assert updated.confidence == pytest.approx(formal_profile.confidence + 0.02)
        assert updated.characteristics.formality == VoiceFormality.FORMAL

    def test_confidence_capped(self, incorporator, formal_profile):
        profile = formal_profile.model_copy(update={"confidence": 0.99})
        assert incorporator.incorporate(profile, make_feedback(profile, 5)).confidence == 1.0

        profile = formal_profile.model_copy(update={"confidence": 0.01})
        assert incorporator.incorporate(profile, make_feedback(profile, 1)).confidence == 0.0

    def test_neutral_rating_changes_nothing(self, incorporator, formal_profile):
        updated = incorporator.incorporate(formal_profile, make_feedback(formal_profile, 3, ["simpler"]))
        assert updated is formal_profile

    def test_every_record_is_logged(self, incorporator, formal_profile):
        for rating in (1, 3, 5):
            incorporator.incorporate(formal_profile, make_feedback(formal_profile, rating))

        assert len(incorporator.log) == 3
        assert [f.rating for f in incorporator.log.for_profile(formal_profile.id)] == [1, 3, 5]

    def test_wrong_profile(self, incorporator, formal_profile):
        feedback = VoiceFeedback(content_id="c", voice_profile_id="someone-else", rating=1)
        with pytest.raises(ValueError):
            incorporator.incorporate(formal_profile, feedback)
        assert len(incorporator.log) == 0

    def test_shared_log(self, formal_profile):
        log = FeedbackLog()
        FeedbackIncorporator(log=log).incorporate(formal_profile, make_feedback(formal_profile, 4))
        assert len(log.entries) == 1


class TestFeedbackModel:

    def test_rating_bounds(self):
        with pytest.raises(ValueError):
            VoiceFeedback(content_id="c", voice_profile_id="p", rating=6)
        with pytest.raises(ValueError):
            VoiceFeedback(content_id="c", voice_profile_id="p", rating=0)

    def test_complexity_order(self):
        characteristics = VoiceCharacteristics()
        simpler = apply_adjustment(characteristics, Adjustment("complexity", -1))
        assert simpler.vocabulary_level.complexity == VocabularyComplexity.SIMPLE
