"""Tests for profile building, confidence and activation."""

import pytest

from brand_voice_engine.errors import InsufficientData, MalformedSource, ProfileNotActive, ProfileNotFound
from brand_voice_engine.models import (
    BrandVoiceProfile,
    ContentSource,
    VoiceFormality,
    VoicePerspective,
    VoiceTone,
)
from brand_voice_engine.profile import (
    VOICE_TEMPLATES,
    activate,
    base_confidence,
    compute_confidence,
    get_active_profile,
    get_template,
    normalized_impurity,
)

from conftest import CASUAL_TEXT, EXTRA_FORMAL_TEXT


class TestConfidenceModel:

    def test_base_is_half_at_minimum_sample_count(self):
        assert base_confidence(3, 3) == pytest.approx(0.5)
        assert base_confidence(0, 3) == 0.0

    def test_base_monotonic(self):
        values = [base_confidence(n, 3) for n in range(1, 50)]
        assert values == sorted(values)
        assert all(v < 1.0 for v in values)

    def test_impurity_bounds(self):
        assert normalized_impurity([VoiceTone.PROFESSIONAL] * 4, len(VoiceTone)) == 0.0
        assert normalized_impurity(list(VoiceFormality), len(VoiceFormality)) == pytest.approx(1.0)

    def test_consistent_labels(self):
        confidence = compute_confidence(
            3, [VoiceTone.PROFESSIONAL] * 3, [VoiceFormality.FORMAL] * 3
        )
        assert confidence == pytest.approx(0.5)

    def test_contradictory_label_lowers_confidence(self):
        confidence = compute_confidence(
            4,
            [VoiceTone.PROFESSIONAL] * 3 + [VoiceTone.FRIENDLY],
            [VoiceFormality.FORMAL] * 3 + [VoiceFormality.CASUAL],
        )
        assert confidence == pytest.approx(0.3061, abs=1e-3)


class TestBuild:

    def test_build_from_samples(self, formal_profile):
        assert formal_profile.id == "profile-formal"
        assert formal_profile.owner_id == "acme"
        assert formal_profile.characteristics.formality == VoiceFormality.FORMAL
        assert formal_profile.training_data.total_posts == 3
        assert formal_profile.training_data.last_analyzed is not None
        assert formal_profile.confidence == pytest.approx(0.5)
        assert formal_profile.is_active is False

    def test_total_words_derived_from_sources(self, formal_profile):
        expected = sum(len(s.content.split()) for s in formal_profile.training_data.sources)
        assert formal_profile.training_data.total_words == expected

    def test_build_accepts_plain_dicts(self, builder):
        profile = builder.build("From dicts", [{"id": "a", "type": "blog", "content": "Plain data works fine."}])
        assert profile.training_data.sources[0].id == "a"

    def test_build_without_samples(self, builder):
        with pytest.raises(InsufficientData):
            builder.build("Empty", [])

    def test_blank_samples_are_not_evidence(self, builder, formal_sources, formal_profile):
        blanks = [ContentSource(id=f"blank-{i}", content="   ") for i in range(5)]
        profile = builder.build("With blanks", formal_sources + blanks)

        assert profile.confidence == pytest.approx(formal_profile.confidence)
        assert profile.training_data.total_posts == 3
        assert [s.id for s in profile.training_data.sources] == [s.id for s in formal_sources]

    def test_duplicate_ids_rejected(self, builder):
        sources = [ContentSource(id="x", content="First text."), ContentSource(id="x", content="Second text.")]
        with pytest.raises(MalformedSource):
            builder.build("Dupes", sources)

    def test_summary_mentions_voice(self, formal_profile):
        summary = formal_profile.summary()
        assert "Corporate voice" in summary
        assert "formal" in summary

    def test_json_round_trip(self, formal_profile):
        restored = BrandVoiceProfile.model_validate_json(formal_profile.model_dump_json())
        assert restored.model_dump() == formal_profile.model_dump()


class TestRetrain:

    def test_more_consistent_samples_raise_confidence(self, builder, formal_profile):
        updated = builder.retrain(formal_profile, [ContentSource(id="report-4", content=EXTRA_FORMAL_TEXT)])

        assert updated.training_data.total_posts == 4
        assert updated.confidence > formal_profile.confidence
        assert updated.id == formal_profile.id

    def test_contradictory_sample_lowers_confidence(self, builder, formal_profile):
        updated = builder.retrain(formal_profile, [ContentSource(id="casual", content=CASUAL_TEXT)])

        assert updated.confidence < formal_profile.confidence

    def test_blank_sample_ignored(self, builder, formal_profile):
        updated = builder.retrain(formal_profile, [ContentSource(id="blank", content="\n\n")])

        assert updated.training_data.total_posts == 3
        assert updated.confidence == pytest.approx(formal_profile.confidence)

    def test_original_profile_untouched(self, builder, formal_profile):
        builder.retrain(formal_profile, [ContentSource(id="report-4", content=EXTRA_FORMAL_TEXT)])
        assert formal_profile.training_data.total_posts == 3

    def test_existing_ids_cannot_be_replaced(self, builder, formal_profile):
        with pytest.raises(MalformedSource):
            builder.retrain(formal_profile, [ContentSource(id="report-1", content="Edited text.")])

    def test_avoided_words_carry_over(self, builder, formal_profile):
        profile = formal_profile.model_copy(
            update={"characteristics": formal_profile.characteristics.with_avoided_words(["Synergy"])}
        )
        updated = builder.retrain(profile, [ContentSource(id="report-4", content=EXTRA_FORMAL_TEXT)])

        assert updated.characteristics.vocabulary_level.avoided_words == ["synergy"]


class TestTemplates:

    def test_all_templates_available(self):
        assert set(VOICE_TEMPLATES) == {"thought_leader", "entrepreneur", "corporate", "consultant"}

    def test_lookup_is_forgiving(self):
        assert get_template("Thought-Leader") == VOICE_TEMPLATES["thought_leader"]

    def test_unknown_template(self):
        with pytest.raises(ProfileNotFound):
            get_template("pirate")

    def test_profile_from_template(self, builder):
        profile = builder.from_template("Consulting", "consultant")

        assert profile.characteristics.perspective == VoicePerspective.SECOND_PERSON
        assert profile.confidence == 0.0
        assert profile.training_data.total_posts == 0


class TestActivation:

    @pytest.fixture
    def profiles(self):
        return [
            BrandVoiceProfile(id="p1", owner_id="acme", name="One", is_active=True),
            BrandVoiceProfile(id="p2", owner_id="acme", name="Two"),
            BrandVoiceProfile(id="other", owner_id="globex", name="Other", is_active=True),
        ]

    def test_exactly_one_active(self, profiles):
        result = activate(profiles, "p2")
        by_id = {p.id: p for p in result}

        assert by_id["p2"].is_active is True
        assert by_id["p1"].is_active is False
        assert [p.id for p in result if p.owner_id == "acme" and p.is_active] == ["p2"]

    def test_other_owners_untouched(self, profiles):
        result = activate(profiles, "p2")
        assert result[2] is profiles[2]

    def test_input_not_mutated(self, profiles):
        activate(profiles, "p2")
        assert profiles[0].is_active is True
        assert profiles[1].is_active is False

    def test_unknown_profile(self, profiles):
        with pytest.raises(ProfileNotFound):
            activate(profiles, "missing")

    def test_get_active_profile(self, profiles):
        assert get_active_profile(profiles, "acme").id == "p1"
        assert get_active_profile(activate(profiles, "p2"), "acme").id == "p2"

    def test_no_active_profile(self):
        with pytest.raises(ProfileNotActive):
            get_active_profile([BrandVoiceProfile(id="p", name="P")], "default")
