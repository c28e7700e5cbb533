"""Tests for voice prompts and the regeneration loop."""

import pytest

from brand_voice_engine.errors import ProfileNotActive, ProfileNotFound
from brand_voice_engine.generate import VoiceGuidedGenerator, build_voice_prompt
from brand_voice_engine.models import ContentType, VoiceGenerationRequest

from conftest import CASUAL_TEXT, FORMAL_TEXTS


class FakeGenerator:
    """Returns canned drafts in order and records every call."""

    def __init__(self, drafts):
        self.drafts = list(drafts)
        self.calls = []

    def __call__(self, prompt, characteristics, constraints):
        self.calls.append((prompt, characteristics, constraints))
        return self.drafts[min(len(self.calls), len(self.drafts)) - 1]


@pytest.fixture
def request_():
    return VoiceGenerationRequest(
        prompt="Quarterly results",
        content_type=ContentType.LINKEDIN,
        target_length=120,
        additional_instructions="Mention the audit.",
    )


class TestVoicePrompt:

    def test_prompt_describes_voice(self, formal_profile, request_):
        prompt, applied = build_voice_prompt(request_, formal_profile.characteristics)

        assert "Quarterly results" in prompt
        assert "Tone: professional" in prompt
        assert "Formality: formal" in prompt
        assert "about 120 words" in prompt
        assert "Mention the audit." in prompt
        assert {"tone", "formality", "perspective", "punctuation"} <= set(applied)

    def test_avoided_words_listed(self, formal_profile, request_):
        characteristics = formal_profile.characteristics.with_avoided_words(["synergy"])
        prompt, applied = build_voice_prompt(request_, characteristics)

        assert "Never use: synergy" in prompt
        assert "avoided words" in applied


class TestRegeneration:

    def test_first_draft_good_enough(self, formal_profile, request_):
        fake = FakeGenerator([FORMAL_TEXTS["report-1"]])
        result = VoiceGuidedGenerator(fake).generate(request_, formal_profile)

        assert result.attempts == 1
        assert result.content == FORMAL_TEXTS["report-1"]
        assert result.voice_alignment >= 0.6
        assert fake.calls[0][2]["content_type"] == "linkedin"

    def test_regenerates_off_voice_draft(self, formal_profile, request_):
        fake = FakeGenerator([CASUAL_TEXT, FORMAL_TEXTS["report-1"]])
        result = VoiceGuidedGenerator(fake).generate(request_, formal_profile)

        assert result.attempts == 2
        assert result.content == FORMAL_TEXTS["report-1"]
        # The second prompt carries the first draft's problems
        assert "DIFFERENCES" in fake.calls[1][0]
        assert CASUAL_TEXT in fake.calls[1][0]

    def test_gives_up_after_max_attempts(self, formal_profile, request_):
        fake = FakeGenerator([CASUAL_TEXT])
        result = VoiceGuidedGenerator(fake).generate(request_, formal_profile)

        assert result.attempts == 3
        assert len(fake.calls) == 3
        assert result.voice_alignment < 0.6
        assert result.suggestions

    def test_generator_errors_propagate(self, formal_profile, request_):
        def broken(prompt, characteristics, constraints):
            raise TimeoutError("generator timed out")

        with pytest.raises(TimeoutError):
            VoiceGuidedGenerator(broken).generate(request_, formal_profile)


class TestProfileResolution:

    def test_uses_active_profile(self, formal_profile, request_):
        active = formal_profile.model_copy(update={"is_active": True})
        fake = FakeGenerator([FORMAL_TEXTS["report-1"]])
        result = VoiceGuidedGenerator(fake).generate_for_owner(request_, [active], owner_id="acme")

        assert result.attempts == 1

    def test_no_active_profile(self, formal_profile, request_):
        with pytest.raises(ProfileNotActive):
            VoiceGuidedGenerator(FakeGenerator(["x"])).generate_for_owner(request_, [formal_profile], "acme")

    def test_unknown_profile_id(self, formal_profile, request_):
        request_ = request_.model_copy(update={"voice_profile_id": "missing"})
        with pytest.raises(ProfileNotFound):
            VoiceGuidedGenerator(FakeGenerator(["x"])).generate_for_owner(request_, [formal_profile], "acme")
