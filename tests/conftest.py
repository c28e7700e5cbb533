"""Shared sample corpora and components."""

import pytest

from brand_voice_engine.models import ContentSource, SourceType
from brand_voice_engine.profile import ProfileBuilder
from brand_voice_engine.style import CharacteristicExtractor

FORMAL_TEXTS = {
    "report-1": (
        "The committee has reviewed the quarterly governance report. "
        "Furthermore, the organization must ensure regulatory compliance across all jurisdictions. "
        "Consequently, the board approved a comprehensive implementation framework."
    ),
    "report-2": (
        "The company reported strong operational results in the third quarter. "
        "Additionally, its leadership team completed the consolidation of regional offices. "
        "Therefore, management expects substantial efficiency gains next year."
    ),
    "report-3": (
        "The study examined procurement practices across several business units. "
        "Moreover, the researchers identified significant inefficiencies in supplier governance. "
        "Thus, the authors recommend a rigorous evaluation methodology."
    ),
}

EXTRA_FORMAL_TEXT = (
    "The agency published its annual compliance review. "
    "Furthermore, the directors must strengthen governance across every business division. "
    "Consequently, the organization will restructure its procurement framework."
)

CASUAL_TEXT = "Hey guys!! Gonna be honest, this stuff is awesome. You're gonna love it! Can't wait to show you!"

EXCITED_TEXT = (
    "We did it!!! This is so exciting! Huge win for the team! "
    "Thank you all! Let's go! Amazing work everyone!"
)


@pytest.fixture(scope="session")
def extractor():
    return CharacteristicExtractor()


@pytest.fixture(scope="session")
def builder(extractor):
    return ProfileBuilder(extractor=extractor)


@pytest.fixture
def formal_sources():
    return [
        ContentSource(id=source_id, type=SourceType.LINKEDIN, content=text)
        for source_id, text in FORMAL_TEXTS.items()
    ]


@pytest.fixture
def formal_profile(builder, formal_sources):
    return builder.build("Corporate voice", formal_sources, owner_id="acme", profile_id="profile-formal")
