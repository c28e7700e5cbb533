"""Turn a voice profile and a generation request into generator prompts."""

from ..models.characteristics import EmojiUsage, UsageLevel, VoiceCharacteristics
from ..models.generation import VoiceComparison, VoiceGenerationRequest

VOICE_PROMPT = '''Write a {content_type} post in the brand voice described below.

TOPIC:
{prompt}

VOICE:
{voice}
{extras}
Begin the post directly, no preamble.'''

REVISION_PROMPT = '''{base}

A previous draft did not match the voice closely enough (alignment {alignment:.0%}).

DRAFT:
"""
{draft}
"""

DIFFERENCES:
{differences}

FIX THESE:
{improvements}

Rewrite the post keeping its message.'''

_USAGE_WORDS = {
    UsageLevel.RARE: "rarely",
    UsageLevel.MODERATE: "sometimes",
    UsageLevel.FREQUENT: "often",
}


def describe_voice(characteristics: VoiceCharacteristics) -> tuple[list[str], list[str]]:
    """
    Bullet lines describing a voice, and the characteristic names they cover.
    """
    c = characteristics
    structure = c.sentence_structure
    punctuation = structure.punctuation_style
    vocabulary = c.vocabulary_level
    patterns = c.content_patterns

    lines = [
        f"- Tone: {c.tone.value}",
        f"- Formality: {c.formality.value}",
        f"- Perspective: write in the {c.perspective.value}",
        f"- Sentences: about {structure.average_length:.0f} words on average, {structure.variability.value} variation",
        f"- Vocabulary: {vocabulary.complexity.value}",
        (
            f"- Punctuation: exclamation marks {_USAGE_WORDS[punctuation.exclamation_usage]}, "
            f"questions {_USAGE_WORDS[punctuation.question_usage]}"
        ),
    ]
    applied = ["tone", "formality", "perspective", "sentence length", "vocabulary", "punctuation"]

    if punctuation.emojis_usage == EmojiUsage.NONE:
        lines.append("- No emojis")
    else:
        lines.append(f"- Emojis: {punctuation.emojis_usage.value}")
    applied.append("emojis")

    if c.emotional_range.primary:
        lines.append(
            f"- Emotion: {', '.join(c.emotional_range.primary)} "
            f"({c.emotional_range.intensity.value} intensity)"
        )
        applied.append("emotional range")
    if vocabulary.industry_terms:
        lines.append(f"- Characteristic terms: {', '.join(vocabulary.industry_terms[:5])}")
        applied.append("industry terms")
    if vocabulary.avoided_words:
        lines.append(f"- Never use: {', '.join(vocabulary.avoided_words)}")
        applied.append("avoided words")
    if patterns.storytelling_elements:
        lines.append(f"- Tell a short story; personal anecdotes are {patterns.personal_anecdotes.value}")
        applied.append("storytelling")
    lines.append(f"- Data and numbers: {patterns.data_usage.value}")
    applied.append("data usage")

    return lines, applied


def build_voice_prompt(
    request: VoiceGenerationRequest,
    characteristics: VoiceCharacteristics,
) -> tuple[str, list[str]]:
    """Prompt for the external generator plus the names of the applied characteristics."""
    lines, applied = describe_voice(characteristics)

    extras = []
    if request.target_length:
        extras.append(f"LENGTH: about {request.target_length} words")
    if request.additional_instructions:
        extras.append(f"ALSO: {request.additional_instructions}")

    prompt = VOICE_PROMPT.format(
        content_type=request.content_type.value,
        prompt=request.prompt,
        voice="\n".join(lines),
        extras="\n" + "\n".join(extras) + "\n" if extras else "",
    )
    return prompt, applied


def build_revision_prompt(base_prompt: str, comparison: VoiceComparison) -> str:
    """Ask for a rewrite of a draft that scored below the alignment threshold."""
    return REVISION_PROMPT.format(
        base=base_prompt,
        alignment=comparison.overall,
        draft=comparison.generated_content,
        differences="\n".join(f"- {d}" for d in comparison.differences) or "- (none listed)",
        improvements="\n".join(f"- {i}" for i in comparison.improvements) or "- Match the voice more closely",
    )
