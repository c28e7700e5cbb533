"""Split sample text into paragraphs and sentences."""

import re

# Abbreviations that don't end sentences
ABBREVIATIONS = {
    "Mr", "Mrs", "Ms", "Dr", "Prof", "Sr", "Jr", "vs", "etc",
    "i.e", "e.g", "cf", "al", "St", "Inc", "Ltd", "Co", "approx",
}

# List markers at the start of a line: "-", "*", bullets, arrows, "1." / "1)"
_LIST_MARKER = re.compile(r"^\s*(?:[-*•→➜]|\d{1,2}[.)])\s+")

# Sentence end (. ! ? or an ellipsis character) followed by whitespace
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?…])\s+(?=\S)")


def split_into_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs."""
    # Split on double newlines or multiple newlines
    paragraphs = re.split(r"\n\s*\n+", text)

    # Clean up and filter empty
    paragraphs = [p.strip() for p in paragraphs]
    paragraphs = [p for p in paragraphs if p]

    return paragraphs


def split_into_sentences(text: str) -> list[str]:
    """
    Split text into sentences.

    Social posts lean on line breaks, so every line is its own sentence
    boundary; list markers are dropped. Fragments without any letters or
    digits (a lone emoji, a row of dashes) are not sentences.
    """
    sentences: list[str] = []

    for line in text.splitlines():
        line = _LIST_MARKER.sub("", line)
        line = " ".join(line.split())
        if not line:
            continue

        # Protect abbreviations by replacing periods temporarily
        for abbr in ABBREVIATIONS:
            line = re.sub(
                rf"\b{re.escape(abbr)}\.",
                lambda m: m.group(0)[:-1] + "<<<DOT>>>",
                line,
                flags=re.IGNORECASE,
            )

        for part in _SENTENCE_BOUNDARY.split(line):
            part = part.replace("<<<DOT>>>", ".").strip()
            if any(ch.isalnum() for ch in part):
                sentences.append(part)

    return sentences
