"""
Word lists behind the voice heuristics.

All lists are fixed constants: the extractor is a pure function of its
input and these tables.
"""

import re

from ..models.characteristics import VoiceTone

FIRST_PERSON = frozenset({"i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves"})
SECOND_PERSON = frozenset({"you", "your", "yours", "yourself", "yourselves"})
THIRD_PERSON = frozenset({
    "he", "him", "his", "himself", "she", "her", "hers", "herself",
    "they", "them", "their", "theirs", "themselves", "it", "its", "itself",
})

# Markers of a formal register
FORMAL_MARKERS = [
    "therefore", "furthermore", "moreover", "consequently", "accordingly",
    "thus", "hence", "whereas", "nevertheless", "notwithstanding",
    "additionally", "regarding", "pursuant", "herein", "subsequently",
    "in accordance with", "with respect to", "it is essential",
]

# Markers of a casual register
CASUAL_MARKERS = [
    "hey", "gonna", "wanna", "gotta", "kinda", "sorta", "stuff", "yeah",
    "yep", "nope", "lol", "omg", "awesome", "cool", "super", "guys",
    "folks", "ok", "okay", "btw", "tbh", "crazy", "literally", "y'all",
]

HEDGES = [
    "maybe", "perhaps", "might", "probably", "possibly", "seems",
    "i think", "i guess", "sort of", "kind of", "not sure",
]

IMPERATIVE_VERBS = frozenset({
    "start", "stop", "focus", "remember", "build", "make", "try", "think",
    "consider", "take", "ask", "invest", "learn", "keep", "avoid", "use",
    "share", "join", "follow", "read", "prioritize", "measure", "ensure",
})

# Longer, rarer words that push vocabulary complexity up
ADVANCED_WORDS = frozenset({
    "paradigm", "leverage", "synergy", "methodology", "infrastructure",
    "optimization", "scalability", "heuristic", "juxtaposition", "ubiquitous",
    "nuanced", "comprehensive", "substantive", "consequently", "nevertheless",
    "notwithstanding", "furthermore", "moreover", "predominantly", "quintessential",
    "articulate", "delineate", "elucidate", "exacerbate", "mitigate",
    "corroborate", "facilitate", "implementation", "interoperability", "orchestration",
    "regulatory", "governance", "stakeholders", "fiduciary", "jurisdiction",
    "algorithm", "architecture", "asynchronous", "deterministic", "probabilistic",
    "empirical", "longitudinal", "statistically", "hypothesis", "correlation",
    "ramifications", "trajectory", "unprecedented", "multifaceted", "holistic",
    "operational", "strategic", "organizational", "consolidation", "procurement",
    "remuneration", "compliance", "amortization", "capitalization", "diversification",
    "ontological", "epistemological", "phenomenological", "dichotomy", "zeitgeist",
    "substantial", "substantially", "considerable", "considerably", "subsequent",
    "comprehensively", "meticulous", "rigorous", "contemporaneous", "commensurate",
})

TONE_INDICATORS: dict[VoiceTone, list[str]] = {
    VoiceTone.PROFESSIONAL: [
        "expertise", "industry", "strategic", "professional", "business",
        "clients", "organization", "organisation", "leadership", "stakeholders",
        "objectives", "deliver", "performance", "framework", "operational",
    ],
    VoiceTone.FRIENDLY: [
        "thanks", "thank you", "appreciate", "love", "great", "happy", "glad",
        "welcome", "wonderful", "fun", "enjoy", "cheers", "friends",
    ],
    VoiceTone.AUTHORITATIVE: [
        "must", "should", "proven", "fact", "essential", "clearly", "always",
        "never", "the truth is", "without question", "non-negotiable", "rule",
    ],
    VoiceTone.CONVERSATIONAL: [
        "you'll", "we've", "let's", "here's", "you know", "honestly", "right?",
        "so,", "anyway", "by the way", "imagine", "picture this",
    ],
    VoiceTone.INSPIRING: [
        "believe", "dream", "possible", "inspire", "inspiring", "vision",
        "achieve", "journey", "potential", "opportunity", "amazing", "incredible",
        "excited", "transform", "breakthrough", "future",
    ],
    VoiceTone.ANALYTICAL: [
        "data", "analysis", "metrics", "numbers", "research", "percent",
        "evidence", "study", "trend", "findings", "measured", "benchmark",
        "statistics", "survey", "sample",
    ],
    VoiceTone.EMPATHETIC: [
        "understand", "feel", "relate", "struggle", "support", "care",
        "listen", "hear you", "together", "not alone", "hard", "compassion",
    ],
    VoiceTone.CONFIDENT: [
        "certain", "definitely", "absolutely", "guaranteed", "undoubtedly",
        "i know", "confident", "proud", "no doubt", "without a doubt",
    ],
}

EMOTION_WORDS: dict[str, list[str]] = {
    "optimistic": ["hope", "hopeful", "optimistic", "bright", "promising", "looking forward"],
    "grateful": ["grateful", "thankful", "thanks", "appreciate", "blessed"],
    "excited": ["excited", "thrilled", "amazing", "incredible", "can't wait", "fantastic"],
    "determined": ["determined", "committed", "relentless", "persist", "keep going", "focus"],
    "thoughtful": ["reflect", "reflecting", "consider", "wonder", "lesson", "learned"],
    "proud": ["proud", "honored", "honoured", "milestone", "achievement"],
    "concerned": ["concerned", "worried", "risk", "challenge", "problem", "unfortunately"],
    "frustrated": ["frustrated", "annoying", "tired of", "fed up", "disappointed"],
}

INTENSIFIERS = [
    "very", "really", "extremely", "incredibly", "absolutely", "totally",
    "so much", "truly", "deeply", "massively", "insanely",
]

TRANSITION_PHRASES = [
    "however", "moreover", "furthermore", "therefore", "meanwhile",
    "for example", "for instance", "in fact", "that said", "on the other hand",
    "as a result", "in other words", "first", "second", "finally",
    "in short", "ultimately", "instead", "similarly", "because of this",
]

SUBORDINATORS = frozenset({
    "because", "although", "though", "while", "whereas", "unless",
    "since", "if", "when", "whenever", "which", "who", "whose", "until",
})

# Past-tense first-person clauses ("I learned", "we spent")
FIRST_PERSON_NARRATIVE = re.compile(
    r"\b(?:i|we)\s+(?:was|were|had|felt|learned|learnt|realized|realised|remember|"
    r"remembered|started|decided|met|spent|thought|took|went|got|made|found|saw|"
    r"lost|failed|quit|left|joined|built|wrote)\b"
)

TIME_MARKERS = re.compile(
    r"\b(?:yesterday|last (?:week|month|year|night)|\d+ (?:years?|months?|weeks?) ago|"
    r"years? ago|months? ago|one day|back in|back then|at the time|that day|"
    r"that morning|earlier this (?:week|month|year)|when i was)\b"
)

CONTRACTION = re.compile(r"\b\w+'(?:t|s|re|ve|ll|d|m)\b")

DATA_MARKER = re.compile(r"\d+(?:[.,]\d+)?\s*%|[$€£]\s?\d+(?:[.,]\d+)?|\b\d+(?:[.,]\d+)?[kmb]?\b")

ELLIPSIS = re.compile(r"…|\.{3,}")

EMOJI = re.compile(
    "[\U0001F300-\U0001FAFF☀-⛿✅✨❌❤⭐]"
)


def count_phrases(text_lower: str, phrases: list[str]) -> int:
    """Count whole-word occurrences of every phrase in lowercased text."""
    return sum(phrase_counts(text_lower, phrases).values())


def phrase_counts(text_lower: str, phrases: list[str]) -> dict[str, int]:
    """Occurrences per phrase (phrases that never occur are omitted)."""
    counts = {}
    for phrase in phrases:
        # \b only works next to word characters
        prefix = r"\b" if phrase[0].isalnum() else ""
        suffix = r"\b" if phrase[-1].isalnum() else ""
        n = len(re.findall(prefix + re.escape(phrase) + suffix, text_lower))
        if n:
            counts[phrase] = n
    return counts
