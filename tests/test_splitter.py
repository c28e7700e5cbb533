"""Tests for text splitting."""

from brand_voice_engine.style.splitter import (
    split_into_paragraphs,
    split_into_sentences,
)


class TestSentenceSplitting:
    """Test sentence boundary detection."""

    def test_simple_sentences(self):
        text = "This is sentence one. This is sentence two. And a third!"
        sentences = split_into_sentences(text)
        assert len(sentences) == 3
        assert sentences[0] == "This is sentence one."
        assert sentences[1] == "This is sentence two."
        assert sentences[2] == "And a third!"

    def test_abbreviations(self):
        text = "Mr. Patel met Dr. Osei at the summit. They talked for hours."
        sentences = split_into_sentences(text)
        assert len(sentences) == 2
        assert "Mr. Patel" in sentences[0]
        assert "Dr. Osei" in sentences[0]

    def test_quoted_speech(self):
        text = '"Ship it," said the founder. "Are you sure?" asked the CTO.'
        sentences = split_into_sentences(text)
        assert len(sentences) == 2

    def test_question_and_exclamation(self):
        text = "What changed? Everything did! We rebuilt the team."
        sentences = split_into_sentences(text)
        assert len(sentences) == 3

    def test_line_breaks_end_sentences(self):
        text = "Three lessons from this year\nHire slowly\nShip weekly"
        sentences = split_into_sentences(text)
        assert sentences == ["Three lessons from this year", "Hire slowly", "Ship weekly"]

    def test_list_markers_dropped(self):
        text = "What worked:\n- Weekly demos\n2. Clear owners\n• Short meetings"
        sentences = split_into_sentences(text)
        assert sentences == ["What worked:", "Weekly demos", "Clear owners", "Short meetings"]

    def test_fragments_without_words_dropped(self):
        text = "Big news today.\n🚀🚀\n---\nMore soon."
        sentences = split_into_sentences(text)
        assert sentences == ["Big news today.", "More soon."]

    def test_empty_text(self):
        assert split_into_sentences("") == []
        assert split_into_sentences("   \n  ") == []


class TestParagraphSplitting:
    """Test paragraph boundary detection."""

    def test_double_newline(self):
        text = "First paragraph.\n\nSecond paragraph."
        paragraphs = split_into_paragraphs(text)
        assert len(paragraphs) == 2

    def test_multiple_newlines(self):
        text = "First.\n\n\n\nSecond."
        paragraphs = split_into_paragraphs(text)
        assert len(paragraphs) == 2

    def test_empty_paragraphs_filtered(self):
        text = "First.\n\n   \n\nSecond."
        paragraphs = split_into_paragraphs(text)
        assert len(paragraphs) == 2
