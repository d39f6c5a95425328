"""
Unit tests for TermsView and TermIterator.
"""

import pytest

from semtext.models import AnnotatedText, Sentence, Term, TermsView


@pytest.fixture
def gapped_text() -> AnnotatedText:
    """Three sentences, the middle one without terms."""
    return AnnotatedText.of(
        "abcdefghi",
        sentences=[
            Sentence.of(0, 3, [Term.of(0, 1), Term.of(1, 3)]),
            Sentence.of(3, 6),
            Sentence.of(6, 9, [Term.of(7, 8)]),
        ],
    )


class TestTermsView:
    """Tests for the flat terms sequence."""

    @pytest.mark.unit
    def test_len_and_order(self, gapped_text):
        """Test terms of all sentences are listed in order."""
        view = gapped_text.terms()

        assert len(view) == 3
        assert [(t.start, t.end) for t in view] == [(0, 1), (1, 3), (7, 8)]

    @pytest.mark.unit
    def test_indexing_across_sentences(self, gapped_text):
        """Test indices map across sentence boundaries."""
        view = gapped_text.terms()

        assert view[0] == Term.of(0, 1)
        assert view[2] == Term.of(7, 8)
        assert view[-1] == Term.of(7, 8)
        assert view[-3] == Term.of(0, 1)
        assert view[1:] == [Term.of(1, 3), Term.of(7, 8)]

    @pytest.mark.unit
    def test_index_out_of_range(self, gapped_text):
        """Test out of range indices raise IndexError."""
        view = gapped_text.terms()

        with pytest.raises(IndexError):
            view[3]
        with pytest.raises(IndexError):
            view[-4]

    @pytest.mark.unit
    def test_contains(self, gapped_text):
        """Test membership."""
        view = gapped_text.terms()

        assert Term.of(7, 8) in view
        assert Term.of(3, 4) not in view
        assert view.index(Term.of(1, 3)) == 1

    @pytest.mark.unit
    def test_empty(self):
        """Test views over texts without terms."""
        assert len(AnnotatedText.of("abc").terms()) == 0
        assert list(AnnotatedText.of("abc", sentences=[Sentence.of(0, 3)]).terms()) == []

    @pytest.mark.unit
    def test_equality(self, gapped_text):
        """Test views over equal texts are equal."""
        assert gapped_text.terms() == TermsView(gapped_text)
        assert gapped_text.terms() != AnnotatedText.of("abcdefghi").terms()


class TestTermIterator:
    """Tests for the position-aware iterator."""

    @pytest.mark.unit
    def test_current_term_and_sentence(self, gapped_text):
        """Test the iterator tracks the sentence of the current term."""
        iterator = iter(gapped_text.terms())

        assert not iterator.has_current_term()
        assert iterator.has_current_sentence()
        assert iterator.sentence() == gapped_text.sentences[0]

        assert next(iterator) == Term.of(0, 1)
        assert iterator.term() == Term.of(0, 1)
        assert iterator.sentence() == gapped_text.sentences[0]

        next(iterator)
        assert next(iterator) == Term.of(7, 8)
        assert iterator.sentence() == gapped_text.sentences[2]

        with pytest.raises(StopIteration):
            next(iterator)

        # position stays on the last returned term
        assert iterator.term() == Term.of(7, 8)
        assert iterator.sentence() == gapped_text.sentences[2]

    @pytest.mark.unit
    def test_no_current_term(self, gapped_text):
        """Test term() fails before the first term is returned."""
        iterator = iter(gapped_text.terms())

        with pytest.raises(LookupError):
            iterator.term()

    @pytest.mark.unit
    def test_no_sentences(self):
        """Test sentence() fails on texts without sentences."""
        iterator = iter(AnnotatedText.of("abc").terms())

        assert not iterator.has_current_sentence()
        with pytest.raises(LookupError):
            iterator.sentence()
        with pytest.raises(StopIteration):
            next(iterator)

    @pytest.mark.unit
    def test_first_sentence_without_terms(self):
        """Test the current sentence before iteration is the first one."""
        text = AnnotatedText.of("abc", sentences=[Sentence.of(1, 2)])
        iterator = iter(text.terms())

        assert iterator.sentence() == Sentence.of(1, 2)
