"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Sample meanings and terms
- Annotated texts with one or more sentences
- Metadata registry and codec
- Test settings
"""

from typing import List

import pytest
import structlog

from semtext.config import Settings
from semtext.enums import MeaningKind, MeaningStatus
from semtext.models import AnnotatedText, Meaning, Sentence, Term
from semtext.serialization import MetadataRegistry, SemTextCodec


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_settings() -> Settings:
    """
    Create settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="DEBUG",
        log_json=False,  # Easier to read in tests
        disambiguation_factor=1.5,
    )


@pytest.fixture
def paris_meanings() -> List[Meaning]:
    """Candidate meanings of the word "Paris", not normalized."""
    return [
        Meaning.of("Q90", MeaningKind.ENTITY, 0.6, name={"en": ["Paris"], "it": ["Parigi"]}),
        Meaning.of("Q167646", MeaningKind.ENTITY, 0.3, name={"en": ["Paris (mythology)"]}),
        Meaning.of("Q830149", MeaningKind.ENTITY, 0.1, name={"en": ["Paris, Texas"]}),
    ]


@pytest.fixture
def selected_term(paris_meanings) -> Term:
    """Term [0, 5) with its most probable meaning selected."""
    return Term.of(
        0,
        5,
        MeaningStatus.SELECTED,
        paris_meanings[0],
        paris_meanings,
    )


@pytest.fixture
def sample_text(selected_term) -> AnnotatedText:
    """
    "Paris is in France" with a single sentence and two terms.

    Terms:
    - [0, 5) "Paris", SELECTED
    - [12, 18) "France", TO_DISAMBIGUATE
    """
    france = Term.of(12, 18, meanings=[Meaning.of("Q142", MeaningKind.ENTITY, 1.0)])
    return AnnotatedText.of_terms("Paris is in France", [selected_term, france], "en")


@pytest.fixture
def two_sentences_text() -> AnnotatedText:
    """
    "Rome. Milan." split in two sentences, each holding one term.

    Sentences: [0, 5) and [6, 12); terms: [0, 4) "Rome", [6, 11) "Milan".
    """
    return AnnotatedText.of(
        "Rome. Milan.",
        "en",
        [
            Sentence.of(0, 5, [Term.of(0, 4)]),
            Sentence.of(6, 12, [Term.of(6, 11)]),
        ],
    )


@pytest.fixture
def registry() -> MetadataRegistry:
    """Empty metadata registry."""
    return MetadataRegistry()


@pytest.fixture
def codec(registry) -> SemTextCodec:
    """Codec bound to the registry fixture."""
    return SemTextCodec(registry)
