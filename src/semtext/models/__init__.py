"""Immutable annotation model."""

from ..enums import MeaningKind, MeaningStatus
from .base import (
    FrozenDict,
    HasMetadata,
    HasSpan,
    MetadataMixin,
    SemTextModel,
    SpanMixin,
    metadata_of,
    replace_metadata,
    span_of,
)
from .span import Span
from .meaning import Meaning
from .term import Term
from .sentence import Sentence
from .annotated_text import AnnotatedText
from .terms_view import TermIterator, TermsView

__all__ = [
    "AnnotatedText",
    "FrozenDict",
    "HasMetadata",
    "HasSpan",
    "Meaning",
    "MeaningKind",
    "MeaningStatus",
    "MetadataMixin",
    "SemTextModel",
    "Sentence",
    "Span",
    "SpanMixin",
    "Term",
    "TermIterator",
    "TermsView",
    "metadata_of",
    "replace_metadata",
    "span_of",
]
