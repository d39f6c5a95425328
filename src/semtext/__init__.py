# Semantic text annotation model

from .constants import DISAMBIGUATION_FACTOR, ROOT_LANGUAGE, TOLERANCE
from .enums import MeaningKind, MeaningStatus
from .errors import (
    InvalidMeaningStatusError,
    InvalidProbabilityError,
    InvalidSpanError,
    MetadataDecodeError,
    MetadataNotFoundError,
    OutOfBoundsSpanError,
    OutOfOrderSpanError,
    OverlappingSpanError,
    SemTextError,
    SemTextMetadataError,
    SpanError,
    UnregisteredMetadataNamespaceError,
)
from .localized import LocalizedDict, any_string
from .models import (
    AnnotatedText,
    HasMetadata,
    HasSpan,
    Meaning,
    Sentence,
    Span,
    Term,
    TermIterator,
    TermsView,
)
from .meanings import disambiguate, merge_meanings, normalize_meanings
from .conversions import annotated_texts_to_dict, dict_to_annotated_texts
from .editing import Range, RangeSet, delete_terms, delete_terms_matching, merge_terms
from .serialization import MetadataRegistry, SemTextCodec

__version__ = "1.0.0"

__all__ = [
    "AnnotatedText",
    "DISAMBIGUATION_FACTOR",
    "HasMetadata",
    "HasSpan",
    "InvalidMeaningStatusError",
    "InvalidProbabilityError",
    "InvalidSpanError",
    "LocalizedDict",
    "Meaning",
    "MeaningKind",
    "MeaningStatus",
    "MetadataDecodeError",
    "MetadataNotFoundError",
    "MetadataRegistry",
    "OutOfBoundsSpanError",
    "OutOfOrderSpanError",
    "OverlappingSpanError",
    "ROOT_LANGUAGE",
    "Range",
    "RangeSet",
    "SemTextCodec",
    "SemTextError",
    "SemTextMetadataError",
    "Sentence",
    "Span",
    "SpanError",
    "TOLERANCE",
    "Term",
    "TermIterator",
    "TermsView",
    "annotated_texts_to_dict",
    "any_string",
    "delete_terms",
    "delete_terms_matching",
    "dict_to_annotated_texts",
    "disambiguate",
    "merge_meanings",
    "merge_terms",
    "normalize_meanings",
]
