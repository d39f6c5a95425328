"""
Conversions between annotated texts and localized dictionaries.

Only text and language survive: annotations, sentences and metadata are not
representable in a localized dictionary.
"""

from typing import Iterable, List

from .localized import LocalizedDict
from .models import AnnotatedText


def annotated_texts_to_dict(annotated_texts: Iterable[AnnotatedText]) -> LocalizedDict:
    """
    Group the texts by language.

    Examples:
        >>> annotated_texts_to_dict([AnnotatedText.of("ciao", "it"),
        ...                          AnnotatedText.of("salve", "it")])
        {'it': ['ciao', 'salve']}
    """
    localized: LocalizedDict = {}
    for annotated_text in annotated_texts:
        localized.setdefault(annotated_text.language, []).append(annotated_text.text)
    return localized


def dict_to_annotated_texts(localized: LocalizedDict) -> List[AnnotatedText]:
    """
    Create a bare annotated text for every string of a localized dictionary.

    Texts are listed in dictionary order, then in the order of the strings.
    """
    return [
        AnnotatedText.of(text, language)
        for language, texts in localized.items()
        for text in texts
    ]
