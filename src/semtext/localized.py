"""
Localized string dictionaries.

A localized dictionary maps a language tag (e.g. "it", "en-GB", or the root
tag "" for unknown) to the strings written in that language.
"""

from typing import Dict, Iterable, List, Tuple

from .constants import ROOT_LANGUAGE

LocalizedDict = Dict[str, List[str]]


def any_string(localized: LocalizedDict, languages: Iterable[str] = ()) -> Tuple[str, str]:
    """
    Pick the most suitable string of a localized dictionary.

    Preferred languages are tried in order; if none has a non-empty string,
    the first non-empty string of any language is returned.

    Args:
        localized: Localized dictionary to pick from
        languages: Preferred language tags, most wanted first

    Returns:
        Tuple (language, string); (ROOT_LANGUAGE, "") when nothing is found

    Examples:
        >>> any_string({"it": ["ciao"], "en": ["hello"]}, ["en"])
        ('en', 'hello')
        >>> any_string({"it": ["ciao"]}, ["fr"])
        ('it', 'ciao')
    """
    for language in languages:
        for string in localized.get(language, []):
            if string:
                return language, string

    for language, strings in localized.items():
        for string in strings:
            if string:
                return language, string

    return ROOT_LANGUAGE, ""
