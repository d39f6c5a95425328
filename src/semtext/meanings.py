"""
Meaning list normalization, merging and disambiguation.

Candidate meanings of a term are always stored deduplicated, with
probabilities summing to 1.0 and sorted from the most to the least probable.
"""

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

import structlog

from .config import settings

if TYPE_CHECKING:
    from .enums import MeaningKind
    from .models.meaning import Meaning


logger = structlog.get_logger(__name__)


def normalize_meanings(meanings: Iterable["Meaning"]) -> List["Meaning"]:
    """
    Deduplicate, normalize and sort candidate meanings.

    Steps:
    1. Deduplicate by (id, kind); the first occurrence wins
    2. Sum probabilities
    3. If the sum is <= 0, every candidate gets 1/n
    4. Otherwise divide every probability by the sum
    5. Sort by descending probability; ties keep their input order

    Args:
        meanings: Candidate meanings, not modified

    Returns:
        New list of meanings with normalized probabilities

    Examples:
        >>> ms = normalize_meanings([
        ...     Meaning.of("a", MeaningKind.ENTITY, 0.2),
        ...     Meaning.of("b", MeaningKind.ENTITY, 0.6),
        ...     Meaning.of("a", MeaningKind.ENTITY, 0.9),  # duplicate, dropped
        ... ])
        >>> [(m.id, m.probability) for m in ms]
        [('b', 0.75), ('a', 0.25)]
    """
    dedup: Dict[Tuple[str, "MeaningKind"], "Meaning"] = {}
    for meaning in meanings:
        dedup.setdefault((meaning.id, meaning.kind), meaning)

    if not dedup:
        return []

    total = sum(m.probability for m in dedup.values())

    if total <= 0:
        uniform = 1.0 / len(dedup)
        normalized = [m.with_probability(uniform) for m in dedup.values()]
    else:
        normalized = [m.with_probability(m.probability / total) for m in dedup.values()]

    # sorted() is stable: equal probabilities keep first-occurrence order
    return sorted(normalized, key=lambda m: m.probability, reverse=True)


def merge_meanings(
    old_meanings: Iterable["Meaning"], new_meanings: Iterable["Meaning"]
) -> List["Meaning"]:
    """
    Merge two meaning lists into one normalized list.

    New meanings replace old meanings equal to them (same id and kind).

    Args:
        old_meanings: Existing meanings
        new_meanings: Meanings taking precedence

    Returns:
        Deduplicated, normalized and sorted list of meanings
    """
    return normalize_meanings([*new_meanings, *old_meanings])


def disambiguate(
    meanings: Iterable["Meaning"], factor: Optional[float] = None
) -> Optional["Meaning"]:
    """
    Pick the clearly best meaning of a ranked list, if any.

    The first meaning wins when it has a non-empty id and its probability is
    greater than factor / len(meanings). A single meaning wins when its id is
    non-empty.

    Args:
        meanings: Meanings ranked with the most probable first
        factor: Disambiguation factor (default: settings.disambiguation_factor)

    Returns:
        The disambiguated meaning, or None if no meaning clearly stands out

    Examples:
        >>> disambiguate([Meaning.of("a", MeaningKind.ENTITY, 0.8),
        ...               Meaning.of("b", MeaningKind.ENTITY, 0.2)]).id
        'a'
        >>> disambiguate([Meaning.of("a", MeaningKind.ENTITY, 0.5),
        ...               Meaning.of("b", MeaningKind.ENTITY, 0.5)]) is None
        True
    """
    ranked = list(meanings)
    if factor is None:
        factor = settings.disambiguation_factor

    if not ranked:
        return None

    first = ranked[0]

    if len(ranked) == 1:
        return first if first.id else None

    if first.probability > factor / len(ranked) and first.id:
        return first

    logger.debug(
        "disambiguation_inconclusive",
        candidates=len(ranked),
        top_id=first.id,
        top_probability=first.probability,
        threshold=factor / len(ranked),
    )
    return None
