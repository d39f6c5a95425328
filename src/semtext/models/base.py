"""
Shared building blocks of the annotation model.

Spans and metadata are capabilities, not a class hierarchy: any object
exposing start/end is a span and any object exposing a metadata mapping is a
metadata holder. The mixins below only add convenience methods on top of
those attributes.
"""

from copy import deepcopy
from typing import Annotated, Any, Dict, Mapping, NoReturn, Protocol, Tuple, runtime_checkable

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..errors import MetadataNotFoundError


@runtime_checkable
class HasSpan(Protocol):
    """Anything occupying the half-open range [start, end) of a text."""

    start: int
    end: int


@runtime_checkable
class HasMetadata(Protocol):
    """Anything carrying metadata under string namespaces."""

    metadata: Mapping[str, Any]


class FrozenDict(dict):
    """
    Read-only dict held by the annotation models.

    Every mutating method raises TypeError. Being a dict, it compares equal
    to plain dicts and is serialized as one.
    """

    def _readonly(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _readonly
    clear = pop = popitem = setdefault = update = _readonly

    def __copy__(self) -> "FrozenDict":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "FrozenDict":
        return FrozenDict(deepcopy(dict(self), memo))

    def __reduce__(self) -> Tuple[type, Tuple[Dict[str, Any]]]:
        return (FrozenDict, (dict(self),))


def _freeze(value: Dict[str, Any]) -> FrozenDict:
    return FrozenDict(value)


# Field types: validated input is copied, then stored read-only
Metadata = Annotated[Dict[str, Any], AfterValidator(_freeze)]
Localized = Annotated[Dict[str, Tuple[str, ...]], AfterValidator(_freeze)]


def span_of(item: HasSpan) -> Tuple[int, int]:
    """Return the (start, end) offsets of a span."""
    return item.start, item.end


def metadata_of(item: HasMetadata) -> Mapping[str, Any]:
    """Return the metadata mapping of a metadata holder."""
    return item.metadata


def replace_metadata(
    metadata: Mapping[str, Any], namespace: str, value: Any
) -> FrozenDict:
    """
    Return a copy of metadata with value set under namespace.

    Other namespaces are left untouched; the replaced namespace moves last.
    """
    replaced = {ns: payload for ns, payload in metadata.items() if ns != namespace}
    replaced[namespace] = value
    return FrozenDict(replaced)


class SemTextModel(BaseModel):
    """
    Base for all immutable annotation values.

    Python attributes are snake_case, the wire format uses camelCase aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SpanMixin:
    """Span helpers for models with start/end fields."""

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end - self.start

    def is_empty(self) -> bool:
        """True for zero-width spans."""
        return self.start == self.end

    def overlaps(self, other: HasSpan) -> bool:
        """
        Check if two spans overlap.

        Spans overlap unless one ends at or before the other starts, so
        touching spans don't overlap while a zero-width span strictly inside
        another one does.
        """
        return not (self.end <= other.start or other.end <= self.start)

    def encloses(self, other: HasSpan) -> bool:
        """True if other lies within this span (bounds may coincide)."""
        return self.start <= other.start and other.end <= self.end

    def same_span(self, other: HasSpan) -> bool:
        """True if other has exactly the same bounds."""
        return self.start == other.start and self.end == other.end


class MetadataMixin:
    """Namespace access for models with a metadata field."""

    metadata: Mapping[str, Any]

    def has_metadata(self, namespace: str) -> bool:
        """Check whether metadata exists under namespace. Never fails."""
        return namespace in self.metadata

    def get_metadata(self, namespace: str) -> Any:
        """
        Get the metadata stored under namespace.

        Raises:
            MetadataNotFoundError: If nothing is stored under namespace
        """
        try:
            return self.metadata[namespace]
        except KeyError:
            raise MetadataNotFoundError(namespace, self) from None
