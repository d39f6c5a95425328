"""Exception hierarchy for semantic text construction, editing and decoding.

Errors do not derive from ValueError: pydantic wraps ValueError raised inside
model validators into its own ValidationError, while these propagate to the
caller as they are.
"""

from typing import Any, Optional


class SemTextError(Exception):
    """Base exception for all semtext errors."""

    pass


# ============================================================================
# SPANS
# ============================================================================


class SpanError(SemTextError):
    """Base class for span and span-set invariant violations."""

    pass


class InvalidSpanError(SpanError):
    """Raised when a span has a negative start or a start after its end.

    Attributes:
        start: Offending start offset
        end: Offending end offset
    """

    def __init__(self, start: int, end: int, context: Optional[str] = None) -> None:
        self.start = start
        self.end = end
        super().__init__(
            with_context(context, f"invalid bounds [{start}, {end})")
        )


class OutOfOrderSpanError(SpanError):
    """Raised when a span precedes the span listed before it."""

    def __init__(self, prior: Any, current: Any, context: Optional[str] = None) -> None:
        self.prior = prior
        self.current = current
        super().__init__(
            with_context(
                context,
                f"span {_bounds(current)} comes before previous span {_bounds(prior)}",
            )
        )


class OverlappingSpanError(SpanError):
    """Raised when two adjacent spans of a span set overlap."""

    def __init__(self, prior: Any, current: Any, context: Optional[str] = None) -> None:
        self.prior = prior
        self.current = current
        super().__init__(
            with_context(
                context,
                f"span {_bounds(prior)} overlaps with span {_bounds(current)}",
            )
        )


class OutOfBoundsSpanError(SpanError):
    """Raised when a span set exceeds the bounds of its container."""

    def __init__(
        self,
        left_bound: int,
        right_bound: int,
        lower: int,
        upper: int,
        context: Optional[str] = None,
    ) -> None:
        self.left_bound = left_bound
        self.right_bound = right_bound
        self.lower = lower
        self.upper = upper
        super().__init__(
            with_context(
                context,
                f"spans exceed container span: expected [{left_bound}, {right_bound}], "
                f"found [{lower}, {upper}]",
            )
        )


# ============================================================================
# MEANINGS
# ============================================================================


class InvalidMeaningStatusError(SemTextError):
    """Raised when a meaning status is paired with an incompatible selected meaning."""

    pass


class InvalidProbabilityError(SemTextError):
    """Raised when a probability or score falls outside its accepted range."""

    def __init__(self, score: float, message: str) -> None:
        self.score = score
        super().__init__(message)


# ============================================================================
# METADATA
# ============================================================================


class MetadataNotFoundError(SemTextError, LookupError):
    """Raised when querying a metadata namespace that is not present."""

    def __init__(self, namespace: str, holder: Any = None) -> None:
        self.namespace = namespace
        self.holder = holder
        where = f" in {type(holder).__name__}" if holder is not None else ""
        super().__init__(f"There is no metadata under the namespace '{namespace}'{where}")


class SemTextMetadataError(SemTextError):
    """Raised when metadata can't be decoded from the wire format.

    Attributes:
        holder_type: Class under which metadata was being decoded
        namespace: Namespace of the metadata
        payload_type: Type the payload was decoded into, None if unknown
    """

    def __init__(
        self,
        message: str,
        holder_type: Optional[type] = None,
        namespace: Optional[str] = None,
        payload_type: Any = None,
    ) -> None:
        self.holder_type = holder_type
        self.namespace = namespace
        self.payload_type = payload_type
        holder_name = holder_type.__name__ if holder_type is not None else "None"
        found_type = (
            f" failed instantiation of {payload_type!r} in" if payload_type is not None else ""
        )
        where = f" namespace '{namespace}' in" if namespace is not None else ""
        super().__init__(f"{message}{found_type}{where} object of class '{holder_name}'")


class UnregisteredMetadataNamespaceError(SemTextMetadataError):
    """Raised when the wire format carries a namespace with no registered type."""

    pass


class MetadataDecodeError(SemTextMetadataError):
    """Raised when a registered metadata payload fails to parse or is null."""

    pass


def _bounds(span: Any) -> str:
    return f"[{span.start}, {span.end})"


def with_context(context: Optional[str], reason: str) -> str:
    if context:
        return f"{context} -- Reason: {reason}"
    return reason
