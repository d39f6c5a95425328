"""
Registry of metadata payload types.

Metadata payloads are arbitrary objects, so the wire format can't tell which
type a payload must be decoded into. Applications register, for each holder
class and namespace, the payload type; the codec looks it up when loading.

The registry is a plain object handed to the codec, so independent codecs
may use different registrations.
"""

from typing import Any, Dict, FrozenSet, Tuple, Type

import structlog
from pydantic import TypeAdapter

from ..errors import MetadataNotFoundError
from ..models import AnnotatedText, Meaning, Sentence, Term

logger = structlog.get_logger(__name__)

HOLDER_TYPES: Tuple[type, ...] = (Meaning, Term, Sentence, AnnotatedText)


class MetadataRegistry:
    """
    Map (holder type, namespace) to metadata payload types.

    Examples:
        >>> registry = MetadataRegistry()
        >>> registry.register(Term, "linker", Dict[str, float])
        >>> registry.namespaces(Term)
        frozenset({'linker'})
    """

    def __init__(self):
        self._types: Dict[type, Dict[str, Any]] = {}
        self._adapters: Dict[Tuple[type, str], TypeAdapter] = {}

    def register(self, holder_type: Type, namespace: str, payload_type: Any) -> None:
        """
        Register the payload type of a namespace for a holder class.

        Registering a namespace again replaces its payload type.

        Args:
            holder_type: One of Meaning, Term, Sentence, AnnotatedText
            namespace: Non-empty metadata namespace
            payload_type: Any type pydantic can validate (models, dataclasses,
                builtins, typing generics)

        Raises:
            ValueError: On an unknown holder type or an empty namespace
        """
        if holder_type not in HOLDER_TYPES:
            raise ValueError(
                f"Metadata holder must be one of "
                f"{', '.join(t.__name__ for t in HOLDER_TYPES)}, found {holder_type!r}"
            )
        if not namespace:
            raise ValueError("Metadata namespace can't be empty!")

        self._types.setdefault(holder_type, {})[namespace] = payload_type
        self._adapters.pop((holder_type, namespace), None)

        logger.debug(
            "metadata_type_registered",
            holder_type=holder_type.__name__,
            namespace=namespace,
            payload_type=repr(payload_type),
        )

    def is_registered(self, holder_type: Type, namespace: str) -> bool:
        return namespace in self._types.get(holder_type, {})

    def namespaces(self, holder_type: Type) -> FrozenSet[str]:
        """Namespaces registered for a holder class."""
        return frozenset(self._types.get(holder_type, {}))

    def payload_type(self, holder_type: Type, namespace: str) -> Any:
        """
        Payload type registered for a holder class and namespace.

        Raises:
            MetadataNotFoundError: If nothing is registered
        """
        try:
            return self._types[holder_type][namespace]
        except KeyError:
            raise MetadataNotFoundError(namespace) from None

    def adapter(self, holder_type: Type, namespace: str) -> TypeAdapter:
        """Cached pydantic adapter validating payloads of a namespace."""
        key = (holder_type, namespace)
        if key not in self._adapters:
            self._adapters[key] = TypeAdapter(self.payload_type(holder_type, namespace))
        return self._adapters[key]

    def clear(self) -> None:
        """Drop all registrations."""
        self._types.clear()
        self._adapters.clear()
