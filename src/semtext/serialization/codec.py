"""
JSON codec for the annotation model.

Wire format (camelCase keys):

    {
      "text": "...", "locale": "it", "metadata": {"<ns>": <payload>},
      "sentences": [
        {"start": 0, "end": 10, "metadata": {...},
         "terms": [
           {"start": 0, "end": 5, "meaningStatus": "SELECTED",
            "selectedMeaning": {...}, "meanings": [{...}], "metadata": {...}}
         ]}
      ]
    }

Metadata payloads are decoded into the type registered for the holder class
and namespace; unregistered namespaces and null payloads are rejected.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

import structlog
from pydantic import ValidationError

from ..errors import MetadataDecodeError, UnregisteredMetadataNamespaceError
from ..models import AnnotatedText, Meaning, Sentence, Term
from ..models.base import SemTextModel
from .registry import HOLDER_TYPES, MetadataRegistry

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SemTextModel)

# (field name, child holder type, is a list) for each nested holder field
_CHILDREN: Dict[type, List[Tuple[str, type, bool]]] = {
    AnnotatedText: [("sentences", Sentence, True)],
    Sentence: [("terms", Term, True)],
    Term: [("selected_meaning", Meaning, False), ("meanings", Meaning, True)],
    Meaning: [],
}


class SemTextCodec:
    """
    Convert annotation models to and from their JSON wire format.

    Args:
        registry: Metadata payload types used when loading

    Examples:
        >>> registry = MetadataRegistry()
        >>> registry.register(Term, "score", float)
        >>> codec = SemTextCodec(registry)
        >>> text = AnnotatedText.of_terms("Rome", [Term.of(0, 4).with_metadata("score", 0.5)])
        >>> codec.loads(AnnotatedText, codec.dumps(text)) == text
        True
    """

    def __init__(self, registry: MetadataRegistry):
        self.registry = registry

    # ========================================================================
    # DUMP
    # ========================================================================

    def dump(self, obj: SemTextModel) -> Dict[str, Any]:
        """
        Convert a model to a JSON-compatible dict with wire keys.

        Metadata payloads are encoded by pydantic from their runtime type
        (models, dataclasses, datetimes, builtins).
        """
        return obj.model_dump(mode="json", by_alias=True)

    def dumps(self, obj: SemTextModel, indent: Optional[int] = None) -> str:
        """Convert a model to a JSON string."""
        return json.dumps(self.dump(obj), ensure_ascii=False, indent=indent)

    # ========================================================================
    # LOAD
    # ========================================================================

    def load(self, holder_type: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
        """
        Build a model of holder_type from its wire format.

        Raises:
            UnregisteredMetadataNamespaceError: On a namespace with no registered type
            MetadataDecodeError: On a null payload or one failing validation
            SemTextError: When the decoded model breaks an invariant
            pydantic.ValidationError: On malformed non-metadata fields
        """
        if holder_type not in HOLDER_TYPES:
            raise ValueError(f"Can't load objects of type {holder_type!r}")
        return holder_type.model_validate(self._prepare(holder_type, data))

    def loads(self, holder_type: Type[ModelT], payload: str) -> ModelT:
        """Build a model of holder_type from a JSON string."""
        return self.load(holder_type, json.loads(payload))

    def _prepare(self, holder_type: type, data: Any) -> Any:
        """
        Replace raw metadata with decoded payloads, recursively.

        Models accept both wire keys and field names, so children are looked
        up under both.
        """
        if not isinstance(data, Mapping):
            # left to pydantic to reject
            return data

        prepared = dict(data)
        metadata = data.get("metadata")
        prepared["metadata"] = self._decode_metadata(
            holder_type, {} if metadata is None else metadata
        )

        for name, child_type, many in _CHILDREN[holder_type]:
            for key in _keys(holder_type, name):
                value = prepared.get(key)
                if value is None:
                    continue
                if many and isinstance(value, (list, tuple)):
                    prepared[key] = [self._prepare(child_type, item) for item in value]
                elif not many:
                    prepared[key] = self._prepare(child_type, value)

        return prepared

    def _decode_metadata(self, holder_type: type, metadata: Any) -> Dict[str, Any]:
        if not isinstance(metadata, Mapping):
            raise MetadataDecodeError(
                f"Metadata must be an object, found instead {type(metadata).__name__} in",
                holder_type,
            )

        decoded = {}
        registered = self.registry.namespaces(holder_type)

        for namespace, raw in metadata.items():
            if namespace not in registered:
                raise UnregisteredMetadataNamespaceError(
                    "Found metadata under not registered namespace while deserializing!",
                    holder_type,
                    namespace,
                )

            payload_type = self.registry.payload_type(holder_type, namespace)
            if raw is None:
                raise MetadataDecodeError(
                    "Found null metadata while deserializing!",
                    holder_type,
                    namespace,
                    payload_type,
                )

            try:
                decoded[namespace] = self.registry.adapter(holder_type, namespace).validate_python(raw)
            except ValidationError as e:
                logger.error(
                    "metadata_decode_failed",
                    holder_type=holder_type.__name__,
                    namespace=namespace,
                    error=str(e),
                )
                raise MetadataDecodeError(
                    "Error while deserializing metadata -",
                    holder_type,
                    namespace,
                    payload_type,
                ) from e

        return decoded


def _keys(holder_type: Type[SemTextModel], name: str) -> Tuple[str, ...]:
    """Return the wire key and the field name of a field, wire key first."""
    alias = holder_type.model_fields[name].alias
    return (alias, name) if alias and alias != name else (name,)
