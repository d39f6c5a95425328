"""Wire format of the annotation model and metadata type registration."""

from .codec import SemTextCodec
from .registry import MetadataRegistry

__all__ = ["MetadataRegistry", "SemTextCodec"]
