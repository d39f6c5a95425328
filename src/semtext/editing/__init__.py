"""Editing operations over annotated texts: merging and deleting terms."""

from .deleter import delete_terms, delete_terms_matching
from .merger import merge_terms
from .ranges import Range, RangeSet

__all__ = ["Range", "RangeSet", "delete_terms", "delete_terms_matching", "merge_terms"]
