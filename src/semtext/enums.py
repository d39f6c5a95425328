"""
Enumerations of the annotation model.
"""

from enum import Enum


class MeaningKind(str, Enum):
    """Kind of referent a meaning points to."""

    ENTITY = "ENTITY"
    CONCEPT = "CONCEPT"
    UNKNOWN = "UNKNOWN"


class MeaningStatus(str, Enum):
    """
    Disambiguation status of a term.

    SELECTED and REVIEWED require a selected meaning with a non-empty id,
    TO_DISAMBIGUATE and NOT_SURE require no selected meaning. Any status may
    move to any other one as long as the pairing holds.
    """

    # Meaning proposed by the system, not yet reviewed by a user
    SELECTED = "SELECTED"
    # No candidate chosen yet; default for a fresh span
    TO_DISAMBIGUATE = "TO_DISAMBIGUATE"
    # User confirmed or chose the meaning
    REVIEWED = "REVIEWED"
    # User declined to choose among too similar candidates
    NOT_SURE = "NOT_SURE"

    @property
    def requires_selection(self) -> bool:
        """True when the status must be paired with a selected meaning."""
        return self in (MeaningStatus.SELECTED, MeaningStatus.REVIEWED)
