"""
Reference entities a patient points at.

Users and tribes are owned by other parts of the system; only the attributes
a patient record carries are modelled here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A system user recorded in audit and void fields."""

    user_id: int | None = None
    username: str | None = None


@dataclass(frozen=True)
class Tribe:
    """Tribe reference data attached to a patient."""

    tribe_id: int | None = None
    name: str | None = None
    retired: bool = False
