"""
Underlying person identity.

A Patient is always layered on a person. Two patients are the same patient
exactly when they share the same person identity, so equality and hashing
live here rather than on the patient's own surrogate key.
"""

from typing import Any


class PersonIdentity:
    """
    Identity token shared between a person record and its patient.

    Equality rules:
    - Both identities have a person_id: equal iff the ids are equal.
    - Otherwise: equal only to itself.

    The hash follows the same rule, which means assigning a person_id to an
    identity that already sits in a set or dict key changes its hash. Such
    containers must be rebuilt after the id is assigned.
    """

    __slots__ = ("person_id",)

    def __init__(self, person_id: int | None = None):
        self.person_id = person_id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PersonIdentity):
            return NotImplemented
        if self.person_id is not None and other.person_id is not None:
            return self.person_id == other.person_id
        return self is other

    def __hash__(self) -> int:
        if self.person_id is None:
            return object.__hash__(self)
        return hash(self.person_id)

    def __repr__(self) -> str:
        return f"PersonIdentity(person_id={self.person_id!r})"
