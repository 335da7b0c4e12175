"""
Patient identifiers and their types.

An identifier is a value (e.g. a medical-record number) within an identifier
type (e.g. "MRN"). Identifier types come from an external catalog; only the
key and name used for lookups are carried here.
"""

from dataclasses import dataclass, field
from typing import Any

from patient_registry.domain.person import PersonIdentity


@dataclass(frozen=True)
class IdentifierType:
    """Catalog entry describing a class of identifier."""

    identifier_type_id: int | None
    name: str
    description: str | None = field(default=None, compare=False)


@dataclass(eq=False)
class PatientIdentifier:
    """
    A single identifier attached to a patient.

    Two identifiers are logically equal when they carry the same value within
    the same identifier type. The preferred/voided flags and the owner
    back-reference are mutable and do not take part in equality.

    The value and type do feed the hash. Changing either one while the
    identifier is a set member leaves the entry unreachable for lookups and
    removal; remove it first, change it, then add it back.
    """

    identifier: str
    identifier_type: IdentifierType | None
    preferred: bool = False
    voided: bool = False
    # Identity token of the owning patient, not the Patient itself
    owner: PersonIdentity | None = None

    @property
    def owner_id(self) -> int | None:
        """Person id of the owning patient, if known."""
        if self.owner is None:
            return None
        return self.owner.person_id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PatientIdentifier):
            return NotImplemented
        return (
            self.identifier == other.identifier
            and self.identifier_type == other.identifier_type
        )

    def __hash__(self) -> int:
        return hash((self.identifier, self.identifier_type))
