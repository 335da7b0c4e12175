"""
Patient entity.

A patient is a person in a care relationship, modelled by composition:
- person: the underlying identity that decides equality and hashing
- patient_id: the patient's own surrogate key, used for lookups only
- identifiers: the IdentifierSet owned by this patient
- void and audit fields: plain state set by the owning application
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from patient_registry.domain.identifier import PatientIdentifier
from patient_registry.domain.identifier_set import IdentifierSet
from patient_registry.domain.person import PersonIdentity
from patient_registry.domain.reference import Tribe, User

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Patient:
    """
    A patient in the health-record system.

    Two patients are equal iff their person identities are equal; the
    surrogate key, tribe, identifiers and audit/void state never take part.
    """

    person: PersonIdentity = field(default_factory=PersonIdentity)
    patient_id: int | None = None
    tribe: Tribe | None = None

    # Audit
    creator: User | None = None
    date_created: datetime | None = None
    changed_by: User | None = None
    date_changed: datetime | None = None

    # Void lifecycle
    voided: bool = False
    voided_by: User | None = None
    date_voided: datetime | None = None
    void_reason: str | None = None

    identifiers: IdentifierSet = field(init=False)

    def __post_init__(self) -> None:
        if self.patient_id is None:
            self.patient_id = self.person.person_id
        self.identifiers = IdentifierSet(self.person)

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        # Identifier back-references always follow the current person
        if name == "person" and "identifiers" in self.__dict__:
            self.identifiers.owner = value
        elif name == "identifiers" and value.owner is not self.person:
            value.owner = self.person

    @classmethod
    def from_person(cls, person: PersonIdentity | None) -> "Patient":
        """Create a patient for an existing person, seeding patient_id from it."""
        if person is None:
            return cls()
        return cls(person=person)

    @classmethod
    def from_patient_id(cls, patient_id: int) -> "Patient":
        """Create a patient (and its person identity) from a known key."""
        return cls(person=PersonIdentity(patient_id), patient_id=patient_id)

    @property
    def is_voided(self) -> bool:
        return self.voided

    def void(
        self,
        voided_by: User | None,
        reason: str | None,
        date_voided: datetime | None = None,
    ) -> None:
        """
        Mark the patient voided, setting all void fields together.

        No transition checks are made: voiding a voided patient overwrites
        the previous void fields. Identifier void flags are left untouched.

        Args:
            voided_by: User performing the void
            reason: Free-text reason, may be None
            date_voided: When the void happened. Defaults to now (UTC).
        """
        self.voided = True
        self.voided_by = voided_by
        self.date_voided = date_voided or datetime.now(timezone.utc)
        self.void_reason = reason
        logger.info("Voided %s: %s", self, reason)

    def add_identifier(self, identifier: PatientIdentifier | None) -> None:
        self.identifiers.add(identifier)

    def add_identifiers(
        self, identifiers: Iterable[PatientIdentifier | None]
    ) -> None:
        self.identifiers.add_all(identifiers)

    def remove_identifier(self, identifier: PatientIdentifier | None) -> None:
        self.identifiers.remove(identifier)

    def patient_identifier(self) -> PatientIdentifier | None:
        """Convenience for identifiers.preferred()."""
        return self.identifiers.preferred()

    @property
    def active_identifiers(self) -> list[PatientIdentifier]:
        return self.identifiers.active()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Patient):
            return NotImplemented
        return self.person == other.person

    def __hash__(self) -> int:
        return hash(self.person)

    def __str__(self) -> str:
        return f"Patient#{self.patient_id}"
