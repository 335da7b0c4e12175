"""
Identifier set owned by a patient.

Handles:
- Duplicate suppression (one entry per logically-equal identifier)
- Owner back-reference assignment on insertion
- Preferred identifier resolution by type key or type name
- Active (non-voided) filtering
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from patient_registry.domain.identifier import PatientIdentifier
from patient_registry.domain.person import PersonIdentity
from patient_registry.settings import IdentifierFallback, settings

logger = logging.getLogger(__name__)


class IdentifierSet:
    """
    The identifiers attached to one patient.

    Members are kept in insertion order, so iteration (and therefore the
    fallback of the preferred lookups) is deterministic. Not thread-safe:
    callers serialize access to a single patient.
    """

    def __init__(
        self,
        owner: PersonIdentity,
        identifiers: Iterable[PatientIdentifier | None] = (),
        fallback: IdentifierFallback | None = None,
    ):
        """
        Initialize the set.

        Args:
            owner: Identity of the owning patient, assigned to every member
            identifiers: Initial members, added one by one
            fallback: Non-preferred match policy for the preferred lookups.
                Defaults to settings.identifier_fallback.
        """
        self._owner = owner
        self.fallback = fallback or settings.identifier_fallback
        # dict keys double as an insertion-ordered set
        self._members: dict[PatientIdentifier, None] = {}
        self.add_all(identifiers)

    @property
    def owner(self) -> PersonIdentity:
        return self._owner

    @owner.setter
    def owner(self, owner: PersonIdentity) -> None:
        """Rebind the set to a new owner, re-pointing every member."""
        self._owner = owner
        for pi in self._members:
            pi.owner = owner

    def add(self, identifier: PatientIdentifier | None) -> None:
        """
        Add an identifier unless an equal one is already present.

        The identifier's owner is set to this set's owner before insertion.
        None is ignored.
        """
        if identifier is None:
            return

        identifier.owner = self._owner
        if identifier in self._members:
            logger.debug(
                "Identifier of type %s already present for person %s",
                _type_name(identifier),
                self._owner.person_id,
            )
            return
        self._members[identifier] = None

    def add_all(self, identifiers: Iterable[PatientIdentifier | None]) -> None:
        """Add each identifier in order, skipping ones already present."""
        for identifier in identifiers:
            self.add(identifier)

    def remove(self, identifier: PatientIdentifier | None) -> None:
        """
        Remove the entry equal to the given identifier, if any.

        The removed identifier keeps its owner reference.
        """
        if identifier is None or identifier not in self._members:
            return
        del self._members[identifier]
        logger.debug(
            "Removed identifier of type %s from person %s",
            _type_name(identifier),
            self._owner.person_id,
        )

    def preferred(self) -> PatientIdentifier | None:
        """
        Return any identifier of the patient, or None when there are none.

        No preference ordering is applied; use preferred_by_type or
        preferred_by_type_name to honor the preferred flag.
        """
        return next(iter(self._members), None)

    def preferred_by_type(
        self, identifier_type_id: int | None
    ) -> PatientIdentifier | None:
        """
        Return the preferred identifier with the given identifier type key.

        Args:
            identifier_type_id: Key of the identifier type to match

        Returns:
            The first matching identifier flagged preferred. If no match is
            preferred, the last (or first, per the fallback policy) match.
            None when no identifier has this type.

        Raises:
            AttributeError: If a member has no identifier type
        """
        return self._resolve(
            lambda pi: pi.identifier_type.identifier_type_id  # type: ignore[union-attr]
            == identifier_type_id
        )

    def preferred_by_type_name(self, name: str) -> PatientIdentifier | None:
        """
        Return the preferred identifier with the given identifier type name.

        Same resolution rules as preferred_by_type.
        """
        return self._resolve(
            lambda pi: pi.identifier_type.name == name  # type: ignore[union-attr]
        )

    def active(self) -> list[PatientIdentifier]:
        """Return all non-voided identifiers in iteration order."""
        return [pi for pi in self._members if not pi.voided]

    def _resolve(
        self, matches: Callable[[PatientIdentifier], bool]
    ) -> PatientIdentifier | None:
        """Scan members, returning the first preferred match or the fallback."""
        found: PatientIdentifier | None = None
        for pi in self._members:
            if not matches(pi):
                continue
            if pi.preferred:
                return pi
            if found is None or self.fallback == IdentifierFallback.LAST:
                found = pi
        return found

    def __iter__(self) -> Iterator[PatientIdentifier]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._members

    def __repr__(self) -> str:
        return f"IdentifierSet(owner={self._owner!r}, size={len(self)})"


def _type_name(identifier: PatientIdentifier) -> str | None:
    """Identifier type name for log messages."""
    if identifier.identifier_type is None:
        return None
    return identifier.identifier_type.name
