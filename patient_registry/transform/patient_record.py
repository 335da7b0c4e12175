"""
Patient <-> PatientRecord mapping.

The storage layer loads and saves PatientRecord values; these functions move
every persisted attribute across that boundary unchanged.
"""

import logging

from patient_registry.domain import (
    IdentifierType,
    Patient,
    PatientIdentifier,
    PersonIdentity,
    Tribe,
    User,
)
from patient_registry.exceptions import RecordError
from patient_registry.schemas.patient_records import (
    IdentifierTypeRecord,
    PatientIdentifierRecord,
    PatientRecord,
    TribeRecord,
    UserRecord,
)

logger = logging.getLogger(__name__)


def patient_to_record(patient: Patient) -> PatientRecord:
    """
    Convert a Patient to its storage record.

    Identifiers are emitted in the identifier set's iteration order.

    Args:
        patient: Patient to convert

    Returns:
        PatientRecord carrying every persisted attribute
    """
    return PatientRecord(
        patient_id=patient.patient_id,
        person_id=patient.person.person_id,
        tribe=_tribe_to_record(patient.tribe),
        identifiers=[_identifier_to_record(pi) for pi in patient.identifiers],
        creator=_user_to_record(patient.creator),
        date_created=patient.date_created,
        changed_by=_user_to_record(patient.changed_by),
        date_changed=patient.date_changed,
        voided=patient.voided,
        voided_by=_user_to_record(patient.voided_by),
        date_voided=patient.date_voided,
        void_reason=patient.void_reason,
    )


def patient_from_record(record: PatientRecord) -> Patient:
    """
    Rebuild a Patient from its storage record.

    Identifiers are restored through the patient's identifier set, so each
    one ends up owned by the rebuilt patient.

    Args:
        record: Stored patient

    Returns:
        Patient with the record's state

    Raises:
        RecordError: If an identifier record belongs to a different person
    """
    for id_record in record.identifiers:
        owner_id = id_record.patient_id
        if owner_id is not None and owner_id != record.person_id:
            raise RecordError(
                f"Identifier of patient {owner_id} found in record "
                f"of person {record.person_id}"
            )

    patient = Patient(
        person=PersonIdentity(record.person_id),
        tribe=_tribe_from_record(record.tribe),
        creator=_user_from_record(record.creator),
        date_created=record.date_created,
        changed_by=_user_from_record(record.changed_by),
        date_changed=record.date_changed,
        voided=record.voided,
        voided_by=_user_from_record(record.voided_by),
        date_voided=record.date_voided,
        void_reason=record.void_reason,
    )
    # Stored as-is, even when unset while person_id is known
    patient.patient_id = record.patient_id
    patient.add_identifiers(_identifier_from_record(r) for r in record.identifiers)

    logger.debug(
        "Loaded %s with %d identifiers (%d in record)",
        patient,
        len(patient.identifiers),
        len(record.identifiers),
    )
    return patient


def _identifier_to_record(identifier: PatientIdentifier) -> PatientIdentifierRecord:
    """Convert a PatientIdentifier to its record."""
    id_type = identifier.identifier_type
    return PatientIdentifierRecord(
        identifier=identifier.identifier,
        identifier_type=(
            IdentifierTypeRecord(
                identifier_type_id=id_type.identifier_type_id,
                name=id_type.name,
                description=id_type.description,
            )
            if id_type
            else None
        ),
        preferred=identifier.preferred,
        voided=identifier.voided,
        patient_id=identifier.owner_id,
    )


def _identifier_from_record(record: PatientIdentifierRecord) -> PatientIdentifier:
    """Convert a PatientIdentifierRecord to a PatientIdentifier (owner unset)."""
    id_type = record.identifier_type
    return PatientIdentifier(
        identifier=record.identifier,
        identifier_type=(
            IdentifierType(
                identifier_type_id=id_type.identifier_type_id,
                name=id_type.name,
                description=id_type.description,
            )
            if id_type
            else None
        ),
        preferred=record.preferred,
        voided=record.voided,
    )


def _user_to_record(user: User | None) -> UserRecord | None:
    if user is None:
        return None
    return UserRecord(user_id=user.user_id, username=user.username)


def _user_from_record(record: UserRecord | None) -> User | None:
    if record is None:
        return None
    return User(user_id=record.user_id, username=record.username)


def _tribe_to_record(tribe: Tribe | None) -> TribeRecord | None:
    if tribe is None:
        return None
    return TribeRecord(tribe_id=tribe.tribe_id, name=tribe.name, retired=tribe.retired)


def _tribe_from_record(record: TribeRecord | None) -> Tribe | None:
    if record is None:
        return None
    return Tribe(tribe_id=record.tribe_id, name=record.name, retired=record.retired)
