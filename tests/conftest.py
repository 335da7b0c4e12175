"""Test configuration and fixtures."""

import pytest

from patient_registry.domain import (
    IdentifierType,
    Patient,
    PatientIdentifier,
    PersonIdentity,
    Tribe,
    User,
)

MRN_TYPE_ID = 1
NATIONAL_ID_TYPE_ID = 2


@pytest.fixture
def mrn_type() -> IdentifierType:
    """Medical record number identifier type."""
    return IdentifierType(
        identifier_type_id=MRN_TYPE_ID,
        name="MRN",
        description="Medical record number",
    )


@pytest.fixture
def national_id_type() -> IdentifierType:
    """National ID identifier type."""
    return IdentifierType(identifier_type_id=NATIONAL_ID_TYPE_ID, name="National ID")


@pytest.fixture
def person() -> PersonIdentity:
    """Person identity that has not been assigned a key yet."""
    return PersonIdentity()


@pytest.fixture
def patient(person: PersonIdentity) -> Patient:
    """Patient backed by an unkeyed person identity."""
    return Patient.from_person(person)


@pytest.fixture
def clerk() -> User:
    """Registration clerk used for audit and void fields."""
    return User(user_id=7, username="clerk")


@pytest.fixture
def tribe() -> Tribe:
    """Sample tribe reference."""
    return Tribe(tribe_id=3, name="Luo")


@pytest.fixture
def mrn_a(mrn_type: IdentifierType) -> PatientIdentifier:
    """Non-preferred MRN."""
    return PatientIdentifier(identifier="MRN-1001", identifier_type=mrn_type)


@pytest.fixture
def mrn_b(mrn_type: IdentifierType) -> PatientIdentifier:
    """Preferred MRN."""
    return PatientIdentifier(
        identifier="MRN-1002", identifier_type=mrn_type, preferred=True
    )
