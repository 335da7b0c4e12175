"""Storage records for patients and their identifiers."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """Stored reference to a system user."""

    user_id: int | None = None
    username: str | None = None


class TribeRecord(BaseModel):
    """Stored reference to tribe reference data."""

    tribe_id: int | None = None
    name: str | None = None
    retired: bool = False


class IdentifierTypeRecord(BaseModel):
    """Stored identifier type reference."""

    identifier_type_id: int | None = Field(
        default=None,
        description="Identifier type key in the external catalog",
    )
    name: str = Field(description="Identifier type name, e.g. 'MRN'")
    description: str | None = None


class PatientIdentifierRecord(BaseModel):
    """Stored patient identifier."""

    identifier: str = Field(description="Identifier value")
    identifier_type: IdentifierTypeRecord | None = None
    preferred: bool = False
    voided: bool = False
    patient_id: int | None = Field(
        default=None,
        description="Person id of the owning patient",
    )


class PatientRecord(BaseModel):
    """Stored patient with every persisted attribute."""

    patient_id: int | None = Field(
        default=None,
        description="Patient surrogate key",
    )
    person_id: int | None = Field(
        default=None,
        description="Underlying person identity key",
    )
    tribe: TribeRecord | None = None
    identifiers: list[PatientIdentifierRecord] = Field(default_factory=list)

    creator: UserRecord | None = None
    date_created: datetime | None = None
    changed_by: UserRecord | None = None
    date_changed: datetime | None = None

    voided: bool = False
    voided_by: UserRecord | None = None
    date_voided: datetime | None = None
    void_reason: str | None = None
