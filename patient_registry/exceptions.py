"""Custom exceptions for the patient registry core."""


class PatientRegistryError(Exception):
    """Base exception for patient registry errors."""

    pass


class RecordError(PatientRegistryError):
    """Error while mapping a storage record onto the domain model."""

    pass
