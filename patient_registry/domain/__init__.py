"""
Patient domain model.

This module handles:
- Patient identity delegated to the underlying person identity
- The patient's identifier set and preferred-identifier resolution
- Void lifecycle and audit bookkeeping
"""

from patient_registry.domain.identifier import IdentifierType, PatientIdentifier
from patient_registry.domain.identifier_set import IdentifierSet
from patient_registry.domain.patient import Patient
from patient_registry.domain.person import PersonIdentity
from patient_registry.domain.reference import Tribe, User

__all__ = [
    "IdentifierSet",
    "IdentifierType",
    "Patient",
    "PatientIdentifier",
    "PersonIdentity",
    "Tribe",
    "User",
]
