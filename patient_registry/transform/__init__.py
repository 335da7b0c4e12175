"""
Storage boundary transforms.

Converts Patient entities to and from the PatientRecord values exchanged with
the storage layer.
"""

from patient_registry.transform.patient_record import (
    patient_from_record,
    patient_to_record,
)

__all__ = ["patient_from_record", "patient_to_record"]
