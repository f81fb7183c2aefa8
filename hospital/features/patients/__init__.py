# Patient Management Feature

from hospital.features.patients.models import Patient
from hospital.features.patients.router import router
from hospital.features.patients.service import PatientService

__all__ = ["Patient", "router", "PatientService"]
