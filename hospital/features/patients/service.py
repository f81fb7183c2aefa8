# Patient Management Feature - Service

from typing import Dict, Iterable
from beanie.operators import In
from bson import ObjectId
from hospital.features.patients.models import Patient
from hospital.features.patients.schemas import PatientResponse, PatientSummary
from hospital.shared.crud import ResourceService


class PatientService(ResourceService[Patient]):
    """Service class for patient records."""
    
    model = Patient
    response_schema = PatientResponse
    label = "Patient"
    
    @staticmethod
    def patient_to_summary(patient: Patient) -> PatientSummary:
        """Convert Patient document to the embedded summary schema."""
        return PatientSummary(
            id=str(patient.id),
            name=patient.name,
            gender=patient.gender,
            phone=patient.phone,
        )
    
    @staticmethod
    async def find_by_ids(patient_ids: Iterable[str]) -> Dict[str, Patient]:
        """
        Load the patients with the given ids in one query.
        
        Malformed and unknown ids are skipped.
        
        Returns:
            Mapping of id string to Patient
        """
        object_ids = list({ObjectId(pid) for pid in patient_ids if ObjectId.is_valid(pid)})
        if not object_ids:
            return {}
        
        patients = await Patient.find(In(Patient.id, object_ids)).to_list()
        return {str(patient.id): patient for patient in patients}
    
    @staticmethod
    async def find_optional(patient_id: str):
        """Get a patient by id, or None when the id is malformed or unknown."""
        if not ObjectId.is_valid(patient_id):
            return None
        return await Patient.get(ObjectId(patient_id))
