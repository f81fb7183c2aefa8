# Dispensing Feature - Service

from typing import List
from hospital.features.dispensing.models import Dispensing, DirectDispensing
from hospital.features.dispensing.schemas import DispensingResponse, DirectDispensingResponse
from hospital.features.patients.service import PatientService
from hospital.shared.crud import ResourceService


class DispensingService(ResourceService[Dispensing]):
    """Service class for dispensing to registered patients."""
    
    model = Dispensing
    response_schema = DispensingResponse
    label = "Dispensing record"
    
    @classmethod
    async def list_with_patients(cls) -> List[DispensingResponse]:
        """
        List dispensing records with the referenced patient joined in.
        
        Patients are loaded with one extra query for all records. A record
        whose patient no longer exists keeps the bare patient id.
        """
        records = await cls.list()
        patients = await PatientService.find_by_ids(record.patient for record in records)
        
        result = []
        for record in records:
            response = cls.to_response(record)
            patient = patients.get(record.patient)
            if patient:
                response.patient = PatientService.patient_to_summary(patient)
            result.append(response)
        
        return result


class DirectDispensingService(ResourceService[DirectDispensing]):
    """Service class for over-the-counter sales."""
    
    model = DirectDispensing
    response_schema = DirectDispensingResponse
    label = "Direct dispensing record"
