# Patient Management Feature - Router

from fastapi import APIRouter, status
from hospital.features.patients.schemas import (
    CreatePatientRequest,
    UpdatePatientRequest,
    PatientResponse,
)
from hospital.features.patients.service import PatientService
from hospital.shared.schemas import BaseResponse, DataResponse, ListResponse


router = APIRouter(prefix="/patients", tags=["Patients"])


@router.post("", response_model=DataResponse[PatientResponse], status_code=status.HTTP_201_CREATED)
async def create_patient(request: CreatePatientRequest):
    """
    Register a patient.
    
    Patients without an **insurance_provider** must pay before their visits
    are queued.
    """
    patient = await PatientService.create(request)
    return DataResponse(data=PatientService.to_response(patient))


@router.get("", response_model=ListResponse[PatientResponse])
async def list_patients():
    """List all patients."""
    patients = await PatientService.list()
    return ListResponse(
        count=len(patients),
        data=[PatientService.to_response(p) for p in patients],
    )


@router.get("/{patient_id}", response_model=DataResponse[PatientResponse])
async def get_patient(patient_id: str):
    """Get a patient by id."""
    patient = await PatientService.get(patient_id)
    return DataResponse(data=PatientService.to_response(patient))


@router.put("/{patient_id}", response_model=DataResponse[PatientResponse])
async def update_patient(patient_id: str, request: UpdatePatientRequest):
    """Update a patient's information."""
    patient = await PatientService.update(patient_id, request)
    return DataResponse(data=PatientService.to_response(patient))


@router.delete("/{patient_id}", response_model=BaseResponse, response_model_exclude_none=True)
async def delete_patient(patient_id: str):
    """
    Delete a patient.
    
    Visits and dispensing records that reference the patient are kept.
    """
    await PatientService.delete(patient_id)
    return BaseResponse(data={})
