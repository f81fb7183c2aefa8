# Dispensing Feature - Router

from fastapi import APIRouter, status
from hospital.features.dispensing.schemas import (
    CreateDispensingRequest,
    CreateDirectDispensingRequest,
    DispensingResponse,
    DirectDispensingResponse,
)
from hospital.features.dispensing.service import DispensingService, DirectDispensingService
from hospital.shared.schemas import DataResponse, ListResponse


router = APIRouter(prefix="/dispensing", tags=["Dispensing"])
direct_router = APIRouter(prefix="/direct-dispensing", tags=["Dispensing"])


# ==================== Patient Dispensing ====================

@router.get("", response_model=ListResponse[DispensingResponse])
async def list_dispensing_records():
    """List dispensing records, each with its patient expanded."""
    records = await DispensingService.list_with_patients()
    return ListResponse(count=len(records), data=records)


@router.post("", response_model=DataResponse[DispensingResponse], status_code=status.HTTP_201_CREATED)
async def create_dispensing_record(request: CreateDispensingRequest):
    """
    Record medicine dispensed to a patient.
    
    - **patient**: Patient id
    - **medicine**: Medicine name
    - **qty**: Quantity handed out
    """
    record = await DispensingService.create(request)
    return DataResponse(data=DispensingService.to_response(record))


# ==================== Direct Dispensing ====================

@direct_router.get("", response_model=ListResponse[DirectDispensingResponse])
async def list_direct_dispensing_records():
    """List over-the-counter sales."""
    records = await DirectDispensingService.list()
    return ListResponse(
        count=len(records),
        data=[DirectDispensingService.to_response(r) for r in records],
    )


@direct_router.post("", response_model=DataResponse[DirectDispensingResponse], status_code=status.HTTP_201_CREATED)
async def create_direct_dispensing_record(request: CreateDirectDispensingRequest):
    """Record an over-the-counter sale."""
    record = await DirectDispensingService.create(request)
    return DataResponse(data=DirectDispensingService.to_response(record))
