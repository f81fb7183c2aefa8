# Visits Feature - Router

from typing import Optional
from fastapi import APIRouter, Query, status
from hospital.features.visits.models import VisitStatus
from hospital.features.visits.schemas import (
    CreateVisitRequest,
    UpdateVisitRequest,
    PaymentStatusRequest,
    EndVisitRequest,
    VitalsRequest,
    DiagnosisRequest,
    LabOrderRequest,
    PrescriptionRequest,
    VisitResponse,
    VisitListResponse,
)
from hospital.features.visits.service import VisitService
from hospital.shared.exceptions import BadRequestException
from hospital.shared.schemas import BaseResponse, DataResponse, ListResponse


router = APIRouter(prefix="/visits", tags=["Visits"])


@router.post("", response_model=DataResponse[VisitResponse], status_code=status.HTTP_201_CREATED)
async def create_visit(request: CreateVisitRequest):
    """
    Start a visit.

    - **patient**: Patient id
    - **doctor**: Doctor id
    - **payment_required**: Visit waits in Pending Payment until payment is
      confirmed; derived from the patient's insurance when omitted
    """
    visit = await VisitService.create_visit(request)
    return DataResponse(data=VisitService.to_response(visit))


@router.get("", response_model=VisitListResponse)
async def list_visits(
    status_filter: Optional[VisitStatus] = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """
    List visits, newest first.

    - **status**: Only visits in this status (optional)
    """
    visits, total = await VisitService.list_visits(status_filter, limit=limit, offset=offset)

    return VisitListResponse(
        count=len(visits),
        data=[VisitService.to_response(v) for v in visits],
        total=total,
        has_more=offset + len(visits) < total,
    )


# NOTE: This endpoint MUST be defined BEFORE /{visit_id} to avoid route conflict
@router.get("/active", response_model=ListResponse[VisitResponse])
async def list_active_visits():
    """Visits waiting for or with a doctor (Pending and In-Progress)."""
    visits = await VisitService.list_active_visits()
    return ListResponse(
        count=len(visits),
        data=[VisitService.to_response(v) for v in visits],
    )


@router.get("/{visit_id}", response_model=DataResponse[VisitResponse])
async def get_visit(visit_id: str):
    """Get a visit by id."""
    visit = await VisitService.get(visit_id)
    return DataResponse(data=VisitService.to_response(visit))


@router.put("/{visit_id}", response_model=DataResponse[VisitResponse])
async def update_visit(visit_id: str, request: UpdateVisitRequest):
    """Edit the doctor, date or reason of a visit."""
    visit = await VisitService.update(visit_id, request)
    return DataResponse(data=VisitService.to_response(visit))


@router.delete("/{visit_id}", response_model=BaseResponse, response_model_exclude_none=True)
async def delete_visit(visit_id: str):
    """Delete a visit in any status. This cannot be undone."""
    await VisitService.delete(visit_id)
    return BaseResponse(data={})


# ==================== Lifecycle ====================

@router.patch("/{visit_id}/payment-status", response_model=DataResponse[VisitResponse])
async def confirm_payment(visit_id: str, request: Optional[PaymentStatusRequest] = None):
    """
    Confirm payment was received; the visit moves from Pending Payment to Pending.

    Returns 409 when the visit is not waiting for payment.
    """
    if request is not None and not request.payment_confirmed:
        raise BadRequestException("Payment can only be confirmed")

    visit = await VisitService.confirm_payment(visit_id)
    return DataResponse(data=VisitService.to_response(visit))


@router.patch("/{visit_id}/start", response_model=DataResponse[VisitResponse])
async def start_consultation(visit_id: str):
    """Doctor takes a queued visit: Pending to In-Progress."""
    visit = await VisitService.start_visit(visit_id)
    return DataResponse(data=VisitService.to_response(visit))


@router.put("/{visit_id}/end", response_model=DataResponse[VisitResponse])
async def end_visit(visit_id: str, request: EndVisitRequest):
    """
    Close a visit with the doctor's notes.

    Allowed from Pending or In-Progress; returns 409 otherwise.
    """
    visit = await VisitService.end_visit(visit_id, request.notes)
    return DataResponse(data=VisitService.to_response(visit))


# ==================== Clinical Record ====================

@router.put("/{visit_id}/vitals", response_model=DataResponse[VisitResponse])
async def record_vitals(visit_id: str, request: VitalsRequest):
    """Record (replace) the visit's vitals."""
    visit = await VisitService.record_vitals(visit_id, request)
    return DataResponse(data=VisitService.to_response(visit))


@router.put("/{visit_id}/diagnosis", response_model=DataResponse[VisitResponse])
async def record_diagnosis(visit_id: str, request: DiagnosisRequest):
    """Record (replace) the visit's diagnosis."""
    visit = await VisitService.record_diagnosis(visit_id, request)
    return DataResponse(data=VisitService.to_response(visit))


@router.post("/{visit_id}/lab-orders", response_model=DataResponse[VisitResponse], status_code=status.HTTP_201_CREATED)
async def add_lab_order(visit_id: str, request: LabOrderRequest):
    """Order a lab test for the visit."""
    visit = await VisitService.add_lab_order(visit_id, request)
    return DataResponse(data=VisitService.to_response(visit))


@router.post("/{visit_id}/prescriptions", response_model=DataResponse[VisitResponse], status_code=status.HTTP_201_CREATED)
async def add_prescription(visit_id: str, request: PrescriptionRequest):
    """Prescribe a medication for the visit."""
    visit = await VisitService.add_prescription(visit_id, request)
    return DataResponse(data=VisitService.to_response(visit))
