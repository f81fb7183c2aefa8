# Requisitions Feature - Router

from fastapi import APIRouter, status
from hospital.features.requisitions.schemas import (
    CreateRequisitionRequest,
    UpdateRequisitionRequest,
    RequisitionResponse,
)
from hospital.features.requisitions.service import RequisitionService
from hospital.shared.schemas import DataResponse, ListResponse


router = APIRouter(prefix="/requisitions", tags=["Requisitions"])


@router.get("", response_model=ListResponse[RequisitionResponse])
async def list_requisitions():
    """List all requisitions."""
    requisitions = await RequisitionService.list()
    return ListResponse(
        count=len(requisitions),
        data=[RequisitionService.to_response(r) for r in requisitions],
    )


@router.post("", response_model=DataResponse[RequisitionResponse], status_code=status.HTTP_201_CREATED)
async def create_requisition(request: CreateRequisitionRequest):
    """
    Send a requisition to the store.
    
    - **department**: Requesting department (``from`` is accepted too)
    - **items**: Lines of ``{medicine, qty}``; each starts Pending with issued_qty 0
    - **status**: Header status, Sent by default
    """
    requisition = await RequisitionService.create(request)
    return DataResponse(data=RequisitionService.to_response(requisition))


@router.put("/{requisition_id}", response_model=DataResponse[RequisitionResponse])
async def update_requisition(requisition_id: str, request: UpdateRequisitionRequest):
    """
    Update a requisition.
    
    Sending ``items`` replaces the whole line list. Lines already Issued or
    Rejected cannot be changed. The header ``status`` is taken as sent.
    """
    requisition = await RequisitionService.update(requisition_id, request)
    return DataResponse(data=RequisitionService.to_response(requisition))
