# Requisitions Feature - Schemas

from typing import List, Optional
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from hospital.features.requisitions.models import ItemStatus, RequisitionStatus
from hospital.shared.schemas import DocumentSchema, RequestModel


class RequisitionItemRequest(RequestModel):
    """A line on a requisition."""
    medicine: str = Field(..., min_length=1, max_length=200)
    qty: int = Field(..., gt=0)
    status: ItemStatus = ItemStatus.PENDING
    issued_qty: int = Field(0, ge=0)


class CreateRequisitionRequest(RequestModel):
    """Request schema for sending a requisition."""
    department: str = Field(
        ...,
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("department", "from"),
        description="Requesting department",
    )
    date: Optional[datetime] = None
    items: List[RequisitionItemRequest] = Field(default_factory=list)
    status: RequisitionStatus = RequisitionStatus.SENT
    
    class Config:
        json_schema_extra = {
            "example": {
                "from": "Pharmacy",
                "items": [
                    {"medicine": "Paracetamol 500mg", "qty": 100},
                    {"medicine": "Amoxicillin 250mg", "qty": 40},
                ],
            }
        }


class UpdateRequisitionRequest(RequestModel):
    """
    Request schema for updating a requisition (header and/or lines).
    
    ``items`` replaces the stored lines; line N of the request is line N
    of the stored requisition, new lines are appended at the end.
    """
    department: Optional[str] = Field(
        None,
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("department", "from"),
    )
    date: Optional[datetime] = None
    items: Optional[List[RequisitionItemRequest]] = None
    status: Optional[RequisitionStatus] = None
    version: Optional[int] = Field(None, ge=0, description="Expected current version")


class RequisitionItemResponse(BaseModel):
    """A requisition line as sent to clients (``issuedQty``)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    medicine: str
    qty: int
    status: ItemStatus
    issued_qty: int = 0


class RequisitionResponse(DocumentSchema):
    """Response schema for a requisition; the department is sent as ``from``."""
    model_config = ConfigDict(populate_by_name=True)
    
    department: str = Field(..., alias="from")
    date: datetime
    items: List[RequisitionItemResponse] = []
    status: RequisitionStatus
