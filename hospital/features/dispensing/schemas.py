# Dispensing Feature - Schemas

from typing import Optional, Union
from datetime import datetime
from pydantic import Field
from hospital.features.patients.schemas import PatientSummary
from hospital.shared.schemas import DocumentSchema, RequestModel


class CreateDispensingRequest(RequestModel):
    """Request schema for dispensing to a patient."""
    patient: str = Field(..., min_length=1, description="Patient id")
    medicine: str = Field(..., min_length=1, max_length=200)
    qty: int = Field(..., gt=0)
    dispensed_at: Optional[datetime] = None


class CreateDirectDispensingRequest(RequestModel):
    """Request schema for an over-the-counter sale."""
    medicine: str = Field(..., min_length=1, max_length=200)
    qty: int = Field(..., gt=0)
    customer_name: Optional[str] = Field(None, max_length=100)
    unit_price: Optional[float] = Field(None, ge=0)
    dispensed_at: Optional[datetime] = None


class DispensingResponse(DocumentSchema):
    """
    Response schema for a dispensing record.
    ``patient`` is the joined patient when it still exists, otherwise the raw id.
    """
    patient: Union[PatientSummary, str]
    medicine: str
    qty: int
    dispensed_at: datetime


class DirectDispensingResponse(DocumentSchema):
    """Response schema for an over-the-counter sale."""
    medicine: str
    qty: int
    customer_name: Optional[str] = None
    unit_price: Optional[float] = None
    dispensed_at: datetime
