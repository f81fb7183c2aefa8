# Visits Feature - Schemas

from typing import List, Optional
from datetime import datetime
from pydantic import Field, model_validator
from hospital.features.visits.models import (
    Diagnosis,
    LabOrder,
    Prescription,
    Vitals,
    VisitStatus,
)
from hospital.shared.schemas import DocumentSchema, RequestModel, ListResponse


# ============== Start / Edit Visit ==============

class CreateVisitRequest(RequestModel):
    """Request schema for starting a visit."""
    patient: str = Field(..., min_length=1, description="Patient id")
    doctor: str = Field(..., min_length=1, description="Doctor (user) id")
    visit_date: Optional[datetime] = None
    reason: Optional[str] = Field(None, max_length=500)
    payment_required: Optional[bool] = Field(
        None,
        description="Whether payment is due before care; derived from the patient's insurance when omitted",
    )
    
    class Config:
        json_schema_extra = {
            "example": {
                "patient": "665f1c2e8b3e4a1d2c3b4a59",
                "doctor": "665f1c2e8b3e4a1d2c3b4a10",
                "reason": "Persistent cough",
                "payment_required": True,
            }
        }


class UpdateVisitRequest(RequestModel):
    """Request schema for editing visit details. Status is not editable here."""
    doctor: Optional[str] = Field(None, min_length=1)
    visit_date: Optional[datetime] = None
    reason: Optional[str] = Field(None, max_length=500)
    version: Optional[int] = Field(None, ge=0, description="Expected current version")


# ============== Lifecycle ==============

class PaymentStatusRequest(RequestModel):
    """Request schema for confirming a visit's payment."""
    payment_confirmed: bool = True


class EndVisitRequest(RequestModel):
    """Request schema for closing a visit."""
    notes: Optional[str] = Field(None, max_length=5000)


# ============== Clinical Record ==============

class VitalsRequest(RequestModel):
    """Request schema for recording vitals."""
    temperature: Optional[float] = Field(None, ge=25, le=45)
    blood_pressure: Optional[str] = Field(None, pattern=r'^\d{2,3}/\d{2,3}$')
    heart_rate: Optional[int] = Field(None, ge=0, le=300)
    respiratory_rate: Optional[int] = Field(None, ge=0, le=100)
    oxygen_saturation: Optional[float] = Field(None, ge=0, le=100)
    weight: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    
    @model_validator(mode="after")
    def at_least_one_reading(self):
        if all(value is None for value in self.model_dump().values()):
            raise ValueError("At least one vital sign is required")
        return self


class DiagnosisRequest(RequestModel):
    """Request schema for recording a diagnosis."""
    condition: str = Field(..., min_length=1, max_length=200)
    icd10_code: Optional[str] = Field(None, max_length=10)
    notes: Optional[str] = Field(None, max_length=5000)


class LabOrderRequest(RequestModel):
    """Request schema for ordering a lab test."""
    test_name: str = Field(..., min_length=1, max_length=200)
    notes: Optional[str] = Field(None, max_length=1000)


class PrescriptionRequest(RequestModel):
    """Request schema for prescribing a medication."""
    medication: str = Field(..., min_length=1, max_length=200)
    dosage: Optional[str] = Field(None, max_length=100)
    frequency: Optional[str] = Field(None, max_length=100)
    duration: Optional[str] = Field(None, max_length=100)
    quantity: Optional[int] = Field(None, gt=0)


# ============== Visit Response ==============

class VisitResponse(DocumentSchema):
    """Response schema for visit data."""
    patient: str
    doctor: str
    visit_date: datetime
    reason: Optional[str] = None
    payment_required: bool
    status: VisitStatus
    vitals: Optional[Vitals] = None
    diagnosis: Optional[Diagnosis] = None
    lab_orders: List[LabOrder] = []
    prescriptions: List[Prescription] = []
    notes: Optional[str] = None
    payment_confirmed_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None


class VisitListResponse(ListResponse[VisitResponse]):
    """Response schema for a page of visits."""
    total: int
    has_more: bool
