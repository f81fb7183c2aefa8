# Patient Management Feature - Schemas

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field
from hospital.shared.schemas import DocumentSchema, RequestModel


# ============== Create Patient ==============

class CreatePatientRequest(RequestModel):
    """Request schema for registering a patient."""
    name: str = Field(..., min_length=1, max_length=100)
    gender: Optional[str] = Field(None, pattern=r'^(Male|Female|Other)$')
    date_of_birth: Optional[datetime] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=500)
    insurance_provider: Optional[str] = Field(None, max_length=100)
    insurance_number: Optional[str] = Field(None, max_length=50)


# ============== Update Patient ==============

class UpdatePatientRequest(RequestModel):
    """Request schema for updating patient information."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    gender: Optional[str] = Field(None, pattern=r'^(Male|Female|Other)$')
    date_of_birth: Optional[datetime] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=500)
    insurance_provider: Optional[str] = Field(None, max_length=100)
    insurance_number: Optional[str] = Field(None, max_length=50)
    version: Optional[int] = Field(None, ge=0, description="Expected current version")


# ============== Patient Response ==============

class PatientResponse(DocumentSchema):
    """Response schema for patient data."""
    name: str
    gender: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None


class PatientSummary(BaseModel):
    """Patient fields embedded in records that reference a patient."""
    id: str
    name: str
    gender: Optional[str] = None
    phone: Optional[str] = None
