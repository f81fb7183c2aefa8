# Visits Feature - Models

from typing import List, Optional
from datetime import datetime
from enum import Enum
from beanie import Indexed
from pydantic import BaseModel, Field
from hospital.shared.models import BaseDocument


class VisitStatus(str, Enum):
    """
    Visit lifecycle.
    
    Pending Payment -> Pending -> In-Progress -> Completed. Visits that do not
    need upfront payment start at Pending.
    """
    PENDING_PAYMENT = "Pending Payment"
    PENDING = "Pending"
    IN_PROGRESS = "In-Progress"
    COMPLETED = "Completed"


# Statuses in which clinical data can be recorded and the visit can be ended
ACTIVE_STATUSES = [VisitStatus.PENDING.value, VisitStatus.IN_PROGRESS.value]


class Vitals(BaseModel):
    """Vital signs taken during a visit."""
    temperature: Optional[float] = None  # Celsius
    blood_pressure: Optional[str] = None  # e.g. 120/80
    heart_rate: Optional[int] = None
    respiratory_rate: Optional[int] = None
    oxygen_saturation: Optional[float] = None
    weight: Optional[float] = None  # kg
    height: Optional[float] = None  # cm
    recorded_at: datetime = Field(default_factory=datetime.utcnow)


class Diagnosis(BaseModel):
    """Working diagnosis for a visit."""
    condition: str
    icd10_code: Optional[str] = None
    notes: Optional[str] = None
    recorded_at: datetime = Field(default_factory=datetime.utcnow)


class LabOrder(BaseModel):
    """Laboratory test ordered during a visit."""
    test_name: str
    notes: Optional[str] = None
    status: str = "pending"
    ordered_at: datetime = Field(default_factory=datetime.utcnow)


class Prescription(BaseModel):
    """Medication prescribed during a visit."""
    medication: str
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    quantity: Optional[int] = None
    prescribed_at: datetime = Field(default_factory=datetime.utcnow)


class Visit(BaseDocument):
    """
    A patient's visit to a doctor.
    
    Status only changes through the lifecycle operations in VisitService,
    each a single conditional update on the current status.
    """
    
    patient: Indexed(str)  # References Patient._id
    doctor: str  # References User._id
    visit_date: datetime = Field(default_factory=datetime.utcnow)
    reason: Optional[str] = None
    
    # Uninsured patients pay before the visit is queued
    payment_required: bool = True
    status: VisitStatus = VisitStatus.PENDING
    
    # Clinical record
    vitals: Optional[Vitals] = None
    diagnosis: Optional[Diagnosis] = None
    lab_orders: List[LabOrder] = Field(default_factory=list)
    prescriptions: List[Prescription] = Field(default_factory=list)
    notes: Optional[str] = None
    
    # Lifecycle timestamps
    payment_confirmed_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    
    class Settings:
        name = "visits"
        use_state_management = True
        indexes = [
            # Index for the status-filtered visit list
            [("status", 1), ("visit_date", -1)],
        ]
