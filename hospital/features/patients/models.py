# Patient Management Feature - Models

from typing import Optional
from datetime import datetime
from hospital.shared.models import BaseDocument


class Patient(BaseDocument):
    """Patient document model."""
    
    name: str
    gender: Optional[str] = None  # Male, Female, Other
    date_of_birth: Optional[datetime] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    
    # Patients without an insurer pay before their visit is queued
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None
    
    class Settings:
        name = "patients"
        use_state_management = True
    
    @property
    def is_insured(self) -> bool:
        return bool(self.insurance_provider)
