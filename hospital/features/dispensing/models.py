# Dispensing Feature - Models

from typing import Optional
from datetime import datetime
from beanie import Indexed
from pydantic import Field
from hospital.shared.models import BaseDocument


class Dispensing(BaseDocument):
    """
    Medicine handed to a registered patient.
    Written once; stock balances are not adjusted.
    """
    
    patient: Indexed(str)  # References Patient._id
    medicine: str = Field(..., min_length=1)
    qty: int = Field(..., gt=0)
    dispensed_at: datetime = Field(default_factory=datetime.utcnow)
    
    class Settings:
        name = "dispensing"
        use_state_management = True


class DirectDispensing(BaseDocument):
    """Over-the-counter sale with no patient record."""
    
    medicine: str = Field(..., min_length=1)
    qty: int = Field(..., gt=0)
    customer_name: Optional[str] = None
    unit_price: Optional[float] = Field(None, ge=0)
    dispensed_at: datetime = Field(default_factory=datetime.utcnow)
    
    class Settings:
        name = "direct_dispensing"
        use_state_management = True
