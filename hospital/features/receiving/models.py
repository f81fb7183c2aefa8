# Item Receiving Feature - Models

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from hospital.shared.models import BaseDocument


class InvoiceLine(BaseModel):
    """A received line on a supplier invoice."""
    medicine: str = Field(..., min_length=1)
    qty: int = Field(..., gt=0)
    unit_price: Optional[float] = Field(None, ge=0)
    batch_number: Optional[str] = None
    expiry_date: Optional[datetime] = None


class Invoice(BaseDocument):
    """
    Record of goods received from a supplier.
    Append-only; it is not linked to stock items beyond the receiving call.
    """
    
    invoice_number: Optional[str] = None
    supplier: Optional[str] = None
    received_date: datetime = Field(default_factory=datetime.utcnow)
    items: List[InvoiceLine] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    
    class Settings:
        name = "invoices"
        use_state_management = True
