# Item Receiving Feature - Schemas

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import Field
from hospital.features.receiving.models import InvoiceLine
from hospital.shared.schemas import DocumentSchema, RequestModel


class InvoiceLineRequest(RequestModel):
    """A received line on a supplier invoice."""
    medicine: str = Field(..., min_length=1, max_length=200)
    qty: int = Field(..., gt=0)
    unit_price: Optional[float] = Field(None, ge=0)
    batch_number: Optional[str] = Field(None, max_length=100)
    expiry_date: Optional[datetime] = None


class CreateInvoiceRequest(RequestModel):
    """Request schema for recording a supplier invoice."""
    invoice_number: Optional[str] = Field(None, max_length=100)
    supplier: Optional[str] = Field(None, max_length=200)
    received_date: Optional[datetime] = None
    items: List[InvoiceLineRequest] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    
    class Config:
        json_schema_extra = {
            "example": {
                "invoice_number": "INV-2041",
                "supplier": "MedSupply Ltd",
                "items": [
                    {"medicine": "Paracetamol 500mg", "qty": 200, "unit_price": 0.05, "batch_number": "B7731"}
                ],
                "metadata": {"received_by": "store"},
            }
        }


class InvoiceResponse(DocumentSchema):
    """Response schema for an invoice."""
    invoice_number: Optional[str] = None
    supplier: Optional[str] = None
    received_date: datetime
    items: List[InvoiceLine] = []
    metadata: Dict[str, Any] = {}
