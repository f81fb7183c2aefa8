# Requisitions Feature - Models

from typing import List
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from hospital.shared.models import BaseDocument


class ItemStatus(str, Enum):
    """Status of a single requested line."""
    PENDING = "Pending"
    ISSUED = "Issued"
    REJECTED = "Rejected"


class RequisitionStatus(str, Enum):
    """Header status of a requisition."""
    SENT = "Sent"
    PROCESSING = "Processing"
    CLOSED = "Closed"


# Issued and Rejected are final for a line
TERMINAL_ITEM_STATUSES = {ItemStatus.ISSUED.value, ItemStatus.REJECTED.value}


class RequisitionItem(BaseModel):
    """A requested medicine and how the store answered it."""
    
    model_config = ConfigDict(use_enum_values=True)
    
    medicine: str = Field(..., min_length=1)
    qty: int = Field(..., gt=0)
    status: ItemStatus = ItemStatus.PENDING
    issued_qty: int = Field(default=0, ge=0)
    
    @model_validator(mode="after")
    def issued_qty_only_when_issued(self):
        if self.issued_qty and self.status != ItemStatus.ISSUED.value:
            raise ValueError("issued_qty can only be set on an issued item")
        return self


class Requisition(BaseDocument):
    """
    Request from a department to the store for a list of medicines.
    
    The header status and the line statuses are set independently; nothing
    keeps them consistent (a Closed requisition may still hold Pending lines).
    """
    
    department: str = Field(..., min_length=1)
    date: datetime = Field(default_factory=datetime.utcnow)
    items: List[RequisitionItem] = Field(default_factory=list)
    status: RequisitionStatus = RequisitionStatus.SENT
    
    class Settings:
        name = "requisitions"
        use_state_management = True
