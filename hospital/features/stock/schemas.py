# Stock Feature - Schemas

from typing import Optional
from pydantic import Field
from hospital.shared.schemas import DocumentSchema, RequestModel


class CreateStockItemRequest(RequestModel):
    """Request schema for creating a stock item."""
    name: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(0, ge=0)


class UpdateStockItemRequest(RequestModel):
    """Request schema for updating a stock item."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    quantity: Optional[int] = Field(None, ge=0)
    version: Optional[int] = Field(None, ge=0, description="Expected current version")


class ReceiveItemRequest(RequestModel):
    """Request schema for receiving goods into stock."""
    medicine: str = Field(..., min_length=1, max_length=200)
    qty: int = Field(..., gt=0)


class StockItemResponse(DocumentSchema):
    """Response schema for a stock item."""
    name: str
    quantity: int
