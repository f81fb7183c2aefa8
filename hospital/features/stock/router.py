# Stock Feature - Router

from fastapi import APIRouter, status
from hospital.features.stock.schemas import (
    CreateStockItemRequest,
    UpdateStockItemRequest,
    StockItemResponse,
)
from hospital.features.stock.service import StockService
from hospital.shared.schemas import BaseResponse, DataResponse, ListResponse


router = APIRouter(prefix="/stock", tags=["Stock"])


@router.get("", response_model=ListResponse[StockItemResponse])
async def list_stock_items():
    """List every stock item with its current balance."""
    items = await StockService.list()
    return ListResponse(
        count=len(items),
        data=[StockService.to_response(item) for item in items],
    )


@router.post("", response_model=DataResponse[StockItemResponse], status_code=status.HTTP_201_CREATED)
async def create_stock_item(request: CreateStockItemRequest):
    """
    Create a stock item.
    
    - **name**: Medicine name, unique
    - **quantity**: Opening balance (default 0)
    """
    item = await StockService.create(request)
    return DataResponse(data=StockService.to_response(item))


@router.put("/{item_id}", response_model=DataResponse[StockItemResponse])
async def update_stock_item(item_id: str, request: UpdateStockItemRequest):
    """
    Update a stock item.
    
    - **version**: Optional; when sent the update is rejected with 409 if the
      item has changed since that version was read
    """
    item = await StockService.update(item_id, request)
    return DataResponse(data=StockService.to_response(item))


@router.delete("/{item_id}", response_model=BaseResponse, response_model_exclude_none=True)
async def delete_stock_item(item_id: str):
    """Delete a stock item."""
    await StockService.delete(item_id)
    return BaseResponse(data={})
