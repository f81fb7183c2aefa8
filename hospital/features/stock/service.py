# Stock Feature - Service

from datetime import datetime
from beanie import UpdateResponse
from beanie.operators import Inc, Set, SetOnInsert
from hospital.features.stock.models import StockItem
from hospital.features.stock.schemas import StockItemResponse
from hospital.shared.crud import ResourceService
from hospital.core.logging import logger


class StockService(ResourceService[StockItem]):
    """Service class for store balances."""
    
    model = StockItem
    response_schema = StockItemResponse
    label = "Stock item"
    
    @staticmethod
    async def receive(medicine: str, qty: int) -> StockItem:
        """
        Add received goods to the balance of ``medicine``.
        
        Increments the existing item, or creates it with ``qty`` if no item
        has that exact name. Lookup, increment and insert happen in a single
        find-and-modify with upsert, so concurrent receipts of the same
        medicine cannot lose an increment.
        
        Args:
            medicine: Exact stock item name
            qty: Quantity received (positive)
            
        Returns:
            The stock item after the increment
        """
        now = datetime.utcnow()
        
        item = await StockItem.find_one(StockItem.name == medicine).update(
            Inc({StockItem.quantity: qty, StockItem.version: 1}),
            Set({StockItem.updated_at: now}),
            SetOnInsert({StockItem.created_at: now}),
            upsert=True,
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        
        logger.info(f"Received {qty} of '{medicine}' (balance {item.quantity})")
        return item
