# Stock Feature

from hospital.features.stock.models import StockItem
from hospital.features.stock.router import router
from hospital.features.stock.service import StockService

__all__ = ["StockItem", "router", "StockService"]
