# Stock Feature - Models

from beanie import Indexed
from pydantic import Field
from hospital.shared.models import BaseDocument


class StockItem(BaseDocument):
    """Store balance for a single medicine. Names match exactly, case included."""
    
    name: Indexed(str, unique=True)
    quantity: int = Field(default=0, ge=0)
    
    class Settings:
        name = "stock_items"
        use_state_management = True
