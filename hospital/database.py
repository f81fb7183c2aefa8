"""MongoDB database connection manager."""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from hospital.core.logging import logger


def document_models() -> list:
    """All Beanie document models registered with the database."""
    from hospital.features.stock.models import StockItem
    from hospital.features.receiving.models import Invoice
    from hospital.features.requisitions.models import Requisition
    from hospital.features.dispensing.models import Dispensing, DirectDispensing
    from hospital.features.patients.models import Patient
    from hospital.features.visits.models import Visit

    return [
        StockItem,
        Invoice,
        Requisition,
        Dispensing,
        DirectDispensing,
        Patient,
        Visit,
    ]


class Database:
    """
    MongoDB connection handle.

    Constructed once by the application factory and kept on ``app.state``.
    A pre-built client may be passed in (tests use an in-memory one).
    """

    def __init__(self, url: str, name: str, client: Optional[AsyncIOMotorClient] = None):
        self.url = url
        self.name = name
        self.client = client

    async def connect(self):
        """Connect to MongoDB and initialize Beanie."""
        if self.client is None:
            self.client = AsyncIOMotorClient(self.url)

        await init_beanie(
            database=self.client[self.name],
            document_models=document_models(),
        )

        logger.info(f"Connected to MongoDB database: {self.name}")

    async def close(self):
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Closed MongoDB connection")

    async def ping(self) -> bool:
        """Round-trip to the server; raises a PyMongoError when unreachable."""
        await self.client.admin.command("ping")
        return True
