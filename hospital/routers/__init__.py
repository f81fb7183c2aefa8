"""FastAPI routers."""

from hospital.routers.health import router as health_router

__all__ = ["health_router"]
