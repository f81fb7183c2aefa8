"""Hospital Management API - patients, visits, stock and dispensing."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from hospital.config import Settings, settings as default_settings
from hospital.database import Database
from hospital.core.logging import logger
from hospital.routers import health_router
from hospital.features.stock.router import router as stock_router
from hospital.features.receiving.router import router as receiving_router
from hospital.features.requisitions.router import router as requisitions_router
from hospital.features.dispensing.router import router as dispensing_router
from hospital.features.dispensing.router import direct_router as direct_dispensing_router
from hospital.features.patients.router import router as patients_router
from hospital.features.visits.router import router as visits_router
from hospital.shared.schemas import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI application."""
    # Startup
    logger.info("Starting Hospital Management API...")
    await app.state.database.connect()
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await app.state.database.close()
    logger.info("Application shutdown complete")


def error_response(status_code: int, message: str, detail: Optional[dict] = None) -> JSONResponse:
    """Render the ``{success: false, message}`` envelope."""
    body = ErrorResponse(message=message, detail=detail)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error in the response envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request data",
            {"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(PyMongoError)
    async def store_exception_handler(request: Request, exc: PyMongoError):
        logger.error(f"Database error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable")


def create_app(app_settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment settings)
        database: Database handle; built from the settings when not given
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Hospital management backend API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database or Database(app_settings.MONGODB_URL, app_settings.DATABASE_NAME)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers
    prefix = app_settings.API_V1_PREFIX
    app.include_router(health_router)
    app.include_router(stock_router, prefix=prefix)
    app.include_router(receiving_router, prefix=prefix)
    app.include_router(requisitions_router, prefix=prefix)
    app.include_router(dispensing_router, prefix=prefix)
    app.include_router(direct_dispensing_router, prefix=prefix)
    app.include_router(patients_router, prefix=prefix)
    app.include_router(visits_router, prefix=prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": app_settings.APP_NAME,
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "hospital.main:app",
        host="0.0.0.0",
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
    )
