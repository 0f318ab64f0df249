"""
Health check endpoints.
Simple endpoints for monitoring application health and datastore reachability.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.models import DatabaseTimeResponse, ErrorResponse
from src.config.database import DatabaseEngine
from src.config.settings import Settings, get_settings
from src.controllers.database_controller import DatabaseController

router = APIRouter(tags=["health"])
database_router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    version: str
    environment: str


def get_database_controller(engine: DatabaseEngine) -> DatabaseController:
    """Dependency injection for DatabaseController."""
    return DatabaseController(engine)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic health check endpoint."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version="1.0.0",
        environment=settings.environment,
    )


@database_router.get(
    "/test-db",
    response_model=DatabaseTimeResponse,
    responses={500: {"model": ErrorResponse, "description": "DB connection failed"}},
)
async def test_db(controller: DatabaseController = Depends(get_database_controller)):
    """Check the datastore is reachable and report its clock."""
    return await controller.test_connection()
