"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: sitechat.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sitechat.api.deps import get_settings_dependency
from sitechat.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Report which vector store backend is configured."""
    return HealthResponse(
        status="healthy",
        message=f"Vector store configured: {settings.vector_store.store_type}",
    )
