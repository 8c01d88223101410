"""
Health check endpoint.

Liveness check only; the service holds no connections between requests.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness check.

    Returns healthy if the service is running.
    Does not check Scryfall.
    """
    return HealthResponse(status="healthy")
