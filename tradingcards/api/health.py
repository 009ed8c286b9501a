"""
Health check endpoints.

Provides liveness and readiness probes with a card library check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from tradingcards.api.dependencies import get_optional_library
from tradingcards.services.card_library import CardLibrary

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    cards_loaded: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check the card library.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    library: Annotated[CardLibrary | None, Depends(get_optional_library)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns ready once the card library is loaded, 503 before that.
    """
    if library is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready")

    return HealthResponse(status="ready", cards_loaded=len(library.cards))
