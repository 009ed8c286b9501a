"""
Shared FastAPI dependencies.

The card library lives on app.state and is set by the application lifespan.
"""

import random
from typing import Annotated

from fastapi import HTTPException, Query, Request, status

from tradingcards.config import settings
from tradingcards.services.card_library import CardLibrary


def get_optional_library(request: Request) -> CardLibrary | None:
    """The loaded library, or None before startup has finished."""
    return getattr(request.app.state, "library", None)


def get_library(request: Request) -> CardLibrary:
    """
    Dependency that provides the loaded card library.

    Raises 503 if the library has not been loaded.
    """
    library = get_optional_library(request)
    if library is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Card library not loaded",
        )
    return library


def get_rng(
    seed: Annotated[int | None, Query(description="Seed for a reproducible draw")] = None,
) -> random.Random:
    """Random source for pack opening. Falls back to the configured seed."""
    return random.Random(seed if seed is not None else settings.rng_seed)
