from tradingcards.api.health import router as health_router
from tradingcards.api.packs import router as packs_router
from tradingcards.api.sets import router as sets_router

__all__ = [
    "health_router",
    "packs_router",
    "sets_router",
]
