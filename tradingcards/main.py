from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradingcards.api import health_router, packs_router, sets_router
from tradingcards.config import settings
from tradingcards.services.card_library import load_card_library


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler: load card sets on startup."""
    app.state.library = load_card_library(
        settings.card_sets_dir,
        create_default_packs=settings.create_default_packs,
    )
    yield
    app.state.library = None


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    version=pkg_version("tradingcards"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(sets_router)
app.include_router(packs_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
