from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "TradingCards"
    debug: bool = False

    # One sub-directory per card set, each holding cards.txt / packs.txt / images/
    card_sets_dir: Path = Path("CardSets")

    # Give sets without a usable packs.txt the built-in three-slot pack
    create_default_packs: bool = True

    # Seed for pack opening draws; None draws from system entropy
    rng_seed: int | None = None


settings = Settings()


# =============================================================================
# CARD SET FILE LAYOUT
# =============================================================================

CARDS_FILE_NAME = "cards.txt"
PACKS_FILE_NAME = "packs.txt"
IMAGES_DIR_NAME = "images"
