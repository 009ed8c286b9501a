"""
Validate card set definitions.

Loads every set under the card sets directory, logs what was registered
and reports validation problems. Exits non-zero if any were found, so it
can gate content changes in CI.
"""

import argparse
import logging
import sys
from pathlib import Path

from tradingcards.config import settings
from tradingcards.models.rarity import is_valid_rarity
from tradingcards.services.card_library import CardLibrary, load_card_library

logger = logging.getLogger(__name__)


def run_validation(card_sets_dir: Path, create_default_packs: bool = True) -> CardLibrary:
    """
    Load and validate all card sets.

    Non-canonical rarity labels are logged as warnings; they still load
    (as Uncommon quality) and are not counted as issues.
    """
    logger.info("Validating card sets in %s...", card_sets_dir)

    library = load_card_library(card_sets_dir, create_default_packs=create_default_packs)

    for card in library.cards:
        if not is_valid_rarity(card.rarity):
            logger.warning(
                "Card '%s' in %s uses non-standard rarity '%s'",
                card.card_name,
                card.set_name,
                card.rarity,
            )

    logger.info(
        "Validation complete: %d sets, %d cards, %d packs, %d issues",
        len(library.set_names()),
        len(library.cards),
        len(library.packs),
        len(library.issues),
    )
    return library


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Validate trading card set definitions")
    parser.add_argument(
        "card_sets_dir",
        nargs="?",
        type=Path,
        default=settings.card_sets_dir,
        help="Directory with one sub-directory per card set",
    )
    parser.add_argument(
        "--no-default-packs",
        action="store_true",
        help="Do not generate a default pack for sets without packs.txt",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    library = run_validation(args.card_sets_dir, create_default_packs=not args.no_default_packs)
    return 1 if library.issues else 0


if __name__ == "__main__":
    sys.exit(main())
