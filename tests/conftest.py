from pathlib import Path

import pytest

from tradingcards.models.card import TradingCard
from tradingcards.models.pack import CardPack, PackSlot, SlotMode
from tradingcards.services.card_library import CardLibrary

SAMPLE_CARDS_TXT = """# Example Set card list
# CardName | SetName | SetNumber | ImageFile | Rarity | Weight | Value | Description
Duck Hero | Example Set | 001 | duck_hero.png | Common | 0.1 | 10
Duck Sidekick | Example Set | 002 | sidekick.png | Uncommon | 0.05 | 25
Duck Wizard | Example Set | 003 | wizard.png | Rare | 0.01 | 100 | Casts quacking spells
Golden Duck | Example Set | 004 | golden.png | Legendary | 0.001 | 500 | A legendary duck
"""

SAMPLE_PACKS_TXT = """# Example Set packs
Booster Pack | booster.png | 100
  RARITY: Common:100, Uncommon:30
  RARITY: Common:50, Uncommon:50, Rare:10

Collector Pack | collector.png | 250 | 0.05
\tCARDS: Golden Duck:1, Duck Wizard:9
"""


@pytest.fixture
def sample_cards() -> list[TradingCard]:
    """Four cards of the Example Set, one per rarity tier."""
    return [
        TradingCard("Duck Hero", "Example Set", 1, "duck_hero.png", "Common", 0.1, 10),
        TradingCard("Duck Sidekick", "Example Set", 2, "sidekick.png", "Uncommon", 0.05, 25),
        TradingCard("Duck Wizard", "Example Set", 3, "wizard.png", "Rare", 0.01, 100),
        TradingCard("Golden Duck", "Example Set", 4, "golden.png", "Legendary", 0.001, 500),
    ]


@pytest.fixture
def sample_library(sample_cards: list[TradingCard]) -> CardLibrary:
    """Library with the Example Set cards and two packs."""
    library = CardLibrary()
    for card in sample_cards:
        library.add_card(card)

    library.add_pack(
        CardPack(
            pack_name="Booster Pack",
            set_name="Example Set",
            image_file="booster.png",
            value=100,
            slots=[
                PackSlot(mode=SlotMode.RARITY, weights={"Common": 100.0, "Uncommon": 30.0}),
                PackSlot(mode=SlotMode.RARITY, weights={"Rare": 1.0}),
            ],
        )
    )
    library.add_pack(
        CardPack(
            pack_name="Collector Pack",
            set_name="Example Set",
            image_file="collector.png",
            value=250,
            slots=[PackSlot(mode=SlotMode.CARDS, weights={"Golden Duck": 1.0})],
        )
    )
    return library


@pytest.fixture
def card_sets_dir(tmp_path: Path) -> Path:
    """On-disk card sets directory with one complete set and one without packs."""
    root = tmp_path / "CardSets"

    example = root / "Example Set"
    (example / "images").mkdir(parents=True)
    (example / "cards.txt").write_text(SAMPLE_CARDS_TXT, encoding="utf-8")
    (example / "packs.txt").write_text(SAMPLE_PACKS_TXT, encoding="utf-8")

    minimal = root / "Minimal Set"
    minimal.mkdir(parents=True)
    (minimal / "cards.txt").write_text(
        "Tiny Duck | Minimal Set | 1 | tiny.png | Common | 0.1 | 5\n", encoding="utf-8"
    )

    return root
