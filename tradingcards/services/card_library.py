"""
Card library service.

Holds every loaded card and pack, and loads them from a card sets directory:

    CardSets/
        Example Set/
            cards.txt
            packs.txt       (optional)
            images/

The library is a plain object owned by whoever loads it (the web app or a
CLI job); nothing here is module-level state.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tradingcards.config import CARDS_FILE_NAME, IMAGES_DIR_NAME, PACKS_FILE_NAME
from tradingcards.models.card import TradingCard
from tradingcards.models.pack import CardPack, PackSlot
from tradingcards.parsers.card_file import parse_card_file, validate_card
from tradingcards.parsers.pack_file import create_default_pack, parse_pack_file, validate_pack

logger = logging.getLogger(__name__)


@dataclass
class LoadIssue:
    """A validation problem found while loading a set."""

    set_name: str
    entity: str
    message: str


@dataclass
class CardLibrary:
    """
    Registry of loaded cards and packs.

    Cards are indexed by type ID and by card name. Name lookups are global
    across sets; when two cards share a name the later registration wins.
    """

    _cards_by_id: dict[int, TradingCard] = field(default_factory=dict)
    _type_ids_by_name: dict[str, int] = field(default_factory=dict)
    _packs: dict[tuple[str, str], CardPack] = field(default_factory=dict)
    issues: list[LoadIssue] = field(default_factory=list)

    @property
    def cards(self) -> list[TradingCard]:
        return list(self._cards_by_id.values())

    @property
    def packs(self) -> list[CardPack]:
        return list(self._packs.values())

    def add_card(self, card: TradingCard) -> int:
        """Register a card and return its type ID."""
        type_id = card.type_id

        existing = self._cards_by_id.get(type_id)
        if existing is not None and (existing.set_name, existing.card_name) != (
            card.set_name,
            card.card_name,
        ):
            logger.warning(
                "Type ID %d collision: '%s' (%s) replaces '%s' (%s)",
                type_id,
                card.card_name,
                card.set_name,
                existing.card_name,
                existing.set_name,
            )

        previous_id = self._type_ids_by_name.get(card.card_name)
        if previous_id is not None and previous_id != type_id:
            logger.warning(
                "Card name '%s' registered twice; using the one from %s",
                card.card_name,
                card.set_name,
            )

        self._cards_by_id[type_id] = card
        self._type_ids_by_name[card.card_name] = type_id
        return type_id

    def add_pack(self, pack: CardPack) -> int:
        """Register a pack and return its type ID."""
        self._packs[(pack.set_name, pack.pack_name)] = pack
        return pack.type_id

    def get_card_by_type_id(self, type_id: int) -> TradingCard | None:
        return self._cards_by_id.get(type_id)

    def get_card_by_name(self, card_name: str) -> TradingCard | None:
        type_id = self._type_ids_by_name.get(card_name)
        return self._cards_by_id.get(type_id) if type_id is not None else None

    def card_type_ids(self) -> dict[str, int]:
        """Card name -> type ID, for every registered card."""
        return dict(self._type_ids_by_name)

    def cards_in_set(self, set_name: str) -> list[TradingCard]:
        return [card for card in self._cards_by_id.values() if card.set_name == set_name]

    def packs_in_set(self, set_name: str) -> list[CardPack]:
        return [pack for pack in self._packs.values() if pack.set_name == set_name]

    def get_pack(self, set_name: str, pack_name: str) -> CardPack | None:
        return self._packs.get((set_name, pack_name))

    def pack_slots(self, set_name: str, pack_name: str) -> list[PackSlot]:
        """Slots of a pack, or an empty list if the pack is unknown."""
        pack = self.get_pack(set_name, pack_name)
        return list(pack.slots) if pack is not None else []

    def set_names(self) -> list[str]:
        """Names of every set with at least one card or pack, sorted."""
        names = {card.set_name for card in self._cards_by_id.values()}
        names.update(set_name for set_name, _ in self._packs)
        return sorted(names)

    def report_issues(self, set_name: str, entity: str, messages: list[str]) -> None:
        for message in messages:
            logger.warning("Invalid %s in %s: %s", entity, set_name, message)
            self.issues.append(LoadIssue(set_name=set_name, entity=entity, message=message))


def load_card_set(
    library: CardLibrary,
    set_dir: Path,
    create_default_packs: bool = True,
) -> int:
    """
    Load one set directory into the library.

    Invalid cards and packs are reported on library.issues and skipped.

    Returns:
        Number of cards registered from this set.
    """
    set_name = set_dir.name
    cards_file = set_dir / CARDS_FILE_NAME
    images_dir = set_dir / IMAGES_DIR_NAME

    if not cards_file.is_file():
        logger.warning("No %s found in %s", CARDS_FILE_NAME, set_name)
        return 0

    logger.info("Loading card set: %s", set_name)

    card_count = 0
    for card in parse_card_file(cards_file, images_dir):
        errors = validate_card(card)
        if errors:
            library.report_issues(set_name, f"card '{card.card_name}'", errors)
            continue
        library.add_card(card)
        card_count += 1

    packs = parse_pack_file(set_dir / PACKS_FILE_NAME, set_name, images_dir)
    if not packs and create_default_packs:
        packs = [create_default_pack(set_name, images_dir)]

    for pack in packs:
        errors = validate_pack(pack)
        if errors:
            library.report_issues(set_name, f"pack '{pack.pack_name}'", errors)
            continue
        type_id = library.add_pack(pack)
        logger.info(
            "Registered pack: %s (ID: %d, Slots: %d)", pack.pack_name, type_id, len(pack.slots)
        )

    logger.info("Loaded %d cards from %s", card_count, set_name)
    return card_count


def load_card_library(card_sets_dir: Path, create_default_packs: bool = True) -> CardLibrary:
    """
    Load every set under a card sets directory.

    A missing directory yields an empty library. Set directories are read in
    sorted order.
    """
    library = CardLibrary()

    if not card_sets_dir.is_dir():
        logger.warning("Card sets directory not found at: %s", card_sets_dir)
        return library

    set_dirs = sorted(path for path in card_sets_dir.iterdir() if path.is_dir())
    logger.info("Found %d card set directories", len(set_dirs))

    for set_dir in set_dirs:
        load_card_set(library, set_dir, create_default_packs)

    logger.info("Total cards loaded: %d", len(library.cards))
    return library
