"""
Pack opening service.

Rolls each slot of a pack once against the card library:
    - Rarity slots weight every card of the pack's set by its rarity.
    - Card slots weight the explicitly named cards.

Slots with nothing to draw are skipped; opening a pack never raises.
"""

import logging
import random
from dataclasses import dataclass, field

from tradingcards.models.card import TradingCard
from tradingcards.models.pack import CardPack, PackSlot
from tradingcards.services.card_library import CardLibrary
from tradingcards.services.weighted_random import weighted_choice

logger = logging.getLogger(__name__)


@dataclass
class PackOpening:
    """Result of opening a pack."""

    pack: CardPack
    cards: list[TradingCard] = field(default_factory=list)
    skipped_slots: int = 0


def roll_by_rarity(
    library: CardLibrary,
    set_name: str,
    rarity_weights: dict[str, float],
    rng: random.Random,
) -> int | None:
    """
    Draw a card type ID from a set using rarity weights.

    Cards whose rarity is missing from the table, or weighted 0, are left out.
    """
    available = library.cards_in_set(set_name)

    weighted: list[tuple[int, float]] = []
    for card in available:
        weight = rarity_weights.get(card.rarity, 0.0)
        if weight > 0:
            weighted.append((card.type_id, weight))

    if not weighted:
        logger.warning(
            "No cards available for rarity roll (set: %s, cards: %d)", set_name, len(available)
        )
        return None

    return weighted_choice(weighted, rng)


def roll_by_card_name(
    library: CardLibrary,
    card_weights: dict[str, float],
    rng: random.Random,
) -> int | None:
    """Draw a card type ID among explicitly named cards. Unknown names are skipped."""
    type_ids = library.card_type_ids()

    weighted: list[tuple[int, float]] = []
    for card_name, weight in card_weights.items():
        type_id = type_ids.get(card_name)
        if type_id is None:
            logger.warning("Card '%s' not found for pack slot", card_name)
            continue
        if weight > 0:
            weighted.append((type_id, weight))

    if not weighted:
        logger.warning("No cards available for card name roll")
        return None

    return weighted_choice(weighted, rng)


def roll_slot(
    library: CardLibrary,
    set_name: str,
    slot: PackSlot,
    rng: random.Random,
) -> int | None:
    """Roll one slot. Returns the drawn card type ID, or None for no selection."""
    if slot.use_rarity_weights:
        return roll_by_rarity(library, set_name, slot.weights, rng)
    return roll_by_card_name(library, slot.weights, rng)


def open_pack(library: CardLibrary, pack: CardPack, rng: random.Random) -> PackOpening:
    """
    Open a pack: one draw per slot, in slot order.

    Args:
        library: Loaded cards to draw from
        pack: Pack definition
        rng: Random source; seed it for reproducible openings

    Returns:
        PackOpening with the drawn cards and the number of empty slots.
    """
    opening = PackOpening(pack=pack)

    for slot in pack.slots:
        type_id = roll_slot(library, pack.set_name, slot, rng)
        card = library.get_card_by_type_id(type_id) if type_id is not None else None
        if card is None:
            opening.skipped_slots += 1
            continue
        opening.cards.append(card)

    if opening.cards:
        logger.info(
            "Pack opened: %s -> %s",
            pack.pack_name,
            ", ".join(card.card_name for card in opening.cards),
        )
    else:
        logger.warning("Pack %s produced no cards (slots: %d)", pack.pack_name, len(pack.slots))

    return opening
