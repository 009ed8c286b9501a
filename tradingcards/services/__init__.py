"""
TradingCards services.

Card set loading and pack opening.
"""

from tradingcards.services.card_library import (
    CardLibrary,
    LoadIssue,
    load_card_library,
    load_card_set,
)
from tradingcards.services.pack_opener import (
    PackOpening,
    open_pack,
    roll_by_card_name,
    roll_by_rarity,
    roll_slot,
)
from tradingcards.services.weighted_random import weighted_choice

__all__ = [
    # Card library (registry + directory loader)
    "CardLibrary",
    "LoadIssue",
    "load_card_library",
    "load_card_set",
    # Pack opening
    "PackOpening",
    "open_pack",
    "roll_by_card_name",
    "roll_by_rarity",
    "roll_slot",
    # Weighted draw primitive
    "weighted_choice",
]
