from tradingcards.models.card import TradingCard
from tradingcards.models.pack import (
    DEFAULT_PACK_IMAGE,
    DEFAULT_PACK_VALUE,
    DEFAULT_PACK_WEIGHT,
    CardPack,
    PackSlot,
    SlotMode,
    default_slots,
)
from tradingcards.models.rarity import (
    CANONICAL_RARITIES,
    DEFAULT_QUALITY,
    is_valid_rarity,
    rarity_to_quality,
)
from tradingcards.models.type_ids import (
    CARD_ID_OFFSET,
    CARD_ID_RANGE,
    PACK_ID_OFFSET,
    PACK_ID_RANGE,
    card_type_id,
    is_card_type_id,
    is_pack_type_id,
    pack_type_id,
    stable_string_hash,
)

__all__ = [
    "CANONICAL_RARITIES",
    "CARD_ID_OFFSET",
    "CARD_ID_RANGE",
    "CardPack",
    "DEFAULT_PACK_IMAGE",
    "DEFAULT_PACK_VALUE",
    "DEFAULT_PACK_WEIGHT",
    "DEFAULT_QUALITY",
    "PACK_ID_OFFSET",
    "PACK_ID_RANGE",
    "PackSlot",
    "SlotMode",
    "TradingCard",
    "card_type_id",
    "default_slots",
    "is_card_type_id",
    "is_pack_type_id",
    "is_valid_rarity",
    "pack_type_id",
    "rarity_to_quality",
    "stable_string_hash",
]
