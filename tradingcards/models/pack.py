"""
Card pack definitions.

A pack is opened by rolling each of its slots once. A slot either draws by
rarity across every card in the pack's set, or among explicitly named cards.
"""

from dataclasses import dataclass, field
from enum import Enum

from tradingcards.models.rarity import COMMON, LEGENDARY, RARE, ULTRA_RARE, UNCOMMON, VERY_RARE
from tradingcards.models.type_ids import pack_type_id

DEFAULT_PACK_WEIGHT = 0.1
DEFAULT_PACK_VALUE = 100
DEFAULT_PACK_IMAGE = "pack.png"


class SlotMode(str, Enum):
    """How a slot picks its card."""

    RARITY = "rarity"
    CARDS = "cards"


@dataclass
class PackSlot:
    """
    One weighted draw within a pack.

    Keys of `weights` are rarity labels in RARITY mode and card names in
    CARDS mode. A weight of 0 keeps the label listed but never selects it.
    """

    mode: SlotMode = SlotMode.RARITY
    weights: dict[str, float] = field(default_factory=dict)

    @property
    def use_rarity_weights(self) -> bool:
        return self.mode is SlotMode.RARITY


@dataclass
class CardPack:
    """
    A pack definition that yields one card per slot when opened.

    Attributes:
        pack_name: Display name, unique within a set
        set_name: Card set the pack draws from
        image_file: Image file name relative to the set's images directory
        value: Value in game currency
        weight: Loot spawn weight (0 = not lootable)
        slots: Ordered slot definitions
        is_default: True for packs generated by create_default_pack()
        image_path: Full image path, bound after parsing
    """

    pack_name: str = ""
    set_name: str = ""
    image_file: str = ""
    value: int = 0
    weight: float = DEFAULT_PACK_WEIGHT
    slots: list[PackSlot] = field(default_factory=list)
    is_default: bool = False
    image_path: str = ""

    @property
    def type_id(self) -> int:
        """Stable ID derived from set and pack name, in the pack band."""
        return pack_type_id(self.set_name, self.pack_name)


# =============================================================================
# DEFAULT SLOT TABLES
# =============================================================================


def common_slot() -> PackSlot:
    """Slot favoring common cards. Ultra Rare and Legendary never drop."""
    return PackSlot(
        mode=SlotMode.RARITY,
        weights={
            COMMON: 100.0,
            UNCOMMON: 30.0,
            RARE: 5.0,
            VERY_RARE: 1.0,
            ULTRA_RARE: 0.0,
            LEGENDARY: 0.0,
        },
    )


def uncommon_slot() -> PackSlot:
    """Slot balanced towards uncommon cards."""
    return PackSlot(
        mode=SlotMode.RARITY,
        weights={
            COMMON: 60.0,
            UNCOMMON: 80.0,
            RARE: 20.0,
            VERY_RARE: 5.0,
            ULTRA_RARE: 1.0,
            LEGENDARY: 1.0,
        },
    )


def rare_slot() -> PackSlot:
    """Slot with better odds for rare and above."""
    return PackSlot(
        mode=SlotMode.RARITY,
        weights={
            COMMON: 30.0,
            UNCOMMON: 60.0,
            RARE: 60.0,
            VERY_RARE: 20.0,
            ULTRA_RARE: 5.0,
            LEGENDARY: 5.0,
        },
    )


def default_slots() -> list[PackSlot]:
    """Fresh copies of the three default slots, in pack order."""
    return [common_slot(), uncommon_slot(), rare_slot()]
