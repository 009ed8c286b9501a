"""
Rarity labels and their numeric quality tiers.

Quality tiers: 2=Common, 3=Uncommon, 4=Rare, 5=Very Rare, 6=Ultra Rare/Legendary.
Unknown labels are tolerated and treated as Uncommon.
"""

COMMON = "Common"
UNCOMMON = "Uncommon"
RARE = "Rare"
VERY_RARE = "Very Rare"
ULTRA_RARE = "Ultra Rare"
LEGENDARY = "Legendary"

# Display order, lowest to highest
CANONICAL_RARITIES: tuple[str, ...] = (
    COMMON,
    UNCOMMON,
    RARE,
    VERY_RARE,
    ULTRA_RARE,
    LEGENDARY,
)

QUALITY_BY_RARITY: dict[str, int] = {
    "common": 2,
    "uncommon": 3,
    "rare": 4,
    "very rare": 5,
    "ultra rare": 6,
    "legendary": 6,
}

DEFAULT_QUALITY = 3


def normalize_rarity(rarity: str) -> str:
    return rarity.strip().casefold()


def rarity_to_quality(rarity: str) -> int:
    """
    Map a rarity label to its quality tier.

    Matching ignores case and surrounding whitespace.
    Unrecognized labels return DEFAULT_QUALITY instead of failing.
    """
    return QUALITY_BY_RARITY.get(normalize_rarity(rarity), DEFAULT_QUALITY)


def is_valid_rarity(rarity: str) -> bool:
    """Check if a label is one of the six canonical rarities."""
    return normalize_rarity(rarity) in QUALITY_BY_RARITY
