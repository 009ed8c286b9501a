"""
Deterministic type IDs for cards and packs.

Each entity kind owns a reserved band of integers. Consumers outside this
package tell cards and packs apart by which band an ID falls in, so the band
offsets and widths must never change.

    Cards: [100000, 1000000)
    Packs: [300000, 400000)

The hash is computed on "<prefix>_<set name>_<entity name>". Collisions are
possible and are not resolved here.
"""

# =============================================================================
# ID BANDS (Constants — NOT Configurable)
# =============================================================================

CARD_ID_PREFIX = "TradingCard"
CARD_ID_OFFSET = 100000
CARD_ID_RANGE = 900000

PACK_ID_PREFIX = "CardPack"
PACK_ID_OFFSET = 300000
PACK_ID_RANGE = 100000

_INT32_MASK = 0xFFFFFFFF


def stable_string_hash(value: str) -> int:
    """
    Hash a string to a signed 32-bit integer, identically in every process.

    Uses the classic ``h = h * 31 + c`` polynomial over UTF-16 code units.
    The built-in ``hash()`` is salted per interpreter run and cannot be used
    for IDs that must survive restarts.
    """
    encoded = value.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = (h * 31 + code_unit) & _INT32_MASK

    if h >= 0x80000000:
        h -= 0x100000000
    return h


def generate_type_id(prefix: str, set_name: str, name: str, offset: int, width: int) -> int:
    """Map (prefix, set, name) into the band [offset, offset + width)."""
    unique_key = f"{prefix}_{set_name}_{name}"
    return offset + abs(stable_string_hash(unique_key)) % width


def card_type_id(set_name: str, card_name: str) -> int:
    """Type ID for a card, in the card band."""
    return generate_type_id(CARD_ID_PREFIX, set_name, card_name, CARD_ID_OFFSET, CARD_ID_RANGE)


def pack_type_id(set_name: str, pack_name: str) -> int:
    """Type ID for a pack, in the pack band."""
    return generate_type_id(PACK_ID_PREFIX, set_name, pack_name, PACK_ID_OFFSET, PACK_ID_RANGE)


def is_card_type_id(type_id: int) -> bool:
    return CARD_ID_OFFSET <= type_id < CARD_ID_OFFSET + CARD_ID_RANGE


def is_pack_type_id(type_id: int) -> bool:
    return PACK_ID_OFFSET <= type_id < PACK_ID_OFFSET + PACK_ID_RANGE
