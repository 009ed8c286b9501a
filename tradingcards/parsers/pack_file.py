"""
Parser for pack definition files (packs.txt).

A non-indented line opens a pack; indented lines that follow define its slots:

    Booster Pack | booster.png | 100 | 0.1
      RARITY: Common:100, Uncommon:30, Rare:5
      CARDS: Duck Hero:10, Golden Duck:1

Header fields are PackName | ImageFile | Value | Weight (Weight optional).
Slot lines take an optional case-insensitive RARITY: or CARDS: prefix; with
no prefix the line is read as rarity weights. Blank lines and '#' comments
are ignored anywhere.
"""

from pathlib import Path

from tradingcards.models.pack import (
    DEFAULT_PACK_IMAGE,
    DEFAULT_PACK_VALUE,
    DEFAULT_PACK_WEIGHT,
    CardPack,
    PackSlot,
    SlotMode,
    default_slots,
)
from tradingcards.parsers.numbers import parse_float, parse_int

FIELD_SEPARATOR = "|"
COMMENT_PREFIX = "#"
MIN_HEADER_FIELDS = 3

RARITY_PREFIX = "rarity:"
CARDS_PREFIX = "cards:"


def _image_path(images_dir: Path | None, image_file: str) -> str:
    return str(images_dir / image_file) if images_dir is not None else ""


def parse_weights(text: str) -> dict[str, float]:
    """
    Parse comma-separated Label:Weight pairs.

    Tokens that do not split into exactly two parts, or whose weight is not
    a number, are skipped. Later duplicates overwrite earlier ones.
    """
    weights: dict[str, float] = {}

    for token in text.split(","):
        key_value = token.split(":")
        if len(key_value) != 2:
            continue

        try:
            weight = parse_float(key_value[1].strip())
        except ValueError:
            continue

        weights[key_value[0].strip()] = weight

    return weights


def parse_slot_line(line: str) -> PackSlot:
    """Parse a trimmed slot line into a PackSlot."""
    lowered = line.lower()

    if lowered.startswith(RARITY_PREFIX):
        return PackSlot(mode=SlotMode.RARITY, weights=parse_weights(line[len(RARITY_PREFIX) :]))

    if lowered.startswith(CARDS_PREFIX):
        return PackSlot(mode=SlotMode.CARDS, weights=parse_weights(line[len(CARDS_PREFIX) :]))

    return PackSlot(mode=SlotMode.RARITY, weights=parse_weights(line))


def parse_pack_header(line: str, set_name: str, images_dir: Path | None = None) -> CardPack | None:
    """
    Parse a trimmed pack header line.

    Value falls back to 100 and Weight to 0.1 when they do not parse.

    Returns:
        A pack with no slots yet, or None if fewer than three fields.
    """
    parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]
    if len(parts) < MIN_HEADER_FIELDS:
        return None

    try:
        value = parse_int(parts[2])
    except ValueError:
        value = DEFAULT_PACK_VALUE

    weight = DEFAULT_PACK_WEIGHT
    if len(parts) > MIN_HEADER_FIELDS:
        try:
            weight = parse_float(parts[3])
        except ValueError:
            pass

    return CardPack(
        pack_name=parts[0],
        set_name=set_name,
        image_file=parts[1],
        image_path=_image_path(images_dir, parts[1]),
        value=value,
        weight=weight,
        is_default=False,
    )


def parse_pack_text(text: str, set_name: str, images_dir: Path | None = None) -> list[CardPack]:
    """
    Parse the full contents of a packs.txt file.

    Args:
        text: Raw file contents
        set_name: Card set the packs belong to
        images_dir: When given, pack image_path is bound to images_dir / image_file

    Returns:
        Packs in file order. Slot lines before the first header are ignored.
    """
    packs: list[CardPack] = []
    current: CardPack | None = None

    for line in text.splitlines():
        trimmed = line.strip()

        if not trimmed or trimmed.startswith(COMMENT_PREFIX):
            continue

        # Indentation marks a slot line
        if line[0] in (" ", "\t"):
            if current is not None:
                current.slots.append(parse_slot_line(trimmed))
            continue

        pack = parse_pack_header(trimmed, set_name, images_dir)
        if pack is None:
            continue

        if current is not None:
            packs.append(current)
        current = pack

    if current is not None:
        packs.append(current)

    return packs


def parse_pack_file(path: Path, set_name: str, images_dir: Path | None = None) -> list[CardPack]:
    """
    Parse a packs.txt file. A missing file yields an empty list.

    A leading BOM is dropped and undecodable bytes become U+FFFD.
    """
    if not path.is_file():
        return []

    text = path.read_text(encoding="utf-8-sig", errors="replace")
    return parse_pack_text(text, set_name, images_dir)


def create_default_pack(set_name: str, images_dir: Path | None = None) -> CardPack:
    """
    Build the auto-generated pack for a set.

    Named "<set> Pack", uses pack.png, value 100, weight 0.1, and the three
    default slots (common, uncommon and rare leaning).
    """
    return CardPack(
        pack_name=f"{set_name} Pack",
        set_name=set_name,
        image_file=DEFAULT_PACK_IMAGE,
        image_path=_image_path(images_dir, DEFAULT_PACK_IMAGE),
        value=DEFAULT_PACK_VALUE,
        weight=DEFAULT_PACK_WEIGHT,
        slots=default_slots(),
        is_default=True,
    )


def validate_pack(pack: CardPack) -> list[str]:
    """
    Check a parsed pack for a name, slots and slot weights.

    Returns:
        Validation messages; empty when the pack is valid.
    """
    errors: list[str] = []

    if not pack.pack_name.strip():
        errors.append("Pack name is required")

    if not pack.slots:
        errors.append("Pack must have at least one slot")

    for slot in pack.slots:
        if slot.weights:
            continue
        if slot.use_rarity_weights:
            errors.append("Rarity slot must have at least one weight defined")
        else:
            errors.append("Card slot must have at least one card defined")

    if pack.value < 0:
        errors.append("Pack value must be non-negative")

    return errors
