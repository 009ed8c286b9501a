"""
Parser for card definition files (cards.txt).

Format, one card per line:
    CardName | SetName | SetNumber | ImageFile | Rarity | Weight | Value | Description

Example:
    Duck Hero | Example Set | 001 | duck_hero.png | Rare | 0.01 | 100
    Golden Duck | Example Set | 002 | golden.png | Legendary | 0.001 | 500 | A legendary duck

Description is optional. Lines starting with '#' are comments. Whitespace
around fields is ignored. Malformed lines are dropped without raising so a
single bad line never blocks the rest of the file.
"""

from pathlib import Path

from tradingcards.models.card import TradingCard
from tradingcards.parsers.numbers import parse_float, parse_int

FIELD_SEPARATOR = "|"
COMMENT_PREFIX = "#"
MIN_CARD_FIELDS = 7


def parse_card_line(line: str) -> TradingCard | None:
    """
    Parse one cards.txt line into a TradingCard.

    Returns:
        The card, or None for blank lines, comments, lines with fewer than
        seven fields, and lines whose numeric fields do not parse.
    """
    if not line or not line.strip():
        return None

    if line.lstrip().startswith(COMMENT_PREFIX):
        return None

    parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]
    if len(parts) < MIN_CARD_FIELDS:
        return None

    try:
        set_number = parse_int(parts[2])
        weight = parse_float(parts[5])
        value = parse_int(parts[6])
    except ValueError:
        return None

    description = parts[7] if len(parts) > MIN_CARD_FIELDS and parts[7] else None

    return TradingCard(
        card_name=parts[0],
        set_name=parts[1],
        set_number=set_number,
        image_file=parts[3],
        rarity=parts[4],
        weight=weight,
        value=value,
        description=description,
    )


def parse_card_text(text: str, images_dir: Path | None = None) -> list[TradingCard]:
    """
    Parse the full contents of a cards.txt file.

    Args:
        text: Raw file contents
        images_dir: When given, each card's image_path is bound to
            images_dir / image_file

    Returns:
        Cards in file order. Empty list if nothing parsed.
    """
    cards: list[TradingCard] = []

    for line in text.splitlines():
        card = parse_card_line(line)
        if card is None:
            continue

        if images_dir is not None:
            card = card.with_image_path(str(images_dir / card.image_file))
        cards.append(card)

    return cards


def parse_card_file(path: Path, images_dir: Path | None = None) -> list[TradingCard]:
    """
    Parse a cards.txt file. A missing file yields an empty list.

    A leading BOM is dropped and undecodable bytes become U+FFFD, so one
    badly encoded line only affects that line.
    """
    if not path.is_file():
        return []

    text = path.read_text(encoding="utf-8-sig", errors="replace")
    return parse_card_text(text, images_dir)


def validate_card(card: TradingCard) -> list[str]:
    """
    Check a parsed card for required fields and value ranges.

    Every rule is checked, so one card can report several problems.

    Returns:
        Validation messages; empty when the card is valid.
    """
    errors: list[str] = []

    if not card.card_name.strip():
        errors.append("CardName is required")

    if not card.set_name.strip():
        errors.append("SetName is required")

    if card.set_number < 0:
        errors.append("SetNumber must be non-negative")

    if not card.image_file.strip():
        errors.append("ImageFile is required")

    if not card.rarity.strip():
        errors.append("Rarity is required")

    if card.weight < 0:
        errors.append("Weight must be non-negative")

    if card.value < 0:
        errors.append("Value must be non-negative")

    return errors
