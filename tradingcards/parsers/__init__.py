from tradingcards.parsers.card_file import (
    parse_card_file,
    parse_card_line,
    parse_card_text,
    validate_card,
)
from tradingcards.parsers.pack_file import (
    create_default_pack,
    parse_pack_file,
    parse_pack_header,
    parse_pack_text,
    parse_slot_line,
    parse_weights,
    validate_pack,
)

__all__ = [
    "create_default_pack",
    "parse_card_file",
    "parse_card_line",
    "parse_card_text",
    "parse_pack_file",
    "parse_pack_header",
    "parse_pack_text",
    "parse_slot_line",
    "parse_weights",
    "validate_card",
    "validate_pack",
]
