from pathlib import Path

from tradingcards.models.card import TradingCard
from tradingcards.models.type_ids import card_type_id
from tradingcards.parsers.card_file import (
    parse_card_file,
    parse_card_line,
    parse_card_text,
    validate_card,
)


class TestParseCardLine:
    def test_parse_seven_fields(self) -> None:
        line = "Duck Hero | Example Set | 001 | duck_hero.png | Rare | 0.01 | 100"
        card = parse_card_line(line)

        assert card is not None
        assert card.card_name == "Duck Hero"
        assert card.set_name == "Example Set"
        assert card.set_number == 1
        assert card.image_file == "duck_hero.png"
        assert card.rarity == "Rare"
        assert card.weight == 0.01
        assert card.value == 100
        assert card.description is None

    def test_parse_with_description(self) -> None:
        line = "Duck Hero | Example Set | 001 | duck_hero.png | Rare | 0.01 | 100 | A legendary duck"
        card = parse_card_line(line)

        assert card is not None
        assert card.description == "A legendary duck"

    def test_blank_description_is_none(self) -> None:
        line = "Duck Hero | Example Set | 001 | duck_hero.png | Rare | 0.01 | 100 |   "
        card = parse_card_line(line)

        assert card is not None
        assert card.description is None

    def test_trims_whitespace(self) -> None:
        line = "   Duck Hero   |Example Set|  5 |duck.png|  Common |1.5|  20  "
        card = parse_card_line(line)

        assert card is not None
        assert card.card_name == "Duck Hero"
        assert card.set_number == 5
        assert card.rarity == "Common"
        assert card.weight == 1.5
        assert card.value == 20

    def test_image_path_not_bound(self) -> None:
        card = parse_card_line("Duck | Set | 1 | duck.png | Rare | 0.1 | 10")

        assert card is not None
        assert card.image_path == ""

    def test_empty_and_whitespace_lines(self) -> None:
        assert parse_card_line("") is None
        assert parse_card_line("    ") is None
        assert parse_card_line("\t") is None

    def test_comment_lines(self) -> None:
        assert parse_card_line("# comment") is None
        assert parse_card_line("   # indented comment | a | 1 | b | c | 1 | 1") is None

    def test_too_few_fields(self) -> None:
        assert parse_card_line("Duck Hero | Example Set | 001 | duck.png | Rare | 0.01") is None

    def test_non_numeric_set_number(self) -> None:
        assert parse_card_line("Duck Hero | Example Set | ABC | duck.png | Rare | 0.01 | 100") is None

    def test_non_numeric_weight(self) -> None:
        assert parse_card_line("Duck Hero | Example Set | 1 | duck.png | Rare | heavy | 100") is None

    def test_non_numeric_value(self) -> None:
        assert parse_card_line("Duck Hero | Example Set | 1 | duck.png | Rare | 0.1 | 1.5") is None

    def test_underscore_digits_rejected(self) -> None:
        assert parse_card_line("Duck | Set | 1 | duck.png | Rare | 0.1 | 1_000") is None
        assert parse_card_line("Duck | Set | 0_1 | duck.png | Rare | 0.1 | 10") is None
        assert parse_card_line("Duck | Set | 1 | duck.png | Rare | 0_5 | 10") is None

    def test_non_finite_weight_rejected(self) -> None:
        assert parse_card_line("Duck | Set | 1 | duck.png | Rare | inf | 10") is None
        assert parse_card_line("Duck | Set | 1 | duck.png | Rare | -Infinity | 10") is None
        assert parse_card_line("Duck | Set | 1 | duck.png | Rare | nan | 10") is None

    def test_exponent_weight_accepted(self) -> None:
        card = parse_card_line("Duck | Set | 1 | duck.png | Rare | 1e-3 | 10")

        assert card is not None
        assert card.weight == 0.001

    def test_negative_numbers_parse(self) -> None:
        """Range checks belong to validate_card, not the parser."""
        card = parse_card_line("Duck | Set | -1 | duck.png | Rare | -0.5 | -10")

        assert card is not None
        assert card.set_number == -1
        assert card.value == -10


class TestParseCardText:
    def test_skips_comments_blank_and_malformed(self) -> None:
        text = """# header
Duck Hero | Example Set | 001 | duck_hero.png | Common | 0.1 | 10

not a card line
Duck Wizard | Example Set | XYZ | wizard.png | Rare | 0.01 | 100
Golden Duck | Example Set | 004 | golden.png | Legendary | 0.001 | 500 | Shiny
"""
        cards = parse_card_text(text)

        assert [c.card_name for c in cards] == ["Duck Hero", "Golden Duck"]

    def test_binds_image_path(self, tmp_path: Path) -> None:
        cards = parse_card_text("Duck | Set | 1 | duck.png | Rare | 0.1 | 10", tmp_path)

        assert cards[0].image_path == str(tmp_path / "duck.png")

    def test_empty_text(self) -> None:
        assert parse_card_text("") == []


class TestParseCardFile:
    def test_missing_file_returns_empty(self, tmp_path: Path) -> None:
        assert parse_card_file(tmp_path / "missing.txt") == []

    def test_parses_fixture_set(self, card_sets_dir: Path) -> None:
        set_dir = card_sets_dir / "Example Set"
        cards = parse_card_file(set_dir / "cards.txt", set_dir / "images")

        assert len(cards) == 4
        assert cards[2].description == "Casts quacking spells"
        assert cards[0].image_path == str(set_dir / "images" / "duck_hero.png")

    def test_strips_byte_order_mark(self, tmp_path: Path) -> None:
        path = tmp_path / "cards.txt"
        path.write_bytes(
            b"\xef\xbb\xbfDuck Hero | Example Set | 001 | duck_hero.png | Rare | 0.01 | 100\n"
        )

        cards = parse_card_file(path)

        assert len(cards) == 1
        assert cards[0].card_name == "Duck Hero"
        assert cards[0].type_id == card_type_id("Example Set", "Duck Hero")

    def test_invalid_bytes_do_not_abort_file(self, tmp_path: Path) -> None:
        path = tmp_path / "cards.txt"
        path.write_bytes(
            b"Caf\xe9 Duck | Example Set | 001 | cafe.png | Common | 0.1 | 10\n"
            b"Duck Hero | Example Set | 002 | duck_hero.png | Rare | 0.01 | 100\n"
        )

        cards = parse_card_file(path)

        assert [c.card_name for c in cards] == ["Caf\ufffd Duck", "Duck Hero"]


class TestDisplayDescription:
    def test_explicit_description(self) -> None:
        card = TradingCard("Duck", "Example Set", 1, "d.png", "Rare", 0.1, 10, "Quack")

        assert card.display_description == "Quack"

    def test_auto_description(self) -> None:
        card = TradingCard("Duck", "Example Set", 7, "d.png", "Rare", 0.1, 10)

        assert card.display_description == "Example Set #007 - Rare"

    def test_auto_description_is_stable(self) -> None:
        a = TradingCard("Duck", "Example Set", 7, "d.png", "Rare", 0.1, 10)
        b = TradingCard("Duck", "Example Set", 7, "d.png", "Rare", 0.1, 10)

        assert a.display_description == b.display_description


class TestValidateCard:
    def test_valid_card(self) -> None:
        card = TradingCard("Duck", "Example Set", 1, "d.png", "Rare", 0.1, 10)

        assert validate_card(card) == []

    def test_empty_name(self) -> None:
        card = TradingCard("", "Example Set", 1, "d.png", "Rare", 0.1, 10)

        assert validate_card(card) == ["CardName is required"]

    def test_negative_value(self) -> None:
        card = TradingCard("Duck", "Example Set", 1, "d.png", "Rare", 0.1, -1)

        assert validate_card(card) == ["Value must be non-negative"]

    def test_reports_every_violation(self) -> None:
        card = TradingCard("", " ", -1, "", "", -0.1, -5)
        errors = validate_card(card)

        assert errors == [
            "CardName is required",
            "SetName is required",
            "SetNumber must be non-negative",
            "ImageFile is required",
            "Rarity is required",
            "Weight must be non-negative",
            "Value must be non-negative",
        ]
