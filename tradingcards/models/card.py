from dataclasses import dataclass, replace

from tradingcards.models.rarity import rarity_to_quality
from tradingcards.models.type_ids import card_type_id


@dataclass(frozen=True, slots=True)
class TradingCard:
    """
    A collectible card definition from a set's cards.txt.

    Attributes:
        card_name: Display name, unique within a set
        set_name: Name of the card set the card belongs to
        set_number: Position of the card within its set
        image_file: Image file name relative to the set's images directory
        rarity: Rarity label (e.g., "Common", "Ultra Rare")
        weight: Loot table weight, used outside pack opening
        value: Value in game currency
        description: Free text; auto-generated when absent
        image_path: Full image path, bound after parsing via with_image_path()
    """

    card_name: str
    set_name: str
    set_number: int
    image_file: str
    rarity: str
    weight: float
    value: int
    description: str | None = None
    image_path: str = ""

    @property
    def type_id(self) -> int:
        """Stable ID derived from set and card name."""
        return card_type_id(self.set_name, self.card_name)

    @property
    def quality(self) -> int:
        return rarity_to_quality(self.rarity)

    @property
    def display_description(self) -> str:
        """The explicit description, or "<set> #<number> - <rarity>"."""
        if self.description and self.description.strip():
            return self.description
        return f"{self.set_name} #{self.set_number:03d} - {self.rarity}"

    def with_image_path(self, image_path: str) -> "TradingCard":
        return replace(self, image_path=image_path)
