"""
Card set API endpoints.

Read-only views of the loaded card sets and their cards.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from tradingcards.api.dependencies import get_library
from tradingcards.models.card import TradingCard
from tradingcards.services.card_library import CardLibrary

router = APIRouter(prefix="/sets", tags=["sets"])


class SetSummary(BaseModel):
    """Summary of one loaded card set."""

    name: str
    card_count: int
    pack_count: int


class SetListResponse(BaseModel):
    """Response model for the list of sets."""

    sets: list[SetSummary]
    count: int


class CardResponse(BaseModel):
    """Response model for a single card."""

    type_id: int
    card_name: str
    set_name: str
    set_number: int
    rarity: str
    quality: int = Field(..., description="Quality tier 2-6 derived from rarity")
    weight: float
    value: int
    description: str
    image_file: str


class CardListResponse(BaseModel):
    """Response model for the cards of a set."""

    set_name: str
    cards: list[CardResponse]
    count: int


def card_to_response(card: TradingCard) -> CardResponse:
    return CardResponse(
        type_id=card.type_id,
        card_name=card.card_name,
        set_name=card.set_name,
        set_number=card.set_number,
        rarity=card.rarity,
        quality=card.quality,
        weight=card.weight,
        value=card.value,
        description=card.display_description,
        image_file=card.image_file,
    )


@router.get("", response_model=SetListResponse)
async def list_sets(
    library: Annotated[CardLibrary, Depends(get_library)],
) -> SetListResponse:
    """List loaded card sets, sorted by name."""
    sets = [
        SetSummary(
            name=name,
            card_count=len(library.cards_in_set(name)),
            pack_count=len(library.packs_in_set(name)),
        )
        for name in library.set_names()
    ]
    return SetListResponse(sets=sets, count=len(sets))


@router.get("/{set_name}/cards", response_model=CardListResponse)
async def list_cards(
    set_name: str,
    library: Annotated[CardLibrary, Depends(get_library)],
) -> CardListResponse:
    """
    Get the cards of a set, ordered by set number.

    Returns 404 if the set has no cards.
    """
    cards = library.cards_in_set(set_name)
    if not cards:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card set '{set_name}' not found",
        )

    ordered = sorted(cards, key=lambda c: (c.set_number, c.card_name))
    return CardListResponse(
        set_name=set_name,
        cards=[card_to_response(card) for card in ordered],
        count=len(ordered),
    )
