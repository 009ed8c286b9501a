"""
Pack API endpoints.

Lists a set's packs and opens them against the loaded card library.
"""

import random
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from tradingcards.api.dependencies import get_library, get_rng
from tradingcards.api.sets import CardResponse, card_to_response
from tradingcards.models.pack import CardPack, SlotMode
from tradingcards.services.card_library import CardLibrary
from tradingcards.services.pack_opener import open_pack

router = APIRouter(prefix="/sets/{set_name}/packs", tags=["packs"])


class SlotResponse(BaseModel):
    """Response model for one pack slot."""

    mode: SlotMode
    weights: dict[str, float] = Field(default_factory=dict)


class PackResponse(BaseModel):
    """Response model for a single pack."""

    type_id: int
    pack_name: str
    set_name: str
    image_file: str
    value: int
    weight: float
    is_default: bool
    slots: list[SlotResponse]


class PackListResponse(BaseModel):
    """Response model for the packs of a set."""

    set_name: str
    packs: list[PackResponse]
    count: int


class PackOpenResponse(BaseModel):
    """Response model for an opened pack."""

    pack_name: str
    set_name: str
    cards: list[CardResponse]
    skipped_slots: int = Field(
        default=0,
        description="Slots that had no card to draw",
    )


def pack_to_response(pack: CardPack) -> PackResponse:
    return PackResponse(
        type_id=pack.type_id,
        pack_name=pack.pack_name,
        set_name=pack.set_name,
        image_file=pack.image_file,
        value=pack.value,
        weight=pack.weight,
        is_default=pack.is_default,
        slots=[SlotResponse(mode=slot.mode, weights=dict(slot.weights)) for slot in pack.slots],
    )


@router.get("", response_model=PackListResponse)
async def list_packs(
    set_name: str,
    library: Annotated[CardLibrary, Depends(get_library)],
) -> PackListResponse:
    """Get the packs of a set. Unknown sets return an empty list."""
    packs = [pack_to_response(pack) for pack in library.packs_in_set(set_name)]
    return PackListResponse(set_name=set_name, packs=packs, count=len(packs))


@router.post("/{pack_name}/open", response_model=PackOpenResponse)
async def open_pack_endpoint(
    set_name: str,
    pack_name: str,
    library: Annotated[CardLibrary, Depends(get_library)],
    rng: Annotated[random.Random, Depends(get_rng)],
) -> PackOpenResponse:
    """
    Open a pack and return the drawn cards.

    Pass `seed` to make the draw reproducible. Returns 404 if the pack
    does not exist.
    """
    pack = library.get_pack(set_name, pack_name)
    if pack is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pack '{pack_name}' not found in set '{set_name}'",
        )

    opening = open_pack(library, pack, rng)

    return PackOpenResponse(
        pack_name=pack.pack_name,
        set_name=pack.set_name,
        cards=[card_to_response(card) for card in opening.cards],
        skipped_slots=opening.skipped_slots,
    )
