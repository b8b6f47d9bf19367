"""
Card search API endpoint.

Looks up cards by exact name on Scryfall and returns one image per card.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import BaseModel, Field

from cardsearch.models.card import Card, CardFinish
from cardsearch.models.failure import SearchError
from cardsearch.services.search_engine import ScryfallSearchEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


class CardResponse(BaseModel):
    """A card in search results."""

    id: UUID
    oracle_id: UUID
    name: str
    type_line: str
    language: str
    finish: CardFinish
    image_uri: str
    scryfall_uri: str
    scryfall_set_uri: str

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            oracle_id=card.oracle_id,
            name=card.name,
            type_line=card.type_line,
            language=card.language,
            finish=card.finish,
            image_uri=card.image_uri,
            scryfall_uri=card.scryfall_uri,
            scryfall_set_uri=card.scryfall_set_uri,
        )


class CardSearchResponse(BaseModel):
    """Response model for card search."""

    results: list[CardResponse] = Field(default_factory=list)


def get_search_engine(request: Request) -> ScryfallSearchEngine:
    """Dependency that provides the shared search engine."""
    engine: ScryfallSearchEngine = request.app.state.search_engine
    return engine


@router.get(
    "/search",
    response_model=CardSearchResponse,
    responses={500: {"description": "Search failed; details are logged, not returned"}},
)
async def search_cards(
    card_name: Annotated[str, Query()],
    engine: Annotated[ScryfallSearchEngine, Depends(get_search_engine)],
) -> CardSearchResponse | Response:
    """
    Search for cards by exact name.

    Returns every printing on the first Scryfall result page, in Scryfall's
    order. An unknown name gives an empty list, not an error.
    """
    try:
        cards = await engine.search_cards_by_name(card_name)
    except SearchError as e:
        logger.error("Card search failed (%s) for %r: %s", e.kind.value, card_name, e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return CardSearchResponse(results=[CardResponse.from_card(card) for card in cards])
