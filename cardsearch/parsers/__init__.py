from cardsearch.parsers.scryfall import (
    ScryfallCard,
    ScryfallError,
    ScryfallList,
    parse_search_response,
    to_card,
    to_cards,
)

__all__ = [
    "ScryfallCard",
    "ScryfallError",
    "ScryfallList",
    "parse_search_response",
    "to_card",
    "to_cards",
]
