from cardsearch.models.card import Card, CardFinish
from cardsearch.models.failure import (
    FailureKind,
    ParseError,
    SearchError,
    UnknownSearchError,
)

__all__ = [
    "Card",
    "CardFinish",
    "FailureKind",
    "ParseError",
    "SearchError",
    "UnknownSearchError",
]
