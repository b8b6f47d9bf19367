from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class CardFinish(str, Enum):
    """Physical finish of a printing."""

    NONFOIL = "nonfoil"
    FOIL = "foil"
    ETCHED = "etched"


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single printing of a card, normalized to one image.

    Attributes:
        id: Scryfall ID of this printing/language/finish
        oracle_id: ID shared by every printing of the same card
        name: Card name as printed
        type_line: Type line (e.g., "Instant", "Creature — Goblin")
        language: Scryfall language code (e.g., "en", "ja")
        image_uri: One PNG image chosen to represent the card
        scryfall_uri: Card page on Scryfall
        scryfall_set_uri: Set page on Scryfall
        finish: Finish of the printing
    """

    id: UUID
    oracle_id: UUID
    name: str
    type_line: str
    language: str
    image_uri: str
    scryfall_uri: str
    scryfall_set_uri: str
    finish: CardFinish = CardFinish.NONFOIL
