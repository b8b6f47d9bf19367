"""
Scryfall search response models and normalization.

Scryfall answers /cards/search with one of two objects, told apart by
the "object" field:

    {"object": "list", "data": [<card>, ...]}
    {"object": "error", "details": "..."}

Each card in a list is either single-faced (top-level "image_uris") or
double-faced ("card_faces", exactly two faces, each with "image_uris").
Both distinctions are decoded into tagged models so a response with the
wrong face count is rejected at decode time.

API docs: https://scryfall.com/docs/api/cards/search
"""

from typing import Annotated, Any, Literal, Union
from uuid import UUID

from pydantic import (
    BaseModel,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from cardsearch.models.card import Card
from cardsearch.models.failure import ParseError


class ScryfallImageUris(BaseModel):
    """Image URLs for a card or face. Only the PNG is consumed."""

    png: str


class ScryfallCardFace(BaseModel):
    """One printed side of a double-faced card."""

    image_uris: ScryfallImageUris


class SingleFace(BaseModel):
    """Face layout of a card with one image set."""

    image_uris: ScryfallImageUris

    def image_uri(self) -> str:
        return self.image_uris.png


class DoubleFace(BaseModel):
    """Face layout of a card with a front and a back image set."""

    card_faces: tuple[ScryfallCardFace, ScryfallCardFace]

    def image_uri(self) -> str:
        # Front face only; the back image is dropped.
        return self.card_faces[0].image_uris.png


def _face_layout_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        if "image_uris" in value:
            return "single"
        if "card_faces" in value:
            return "double"
        return None
    if isinstance(value, SingleFace):
        return "single"
    if isinstance(value, DoubleFace):
        return "double"
    return None


FaceLayout = Annotated[
    Union[Annotated[SingleFace, Tag("single")], Annotated[DoubleFace, Tag("double")]],
    Discriminator(
        _face_layout_tag,
        custom_error_type="missing_face_layout",
        custom_error_message="Card has neither 'image_uris' nor 'card_faces'",
    ),
]


class ScryfallCard(BaseModel):
    """The subset of a Scryfall card object this service consumes."""

    id: UUID
    oracle_id: UUID
    name: str
    lang: str
    scryfall_uri: str
    type_line: str
    scryfall_set_uri: str
    face_layout: FaceLayout

    @model_validator(mode="before")
    @classmethod
    def _collect_face_layout(cls, data: Any) -> Any:
        """Gather the face fields into a single nested layout value."""
        if not isinstance(data, dict) or "face_layout" in data:
            return data

        layout: dict[str, Any] = {}
        # Top-level images win when both keys are present.
        if "image_uris" in data:
            layout["image_uris"] = data["image_uris"]
        elif "card_faces" in data:
            layout["card_faces"] = data["card_faces"]

        return {**data, "face_layout": layout}


class ScryfallList(BaseModel):
    """A page of search results."""

    object: Literal["list"]
    data: list[ScryfallCard]
    has_more: bool = False
    total_cards: int | None = None
    warnings: list[str] = Field(default_factory=list)


class ScryfallError(BaseModel):
    """An error object returned in place of results."""

    object: Literal["error"]
    details: str
    status: int | None = None
    code: str | None = None
    type: str | None = None
    warnings: list[str] = Field(default_factory=list)


ScryfallObject = Annotated[ScryfallList | ScryfallError, Field(discriminator="object")]

_scryfall_object_adapter: TypeAdapter[ScryfallList | ScryfallError] = TypeAdapter(ScryfallObject)


def parse_search_response(content: bytes | str) -> ScryfallList | ScryfallError:
    """
    Decode a /cards/search response body.

    Args:
        content: Raw JSON body

    Returns:
        ScryfallList or ScryfallError, depending on the "object" field

    Raises:
        ParseError: If the body is not JSON or does not match either shape
    """
    try:
        return _scryfall_object_adapter.validate_json(content)
    except ValidationError as e:
        raise ParseError("Could not decode Scryfall response", detail=str(e)) from e


def to_card(scryfall_card: ScryfallCard) -> Card:
    """
    Normalize a Scryfall card into a Card with exactly one image.

    All fields except the image are copied as-is.
    """
    return Card(
        id=scryfall_card.id,
        oracle_id=scryfall_card.oracle_id,
        name=scryfall_card.name,
        type_line=scryfall_card.type_line,
        language=scryfall_card.lang,
        image_uri=scryfall_card.face_layout.image_uri(),
        scryfall_uri=scryfall_card.scryfall_uri,
        scryfall_set_uri=scryfall_card.scryfall_set_uri,
    )


def to_cards(scryfall_list: ScryfallList) -> list[Card]:
    """Normalize every card in a result page, keeping Scryfall's order."""
    return [to_card(scryfall_card) for scryfall_card in scryfall_list.data]
