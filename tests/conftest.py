from collections.abc import Callable
from typing import Any

import pytest


def make_scryfall_card(
    name: str = "Lightning Bolt",
    card_id: str = "11111111-1111-1111-1111-111111111111",
    oracle_id: str = "22222222-2222-2222-2222-222222222222",
    **overrides: Any,
) -> dict[str, Any]:
    """Build a single-faced Scryfall card object."""
    card: dict[str, Any] = {
        "object": "card",
        "id": card_id,
        "oracle_id": oracle_id,
        "name": name,
        "lang": "en",
        "scryfall_uri": "https://x/1",
        "type_line": "Instant",
        "scryfall_set_uri": "https://x/2",
        "image_uris": {"png": "https://img/bolt.png"},
    }
    card.update(overrides)
    return card


@pytest.fixture
def bolt_card() -> dict[str, Any]:
    """Single-faced card exactly as Scryfall returns it (trimmed)."""
    return make_scryfall_card()


@pytest.fixture
def double_faced_card() -> dict[str, Any]:
    """Double-faced card: no top-level image_uris, two faces."""
    card = make_scryfall_card(
        name="Delver of Secrets // Insectile Aberration",
        card_id="33333333-3333-3333-3333-333333333333",
        oracle_id="44444444-4444-4444-4444-444444444444",
        type_line="Creature — Human Wizard // Creature — Human Insect",
        card_faces=[
            {"name": "Delver of Secrets", "image_uris": {"png": "front.png"}},
            {"name": "Insectile Aberration", "image_uris": {"png": "back.png"}},
        ],
    )
    del card["image_uris"]
    return card


@pytest.fixture
def search_list(bolt_card: dict[str, Any]) -> dict[str, Any]:
    """Successful one-result search response."""
    return {"object": "list", "total_cards": 1, "has_more": False, "data": [bolt_card]}


@pytest.fixture
def search_error() -> dict[str, Any]:
    """Scryfall error object for a rejected query."""
    return {
        "object": "error",
        "code": "bad_request",
        "status": 400,
        "details": "All of your terms were ignored.",
    }


@pytest.fixture
def make_card() -> Callable[..., dict[str, Any]]:
    """Factory for single-faced Scryfall card objects."""
    return make_scryfall_card
