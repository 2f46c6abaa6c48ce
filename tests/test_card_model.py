"""
Tests for the Card model.
"""

import pytest
from pydantic import ValidationError

from oracle_cards.models.card import Card


def test_card_from_row():
    """Test building a card from a full table row."""
    card = Card.model_validate({
        "id": "7",
        "name": "The Chariot",
        "number": "7",
        "description": "Willpower.",
        "image_url": "https://example.com/chariot.png",
    })

    assert card.id == "7"
    assert card.name == "The Chariot"
    assert card.image_url == "https://example.com/chariot.png"
    assert card.display_number == "Card #7"


def test_numeric_id_and_number_are_coerced():
    """Test that int8 columns arrive as strings."""
    card = Card.model_validate({"id": 12, "name": "The Hanged Man", "number": 12})

    assert card.id == "12"
    assert card.number == "12"


def test_missing_optional_fields():
    """Test defaults for null description and absent image."""
    card = Card.model_validate({"id": "3", "name": "The Empress", "number": "3", "description": None})

    assert card.description == ""
    assert card.image_url is None


def test_unknown_columns_are_ignored():
    """Test that extra columns such as created_at are dropped."""
    card = Card.model_validate({"id": "4", "name": "The Emperor", "number": "4", "created_at": "2024-01-01"})

    assert not hasattr(card, "created_at")


def test_missing_name_is_rejected():
    """Test that a row without a name fails validation."""
    with pytest.raises(ValidationError):
        Card.model_validate({"id": "5", "number": "5"})


def test_null_name_becomes_empty():
    """Test that a null name column is accepted as an empty name."""
    card = Card.model_validate({"id": "6", "name": None, "number": "6"})

    assert card.name == ""
