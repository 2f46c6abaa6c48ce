"""
Shared fixtures for the cards screen tests.
"""

import pytest

from oracle_cards.exceptions import DeleteFailure, LoadFailure
from oracle_cards.models.card import Card


class FakeCardRepository:
    """
    In-memory stand-in for CardRepository.

    Rows are kept as dicts and returned sorted by id, like the remote
    ``ORDER BY id ASC``. Failures are switched on per operation.
    """

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.fail_load = False
        self.fail_delete = False
        self.list_calls = 0
        self.delete_calls = []

    async def list_cards(self):
        self.list_calls += 1
        if self.fail_load:
            raise LoadFailure("network down")
        rows = sorted(self.rows, key=lambda r: r["id"])
        return [Card.model_validate(row) for row in rows]

    async def delete_card(self, card_id):
        self.delete_calls.append(card_id)
        if self.fail_delete:
            raise DeleteFailure(card_id)
        self.rows = [row for row in self.rows if row["id"] != card_id]


@pytest.fixture
def sample_rows():
    """Two cards, deliberately stored out of id order."""
    return [
        {
            "id": "2",
            "name": "The Moon",
            "number": "18",
            "description": "Illusion and intuition.",
            "image_url": None,
        },
        {
            "id": "1",
            "name": "The Fool",
            "number": "0",
            "description": "New beginnings.",
            "image_url": "https://example.com/fool.png",
        },
    ]


@pytest.fixture
def fake_repo(sample_rows):
    """Create a fake repository holding the sample rows."""
    return FakeCardRepository(sample_rows)


@pytest.fixture
def make_repo():
    """Factory for fake repositories with custom rows."""
    return FakeCardRepository
