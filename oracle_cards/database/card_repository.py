"""
Card Repository.

Thin data-access layer over the remote cards table: fetch everything
in id order, and delete by id.
"""

import logging
from typing import List

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError

from .supabase_service import SupabaseService
from ..exceptions import DeleteFailure, LoadFailure
from ..models.card import Card

logger = logging.getLogger(__name__)


class CardRepository:
    """
    Repository for the cards table.

    Translates client errors into ``LoadFailure`` / ``DeleteFailure``.
    """

    def __init__(self, supabase_service: SupabaseService, table_name: str = "cards"):
        """
        Initialize card repository.

        Args:
            supabase_service: Supabase service instance
            table_name: Name of the remote table
        """
        self.db = supabase_service
        self.table_name = table_name

    async def list_cards(self) -> List[Card]:
        """
        Fetch every card ordered ascending by id.

        Returns:
            Cards in the order the server returned them; rows that fail
            validation are logged and skipped

        Raises:
            LoadFailure: If the request failed
        """
        table = await self.db.table(self.table_name)
        try:
            response = await table.select("*").order("id", desc=False).execute()
        except (APIError, httpx.HTTPError) as e:
            raise LoadFailure(f"Failed to load cards: {e}") from e

        rows = response.data or []
        logger.debug(f"Data from {self.table_name}: {rows}")

        cards = []
        for row in rows:
            try:
                cards.append(Card.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping malformed card row {row!r}: {e}")
        return cards

    async def delete_card(self, card_id: str) -> None:
        """
        Delete the card with the given id.

        Args:
            card_id: Card identifier

        Raises:
            DeleteFailure: If the request failed
        """
        table = await self.db.table(self.table_name)
        try:
            await table.delete().eq("id", card_id).execute()
        except (APIError, httpx.HTTPError) as e:
            raise DeleteFailure(card_id, f"Failed to delete card {card_id}: {e}") from e
