"""
State for the All Cards screen.

Holds the current snapshot of the cards table plus the action panel
state, and runs the two remote operations (load, delete) through the
repository. Failures are logged and leave the snapshot untouched.
"""

import logging
from typing import List, Optional

from ..database.card_repository import CardRepository
from ..exceptions import DeleteFailure, LoadFailure
from ..models.card import Card

logger = logging.getLogger(__name__)


class CardsScreen:
    """
    Screen state for listing, selecting and deleting cards.

    ``cards`` is only ever replaced by a successful fetch. A delete never
    removes the card locally; it reloads the whole table instead.
    """

    def __init__(self, repository: CardRepository):
        """
        Initialize screen state.

        Args:
            repository: Card repository used for remote calls
        """
        self.repository = repository
        self.cards: List[Card] = []
        self.selected_card: Optional[Card] = None
        self.is_action_panel_visible: bool = False

    @property
    def card_count(self) -> int:
        return len(self.cards)

    async def load_cards(self) -> bool:
        """
        Replace the snapshot with the table's current contents.

        Returns:
            True if the load succeeded, False if it failed and the
            previous snapshot was kept
        """
        try:
            cards = await self.repository.list_cards()
        except LoadFailure as e:
            logger.error(f"Fetch error: {e}")
            return False

        self.cards = cards
        return True

    def select_card(self, card: Card) -> None:
        """Make ``card`` the action panel's subject and open the panel."""
        self.selected_card = card
        self.is_action_panel_visible = True

    def select_card_by_id(self, card_id: str) -> Optional[Card]:
        """
        Select a card from the current snapshot by id.

        Returns:
            The selected card, or None if the id is not in the snapshot
            (the panel is closed in that case)
        """
        for card in self.cards:
            if card.id == card_id:
                self.select_card(card)
                return card
        logger.warning(f"Card {card_id} is not in the current snapshot")
        self.close_action_panel()
        return None

    def close_action_panel(self) -> None:
        self.is_action_panel_visible = False

    def clear_selection(self) -> None:
        """Drop the selected card and close the panel, as on a fresh mount."""
        self.selected_card = None
        self.is_action_panel_visible = False

    async def delete_card(self, card_id: str) -> bool:
        """
        Delete a card remotely, then reload the whole table.

        A failed delete aborts before the reload. A failed reload after a
        successful delete keeps the previous snapshot.

        Args:
            card_id: Identifier of the card to delete

        Returns:
            True if the remote delete succeeded
        """
        logger.info(f"Before delete: {[c.id for c in self.cards]}")

        try:
            await self.repository.delete_card(card_id)
        except DeleteFailure as e:
            logger.error(f"Delete error: {e}")
            return False

        logger.info(f"Deleted card: {card_id}")

        if self.selected_card is not None and self.selected_card.id == card_id:
            self.selected_card = None
        self.is_action_panel_visible = False

        try:
            cards = await self.repository.list_cards()
        except LoadFailure as e:
            logger.error(f"Fetch error after delete: {e}")
        else:
            self.cards = cards
            logger.info(f"After fetch: {[c.id for c in cards]}")

        return True
