"""Exception hierarchy for the cards screen."""

from typing import Optional


class CardsError(Exception):
    """Base exception for all Oracle Cards errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(CardsError):
    """Supabase credentials are missing or unusable."""


class LoadFailure(CardsError):
    """Reading the cards table failed."""


class DeleteFailure(CardsError):
    """Deleting a card from the table failed."""

    def __init__(self, card_id: str, message: Optional[str] = None) -> None:
        self.card_id = card_id
        super().__init__(message or f"Failed to delete card {card_id}")
