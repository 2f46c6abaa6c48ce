"""Oracle Cards - All Cards screen backed by a Supabase table."""

from .models.card import Card
from .database.supabase_service import SupabaseService
from .database.card_repository import CardRepository
from .services.cards_screen import CardsScreen
from .exceptions import CardsError, ConfigurationError, LoadFailure, DeleteFailure

__all__ = [
    # Models
    "Card",
    # Database
    "SupabaseService",
    "CardRepository",
    # Services
    "CardsScreen",
    # Errors
    "CardsError",
    "ConfigurationError",
    "LoadFailure",
    "DeleteFailure",
]
