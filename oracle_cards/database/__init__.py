"""Database layer initialization."""

from .supabase_service import SupabaseService
from .card_repository import CardRepository

__all__ = ["SupabaseService", "CardRepository"]
