"""Services module initialization."""

from .cards_screen import CardsScreen

__all__ = ["CardsScreen"]
