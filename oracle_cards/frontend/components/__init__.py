"""
Frontend components for the All Cards screen.
"""

from .card_tile import card_tile_component
from .cards_grid import cards_screen_component
from .card_action import card_action_component

__all__ = ["card_tile_component", "cards_screen_component", "card_action_component"]
