"""Models module initialization."""

from .card import Card

__all__ = ["Card"]
