"""
Card tile component for a single cell of the cards grid.
"""

from fasthtml.common import *

from ...models.card import Card


def card_tile_component(card: Card) -> FT:
    """
    Render a single card tile.

    Clicking the tile selects the card and opens the action panel.

    Args:
        card: Card to render

    Returns:
        FastHTML component
    """
    return Div(
        Div(
            Div(
                Span("Oracle", cls="card-tile-label"),
                Div(cls="card-tile-rule"),
                cls="card-tile-top"
            ),
            Div(
                Span(card.name, cls="card-tile-name"),
                cls="card-tile-middle"
            ),
            Span(card.display_number, cls="card-tile-number"),
            cls="card-tile-face"
        ),
        hx_get=f"/cards/{card.id}/actions",
        hx_target="#modal",
        hx_swap="outerHTML",
        id=f"card-{card.id}",
        cls="card-tile"
    )
