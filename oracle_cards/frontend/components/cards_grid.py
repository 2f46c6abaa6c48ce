"""
All Cards screen component: header, two-column grid, add button and modal.
"""

from fasthtml.common import *

from ...services.cards_screen import CardsScreen
from .card_action import card_action_component
from .card_tile import card_tile_component


def cards_header_component(card_count: int, home_path: str) -> FT:
    """Render the header with back link, title and card count."""
    return Div(
        A("‹", href=home_path, cls="back-link", title="Back"),
        H1("All Cards", cls="cards-title"),
        Div(
            Span(f"{card_count} Cards", cls="cards-count-text"),
            cls="cards-count"
        ),
        cls="cards-header"
    )


def cards_screen_component(screen: CardsScreen, home_path: str = "/home", add_card_path: str = "/add-card") -> FT:
    """
    Render the whole screen.

    Args:
        screen: Screen state to render
        home_path: Target of the back link
        add_card_path: Target of the floating add button

    Returns:
        FastHTML component
    """
    if screen.cards:
        grid = Div(
            *[card_tile_component(card) for card in screen.cards],
            cls="cards-grid"
        )
    else:
        grid = Div(
            P("No cards yet.", cls="empty-state"),
            cls="cards-empty"
        )

    return Div(
        cards_header_component(screen.card_count, home_path),
        grid,
        A("+", href=add_card_path, cls="fab-add", title="Add Card"),
        card_action_component(screen.selected_card, screen.is_action_panel_visible),
        cls="cards-screen",
        id="main-content"
    )
