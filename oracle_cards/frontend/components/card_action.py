"""
Action panel component for a selected card.
"""

from typing import Optional

from fasthtml.common import *

from ...models.card import Card


def empty_modal() -> FT:
    """Render the empty modal container."""
    return Div(id="modal")


def card_action_component(card: Optional[Card], visible: bool) -> FT:
    """
    Render the action panel for ``card``.

    Close goes to the close route, Delete to the delete route; the delete
    response replaces the whole main content so the grid is refreshed.

    Args:
        card: Selected card, if any
        visible: Whether the panel is open

    Returns:
        FastHTML component (an empty modal container when hidden)
    """
    if card is None or not visible:
        return empty_modal()

    details = []
    if card.image_url:
        details.append(Img(src=card.image_url, alt=card.name, cls="card-action-image"))
    details.append(P(card.display_number, cls="card-action-number"))
    details.append(P(card.description or "No description", cls="card-action-description"))

    return Div(
        Div(
            Div(
                H2(card.name),
                Button(
                    "✕",
                    hx_get="/card-action/close",
                    hx_target="#modal",
                    hx_swap="outerHTML",
                    cls="modal-close"
                ),
                cls="modal-header"
            ),
            *details,
            Div(
                Button(
                    "Close",
                    hx_get="/card-action/close",
                    hx_target="#modal",
                    hx_swap="outerHTML",
                    cls="btn btn-secondary"
                ),
                Button(
                    "Delete",
                    hx_delete=f"/cards/{card.id}",
                    hx_confirm="Are you sure you want to delete this card?",
                    hx_target="#main-content",
                    hx_swap="outerHTML",
                    cls="btn btn-danger"
                ),
                cls="modal-actions"
            ),
            cls="modal-content"
        ),
        cls="modal-overlay",
        id="modal"
    )
