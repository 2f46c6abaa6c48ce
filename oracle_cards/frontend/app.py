"""
FastHTML frontend for the All Cards screen.

Lists the cards stored in Supabase as a two-column grid, opens an action
panel for a tapped card, and deletes cards with a full reload afterwards.
"""

import logging
import uuid
from collections import OrderedDict
from pathlib import Path
from typing import Optional, OrderedDict as OrderedDictType

from dotenv import load_dotenv
from fasthtml.common import *
from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

from ..config import settings
from ..database.card_repository import CardRepository
from ..database.supabase_service import SupabaseService
from ..services.cards_screen import CardsScreen
from .components.card_action import card_action_component, empty_modal
from .components.cards_grid import cards_screen_component

# Load environment variables
load_dotenv()

STATIC_DIR = Path(__file__).parent / "static"

# Screen state per browser session, least recently used first.
# Maps session_id -> CardsScreen
SCREEN_CACHE: OrderedDictType[str, CardsScreen] = OrderedDict()

_repository: Optional[CardRepository] = None

# Initialize FastHTML app with sessions enabled
app, rt = fast_app(
    hdrs=(
        Link(rel="stylesheet", href="/static/styles.css"),
    ),
    pico=False,
    static_path=str(STATIC_DIR),
    secret_key=settings.secret_key
)

# Ahead of fast_app's catch-all static route; StaticFiles refuses paths outside STATIC_DIR
app.routes.insert(0, Mount("/static", app=StaticFiles(directory=STATIC_DIR), name="static"))

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def get_repository() -> CardRepository:
    """Get the shared card repository, building it from settings on first use."""
    global _repository
    if _repository is None:
        _repository = CardRepository(
            SupabaseService(settings.supabase_url, settings.supabase_key),
            table_name=settings.cards_table
        )
    return _repository


def set_repository(repository: Optional[CardRepository]) -> None:
    """Replace the shared repository and drop all session screens."""
    global _repository
    _repository = repository
    SCREEN_CACHE.clear()


def get_session_id(session):
    """Get or create a unique session ID."""
    if "sid" not in session:
        session["sid"] = str(uuid.uuid4())
    return session["sid"]


def get_screen(session) -> CardsScreen:
    """
    Get the session's screen, creating an empty one if needed.

    Keeps at most ``settings.max_screens`` screens, evicting the least
    recently used session first.
    """
    sid = get_session_id(session)
    screen = SCREEN_CACHE.get(sid)
    if screen is None:
        screen = CardsScreen(get_repository())
        SCREEN_CACHE[sid] = screen
    SCREEN_CACHE.move_to_end(sid)

    while len(SCREEN_CACHE) > settings.max_screens:
        evicted, _ = SCREEN_CACHE.popitem(last=False)
        logger.info(f"Evicted screen for session {evicted}")
    return screen


def render_content(screen: CardsScreen):
    """Render the main content area."""
    return cards_screen_component(
        screen,
        home_path=settings.home_path,
        add_card_path=settings.add_card_path
    )


@rt("/")
async def get(session):
    """Mount the screen: load all cards and render the page."""
    screen = get_screen(session)
    screen.clear_selection()
    await screen.load_cards()
    logger.info(f"Rendering {screen.card_count} cards")
    return Title(f"All Cards - {settings.app_name}"), Main(
        render_content(screen)
    )


@rt("/cards/{card_id}/actions")
def get(card_id: str, session):
    """Select a card and open its action panel."""
    screen = get_screen(session)
    card = screen.select_card_by_id(card_id)
    if card is None:
        return empty_modal()
    return card_action_component(screen.selected_card, screen.is_action_panel_visible)


@rt("/card-action/close")
def get(session):
    """Close the action panel."""
    screen = get_screen(session)
    screen.close_action_panel()
    return empty_modal()


@rt("/cards/{card_id}")
async def delete(card_id: str, session):
    """Delete a card, reload, and re-render the main content."""
    screen = get_screen(session)
    await screen.delete_card(card_id)
    return render_content(screen)


def main():
    import uvicorn
    logger.info(f"Starting {settings.app_name} on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
