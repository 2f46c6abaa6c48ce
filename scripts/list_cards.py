#!/usr/bin/env python3
"""
List the cards table in display order.

Optionally deletes a card first, using the same delete-then-reload flow
as the All Cards screen.

Usage:
    python scripts/list_cards.py
    python scripts/list_cards.py --delete 42
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from oracle_cards.config import settings
from oracle_cards.database.card_repository import CardRepository
from oracle_cards.database.supabase_service import SupabaseService
from oracle_cards.services.cards_screen import CardsScreen

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_repository() -> CardRepository:
    return CardRepository(
        SupabaseService(settings.supabase_url, settings.supabase_key),
        table_name=settings.cards_table
    )


async def run(delete_id=None, repository=None) -> bool:
    """
    Optionally delete a card, then print the table.

    Returns:
        True if every remote call succeeded
    """
    screen = CardsScreen(repository or build_repository())

    if not await screen.load_cards():
        return False

    if delete_id is not None:
        if not await screen.delete_card(delete_id):
            return False

    for card in screen.cards:
        print(f"{card.id:>8}  {card.display_number:<14}  {card.name}")
    print(f"{screen.card_count} Cards")
    return True


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="List (and optionally delete) cards in the Supabase cards table"
    )
    parser.add_argument(
        "--delete",
        metavar="ID",
        default=None,
        help="Delete the card with this id before listing"
    )
    args = parser.parse_args()

    return asyncio.run(run(args.delete))


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
