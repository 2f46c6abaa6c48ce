"""
Supabase connection service.

Owns the single async Supabase client used by the repositories.
"""

import logging
from typing import Optional

from supabase import AsyncClient, acreate_client

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SupabaseService:
    """
    Lazily creates and caches the Supabase ``AsyncClient``.

    The client is only built on first use, so constructing the service
    (for example at import time of the app) never touches the network.
    """

    def __init__(self, url: Optional[str], key: Optional[str]):
        """
        Initialize the service.

        Args:
            url: Supabase project URL
            key: Supabase anon or service-role key
        """
        self.url = url
        self.key = key
        self._client: Optional[AsyncClient] = None

    async def get_client(self) -> AsyncClient:
        """
        Get the shared client, creating it on first call.

        Raises:
            ConfigurationError: If the URL or key is missing
        """
        if self._client is None:
            if not self.url or not self.key:
                raise ConfigurationError("SUPABASE_URL and SUPABASE_KEY must be set")
            logger.info(f"Connecting to Supabase at {self.url}")
            self._client = await acreate_client(self.url, self.key)
        return self._client

    async def table(self, name: str):
        """Return a query builder for ``name``."""
        client = await self.get_client()
        return client.table(name)
