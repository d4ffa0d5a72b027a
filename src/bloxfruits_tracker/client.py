import asyncio
import logging
from typing import List, Optional

import aiohttp

from .models import StockServer

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


async def fetch_stock(session: aiohttp.ClientSession, url: str, timeout: float = REQUEST_TIMEOUT):
    async with session.get(url, timeout=aiohttp.ClientTimeout(total=timeout)) as response:
        return await response.json(content_type=None)


def parse_servers(payload) -> List[StockServer]:
    return [StockServer.from_dict(server) for server in payload.get('data') or []]


class StockPage:
    """In-memory stock state shown by the bot. Loaded once, on startup."""

    def __init__(self, url: str):
        self.url = url
        self.servers: List[StockServer] = []
        self.loading = True

    @property
    def created_at(self) -> Optional[int]:
        return self.servers[0].created_at if self.servers else None

    async def load(self, session: Optional[aiohttp.ClientSession] = None):
        try:
            if session is None:
                async with aiohttp.ClientSession() as own_session:
                    payload = await fetch_stock(own_session, self.url)
            else:
                payload = await fetch_stock(session, self.url)
            self.servers = parse_servers(payload)
            logger.info("Loaded stock for %d server(s)", len(self.servers))
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, ArithmeticError,
                LookupError, TypeError, AttributeError) as e:
            logger.error("Failed to load stock from %s: %s", self.url, e)
            self.servers = []
        finally:
            self.loading = False
        return self.servers
