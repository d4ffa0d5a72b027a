import logging
import os
from dataclasses import dataclass
from typing import Optional

from .constants import UPSTREAM_URL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    token: Optional[str] = None
    admin_id: Optional[str] = None
    data_file: str = "bot_data.json"
    relay_host: str = "127.0.0.1"
    relay_port: int = 8080
    upstream_url: str = UPSTREAM_URL
    stock_url: Optional[str] = None
    asset_base_url: str = ""

    @property
    def relay_url(self) -> str:
        return self.stock_url or f"http://{self.relay_host}:{self.relay_port}/api/data"

    @classmethod
    def from_env(cls, require_token: bool = True) -> "Config":
        token = os.environ.get('TELEGRAM_BOT_TOKEN')
        if require_token and not token:
            raise ValueError("TELEGRAM_BOT_TOKEN environment variable is not set")

        admin_id = os.environ.get('ADMIN_ID')
        if require_token and not admin_id:
            logger.warning("ADMIN_ID environment variable is not set")

        port = os.environ.get('RELAY_PORT', '8080')
        try:
            relay_port = int(port)
        except ValueError:
            raise ValueError(f"RELAY_PORT must be an integer, got {port!r}") from None

        return cls(
            token=token,
            admin_id=admin_id,
            data_file=os.environ.get('DATA_FILE', 'bot_data.json'),
            relay_host=os.environ.get('RELAY_HOST', '127.0.0.1'),
            relay_port=relay_port,
            upstream_url=os.environ.get('UPSTREAM_URL', UPSTREAM_URL),
            stock_url=os.environ.get('STOCK_URL') or None,
            asset_base_url=os.environ.get('ASSET_BASE_URL', ''),
        )
