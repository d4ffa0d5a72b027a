"""HTTP relay: ``GET /api/data`` forwards to the upstream stock API."""

import asyncio
import logging

import aiohttp
from aiohttp import web

from .client import fetch_stock
from .config import Config
from .constants import UPSTREAM_URL

logger = logging.getLogger(__name__)

UPSTREAM_URL_KEY = web.AppKey("upstream_url", str)
SESSION_KEY = web.AppKey("session", aiohttp.ClientSession)

routes = web.RouteTableDef()


@routes.get("/api/data")
async def get_data(request: web.Request) -> web.Response:
    url = request.app[UPSTREAM_URL_KEY]
    try:
        payload = await fetch_stock(request.app[SESSION_KEY], url)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logger.error("Upstream %s failed: %s", url, e)
        return web.json_response({"error": "upstream unavailable"}, status=502)
    return web.json_response(payload)


async def _client_session(app: web.Application):
    app[SESSION_KEY] = aiohttp.ClientSession()
    yield
    await app[SESSION_KEY].close()


def create_app(upstream_url: str = UPSTREAM_URL) -> web.Application:
    app = web.Application()
    app[UPSTREAM_URL_KEY] = upstream_url
    app.cleanup_ctx.append(_client_session)
    app.add_routes(routes)
    return app


async def start_relay(host: str, port: int, upstream_url: str = UPSTREAM_URL) -> web.AppRunner:
    runner = web.AppRunner(create_app(upstream_url))
    await runner.setup()
    await web.TCPSite(runner, host, port).start()
    logger.info("Relay listening on http://%s:%s/api/data", host, port)
    return runner


def main():
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO
    )
    config = Config.from_env(require_token=False)
    web.run_app(create_app(config.upstream_url), host=config.relay_host, port=config.relay_port)


if __name__ == '__main__':
    main()
