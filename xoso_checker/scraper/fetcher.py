"""HTTP fetcher for result pages.

Each request carries a User-Agent picked at random from a fixed pool. This
only dodges naive bot filters and is never relied upon.
"""

import asyncio
import random
from collections.abc import Sequence

import aiohttp
from loguru import logger

from xoso_checker.config import settings
from xoso_checker.scraper.errors import FetchError

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9"


def pick_user_agent(pool: Sequence[str]) -> str:
    return random.choice(pool)


def build_headers(pool: Sequence[str] | None = None) -> dict[str, str]:
    return {
        "User-Agent": pick_user_agent(pool or settings.USER_AGENTS),
        "Accept": ACCEPT_HEADER,
    }


async def fetch(
    url: str,
    *,
    timeout: float | None = None,
    user_agents: Sequence[str] | None = None,
) -> str:
    """GET ``url`` and return the body as text.

    Raises FetchError on non-2xx status, connection errors and the
    per-request timeout. Cancellation of the calling task closes the session.
    """
    client_timeout = aiohttp.ClientTimeout(
        total=timeout if timeout is not None else settings.FETCH_TIMEOUT_SECONDS
    )
    headers = build_headers(user_agents)

    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as client:
            async with client.get(url, headers=headers) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}")
                text = await resp.text(errors="replace")
    except asyncio.TimeoutError as e:
        raise FetchError(url, "request timed out") from e
    except aiohttp.ClientError as e:
        raise FetchError(url, str(e) or type(e).__name__) from e

    logger.debug("Fetched {} ({} chars)", url, len(text))
    return text
