# page_scout/crawler/fetcher.py
"""
Fetcher module: plain HTTP(S) GET with an identifying User-Agent.

No retries and no rate limiting: a failing address is reported once as
:class:`~page_scout.errors.FetchError` and never re-attempted.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from page_scout.config import ScoutConfig
from page_scout.crawler.models import PageData
from page_scout.errors import FetchError
from page_scout.logger import LOGGER_NAME


class PageFetcher(Protocol):
    """Anything that can turn an address into a :class:`PageData`."""

    async def fetch(self, url: str) -> PageData: ...


def open_session(config: ScoutConfig) -> ClientSession:
    """Create a session that stamps every request with the configured User-Agent."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Fetches pages through a shared aiohttp session."""

    def __init__(self, session: ClientSession, config: Optional[ScoutConfig] = None) -> None:
        self.session = session
        self.config = config or ScoutConfig()
        self.logger = logging.getLogger(LOGGER_NAME)

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its body.

        HTTP error statuses still return the body; only transport failures,
        invalid addresses and timeouts raise FetchError.
        """
        try:
            async with self.session.get(url) as resp:
                body = await resp.read()
                if resp.status >= 400:
                    self.logger.debug("HTTP %s for %s", resp.status, url)
                return PageData(
                    url=url,
                    content=body,
                    status=resp.status,
                    content_type=resp.headers.get("Content-Type", ""),
                )
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except (ClientError, ValueError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc


__all__ = ["Fetcher", "PageFetcher", "open_session"]
