"""
Fetcher - retrieves documents over HTTP with configured headers and cookies
"""

import asyncio
import logging
import time

import aiohttp

from ..config import SoupConfig
from ..dom import NodeView
from ..error_handler import ErrorHandler, ErrorType
from ..parser import HTMLParser
from ..result import QueryResult

logger = logging.getLogger(__name__)


class Fetcher:
    """
    GETs a URL and returns its body as text. Every request carries the
    config's headers and cookies. There is no timeout or retry policy beyond
    what the aiohttp session applies.
    """

    def __init__(self, config: SoupConfig = None):
        self.config = config or SoupConfig()
        self.errors = ErrorHandler(debug=self.config.debug)
        self.parser = HTMLParser(self.config)

    async def fetch(self, url: str, session: aiohttp.ClientSession = None) -> QueryResult[str]:
        """Fetch url with the given session, or a short-lived one"""
        if session is not None:
            return await self._fetch(session, url)

        async with aiohttp.ClientSession() as session:
            return await self._fetch(session, url)

    async def _fetch(self, session: aiohttp.ClientSession, url: str) -> QueryResult[str]:
        start_time = time.time()

        try:
            async with session.get(url, headers=self.config.headers,
                                   cookies=self.config.cookies) as response:
                try:
                    content = await response.text(errors='replace')
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    return self.errors.from_exception(
                        e, "unable to read the response body", error_type=ErrorType.READ_FAILURE
                    )

                response_time = time.time() - start_time
                if response.status >= 400:
                    logger.warning(f"GET {url} returned HTTP {response.status}")
                logger.info(f"Fetched {url} ({response.status}, {len(content)} chars) in {response_time:.2f}s")
                return QueryResult(content)

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, OSError) as e:
            return self.errors.from_exception(
                e, f"couldn't perform GET request to {url}", error_type=ErrorType.TRANSPORT_FAILURE
            )

    async def fetch_document(self, url: str,
                             session: aiohttp.ClientSession = None) -> QueryResult[NodeView]:
        """Fetch url and parse the body into a root NodeView"""
        result = await self.fetch(url, session=session)
        if not result.ok:
            return result
        return self.parser.parse(result.value)

    def get(self, url: str) -> QueryResult[str]:
        """Blocking fetch; must not be called from a running event loop"""
        return asyncio.run(self.fetch(url))

    def get_document(self, url: str) -> QueryResult[NodeView]:
        """Blocking fetch_document"""
        return asyncio.run(self.fetch_document(url))


def get(url: str, config: SoupConfig = None) -> QueryResult[str]:
    """Fetch url with a one-off Fetcher"""
    return Fetcher(config).get(url)
