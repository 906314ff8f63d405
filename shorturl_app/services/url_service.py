import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from shorturl_app.models.url import UrlMapping
from shorturl_app.services.url_store import UrlStore

logger = logging.getLogger(__name__)


class URLService:
    """
    Async entry point used by the route handlers.

    SQLite calls block, so each store operation is pushed to Starlette's
    threadpool instead of running on the event loop.
    """

    def __init__(self, store: UrlStore):
        self.store = store

    async def shorten(self, url: str) -> str:
        """Identifier for `url` (created on first submission). Counts one hit."""
        identifier = await run_in_threadpool(self.store.shorten, url)
        logger.info("Shortened %s -> %s", url, identifier)
        return identifier

    async def resolve(self, identifier: str) -> Optional[str]:
        """
        Original URL for an identifier, or None.

        Redirects are not counted; only create-mapping requests add hits.
        """
        url = await run_in_threadpool(self.store.find_by_identifier, identifier)
        if url is None:
            logger.debug("Short code not found: %s", identifier)
        return url

    async def get_mapping(self, identifier: str) -> Optional[UrlMapping]:
        return await run_in_threadpool(self.store.get_mapping, identifier)
