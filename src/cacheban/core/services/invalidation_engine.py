"""Invalidation engine - main entry point for hosts."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Iterable
from contextlib import asynccontextmanager
from typing import Any

from cacheban.core.entities.cache_server_config import CacheServerConfig
from cacheban.core.entities.flush_result import FlushResult
from cacheban.core.entities.pending_ban_set import PendingBanSet
from cacheban.core.exceptions import FlushInProgressError
from cacheban.core.interfaces.ban_transport import IBanTransport
from cacheban.core.interfaces.purge_dispatcher import IPurgeDispatcher
from cacheban.core.services.ban_list import BanListAccumulator
from cacheban.core.services.purge_dispatcher import PurgeDispatcher
from cacheban.core.services.target_resolver import resolve_target
from cacheban.core.services.url_normalizer import normalize_url

logger = logging.getLogger(__name__)


class InvalidationEngine:
    """Collects invalidations during a unit of work and flushes them.

    The host registers stale URLs and patterns as content changes, then
    calls :meth:`flush` once at the end of the unit of work (typically
    the end of a request). The engine holds no global state; the host
    decides its lifetime, usually one per process or one per site.

    Example:
        engine = InvalidationEngine(
            site_url_provider=lambda: settings.SITE_URL,
            config=CacheServerConfig(port_override=6081),
        )

        engine.invalidate_url("https://example.com/blog/hello-world/")
        engine.invalidate_regex("^/category/news/")

        result = await engine.flush()
        if not result.ok:
            for target, reason in result.failures:
                ...
    """

    def __init__(
        self,
        site_url_provider: Callable[[], str],
        config: CacheServerConfig | None = None,
        transport: IBanTransport | None = None,
        dispatcher: IPurgeDispatcher | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            site_url_provider: Returns the site's canonical URL. Called
                at flush time since the URL may change after construction.
            config: Cache server configuration. Uses defaults if not provided.
            transport: Transport for ban requests. An httpx-based transport
                is created (and owned) by the engine if not provided.
            dispatcher: Custom dispatcher. Built from transport and config
                if not provided.
        """
        self._site_url_provider = site_url_provider
        self._config = config or CacheServerConfig()

        self._owns_transport = False
        if dispatcher is None:
            if transport is None:
                from cacheban.infrastructure.transports.httpx_transport import (
                    HttpxBanTransport,
                )

                transport = HttpxBanTransport()
                self._owns_transport = True
            dispatcher = PurgeDispatcher(transport, self._config)
        self._transport = transport
        self._dispatcher = dispatcher

        self._accumulator = BanListAccumulator()
        self._flush_lock = asyncio.Lock()

    @property
    def config(self) -> CacheServerConfig:
        """Get the cache server configuration."""
        return self._config

    @property
    def is_flushing(self) -> bool:
        """Check if a flush is currently running."""
        return self._flush_lock.locked()

    @property
    def pending(self) -> PendingBanSet:
        """Get a copy of the bans waiting for the next flush."""
        return self._accumulator.snapshot()

    def is_empty(self) -> bool:
        """Check if nothing is waiting to be flushed."""
        return self._accumulator.is_empty()

    def discard_pending(self) -> PendingBanSet:
        """Drop every pending ban without sending it.

        Returns:
            The discarded bans.
        """
        discarded = self._accumulator.drain()
        if not discarded.is_empty:
            logger.warning("Discarded %d pending ban(s)", len(discarded))
        return discarded

    def invalidate_url(self, raw_url: str) -> None:
        """Mark a URL as stale.

        Only the path, query and fragment are kept. Safe to call during
        a flush; the URL is sent with the next one.

        Args:
            raw_url: An absolute or relative URL.

        Raises:
            InvalidUrlError: If the URL cannot be parsed.
        """
        path = normalize_url(raw_url)
        self._accumulator.add_exact_path(path)
        logger.debug("Queued url ban %s", path.path)

    def invalidate_urls(self, raw_urls: Iterable[str]) -> None:
        """Mark several URLs as stale.

        All URLs are normalized before any is queued, so an invalid URL
        leaves the buffer untouched.

        Args:
            raw_urls: Absolute or relative URLs.

        Raises:
            InvalidUrlError: If any URL cannot be parsed.
        """
        paths = [normalize_url(raw_url) for raw_url in raw_urls]
        for path in paths:
            self._accumulator.add_exact_path(path)
        logger.debug("Queued %d url ban(s)", len(paths))

    def invalidate_regex(self, pattern: str) -> None:
        """Mark every cached object matching ``pattern`` as stale.

        Args:
            pattern: A regular expression evaluated by the cache server.
        """
        self._accumulator.add_regex_pattern(pattern)
        logger.debug("Queued regex ban %s", pattern)

    async def flush(self, wait: bool = True) -> FlushResult:
        """Send every pending ban to the cache server.

        Only one flush runs at a time per engine. Per-entry failures are
        reported in the result; everything drained is considered
        attempted and is not requeued.

        Args:
            wait: If True, wait for a running flush to finish first.
                If False, raise FlushInProgressError instead.

        Returns:
            The aggregate FlushResult.

        Raises:
            FlushInProgressError: If ``wait`` is False and a flush is running.
            InvalidConfigError: If the site URL cannot be turned into a
                target. Pending bans are kept for a later flush.
        """
        if not wait and self._flush_lock.locked():
            raise FlushInProgressError("A flush is already in progress")

        async with self._flush_lock:
            return await self._flush()

    async def _flush(self) -> FlushResult:
        if self._accumulator.is_empty():
            logger.debug("Nothing to flush")
            return FlushResult.empty()

        # Resolve before draining so a bad site URL loses nothing
        target_url = resolve_target(self._site_url_provider(), self._config)

        bans = self._accumulator.drain()
        try:
            return await self._dispatcher.dispatch(target_url, bans)
        except BaseException:
            self._accumulator.requeue(bans)
            logger.warning(
                "Flush to %s aborted, %d ban(s) requeued", target_url, len(bans)
            )
            raise

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator["InvalidationEngine"]:
        """Flush once the enclosed block finishes.

        The flush also runs when the block raises, since content changes
        made before the error may already be committed.

        Example:
            async with engine.unit_of_work():
                await save_post(post)
                engine.invalidate_url(post.url)
        """
        try:
            yield self
        finally:
            await self.flush()

    async def close(self) -> None:
        """Close the transport if the engine created it."""
        if self._owns_transport and self._transport is not None:
            await self._transport.close()

    async def __aenter__(self) -> "InvalidationEngine":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
