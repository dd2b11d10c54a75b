"""Purge dispatcher - sends accumulated bans to the cache server."""

import asyncio
import logging

from cacheban.core.entities.ban_request import BanRequest
from cacheban.core.entities.ban_target import BanTarget
from cacheban.core.entities.cache_server_config import CacheServerConfig
from cacheban.core.entities.flush_result import BanOutcome, FlushResult
from cacheban.core.entities.pending_ban_set import PendingBanSet
from cacheban.core.exceptions import BanTransportError
from cacheban.core.interfaces.ban_transport import IBanTransport

logger = logging.getLogger(__name__)


class PurgeDispatcher:
    """Issues one ban request per pending entry.

    Requests are independent: they run concurrently, bounded by
    ``config.max_concurrency``, and a failed request never stops the
    others. Each outcome stays attached to the entry it was sent for.
    """

    def __init__(
        self,
        transport: IBanTransport,
        config: CacheServerConfig | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            transport: The transport used to deliver requests.
            config: Dispatch settings. Uses defaults if not provided.
        """
        self._transport = transport
        self._config = config or CacheServerConfig()

    @property
    def config(self) -> CacheServerConfig:
        """Get the dispatch configuration."""
        return self._config

    async def dispatch(
        self,
        target_url: str,
        bans: PendingBanSet,
    ) -> FlushResult:
        """Send every ban in ``bans`` to ``target_url``.

        Args:
            target_url: The resolved cache server base URL.
            bans: The drained set of pending bans.

        Returns:
            A FlushResult with one outcome per entry, in dispatch order.
        """
        if self._config.dedupe_on_flush:
            bans = bans.deduplicated()

        targets = list(bans.targets())
        if not targets:
            return FlushResult(target_url=target_url, outcomes=[])

        semaphore = asyncio.Semaphore(self._config.max_concurrency)

        async def bounded(target: BanTarget) -> BanOutcome:
            async with semaphore:
                return await self._send_with_retries(target_url, target)

        tasks = [asyncio.ensure_future(bounded(t)) for t in targets]
        try:
            # gather keeps results in argument order
            outcomes = await asyncio.gather(*tasks)
        except BaseException:
            # No request may outlive the flush that issued it
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        result = FlushResult(target_url=target_url, outcomes=list(outcomes))

        logger.info(
            "Flushed %d ban(s) to %s: %d succeeded, %d failed",
            result.attempted,
            target_url,
            result.succeeded,
            result.failed,
        )
        return result

    async def _send_with_retries(
        self,
        target_url: str,
        target: BanTarget,
    ) -> BanOutcome:
        """Send one ban, retrying transport errors and 5xx responses.

        Args:
            target_url: The resolved cache server base URL.
            target: The entry to ban.

        Returns:
            The outcome of the last attempt.
        """
        request = BanRequest.for_target(
            target_url, target, method=self._config.ban_method
        )
        max_attempts = self._config.max_retries + 1

        outcome = BanOutcome(target=target)
        for attempt in range(1, max_attempts + 1):
            outcome = await self._send_once(request, attempt)
            if outcome.ok or not _is_retryable(outcome):
                break
            if attempt < max_attempts:
                delay = self._config.retry_backoff * (2 ** (attempt - 1))
                logger.debug(
                    "Retrying %s ban %r in %.2fs (%s)",
                    target.method.value,
                    target.key,
                    delay,
                    outcome.reason,
                )
                await asyncio.sleep(delay)

        if not outcome.ok:
            logger.warning(
                "Failed to ban %s %r after %d attempt(s): %s",
                target.method.value,
                target.key,
                outcome.attempts,
                outcome.reason,
            )
        return outcome

    async def _send_once(self, request: BanRequest, attempt: int) -> BanOutcome:
        try:
            status_code = await self._transport.send(
                request, timeout=self._config.timeout
            )
        except BanTransportError as e:
            return BanOutcome(
                target=request.target,
                error=str(e) or type(e).__name__,
                attempts=attempt,
            )
        except Exception as e:
            return BanOutcome(
                target=request.target,
                error=f"{type(e).__name__}: {e}",
                attempts=attempt,
            )
        return BanOutcome(
            target=request.target,
            status_code=status_code,
            attempts=attempt,
        )


def _is_retryable(outcome: BanOutcome) -> bool:
    """Transport errors and server errors may succeed on a later try."""
    if outcome.status_code is None:
        return True
    return outcome.status_code >= 500
