"""Purge dispatcher interface."""

from typing import Protocol

from cacheban.core.entities.flush_result import FlushResult
from cacheban.core.entities.pending_ban_set import PendingBanSet


class IPurgeDispatcher(Protocol):
    """Contract for sending a batch of bans to the cache server."""

    async def dispatch(
        self,
        target_url: str,
        bans: PendingBanSet,
    ) -> FlushResult:
        """Issue one ban request per entry in ``bans``.

        Per-entry failures are reported in the result, not raised.

        Args:
            target_url: The resolved cache server base URL.
            bans: The drained set of pending bans.

        Returns:
            The aggregate FlushResult.
        """
        ...
