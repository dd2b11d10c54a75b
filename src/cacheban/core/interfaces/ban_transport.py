"""Ban transport interface."""

from typing import Protocol

from cacheban.core.entities.ban_request import BanRequest


class IBanTransport(Protocol):
    """Contract for delivering ban requests to the cache server.

    Transports only move requests over the wire. Retries, concurrency
    and result bookkeeping belong to the dispatcher.
    """

    async def send(
        self,
        request: BanRequest,
        timeout: float | None = None,
    ) -> int:
        """Send one ban request.

        Args:
            request: The request to deliver.
            timeout: Optional timeout in seconds for this request.

        Returns:
            The HTTP status code returned by the cache server.

        Raises:
            BanTransportError: If no response was received.
        """
        ...

    async def close(self) -> None:
        """Release any connections held by the transport."""
        ...
