"""In-memory ban transport."""

from collections.abc import Callable

from cacheban.core.entities.ban_request import BanRequest
from cacheban.core.exceptions import BanTransportError

Responder = Callable[[BanRequest], int]


class RecordingBanTransport:
    """Transport that records requests instead of sending them.

    Useful for dry runs and for exercising hosts without a cache
    server. Every request is answered with ``status_code`` unless a
    ``responder`` is given; a responder may also raise
    BanTransportError to simulate a network failure.
    """

    def __init__(
        self,
        status_code: int = 200,
        responder: Responder | None = None,
    ) -> None:
        """Initialize the recording transport.

        Args:
            status_code: Status returned when no responder is set.
            responder: Optional callable computing the status per request.
        """
        self._status_code = status_code
        self._responder = responder
        self._requests: list[BanRequest] = []
        self._closed = False

    async def send(
        self,
        request: BanRequest,
        timeout: float | None = None,
    ) -> int:
        """Record the request and return the configured status."""
        if self._closed:
            raise BanTransportError("Transport is closed", request=request)
        self._requests.append(request)
        if self._responder is not None:
            return self._responder(request)
        return self._status_code

    async def close(self) -> None:
        """Mark the transport as closed."""
        self._closed = True

    @property
    def requests(self) -> list[BanRequest]:
        """Return the requests received so far, in arrival order."""
        return list(self._requests)

    @property
    def closed(self) -> bool:
        return self._closed

    def clear(self) -> None:
        """Forget recorded requests."""
        self._requests.clear()

    def __len__(self) -> int:
        """Return the number of recorded requests."""
        return len(self._requests)
