"""httpx-based ban transport."""

import httpx

from cacheban.core.entities.ban_request import BanRequest
from cacheban.core.exceptions import BanTransportError

_DEFAULT_TIMEOUT = 10.0


class HttpxBanTransport:
    """Sends ban requests with an ``httpx.AsyncClient``.

    Connections are pooled across requests. A client passed in by the
    caller is left open on :meth:`close`; one created here is closed.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = _DEFAULT_TIMEOUT,
        verify: bool | str = True,
        max_connections: int = 20,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Existing client to reuse.
            timeout: Default timeout in seconds when the caller passes none.
            verify: TLS verification flag or CA bundle path.
            max_connections: Connection pool size for a created client.
        """
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(max_connections=max_connections),
            verify=verify,
            follow_redirects=False,
        )

    async def send(
        self,
        request: BanRequest,
        timeout: float | None = None,
    ) -> int:
        """Send one ban request and return the response status code.

        Args:
            request: The request to deliver.
            timeout: Timeout in seconds for this request.

        Returns:
            The HTTP status code.

        Raises:
            BanTransportError: On connection errors, timeouts, an invalid
                target URL or headers that cannot be encoded.
        """
        effective_timeout = timeout if timeout is not None else self._timeout
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                timeout=effective_timeout,
            )
        except httpx.TimeoutException as e:
            raise BanTransportError(
                f"Timed out after {effective_timeout}s: {e}", request=request
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise BanTransportError(
                f"{type(e).__name__}: {e}", request=request
            ) from e
        except (UnicodeEncodeError, ValueError, TypeError) as e:
            # Raised while building the request, e.g. non-ASCII header values
            raise BanTransportError(
                f"Could not encode request: {type(e).__name__}: {e}",
                request=request,
            ) from e
        return response.status_code

    async def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxBanTransport":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
