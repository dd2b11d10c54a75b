"""Cache server configuration entity."""

from dataclasses import dataclass

from cacheban.core.exceptions import InvalidConfigError


@dataclass(frozen=True)
class CacheServerConfig:
    """Configuration for reaching the caching proxy.

    Supplied once when the engine is built. The site URL itself is not
    part of the configuration: the host provides it lazily at flush time.

    Port override:
        When the proxy listens on a different port than the public site
        (port forwarding, a local Varnish on 6081), ``port_override``
        replaces the site URL's port in the ban target.

    Dispatch:
        ``timeout`` applies to each ban request. Failed requests are
        retried ``max_retries`` times with ``retry_backoff`` seconds of
        delay, doubled after every attempt. At most ``max_concurrency``
        requests are in flight at once.
    """

    port_override: int | None = None

    # Dispatch settings
    timeout: float | None = 10.0
    max_retries: int = 0
    retry_backoff: float = 0.5
    max_concurrency: int = 10

    # Collapse repeated bans when flushing
    dedupe_on_flush: bool = True

    ban_method: str = "BAN"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.port_override is not None and not (
            isinstance(self.port_override, int) and 0 < self.port_override < 65536
        ):
            raise InvalidConfigError(
                f"port_override must be between 1 and 65535, got {self.port_override!r}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidConfigError(f"timeout must be positive, got {self.timeout!r}")
        if self.max_retries < 0:
            raise InvalidConfigError(
                f"max_retries cannot be negative, got {self.max_retries!r}"
            )
        if self.retry_backoff < 0:
            raise InvalidConfigError(
                f"retry_backoff cannot be negative, got {self.retry_backoff!r}"
            )
        if self.max_concurrency < 1:
            raise InvalidConfigError(
                f"max_concurrency must be at least 1, got {self.max_concurrency!r}"
            )
        if not self.ban_method:
            raise InvalidConfigError("ban_method cannot be empty")
