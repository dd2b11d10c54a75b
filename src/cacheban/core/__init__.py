"""Core domain layer for cacheban."""

from cacheban.core.entities import (
    BanOutcome,
    BanRequest,
    CacheServerConfig,
    ExactPath,
    FlushResult,
    PendingBanSet,
    RegexPattern,
)
from cacheban.core.exceptions import (
    BanTransportError,
    CacheBanError,
    FlushInProgressError,
    InvalidConfigError,
    InvalidUrlError,
)
from cacheban.core.interfaces import IBanTransport, IPurgeDispatcher
from cacheban.core.services import (
    BanListAccumulator,
    InvalidationEngine,
    PurgeDispatcher,
    normalize_url,
    resolve_target,
)

__all__ = [
    # Entities
    "ExactPath",
    "RegexPattern",
    "PendingBanSet",
    "CacheServerConfig",
    "BanRequest",
    "BanOutcome",
    "FlushResult",
    # Exceptions
    "CacheBanError",
    "InvalidUrlError",
    "InvalidConfigError",
    "FlushInProgressError",
    "BanTransportError",
    # Interfaces
    "IBanTransport",
    "IPurgeDispatcher",
    # Services
    "InvalidationEngine",
    "BanListAccumulator",
    "PurgeDispatcher",
    "normalize_url",
    "resolve_target",
]
