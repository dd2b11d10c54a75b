"""cacheban - Cache invalidation dispatcher for reverse caching proxies.

A Python library that collects stale URLs and URL patterns during a
unit of work and sends them to a Varnish-style proxy as ``BAN``
requests, with URL normalization, flush-time deduplication, bounded
concurrent dispatch and per-entry failure reporting.

Example:
    from cacheban import CacheServerConfig, InvalidationEngine

    engine = InvalidationEngine(
        site_url_provider=lambda: "https://example.com/",
        config=CacheServerConfig(port_override=6081, max_retries=2),
    )

    # While handling a content change
    engine.invalidate_url("https://example.com/blog/hello-world/")
    engine.invalidate_url("/feed/")
    engine.invalidate_regex("^/category/news/")

    # At the end of the unit of work
    result = await engine.flush()
    print(result.attempted, result.succeeded, result.failed)

The proxy's VCL is expected to read the ``X-Ban-Method`` header and
either ``X-Ban-Url`` or ``X-Ban-Regex``:

    if (req.method == "BAN") {
        if (req.http.X-Ban-Method == "regex") {
            ban("req.url ~ " + req.http.X-Ban-Regex);
        } else {
            ban("req.url == " + req.http.X-Ban-Url);
        }
        return (synth(200, "Banned"));
    }

Per-request flushing in ASGI apps:
    from cacheban.adapters.asgi import InvalidationMiddleware

    app.add_middleware(InvalidationMiddleware, engine=engine)
"""

from cacheban.core.entities import (
    BanMethod,
    BanOutcome,
    BanRequest,
    BanTarget,
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
from cacheban.decorators import configure, get_engine, invalidates
from cacheban.infrastructure import HttpxBanTransport, RecordingBanTransport

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "BanMethod",
    "BanTarget",
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
    # Core interfaces
    "IBanTransport",
    "IPurgeDispatcher",
    # Core services
    "InvalidationEngine",
    "BanListAccumulator",
    "PurgeDispatcher",
    "normalize_url",
    "resolve_target",
    # Infrastructure implementations
    "HttpxBanTransport",
    "RecordingBanTransport",
    # Decorators
    "configure",
    "get_engine",
    "invalidates",
]
