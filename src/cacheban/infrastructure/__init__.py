"""Infrastructure layer implementations for cacheban."""

from cacheban.infrastructure.transports import (
    HttpxBanTransport,
    RecordingBanTransport,
)

__all__ = [
    "HttpxBanTransport",
    "RecordingBanTransport",
]
