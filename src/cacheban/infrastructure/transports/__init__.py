"""Ban transport implementations."""

from cacheban.infrastructure.transports.httpx_transport import HttpxBanTransport
from cacheban.infrastructure.transports.memory import RecordingBanTransport

__all__ = ["HttpxBanTransport", "RecordingBanTransport"]
