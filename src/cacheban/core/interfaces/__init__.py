"""Core interfaces (Protocol classes) for cacheban."""

from cacheban.core.interfaces.ban_transport import IBanTransport
from cacheban.core.interfaces.purge_dispatcher import IPurgeDispatcher

__all__ = [
    "IBanTransport",
    "IPurgeDispatcher",
]
