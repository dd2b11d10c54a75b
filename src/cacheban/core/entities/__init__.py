"""Domain entities for cacheban."""

from cacheban.core.entities.ban_request import BanRequest
from cacheban.core.entities.ban_target import (
    BAN_METHOD_HEADER,
    BAN_REGEX_HEADER,
    BAN_URL_HEADER,
    BanMethod,
    BanTarget,
    ExactPath,
    RegexPattern,
)
from cacheban.core.entities.cache_server_config import CacheServerConfig
from cacheban.core.entities.flush_result import BanOutcome, FlushResult
from cacheban.core.entities.pending_ban_set import PendingBanSet

__all__ = [
    "BanMethod",
    "BanTarget",
    "ExactPath",
    "RegexPattern",
    "BAN_METHOD_HEADER",
    "BAN_URL_HEADER",
    "BAN_REGEX_HEADER",
    "PendingBanSet",
    "CacheServerConfig",
    "BanRequest",
    "BanOutcome",
    "FlushResult",
]
