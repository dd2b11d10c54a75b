"""Domain services for cacheban."""

from cacheban.core.services.ban_list import BanListAccumulator
from cacheban.core.services.invalidation_engine import InvalidationEngine
from cacheban.core.services.purge_dispatcher import PurgeDispatcher
from cacheban.core.services.target_resolver import resolve_target
from cacheban.core.services.url_normalizer import normalize_url

__all__ = [
    "InvalidationEngine",
    "BanListAccumulator",
    "PurgeDispatcher",
    "normalize_url",
    "resolve_target",
]
