"""In-memory ban list accumulator."""

import threading

from cacheban.core.entities.ban_target import ExactPath, RegexPattern
from cacheban.core.entities.pending_ban_set import PendingBanSet


class BanListAccumulator:
    """Buffers bans until the next flush.

    All methods are thread-safe. Appends that race with :meth:`drain`
    land either in the drained set or in the next one, never both.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending = PendingBanSet()

    def add_exact_path(self, path: ExactPath) -> None:
        """Append an exact path. Duplicates are kept."""
        with self._lock:
            self._pending.exact_paths.append(path)

    def add_regex_pattern(self, pattern: str | RegexPattern) -> None:
        """Append a regex pattern verbatim.

        The pattern is not compiled or checked; the cache server is
        the one that evaluates it.
        """
        if not isinstance(pattern, RegexPattern):
            pattern = RegexPattern(pattern)
        with self._lock:
            self._pending.regex_patterns.append(pattern)

    def drain(self) -> PendingBanSet:
        """Take everything buffered so far and leave the buffer empty.

        Returns:
            The pending bans, in insertion order.
        """
        with self._lock:
            drained = self._pending
            self._pending = PendingBanSet()
        return drained

    def requeue(self, bans: PendingBanSet) -> None:
        """Put previously drained bans back ahead of newer entries."""
        with self._lock:
            self._pending = PendingBanSet(
                exact_paths=[*bans.exact_paths, *self._pending.exact_paths],
                regex_patterns=[*bans.regex_patterns, *self._pending.regex_patterns],
            )

    def snapshot(self) -> PendingBanSet:
        """Copy the buffered bans without clearing them."""
        with self._lock:
            return PendingBanSet(
                exact_paths=list(self._pending.exact_paths),
                regex_patterns=list(self._pending.regex_patterns),
            )

    def is_empty(self) -> bool:
        with self._lock:
            return self._pending.is_empty

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)
