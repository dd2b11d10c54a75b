"""Flush result entities."""

from dataclasses import dataclass, field

from cacheban.core.entities.ban_target import BanTarget


@dataclass(frozen=True)
class BanOutcome:
    """The final outcome of one ban entry after all attempts.

    Attributes:
        target: The entry the request was issued for.
        status_code: Last HTTP status received, None on transport error.
        error: Transport error message, None when a response arrived.
        attempts: Number of requests issued for this entry.
    """

    target: BanTarget
    status_code: int | None = None
    error: str | None = None
    attempts: int = 1

    @property
    def ok(self) -> bool:
        """Check if the cache server accepted the ban (2xx)."""
        return self.status_code is not None and 200 <= self.status_code < 300

    @property
    def reason(self) -> str | None:
        """Describe why the entry failed, or None if it succeeded."""
        if self.ok:
            return None
        if self.error is not None:
            return self.error
        return f"HTTP {self.status_code}"


@dataclass
class FlushResult:
    """Aggregate outcome of a flush.

    Outcomes are listed in dispatch order: exact paths first, then
    regex patterns, each in the order they were registered.
    """

    target_url: str | None = None
    outcomes: list[BanOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    @property
    def failures(self) -> list[tuple[BanTarget, str]]:
        """List ``(target, reason)`` pairs for every failed entry."""
        return [
            (outcome.target, outcome.reason or "")
            for outcome in self.outcomes
            if not outcome.ok
        ]

    @property
    def ok(self) -> bool:
        """Check if every attempted entry succeeded."""
        return self.failed == 0

    @classmethod
    def empty(cls) -> "FlushResult":
        """Create the result of a flush with nothing to send."""
        return cls(target_url=None, outcomes=[])
