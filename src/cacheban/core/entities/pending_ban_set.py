"""Pending ban set entity."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from cacheban.core.entities.ban_target import BanTarget, ExactPath, RegexPattern
from cacheban.utils.ordering import unique_in_order


@dataclass
class PendingBanSet:
    """Bans collected during a unit of work and not yet sent.

    Both sequences keep insertion order. Duplicates are allowed here;
    use :meth:`deduplicated` to collapse them before dispatch.
    """

    exact_paths: list[ExactPath] = field(default_factory=list)
    regex_patterns: list[RegexPattern] = field(default_factory=list)

    def targets(self) -> Iterator[BanTarget]:
        """Iterate exact paths first, then regex patterns."""
        yield from self.exact_paths
        yield from self.regex_patterns

    @property
    def is_empty(self) -> bool:
        return not self.exact_paths and not self.regex_patterns

    def deduplicated(self) -> "PendingBanSet":
        """Return a copy without repeated entries.

        The first occurrence of each entry keeps its position.
        """
        return PendingBanSet(
            exact_paths=unique_in_order(self.exact_paths),
            regex_patterns=unique_in_order(self.regex_patterns),
        )

    def __len__(self) -> int:
        return len(self.exact_paths) + len(self.regex_patterns)
