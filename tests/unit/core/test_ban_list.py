"""Tests for the ban list accumulator."""

import threading

from cacheban.core.entities import ExactPath, PendingBanSet, RegexPattern
from cacheban.core.services.ban_list import BanListAccumulator


class TestBanListAccumulator:
    """Tests for BanListAccumulator."""

    def test_drain_keeps_order_and_duplicates(self) -> None:
        """Test that accumulation keeps insertion order and duplicates."""
        accumulator = BanListAccumulator()
        a, b = ExactPath("/a"), ExactPath("/b")

        accumulator.add_exact_path(a)
        accumulator.add_exact_path(b)
        accumulator.add_exact_path(a)

        drained = accumulator.drain()

        assert drained.exact_paths == [a, b, a]

    def test_regex_patterns_verbatim(self) -> None:
        """Test that regex patterns are stored without validation."""
        accumulator = BanListAccumulator()

        accumulator.add_regex_pattern("^/unbalanced(")
        accumulator.add_regex_pattern(RegexPattern(".*\\.css$"))

        assert accumulator.drain().regex_patterns == [
            RegexPattern("^/unbalanced("),
            RegexPattern(".*\\.css$"),
        ]

    def test_drain_empties_buffer(self) -> None:
        """Test that drain leaves the accumulator empty."""
        accumulator = BanListAccumulator()
        accumulator.add_exact_path(ExactPath("/a"))
        accumulator.add_regex_pattern("^/b")

        assert not accumulator.is_empty()
        assert len(accumulator) == 2

        accumulator.drain()

        assert accumulator.is_empty()
        assert len(accumulator) == 0
        assert accumulator.drain().is_empty

    def test_snapshot_does_not_clear(self) -> None:
        """Test that snapshot copies without draining."""
        accumulator = BanListAccumulator()
        accumulator.add_exact_path(ExactPath("/a"))

        snapshot = accumulator.snapshot()
        snapshot.exact_paths.append(ExactPath("/mutated"))

        assert len(accumulator) == 1
        assert accumulator.drain().exact_paths == [ExactPath("/a")]

    def test_requeue_goes_before_newer_entries(self) -> None:
        """Test that requeued bans keep priority over later ones."""
        accumulator = BanListAccumulator()
        accumulator.add_exact_path(ExactPath("/new"))
        accumulator.add_regex_pattern("^/new")

        accumulator.requeue(
            PendingBanSet(
                exact_paths=[ExactPath("/old")],
                regex_patterns=[RegexPattern("^/old")],
            )
        )

        drained = accumulator.drain()
        assert drained.exact_paths == [ExactPath("/old"), ExactPath("/new")]
        assert drained.regex_patterns == [RegexPattern("^/old"), RegexPattern("^/new")]

    def test_concurrent_appends_are_never_lost_or_doubled(self) -> None:
        """Test drain atomicity against appends from several threads."""
        accumulator = BanListAccumulator()
        threads_count = 8
        per_thread = 500
        drained: list[ExactPath] = []
        done = threading.Event()

        def producer(n: int) -> None:
            for i in range(per_thread):
                accumulator.add_exact_path(ExactPath(f"/t{n}/{i}"))

        def consumer() -> None:
            while not done.is_set():
                drained.extend(accumulator.drain().exact_paths)

        consumer_thread = threading.Thread(target=consumer)
        consumer_thread.start()
        producers = [
            threading.Thread(target=producer, args=(n,)) for n in range(threads_count)
        ]
        for thread in producers:
            thread.start()
        for thread in producers:
            thread.join()
        done.set()
        consumer_thread.join()
        drained.extend(accumulator.drain().exact_paths)

        assert len(drained) == threads_count * per_thread
        assert len(set(drained)) == threads_count * per_thread
