"""Tests for engine registration and the @invalidates decorator."""

import pytest

from cacheban import (
    ExactPath,
    InvalidationEngine,
    RecordingBanTransport,
    RegexPattern,
)
from cacheban.decorators import configure, get_engine, invalidates


@pytest.fixture
def engine() -> InvalidationEngine:
    """Create and register an engine for testing."""
    engine = InvalidationEngine(
        site_url_provider=lambda: "http://example.com/",
        transport=RecordingBanTransport(),
    )
    configure(engine)
    return engine


class TestConfigure:
    """Tests for configure and get_engine."""

    def test_register_and_unregister(self, engine: InvalidationEngine) -> None:
        """Test registering the process-wide engine."""
        assert get_engine() is engine

        configure(None)

        assert get_engine() is None


class TestInvalidatesDecorator:
    """Tests for @invalidates."""

    @pytest.mark.asyncio
    async def test_async_function(self, engine: InvalidationEngine) -> None:
        """Test queueing after an async function returns."""

        @invalidates(urls=["/posts/{slug}/", "http://example.com/"])
        async def publish(slug: str) -> str:
            return slug.upper()

        result = await publish(slug="hello")

        assert result == "HELLO"
        assert engine.pending.exact_paths == [ExactPath("/posts/hello/"), ExactPath("/")]

    def test_sync_function_positional_args(self, engine: InvalidationEngine) -> None:
        """Test interpolation from positional arguments."""

        @invalidates(urls=["/authors/{author}/"], regexes=["^/tag/{tag}/"])
        def save(author: str, tag: str = "news") -> None:
            return None

        save("jane")

        assert engine.pending.exact_paths == [ExactPath("/authors/jane/")]
        assert engine.pending.regex_patterns == [RegexPattern("^/tag/news/")]

    def test_regex_quantifiers_survive(self, engine: InvalidationEngine) -> None:
        """Test that unknown placeholders are left alone."""

        @invalidates(regexes=["^/archive/[0-9]{4}/{slug}"])
        def archive(slug: str) -> None:
            return None

        archive(slug="x")

        assert engine.pending.regex_patterns == [RegexPattern("^/archive/[0-9]{4}/x")]

    @pytest.mark.asyncio
    async def test_nothing_queued_on_error(self, engine: InvalidationEngine) -> None:
        """Test that a failing function queues nothing."""

        @invalidates(urls=["/a/"])
        async def fail() -> None:
            raise ValueError("nope")

        with pytest.raises(ValueError):
            await fail()

        assert engine.is_empty()

    def test_without_engine(self) -> None:
        """Test that the decorator is a no-op when not configured."""
        configure(None)

        @invalidates(urls=["/a/"])
        def work() -> int:
            return 42

        assert work() == 42

    def test_preserves_metadata(self) -> None:
        """Test that functools.wraps keeps the function name."""

        @invalidates(urls=["/a/"])
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
