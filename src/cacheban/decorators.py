"""Process-wide engine registration and invalidation decorators.

Hosts that want a single engine per process register it once with
:func:`configure`; the ``@invalidates`` decorator then queues bans on
that engine whenever a decorated function completes.
"""

import functools
import inspect
import re
from collections.abc import Callable
from typing import Any, TypeVar

from cacheban.core.services.invalidation_engine import InvalidationEngine

F = TypeVar("F", bound=Callable[..., Any])

# Module-level engine reference
_engine: InvalidationEngine | None = None


def configure(engine: InvalidationEngine | None) -> None:
    """Register the process-wide invalidation engine.

    Must be called before ``@invalidates`` has any effect. Pass None
    to unregister.

    Args:
        engine: The engine instance to use.

    Example:
        engine = InvalidationEngine(site_url_provider=lambda: SITE_URL)
        configure(engine)
    """
    global _engine
    _engine = engine


def get_engine() -> InvalidationEngine | None:
    """Get the registered engine.

    Returns:
        The registered engine, or None if not configured.
    """
    return _engine


def invalidates(
    urls: list[str] | None = None,
    regexes: list[str] | None = None,
) -> Callable[[F], F]:
    """Decorator for queueing bans after a content change.

    Runs the decorated function, then registers the given URLs and
    patterns on the configured engine. Nothing is queued if the
    function raises. Works on both sync and async functions.

    Args:
        urls: URLs to ban. Supports {arg_name} interpolation.
        regexes: Patterns to ban. Supports {arg_name} interpolation.

    Returns:
        Decorated function.

    Example:
        @invalidates(urls=["/posts/{slug}/", "/"], regexes=["^/tag/"])
        async def publish_post(slug: str) -> Post:
            return await db.publish(slug)
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                result = await func(*args, **kwargs)
                _queue(func, urls, regexes, args, kwargs)
                return result

            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            _queue(func, urls, regexes, args, kwargs)
            return result

        return wrapper  # type: ignore

    return decorator


def _queue(
    func: Callable[..., Any],
    urls: list[str] | None,
    regexes: list[str] | None,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> None:
    """Register interpolated bans on the configured engine."""
    if _engine is None:
        return

    arguments = _bind_arguments(func, args, kwargs)
    if urls:
        _engine.invalidate_urls(
            [_interpolate_string(url, arguments) for url in urls]
        )
    for regex in regexes or []:
        _engine.invalidate_regex(_interpolate_string(regex, arguments))


def _bind_arguments(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Map parameter names to the values of this call.

    Args:
        func: The decorated function.
        args: Positional arguments.
        kwargs: Keyword arguments.

    Returns:
        Arguments by name, defaults applied.
    """
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
    except (TypeError, ValueError):
        return dict(kwargs)
    bound.apply_defaults()
    return dict(bound.arguments)


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Args:
        template: String with {arg_name} placeholders.
        arguments: Values by argument name.

    Returns:
        Interpolated string. Unknown placeholders are kept as written,
        so regex quantifiers such as ``{2}`` survive.
    """
    pattern = r"\{(\w+)\}"

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)

    return re.sub(pattern, replacer, template)
