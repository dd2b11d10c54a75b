"""ASGI middleware that flushes pending bans after each request."""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

from cacheban.core.exceptions import CacheBanError
from cacheban.core.services.invalidation_engine import InvalidationEngine
from cacheban.decorators import get_engine

logger = logging.getLogger(__name__)

Scope = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class InvalidationMiddleware:
    """Treats every HTTP request as one unit of work.

    Handlers queue bans on the engine while serving the request; once
    the application has finished, the middleware flushes them. The
    engine is exposed to handlers as ``scope["state"]["invalidation_engine"]``
    (``request.state.invalidation_engine`` in Starlette and FastAPI).

    Configuration errors raised by the flush are logged, since the
    response has already been sent, and the pending bans are discarded.

    Example:
        app = FastAPI()
        app.add_middleware(InvalidationMiddleware, engine=engine)
    """

    def __init__(
        self,
        app: ASGIApp,
        engine: InvalidationEngine | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The wrapped ASGI application.
            engine: Engine to flush. Falls back to the engine registered
                with :func:`cacheban.decorators.configure`.
        """
        self.app = app
        self._engine = engine

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        engine = self._engine or get_engine()
        if scope["type"] != "http" or engine is None:
            await self.app(scope, receive, send)
            return

        scope.setdefault("state", {})["invalidation_engine"] = engine
        try:
            await self.app(scope, receive, send)
        finally:
            await self._flush(engine)

    async def _flush(self, engine: InvalidationEngine) -> None:
        try:
            result = await engine.flush()
        except CacheBanError:
            logger.warning("Flushing pending bans failed", exc_info=True)
            engine.discard_pending()
            return

        if not result.ok:
            logger.warning(
                "%d of %d ban(s) were not accepted by %s",
                result.failed,
                result.attempted,
                result.target_url,
            )
