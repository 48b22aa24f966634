"""The kiln App — a minimal ASGI host for the asset pipeline.

Registration (routes, middleware) happens before the first request; the
app then freezes into an immutable middleware chain. Typical wiring puts
:class:`~kiln.middleware.AssetCompiler` in front of
:class:`~kiln.middleware.StaticFiles`::

    app = App()
    app.add_middleware(AssetCompiler(src="assets", dest="public", enable=["sass"]))
    app.add_middleware(StaticFiles(directory="public", prefix="/"))
"""

import inspect
import threading
from collections.abc import Callable
from typing import Any

from kiln._internal.asgi import Receive, Scope, Send
from kiln.config import AppConfig
from kiln.http.request import Request
from kiln.http.response import Response
from kiln.middleware.protocol import AnyResponse, Middleware, Next
from kiln.server.handler import Handler, build_chain, handle_request, route_dispatcher


class App:
    """ASGI application: an ordered middleware chain around a route table.

    The freeze transition uses a Lock + double-check so exactly one
    thread builds the chain, even when several workers hit the first
    request at once.
    """

    __slots__ = (
        "_chain",
        "_freeze_lock",
        "_frozen",
        "_middleware_list",
        "_routes",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._middleware_list: list[Middleware] = []
        self._routes: dict[str, dict[str, Handler]] = {}
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._chain: Next | None = None

    # -- Registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a handler for an exact *path* via decorator.

        Handlers take the request (or nothing), may be sync or async,
        and return a ``Response``, a ``str`` body, or ``(body, status)``.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            by_method = self._routes.setdefault(path, {})
            for method in methods or ["GET"]:
                by_method[method.upper()] = _adapt_handler(func)
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Append middleware. The first one added runs outermost."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        assert self._chain is not None
        await handle_request(scope, receive, send, chain=self._chain, debug=self.config.debug)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self._ensure_frozen()
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._chain = build_chain(tuple(self._middleware_list), route_dispatcher(self._routes))
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and middleware before the first request."
            )
            raise RuntimeError(msg)


def _adapt_handler(func: Callable[..., Any]) -> Handler:
    """Normalize a user handler into ``async (Request) -> Response``."""
    takes_request = len(inspect.signature(func).parameters) > 0

    async def handler(request: Request) -> AnyResponse:
        result = func(request) if takes_request else func()
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, Response):
            return result
        if isinstance(result, tuple):
            body, status = result
            return Response(body=body, status=status)
        return Response(body=result)

    return handler
