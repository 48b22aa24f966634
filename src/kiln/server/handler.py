"""ASGI handler — translates ASGI scope/messages to kiln types.

The only component that touches raw ASGI directly. Converts the scope to
a Request, dispatches through middleware and routing, and sends the
Response back through ASGI send().
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import TypeAlias

from kiln._internal.asgi import Receive, Scope, Send
from kiln.errors import HTTPError, MethodNotAllowed, NotFound
from kiln.http.request import Request
from kiln.middleware.protocol import AnyResponse, Middleware, Next
from kiln.server.errors import handle_http_error, handle_internal_error
from kiln.server.sender import send_response

Handler: TypeAlias = Callable[[Request], Awaitable[AnyResponse]]


def build_chain(middleware: tuple[Middleware, ...], endpoint: Next) -> Next:
    """Wrap *endpoint* in *middleware*, first entry outermost."""
    handler = endpoint
    for mw in reversed(middleware):

        async def link(req: Request, _mw: Middleware = mw, _next: Next = handler) -> AnyResponse:
            return await _mw(req, _next)

        handler = link
    return handler


def route_dispatcher(routes: Mapping[str, Mapping[str, Handler]]) -> Next:
    """Innermost handler: exact-path route table lookup."""

    async def dispatch(request: Request) -> AnyResponse:
        by_method = routes.get(request.path)
        if by_method is None:
            raise NotFound()
        handler = by_method.get(request.method)
        if handler is None:
            raise MethodNotAllowed(frozenset(by_method))
        return await handler(request)

    return dispatch


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    chain: Next,
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    try:
        response = await chain(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send, head=request.method == "HEAD")
