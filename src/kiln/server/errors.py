"""Error responses for the request pipeline.

Maps HTTPError exceptions and unexpected failures (including compile and
asset I/O errors) to Response objects.
"""

import logging

from kiln.errors import AssetError, HTTPError
from kiln.http.request import Request
from kiln.http.response import Response

logger = logging.getLogger("kiln.server")


def handle_http_error(exc: HTTPError, request: Request, debug: bool) -> Response:
    """Map an HTTPError to a Response with its status and headers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    response = Response(body=detail).with_status(exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors.

    Asset failures are expected in development (a typo in a stylesheet),
    so they are logged without a traceback; anything else gets one.
    """
    if isinstance(exc, AssetError):
        logger.error("500 %s %s — %s", request.method, request.path, exc)
    else:
        logger.exception("500 %s %s", request.method, request.path)

    body = f"Internal Server Error\n\n{exc}" if debug else "Internal Server Error"
    return Response(body=body, status=500)
