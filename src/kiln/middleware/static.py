"""Static file serving middleware.

Serves files from a directory for matching URL prefixes, with index file
resolution for directories. This is the stage that actually returns the
bytes of an artifact :class:`~kiln.middleware.compiler.AssetCompiler`
has just written, so it must come after the compiler in the chain.

Falls through to the next handler for non-matching or missing paths.
"""

import mimetypes
from pathlib import Path

import anyio

from kiln.http.request import Request
from kiln.http.response import Response
from kiln.middleware.protocol import AnyResponse, Next


class StaticFiles:
    """Middleware that serves static files from a directory.

    Security: resolves symlinks and verifies the final path
    is within the configured directory to prevent path traversal.

    Usage::

        app.add_middleware(StaticFiles(directory="./public", prefix="/"))
    """

    __slots__ = ("_cache_control", "_directory", "_index", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/static",
        *,
        index: str = "index.html",
        cache_control: str = "no-cache",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

        # Normalize prefix: ensure leading slash, strip trailing.
        # Root prefix "/" normalizes to "".
        stripped = "/" + prefix.strip("/")
        self._prefix = stripped if stripped != "/" else ""

    async def __call__(self, request: Request, next: Next) -> AnyResponse:
        """Serve a static file or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path
        if self._prefix:
            if not path.startswith(self._prefix + "/") and path != self._prefix:
                return await next(request)
            relative = path[len(self._prefix) :].lstrip("/")
        else:
            relative = path.lstrip("/")

        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            return Response(body="Forbidden", status=403)

        candidate = anyio.Path(file_path)
        if await candidate.is_dir():
            candidate = candidate / self._index
        if not await candidate.is_file():
            return await next(request)

        return await self._serve_file(candidate)

    async def _serve_file(self, file_path: anyio.Path) -> Response:
        """Read a file and build a response."""
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"

        body = await file_path.read_bytes()
        return Response(body=body, content_type=content_type).with_header(
            "Cache-Control", self._cache_control
        )
