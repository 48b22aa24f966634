"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    AssetCompiler -- Recompile stale CSS/JS artifacts before they are served
    StaticFiles -- Serve files from a directory
"""

from kiln.middleware.compiler import AssetCompiler
from kiln.middleware.protocol import AnyResponse, Middleware, Next
from kiln.middleware.static import StaticFiles

__all__ = [
    "AnyResponse",
    "AssetCompiler",
    "Middleware",
    "Next",
    "StaticFiles",
]
