"""Request and response types for the middleware pipeline."""

from kiln.http.request import Request
from kiln.http.response import Response

__all__ = ["Request", "Response"]
