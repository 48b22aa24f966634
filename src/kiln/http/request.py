"""Immutable HTTP request.

Frozen metadata built once from the ASGI scope. The compiler middleware
only ever looks at ``method`` and ``path``; the rest is carried for
downstream stages and handlers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from kiln._internal.asgi import Receive


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the decoded URL path without the query string; the raw
    query string is kept separately in ``query_string``.
    """

    method: str
    path: str
    query_string: str = ""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def url(self) -> str:
        """Full request URL (path + query string)."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI HTTP scope.

        Header names are lower-cased; repeated headers keep the last value.
        The body is never read, so *receive* is accepted only for signature
        compatibility with ASGI callers.
        """
        headers = {
            name.decode("latin-1").lower(): value.decode("latin-1")
            for name, value in scope.get("headers", ())
        }
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=MappingProxyType(headers),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
