"""Kiln exception hierarchy.

Shared across the compiler, middleware, and ASGI handler so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class KilnError(Exception):
    """Base for all kiln-specific errors."""


class ConfigurationError(KilnError):
    """Raised when compiler or app configuration is invalid.

    Raised at construction time, before any request is handled.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(KilnError):
    """An error that maps directly to an HTTP status code.

    Raised by routing or middleware. The ASGI handler catches these and
    turns them into a response with the matching status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — route exists but not for this HTTP method."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class AssetError(KilnError):
    """Base for failures while producing a compiled artifact.

    The ASGI handler answers these with a 500; the message is kept for
    logging and for the debug response body.
    """


class AssetIOError(AssetError):
    """A stat, read, or write on a source or artifact failed."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class CompileError(AssetError):
    """A compiler backend rejected a source file.

    ``diagnostic`` holds the backend's own message (syntax error, missing
    executable, ...).
    """

    def __init__(self, plugin: str, diagnostic: str) -> None:
        self.plugin = plugin
        self.diagnostic = diagnostic
        super().__init__(f"{plugin}: {diagnostic}")
