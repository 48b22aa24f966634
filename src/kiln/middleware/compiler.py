"""Asset compiler middleware.

Sits in front of the file-serving stage. For a GET whose path names a
compiled artifact (``/css/site.css``), it finds the source
(``{src}/css/site.sass``), compares modification times against the
artifact (``{dest}/css/site.css``), and rebuilds the artifact when it is
missing or stale. The request then continues down the chain, where
:class:`~kiln.middleware.static.StaticFiles` (or any other server) reads
the fresh file.

Two requests for the same stale artifact may both compile it; the last
write wins. That is acceptable for a development tool and there is no
locking to prevent it.
"""

import logging
import posixpath
from pathlib import Path
from typing import Any

from kiln.compiler.persist import compile_asset
from kiln.compiler.plugins import CompilerPlugin, PluginRegistry, default_registry
from kiln.compiler.staleness import Decision, resolve
from kiln.config import CompilerConfig
from kiln.errors import AssetIOError
from kiln.http.request import Request
from kiln.middleware.protocol import AnyResponse, Next

logger = logging.getLogger("kiln.compiler")


class AssetCompiler:
    """Recompile stale artifacts on demand.

    Plugins are tried in ``enable`` order and only the first one whose
    pattern matches the path is used.

    Usage::

        app.add_middleware(AssetCompiler(
            src="./assets",
            dest="./public",
            enable=["sass", "coffeescript"],
        ))
        app.add_middleware(StaticFiles(directory="./public", prefix="/"))

    Or with an explicit config::

        app.add_middleware(AssetCompiler(CompilerConfig(enable=("less",))))

    Failures are raised, never swallowed: a missing source falls through
    to the next handler, but unreadable files, failed writes
    (``AssetIOError``) and compiler diagnostics (``CompileError``) propagate
    to the ASGI handler, which answers 500.
    """

    __slots__ = ("_dest", "_plugins", "_registry", "_src", "config")

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        registry: PluginRegistry | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = CompilerConfig.from_env(**options)
        elif options:
            msg = "Pass either a CompilerConfig or keyword options, not both."
            raise TypeError(msg)
        self.config = config
        self._registry = registry if registry is not None else default_registry
        self._plugins: tuple[CompilerPlugin, ...] = self._registry.resolve(config.enable)
        self._src = config.src.absolute()
        self._dest = config.dest.absolute()

    @property
    def plugins(self) -> tuple[CompilerPlugin, ...]:
        """Enabled plugins in priority order."""
        return self._plugins

    async def __call__(self, request: Request, next: Next) -> AnyResponse:
        """Compile the requested artifact if needed, then continue."""
        if request.method != "GET":
            return await next(request)

        pathname = request.path
        plugin = self.match(pathname)
        if plugin is None:
            return await next(request)

        source = _within(self._src, plugin.source_pathname(pathname))
        dest = _within(self._dest, pathname)
        if source is None or dest is None:
            # Escapes a root; the serving stage decides what to answer.
            logger.debug("Not compiling %s: path leaves the asset roots", pathname)
            return await next(request)

        resolution = await resolve(source, dest, force=self.config.autocompile)
        logger.debug("%s %s -> %s", resolution.decision, pathname, plugin.name)

        match resolution.decision:
            case Decision.COMPILE:
                await compile_asset(
                    source,
                    dest,
                    plugin,
                    registry=self._registry,
                    compress=self.config.compress,
                )
            case Decision.IO_ERROR:
                exc = resolution.error
                raise AssetIOError(resolution.path, f"cannot stat: {exc}") from exc
            case Decision.PASS_THROUGH | Decision.NOT_FOUND:
                pass

        return await next(request)

    def match(self, pathname: str) -> CompilerPlugin | None:
        """First enabled plugin that claims *pathname*, or ``None``."""
        for plugin in self._plugins:
            if plugin.matches(pathname):
                return plugin
        return None


def _within(root: Path, pathname: str) -> Path | None:
    """Map a URL path onto *root*, or ``None`` if it climbs out of it.

    Purely lexical: ``..`` segments are collapsed, symlinks are not
    followed and the filesystem is never touched.
    """
    relative = posixpath.normpath(pathname.lstrip("/"))
    if relative == "." or relative == ".." or relative.startswith("../"):
        return None
    return root / relative
