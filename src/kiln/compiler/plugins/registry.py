"""Plugin registry — name lookup plus lazily loaded compiler backends.

Mirrors the frozen-definition + compiled-table split used for routes:
``CompilerPlugin`` is the frozen definition, ``PluginRegistry`` is the
lookup table built once and read-only afterwards.

Free-threading safety:
    - CompilerPlugin is a frozen dataclass (immutable)
    - PluginRegistry._plugins is built at construction, never mutated
    - PluginRegistry._backends is filled under _lock, once per plugin
"""

import logging
import threading
from collections.abc import Iterable
from typing import Any

from kiln.compiler.plugins.base import CompilerPlugin
from kiln.errors import CompileError, ConfigurationError

logger = logging.getLogger("kiln.compiler")


class PluginRegistry:
    """Compiled plugin table. Immutable after construction.

    Compiler libraries are expensive to import (or, for executables, to
    locate), so each plugin's backend is loaded on first use and cached
    for the life of the registry.
    """

    __slots__ = ("_backends", "_lock", "_plugins")

    def __init__(self, plugins: Iterable[CompilerPlugin]) -> None:
        self._plugins: dict[str, CompilerPlugin] = {}
        for plugin in plugins:
            if plugin.name in self._plugins:
                msg = f"Duplicate compiler plugin: {plugin.name!r}"
                raise ConfigurationError(msg)
            self._plugins[plugin.name] = plugin
        self._backends: dict[str, Any] = {}
        self._lock = threading.Lock()

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def names(self) -> tuple[str, ...]:
        """Registered plugin identifiers, in registration order."""
        return tuple(self._plugins)

    def lookup(self, name: str) -> CompilerPlugin:
        """Return the plugin registered as *name*.

        Raises ``ConfigurationError`` for an unknown identifier.
        """
        plugin = self._plugins.get(name)
        if plugin is None:
            available = ", ".join(sorted(self._plugins)) or "none"
            msg = f"Unknown compiler plugin {name!r}. Available: {available}"
            raise ConfigurationError(msg)
        return plugin

    def resolve(self, names: Iterable[str]) -> tuple[CompilerPlugin, ...]:
        """Look up several plugins, keeping the given priority order."""
        return tuple(self.lookup(name) for name in names)

    def backend(self, plugin: CompilerPlugin) -> Any:
        """Return the loaded compiler backend for *plugin*, loading it once.

        A failed load is not cached; it surfaces as ``CompileError`` and
        the next request tries again.
        """
        try:
            return self._backends[plugin.name]
        except KeyError:
            pass
        with self._lock:
            if plugin.name not in self._backends:
                try:
                    self._backends[plugin.name] = plugin.load()
                except (ImportError, OSError) as exc:
                    raise CompileError(plugin.name, f"backend unavailable: {exc}") from exc
                logger.debug("Loaded %s compiler backend", plugin.name)
            return self._backends[plugin.name]

    async def compile(self, plugin: CompilerPlugin, source: str) -> str:
        """Compile *source* text with *plugin*'s backend.

        Any failure reported by the backend is raised as ``CompileError``
        carrying the backend's diagnostic.
        """
        backend = self.backend(plugin)
        try:
            return await plugin.render(backend, source)
        except CompileError:
            raise
        except Exception as exc:
            raise CompileError(plugin.name, str(exc) or type(exc).__name__) from exc
