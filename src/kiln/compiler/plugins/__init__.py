"""Compiler plugins and the bundled registry.

Bundled plugins:
    sass          -- ``.sass`` to ``.css`` (requires ``pip install kiln[sass]``)
    less          -- ``.less`` to ``.css`` (requires ``pip install kiln[less]``)
    coffeescript  -- ``.coffee`` to ``.js`` (requires the ``coffee`` executable)
"""

from kiln.compiler.plugins.base import CompilerPlugin, Renderer
from kiln.compiler.plugins.coffeescript import COFFEESCRIPT
from kiln.compiler.plugins.less import LESS
from kiln.compiler.plugins.registry import PluginRegistry
from kiln.compiler.plugins.sass import SASS

# Process-wide, read-only after import.
default_registry = PluginRegistry([SASS, LESS, COFFEESCRIPT])

__all__ = [
    "COFFEESCRIPT",
    "LESS",
    "SASS",
    "CompilerPlugin",
    "PluginRegistry",
    "Renderer",
    "default_registry",
]
