"""On-demand asset compilation.

    plugins    -- CompilerPlugin descriptors and the PluginRegistry
    staleness  -- mtime comparison between a source and its artifact
    persist    -- read / compile / compress / write one artifact
    compress   -- pattern-based output minifier

The request-facing entry point is
:class:`kiln.middleware.compiler.AssetCompiler`.
"""

from kiln.compiler.compress import compress
from kiln.compiler.persist import compile_asset
from kiln.compiler.plugins import CompilerPlugin, PluginRegistry, default_registry
from kiln.compiler.staleness import Decision, Resolution, resolve

__all__ = [
    "CompilerPlugin",
    "Decision",
    "PluginRegistry",
    "Resolution",
    "compile_asset",
    "compress",
    "default_registry",
    "resolve",
]
