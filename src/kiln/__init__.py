"""Kiln — compile stylesheets and scripts on demand, right before they are served.

A middleware checks each GET for a compiled artifact (``.css``, ``.js``)
against its source (``.sass``, ``.less``, ``.coffee``) and rebuilds the
artifact when the source is newer.

Basic usage::

    from kiln import App, AssetCompiler, StaticFiles

    app = App()
    app.add_middleware(AssetCompiler(src="assets", dest="public", enable=["sass"]))
    app.add_middleware(StaticFiles(directory="public", prefix="/"))

Backends (``pip install kiln[sass]``, ``kiln[less]``; CoffeeScript needs
the ``coffee`` executable on ``PATH``).
"""

__version__ = "0.1.0"
__all__ = [
    "AnyResponse",
    "App",
    "AppConfig",
    "AssetCompiler",
    "AssetError",
    "AssetIOError",
    "CompileError",
    "CompilerConfig",
    "CompilerPlugin",
    "ConfigurationError",
    "HTTPError",
    "KilnError",
    "Middleware",
    "Next",
    "NotFound",
    "PluginRegistry",
    "Request",
    "Response",
    "StaticFiles",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "App": "kiln.app",
    "AppConfig": "kiln.config",
    "CompilerConfig": "kiln.config",
    "Request": "kiln.http.request",
    "Response": "kiln.http.response",
    "AnyResponse": "kiln.middleware.protocol",
    "Middleware": "kiln.middleware.protocol",
    "Next": "kiln.middleware.protocol",
    "AssetCompiler": "kiln.middleware.compiler",
    "StaticFiles": "kiln.middleware.static",
    "CompilerPlugin": "kiln.compiler.plugins.base",
    "PluginRegistry": "kiln.compiler.plugins.registry",
    "KilnError": "kiln.errors",
    "ConfigurationError": "kiln.errors",
    "HTTPError": "kiln.errors",
    "NotFound": "kiln.errors",
    "AssetError": "kiln.errors",
    "AssetIOError": "kiln.errors",
    "CompileError": "kiln.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import kiln`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
