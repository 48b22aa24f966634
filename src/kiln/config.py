"""Application and compiler configuration.

Both configs are frozen dataclasses: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from kiln.errors import ConfigurationError

# Environment variables that override the compiler's ``src``/``dest``.
# Read once, when the config is built.
SRC_ENV = "KILN_COMPILER_SRC"
DEST_ENV = "KILN_COMPILER_DEST"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    ``debug`` includes exception messages in 500 responses.
    """

    debug: bool = False


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Configuration for :class:`~kiln.middleware.compiler.AssetCompiler`.

    Fields:
        src: Root directory holding source files (``.sass``, ``.less``,
            ``.coffee``). Defaults to the current working directory.
        dest: Root directory compiled artifacts are written to. Defaults
            to ``src``.
        enable: Plugin identifiers in priority order. Required.
        autocompile: Recompile on every request, whatever the mtimes say.
            Meant for active development.
        compress: Run the whitespace/comment stripper over compiled output.

    Usage::

        config = CompilerConfig(src="assets", dest="public", enable=("sass",))
    """

    src: Path = field(default_factory=Path.cwd)
    dest: Path | None = None
    enable: tuple[str, ...] = ()
    autocompile: bool = False
    compress: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.enable, str):
            object.__setattr__(self, "enable", (self.enable,))
        else:
            object.__setattr__(self, "enable", tuple(self.enable))
        if not self.enable:
            msg = "compiler's 'enable' option is not set, nothing will be compiled."
            raise ConfigurationError(msg)

        src = Path(self.src)
        object.__setattr__(self, "src", src)
        object.__setattr__(self, "dest", Path(self.dest) if self.dest is not None else src)

    @classmethod
    def from_env(
        cls,
        *,
        src: str | Path | None = None,
        dest: str | Path | None = None,
        enable: str | Iterable[str] = (),
        autocompile: bool = False,
        compress: bool = False,
    ) -> CompilerConfig:
        """Build a config, letting ``KILN_COMPILER_SRC``/``KILN_COMPILER_DEST`` win.

        Environment values take precedence over the explicit ``src`` and
        ``dest`` arguments. ``dest`` still falls back to the resolved ``src``.
        """
        src_value = os.environ.get(SRC_ENV) or src or Path.cwd()
        dest_value = os.environ.get(DEST_ENV) or dest
        return cls(
            src=Path(src_value),
            dest=Path(dest_value) if dest_value else None,
            enable=enable,
            autocompile=autocompile,
            compress=compress,
        )
