"""Staleness check — does an artifact need rebuilding?

Modification time is the only freshness signal. A source strictly newer
than its artifact triggers a rebuild; equal timestamps count as fresh.
Coarse filesystem clocks can therefore hide an edit made within the same
tick as the last build.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import anyio


class Decision(StrEnum):
    """What the dispatcher should do with a matched request."""

    PASS_THROUGH = "pass-through"
    COMPILE = "compile"
    NOT_FOUND = "not-found"
    IO_ERROR = "io-error"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of :func:`resolve`. ``error`` is set only for ``IO_ERROR``."""

    decision: Decision
    path: Path | None = None
    error: OSError | None = None


async def resolve(source: Path, dest: Path, *, force: bool = False) -> Resolution:
    """Compare *source* against *dest* and decide whether to compile.

    - source missing: ``NOT_FOUND`` (not ours to handle)
    - dest missing: ``COMPILE``
    - ``force`` or source mtime > dest mtime: ``COMPILE``
    - otherwise: ``PASS_THROUGH``

    Any other ``OSError`` while stat-ing yields ``IO_ERROR`` with the
    failing path and the exception attached.
    """
    try:
        source_stat = await anyio.Path(source).stat()
    except FileNotFoundError:
        return Resolution(Decision.NOT_FOUND, source)
    except OSError as exc:
        return Resolution(Decision.IO_ERROR, source, exc)

    try:
        dest_stat = await anyio.Path(dest).stat()
    except FileNotFoundError:
        return Resolution(Decision.COMPILE, dest)
    except OSError as exc:
        return Resolution(Decision.IO_ERROR, dest, exc)

    if force or source_stat.st_mtime_ns > dest_stat.st_mtime_ns:
        return Resolution(Decision.COMPILE, dest)
    return Resolution(Decision.PASS_THROUGH, dest)
