"""Sass (indented syntax) to CSS, via libsass.

libsass is a blocking C extension, so rendering runs on a worker
thread to keep the event loop free.
"""

import re
from typing import Any

import anyio

from kiln.compiler.plugins.base import CompilerPlugin


def _load() -> Any:
    import sass

    return sass


async def _render(sass: Any, source: str) -> str:
    def run() -> str:
        return sass.compile(string=source, indented=True)

    return await anyio.to_thread.run_sync(run)


SASS = CompilerPlugin(
    name="sass",
    match=re.compile(r"\.css\Z"),
    source_extension=".sass",
    load=_load,
    render=_render,
)
