"""Less to CSS, via lesscpy."""

import io
import re
from typing import Any

import anyio

from kiln.compiler.plugins.base import CompilerPlugin


def _load() -> Any:
    import lesscpy

    return lesscpy


async def _render(lesscpy: Any, source: str) -> str:
    def run() -> str:
        return lesscpy.compile(io.StringIO(source), minify=False)

    return await anyio.to_thread.run_sync(run)


LESS = CompilerPlugin(
    name="less",
    match=re.compile(r"\.css\Z"),
    source_extension=".less",
    load=_load,
    render=_render,
)
