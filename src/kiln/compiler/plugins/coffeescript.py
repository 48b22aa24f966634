"""CoffeeScript to JavaScript, via the ``coffee`` executable.

The source is piped through ``coffee --compile --print --stdio``. The
executable is looked up on ``PATH`` once; set ``KILN_COFFEE_BINARY`` to
point at a specific install (e.g. ``node_modules/.bin/coffee``).
"""

import os
import re
import shutil

import anyio

from kiln.compiler.plugins.base import CompilerPlugin
from kiln.errors import CompileError

COFFEE_ENV = "KILN_COFFEE_BINARY"


def _load() -> str:
    binary = os.environ.get(COFFEE_ENV, "coffee")
    resolved = shutil.which(binary)
    if resolved is None:
        msg = f"{binary!r} executable not found (set {COFFEE_ENV} to override)"
        raise FileNotFoundError(msg)
    return resolved


async def _render(coffee: str, source: str) -> str:
    result = await anyio.run_process(
        [coffee, "--compile", "--print", "--stdio"],
        input=source.encode("utf-8"),
        check=False,
    )
    if result.returncode != 0:
        diagnostic = result.stderr.decode("utf-8", errors="replace").strip()
        raise CompileError("coffeescript", diagnostic or f"exit status {result.returncode}")
    return result.stdout.decode("utf-8")


COFFEESCRIPT = CompilerPlugin(
    name="coffeescript",
    match=re.compile(r"\.js\Z"),
    source_extension=".coffee",
    load=_load,
    render=_render,
)
