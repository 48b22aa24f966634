"""Fake compiler plugins.

The fake backends transform text predictably so tests never need libsass,
lesscpy, or a ``coffee`` executable.
"""

import re

from kiln.compiler.plugins import CompilerPlugin


class FakeBackend:
    """Stands in for a compiler library; counts how often it is loaded."""

    loads = 0

    def __init__(self) -> None:
        FakeBackend.loads += 1
        self.calls: list[str] = []


async def _render_upper(backend: FakeBackend, source: str) -> str:
    backend.calls.append(source)
    return f"/* built */\n{source.upper()}"


async def _render_script(backend: FakeBackend, source: str) -> str:
    backend.calls.append(source)
    return f"(function() {{ {source.strip()} }})();\n"


async def _render_broken(backend: FakeBackend, source: str) -> str:
    msg = "unexpected '}' on line 1"
    raise ValueError(msg)


def _load() -> FakeBackend:
    return FakeBackend()


STYLE = CompilerPlugin(
    name="style",
    match=re.compile(r"\.css\Z"),
    source_extension=".styl",
    load=_load,
    render=_render_upper,
)
ALT_STYLE = CompilerPlugin(
    name="altstyle",
    match=re.compile(r"\.css\Z"),
    source_extension=".alt",
    load=_load,
    render=_render_upper,
)
SCRIPT = CompilerPlugin(
    name="script",
    match=re.compile(r"\.js\Z"),
    source_extension=".coffee",
    load=_load,
    render=_render_script,
)
BROKEN = CompilerPlugin(
    name="broken",
    match=re.compile(r"\.css\Z"),
    source_extension=".bad",
    load=_load,
    render=_render_broken,
)
