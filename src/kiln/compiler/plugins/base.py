"""Compiler plugin descriptor.

A plugin ties one source language to one artifact format:

- ``match`` recognises an artifact request path (``/css/site.css``)
- ``source_extension`` replaces the matched suffix to find the source
  (``/css/site.sass``)
- ``load`` imports or locates the compiler library, called once per
  registry and memoized there
- ``render`` turns source text into artifact text using the loaded backend

Descriptors are frozen; the set of plugins a middleware uses is fixed
when it is constructed.
"""

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

# (backend, source_text) -> artifact_text
Renderer: TypeAlias = Callable[[Any, str], Awaitable[str]]


@dataclass(frozen=True, slots=True)
class CompilerPlugin:
    """A frozen compiler plugin definition."""

    name: str
    match: re.Pattern[str]
    source_extension: str
    load: Callable[[], Any]
    render: Renderer

    def matches(self, pathname: str) -> bool:
        """True if *pathname* names an artifact this plugin produces."""
        return self.match.search(pathname) is not None

    def source_pathname(self, pathname: str) -> str:
        """Rewrite an artifact path into the matching source path.

        ``/app/site.css`` becomes ``/app/site.sass`` for the sass plugin.
        """
        return self.match.sub(lambda _: self.source_extension, pathname, count=1)
