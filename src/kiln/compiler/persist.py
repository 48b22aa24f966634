"""Read, compile, optionally compress, and write one artifact.

Each step can fail; nothing is written unless compilation succeeded.
The write is a plain overwrite (no temp file + rename), so a reader
racing it may see a partial file.
"""

import logging
from pathlib import Path

import anyio

from kiln.compiler.compress import compress as compress_text
from kiln.compiler.plugins.base import CompilerPlugin
from kiln.compiler.plugins.registry import PluginRegistry
from kiln.errors import AssetIOError

logger = logging.getLogger("kiln.compiler")


async def compile_asset(
    source: Path,
    dest: Path,
    plugin: CompilerPlugin,
    *,
    registry: PluginRegistry,
    compress: bool = False,
) -> Path:
    """Compile *source* into *dest* with *plugin*.

    Returns *dest* on success.

    Raises:
        AssetIOError: The source could not be read or the artifact could
            not be written.
        CompileError: The backend rejected the source.
    """
    # Bytes in and out, so line endings survive untranslated.
    try:
        text = (await anyio.Path(source).read_bytes()).decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AssetIOError(source, f"cannot read source: {exc}") from exc

    output = await registry.compile(plugin, text)
    if compress:
        output = compress_text(output)

    target = anyio.Path(dest)
    try:
        await target.parent.mkdir(parents=True, exist_ok=True)
        await target.write_bytes(output.encode("utf-8"))
    except OSError as exc:
        raise AssetIOError(dest, f"cannot write artifact: {exc}") from exc

    logger.info("Compiled %s -> %s (%s)", source, dest, plugin.name)
    return dest
