"""Utilities for deterministic code generation and file output."""

import hashlib
import logging
import tempfile
from contextlib import suppress
from pathlib import Path

from litestar_typegen.exceptions import TypeGenIOError

__all__ = ("fmt_path", "write_if_changed")

logger = logging.getLogger("litestar_typegen.codegen")


def fmt_path(path: Path) -> str:
    """Format path for display, using relative path when possible.

    Returns:
        The formatted path.
    """
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def write_if_changed(path: Path, content: "bytes | str", *, encoding: str = "utf-8") -> bool:
    """Atomically write content to a file unless it already holds the same bytes.

    Skipping identical content avoids waking file watchers and rebuilds. A
    changed file is written to a temporary sibling first and then moved over
    the target, so readers never observe a partial document.

    Args:
        path: The file path to write to.
        content: The content to write (bytes or str).
        encoding: Encoding for string content.

    Raises:
        TypeGenIOError: If the directory cannot be created or the file cannot be written.

    Returns:
        True if file was written (content changed), False if skipped (unchanged).
    """
    # Ensure trailing newline for POSIX compliance
    if isinstance(content, str):
        if not content.endswith("\n"):
            content += "\n"
        content_bytes = content.encode(encoding)
    else:
        if not content.endswith(b"\n"):
            content += b"\n"
        content_bytes = content

    if path.is_file():
        try:
            existing = path.read_bytes()
        except OSError:
            existing = None
        if existing is not None and hashlib.md5(existing).digest() == hashlib.md5(content_bytes).digest():  # noqa: S324
            logger.debug("Unchanged: %s", fmt_path(path))
            return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Failed to create types directory {fmt_path(path.parent)}: {e}"
        raise TypeGenIOError(msg, path=str(path.parent)) from e

    tmp_path: "Path | None" = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_path = Path(handle.name)
            handle.write(content_bytes)
        tmp_path.chmod(0o644)
        tmp_path.replace(path)
    except OSError as e:
        if tmp_path is not None:
            with suppress(OSError):
                tmp_path.unlink()
        msg = f"Failed to write types file {fmt_path(path)}: {e}"
        raise TypeGenIOError(msg, path=str(path)) from e

    logger.info("Wrote %s", fmt_path(path))
    return True
