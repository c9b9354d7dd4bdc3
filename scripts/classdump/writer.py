"""Write formatted headers into the output directory."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from scripts.classdump.errors import InvalidFileURLError, OutputWriteError

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir: Path | str) -> Path:
    """Create the output directory and any missing parents.

    A broken symlink at the path is removed before creating the directory.

    Raises:
        OutputWriteError: If the directory cannot be created.
    """
    output_dir = Path(output_dir)

    try:
        if output_dir.is_symlink() and not output_dir.exists():
            output_dir.unlink()
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            f"Could not create output directory: {e.strerror or e}",
            path=str(output_dir),
        )
    return output_dir


def output_path(output_dir: Path | str, file_name: str) -> Path:
    """Join a file name onto the output directory.

    Names are not escaped; a name containing "/" points into a subdirectory.
    A name that cannot form a path inside the output directory is rejected.

    Raises:
        InvalidFileURLError: If the name is empty, contains a NUL byte,
            or its directory resolves outside the output directory.
    """
    output_dir = Path(output_dir)
    if not file_name or "\x00" in file_name:
        raise InvalidFileURLError(
            f"Cannot build output path for file name {file_name!r}",
            path=str(output_dir),
        )

    path = output_dir / file_name
    root = output_dir.resolve()
    # Only the parent is resolved; an existing symlink at the name is replaced, not followed
    parent = path.parent.resolve()
    if path.name in ("", "..") or (parent != root and root not in parent.parents):
        raise InvalidFileURLError(
            f"Output path for {file_name!r} is outside the output directory",
            path=str(path),
        )
    return path


def _file_mode(path: Path) -> int:
    """Mode for a written file: the existing file's mode, else 0666 minus umask."""
    if path.is_file() and not path.is_symlink():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write_text(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text atomically using tempfile + rename.

    An existing file at ``path`` is replaced. It gets the permissions a plain
    open() would give it, or keeps those of the file it replaces.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    try:
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
    except OSError as e:
        raise OutputWriteError(f"Could not write file: {e.strerror or e}", path=str(path))

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
        os.chmod(tmp_path, _file_mode(path))
        os.replace(tmp_path, str(path))
    except OSError as e:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise OutputWriteError(f"Could not write file: {e.strerror or e}", path=str(path))


def write_header_file(
    header: str,
    output_dir: Path | str,
    file_name: str = "class-dump-version.h",
    encoding: str = "utf-8",
) -> Path:
    """Write the shared header blurb, followed by a newline."""
    path = output_path(output_dir, file_name)
    atomic_write_text(path, f"{header}\n", encoding)
    logger.debug("Wrote header %s", path)
    return path


def write_declaration_file(
    file_name: str,
    file_body: str,
    output_dir: Path | str,
    encoding: str = "utf-8",
) -> Path:
    """Write one declaration file, replacing any file of the same name."""
    path = output_path(output_dir, file_name)
    atomic_write_text(path, file_body, encoding)
    logger.debug("Wrote declaration %s", path)
    return path
