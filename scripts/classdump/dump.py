"""Run class-dump on a Mach-O file."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from scripts.classdump.errors import DumpToolError, InvalidDataError

logger = logging.getLogger(__name__)


def decode_output(data: bytes, encoding: str = "utf-8") -> str:
    """Decode class-dump output strictly.

    Raises:
        InvalidDataError: If the bytes are not valid text in ``encoding``.
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise InvalidDataError(f"class-dump output is not valid {encoding}: {e}")


def run_class_dump(
    executable_path: Path | str,
    macho_file_path: Path | str,
    encoding: str = "utf-8",
) -> str:
    """Run class-dump once and return its standard output as text.

    The tool's exit status is not treated as a failure; a non-zero status is
    logged and whatever it printed is used.

    Args:
        executable_path: Path to the class-dump executable.
        macho_file_path: Path to the Mach-O file to dump.
        encoding: Encoding of the tool's output.

    Raises:
        DumpToolError: If the executable cannot be started.
        InvalidDataError: If the output cannot be decoded.
    """
    command = [str(executable_path), str(macho_file_path)]
    logger.debug("Running %s", " ".join(command))

    try:
        result = subprocess.run(command, stdout=subprocess.PIPE, check=False)
    except OSError as e:
        raise DumpToolError(
            f"Could not run class-dump: {e.strerror or e}",
            path=str(executable_path),
        )

    if result.returncode != 0:
        logger.warning("class-dump exited with status %d", result.returncode)

    return decode_output(result.stdout, encoding)
