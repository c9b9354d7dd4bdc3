"""Split raw class-dump output into lines."""

from __future__ import annotations

import re

# CRLF must come first so it counts as a single break
NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text on CRLF, CR or LF without keeping the terminators.

    This is a literal split: text ending in a newline yields a trailing
    empty string, and an empty text yields ``[""]``.

    Raises:
        TypeError: If text is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"split_lines expects str, got {type(text).__name__}")
    return NEWLINE_RE.split(text)
