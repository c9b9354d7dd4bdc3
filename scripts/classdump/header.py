"""Extract the shared class-dump comment header."""

from __future__ import annotations

from typing import Iterable


def extract_header(
    lines: Iterable[str],
    comment_prefix: str = "//",
    exclude_suffix: str = "properties",
) -> str:
    """Build the header blurb from comment lines in a dump.

    Every line starting with ``comment_prefix`` is selected, wherever it
    sits in the stream. Lines ending with ``exclude_suffix`` are dropped;
    an empty suffix drops nothing.

    Args:
        lines: The dump, one line per item.
        comment_prefix: Prefix marking a comment line.
        exclude_suffix: Suffix of comment lines to leave out.

    Returns:
        The kept comment lines joined with newlines, or "" if there are none.
    """
    comment_lines = [line for line in lines if line.startswith(comment_prefix)]
    if exclude_suffix:
        comment_lines = [line for line in comment_lines if not line.endswith(exclude_suffix)]
    return "\n".join(comment_lines)
