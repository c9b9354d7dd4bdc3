"""Group a class-dump line stream into declaration blocks.

A declaration runs from a line starting with a start marker (``@protocol``
or ``@interface``) through the next line starting with the end marker
(``@end``), both inclusive. Markers are matched as plain line prefixes;
there is no nesting, so a start marker inside an open declaration is just
another line of that declaration.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

DEFAULT_START_MARKERS = ("@protocol", "@interface")
DEFAULT_END_MARKER = "@end"


class SegmenterState(Enum):
    """Scanner state."""

    OUTSIDE = "outside"
    INSIDE_DECLARATION = "inside_declaration"


def has_declaration_prefix(line: str, start_markers: Sequence[str] = DEFAULT_START_MARKERS) -> bool:
    """Return True if the line opens a protocol or class declaration."""
    return line.startswith(tuple(start_markers))


def has_end_prefix(line: str, end_marker: str = DEFAULT_END_MARKER) -> bool:
    """Return True if the line closes a declaration."""
    return line.startswith(end_marker)


class DeclarationSegmenter:
    """Two-state scanner yielding one list of lines per declaration.

    After ``segment()`` is exhausted, ``unterminated`` holds the lines of a
    declaration that was still open at end of stream (never yielded), or
    None if every declaration was closed.
    """

    def __init__(
        self,
        start_markers: Sequence[str] = DEFAULT_START_MARKERS,
        end_marker: str = DEFAULT_END_MARKER,
    ):
        self.start_markers = tuple(start_markers)
        self.end_marker = end_marker
        self.state = SegmenterState.OUTSIDE
        self.unterminated: Optional[list[str]] = None

    def segment(self, lines: Iterable[str]) -> Iterator[list[str]]:
        """Yield declaration blocks in stream order.

        Args:
            lines: The dump, one line per item. Consumed once.

        Yields:
            Lines of each declaration, start and end marker lines included.
        """
        self.state = SegmenterState.OUTSIDE
        self.unterminated = None
        current: list[str] = []

        for line in lines:
            if self.state is SegmenterState.OUTSIDE:
                if not has_declaration_prefix(line, self.start_markers):
                    continue
                self.state = SegmenterState.INSIDE_DECLARATION

            current.append(line)

            if has_end_prefix(line, self.end_marker):
                block = current
                current = []
                self.state = SegmenterState.OUTSIDE
                yield block

        if self.state is SegmenterState.INSIDE_DECLARATION:
            self.unterminated = current
            self.state = SegmenterState.OUTSIDE


def iter_declarations(
    lines: Iterable[str],
    start_markers: Sequence[str] = DEFAULT_START_MARKERS,
    end_marker: str = DEFAULT_END_MARKER,
) -> Iterator[list[str]]:
    """Yield declaration blocks, silently dropping an unterminated trailing one."""
    return DeclarationSegmenter(start_markers, end_marker).segment(lines)
