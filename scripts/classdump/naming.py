"""Derive a file name for a declaration from its first line.

Protocol and class lines are cleaned differently:

- ``@protocol Foo (Bar) <NSObject>`` has no bare ``:`` token, so it is a
  protocol. Everything before `` <`` is kept, parentheses are removed and
  spaces become ``+``: ``Foo+Bar``.
- ``@interface Foo (Bar) : NSObject <Baz>`` has a bare ``:`` token, so it is
  a class. The tokens before the ``:`` are kept as-is: ``Foo (Bar)``.

Class names keep their parentheses while protocol names lose them. Names are
not otherwise sanitized.
"""

from __future__ import annotations

from typing import Optional, Sequence

from scripts.classdump.errors import StructuralError

PROTOCOL_LIST_SEPARATOR = " <"
SUPERCLASS_SEPARATOR = ":"


def _colon_index(tokens: Sequence[str]) -> Optional[int]:
    """Return the index of the first bare ':' token, or None."""
    for i, token in enumerate(tokens):
        if token == SUPERCLASS_SEPARATOR:
            return i
    return None


def is_protocol_declaration(first_line: str) -> bool:
    """Return True if the line has no bare ':' token after the keyword."""
    return _colon_index(first_line.split()[1:]) is None


def declaration_name(first_line: str) -> str:
    """Compute the name for a declaration's first line.

    Args:
        first_line: A line starting with a declaration keyword.

    Returns:
        The declaration name, without file suffix.
    """
    rest = first_line.split()[1:]
    colon_index = _colon_index(rest)

    if colon_index is None:
        name = " ".join(rest).split(PROTOCOL_LIST_SEPARATOR)[0]
        name = name.replace("(", "").replace(")", "")
        return name.replace(" ", "+")

    return " ".join(rest[:colon_index])


def resolve_declaration_name(lines: Sequence[str]) -> str:
    """Compute the name of a declaration block.

    Raises:
        StructuralError: If the block has no lines.
    """
    if not lines:
        raise StructuralError("Error enumerating declarations: empty declaration block")
    return declaration_name(lines[0])
