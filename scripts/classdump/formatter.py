"""Turn class-dump output into one header file per declaration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence

from scripts.classdump.config import FormatterConfig, get_default_config
from scripts.classdump.dump import run_class_dump
from scripts.classdump.header import extract_header
from scripts.classdump.lines import split_lines
from scripts.classdump.naming import resolve_declaration_name
from scripts.classdump.segmenter import DeclarationSegmenter
from scripts.classdump.writer import (
    ensure_output_dir,
    write_declaration_file,
    write_header_file,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanonicalizedDeclaration:
    """A named declaration ready to be written."""

    name: str
    header: str
    declaration: str
    suffix: str = ".h"

    @property
    def file_name(self) -> str:
        return f"{self.name}{self.suffix}"

    @property
    def file_body(self) -> str:
        return f"{self.declaration}\n"


@dataclass
class FormatResult:
    """Outcome of a formatter run."""

    output_dir: Path
    header_path: Path
    declarations: list[CanonicalizedDeclaration] = field(default_factory=list)
    collisions: list[str] = field(default_factory=list)  # file names written more than once
    unterminated: Optional[list[str]] = None  # lines of a declaration never closed by @end


def canonicalize(
    lines: Sequence[str],
    header: str,
    suffix: str = ".h",
) -> CanonicalizedDeclaration:
    """Name a declaration block and join its lines.

    Raises:
        StructuralError: If the block is empty.
    """
    return CanonicalizedDeclaration(
        name=resolve_declaration_name(lines),
        header=header,
        declaration="\n".join(lines),
        suffix=suffix,
    )


def iter_canonicalized(
    lines: Sequence[str],
    header: str,
    config: Optional[FormatterConfig] = None,
    segmenter: Optional[DeclarationSegmenter] = None,
) -> Iterator[CanonicalizedDeclaration]:
    """Yield a CanonicalizedDeclaration per declaration block, in dump order."""
    config = config or get_default_config()
    if segmenter is None:
        segmenter = DeclarationSegmenter(config.start_markers, config.end_marker)
    for block in segmenter.segment(lines):
        yield canonicalize(block, header, config.declaration_suffix)


def format_dump(
    text: str,
    output_dir: Path | str,
    config: Optional[FormatterConfig] = None,
) -> FormatResult:
    """Write the header file and one file per declaration found in ``text``.

    The output directory is created if needed. Files of the same name are
    overwritten; when two declarations share a name the later one wins.
    Any error aborts the run, leaving files already written in place.

    Args:
        text: Complete class-dump output.
        output_dir: Directory to write into.
        config: Formatter settings, defaults if None.

    Returns:
        FormatResult describing what was written.
    """
    config = config or get_default_config()
    output_dir = ensure_output_dir(output_dir)
    return _write_formatted(split_lines(text), output_dir, config)


def format_binary(
    executable_path: Path | str,
    macho_file_path: Path | str,
    output_dir: Path | str,
    config: Optional[FormatterConfig] = None,
) -> FormatResult:
    """Run class-dump on a Mach-O file and format its output.

    The output directory is created before class-dump runs.
    """
    config = config or get_default_config()
    output_dir = ensure_output_dir(output_dir)
    text = run_class_dump(executable_path, macho_file_path, config.encoding)
    return _write_formatted(split_lines(text), output_dir, config)


def _write_formatted(
    lines: list[str],
    output_dir: Path,
    config: FormatterConfig,
) -> FormatResult:
    header = extract_header(lines, config.comment_prefix, config.header_exclude_suffix)
    header_path = write_header_file(
        header, output_dir, config.header_file_name, config.encoding
    )
    result = FormatResult(output_dir=output_dir, header_path=header_path)

    written: set[str] = set()
    segmenter = DeclarationSegmenter(config.start_markers, config.end_marker)
    for declaration in iter_canonicalized(lines, header, config, segmenter):
        if declaration.file_name in written:
            logger.warning("Overwriting %s: declaration name used more than once", declaration.file_name)
            result.collisions.append(declaration.file_name)
        write_declaration_file(
            declaration.file_name, declaration.file_body, output_dir, config.encoding
        )
        written.add(declaration.file_name)
        result.declarations.append(declaration)

    if segmenter.unterminated is not None:
        logger.warning(
            "Discarded unterminated declaration starting with %r",
            segmenter.unterminated[0],
        )
        result.unterminated = segmenter.unterminated

    logger.info("Wrote %d declarations to %s", len(result.declarations), output_dir)
    return result
