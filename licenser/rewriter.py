# Program: Licenser Header Rewriter
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Splice canonical license text into the leading header of a source file.

A run of comment lines at the top of a file counts as a license header only
when it is followed by a blank line or the end of the file. A comment run that
runs straight into code (a build tag, a doc comment) belongs to that code and
is left alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

from .extractor import COMMENT_MARKER


class RewriteResult(NamedTuple):
    content: bytes
    changed: bool


@dataclass(frozen=True)
class HeaderScan:
    """Outcome of scanning the leading comment run of a file.

    Attributes:
        boundary: Index of the first non-comment line (len(lines) at EOF).
        replaceable: Whether the comment run is a license header to replace.
    """

    boundary: int
    replaceable: bool


def render_header(license_lines: Sequence[str]) -> list[str]:
    """Render license lines as a comment block plus one blank separator."""
    block = [f"{COMMENT_MARKER} {line}" if line else COMMENT_MARKER for line in license_lines]
    block.append("")
    return block


def is_boundary_replaceable(lines: Sequence[str], boundary: int) -> bool:
    """Decide whether the comment run ending at `boundary` is a license header.

    An empty run is an absent header and is always replaceable. Otherwise the
    run is replaceable only when the boundary line is empty or missing.
    """

    if boundary == 0 or boundary >= len(lines):
        return True
    return lines[boundary] == ""


def scan_header(lines: Sequence[str]) -> HeaderScan:
    boundary = 0
    while boundary < len(lines) and lines[boundary].startswith(COMMENT_MARKER):
        boundary += 1
    return HeaderScan(boundary=boundary, replaceable=is_boundary_replaceable(lines, boundary))


def _join(lines: Sequence[str]) -> bytes:
    return "".join(f"{line}\n" for line in lines).encode("utf-8", "surrogateescape")


def rewrite(source: Sequence[str], license_lines: Sequence[str]) -> RewriteResult:
    """Produce the new content of a source file carrying `license_lines`.

    Args:
        source: Lines of the target file without line terminators.
        license_lines: Canonical license text.
    Returns:
        The rendered bytes and whether they differ from the normalized original.
    """

    scan = scan_header(source)
    if scan.replaceable:
        body = list(source[scan.boundary :])
        if body and body[0] == "":
            # The blank boundary line is superseded by the block separator.
            body = body[1:]
        output = render_header(license_lines) + body
    else:
        output = list(source)

    original = _join(source)
    content = _join(output)
    return RewriteResult(content=content, changed=content != original)


# Created by Dr. Z. Bakhtiyorov
