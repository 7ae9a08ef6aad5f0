# Program: Licenser License Extractor
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Isolate the leading comment block of a source file as license text."""

from __future__ import annotations

from typing import Sequence

from .errors import EXIT_BLANK_FIRST_LINE, EXIT_EMPTY_LICENSE, MalformedLicenseError

COMMENT_MARKER = "//"


def is_license_line(line: str) -> bool:
    """Return True for a bare marker or a marker followed by a space."""
    return line == COMMENT_MARKER or line.startswith(COMMENT_MARKER + " ")


def strip_marker(line: str) -> str:
    if line == COMMENT_MARKER:
        return ""
    return line[len(COMMENT_MARKER) + 1 :]


def extract_license(source: Sequence[str]) -> list[str]:
    """Extract the canonical license lines from a commented source file.

    Args:
        source: Raw lines of the documentation source.
    Returns:
        License lines with comment markers removed, in file order. Lines after
        the leading comment run are ignored.
    Raises:
        MalformedLicenseError: If the source is empty or its first line is blank.
    """

    if not source:
        raise MalformedLicenseError("License file is empty.", EXIT_EMPTY_LICENSE)
    lines = [line.strip() for line in source]
    if lines[0] == "":
        raise MalformedLicenseError(
            "The first line of the license file must not be empty.", EXIT_BLANK_FIRST_LINE
        )

    license_lines: list[str] = []
    for line in lines:
        if not is_license_line(line):
            break
        license_lines.append(strip_marker(line))
    return license_lines


# Created by Dr. Z. Bakhtiyorov
