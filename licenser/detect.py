# Program: Licenser License Resolution
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Load the canonical license from an explicit file or detect it in a project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import LicenserConfig
from .errors import (
    EXIT_EMPTY_LICENSE,
    EXIT_LICENSE_FILE,
    FilesystemError,
    LicenseDetectionError,
    MalformedLicenseError,
)
from .extractor import extract_license

logger = logging.getLogger(__name__)


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file as lines without terminators.

    Line endings are normalized to ``\\n``; a trailing newline does not add an
    empty last line. Bytes that are not valid UTF-8 are kept as surrogate escapes
    so files round-trip unchanged.
    """
    lines = path.read_text(encoding="utf-8", errors="surrogateescape").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_license_file(path: Path) -> list[str]:
    """Read an explicit license file; its lines are used verbatim."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise FilesystemError(f"Error reading license file: {exc}", EXIT_LICENSE_FILE) from exc
    if not lines:
        raise MalformedLicenseError(f"License file {path} is empty.", EXIT_EMPTY_LICENSE)
    logger.debug("Loaded %d license lines from %s", len(lines), path)
    return lines


def detect_license(root: Path, config: LicenserConfig) -> list[str]:
    """Detect the license from the documentation source of a Go project."""
    if (root / config.manifest_file).exists():
        logger.info("Golang project detected")
        doc_source = root / config.doc_source
        try:
            source = read_lines(doc_source)
        except OSError as exc:
            logger.debug("Cannot read %s: %s", doc_source, exc)
        else:
            logger.info("Extracting license from %s", config.doc_source)
            return extract_license(source)

    raise LicenseDetectionError(f"Could not find any license file in {root}")


def resolve_license(
    root: Path, license_file: Optional[Path], config: LicenserConfig
) -> list[str]:
    if license_file is None:
        return detect_license(root, config)
    return read_license_file(license_file)


# Created by Dr. Z. Bakhtiyorov
