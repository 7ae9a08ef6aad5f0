# Program: Licenser Driver
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Walk a source tree and keep every recognized file's license header current."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

from .config import LicenserConfig
from .detect import read_lines
from .errors import (
    EXIT_MISSING_ROOT,
    EXIT_NOT_A_DIRECTORY,
    EXIT_SOURCE_IO,
    FilesystemError,
    UsageError,
)
from .events import FileReport, RunSummary
from .rewriter import rewrite

logger = logging.getLogger(__name__)


def check_root(root: Optional[Path]) -> Path:
    if root is None:
        raise UsageError("Please specify the root directory", EXIT_MISSING_ROOT)
    if not root.is_dir():
        raise FilesystemError(f"{root} is not a directory", EXIT_NOT_A_DIRECTORY)
    return root


@dataclass
class Licenser:
    """Driver applying one canonical license to every source file under root."""

    root: Path
    license_lines: Sequence[str]
    config: LicenserConfig = field(default_factory=LicenserConfig)

    def iter_sources(self) -> Iterator[Path]:
        """Yield files under root, each directory's entries in sorted order.

        Subdirectories are descended into at their sorted position; excluded
        directories and symlinked directories are skipped.
        """
        yield from self._walk(self.root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise FilesystemError(f"Error reading source directory: {exc}", EXIT_SOURCE_IO) from exc
        for entry in entries:
            if entry.is_dir():
                if entry.name not in self.config.excluded_dirs and not entry.is_symlink():
                    yield from self._walk(entry)
                continue
            yield entry

    def process_file(self, path: Path) -> FileReport:
        if not self.config.accepts(path):
            return FileReport(path=str(path), status="ignored")

        try:
            source = read_lines(path)
        except OSError as exc:
            raise FilesystemError(f"Error opening {path}: {exc}", EXIT_SOURCE_IO) from exc

        content, changed = rewrite(source, self.license_lines)
        if not changed:
            logger.debug("License header of %s is current", path)
            return FileReport(path=str(path), status="ok")

        try:
            path.write_bytes(content)
        except OSError as exc:
            raise FilesystemError(f"Error writing {path}: {exc}", EXIT_SOURCE_IO) from exc
        logger.debug("Rewrote license header of %s", path)
        return FileReport(path=str(path), status="updated")

    def run(self, on_report: Optional[Callable[[FileReport], None]] = None) -> RunSummary:
        summary = RunSummary()
        for path in self.iter_sources():
            report = self.process_file(path)
            summary.reports.append(report)
            if on_report is not None:
                on_report(report)
        return summary


# Created by Dr. Z. Bakhtiyorov
