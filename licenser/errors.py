# Program: Licenser Errors
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Error taxonomy; every error is fatal and maps to a distinct exit code."""

from __future__ import annotations

EXIT_FLAG_PARSE = 1
EXIT_MISSING_ROOT = 2
EXIT_NOT_A_DIRECTORY = 3
EXIT_LICENSE_FILE = 4
EXIT_NO_LICENSE = 5
EXIT_EMPTY_LICENSE = 6
EXIT_BLANK_FIRST_LINE = 7
EXIT_SOURCE_IO = 8


class LicenserError(RuntimeError):
    """Base class for fatal licenser errors."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(LicenserError):
    """Bad or missing arguments, or an unusable configuration file."""

    exit_code = EXIT_FLAG_PARSE


class FilesystemError(LicenserError):
    """Path not found, not a directory, or a read/write failure."""

    exit_code = EXIT_SOURCE_IO


class LicenseDetectionError(LicenserError):
    """No license could be detected in the root directory."""

    exit_code = EXIT_NO_LICENSE


class MalformedLicenseError(LicenserError):
    """The license source is empty or does not start with content."""

    exit_code = EXIT_EMPTY_LICENSE


# Created by Dr. Z. Bakhtiyorov
