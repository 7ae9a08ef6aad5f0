# Program: Licenser Package Init
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Licenser keeps the license header of C-style source files up to date."""

from .config import LicenserConfig, load_config, resolve_config
from .detect import detect_license, read_license_file, resolve_license
from .driver import Licenser, check_root
from .errors import (
    FilesystemError,
    LicenseDetectionError,
    LicenserError,
    MalformedLicenseError,
    UsageError,
)
from .events import FileReport, RunSummary
from .extractor import extract_license
from .rewriter import RewriteResult, render_header, rewrite, scan_header

__all__ = [
    "FileReport",
    "FilesystemError",
    "LicenseDetectionError",
    "Licenser",
    "LicenserConfig",
    "LicenserError",
    "MalformedLicenseError",
    "RewriteResult",
    "RunSummary",
    "UsageError",
    "check_root",
    "detect_license",
    "extract_license",
    "load_config",
    "read_license_file",
    "render_header",
    "resolve_config",
    "resolve_license",
    "rewrite",
    "scan_header",
]


# Created by Dr. Z. Bakhtiyorov
