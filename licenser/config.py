# Program: Licenser Config Utilities
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Run configuration with optional YAML overrides."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .errors import UsageError

CONFIG_FILENAME = ".licenser.yaml"
DEFAULT_EXTENSIONS = (".go", ".c", ".cpp", ".h")
DEFAULT_EXCLUDED_DIRS = (".git",)


@dataclass
class LicenserConfig:
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    manifest_file: str = "go.mod"
    doc_source: str = "doc.go"
    detect_only: bool = False

    def accepts(self, path: Path) -> bool:
        return path.suffix in self.extensions


def _str_tuple(data: dict, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = data.get(key, default)
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise UsageError(f"Config key '{key}' must be a list of strings")
    return tuple(value)


def _str(data: dict, key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise UsageError(f"Config key '{key}' must be a non-empty string")
    return value


def _bool(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise UsageError(f"Config key '{key}' must be true or false")
    return value


def load_config(path: Path) -> LicenserConfig:
    """Load YAML config with defaults for every missing key."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError) as exc:
        raise UsageError(f"Error reading config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise UsageError(f"Invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise UsageError(f"Config file {path} must contain a mapping")

    return LicenserConfig(
        extensions=_str_tuple(data, "extensions", DEFAULT_EXTENSIONS),
        excluded_dirs=_str_tuple(data, "excluded_dirs", DEFAULT_EXCLUDED_DIRS),
        manifest_file=_str(data, "manifest_file", "go.mod"),
        doc_source=_str(data, "doc_source", "doc.go"),
        detect_only=_bool(data, "detect_only", False),
    )


def resolve_config(root: Path, config_path: Optional[Path] = None) -> LicenserConfig:
    """Pick the explicit config file, else `.licenser.yaml` in root, else defaults."""
    if config_path is not None:
        return load_config(config_path)
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate)
    return LicenserConfig()


# Created by Dr. Z. Bakhtiyorov
