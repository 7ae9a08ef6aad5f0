# Program: Licenser Config Tests
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""YAML configuration loading and defaults."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from licenser.config import LicenserConfig, load_config, resolve_config
from licenser.errors import UsageError


def test_defaults_without_config_file(tmp_path: Path) -> None:
    cfg = resolve_config(tmp_path)
    assert cfg == LicenserConfig()
    assert cfg.extensions == (".go", ".c", ".cpp", ".h")
    assert cfg.excluded_dirs == (".git",)


def test_root_config_file_is_picked_up(tmp_path: Path) -> None:
    (tmp_path / ".licenser.yaml").write_text("extensions: [.rs]\nexcluded_dirs: [.git, target]\n", encoding="utf-8")
    cfg = resolve_config(tmp_path)
    assert cfg.extensions == (".rs",)
    assert cfg.excluded_dirs == (".git", "target")
    assert cfg.manifest_file == "go.mod"


def test_explicit_config_wins(tmp_path: Path) -> None:
    (tmp_path / ".licenser.yaml").write_text("doc_source: ignored.go\n", encoding="utf-8")
    explicit = tmp_path / "other.yaml"
    explicit.write_text("doc_source: license.go\n", encoding="utf-8")
    assert resolve_config(tmp_path, explicit).doc_source == "license.go"


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == LicenserConfig()


def test_detect_only_boolean(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("detect_only: false\n", encoding="utf-8")
    assert load_config(path).detect_only is False
    path.write_text("detect_only: true\n", encoding="utf-8")
    assert load_config(path).detect_only is True


def test_accepts_matches_suffix_exactly() -> None:
    cfg = LicenserConfig()
    assert cfg.accepts(Path("main.go"))
    assert cfg.accepts(Path("lib/util.h"))
    assert not cfg.accepts(Path("script.py"))
    assert not cfg.accepts(Path("MAIN.GO"))


@pytest.mark.parametrize(
    "text",
    [
        "extensions: .go\n",
        "extensions:\n",
        "manifest_file: 3\n",
        "detect_only: \"false\"\n",
        "detect_only: 1\n",
        "- just\n- a list\n",
        "extensions: [unclosed\n",
    ],
)
def test_invalid_config_is_a_usage_error(tmp_path: Path, text: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(UsageError) as info:
        load_config(path)
    assert info.value.exit_code == 1


def test_missing_config_file_is_a_usage_error(tmp_path: Path) -> None:
    with pytest.raises(UsageError):
        load_config(tmp_path / "missing.yaml")


# Created by Dr. Z. Bakhtiyorov
