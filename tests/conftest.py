# Program: Licenser Test Fixtures
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

DOC_GO = """// Copyright 2022 Someone. All rights reserved.
// Use of this source code is governed by a BSD-style
// license that can be found in the LICENSE file.
//

// Package demo does nothing useful.
package demo
"""


@pytest.fixture()
def go_project(tmp_path: Path) -> Path:
    """A small Go project whose doc.go carries the canonical license."""
    (tmp_path / "go.mod").write_text("module example.com/demo\n", encoding="utf-8")
    (tmp_path / "doc.go").write_text(DOC_GO, encoding="utf-8")
    (tmp_path / "main.go").write_text("// Old license\n\npackage demo\n", encoding="utf-8")
    (tmp_path / "tags.go").write_text("//go:build linux\npackage demo\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("# demo\n", encoding="utf-8")
    (tmp_path / "native").mkdir()
    (tmp_path / "native" / "lib.c").write_text("int x;\n", encoding="utf-8")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "hook.c").write_text("int y;\n", encoding="utf-8")
    return tmp_path


# Created by Dr. Z. Bakhtiyorov
