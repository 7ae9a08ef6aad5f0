# Program: Licenser Report Models
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Pydantic models for per-file status and run summaries."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

Status = Literal["ok", "updated", "ignored"]

_PREFIXES = {"ok": "OK", "updated": "UPDATED", "ignored": "IGNORED:"}


class FileReport(BaseModel):
    path: str
    status: Status

    def line(self) -> str:
        return f"{_PREFIXES[self.status]} {self.path}"


class RunSummary(BaseModel):
    reports: List[FileReport] = []

    @property
    def scanned(self) -> int:
        return sum(1 for r in self.reports if r.status != "ignored")

    @property
    def updated(self) -> int:
        return sum(1 for r in self.reports if r.status == "updated")

    @property
    def ignored(self) -> int:
        return sum(1 for r in self.reports if r.status == "ignored")

    def line(self) -> str:
        return f"Scanned {self.scanned} files, updated {self.updated}, ignored {self.ignored}."


# Created by Dr. Z. Bakhtiyorov
