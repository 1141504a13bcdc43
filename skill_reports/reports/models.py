"""Report artifact models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ReportArtifact:
    skill: str
    day: date
    path: Path
    sequence: Optional[int] = None
    body: str = ""

    @property
    def ordinal(self) -> int:
        """1 for the unsuffixed report, else the sequence number."""
        return self.sequence if self.sequence is not None else 1

    def sort_key(self) -> tuple[str, date, int]:
        return (self.skill, self.day, self.ordinal)
