"""Skill document models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SkillMetadata:
    name: str = ""
    description: str = ""
    category: str = ""
    triggers: list[str] = field(default_factory=list)
    sections: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SkillDocument:
    name: str
    source_path: Path
    metadata: SkillMetadata
    content: str

    @property
    def category(self) -> str:
        return self.metadata.category or self.name

    @property
    def sections(self) -> list[str]:
        return list(self.metadata.sections)

    @property
    def triggers(self) -> list[str]:
        return list(self.metadata.triggers)

    @property
    def title(self) -> str:
        return self.name.replace("-", " ").title()
