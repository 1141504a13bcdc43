"""Parse and serialize skill documents with YAML frontmatter."""

from __future__ import annotations

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator

from skill_reports.constants import SKILL_FILENAME
from skill_reports.errors import InvalidSkillError
from skill_reports.skills.models import SkillDocument, SkillMetadata

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)
_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


@lru_cache(maxsize=1)
def _validator() -> Draft7Validator:
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft7Validator(schema)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_skill_frontmatter(raw: Any, path: Path) -> None:
    if not isinstance(raw, dict):
        raise InvalidSkillError(path, "frontmatter must be a mapping")
    error = next(iter(_validator().iter_errors(raw)), None)
    if error is not None:
        raise InvalidSkillError(path, format_schema_error(error))


def _unique(items: list[Any]) -> list[str]:
    seen: list[str] = []
    for item in items:
        text = str(item).strip()
        if text and text not in seen:
            seen.append(text)
    return seen


def parse_skill(path: Path) -> SkillDocument:
    text = path.read_text(encoding="utf-8")
    name = path.parent.name if path.name == SKILL_FILENAME else path.stem

    match = _FRONTMATTER_RE.match(text)
    if match:
        try:
            raw = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError as exc:
            raise InvalidSkillError(path, f"bad YAML: {exc}") from exc
        content = text[match.end() :]
    else:
        raw = {}
        content = text

    validate_skill_frontmatter(raw, path)

    metadata = SkillMetadata(
        name=str(raw.get("name", name)),
        description=str(raw.get("description", "")),
        category=str(raw.get("category", "")),
        triggers=_unique(raw.get("triggers", [])),
        sections=_unique(raw.get("sections", [])),
    )
    return SkillDocument(
        name=metadata.name, source_path=path, metadata=metadata, content=content
    )


def serialize_skill(skill: SkillDocument) -> str:
    fm: dict = {}
    if skill.metadata.name:
        fm["name"] = skill.metadata.name
    if skill.metadata.description:
        fm["description"] = skill.metadata.description
    if skill.metadata.category:
        fm["category"] = skill.metadata.category
    if skill.metadata.triggers:
        fm["triggers"] = list(skill.metadata.triggers)
    if skill.metadata.sections:
        fm["sections"] = list(skill.metadata.sections)

    parts: list[str] = []
    if fm:
        parts.append("---")
        parts.append(yaml.dump(fm, default_flow_style=False, sort_keys=False).rstrip())
        parts.append("---")
        parts.append("")

    parts.append(skill.content)
    return "\n".join(parts)
