"""Render report bodies and write them to their dated paths."""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path
from typing import Mapping, Optional

from skill_reports.config import ReportsConfig
from skill_reports.constants import SECTION_PLACEHOLDER
from skill_reports.errors import DirectoryUnwritableError, InvalidReportError
from skill_reports.reports.models import ReportArtifact
from skill_reports.reports.resolver import (
    format_report_day,
    parse_report_day,
    parse_report_filename,
    resolve_report_path,
)
from skill_reports.skills.models import SkillDocument

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^ {0,3}#{1,6}\s+(?P<text>.+?)(?:\s+#+)?\s*$")
_FENCE_MARKERS = ("```", "~~~")


def ensure_directory(directory: Path) -> None:
    if directory.exists() and not directory.is_dir():
        raise DirectoryUnwritableError(directory, "not a directory")
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryUnwritableError(directory, exc.strerror or str(exc)) from exc


def _normalize_heading(text: str) -> str:
    return " ".join(text.casefold().split())


def body_headings(body: str) -> list[str]:
    headings: list[str] = []
    fence: Optional[str] = None
    for line in body.splitlines():
        marker = line.lstrip()[:3]
        if marker in _FENCE_MARKERS:
            if fence is None:
                fence = marker
            elif fence == marker:
                fence = None
            continue
        if fence is not None:
            continue
        match = _HEADING_RE.match(line)
        if match:
            headings.append(match.group("text"))
    return headings


def missing_sections(skill: SkillDocument, body: str) -> list[str]:
    present = {_normalize_heading(text) for text in body_headings(body)}
    return [
        section
        for section in skill.sections
        if _normalize_heading(section) not in present
    ]


def render_report(
    skill: SkillDocument,
    day: object,
    sections: Optional[Mapping[str, str]] = None,
    title: Optional[str] = None,
) -> str:
    filled = {
        _normalize_heading(key): value.strip() for key, value in (sections or {}).items()
    }
    lines = [f"# {title or skill.title} - {format_report_day(day)}", ""]
    for section in skill.sections:
        lines.append(f"## {section}")
        lines.append("")
        lines.append(filled.get(_normalize_heading(section)) or SECTION_PLACEHOLDER)
        lines.append("")
    return "\n".join(lines)


class ReportWriter:
    def __init__(self, config: ReportsConfig) -> None:
        self.config = config

    def output_dir(self, skill: SkillDocument) -> Path:
        return self.config.output_dir(skill)

    def preview_path(self, skill: SkillDocument, day: object) -> Path:
        return resolve_report_path(self.output_dir(skill), skill.name, day)

    def write(
        self,
        skill: SkillDocument,
        day: object,
        body: Optional[str] = None,
        sections: Optional[Mapping[str, str]] = None,
        title: Optional[str] = None,
        strict: bool = True,
    ) -> ReportArtifact:
        parsed_day: date = parse_report_day(day)
        if body is None:
            body = render_report(skill, parsed_day, sections=sections, title=title)

        directory = self.output_dir(skill)
        if strict:
            missing = missing_sections(skill, body)
            if missing:
                raise InvalidReportError(directory, missing)

        ensure_directory(directory)
        while True:
            path = resolve_report_path(directory, skill.name, parsed_day)
            try:
                with path.open("x", encoding="utf-8") as handle:
                    handle.write(body)
                    if not body.endswith("\n"):
                        handle.write("\n")
            except FileExistsError:
                logger.debug("Lost race for %s, resolving again", path)
                continue
            except PermissionError as exc:
                raise DirectoryUnwritableError(directory, "permission denied") from exc
            break

        parsed = parse_report_filename(path.name)
        sequence = parsed[2] if parsed is not None else None
        logger.debug("Wrote %s report to %s", skill.name, path)
        return ReportArtifact(
            skill=skill.name, day=parsed_day, path=path, sequence=sequence, body=body
        )
