"""Existing report artifacts on disk."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from skill_reports.config import ReportsConfig
from skill_reports.errors import UnreadableReportError
from skill_reports.reports.models import ReportArtifact
from skill_reports.reports.resolver import parse_report_filename
from skill_reports.reports.writer import missing_sections
from skill_reports.skills.models import SkillDocument


def _read_report(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise UnreadableReportError(path, "not valid UTF-8") from exc
    except OSError as exc:
        raise UnreadableReportError(path, exc.strerror or str(exc)) from exc


class ReportCatalog:
    def __init__(self, config: ReportsConfig, skills: list[SkillDocument]) -> None:
        self.config = config
        self._skills = {skill.name: skill for skill in skills}

    def list_reports(
        self, skill: Optional[str] = None, day: Optional[date] = None
    ) -> list[ReportArtifact]:
        names = [skill] if skill is not None else sorted(self._skills)
        reports: list[ReportArtifact] = []
        for name in names:
            document = self._skills.get(name)
            if document is None:
                continue
            directory = self.config.output_dir(document)
            if not directory.is_dir():
                continue
            for child in directory.iterdir():
                if child.name.startswith(".") or not child.is_file():
                    continue
                parsed = parse_report_filename(child.name)
                if parsed is None:
                    continue
                base, report_day, sequence = parsed
                if base != name:
                    continue
                if day is not None and report_day != day:
                    continue
                reports.append(
                    ReportArtifact(
                        skill=name,
                        day=report_day,
                        path=child,
                        sequence=sequence,
                        body=_read_report(child),
                    )
                )
        return sorted(reports, key=lambda item: item.sort_key())

    def check(self, artifact: ReportArtifact) -> list[str]:
        document = self._skills.get(artifact.skill)
        if document is None:
            return []
        return missing_sections(document, artifact.body)
