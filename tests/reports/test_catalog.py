"""Tests for ReportCatalog."""

from datetime import date
from pathlib import Path

import pytest

from skill_reports.config import ReportsConfig
from skill_reports.errors import UnreadableReportError
from skill_reports.reports.catalog import ReportCatalog
from skill_reports.reports.writer import ReportWriter


def test_list_empty(reports_config: ReportsConfig, skills_repo) -> None:
    catalog = ReportCatalog(reports_config, skills_repo.list_skills())

    assert catalog.list_reports() == []


def test_list_sorted_by_skill_day_sequence(
    reports_config: ReportsConfig, skills_repo, report_day: date
) -> None:
    writer = ReportWriter(reports_config)
    debug = skills_repo.get_skill("debug")
    plan = skills_repo.get_skill("plan")
    writer.write(debug, report_day)
    writer.write(debug, date(2025, 5, 30))
    writer.write(debug, report_day)
    writer.write(plan, report_day)

    reports = ReportCatalog(reports_config, skills_repo.list_skills()).list_reports()

    assert [(r.skill, r.day.isoformat(), r.ordinal) for r in reports] == [
        ("debug", "2025-05-30", 1),
        ("debug", "2025-06-01", 1),
        ("debug", "2025-06-01", 2),
        ("plan", "2025-06-01", 1),
    ]


def test_shared_category_keeps_skills_apart(
    reports_config: ReportsConfig, skills_repo, report_day: date
) -> None:
    writer = ReportWriter(reports_config)
    writer.write(skills_repo.get_skill("plan"), report_day)
    writer.write(skills_repo.get_skill("plan-lite"), report_day)

    catalog = ReportCatalog(reports_config, skills_repo.list_skills())

    assert [r.path.name for r in catalog.list_reports(skill="plan")] == [
        "plan-2025-06-01.md"
    ]
    assert [r.path.name for r in catalog.list_reports(skill="plan-lite")] == [
        "plan-lite-2025-06-01.md"
    ]


def test_filter_by_day_and_ignore_foreign_files(
    reports_config: ReportsConfig, skills_repo, project_root: Path, report_day: date
) -> None:
    directory = project_root / ".claude" / "debug"
    directory.mkdir(parents=True)
    (directory / "debug-2025-06-01.md").write_text("## Fix\n", encoding="utf-8")
    (directory / "debug-2025-06-02.md").write_text("## Fix\n", encoding="utf-8")
    (directory / "notes.md").write_text("scratch", encoding="utf-8")
    (directory / ".debug-2025-06-01-2.md").write_text("hidden", encoding="utf-8")

    catalog = ReportCatalog(reports_config, skills_repo.list_skills())
    reports = catalog.list_reports(skill="debug", day=report_day)

    assert [r.path.name for r in reports] == ["debug-2025-06-01.md"]
    assert reports[0].body == "## Fix\n"


def test_check_reports_missing_sections(
    reports_config: ReportsConfig, skills_repo, project_root: Path, report_day: date
) -> None:
    writer = ReportWriter(reports_config)
    debug = skills_repo.get_skill("debug")
    writer.write(debug, report_day)
    writer.write(debug, report_day, body="## Fix\n", strict=False)

    catalog = ReportCatalog(reports_config, skills_repo.list_skills())
    complete, partial = catalog.list_reports(skill="debug")

    assert catalog.check(complete) == []
    assert "Issue Summary" in catalog.check(partial)
    assert "Fix" not in catalog.check(partial)


def test_undecodable_report_raises(
    reports_config: ReportsConfig, skills_repo, project_root: Path
) -> None:
    directory = project_root / ".claude" / "debug"
    directory.mkdir(parents=True)
    (directory / "debug-2025-06-01.md").write_bytes(b"\xff\xfe bad")

    catalog = ReportCatalog(reports_config, skills_repo.list_skills())

    with pytest.raises(UnreadableReportError) as excinfo:
        catalog.list_reports(skill="debug")

    assert "not valid UTF-8" in str(excinfo.value)
