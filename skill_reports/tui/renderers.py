from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from skill_reports.reports.models import ReportArtifact
from skill_reports.skills.models import SkillDocument
from skill_reports.tui.enums import UIStyle
from skill_reports.tui.sections import UISection
from skill_reports.tui.tables import ReportsTable, SkillsTable
from skill_reports.utils import display_path


class ReportConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_skills(self, skills: list[SkillDocument]) -> None:
        if not skills:
            self.console.print(
                UISection.note("skills", "No skills found.", style=UIStyle.YELLOW.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "skills", SkillsTable.skills_table(skills), style=UIStyle.BLUE.value
            )
        )

    def render_skill(self, skill: SkillDocument, output_dir: str) -> None:
        self.console.print(
            UISection.wrap(
                f"skill: {escape(skill.name)}",
                SkillsTable.detail_block(skill, output_dir),
                style=UIStyle.CYAN.value,
            )
        )

    def render_match(self, text: str, skill: Optional[SkillDocument]) -> None:
        if skill is None:
            self.console.print(
                UISection.note(
                    "match",
                    f"No skill matches: {escape(text)}",
                    style=UIStyle.YELLOW.value,
                )
            )
            return
        self.console.print(
            UISection.note(
                "match",
                f"Matched skill: [bold]{escape(skill.name)}[/bold]",
                style=UIStyle.GREEN.value,
            )
        )

    def render_report_written(self, report: ReportArtifact, root: Path) -> None:
        self.console.print(
            UISection.note(
                "report",
                f"Report written: [bold]{escape(report.skill)}[/bold]\n"
                f"{escape(display_path(report.path, root))}",
                style=UIStyle.GREEN.value,
            )
        )

    def render_reports(self, reports: list[ReportArtifact], root: Path) -> None:
        if not reports:
            self.console.print(
                UISection.note(
                    "reports", "No reports found.", style=UIStyle.YELLOW.value
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "reports",
                ReportsTable.reports_table(reports, root),
                style=UIStyle.BLUE.value,
            )
        )

    def render_check(
        self, results: list[tuple[ReportArtifact, list[str]]], root: Path
    ) -> None:
        if not results:
            self.console.print(
                UISection.note(
                    "check", "No reports found.", style=UIStyle.YELLOW.value
                )
            )
            return
        failed = any(missing for _, missing in results)
        self.console.print(
            UISection.wrap(
                "check",
                ReportsTable.check_table(results, root),
                style=UIStyle.RED.value if failed else UIStyle.GREEN.value,
            )
        )
