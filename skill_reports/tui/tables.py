from pathlib import Path

from rich.markup import escape
from rich.table import Column, Table

from skill_reports.reports.models import ReportArtifact
from skill_reports.reports.resolver import format_report_day
from skill_reports.skills.models import SkillDocument
from skill_reports.skills.repository import BUILTIN_SKILLS_DIR
from skill_reports.tui.enums import CHECK_STATUS_STYLE, ReportCheckStatus, UIStyle
from skill_reports.utils import display_path, is_under


class SkillsTable:
    @staticmethod
    def skills_table(skills: list[SkillDocument]) -> Table:
        table = Table(
            Column(header="Skill", width=12),
            Column(header="Category", width=12),
            Column(header="Sections", width=9, justify="right"),
            Column(header="Source", width=9),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for skill in skills:
            builtin = is_under(skill.source_path, BUILTIN_SKILLS_DIR)
            source = "builtin" if builtin else "project"
            style = UIStyle.DIM.value if builtin else UIStyle.CYAN.value
            table.add_row(
                escape(skill.name),
                escape(skill.category),
                str(len(skill.sections)),
                f"[{style}]{source}[/{style}]",
                escape(skill.metadata.description),
            )
        return table

    @staticmethod
    def detail_block(skill: SkillDocument, output_dir: str):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Name", escape(skill.name))
        table.add_row("Description", escape(skill.metadata.description) or "-")
        table.add_row("Output", escape(output_dir))
        table.add_row("Triggers", escape(", ".join(skill.triggers)) or "-")
        table.add_row(
            "Sections",
            "\n".join(
                f"{index}. {escape(section)}"
                for index, section in enumerate(skill.sections, start=1)
            )
            or "-",
        )
        return table


class ReportsTable:
    @staticmethod
    def reports_table(reports: list[ReportArtifact], root: Path) -> Table:
        table = Table(
            Column(header="Skill", width=12),
            Column(header="Date", width=12),
            Column(header="Seq", width=5, justify="right"),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for report in reports:
            table.add_row(
                escape(report.skill),
                format_report_day(report.day),
                str(report.ordinal),
                escape(display_path(report.path, root)),
            )
        return table

    @staticmethod
    def check_table(
        results: list[tuple[ReportArtifact, list[str]]], root: Path
    ) -> Table:
        table = Table(
            Column(header="Report", overflow="ellipsis", max_width=58),
            Column(header="Status", width=12),
            Column(header="Missing", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for report, missing in results:
            status = (
                ReportCheckStatus.INCOMPLETE if missing else ReportCheckStatus.COMPLETE
            )
            style = CHECK_STATUS_STYLE.get(status, UIStyle.WHITE.value)
            table.add_row(
                escape(display_path(report.path, root)),
                f"[{style}]{status.value}[/{style}]",
                escape(", ".join(missing)),
            )
        return table
