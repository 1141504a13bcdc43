import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from skill_reports.config import ConfigRepository, ReportsConfig
from skill_reports.constants import ROOT_ENVVAR
from skill_reports.errors import SkillReportsError, UnreadableReportError
from skill_reports.reports.catalog import ReportCatalog
from skill_reports.reports.resolver import parse_report_day
from skill_reports.reports.writer import ReportWriter
from skill_reports.skills.repository import SkillsRepository
from skill_reports.tui import ReportConsoleUI
from skill_reports.utils import compact_home_paths_in_text, display_path


class AppContext:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.skills = SkillsRepository(project_root=root)

    def load_config(self) -> ReportsConfig:
        return ConfigRepository(self.root).load()


def _date_option() -> Callable:
    return click.option(
        "--date",
        "day",
        default=None,
        metavar="YYYY-MM-DD",
        help="Report date (defaults to today).",
    )


def _resolve_day(value: Optional[str]) -> date:
    if value is None:
        return date.today()
    return parse_report_day(value)


def _read_body(body) -> Optional[str]:
    if body is None:
        return None
    try:
        return body.read()
    except UnicodeDecodeError as exc:
        raise UnreadableReportError(Path(body.name), "not valid UTF-8") from exc


def _fail(exc: SkillReportsError) -> click.ClickException:
    return click.ClickException(compact_home_paths_in_text(str(exc)))


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=ROOT_ENVVAR,
    default=None,
    help="Project root holding the .claude directory.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, root: Optional[Path], verbose: bool) -> None:
    """Skill templates and dated report files."""
    _configure_logging(verbose)
    ctx.obj = AppContext((root or Path.cwd()).expanduser().resolve())


@cli.group(help="Inspect skill documents.")
def skills() -> None:
    pass


@skills.command("list", help="List builtin and project skills.")
@click.pass_obj
def skills_list(obj: AppContext) -> None:
    ui = ReportConsoleUI(Console())
    try:
        items = obj.skills.list_skills()
    except SkillReportsError as exc:
        raise _fail(exc)
    ui.render_skills(items)


@skills.command("show", help="Show a skill's triggers and required sections.")
@click.argument("name")
@click.pass_obj
def skills_show(obj: AppContext, name: str) -> None:
    ui = ReportConsoleUI(Console())
    try:
        skill = obj.skills.get_skill(name)
        config = obj.load_config()
    except SkillReportsError as exc:
        raise _fail(exc)
    ui.render_skill(skill, display_path(config.output_dir(skill), obj.root))


@skills.command("match", help="Find the skill a free-text request invokes.")
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def skills_match(obj: AppContext, text: tuple[str, ...]) -> None:
    ui = ReportConsoleUI(Console())
    phrase = " ".join(text)
    try:
        skill = obj.skills.match_skill(phrase)
    except SkillReportsError as exc:
        raise _fail(exc)
    ui.render_match(phrase, skill)
    if skill is None:
        raise click.exceptions.Exit(1)


@cli.group(help="Resolve, write and check dated reports.")
def report() -> None:
    pass


@report.command("path", help="Print the next free report path without writing.")
@click.argument("skill_name")
@_date_option()
@click.pass_obj
def report_path(obj: AppContext, skill_name: str, day: Optional[str]) -> None:
    try:
        skill = obj.skills.get_skill(skill_name)
        writer = ReportWriter(obj.load_config())
        path = writer.preview_path(skill, _resolve_day(day))
    except SkillReportsError as exc:
        raise _fail(exc)
    click.echo(display_path(path, obj.root))


@report.command("new", help="Write a report, using a skeleton when no body is given.")
@click.argument("skill_name")
@_date_option()
@click.option(
    "--body",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Markdown body file, or - for stdin.",
)
@click.option("--title", default=None, help="Title for the generated skeleton.")
@click.option(
    "--strict/--no-strict",
    default=True,
    help="Reject bodies missing the skill's required sections.",
)
@click.pass_obj
def report_new(
    obj: AppContext,
    skill_name: str,
    day: Optional[str],
    body,
    title: Optional[str],
    strict: bool,
) -> None:
    ui = ReportConsoleUI(Console())
    try:
        text = _read_body(body)
        skill = obj.skills.get_skill(skill_name)
        writer = ReportWriter(obj.load_config())
        artifact = writer.write(
            skill, _resolve_day(day), body=text, title=title, strict=strict
        )
    except SkillReportsError as exc:
        raise _fail(exc)
    ui.render_report_written(artifact, obj.root)


@report.command("list", help="List existing reports.")
@click.argument("skill_name", required=False)
@_date_option()
@click.pass_obj
def report_list(obj: AppContext, skill_name: Optional[str], day: Optional[str]) -> None:
    ui = ReportConsoleUI(Console())
    try:
        if skill_name is not None:
            obj.skills.get_skill(skill_name)
        catalog = ReportCatalog(obj.load_config(), obj.skills.list_skills())
        reports = catalog.list_reports(
            skill=skill_name, day=parse_report_day(day) if day else None
        )
    except SkillReportsError as exc:
        raise _fail(exc)
    ui.render_reports(reports, obj.root)


@report.command("check", help="Check reports for the skill's required sections.")
@click.argument("skill_name", required=False)
@click.pass_obj
def report_check(obj: AppContext, skill_name: Optional[str]) -> None:
    ui = ReportConsoleUI(Console())
    try:
        if skill_name is not None:
            obj.skills.get_skill(skill_name)
        catalog = ReportCatalog(obj.load_config(), obj.skills.list_skills())
        results = [
            (artifact, catalog.check(artifact))
            for artifact in catalog.list_reports(skill=skill_name)
        ]
    except SkillReportsError as exc:
        raise _fail(exc)
    ui.render_check(results, obj.root)
    if any(missing for _, missing in results):
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
