"""Tests for skills CLI commands."""

from pathlib import Path

from skill_reports.__main__ import cli


def test_skills_list_builtin(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["skills", "list"])

    assert result.exit_code == 0
    for name in ("plan", "plan-lite", "debug", "refactor", "review", "audit"):
        assert name in result.output


def test_skills_list_includes_project_skill(project_root: Path, write_skill, cli_runner) -> None:
    write_skill(project_root / ".claude" / "skills", "triage", "sections:\n  - Summary\n")

    result = cli_runner.invoke(cli, ["skills", "list"])

    assert result.exit_code == 0
    assert "triage" in result.output
    assert "project" in result.output


def test_skills_list_invalid_project_skill(project_root: Path, write_skill, cli_runner) -> None:
    write_skill(project_root / ".claude" / "skills", "broken", "sections: nope\n")

    result = cli_runner.invoke(cli, ["skills", "list"])

    assert result.exit_code != 0
    assert "Invalid skill document" in result.output


def test_skills_show(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["skills", "show", "debug"])

    assert result.exit_code == 0
    assert "Investigation Trace" in result.output
    assert ".claude/debug" in result.output


def test_skills_show_missing(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["skills", "show", "nope"])

    assert result.exit_code != 0
    assert "Skill not found: nope" in result.output


def test_skills_match(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["skills", "match", "use", "review", "skill"])

    assert result.exit_code == 0
    assert "review" in result.output


def test_skills_match_none(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["skills", "match", "hello"])

    assert result.exit_code == 1
    assert "No skill matches" in result.output


def test_skills_match_markup_text(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["skills", "match", "[/x]"])

    assert result.exit_code == 1
    assert "No skill matches: [/x]" in result.output


def test_skills_list_project_skill_with_markup(project_root: Path, write_skill, cli_runner) -> None:
    write_skill(
        project_root / ".claude" / "skills",
        "odd",
        "description: '[/bold] closes nothing'\nsections:\n  - '[b]Summary'\n",
    )

    listed = cli_runner.invoke(cli, ["skills", "list"])
    shown = cli_runner.invoke(cli, ["skills", "show", "odd"])

    assert listed.exit_code == 0
    assert "odd" in listed.output
    assert shown.exit_code == 0
    assert "[b]Summary" in shown.output
