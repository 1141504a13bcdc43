import sys
from datetime import date
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SKILL_REPORTS_ROOT", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def report_day() -> date:
    return date(2025, 6, 1)


@pytest.fixture
def skills_repo(project_root: Path):
    from skill_reports.skills.repository import SkillsRepository

    return SkillsRepository(project_root=project_root)


@pytest.fixture
def debug_skill(skills_repo):
    return skills_repo.get_skill("debug")


@pytest.fixture
def reports_config(project_root: Path):
    from skill_reports.config import ReportsConfig

    return ReportsConfig(project_root=project_root)


@pytest.fixture
def write_skill():
    def _write(directory: Path, name: str, frontmatter: str, body: str = "Body.\n") -> Path:
        path = directory / name / "SKILL.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{frontmatter}---\n\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner(project_root: Path) -> CliRunner:
    class ProjectCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("SKILL_REPORTS_ROOT", str(project_root))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return ProjectCliRunner()
