"""Skill discovery across builtin and project tiers."""

from __future__ import annotations

import logging
from pathlib import Path

from skill_reports.constants import PROJECT_DIRNAME, SKILL_FILENAME, SKILLS_DIRNAME
from skill_reports.errors import SkillNotFoundError
from skill_reports.skills.models import SkillDocument
from skill_reports.skills.parser import parse_skill
from skill_reports.utils import normalize_phrase

logger = logging.getLogger(__name__)

BUILTIN_SKILLS_DIR = Path(__file__).resolve().parent / "builtin"


class SkillsRepository:
    """Builtin skills, overridden by name from ``<root>/.claude/skills``."""

    def __init__(
        self, project_root: Path | None = None, builtin_dir: Path | None = None
    ) -> None:
        self._builtin_dir = builtin_dir or BUILTIN_SKILLS_DIR
        self._project_dir = (
            project_root / PROJECT_DIRNAME / SKILLS_DIRNAME
            if project_root is not None
            else None
        )

    @property
    def project_dir(self) -> Path | None:
        return self._project_dir

    def _skill_sources(self, directory: Path) -> list[Path]:
        if not directory.exists():
            return []
        sources: list[Path] = []
        for child in sorted(directory.iterdir()):
            if child.name.startswith("."):
                continue
            if child.is_dir() and (child / SKILL_FILENAME).is_file():
                sources.append(child / SKILL_FILENAME)
            elif child.is_file() and child.suffix == ".md":
                sources.append(child)
        return sources

    def list_skills(self) -> list[SkillDocument]:
        skills: dict[str, SkillDocument] = {}
        tiers = [self._builtin_dir]
        if self._project_dir is not None:
            tiers.append(self._project_dir)
        for directory in tiers:
            for source in self._skill_sources(directory):
                skill = parse_skill(source)
                if skill.name in skills:
                    logger.debug("Skill %s overridden by %s", skill.name, source)
                skills[skill.name] = skill
        logger.debug("Discovered %d skills", len(skills))
        return [skills[name] for name in sorted(skills)]

    def get_skill(self, name: str) -> SkillDocument:
        for skill in self.list_skills():
            if skill.name == name:
                return skill
        raise SkillNotFoundError(name)

    def match_skill(self, text: str) -> SkillDocument | None:
        """Return the skill whose invocation phrase occurs in ``text``.

        Matching ignores case and collapses whitespace. When several phrases
        match, the longest one wins so "use plan-lite skill" picks plan-lite
        over plan.
        """
        haystack = normalize_phrase(text)
        if not haystack:
            return None

        best: tuple[int, SkillDocument] | None = None
        for skill in self.list_skills():
            for trigger in skill.triggers:
                phrase = normalize_phrase(trigger)
                if not phrase or phrase not in haystack:
                    continue
                if best is None or len(phrase) > best[0]:
                    best = (len(phrase), skill)
        return best[1] if best is not None else None
