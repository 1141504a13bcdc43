import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from skill_reports.constants import CONFIG_FILENAME, PROJECT_DIRNAME
from skill_reports.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from skill_reports.skills.models import SkillDocument
from skill_reports.skills.parser import format_schema_error
from skill_reports.utils import read_json_safe

_SCHEMA_PATH = Path(__file__).resolve().parent / "config_schema.json"


@dataclass(frozen=True)
class ReportsConfig:
    project_root: Path
    reports_dir: str = PROJECT_DIRNAME
    categories: dict[str, str] = field(default_factory=dict)

    @property
    def reports_root(self) -> Path:
        return self.project_root / self.reports_dir

    def category_for(self, skill: SkillDocument) -> str:
        return self.categories.get(skill.name, skill.category)

    def output_dir(self, skill: SkillDocument) -> Path:
        return self.reports_root / self.category_for(skill)


class ConfigRepository:
    def __init__(self, project_root: Path) -> None:
        self.project_root = project_root
        self._validator = Draft7Validator(
            json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
        )

    @property
    def config_path(self) -> Path:
        return self.project_root / PROJECT_DIRNAME / CONFIG_FILENAME

    def validate(self, payload: Any) -> None:
        error = next(iter(self._validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(self.config_path, format_schema_error(error))

    def load(self) -> ReportsConfig:
        payload, error = read_json_safe(self.config_path)
        if error is not None:
            raise InvalidJsonFormatError(self.config_path, error)
        if payload is None:
            return ReportsConfig(project_root=self.project_root)

        self.validate(payload)
        return ReportsConfig(
            project_root=self.project_root,
            reports_dir=payload.get("reports_dir", PROJECT_DIRNAME),
            categories=dict(payload.get("categories", {})),
        )
