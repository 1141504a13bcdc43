from typing import Final


PROJECT_DIRNAME: Final[str] = ".claude"
SKILLS_DIRNAME: Final[str] = "skills"
SKILL_FILENAME: Final[str] = "SKILL.md"
CONFIG_FILENAME: Final[str] = "skill-reports.json"

REPORT_SUFFIX: Final[str] = ".md"
REPORT_DATE_FORMAT: Final[str] = "%Y-%m-%d"
FIRST_SEQUENCE: Final[int] = 2

ROOT_ENVVAR: Final[str] = "SKILL_REPORTS_ROOT"

SECTION_PLACEHOLDER: Final[str] = "_TBD_"
