from pathlib import Path


class SkillReportsError(Exception):
    """Base user-facing application error."""


class ReportFileError(SkillReportsError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class DirectoryUnwritableError(ReportFileError):
    def __init__(self, path: Path, detail: str = "") -> None:
        self.detail = detail
        message = "Output directory is not writable"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(path=path, message=message)


class PathCollisionExhaustedError(ReportFileError):
    def __init__(self, path: Path, max_sequence: int) -> None:
        self.max_sequence = max_sequence
        super().__init__(
            path=path, message=f"No free report sequence up to {max_sequence}"
        )


class InvalidReportError(ReportFileError):
    def __init__(self, path: Path, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            path=path, message=f"Report is missing sections ({', '.join(missing)})"
        )


class UnreadableReportError(ReportFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read report ({detail})")


class InvalidSkillError(ReportFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid skill document ({detail})")


class InvalidJsonFormatError(ReportFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(ReportFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class InvalidDateError(SkillReportsError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid report date, expected YYYY-MM-DD: {value!r}")


class SkillNotFoundError(SkillReportsError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Skill not found: {name}")
