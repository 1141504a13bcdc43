"""Dated report path resolution.

A report for skill ``base`` on ``day`` lives at ``<dir>/<base>-YYYY-MM-DD.md``.
Further reports on the same day take the suffixes ``-2``, ``-3`` and so on.
Resolution only inspects the filesystem; the caller writes the file.
"""

from __future__ import annotations

import logging
import os
import re
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from skill_reports.constants import FIRST_SEQUENCE, REPORT_DATE_FORMAT, REPORT_SUFFIX
from skill_reports.errors import (
    DirectoryUnwritableError,
    InvalidDateError,
    PathCollisionExhaustedError,
)

logger = logging.getLogger(__name__)

_DAY_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_FILENAME_RE = re.compile(
    r"^(?P<base>.+)-(?P<day>[0-9]{4}-[0-9]{2}-[0-9]{2})(?:-(?P<seq>[1-9][0-9]*))?"
    + re.escape(REPORT_SUFFIX)
    + r"$"
)


def parse_report_day(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DAY_RE.match(value.strip()):
        raise InvalidDateError(value)
    try:
        return datetime.strptime(value.strip(), REPORT_DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def format_report_day(day: object) -> str:
    return parse_report_day(day).strftime(REPORT_DATE_FORMAT)


def report_filename(base: str, day: object, sequence: Optional[int] = None) -> str:
    if not base:
        raise ValueError("Report base name must not be empty")
    if sequence is not None and sequence < FIRST_SEQUENCE:
        raise ValueError(f"Report sequence must be >= {FIRST_SEQUENCE}: {sequence}")
    stem = f"{base}-{format_report_day(day)}"
    if sequence is not None:
        stem = f"{stem}-{sequence}"
    return f"{stem}{REPORT_SUFFIX}"


def parse_report_filename(name: str) -> Optional[tuple[str, date, Optional[int]]]:
    match = _FILENAME_RE.match(name)
    if match is None:
        return None
    try:
        day = parse_report_day(match.group("day"))
    except InvalidDateError:
        return None
    seq_text = match.group("seq")
    sequence = int(seq_text) if seq_text is not None else None
    if sequence is not None and sequence < FIRST_SEQUENCE:
        return None
    return match.group("base"), day, sequence


def _check_directory(directory: Path) -> None:
    existing = directory
    while not existing.exists():
        if existing.parent == existing:
            return
        existing = existing.parent
    if not existing.is_dir():
        raise DirectoryUnwritableError(directory, f"{existing} is not a directory")
    if not os.access(existing, os.W_OK | os.X_OK):
        raise DirectoryUnwritableError(directory, "permission denied")


def resolve_report_path(
    directory: Path,
    base: str,
    day: object,
    max_sequence: Optional[int] = None,
) -> Path:
    """Return the first free report path for ``base`` on ``day``.

    Calling this twice without writing in between returns the same path.
    ``max_sequence`` bounds the search; without it the search is unbounded.
    """
    parsed_day = parse_report_day(day)
    directory = Path(directory)
    _check_directory(directory)

    candidate = directory / report_filename(base, parsed_day)
    if not candidate.exists():
        logger.debug("Resolved %s", candidate)
        return candidate

    sequence = FIRST_SEQUENCE
    while True:
        if max_sequence is not None and sequence > max_sequence:
            raise PathCollisionExhaustedError(directory, max_sequence)
        candidate = directory / report_filename(base, parsed_day, sequence)
        if not candidate.exists():
            logger.debug("Resolved %s after %d collisions", candidate, sequence - 1)
            return candidate
        sequence += 1
