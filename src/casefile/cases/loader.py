"""Build a validated Case from raw case records and case files."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError
import yaml

from casefile import config
from casefile.domain.errors import (
    DuplicateFinalChoiceId,
    DuplicateInterviewId,
    EmptyFinalChoiceList,
    MalformedCaseData,
)
from casefile.domain.models import Case, FinalChoice, InterviewEntry
from casefile.domain.rules import first_duplicate

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = ("title", "victim", "summary", "clue")
_OPTIONAL_TEXT = ("case_id", "twist", "objective")
_YAML_SUFFIXES = {".yml", ".yaml"}


def _describe(exc: ValidationError, prefix: str = "") -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    if prefix:
        location = f"{prefix}.{location}" if location else prefix
    return f"{location or 'case'}: {error.get('msg', 'invalid value')}"


def _require_sequence(raw: Mapping[str, Any], key: str, default: Any = None) -> Sequence[Any]:
    value = raw.get(key, default)
    if value is None:
        raise MalformedCaseData(f"Case field '{key}' is required.")
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedCaseData(f"Case field '{key}' must be a list.")
    return value


def _parse_entries(items: Sequence[Any], key: str, model: type[BaseModel]) -> list[Any]:
    entries = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise MalformedCaseData(f"{key}[{index}] must be a record.")
        try:
            entries.append(model.model_validate(item))
        except ValidationError as exc:
            raise MalformedCaseData(_describe(exc, f"{key}[{index}]")) from exc
    return entries


def _parse_companion(raw: Mapping[str, Any]) -> tuple[str, ...]:
    lines = _require_sequence(raw, "companion", default=())
    for index, line in enumerate(lines):
        if not isinstance(line, str):
            raise MalformedCaseData(f"companion[{index}] must be a string.")
    return tuple(lines)


def _parse_interviews(raw: Mapping[str, Any]) -> tuple[InterviewEntry, ...]:
    entries = _parse_entries(_require_sequence(raw, "interviews"), "interviews", InterviewEntry)
    duplicate = first_duplicate(entry.id for entry in entries)
    if duplicate is not None:
        raise DuplicateInterviewId(duplicate)
    return tuple(entries)


def _parse_final_choices(raw: Mapping[str, Any]) -> tuple[FinalChoice, ...]:
    items = _require_sequence(raw, "final")
    if not items:
        raise EmptyFinalChoiceList()
    choices = _parse_entries(items, "final", FinalChoice)
    duplicate = first_duplicate(choice.id for choice in choices)
    if duplicate is not None:
        raise DuplicateFinalChoiceId(duplicate)
    return tuple(choices)


def load_case(raw: Mapping[str, Any], case_id: str | None = None) -> Case:
    """Validate a raw case record and return the frozen Case.

    Raises a CaseDataError subclass on any problem; nothing is returned
    for partially valid input. ``case_id`` is used when the record does
    not name itself.
    """
    if not isinstance(raw, Mapping):
        raise MalformedCaseData("Case data must be a record.")
    for key in _REQUIRED_TEXT:
        value = raw.get(key)
        if not isinstance(value, str) or not value.strip():
            raise MalformedCaseData(f"Case field '{key}' must be a non-empty string.")

    data: dict[str, Any] = {key: raw[key] for key in _REQUIRED_TEXT}
    for key in _OPTIONAL_TEXT:
        if raw.get(key) is not None:
            data[key] = raw[key]
    if case_id and "case_id" not in data:
        data["case_id"] = case_id
    data["companion_lines"] = _parse_companion(raw)
    data["interviews"] = _parse_interviews(raw)
    data["final_choices"] = _parse_final_choices(raw)

    try:
        case = Case.model_validate(data)
    except ValidationError as exc:
        raise MalformedCaseData(_describe(exc)) from exc
    logger.info(
        "Loaded case %s: %d interviews, %d final choices.",
        case.case_id,
        len(case.interviews),
        len(case.final_choices),
    )
    return case


def read_case_data(path: Path) -> dict[str, Any]:
    """Read a JSON or YAML case file into its raw record."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedCaseData(f"Cannot read case file {path}: {exc}") from exc
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise MalformedCaseData(f"Cannot parse case file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedCaseData(f"Case file {path} must contain a single record.")
    return data


def load_case_file(path: Path) -> Case:
    path = Path(path)
    logger.debug("Reading case file %s", path)
    return load_case(read_case_data(path), case_id=path.stem)


@lru_cache(maxsize=1)
def load_default_case() -> Case:
    return load_case_file(config.DEFAULT_CASE_PATH)
