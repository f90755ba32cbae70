"""Resolve archive options from defaults, the project config file and overrides."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

from jsonschema import Draft202012Validator

from project_zipper.constants import (
    CONFIG_FILENAME,
    MAX_COMPRESSION_LEVEL,
    MIN_COMPRESSION_LEVEL,
)
from project_zipper.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    InvalidOptionError,
)
from project_zipper.models import ZipOptions

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


def load_json_schema(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class ProjectConfigRepository:
    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self._validator = Draft202012Validator(load_json_schema(SCHEMA_PATH))

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def load(self) -> dict[str, Any]:
        path = self.config_path
        if not path.is_file():
            return {}
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidJsonFormatError(path, str(exc)) from exc
        if not text.strip():
            return {}
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidJsonFormatError(path, str(exc)) from exc

        error = next(iter(self._validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(path, format_schema_error(error))
        return payload


def validate_options(options: ZipOptions) -> None:
    level = options.compression_level
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidOptionError("compression_level", f"expected an integer, got {level!r}")
    if not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
        raise InvalidOptionError(
            "compression_level",
            f"{level} is outside {MIN_COMPRESSION_LEVEL}-{MAX_COMPRESSION_LEVEL}",
        )
    if not options.output_name or "/" in options.output_name:
        raise InvalidOptionError(
            "output_name", f"expected a plain file name, got {options.output_name!r}"
        )
    if not options.output_path:
        raise InvalidOptionError("output_path", "must not be empty")


def resolve_options(
    root: Path, overrides: Optional[Mapping[str, Any]] = None
) -> ZipOptions:
    merged = ZipOptions().as_dict()
    merged.update(ProjectConfigRepository(root).load())
    merged.update(
        {key: value for key, value in (overrides or {}).items() if value is not None}
    )
    options = ZipOptions(**merged)
    validate_options(options)
    return options
