from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from project_zipper.constants import (
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_OUTPUT_PATH,
)


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


class EntryOutcome(str, Enum):
    ADDED = "added"
    HIDDEN = "hidden"
    MISSING = "missing"
    DIRECTORY = "directory"
    OUTPUT = "output"
    FAILED = "failed"


@dataclass(frozen=True)
class ZipOptions:
    output_path: str = DEFAULT_OUTPUT_PATH
    output_name: str = DEFAULT_OUTPUT_NAME
    include_hidden: bool = False
    compression_level: int = DEFAULT_COMPRESSION_LEVEL

    @property
    def output_file(self) -> Path:
        return Path(self.output_path) / self.output_name

    def as_dict(self) -> dict[str, Any]:
        return {
            "output_path": self.output_path,
            "output_name": self.output_name,
            "include_hidden": self.include_hidden,
            "compression_level": self.compression_level,
        }


@dataclass(frozen=True)
class ScanWarning:
    path: Path
    detail: str

    def __str__(self) -> str:
        return f"{self.detail}: {self.path}"


@dataclass
class ScanResult:
    root: Path
    files: list[Path] = field(default_factory=list)
    warnings: list[ScanWarning] = field(default_factory=list)
    pruned: list[str] = field(default_factory=list)

    def relative_files(self) -> list[str]:
        return [path.relative_to(self.root).as_posix() for path in self.files]


@dataclass(frozen=True)
class ArchiveEntry:
    path: Path
    name: str
    outcome: EntryOutcome
    detail: str = ""


@dataclass
class ArchiveResult:
    output_file: Path
    entries: list[ArchiveEntry]
    size: int
    warnings: list[ScanWarning] = field(default_factory=list)

    @property
    def added(self) -> list[ArchiveEntry]:
        return [entry for entry in self.entries if entry.outcome == EntryOutcome.ADDED]

    @property
    def failed(self) -> list[ArchiveEntry]:
        return [
            entry for entry in self.entries if entry.outcome == EntryOutcome.FAILED
        ]


@dataclass(frozen=True)
class ProjectStats:
    total_files: int
    total_size: int
    file_types: dict[str, int]
    ignored_patterns: list[str]


@dataclass(frozen=True)
class ValidationReport:
    valid: bool
    issues: list[str]
    root: Optional[Path] = None
