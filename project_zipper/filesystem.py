"""Filesystem primitives consumed by the scanner and the ignore-file loader."""

import os
import stat
from pathlib import Path
from typing import Protocol

from project_zipper.models import EntryKind


class FileSystem(Protocol):
    def list_dir(self, path: Path) -> list[str]: ...

    def entry_kind(self, path: Path) -> EntryKind: ...

    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def real_path(self, path: Path) -> Path: ...


class LocalFileSystem:
    def list_dir(self, path: Path) -> list[str]:
        return os.listdir(path)

    def entry_kind(self, path: Path) -> EntryKind:
        mode = os.stat(path).st_mode
        if stat.S_ISDIR(mode):
            return EntryKind.DIRECTORY
        if stat.S_ISREG(mode):
            return EntryKind.FILE
        return EntryKind.OTHER

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def read_text(self, path: Path) -> str:
        with Path(path).open("r", encoding="utf-8-sig", errors="replace") as handle:
            return handle.read()

    def real_path(self, path: Path) -> Path:
        return Path(os.path.realpath(path))
