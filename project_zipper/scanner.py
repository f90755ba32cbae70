"""Recursive project scan filtered by ignore rules."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from project_zipper.errors import (
    ProjectRootNotDirectoryError,
    ProjectRootNotFoundError,
    ProjectRootUnreadableError,
)
from project_zipper.filesystem import FileSystem, LocalFileSystem
from project_zipper.ignore.matcher import PatternMatcher
from project_zipper.models import EntryKind, ScanResult, ScanWarning
from project_zipper.utils import relative_posix

logger = logging.getLogger(__name__)

Diagnostics = Callable[[ScanWarning], None]


class DirectoryWalker:
    """Depth-first walk that prunes excluded directories without listing them.

    Symlinked directories are followed; one that leads back to a directory
    on the current branch is reported instead of entered. Unreadable entries
    below the root become ``ScanWarning`` values and the walk continues; only
    a missing or unreadable root raises.
    """

    def __init__(
        self,
        matcher: PatternMatcher,
        filesystem: Optional[FileSystem] = None,
        diagnostics: Optional[Diagnostics] = None,
    ) -> None:
        self._matcher = matcher
        self._filesystem = filesystem or LocalFileSystem()
        self._diagnostics = diagnostics

    def scan(self, root: Path) -> list[Path]:
        return self.walk(root).files

    def walk(self, root: Path) -> ScanResult:
        root_path = Path(os.path.abspath(root))
        self._check_root(root_path)

        try:
            names = self._filesystem.list_dir(root_path)
        except OSError as exc:
            raise ProjectRootUnreadableError(root_path, _describe(exc)) from exc

        result = ScanResult(root=root_path)
        ancestors = frozenset({self._filesystem.real_path(root_path)})
        self._scan_entries(root_path, names, result, ancestors)
        logger.debug(
            "Scanned %s: %d files, %d pruned directories, %d warnings",
            root_path,
            len(result.files),
            len(result.pruned),
            len(result.warnings),
        )
        return result

    def _check_root(self, root: Path) -> None:
        if not self._filesystem.exists(root):
            raise ProjectRootNotFoundError(root)
        try:
            kind = self._filesystem.entry_kind(root)
        except OSError as exc:
            raise ProjectRootUnreadableError(root, _describe(exc)) from exc
        if kind != EntryKind.DIRECTORY:
            raise ProjectRootNotDirectoryError(root)

    def _scan_directory(
        self, directory: Path, result: ScanResult, ancestors: frozenset[Path]
    ) -> None:
        try:
            names = self._filesystem.list_dir(directory)
        except OSError as exc:
            self._warn(result, directory, f"Cannot list directory ({_describe(exc)})")
            return
        self._scan_entries(directory, names, result, ancestors)

    def _scan_entries(
        self,
        directory: Path,
        names: list[str],
        result: ScanResult,
        ancestors: frozenset[Path],
    ) -> None:
        for name in names:
            full_path = directory / name
            relative = relative_posix(full_path, result.root)
            try:
                kind = self._filesystem.entry_kind(full_path)
            except OSError as exc:
                self._warn(result, full_path, f"Cannot stat entry ({_describe(exc)})")
                continue

            is_dir = kind == EntryKind.DIRECTORY
            if self._matcher.is_excluded(relative, is_dir=is_dir):
                if is_dir:
                    result.pruned.append(relative)
                    logger.debug("Pruned excluded directory %s", relative)
                continue

            if is_dir:
                real = self._filesystem.real_path(full_path)
                # only a directory on the current branch forms a cycle
                if real in ancestors:
                    self._warn(result, full_path, "Directory cycle detected")
                    continue
                self._scan_directory(full_path, result, ancestors | {real})
            elif kind == EntryKind.FILE:
                result.files.append(full_path)
            else:
                logger.debug("Skipping non-regular entry %s", relative)

    def _warn(self, result: ScanResult, path: Path, detail: str) -> None:
        warning = ScanWarning(path=path, detail=detail)
        result.warnings.append(warning)
        logger.debug("%s", warning)
        if self._diagnostics is not None:
            self._diagnostics(warning)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)
