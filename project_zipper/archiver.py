"""Build a zip archive from the filtered project file list."""

from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import Callable, Optional

from project_zipper.config import validate_options
from project_zipper.constants import NO_EXTENSION, PROGRESS_INTERVAL, WRITE_PROBE_FILENAME
from project_zipper.errors import ArchiveWriteError, ZipperError
from project_zipper.filesystem import FileSystem, LocalFileSystem
from project_zipper.ignore.matcher import PatternMatcher
from project_zipper.models import (
    ArchiveEntry,
    ArchiveResult,
    EntryKind,
    EntryOutcome,
    ProjectStats,
    ScanWarning,
    ValidationReport,
    ZipOptions,
)
from project_zipper.scanner import DirectoryWalker
from project_zipper.utils import file_extension, is_hidden_path, relative_posix

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
WarningCallback = Callable[[str], None]


class ProjectZipper:
    def __init__(
        self,
        project_root: Path,
        options: Optional[ZipOptions] = None,
        filesystem: Optional[FileSystem] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_warning: Optional[WarningCallback] = None,
    ) -> None:
        self.project_root = Path(os.path.abspath(project_root))
        self.options = options or ZipOptions()
        validate_options(self.options)
        self._filesystem = filesystem or LocalFileSystem()
        self._on_progress = on_progress
        self._on_warning = on_warning
        self.matcher = PatternMatcher.from_root(self.project_root, self._filesystem)
        self.walker = DirectoryWalker(
            self.matcher,
            filesystem=self._filesystem,
            diagnostics=self._report_scan_warning,
        )

    @property
    def output_file(self) -> Path:
        return Path(os.path.abspath(self.options.output_file))

    def create_zip(self) -> ArchiveResult:
        scan = self.walker.walk(self.project_root)
        logger.info("Found %d files to zip", len(scan.files))

        output_file = self.output_file
        try:
            self._ensure_output_directory(output_file.parent)
            with zipfile.ZipFile(
                output_file,
                "w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=self.options.compression_level,
                strict_timestamps=False,
            ) as archive:
                entries = self._add_files(archive, scan.files, output_file)
            size = output_file.stat().st_size
        except OSError as exc:
            raise ArchiveWriteError(output_file, exc.strerror or str(exc)) from exc

        logger.info("Created %s (%d bytes)", output_file, size)
        return ArchiveResult(
            output_file=output_file,
            entries=entries,
            size=size,
            warnings=list(scan.warnings),
        )

    def get_file_list(self) -> list[str]:
        return [
            relative_posix(path, self.project_root) for path in self._candidate_files()
        ]

    def get_project_stats(self) -> ProjectStats:
        files = self._candidate_files()
        file_types: dict[str, int] = {}
        total_size = 0
        for path in files:
            try:
                size = path.stat().st_size
            except OSError:
                self._warn(f"Could not stat file {path}")
                continue
            total_size += size
            extension = file_extension(path) or NO_EXTENSION
            file_types[extension] = file_types.get(extension, 0) + 1

        return ProjectStats(
            total_files=len(files),
            total_size=total_size,
            file_types=file_types,
            ignored_patterns=self.matcher.patterns,
        )

    def validate_project(self) -> ValidationReport:
        root = self.project_root
        issues: list[str] = []

        if not self._filesystem.exists(root):
            issues.append("Project root directory does not exist")
            return ValidationReport(valid=False, issues=issues, root=root)
        try:
            kind = self._filesystem.entry_kind(root)
        except OSError as exc:
            kind = None
            issues.append(f"Project root is not readable: {exc}")
        if kind is not None and kind != EntryKind.DIRECTORY:
            issues.append("Project root is not a directory")
        if issues:
            return ValidationReport(valid=False, issues=issues, root=root)

        output_dir = self.output_file.parent
        try:
            self._ensure_output_directory(output_dir)
            probe = output_dir / WRITE_PROBE_FILENAME
            probe.write_text("test", encoding="utf-8")
            probe.unlink()
        except OSError as exc:
            issues.append(f"Output directory is not writable: {exc}")

        try:
            if not self.get_file_list():
                issues.append(
                    "No files found to zip (all files may be ignored by .gitignore)"
                )
        except ZipperError as exc:
            issues.append(f"Error scanning files: {exc}")

        return ValidationReport(valid=not issues, issues=issues, root=root)

    def _candidate_files(self) -> list[Path]:
        files = self.walker.scan(self.project_root)
        if self.options.include_hidden:
            return files
        return [
            path
            for path in files
            if not is_hidden_path(relative_posix(path, self.project_root))
        ]

    def _add_files(
        self, archive: zipfile.ZipFile, files: list[Path], output_file: Path
    ) -> list[ArchiveEntry]:
        entries: list[ArchiveEntry] = []
        total = len(files)
        for index, path in enumerate(files, start=1):
            entries.append(self._add_file(archive, path, output_file))
            if index % PROGRESS_INTERVAL == 0 or index == total:
                self._report_progress(index, total)
        return entries

    def _add_file(
        self, archive: zipfile.ZipFile, path: Path, output_file: Path
    ) -> ArchiveEntry:
        name = relative_posix(path, self.project_root)
        if path == output_file:
            return ArchiveEntry(path, name, EntryOutcome.OUTPUT, "archive being written")
        if not self.options.include_hidden and is_hidden_path(name):
            return ArchiveEntry(path, name, EntryOutcome.HIDDEN, "hidden file")

        try:
            kind = self._filesystem.entry_kind(path)
            if kind == EntryKind.DIRECTORY:
                return ArchiveEntry(path, name, EntryOutcome.DIRECTORY, "not a file")
            archive.write(path, arcname=name)
        except FileNotFoundError:
            self._warn(f"File no longer exists: {name}")
            return ArchiveEntry(path, name, EntryOutcome.MISSING, "file no longer exists")
        except OSError as exc:
            detail = exc.strerror or str(exc)
            self._warn(f"Error processing file {name}: {detail}")
            return ArchiveEntry(path, name, EntryOutcome.FAILED, detail)

        logger.debug("Added %s", name)
        return ArchiveEntry(path, name, EntryOutcome.ADDED)

    def _ensure_output_directory(self, output_dir: Path) -> None:
        if output_dir.is_dir():
            return
        output_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Created output directory %s", output_dir)

    def _report_progress(self, processed: int, total: int) -> None:
        logger.debug("Progress: %d/%d files", processed, total)
        if self._on_progress is not None:
            self._on_progress(processed, total)

    def _report_scan_warning(self, warning: ScanWarning) -> None:
        self._warn(str(warning))

    def _warn(self, message: str) -> None:
        logger.debug("%s", message)
        if self._on_warning is not None:
            self._on_warning(message)
