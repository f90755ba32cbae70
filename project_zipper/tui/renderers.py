from rich.console import Console
from rich.markup import escape

from project_zipper.ignore.models import MatchDecision
from project_zipper.models import (
    ArchiveResult,
    ProjectStats,
    ScanWarning,
    ValidationReport,
)
from project_zipper.tui.enums import UIStyle
from project_zipper.tui.sections import UISection
from project_zipper.tui.tables import ArchiveTable, CheckTable, FileTable, StatsTable
from project_zipper.utils import compact_home_path


class ZipperConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_progress(self, processed: int, total: int) -> None:
        percentage = round(processed / total * 100) if total else 100
        self.console.print(
            f"[{UIStyle.DIM.value}]Progress: {processed}/{total} files "
            f"({percentage}%)[/{UIStyle.DIM.value}]"
        )

    def render_archive_result(self, result: ArchiveResult) -> None:
        failed = len(result.failed)
        self.console.print(
            UISection.wrap(
                "archive overview",
                ArchiveTable.summary_block(result),
                style=UIStyle.BLUE.value,
            )
        )

        skipped = ArchiveTable.skipped_entries(result)
        if skipped:
            self.console.print(
                UISection.wrap(
                    "skipped files",
                    ArchiveTable.entries_table(skipped),
                    style=UIStyle.YELLOW.value,
                )
            )
        self.render_warnings(result.warnings)
        self.console.print(ArchiveTable.stats_panel(added=len(result.added), failed=failed))

    def render_warnings(self, warnings: list[ScanWarning]) -> None:
        if not warnings:
            return
        self.console.print(
            UISection.bullets("warnings", warnings, style=UIStyle.YELLOW.value)
        )

    def render_pattern_errors(self, errors: list[str] | tuple[str, ...]) -> None:
        if not errors:
            return
        self.console.print(
            UISection.bullets("ignored patterns skipped", errors, style=UIStyle.YELLOW.value)
        )

    def render_file_list(self, root: str, files: list[str]) -> None:
        if not files:
            self.console.print(
                UISection.note(
                    "files",
                    "No files to zip.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(
            UISection.wrap(
                "files",
                FileTable.files_table(files),
                style=UIStyle.BLUE.value,
                subtitle=f"{len(files)} files in {escape(compact_home_path(root))}",
            )
        )

    def render_stats(self, stats: ProjectStats) -> None:
        self.console.print(
            UISection.wrap(
                "project stats",
                StatsTable.summary_block(stats),
                style=UIStyle.BLUE.value,
            )
        )
        if stats.file_types:
            self.console.print(
                UISection.wrap(
                    "file types",
                    StatsTable.types_table(stats),
                    style=UIStyle.CYAN.value,
                )
            )
        if stats.ignored_patterns:
            self.console.print(
                UISection.bullets(
                    "ignore patterns", stats.ignored_patterns, style=UIStyle.DIM.value
                )
            )

    def render_validation(self, report: ValidationReport) -> None:
        if report.valid:
            self.console.print(
                UISection.note(
                    "validate",
                    "Project is ready to zip.",
                    style=UIStyle.GREEN.value,
                )
            )
            return
        self.console.print(
            UISection.bullets("validation issues", report.issues, style=UIStyle.RED.value)
        )

    def render_check(self, decisions: list[tuple[str, MatchDecision]]) -> None:
        self.console.print(
            UISection.wrap(
                "ignore check",
                CheckTable.decisions_table(decisions),
                style=UIStyle.MAGENTA.value,
            )
        )
