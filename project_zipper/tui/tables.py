from collections import Counter

from rich.markup import escape
from rich.panel import Panel
from rich.table import Column, Table

from project_zipper.ignore.models import MatchDecision
from project_zipper.models import ArchiveEntry, ArchiveResult, EntryOutcome, ProjectStats
from project_zipper.tui.enums import ENTRY_OUTCOME_STYLE, UIStyle
from project_zipper.utils import compact_home_path, format_bytes


class ArchiveTable:
    @staticmethod
    def summary_block(result: ArchiveResult):
        counts = Counter(entry.outcome.value for entry in result.entries)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Archive", escape(compact_home_path(result.output_file)))
        table.add_row("Files", str(len(result.added)))
        table.add_row("Size", format_bytes(result.size))
        table.add_row("Outcomes", "  ".join(chips))
        return table

    @staticmethod
    def skipped_entries(result: ArchiveResult) -> list[ArchiveEntry]:
        quiet = (EntryOutcome.ADDED, EntryOutcome.HIDDEN, EntryOutcome.OUTPUT)
        return [entry for entry in result.entries if entry.outcome not in quiet]

    @staticmethod
    def entries_table(entries: list[ArchiveEntry]) -> Table:
        table = Table(
            Column(header="Outcome", width=10),
            Column(header="File", overflow="ellipsis"),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for entry in entries:
            style = ENTRY_OUTCOME_STYLE.get(entry.outcome, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{entry.outcome.value}[/{style}]",
                escape(entry.name),
                escape(entry.detail),
            )
        return table

    @staticmethod
    def stats_panel(added: int, failed: int) -> Panel:
        stats: dict[str, str] = {
            "added": str(added),
            "failed": str(failed),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="archive",
            border_style=UIStyle.GREEN.value if failed == 0 else UIStyle.RED.value,
        )


class FileTable:
    @staticmethod
    def files_table(files: list[str]) -> Table:
        table = Table(
            Column(header="#", width=6, justify="right"),
            Column(header="File", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, name in enumerate(files, start=1):
            table.add_row(str(index), escape(name))
        return table


class StatsTable:
    @staticmethod
    def summary_block(stats: ProjectStats):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Files", str(stats.total_files))
        table.add_row("Size", format_bytes(stats.total_size))
        table.add_row("Patterns", str(len(stats.ignored_patterns)))
        return table

    @staticmethod
    def types_table(stats: ProjectStats) -> Table:
        table = Table(
            Column(header="Extension", width=16),
            Column(header="Files", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        ordered = sorted(stats.file_types.items(), key=lambda item: (-item[1], item[0]))
        for extension, count in ordered:
            table.add_row(escape(extension), str(count))
        return table


class CheckTable:
    @staticmethod
    def decisions_table(decisions: list[tuple[str, MatchDecision]]) -> Table:
        table = Table(
            Column(header="Path", overflow="fold"),
            Column(header="Verdict", width=10),
            Column(header="Rule", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for path, decision in decisions:
            style = UIStyle.YELLOW.value if decision.excluded else UIStyle.GREEN.value
            verdict = "excluded" if decision.excluded else "included"
            rule = ""
            if decision.rule is not None:
                rule = f"{decision.rule.line_number}: {decision.rule.source}"
            table.add_row(escape(path), f"[{style}]{verdict}[/{style}]", escape(rule))
        return table
