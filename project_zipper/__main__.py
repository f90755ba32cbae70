from pathlib import Path
from typing import Any, Callable, Optional

import click
from rich.console import Console

from project_zipper import __version__
from project_zipper.archiver import ProjectZipper
from project_zipper.config import resolve_options
from project_zipper.errors import ZipperError
from project_zipper.ignore.matcher import PatternMatcher
from project_zipper.ignore.models import MatchDecision
from project_zipper.models import ZipOptions
from project_zipper.tui import ZipperConsoleUI
from project_zipper.utils import configure_logging


def _root_argument() -> Callable:
    return click.argument(
        "root",
        required=False,
        default=".",
        type=click.Path(path_type=Path),
    )


def _output_option() -> Callable:
    return click.option(
        "-o",
        "--output",
        "output_path",
        default=None,
        help="Output directory.  [default: ./dist]",
    )


def _resolve_options(root: Path, **overrides: Any) -> ZipOptions:
    try:
        return resolve_options(root, overrides)
    except ZipperError as exc:
        raise click.ClickException(str(exc))


def _build_zipper(
    root: Path, options: ZipOptions, ui: Optional[ZipperConsoleUI] = None
) -> ProjectZipper:
    return ProjectZipper(
        root,
        options,
        on_progress=ui.render_progress if ui is not None else None,
    )


def _path_is_dir(root: Path, relative: str) -> bool:
    return relative.endswith("/") or (root / relative).is_dir()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="project-zipper")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Create a zip of your project respecting .gitignore patterns."""
    ctx.obj = {"verbose": verbose}
    configure_logging(verbose)


@cli.command(help="Create the project zip archive.")
@_root_argument()
@_output_option()
@click.option(
    "-n",
    "--name",
    "output_name",
    default=None,
    help="Zip file name.  [default: project.zip]",
)
@click.option(
    "--include-hidden/--exclude-hidden",
    default=None,
    help="Include hidden files.  [default: exclude]",
)
@click.option(
    "-c",
    "--compression",
    "compression_level",
    type=click.IntRange(0, 9),
    default=None,
    help="Compression level (0-9).  [default: 6]",
)
def create(
    root: Path,
    output_path: Optional[str],
    output_name: Optional[str],
    include_hidden: Optional[bool],
    compression_level: Optional[int],
) -> None:
    ui = ZipperConsoleUI(Console())
    options = _resolve_options(
        root,
        output_path=output_path,
        output_name=output_name,
        include_hidden=include_hidden,
        compression_level=compression_level,
    )
    zipper = _build_zipper(root, options, ui)
    ui.render_pattern_errors(zipper.matcher.errors)

    try:
        result = zipper.create_zip()
    except ZipperError as exc:
        raise click.ClickException(str(exc))

    ui.render_archive_result(result)
    if result.failed:
        raise click.exceptions.Exit(1)


@cli.command("list", help="List the files that would be archived.")
@_root_argument()
@click.option(
    "--include-hidden/--exclude-hidden",
    default=None,
    help="Include hidden files.  [default: exclude]",
)
def list_files(root: Path, include_hidden: Optional[bool]) -> None:
    ui = ZipperConsoleUI(Console())
    options = _resolve_options(root, include_hidden=include_hidden)
    zipper = _build_zipper(root, options)
    try:
        files = zipper.get_file_list()
    except ZipperError as exc:
        raise click.ClickException(str(exc))
    ui.render_file_list(str(zipper.project_root), sorted(files))


@cli.command(help="Show file counts, sizes and ignore patterns.")
@_root_argument()
def stats(root: Path) -> None:
    ui = ZipperConsoleUI(Console())
    options = _resolve_options(root)
    zipper = _build_zipper(root, options)
    try:
        project_stats = zipper.get_project_stats()
    except ZipperError as exc:
        raise click.ClickException(str(exc))
    ui.render_stats(project_stats)


@cli.command(help="Check that the project can be zipped.")
@_root_argument()
@_output_option()
def validate(root: Path, output_path: Optional[str]) -> None:
    ui = ZipperConsoleUI(Console())
    options = _resolve_options(root, output_path=output_path)
    report = _build_zipper(root, options).validate_project()
    ui.render_validation(report)
    if not report.valid:
        raise click.exceptions.Exit(1)


@cli.command(help="Show whether paths are excluded by the ignore rules.")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "-r",
    "--root",
    type=click.Path(path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project root holding the .gitignore file.",
)
def check(paths: tuple[str, ...], root: Path) -> None:
    ui = ZipperConsoleUI(Console())
    matcher = PatternMatcher.from_root(root)
    ui.render_pattern_errors(matcher.errors)

    decisions: list[tuple[str, MatchDecision]] = []
    for item in paths:
        try:
            decision = matcher.decide(item, is_dir=_path_is_dir(root, item))
        except ValueError as exc:
            raise click.ClickException(str(exc))
        decisions.append((item, decision))
    ui.render_check(decisions)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
