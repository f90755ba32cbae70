import logging
from pathlib import Path, PurePath

from rich.console import Console
from rich.logging import RichHandler


_BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def relative_posix(path: Path, root: Path) -> str:
    return PurePath(path).relative_to(root).as_posix()


def is_hidden_path(relative_path: str) -> bool:
    parts = relative_path.replace("\\", "/").split("/")
    return any(part.startswith(".") and part not in (".", "..") for part in parts)


def file_extension(path: Path) -> str:
    return path.suffix.lower()


def format_bytes(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    index = 0
    while value >= 1024 and index < len(_BYTE_UNITS) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {_BYTE_UNITS[index]}"


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logging.basicConfig(
        level=level, format="%(message)s", handlers=[handler], force=True
    )


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
