from typing import Final


IGNORE_FILENAME: Final[str] = ".gitignore"
CONFIG_FILENAME: Final[str] = ".project-zipper.json"

DEFAULT_OUTPUT_PATH: Final[str] = "./dist"
DEFAULT_OUTPUT_NAME: Final[str] = "project.zip"
DEFAULT_COMPRESSION_LEVEL: Final[int] = 6
MIN_COMPRESSION_LEVEL: Final[int] = 0
MAX_COMPRESSION_LEVEL: Final[int] = 9

PROGRESS_INTERVAL: Final[int] = 50
NO_EXTENSION: Final[str] = "no-extension"
WRITE_PROBE_FILENAME: Final[str] = ".write-test"
