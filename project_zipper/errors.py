from pathlib import Path


class ZipperError(Exception):
    """Base user-facing application error."""


class ZipperFileError(ZipperError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ProjectRootError(ZipperFileError):
    """The project root cannot be scanned at all."""


class ProjectRootNotFoundError(ProjectRootError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Project root does not exist")


class ProjectRootNotDirectoryError(ProjectRootError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Project root is not a directory")


class ProjectRootUnreadableError(ProjectRootError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Project root is not readable ({detail})")


class InvalidJsonFormatError(ZipperFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(ZipperFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class ArchiveWriteError(ZipperFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot write archive ({detail})")


class InvalidOptionError(ZipperError):
    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Invalid option {name}: {detail}")
