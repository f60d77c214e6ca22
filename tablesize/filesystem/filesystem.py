from typing import Protocol
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FileStatus:
    path: str
    is_directory: bool
    length: int


class FileSystem(Protocol):
    """The filesystem operations a size calculation needs.

    Implementations raise `tablesize.errors.FileSystemError` (or one of its
    subclasses `PathNotFound`, `AccessDenied`) when a path cannot be read.
    """

    def stat(self, path: str) -> FileStatus:
        ...

    def list_paths(self, path: str) -> list[str]:
        """Paths of the direct children of the directory `path`."""
        ...
