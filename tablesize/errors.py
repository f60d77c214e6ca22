from tablesize.enums import ErrorKind


class FileSystemError(Exception):
    """Raised by `FileSystem` implementations when a path cannot be read."""
    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        _m = message or f'{self.kind.name} for path `{path}`'
        super().__init__(_m)


class PathNotFound(FileSystemError):
    kind = ErrorKind.NOT_FOUND


class AccessDenied(FileSystemError):
    kind = ErrorKind.ACCESS_DENIED


class TableNotFound(KeyError):
    pass
