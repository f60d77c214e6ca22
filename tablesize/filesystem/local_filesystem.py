import os
import stat

from tablesize import utils
from tablesize.errors import FileSystemError, PathNotFound, AccessDenied
from tablesize.filesystem.filesystem import FileSystem, FileStatus


def _translate_os_error(path: str, error: OSError) -> FileSystemError:
    if isinstance(error, FileNotFoundError):
        return PathNotFound(path, str(error))
    if isinstance(error, PermissionError):
        return AccessDenied(path, str(error))
    return FileSystemError(path, str(error))


class LocalFileSystem(FileSystem):
    """Local paths, plain or `file:` URIs."""

    def stat(self, path: str) -> FileStatus:
        local_path = utils.to_local_path(path)
        try:
            st = os.stat(local_path)
        except OSError as e:
            raise _translate_os_error(path, e) from e

        return FileStatus(
            path=path,
            is_directory=stat.S_ISDIR(st.st_mode),
            length=st.st_size,
        )

    def list_paths(self, path: str) -> list[str]:
        local_path = utils.to_local_path(path)
        try:
            names = os.listdir(local_path)
        except OSError as e:
            raise _translate_os_error(path, e) from e

        return [os.path.join(local_path, name) for name in names]
