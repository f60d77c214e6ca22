"""
In-memory stand-ins for the external collaborators, used in unit tests.
"""
from dataclasses import dataclass, field

from tablesize.errors import PathNotFound, AccessDenied
from tablesize.filesystem import FileSystem, FileStatus
from tablesize.table_identifier import TableIdentifier


class InMemoryFileSystem(FileSystem):
    """Files given as `{path: size}`, directories are implied by the paths.

    `denied` paths raise `AccessDenied` on any access, `vanish_on_stat` paths
    are listed by their parent but raise `PathNotFound` when stat-ed, like a
    file removed between listing and stat-ing.

    Examples
    --------
    >>> fs = InMemoryFileSystem({'/t/a=1/f1': 100, '/t/a=2/f2': 50})
    >>> fs.list_paths('/t')
    ['/t/a=1', '/t/a=2']
    """

    def __init__(
        self,
        files: dict[str, int],
        denied: set[str] | None = None,
        vanish_on_stat: set[str] | None = None,
    ) -> None:
        self.files = {p.rstrip('/'): size for p, size in files.items()}
        self.denied = denied or set()
        self.vanish_on_stat = vanish_on_stat or set()
        self.calls: list[tuple[str, str]] = []

    def _is_directory(self, path: str) -> bool:
        prefix = path.rstrip('/') + '/'
        return any(p.startswith(prefix) for p in self.files)

    def _check(self, path: str) -> None:
        if path in self.denied:
            raise AccessDenied(path)
        if path not in self.files and not self._is_directory(path):
            raise PathNotFound(path)

    def stat(self, path: str) -> FileStatus:
        self.calls.append(('stat', path))
        if path in self.vanish_on_stat:
            raise PathNotFound(path)
        self._check(path)
        if path in self.files:
            return FileStatus(
                path=path, is_directory=False, length=self.files[path]
            )
        return FileStatus(path=path, is_directory=True, length=0)

    def list_paths(self, path: str) -> list[str]:
        self.calls.append(('list', path))
        self._check(path)
        prefix = path.rstrip('/') + '/'
        children = {
            prefix + p[len(prefix):].split('/', 1)[0]
            for p in self.files if p.startswith(prefix)
        }
        return sorted(children)


@dataclass
class RecordingTelemetry:
    """Keeps the emitted events in memory."""
    started: list[str] = field(default_factory=list)
    completed: list[tuple[str, int]] = field(default_factory=list)
    failed: list[tuple[TableIdentifier | None, str, Exception]] = field(
        default_factory=list
    )

    def size_calculation_started(self, location: str) -> None:
        self.started.append(location)

    def size_calculation_completed(
        self, location: str, duration_ms: int
    ) -> None:
        self.completed.append((location, duration_ms))

    def size_calculation_failed(
        self,
        table_identifier: TableIdentifier | None,
        location: str,
        error: Exception,
    ) -> None:
        self.failed.append((table_identifier, location, error))
