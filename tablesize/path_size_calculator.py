import time
from dataclasses import dataclass, field

from tablesize import utils
from tablesize.enums import ErrorKind
from tablesize.errors import FileSystemError
from tablesize.config import DEFAULT_STAGING_DIR_PREFIX
from tablesize.filesystem import FileSystem
from tablesize.table_identifier import TableIdentifier
from tablesize.telemetry import Telemetry, LoggingTelemetry


@dataclass(frozen=True, kw_only=True)
class SizeOutcome:
    """Result of sizing a single root location.

    `size` is 0 whenever `error_kind` is set.
    """
    location: str
    size: int
    error_kind: ErrorKind | None = None
    error: Exception | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def _error_kind(error: Exception) -> ErrorKind:
    if isinstance(error, FileSystemError):
        return error.kind
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return ErrorKind.ACCESS_DENIED
    return ErrorKind.IO_ERROR


@dataclass(frozen=True, kw_only=True)
class PathSizeCalculator:
    """Total byte size of the files under a path.

    Entries whose name starts with `staging_dir_prefix` are skipped together
    with everything below them.

    Parameters
    ----------
    staging_dir_prefix
        Name prefix of the staging directories left behind by write jobs.
    telemetry
        Receives the start, completion and failure events of every root.
    """
    staging_dir_prefix: str = DEFAULT_STAGING_DIR_PREFIX
    telemetry: Telemetry = field(default_factory=LoggingTelemetry)

    def __post_init__(self) -> None:
        _m = '`staging_dir_prefix` cannot be empty, it would exclude all files'
        assert self.staging_dir_prefix != '', _m

    def is_staging(self, path: str) -> bool:
        return utils.path_name(path).startswith(self.staging_dir_prefix)

    def get_path_size(self, filesystem: FileSystem, path: str) -> int:
        """Size of `path`, filesystem errors are propagated."""
        file_status = filesystem.stat(path)
        if not file_status.is_directory:
            return file_status.length

        return sum(
            self.get_path_size(filesystem, child_path)
            for child_path in filesystem.list_paths(path)
            if not self.is_staging(child_path)
        )

    def try_compute_size(
        self,
        filesystem: FileSystem,
        root_path: str,
        table_identifier: TableIdentifier | None = None,
    ) -> SizeOutcome:
        """Size of `root_path`, with any filesystem error turned into 0."""
        start = time.perf_counter_ns()
        self.telemetry.size_calculation_started(root_path)
        try:
            outcome = SizeOutcome(
                location=root_path,
                size=self.get_path_size(filesystem, root_path),
            )
        except (FileSystemError, OSError) as e:
            self.telemetry.size_calculation_failed(
                table_identifier, root_path, e
            )
            outcome = SizeOutcome(
                location=root_path, size=0, error_kind=_error_kind(e), error=e
            )
        duration_ms = (time.perf_counter_ns() - start) // (1000 * 1000)
        self.telemetry.size_calculation_completed(root_path, duration_ms)
        return outcome

    def compute_size(
        self,
        filesystem: FileSystem,
        root_path: str,
        table_identifier: TableIdentifier | None = None,
    ) -> int:
        return self.try_compute_size(
            filesystem, root_path, table_identifier
        ).size
