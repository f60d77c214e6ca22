import logging
from typing import Protocol

from tablesize.table_identifier import TableIdentifier

log = logging.getLogger(__name__)


class Telemetry(Protocol):
    """Sink for the events of a size calculation.

    Passed explicitly to the components that emit them.
    """

    def size_calculation_started(self, location: str) -> None:
        ...

    def size_calculation_completed(
        self, location: str, duration_ms: int
    ) -> None:
        ...

    def size_calculation_failed(
        self,
        table_identifier: TableIdentifier | None,
        location: str,
        error: Exception,
    ) -> None:
        """Non fatal, the location is counted as 0 bytes."""
        ...


class LoggingTelemetry(Telemetry):
    """Writes the size calculation events to a `logging.Logger`."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or log

    def size_calculation_started(self, location: str) -> None:
        self.logger.info(
            f'Starting to calculate the total file size under path {location}.'
        )

    def size_calculation_completed(
        self, location: str, duration_ms: int
    ) -> None:
        self.logger.info(
            f'It took {duration_ms} ms to calculate the total file size '
            f'under path {location}.'
        )

    def size_calculation_failed(
        self,
        table_identifier: TableIdentifier | None,
        location: str,
        error: Exception,
    ) -> None:
        if table_identifier is None:
            _m = f'Failed to get the size of path {location} because of {error!r}'
        else:
            _m = (
                f'Failed to get the size of table {table_identifier.name} in '
                f'the database {table_identifier.database} because of {error!r}'
            )
        self.logger.warning(_m, exc_info=error)
