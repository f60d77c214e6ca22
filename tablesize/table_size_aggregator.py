import logging
from dataclasses import dataclass, field
from concurrent.futures import ThreadPoolExecutor

from tablesize.filesystem import FileSystem
from tablesize.catalog import CatalogView
from tablesize.catalog_table import CatalogTable
from tablesize.table_identifier import TableIdentifier
from tablesize.path_size_calculator import PathSizeCalculator

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TableSizeAggregator:
    """Total size of a table: its location, or the sum of its partitions.

    Parameters
    ----------
    filesystem
        Used for every location of the table.
    catalog
        Lists the partitions of partitioned tables. Listing errors are not
        caught.
    calculator
        Sizes a single location, returns 0 for unreadable ones.
    max_workers
        Size partitions on a thread pool of this size. `None` or 1 sizes them
        one after the other.
    """
    filesystem: FileSystem
    catalog: CatalogView
    calculator: PathSizeCalculator = field(default_factory=PathSizeCalculator)
    max_workers: int | None = None

    def __post_init__(self) -> None:
        _m = f'`max_workers` must be positive, got {self.max_workers}'
        assert self.max_workers is None or self.max_workers > 0, _m

    def calculate_location_size(
        self, table_identifier: TableIdentifier, location_uri: str | None
    ) -> int:
        if location_uri is None:
            return 0

        return self.calculator.compute_size(
            self.filesystem, location_uri, table_identifier
        )

    def calculate_total_size(self, table: CatalogTable) -> int:
        identifier = table.identifier
        if not table.is_partitioned:
            return self.calculate_location_size(identifier, table.location_uri)

        # Sum of the partitions visible in the catalog, other directories under
        # the table location are not readable by queries
        partitions = self.catalog.list_partitions(identifier)
        locations = [p.location_uri for p in partitions]
        log.debug(
            f'Calculating the size of {len(locations)} partitions of '
            f'`{identifier.table_id}`'
        )
        if self.max_workers is None or self.max_workers == 1:
            return sum(
                self.calculate_location_size(identifier, location)
                for location in locations
            )

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            sizes = executor.map(
                lambda location: self.calculate_location_size(
                    identifier, location
                ),
                locations,
            )
            return sum(sizes)
