import functools
from dataclasses import dataclass, field

from tablesize.table_identifier import TableIdentifier
from tablesize.table_stats import TableStats


@dataclass(frozen=True, kw_only=True)
class CatalogTable:
    """Table metadata as seen by the size calculation.

    Only what is needed to find the data on storage: the location of an
    unpartitioned table, the partition columns of a partitioned one, and the
    statistics record currently attached to the table (if any).
    """
    identifier: TableIdentifier
    location_uri: str | None = None
    partition_column_names: list[str] = field(default_factory=list)
    stats: TableStats | None = None

    @functools.cached_property
    def is_partitioned(self) -> bool:
        return len(self.partition_column_names) > 0
