from typing import Protocol

from tablesize.table_identifier import TableIdentifier
from tablesize.table_stats import TableStats
from tablesize.catalog_table import CatalogTable
from tablesize.partition_spec import PartitionSpec


class CatalogView(Protocol):
    """Read access to the table and partition metadata of a catalog."""

    def get_table_metadata(
        self, table_identifier: TableIdentifier
    ) -> CatalogTable:
        ...

    def list_partitions(
        self, table_identifier: TableIdentifier
    ) -> list[PartitionSpec]:
        """All current partitions of the table, possibly none."""
        ...


class StatsStore(Protocol):
    """Owner of the table statistics records."""

    def alter_table_stats(
        self, table_identifier: TableIdentifier, stats: TableStats | None
    ) -> None:
        """Replace the table statistics, `None` clears them."""
        ...
