import logging
import dataclasses

from tablesize.errors import TableNotFound
from tablesize.table_identifier import TableIdentifier
from tablesize.table_stats import TableStats
from tablesize.catalog_table import CatalogTable
from tablesize.partition_spec import PartitionSpec
from tablesize.catalog.catalog_view import CatalogView, StatsStore

log = logging.getLogger(__name__)


class InMemoryCatalog(CatalogView, StatsStore):
    """Catalog kept in process memory.

    Serves as `CatalogView` and `StatsStore` at the same time: altering the
    stats replaces the `stats` of the stored `CatalogTable`.
    """

    def __init__(self) -> None:
        self._tables: dict[str, CatalogTable] = {}
        self._partitions: dict[str, list[PartitionSpec]] = {}

    def _get(self, table_identifier: TableIdentifier) -> CatalogTable:
        table_id = table_identifier.table_id
        if table_id not in self._tables:
            raise TableNotFound(f'Table `{table_id}` not found in the catalog')

        return self._tables[table_id]

    def create_table(self, table: CatalogTable) -> None:
        table_id = table.identifier.table_id
        _m = f'Table `{table_id}` already exists'
        assert table_id not in self._tables, _m
        self._tables[table_id] = table
        self._partitions[table_id] = []

    def add_partitions(
        self,
        table_identifier: TableIdentifier,
        partitions: list[PartitionSpec],
    ) -> None:
        table = self._get(table_identifier)
        _m = f'Table `{table_identifier.table_id}` is not partitioned'
        assert table.is_partitioned, _m
        for p in partitions:
            _m = (
                f'Partition values {p.values} do not match the partition '
                f'columns {table.partition_column_names}'
            )
            assert list(p.values) == table.partition_column_names, _m
        self._partitions[table_identifier.table_id].extend(partitions)

    def get_table_metadata(
        self, table_identifier: TableIdentifier
    ) -> CatalogTable:
        return self._get(table_identifier)

    def list_partitions(
        self, table_identifier: TableIdentifier
    ) -> list[PartitionSpec]:
        self._get(table_identifier)
        return list(self._partitions[table_identifier.table_id])

    def alter_table_stats(
        self, table_identifier: TableIdentifier, stats: TableStats | None
    ) -> None:
        table = self._get(table_identifier)
        log.info(f'Altering stats of `{table_identifier.table_id}`: {stats}')
        self._tables[table_identifier.table_id] = dataclasses.replace(
            table, stats=stats
        )
