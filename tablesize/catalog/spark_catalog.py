import re
import logging
from pyspark.sql import SparkSession, Row

from tablesize.table_identifier import TableIdentifier
from tablesize.table_stats import TableStats
from tablesize.catalog_table import CatalogTable
from tablesize.partition_spec import PartitionSpec
from tablesize.catalog.catalog_view import CatalogView

log = logging.getLogger(__name__)

# e.g. `1024 bytes` or `1024 bytes, 10 rows`
statistics_pattern = re.compile(
    r'(?P<size>\d+) bytes(?:, (?P<rows>\d+) rows)?'
)


def _find_detail(rows: list[Row], key: str) -> str | None:
    """First value of `key` in the `DESCRIBE ... EXTENDED` output."""
    for row in rows:
        if row['col_name'] == key and row['data_type']:
            return row['data_type']
    return None


def _parse_statistics(statistics: str | None) -> TableStats | None:
    if statistics is None:
        return None
    search_res = re.match(statistics_pattern, statistics)
    if search_res is None:
        log.warning(f'Cannot parse table statistics `{statistics}`')
        return None

    rows = search_res.group('rows')
    return TableStats(
        size_in_bytes=int(search_res.group('size')),
        row_count=None if rows is None else int(rows),
    )


def _quote_value(value: str) -> str:
    escaped = value.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{escaped}'"


def _build_partition_clause(values: dict[str, str]) -> str:
    predicates = [f'`{k}` = {_quote_value(v)}' for k, v in values.items()]
    return f'PARTITION ({", ".join(predicates)})'


class SparkCatalog(CatalogView):
    """`CatalogView` over the session catalog of a SparkSession."""

    def __init__(self, spark: SparkSession) -> None:
        self.spark = spark

    def _describe(self, statement: str) -> list[Row]:
        log.debug(statement)
        return self.spark.sql(statement).collect()

    def get_table_metadata(
        self, table_identifier: TableIdentifier
    ) -> CatalogTable:
        columns = self.spark.catalog.listColumns(
            table_identifier.name, table_identifier.database
        )
        detail_rows = self._describe(
            f'DESCRIBE TABLE EXTENDED {table_identifier.quoted}'
        )
        return CatalogTable(
            identifier=table_identifier,
            location_uri=_find_detail(detail_rows, 'Location'),
            partition_column_names=[c.name for c in columns if c.isPartition],
            stats=_parse_statistics(_find_detail(detail_rows, 'Statistics')),
        )

    def list_partitions(
        self, table_identifier: TableIdentifier
    ) -> list[PartitionSpec]:
        partition_rows = self.spark.sql(
            f'SHOW PARTITIONS {table_identifier.quoted}'
        ).collect()
        partitions = []
        for row in partition_rows:
            spec = PartitionSpec.from_partition_path(row['partition'])
            partition_clause = _build_partition_clause(spec.values)
            detail_rows = self._describe(
                f'DESCRIBE TABLE EXTENDED {table_identifier.quoted} '
                f'{partition_clause}'
            )
            partitions.append(PartitionSpec(
                values=spec.values,
                location_uri=_find_detail(detail_rows, 'Location'),
            ))

        return partitions
