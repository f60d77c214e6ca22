import pytest

from tablesize import InMemoryCatalog, CatalogTable, TableIdentifier
from tablesize import PartitionSpec, TableStats, TableNotFound

identifier = TableIdentifier(database='db', name='events')


def test_table_not_found() -> None:
    catalog = InMemoryCatalog()
    with pytest.raises(TableNotFound):
        catalog.get_table_metadata(identifier)
    with pytest.raises(TableNotFound):
        catalog.list_partitions(identifier)
    with pytest.raises(TableNotFound):
        catalog.alter_table_stats(identifier, None)


def test_create_twice() -> None:
    catalog = InMemoryCatalog()
    catalog.create_table(CatalogTable(identifier=identifier))
    with pytest.raises(AssertionError):
        catalog.create_table(CatalogTable(identifier=identifier))


def test_partitions(partitioned_catalog: InMemoryCatalog) -> None:
    partitions = partitioned_catalog.list_partitions(identifier)
    assert [p.values for p in partitions] == [{'a': '1'}, {'a': '2'}]

    # a copy is returned
    partitions.clear()
    assert len(partitioned_catalog.list_partitions(identifier)) == 2


def test_partition_columns_must_match(
    partitioned_catalog: InMemoryCatalog
) -> None:
    with pytest.raises(AssertionError):
        partitioned_catalog.add_partitions(
            identifier, [PartitionSpec(values={'b': '1'})]
        )


def test_unpartitioned_table_has_no_partitions() -> None:
    catalog = InMemoryCatalog()
    catalog.create_table(CatalogTable(identifier=identifier))
    assert catalog.list_partitions(identifier) == []
    with pytest.raises(AssertionError):
        catalog.add_partitions(identifier, [PartitionSpec(values={'a': '1'})])


def test_alter_table_stats(partitioned_catalog: InMemoryCatalog) -> None:
    new_stats = TableStats(size_in_bytes=42)
    partitioned_catalog.alter_table_stats(identifier, new_stats)
    table = partitioned_catalog.get_table_metadata(identifier)
    assert table.stats == new_stats
    assert table.partition_column_names == ['a']

    partitioned_catalog.alter_table_stats(identifier, None)
    assert partitioned_catalog.get_table_metadata(identifier).stats is None
