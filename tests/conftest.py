import os
import shutil
import pytest
from pyspark.sql import SparkSession

from tablesize import TableIdentifier, CatalogTable, InMemoryCatalog
from tablesize import PartitionSpec, TableStats
from tablesize.testing import InMemoryFileSystem, RecordingTelemetry


@pytest.fixture
def spark():
    if shutil.which('java') is None and 'JAVA_HOME' not in os.environ:
        pytest.skip('No Java runtime for a local SparkSession')

    conf_map = {
        'spark.sql.shuffle.partitions': 1,
        'spark.sql.session.timeZone': 'UTC',
        'spark.ui.enabled': 'false',
    }
    builder = SparkSession.builder.config(map=conf_map).master('local[1]')
    return builder.getOrCreate()


@pytest.fixture
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()


@pytest.fixture
def partitioned_fs() -> InMemoryFileSystem:
    return InMemoryFileSystem({
        '/t/a=1/file1': 100,
        '/t/a=1/.hive-staging/junk': 9999,
        '/t/a=2/file2': 50,
    })


@pytest.fixture
def partitioned_catalog() -> InMemoryCatalog:
    identifier = TableIdentifier(database='db', name='events')
    catalog = InMemoryCatalog()
    catalog.create_table(CatalogTable(
        identifier=identifier,
        location_uri='/t',
        partition_column_names=['a'],
        stats=TableStats(size_in_bytes=1, row_count=10),
    ))
    catalog.add_partitions(identifier, [
        PartitionSpec(values={'a': '1'}, location_uri='/t/a=1'),
        PartitionSpec(values={'a': '2'}, location_uri='/t/a=2'),
    ])
    return catalog
