"""
Size statistics of tables in the session catalog of a SparkSession.
"""
from pyspark.sql import SparkSession

from tablesize.utils import fill_in_spark_session
from tablesize.config import SizeConfig
from tablesize.catalog import SparkCatalog, StatsStore
from tablesize.catalog_table import CatalogTable
from tablesize.filesystem import HadoopFileSystem
from tablesize.telemetry import Telemetry, LoggingTelemetry
from tablesize.path_size_calculator import PathSizeCalculator
from tablesize.table_size_aggregator import TableSizeAggregator
from tablesize.stats_refresh_policy import StatsRefreshPolicy


def build_aggregator(
    spark: SparkSession,
    config: SizeConfig,
    telemetry: Telemetry | None = None,
    max_workers: int | None = None,
) -> TableSizeAggregator:
    calculator = PathSizeCalculator(
        staging_dir_prefix=config.staging_dir_prefix,
        telemetry=telemetry or LoggingTelemetry(),
    )
    return TableSizeAggregator(
        filesystem=HadoopFileSystem(spark),
        catalog=SparkCatalog(spark),
        calculator=calculator,
        max_workers=max_workers,
    )


@fill_in_spark_session
def calculate_total_size(
    table: CatalogTable, spark: SparkSession | None = None
) -> int:
    assert spark is not None  # filled by the decorator
    config = SizeConfig.from_spark_conf(spark)
    return build_aggregator(spark, config).calculate_total_size(table)


@fill_in_spark_session
def update_table_stats(
    table: CatalogTable,
    stats_store: StatsStore,
    spark: SparkSession | None = None,
) -> None:
    """Refresh the stats of `table` after a command changed its data."""
    assert spark is not None  # filled by the decorator
    config = SizeConfig.from_spark_conf(spark)
    policy = StatsRefreshPolicy(
        catalog=SparkCatalog(spark),
        stats_store=stats_store,
        aggregator=build_aggregator(spark, config),
        config=config,
    )
    policy.refresh_stats(table)
