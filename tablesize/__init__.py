from tablesize import enums
from tablesize.enums import ErrorKind
from tablesize.errors import (
    FileSystemError, PathNotFound, AccessDenied, TableNotFound
)
from tablesize.table_identifier import TableIdentifier
from tablesize.partition_spec import PartitionSpec
from tablesize.table_stats import TableStats
from tablesize.catalog_table import CatalogTable
from tablesize.config import SizeConfig

from tablesize.telemetry import Telemetry, LoggingTelemetry
from tablesize.filesystem import (
    FileSystem, FileStatus, LocalFileSystem, HadoopFileSystem
)
from tablesize.catalog import (
    CatalogView, StatsStore, InMemoryCatalog, SparkCatalog
)

from tablesize.path_size_calculator import PathSizeCalculator, SizeOutcome
from tablesize.table_size_aggregator import TableSizeAggregator
from tablesize.stats_refresh_policy import StatsRefreshPolicy
