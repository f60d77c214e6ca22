import logging
from dataclasses import dataclass

from tablesize.config import SizeConfig
from tablesize.catalog import CatalogView, StatsStore
from tablesize.catalog_table import CatalogTable
from tablesize.table_stats import TableStats
from tablesize.table_size_aggregator import TableSizeAggregator

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class StatsRefreshPolicy:
    """Keeps the size statistic of a table in line after its data changed."""
    catalog: CatalogView
    stats_store: StatsStore
    aggregator: TableSizeAggregator
    config: SizeConfig

    def refresh_stats(self, table: CatalogTable) -> None:
        """Recompute the size, or clear the stats, of a table with stats.

        Tables without a stats record are left alone. The new record holds the
        size only, row count and column stats no longer match the data.
        """
        if table.stats is None:
            return None

        identifier = table.identifier
        if not self.config.auto_update_size:
            log.info(f'Clearing the stats of `{identifier.table_id}`')
            self.stats_store.alter_table_stats(identifier, None)
            return None

        latest_table = self.catalog.get_table_metadata(identifier)
        new_size = self.aggregator.calculate_total_size(latest_table)
        log.info(
            f'Updating the size of `{identifier.table_id}` to {new_size} bytes'
        )
        self.stats_store.alter_table_stats(
            identifier, TableStats.size_only(new_size)
        )
        return None
