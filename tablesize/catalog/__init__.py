from tablesize.catalog.catalog_view import CatalogView, StatsStore
from tablesize.catalog.in_memory_catalog import InMemoryCatalog
from tablesize.catalog.spark_catalog import SparkCatalog
