"""
Spark configuration properties read by `tablesize`, useful for autocomplete.
"""
from typing import Literal

SessionProperty = Literal[
    # https://spark.apache.org/docs/latest/configuration.html#runtime-sql-configuration
    'spark.sql.statistics.size.autoUpdate.enabled',
    # Staging directory prefix of Hive write jobs
    'hive.exec.stagingdir',
]

AUTO_UPDATE_SIZE: SessionProperty = (
    'spark.sql.statistics.size.autoUpdate.enabled'
)
STAGING_DIR: SessionProperty = 'hive.exec.stagingdir'
