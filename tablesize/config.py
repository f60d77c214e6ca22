from __future__ import annotations
from dataclasses import dataclass
from pyspark.sql import SparkSession

from tablesize import session_property

DEFAULT_STAGING_DIR_PREFIX = '.hive-staging'


@dataclass(frozen=True, kw_only=True)
class SizeConfig:
    """Settings of the size statistics refresh.

    Parameters
    ----------
    auto_update_size
        Recompute the table size after data changes. When disabled the stats
        record is cleared instead.
    staging_dir_prefix
        Directory entries starting with this prefix are not counted.
    """
    auto_update_size: bool = False
    staging_dir_prefix: str = DEFAULT_STAGING_DIR_PREFIX

    def __post_init__(self) -> None:
        _m = '`staging_dir_prefix` cannot be empty, it would exclude all files'
        assert self.staging_dir_prefix != '', _m

    @staticmethod
    def from_spark_conf(spark: SparkSession) -> SizeConfig:
        auto_update = spark.conf.get(
            session_property.AUTO_UPDATE_SIZE, 'false'
        )
        staging_dir_prefix = spark.conf.get(
            session_property.STAGING_DIR, DEFAULT_STAGING_DIR_PREFIX
        )
        return SizeConfig(
            auto_update_size=str(auto_update).strip().lower() == 'true',
            staging_dir_prefix=staging_dir_prefix,
        )
