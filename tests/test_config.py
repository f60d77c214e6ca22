import pytest
from tablesize import SizeConfig


class FakeConf:
    def __init__(self, values: dict[str, str]) -> None:
        self.values = values

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.values.get(key, default)


class FakeSpark:
    def __init__(self, values: dict[str, str]) -> None:
        self.conf = FakeConf(values)


def test_defaults() -> None:
    config = SizeConfig()
    assert config.auto_update_size is False
    assert config.staging_dir_prefix == '.hive-staging'


def test_empty_staging_dir_prefix() -> None:
    with pytest.raises(AssertionError):
        SizeConfig(staging_dir_prefix='')


conf_tests = [
    ({}, SizeConfig()),
    (
        {'spark.sql.statistics.size.autoUpdate.enabled': 'true'},
        SizeConfig(auto_update_size=True),
    ),
    (
        {
            'spark.sql.statistics.size.autoUpdate.enabled': 'FALSE',
            'hive.exec.stagingdir': '_tmp',
        },
        SizeConfig(staging_dir_prefix='_tmp'),
    ),
]


@pytest.mark.parametrize('values_expected', conf_tests)
def test_from_spark_conf(
    values_expected: tuple[dict[str, str], SizeConfig]
) -> None:
    values, expected = values_expected
    assert SizeConfig.from_spark_conf(FakeSpark(values)) == expected
