from __future__ import annotations
import functools
from urllib.parse import quote, unquote
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class PartitionSpec:
    """A single partition of a table, as recorded by the catalog.

    Parameters
    ----------
    values
        Partition column -> value, in partition column order.
    location_uri
        Where the partition data lives, `None` if the catalog has no location
        recorded for it.

    Examples
    --------
    >>> from tablesize import PartitionSpec
    >>> p = PartitionSpec.from_partition_path('a=1/b=x%2Fy')
    >>> p.values
    {'a': '1', 'b': 'x/y'}
    >>> p.partition_path
    'a=1/b=x%2Fy'
    """
    values: dict[str, str] = field(default_factory=dict)
    location_uri: str | None = None

    @staticmethod
    def from_partition_path(
        partition_path: str, location_uri: str | None = None
    ) -> PartitionSpec:
        values = {}
        for component in partition_path.strip('/').split('/'):
            _m = f'Invalid partition path component `{component}`'
            assert '=' in component, _m
            key, value = component.split('=', 1)
            values[unquote(key)] = unquote(value)

        return PartitionSpec(values=values, location_uri=location_uri)

    @functools.cached_property
    def partition_path(self) -> str:
        return '/'.join(
            f'{quote(k, safe="")}={quote(v, safe="")}'
            for k, v in self.values.items()
        )
