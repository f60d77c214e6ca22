from __future__ import annotations
import functools
from dataclasses import dataclass


@dataclass(kw_only=True, frozen=True)
class TableIdentifier:
    database: str | None = None
    name: str

    @staticmethod
    def from_string(table_id: str) -> TableIdentifier:
        parts = table_id.split('.')
        _m = f'Expected `<database>.<name>` or `<name>`, got `{table_id}`'
        assert 1 <= len(parts) <= 2 and all(parts), _m
        if len(parts) == 1:
            return TableIdentifier(name=parts[0])

        return TableIdentifier(database=parts[0], name=parts[1])

    @functools.cached_property
    def table_id(self) -> str:
        if self.database is None:
            return self.name

        return f'{self.database}.{self.name}'

    @functools.cached_property
    def quoted(self) -> str:
        if self.database is None:
            return f'`{self.name}`'

        return f'`{self.database}`.`{self.name}`'
