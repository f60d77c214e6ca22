from __future__ import annotations
from typing import Any
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class TableStats:
    size_in_bytes: int
    row_count: int | None = None
    column_stats: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.size_in_bytes < 0:
            raise ValueError(
                f'`size_in_bytes` must be non-negative, got {self.size_in_bytes}'
            )

    @staticmethod
    def size_only(size_in_bytes: int) -> TableStats:
        """Stats carrying only the size, row count and column stats unknown."""
        return TableStats(size_in_bytes=size_in_bytes)

    @property
    def size_gib(self) -> float:
        return self.size_in_bytes / 1024**3
