from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjtasksConfig:
    json_indent: int | None = None  # None emits compact JSON
    json_sort_keys: bool = False
    log_level: str = "WARNING"
