from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .flattening import FlatRecord

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for a column that a row does not have."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass
class TableModel:
    """Columns plus rows; `columns` is the first-seen union of row keys."""

    columns: List[str] = field(default_factory=list)
    rows: List[FlatRecord] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def collect_columns(records: Iterable[Dict[str, Any]]) -> List[str]:
    """Union of record keys, ordered by first appearance.

    The first record's keys come first in their own order, then any key that
    a later record introduces, appended when it is first seen.
    """
    seen: Dict[str, None] = {}
    for record in records:
        for key in record:
            if key not in seen:
                seen[key] = None
    return list(seen)


def build_table(records: List[FlatRecord]) -> TableModel:
    columns = collect_columns(records)
    logger.debug("Built table with %d column(s) and %d row(s)", len(columns), len(records))
    return TableModel(columns=columns, rows=list(records))


def get_cell(row: Dict[str, Any], column: str) -> Any:
    """Value of `column` in `row`, or MISSING when the row lacks it."""
    return row[column] if column in row else MISSING
