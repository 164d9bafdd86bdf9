from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .records import MISSING, TableModel, get_cell

logger = logging.getLogger(__name__)

FIELD_COLUMN = 'Field'


def row_label(index: int) -> str:
    """1-based label used for the pivoted value columns."""
    return f"Row {index}"


@dataclass
class PivotedTable:
    """Transpose of a TableModel: one row per original column.

    Keeps a reference to its source table, which is never modified, so
    toggling back hands back the original object untouched.
    """

    source: TableModel
    rows: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        return [FIELD_COLUMN] + [row_label(i) for i in range(1, self.source.row_count + 1)]


TableView = Union[TableModel, PivotedTable]


def pivot_table(table: TableModel) -> PivotedTable:
    pivoted_rows: List[Dict[str, Any]] = []
    for column in table.columns:
        row: Dict[str, Any] = {FIELD_COLUMN: column}
        for i, original in enumerate(table.rows, start=1):
            value = get_cell(original, column)
            row[row_label(i)] = '' if value is MISSING else value
        pivoted_rows.append(row)

    logger.debug("Pivoted %d column(s) x %d row(s)", len(table.columns), table.row_count)
    return PivotedTable(source=table, rows=pivoted_rows)


def is_pivoted(view: TableView) -> bool:
    return isinstance(view, PivotedTable)


def toggle_pivot(view: TableView) -> TableView:
    """Flip between the pivoted and unpivoted view of the same table."""
    if isinstance(view, PivotedTable):
        return view.source
    return pivot_table(view)
