from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from .errors import NoDataError
from .flattening import flatten_records
from .io_utils import parse_json_text
from .pivot import TableView, is_pivoted, toggle_pivot
from .records import TableModel, build_table
from .serializers import ExportFormat, serialize
from .settings import DEFAULT_SETTINGS, ConverterSettings

logger = logging.getLogger(__name__)


def convert_text(text: str, settings: ConverterSettings = DEFAULT_SETTINGS) -> TableModel:
    """Parse, flatten and tabulate raw JSON text."""
    data = parse_json_text(text, max_depth=settings.max_depth)
    records = flatten_records(data, max_depth=settings.max_depth)
    return build_table(records)


@dataclass(frozen=True)
class ConverterSession:
    """The caller-owned "current table" plus its pivot state.

    Every transition returns a new session. A transition that raises leaves
    the session it was called on exactly as it was.
    """

    table: Optional[TableModel] = None
    pivoted: bool = False

    @property
    def row_count(self) -> int:
        return self.table.row_count if self.table is not None else 0

    def convert(self, text: str, settings: Optional[ConverterSettings] = None) -> 'ConverterSession':
        table = convert_text(text, settings or DEFAULT_SETTINGS)
        logger.debug("Session replaced table with %d row(s)", table.row_count)
        return ConverterSession(table=table, pivoted=False)

    def _require_table(self) -> TableModel:
        if self.table is None:
            raise NoDataError("No data to pivot. Please convert JSON first.")
        return self.table

    def toggle_pivot(self) -> 'ConverterSession':
        flipped = toggle_pivot(self.view())
        return replace(self, pivoted=is_pivoted(flipped))

    def view(self) -> TableView:
        table = self._require_table()
        # Derived fresh each time; the retained table is never touched.
        return toggle_pivot(table) if self.pivoted else table

    def export(self, fmt: ExportFormat, settings: Optional[ConverterSettings] = None) -> str:
        if self.table is None or self.table.row_count == 0:
            raise NoDataError()
        settings = settings or DEFAULT_SETTINGS
        return serialize(self.view(), fmt, include_bom=settings.include_bom)
