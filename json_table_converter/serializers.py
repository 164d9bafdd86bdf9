from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Any, List, Optional

from .errors import UnsupportedFormatError
from .formatting import view_cells

logger = logging.getLogger(__name__)

UTF8_BOM = '\ufeff'
_CSV_SPECIAL = (',', '"', '\r', '\n')


class ExportFormat(Enum):
    CSV = 'csv'
    MARKDOWN = 'md'
    TEXT = 'txt'

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> 'ExportFormat':
        """Accept 'CSV', 'Markdown', 'Text' or a bare extension."""
        normalized = (label or '').strip().lower()
        for fmt in cls:
            if normalized in (fmt.name.lower(), fmt.value):
                return fmt
        raise UnsupportedFormatError(label)


def resolve_columns(view) -> List[str]:
    """Header for a view: Field/Row 1..N when pivoted, else the table columns."""
    return list(view.columns)


def escape_csv_field(value: Any) -> str:
    if value is None:
        return ''
    text = str(value)
    if any(ch in text for ch in _CSV_SPECIAL):
        return '"' + text.replace('"', '""') + '"'
    return text


def escape_markdown_cell(value: Any) -> str:
    return str(value).replace('|', '\\|')


def to_csv(view, include_bom: bool = True) -> str:
    """RFC 4180 style CSV: header plus one line per row, '\\n' separated."""
    if not view.rows:
        return ''
    columns = resolve_columns(view)
    lines = [','.join(escape_csv_field(c) for c in columns)]
    lines.extend(','.join(escape_csv_field(cell) for cell in cells) for cells in view_cells(view))
    content = '\n'.join(lines)
    return UTF8_BOM + content if include_bom else content


def to_markdown(view) -> str:
    if not view.rows:
        return ''

    def line(cells):
        return '| ' + ' | '.join(escape_markdown_cell(c) for c in cells) + ' |'

    columns = resolve_columns(view)
    lines = [line(columns), '| ' + ' | '.join('---' for _ in columns) + ' |']
    lines.extend(line(cells) for cells in view_cells(view))
    return '\n'.join(lines)


def to_text(view) -> str:
    """Tab-delimited text. Embedded tabs and newlines are written as-is."""
    if not view.rows:
        return ''
    lines = ['\t'.join(resolve_columns(view))]
    lines.extend('\t'.join(cells) for cells in view_cells(view))
    return '\n'.join(lines)


def serialize(view, fmt: ExportFormat, include_bom: bool = True) -> str:
    if fmt is ExportFormat.CSV:
        output = to_csv(view, include_bom=include_bom)
    elif fmt is ExportFormat.MARKDOWN:
        output = to_markdown(view)
    elif fmt is ExportFormat.TEXT:
        output = to_text(view)
    else:
        raise UnsupportedFormatError(fmt)

    logger.debug("Serialized %d row(s) to %s (%d chars)", len(view.rows), fmt.name, len(output))
    return output


def export_filename(
    fmt: ExportFormat = ExportFormat.CSV,
    today: Optional[date] = None,
    prefix: str = 'json-table',
) -> str:
    """`json-table-YYYY-MM-DD.csv` style download name."""
    day = today or date.today()
    return f"{prefix}-{day.isoformat()}.{fmt.extension}"
