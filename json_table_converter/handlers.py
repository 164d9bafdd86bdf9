from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import replace
from typing import Optional

import gradio as gr
import pandas as pd

from .errors import ConverterError, EmptyInputError, NoDataError, ParseError, ReadError, UnsupportedFormatError
from .formatting import view_cells
from .io_utils import read_text_content
from .pivot import TableView
from .serializers import ExportFormat, export_filename, resolve_columns
from .session import ConverterSession
from .settings import DEFAULT_SETTINGS, ConverterSettings

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data to display. Please paste JSON into the input area above."


def render_grid(view: Optional[TableView]) -> pd.DataFrame:
    """Formatted strings for the grid; every row gets a cell per column."""
    if view is None or not view.rows:
        return pd.DataFrame()
    return pd.DataFrame(view_cells(view), columns=resolve_columns(view))


def pivot_button_label(session: Optional[ConverterSession]) -> str:
    return "Unpivot" if session is not None and session.pivoted else "Pivot"


def convert_handler(text, session, settings: ConverterSettings = DEFAULT_SETTINGS):
    session = session or ConverterSession()
    try:
        new_session = session.convert(text, settings)
    except EmptyInputError as e:
        return session, gr.update(), str(e), gr.update()
    except ParseError as e:
        logger.warning("JSON parse error: %s", e)
        return session, gr.update(), f"JSON parse error: {e}", gr.update()
    except ConverterError as e:
        logger.warning("Conversion failed: %s", e)
        return session, gr.update(), str(e), gr.update()

    logger.info("Converted JSON into %d row(s)", new_session.row_count)
    message = f"Conversion successful! ({new_session.row_count} rows)"
    if new_session.row_count == 0:
        message = f"{message} {NO_DATA_MESSAGE}"
    grid = render_grid(new_session.view())
    return new_session, grid, message, gr.update(value=pivot_button_label(new_session))


def upload_handler(file_obj, session, settings: ConverterSettings = DEFAULT_SETTINGS):
    """Load an uploaded file into the input box, then convert it."""
    if file_obj is None:
        return gr.update(), session, gr.update(), "No file uploaded.", gr.update()

    try:
        text = read_text_content(file_obj)
    except ReadError as e:
        logger.warning("File read failed: %s", e.reason)
        return gr.update(), session, gr.update(), str(e), gr.update()

    new_session, grid, message, pivot_btn = convert_handler(text, session, settings)
    return text, new_session, grid, message, pivot_btn


def toggle_pivot_handler(session):
    session = session or ConverterSession()
    try:
        new_session = session.toggle_pivot()
    except NoDataError as e:
        return session, gr.update(), str(e), gr.update()

    state = "Pivoted" if new_session.pivoted else "Unpivoted"
    return (
        new_session,
        render_grid(new_session.view()),
        f"{state} view ({new_session.row_count} rows).",
        gr.update(value=pivot_button_label(new_session)),
    )


def export_handler(session, format_label, settings: ConverterSettings = DEFAULT_SETTINGS):
    """Serialize the current view and write it to a temp file for download."""
    session = session or ConverterSession()
    try:
        fmt = ExportFormat.from_label(format_label or 'CSV')
        content = session.export(fmt, settings)
    except (NoDataError, UnsupportedFormatError) as e:
        return None, str(e)

    file_name = export_filename(fmt, prefix=settings.filename_prefix)

    try:
        # One directory per export so concurrent sessions never share a path.
        export_dir = tempfile.mkdtemp(prefix=f"{settings.filename_prefix}-", dir=tempfile.gettempdir())
        path = os.path.join(export_dir, file_name)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        logger.warning("Export write failed: %s", e)
        return None, f"An error occurred while saving {fmt.name}: {e}"

    logger.info("Exported %s to %s", fmt.name, path)
    return path, f"{fmt.name} file ready: {file_name}"


def copy_handler(session, format_label, settings: ConverterSettings = DEFAULT_SETTINGS):
    """Serialized view for the copyable output box. The BOM is file-only."""
    session = session or ConverterSession()
    try:
        fmt = ExportFormat.from_label(format_label or 'CSV')
        content = session.export(fmt, replace(settings, include_bom=False))
    except (NoDataError, UnsupportedFormatError) as e:
        return gr.update(), str(e)
    return content, f"{fmt.name} ready to copy."
