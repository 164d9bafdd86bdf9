from __future__ import annotations

import json
import logging
from typing import Any

from .errors import EmptyInputError, MaxDepthExceeded, ParseError, ReadError
from .settings import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


def read_text_content(file_obj) -> str:
    """Read UTF-8 text from an uploaded file, a file-like object or a path."""
    if file_obj is None:
        raise ReadError('file', 'No file uploaded.')

    try:
        if hasattr(file_obj, 'read'):
            if hasattr(file_obj, 'seek'):
                file_obj.seek(0)
            content = file_obj.read()
            if isinstance(content, bytes):
                content = content.decode('utf-8')
            return content

        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError('file', str(exc)) from exc


def _reject_constant(name: str):
    # NaN and the infinities are a Python extension, not JSON.
    raise ParseError(f"Unexpected token {name!r} is not valid JSON")


def parse_json_text(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Parse raw JSON text into a single JSON value.

    Raises EmptyInputError for blank input and ParseError (carrying the
    decoder's message and position) for malformed text.
    """
    if text is None or not text.strip():
        raise EmptyInputError()

    try:
        return json.loads(text.strip(), parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed at line %s column %s", exc.lineno, exc.colno)
        raise ParseError(str(exc), pos=exc.pos, lineno=exc.lineno, colno=exc.colno) from exc
    except RecursionError as exc:
        raise MaxDepthExceeded(max_depth) from exc
