from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 512


@dataclass(frozen=True)
class ConverterSettings:
    """Knobs for a conversion run.

    - max_depth: deepest container nesting the flattener will expand
    - include_bom: prefix CSV output with a UTF-8 byte-order mark
    - filename_prefix: stem used for downloaded exports
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    include_bom: bool = True
    filename_prefix: str = 'json-table'


DEFAULT_SETTINGS = ConverterSettings()
