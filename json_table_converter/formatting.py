from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, List

from .records import MISSING, get_cell


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, laid out like a JS number.

    Integral values drop the '.0', plain notation is used for decimal
    exponents from -6 to 20 and exponents are written without zero padding
    ('1e-7', '1e+21'). Non-finite values render as 'Infinity'/'-Infinity'.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = ''.join(str(d) for d in digit_tuple)
    k = len(digits)
    # value == 0.digits * 10 ** point
    point = k + exponent

    if k <= point <= 21:
        text = digits + '0' * (point - k)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = '0.' + '0' * -point + digits
    else:
        e = point - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + text


def format_cell_value(value: Any) -> str:
    """Render one cell as display/export text.

    None -> 'null', a missing cell -> '', booleans -> 'true'/'false',
    containers that were not decomposed -> compact JSON, floats via
    format_number. Nothing applies locale grouping or decimal marks.
    """
    if value is MISSING:
        return ''
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    return str(value)


def row_cells(row, columns: List[str]) -> List[str]:
    return [format_cell_value(get_cell(row, column)) for column in columns]


def view_cells(view) -> List[List[str]]:
    """Formatted grid (without header) for a table or pivoted table."""
    columns = view.columns
    return [row_cells(row, columns) for row in view.rows]
