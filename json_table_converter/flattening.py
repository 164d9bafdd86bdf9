from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .errors import MaxDepthExceeded
from .settings import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

FlatRecord = Dict[str, Any]

EMPTY_ARRAY = '[]'
EMPTY_OBJECT = '{}'


def child_key(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def index_key(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"


def flatten_value(
    value: Any,
    prefix: str = '',
    result: Optional[FlatRecord] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> FlatRecord:
    """Reduce one JSON value to a flat key -> leaf mapping.

    Objects contribute dotted keys, arrays contribute `[index]` suffixes and
    empty containers are kept as the marker strings '[]' and '{}'. Keys are
    emitted in pre-order, so the result reads in document order.

    Uses an explicit stack instead of recursion; expanding a container whose
    children would sit deeper than `max_depth` raises MaxDepthExceeded.
    """
    if result is None:
        result = {}

    stack = [(prefix, value, 0)]
    while stack:
        key, node, depth = stack.pop()

        if isinstance(node, list):
            if not node:
                result[key] = EMPTY_ARRAY
                continue
            if depth >= max_depth:
                raise MaxDepthExceeded(max_depth, key)
            children = [(index_key(key, i), item, depth + 1) for i, item in enumerate(node)]
        elif isinstance(node, dict):
            if not node:
                result[key] = EMPTY_OBJECT
                continue
            if depth >= max_depth:
                raise MaxDepthExceeded(max_depth, key)
            children = [(child_key(key, str(k)), v, depth + 1) for k, v in node.items()]
        else:
            # None, bool, numbers and strings are leaves.
            result[key] = node
            continue

        # Reversed so the first child is popped first.
        stack.extend(reversed(children))

    return result


def flatten_records(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> List[FlatRecord]:
    """Flatten a parsed JSON document into one record per top-level element.

    - list root   -> one record per element (an empty list gives no records)
    - dict root   -> a single record
    - scalar root -> a single record keyed by ''
    """
    if isinstance(data, list):
        records = [flatten_value(item, max_depth=max_depth) for item in data]
    else:
        records = [flatten_value(data, max_depth=max_depth)]

    logger.debug("Flattened %d record(s)", len(records))
    return records
