import math
from typing import Any, Optional

# Largest OFFSET/LIMIT a 64-bit database integer can hold
MAX_ROW_OFFSET = 2 ** 63 - 1


def clamp_int(value: Any, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(value) if value is not None else default
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def skip_for(page: int, limit: int) -> int:
    return min((page - 1) * limit, MAX_ROW_OFFSET)


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
