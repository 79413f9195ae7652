from typing import Any


def natural_compare(one: Any, other: Any) -> int:
    """simple comparator"""

    if one == other:
        return 0
    if one < other:
        return -1

    return 1
