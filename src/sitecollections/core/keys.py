"""Normalization of metadata values into group keys.

Metadata values come straight from YAML frontmatter and may be scalars or
lists of scalars. Grouping needs one canonical string per value, so that
``1``, ``1.0`` and ``"1"`` land in the same group and ``True`` is stored
under ``"true"``.
"""

from datetime import date, datetime
from typing import Any


def normalize_values(value: Any) -> list[Any]:
    """Return ``value`` as a list, wrapping scalars in a one-element list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def group_key(value: Any) -> str:
    """Return the canonical string key for a single metadata value."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(group_key(item) for item in value)
    return str(value)
