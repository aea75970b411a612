"""
Document-level types shared by adapters, filters and the collection facade.

Dependencies: enum, typing
System role: Storage-layer record format and replace mode selection
"""

import enum
from typing import Any, Union

Document = dict[str, Any]

# Exact class identity or an explicit string tag
TypeKey = Union[type, str]


class ReplaceMode(str, enum.Enum):
    """How many stored records push_or_replace removes before inserting."""

    ONE = "one"
    ALL = "all"


def type_display_name(type_key: TypeKey) -> str:
    """
    Human-readable name of a type key for errors and logs.

    Args:
        type_key: Class or string tag

    Returns:
        str: Class __name__ or the tag itself
    """
    if isinstance(type_key, str):
        return type_key
    return getattr(type_key, "__name__", repr(type_key))
