"""Enumeration types used throughout the form helpers.

``DataType`` is a flag so that the ``KEYS`` modifier can be combined
with one base type (``DataType.LINE | DataType.KEYS``). ``AttrMode``
tells the markup builders how an attribute value applies to the items
of a list.
"""

from enum import Enum, IntFlag


class DataType(IntFlag):
    """Semantic type a submitted value is sanitised to."""

    TEXT = 1
    LINE = 2
    FILE = 4
    # Modifier: keep the submitted keys of ``name[]`` fields
    KEYS = 8


class AttrMode(str, Enum):
    """How an attribute specification is applied to list items."""

    # Same value on every item
    STATIC = "static"
    # Set to ``True`` on items whose value is in the given set
    BOOLEAN_SET = "boolean_set"
    # Looked up per item value in the given mapping
    VALUE_MAP = "value_map"
