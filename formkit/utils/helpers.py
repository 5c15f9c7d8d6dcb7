"""Helpers shared by controls: HTML names and submitted data lookup.

Control identifiers are joined with ``NAME_SEPARATOR`` (``"address-street"``)
and rendered as bracketed HTML names (``"address[street]"``). Browsers
submit values under those names, and :func:`extract_http_data` walks the
nested submitted container along the same bracket segments, so a generated
name always finds the value submitted for it.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from formkit.models.enums import DataType
from formkit.utils.sanitization import sanitize

NAME_SEPARATOR = "-"

# Names colliding with properties of the DOM form element
UNSAFE_NAMES = frozenset({
    "attributes", "children", "elements", "focus", "length", "reset", "style", "submit", "onsubmit", "form",
    "presenter", "action",
})

LIST_SUFFIX = "[]"

_NUMERIC = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(value: str) -> bool:
    """True for numeric strings such as ``"12"``, ``"-1.5"`` or ``"1e3"``."""
    return bool(_NUMERIC.match(value))


def field_path(html_name: str) -> list[str]:
    """Split an HTML name into the keys used to look up its submitted value.

    ``"user[address][street]"`` -> ``["user", "address", "street"]``. Dots
    become underscores, the way form parsers normalise top-level names.
    """
    name = html_name.replace(LIST_SUFFIX, "").replace("]", "").replace(".", "_")
    return name.split("[")


def get_nested(data: Any, path: Sequence[Any], default: Any = None) -> Any:
    """Return ``data[path[0]][path[1]]...`` or ``default`` if any step is missing."""
    for key in path:
        if isinstance(data, Mapping) and key in data:
            data = data[key]
        elif isinstance(data, (list, tuple)) and isinstance(key, str) and key.isdigit() and int(key) < len(data):
            data = data[int(key)]
        else:
            return default
    return data


def extract_http_data(data: Mapping[str, Any], html_name: str, data_type: int) -> Any:
    """Extract and sanitize the submitted value of a single control.

    :param data: Nested submitted container (see
        :func:`formkit.utils.request_data.build_http_data`).
    :param html_name: Rendered name of the control. A trailing ``[]``
        marks a multi-value control.
    :param data_type: ``DataType.TEXT``, ``LINE`` or ``FILE``, optionally
        combined with ``DataType.KEYS``.
    :returns: The sanitised value, ``None`` if it is missing or invalid,
        or for multi-value controls a list (a dict with ``KEYS``) holding
        only the values that survived sanitisation.
    """
    value = get_nested(data, field_path(html_name))
    keep_keys = bool(data_type & DataType.KEYS)
    item_type = data_type & ~DataType.KEYS

    if not html_name.endswith(LIST_SUFFIX):
        return sanitize(item_type, value)

    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(enumerate(value))
    else:
        items = []

    result: dict[Any, Any] = {}
    for key, item in items:
        item = sanitize(item_type, item)
        if item is not None:
            result[key] = item
    if keep_keys:
        return result
    return list(result.values())


def generate_html_name(identifier: str) -> str:
    """Convert a control identifier to its HTML name.

    ``"address-street"`` becomes ``"address[street]"``. Numeric names and
    names in ``UNSAFE_NAMES`` get an underscore prefix.
    """
    name = identifier.replace(NAME_SEPARATOR, "][")
    if name != identifier:
        first = name.index("]")
        name = name[:first] + name[first + 1:] + "]"
    if is_numeric(name) or name in UNSAFE_NAMES:
        name = "_" + name
    return name

