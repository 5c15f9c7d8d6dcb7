"""Build the nested submitted-data container from a request form.

Starlette (and so FastAPI) parses ``application/x-www-form-urlencoded``
and ``multipart/form-data`` bodies into flat ``(name, value)`` pairs.
The extractors work on a nested container instead, keyed by the same
bracket segments :func:`formkit.utils.helpers.field_path` produces:

``user[name]=Ann&tags[]=a&tags[]=b`` -> ``{"user": {"name": "Ann"}, "tags": ["a", "b"]}``
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Tuple, Union

from starlette.requests import Request

logger = logging.getLogger(__name__)

_SEGMENT = re.compile(r"\[([^\]]*)\]")

Node = Union[Dict[str, Any], List[Any]]


def split_name(name: str) -> list[str]:
    """``"a[b][]"`` -> ``["a", "b", ""]``; an empty segment means append."""
    head, bracket, rest = name.partition("[")
    segments = [head]
    if bracket:
        segments.extend(_SEGMENT.findall(bracket + rest))
    return [segment.replace(".", "_") for segment in segments]


def _next_index(node: Dict[str, Any]) -> str:
    """Key for an appended item: one past the highest integer key."""
    indexes = [int(key) for key in node if key.isdecimal()]
    return str(max(indexes) + 1) if indexes else "0"


def _child(node: Node, key: str, next_key: str) -> Node:
    """Return the container stored under ``key``, creating it as needed.

    ``node`` is a list only below an append segment, where ``key`` is ``""``.
    """
    created: Node = [] if next_key == "" else {}
    if isinstance(node, list):
        node.append(created)
        return created
    if key == "":
        key = _next_index(node)
    existing = node.get(key)
    if isinstance(existing, dict) or (isinstance(existing, list) and next_key == ""):
        return existing
    if isinstance(existing, list):
        created = {str(i): v for i, v in enumerate(existing)}
    node[key] = created
    return created


def _assign(node: Node, key: str, value: Any) -> None:
    if isinstance(node, list):
        node.append(value)
        return
    if key == "":
        key = _next_index(node)
    node[key] = value


def build_http_data(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Fold flat form pairs into a nested container.

    Later pairs win over earlier ones for the same scalar name; ``[]``
    segments collect every value in submission order, after any explicit
    integer keys already present (``a[1]=x&a[]=y`` keeps both).
    """
    data: Dict[str, Any] = {}
    for name, value in items:
        segments = split_name(name)
        if not segments[0]:
            logger.debug("[request] ignoring form field without a name: %r", name)
            continue
        node: Node = data
        for key, next_key in zip(segments, segments[1:]):
            node = _child(node, key, next_key)
        _assign(node, segments[-1], value)
    return data


async def read_http_data(request: Request) -> Dict[str, Any]:
    """Parse the request form and return the nested submitted container."""
    form = await request.form()
    return build_http_data(form.multi_items())
