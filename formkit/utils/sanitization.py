"""
Sanitization of submitted form values.
Normalises one raw value to the semantic type the control declares.
"""

import re
from typing import Any, Optional

from starlette.datastructures import UploadFile

from formkit.core.errors import UnknownDataTypeError
from formkit.models.enums import DataType

_NEWLINES = re.compile(r"\r\n?|\u2028|\u2029")
_LINE_BREAKS = str.maketrans("\r\n", "  ")


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float))


def to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def normalize_newlines(value: str) -> str:
    """Convert ``\\r\\n``, ``\\r`` and Unicode line/paragraph separators to ``\\n``."""
    return _NEWLINES.sub("\n", value)


def sanitize(data_type: int, value: Any) -> Optional[Any]:
    """Return ``value`` normalised to ``data_type`` or ``None``.

    ``TEXT`` keeps line breaks (normalised to ``\\n``), ``LINE`` folds them
    into spaces and trims the result, ``FILE`` only lets uploaded files
    through. Any other type is a programming error.
    """
    if data_type == DataType.TEXT:
        return normalize_newlines(to_text(value)) if is_scalar(value) else None

    elif data_type == DataType.LINE:
        if not is_scalar(value):
            return None
        # str.strip() trims Unicode whitespace
        line = normalize_newlines(to_text(value)).translate(_LINE_BREAKS).strip()
        return line or None

    elif data_type == DataType.FILE:
        return value if isinstance(value, UploadFile) else None

    raise UnknownDataTypeError(data_type)
