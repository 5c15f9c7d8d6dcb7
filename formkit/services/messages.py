"""Human readable messages for validation rules.

A rule carries an optional message template; rules without one fall back
to the default message of their operator. Templates support these
placeholders:

* ``%label`` – label of the rule's control, without a trailing colon.
* ``%name`` – identifier of the rule's control.
* ``%value`` – current value of the control. When exporting for the
  client the placeholder is kept so the browser fills in the live value.
* ``%d`` / ``%s`` – the rule arguments, consumed in order.
* ``%%`` – a literal percent sign.
"""

from __future__ import annotations

import re
from typing import Any, List

from formkit.models.rules import Control, Rule

FALLBACK_MESSAGE = "Please enter a valid value."

DEFAULT_MESSAGES = {
    ":filled": "This field is required.",
    ":blank": "This field should be blank.",
    ":equal": "Please enter %s.",
    ":notEqual": "This value should not be %s.",
    ":minLength": "Please enter at least %d characters.",
    ":maxLength": "Please enter no more than %d characters.",
    ":length": "Please enter a value between %d and %d characters long.",
    ":email": "Please enter a valid email address.",
    ":url": "Please enter a valid URL.",
    ":integer": "Please enter a valid integer.",
    ":float": "Please enter a valid number.",
    ":min": "Please enter a value greater than or equal to %d.",
    ":max": "Please enter a value less than or equal to %d.",
    ":range": "Please enter a value between %d and %d.",
    ":pattern": "Please enter a value in the required format.",
    ":maxFileSize": "The size of the uploaded file can be up to %d bytes.",
    ":mimeType": "The uploaded file is not in the expected format.",
    ":image": "The uploaded file must be image in format JPEG, GIF, PNG or WebP.",
}

_PLACEHOLDER = re.compile(r"%(label|name|value|[ds%])")


def _arguments(arg: Any) -> List[Any]:
    if arg is None:
        return []
    if isinstance(arg, dict):
        return list(arg.values())
    if isinstance(arg, (list, tuple)):
        return list(arg)
    return [arg]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (list, tuple)):
        return ", ".join(_text(v) for v in value)
    return str(value)


def _label(control: Control) -> str:
    return (control.label or control.name).rstrip().rstrip(":")


def format_message(rule: Rule, with_value: bool = True) -> str:
    """Render the message of ``rule``."""
    template = rule.message
    if template is None and isinstance(rule.validator, str):
        template = DEFAULT_MESSAGES.get(rule.validator)
    if template is None:
        template = FALLBACK_MESSAGE

    args = iter(_arguments(rule.arg))

    def replace(match: re.Match) -> str:
        token = match.group(1)
        if token == "%":
            return "%"
        if token == "label":
            return _label(rule.control)
        if token == "name":
            return rule.control.name
        if token == "value":
            return _text(rule.control.value) if with_value else match.group(0)
        try:
            arg = next(args)
        except StopIteration:
            return match.group(0)
        if isinstance(arg, Control):
            return _text(arg.value) if with_value else _label(arg)
        if token == "d" and isinstance(arg, float) and arg.is_integer():
            return str(int(arg))
        return _text(arg)

    return _PLACEHOLDER.sub(replace, template)
