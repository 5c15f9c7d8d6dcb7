"""Export of validation rules for the client-side validator.

The exporter walks a :class:`~formkit.models.rules.Rules` tree and turns
it into a list of plain records that can be embedded in the page as
JSON (for example in a ``data-rules`` attribute):

* Leaf rules become ``{"op": ..., "msg": ...}``.
* Branch rules become ``{"op": ..., "rules": [...], "control": ...}``
  plus ``"toggle"`` when the branch shows or hides page elements.
* Arguments that are controls are exported as ``{"control": html_name}``
  so the client compares against the live value of that control.
* Negated rules get a ``~`` prefix on their operator.
* An optional rule set starts with ``{"op": "optional"}``.

Rules whose validator is a callable that cannot be referenced by name
(lambdas, closures, bound methods of instances) exist only on the server
and are left out.
"""

from __future__ import annotations

import inspect
import json
import logging
from typing import Any, Dict, List, Optional

from formkit.models.rules import BranchRule, Control, Rule, Rules, Validator
from formkit.models.schemas import RuleRecord
from formkit.services.messages import format_message

logger = logging.getLogger(__name__)

NEGATION_PREFIX = "~"
OPTIONAL_OP = "optional"


def is_static_callable(validator: Any) -> bool:
    """True if ``validator`` can be referenced by a stable dotted name."""
    if inspect.ismethod(validator):
        # Class methods are bound to the class itself
        return inspect.isclass(validator.__self__) and is_static_callable(validator.__func__)
    if inspect.isbuiltin(validator):
        owner = getattr(validator, "__self__", None)
        if not (owner is None or inspect.ismodule(owner) or inspect.isclass(owner)):
            return False
    elif not inspect.isfunction(validator):
        return False
    qualname = getattr(validator, "__qualname__", "")
    return "<lambda>" not in qualname and "<locals>" not in qualname


def callable_name(validator: Any) -> str:
    """Dotted name of a static callable, e.g. ``"myapp.checks.Rules.is_even"``."""
    module = getattr(validator, "__module__", None)
    qualname = validator.__qualname__
    return f"{module}.{qualname}" if module else qualname


def operator_name(validator: Validator) -> Optional[str]:
    """Operator the client knows ``validator`` by, or ``None`` if it has none."""
    if isinstance(validator, str):
        return validator
    if is_static_callable(validator):
        return callable_name(validator)
    return None


def _export_arg(arg: Any) -> Any:
    if isinstance(arg, dict):
        return {key: _export_value(value) for key, value in arg.items()}
    if isinstance(arg, (list, tuple)):
        return [_export_value(value) for value in arg]
    return _export_value(arg)


def _export_value(value: Any) -> Any:
    if isinstance(value, Control):
        return {"control": value.html_name}
    return value


def _export_rule(rule: Rule, op: str) -> Optional[RuleRecord]:
    if rule.is_negative:
        op = NEGATION_PREFIX + op

    if isinstance(rule, BranchRule):
        nested = _export(rule.branch)
        record = RuleRecord(op=op, rules=nested, control=rule.control.html_name)
        toggles = rule.branch.toggles
        if toggles:
            record.toggle = toggles
        elif not nested:
            return None
    else:
        record = RuleRecord(op=op, msg=format_message(rule, with_value=False))

    if rule.arg is not None:
        record.arg = _export_arg(rule.arg)
    return record


def _export(rules: Rules) -> List[RuleRecord]:
    records: List[RuleRecord] = []
    for rule in rules:
        op = operator_name(rule.validator)
        if op is None:
            logger.debug("[rules] skipping rule with non-static validator %r", rule.validator)
            continue
        record = _export_rule(rule, op)
        if record is not None:
            records.append(record)
    if records and rules.optional:
        records.insert(0, RuleRecord(op=OPTIONAL_OP))
    return records


def export_rules(rules: Rules) -> List[Dict[str, Any]]:
    """Flatten ``rules`` into JSON-serialisable records."""
    return [record.to_payload() for record in _export(rules)]


def export_rules_json(rules: Rules) -> str:
    """``export_rules`` serialised as a compact JSON string."""
    return json.dumps(export_rules(rules), separators=(",", ":"))
