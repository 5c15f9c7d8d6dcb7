"""Validation rule tree consumed by the rule exporter.

A ``Rules`` container holds an ordered list of rules attached to one
control. Each rule is either a ``LeafRule`` (a check with a message) or
a ``BranchRule`` (a condition whose nested ``Rules`` apply only when the
condition holds, optionally toggling page elements on the client).

Validators are either operator names understood by the client-side
validator (``":filled"``, ``":minLength"``) or Python callables. Only
callables that can be referenced by a stable dotted name are exported.

The container is built fluently:

```python
rules = Rules(control=email)
rules.add_rule(":filled", "Enter your e-mail.")
rules.add_condition_on(newsletter, ":equal", True).add_rule(":email").toggle("email-box")
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol, Union, runtime_checkable

from formkit.utils.helpers import generate_html_name

Validator = Union[str, Callable[..., bool]]


@runtime_checkable
class Control(Protocol):
    """The parts of a form control the helpers rely on."""

    name: str
    label: Optional[str]
    value: Any

    @property
    def html_name(self) -> str: ...


@dataclass
class FormControl:
    """Plain control implementation.

    ``name`` is the full component identifier (``"address-street"``);
    ``html_name`` is derived from it.
    """

    name: str
    label: Optional[str] = None
    value: Any = None

    @property
    def html_name(self) -> str:
        return generate_html_name(self.name)


@dataclass(kw_only=True)
class Rule:
    """Fields shared by leaf and branch rules."""

    control: Control
    validator: Validator
    arg: Any = None
    is_negative: bool = False
    message: Optional[str] = None


@dataclass(kw_only=True)
class LeafRule(Rule):
    """A single check rendered with a message."""


@dataclass(kw_only=True)
class BranchRule(Rule):
    """A condition guarding a nested rule set."""

    branch: Rules


@dataclass
class Rules:
    """Ordered rule set of one control."""

    control: Optional[Control] = None
    optional: bool = False
    _rules: List[Rule] = field(default_factory=list, repr=False)
    _toggles: Dict[str, bool] = field(default_factory=dict, repr=False)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def toggles(self) -> Dict[str, bool]:
        return dict(self._toggles)

    def add_rule(
        self,
        validator: Validator,
        message: Optional[str] = None,
        arg: Any = None,
        *,
        negative: bool = False,
        control: Optional[Control] = None,
    ) -> Rules:
        """Append a leaf rule and return ``self`` for chaining."""
        self._rules.append(
            LeafRule(
                control=self._resolve_control(control),
                validator=validator,
                arg=arg,
                is_negative=negative,
                message=message,
            )
        )
        return self

    def add_condition(self, validator: Validator, arg: Any = None, *, negative: bool = False) -> Rules:
        """Append a condition on this set's own control; returns the branch."""
        return self.add_condition_on(self._resolve_control(None), validator, arg, negative=negative)

    def add_condition_on(
        self,
        control: Control,
        validator: Validator,
        arg: Any = None,
        *,
        negative: bool = False,
    ) -> Rules:
        """Append a condition evaluated on ``control``; returns the branch."""
        branch = Rules(control=self.control if self.control is not None else control)
        self._rules.append(
            BranchRule(
                control=control,
                validator=validator,
                arg=arg,
                is_negative=negative,
                branch=branch,
            )
        )
        return branch

    def toggle(self, element_id: str, hide: bool = True) -> Rules:
        """Show (or with ``hide=False``, hide) ``element_id`` when this set applies."""
        self._toggles[element_id] = hide
        return self

    def _resolve_control(self, control: Optional[Control]) -> Control:
        resolved = control if control is not None else self.control
        if resolved is None:
            raise ValueError("Rule requires a control; pass one or set Rules.control")
        return resolved
