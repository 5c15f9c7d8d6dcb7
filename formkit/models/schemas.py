"""Pydantic schemas for the data the helpers hand out or accept.

``RuleRecord`` is the wire shape of one exported validation rule, and
``AttrSpec`` is the explicit configuration of one attribute for the
markup builders.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import AttrMode


class RuleRecord(BaseModel):
    """One exported validation rule.

    Leaf rules carry ``msg``; branch rules carry the nested ``rules``,
    the ``control`` the condition is evaluated on and optionally the
    ``toggle`` effects of the branch. Fields that were never set are
    left out of the payload.
    """

    op: str
    msg: Optional[str] = None
    rules: Optional[List[RuleRecord]] = None
    control: Optional[str] = None
    toggle: Optional[Dict[str, bool]] = None
    arg: Any = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


RuleRecord.model_rebuild()


class AttrSpec(BaseModel):
    """Attribute applied to the items rendered by a markup builder."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    value: Any = None
    mode: AttrMode = Field(default=AttrMode.STATIC)

    @classmethod
    def static(cls, name: str, value: Any) -> AttrSpec:
        return cls(name=name, value=value, mode=AttrMode.STATIC)

    @classmethod
    def boolean_set(cls, name: str, values: Any) -> AttrSpec:
        """``name`` is set on every item whose value is in ``values``."""
        return cls(name=name, value=values, mode=AttrMode.BOOLEAN_SET)

    @classmethod
    def value_map(cls, name: str, mapping: Any) -> AttrSpec:
        """``name`` takes ``mapping[item value]`` on each item."""
        return cls(name=name, value=mapping, mode=AttrMode.VALUE_MAP)
