"""Minimal HTML element builder used by the markup helpers.

Only what the builders need: attribute rendering with escaping, start and
end tags, inner HTML and copying. Escaping is delegated to ``markupsafe``;
an element implements ``__html__`` so it can be embedded in ``Markup``
without being escaped again.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

from markupsafe import Markup, escape

from formkit.core.config import settings

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "param", "source", "track", "wbr",
})


def _use_xhtml(xhtml: Optional[bool]) -> bool:
    return settings.XHTML if xhtml is None else xhtml


def render_attributes(attrs: Mapping[str, Any], xhtml: Optional[bool] = None) -> str:
    """Render ``attrs`` as `` name="value"`` pairs.

    ``None`` and ``False`` values are skipped, ``True`` renders a bare
    attribute (``name="name"`` in XHTML mode), lists are space-joined and
    mappings keep their truthy keys (``style`` renders ``key: value;``).
    """
    xhtml = _use_xhtml(xhtml)
    out = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            out.append(f' {name}="{name}"' if xhtml else f" {name}")
            continue
        if isinstance(value, Mapping):
            if name == "style":
                parts = [f"{k}: {v};" for k, v in value.items() if v is not None]
            else:
                parts = [str(k) for k, v in value.items() if v]
            if not parts:
                continue
            value = " ".join(parts)
        elif isinstance(value, (list, tuple, set, frozenset)):
            parts = [str(v) for v in value if v is not None]
            if not parts:
                continue
            value = " ".join(parts)
        elif isinstance(value, float) and value.is_integer():
            value = int(value)
        out.append(f' {name}="{escape(value)}"')
    return "".join(out)


class HtmlElement:
    """An HTML element with attributes and raw inner HTML."""

    def __init__(self, name: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None) -> None:
        self.name = name
        self.attrs: Dict[str, Any] = dict(attrs or {})
        self._html = Markup("")

    @classmethod
    def el(cls, name: Optional[str] = None, **attrs: Any) -> HtmlElement:
        # ``class_`` avoids the keyword
        if "class_" in attrs:
            attrs["class"] = attrs.pop("class_")
        return cls(name, attrs)

    def set_name(self, name: Optional[str]) -> HtmlElement:
        self.name = name
        return self

    def add_attributes(self, attrs: Mapping[str, Any]) -> HtmlElement:
        """Merge ``attrs`` in; given attributes win and come first."""
        merged = dict(attrs)
        for key, value in self.attrs.items():
            merged.setdefault(key, value)
        self.attrs = merged
        return self

    def set_html(self, html: Any) -> HtmlElement:
        self._html = Markup(html)
        return self

    def add_html(self, html: Any) -> HtmlElement:
        self._html = self._html + Markup(html)
        return self

    def set_text(self, text: Any) -> HtmlElement:
        self._html = escape(text)
        return self

    def get_html(self) -> Markup:
        return self._html

    def copy(self) -> HtmlElement:
        return copy.deepcopy(self)

    @property
    def is_void(self) -> bool:
        return (self.name or "").lower() in VOID_ELEMENTS

    def attributes(self, xhtml: Optional[bool] = None) -> str:
        return render_attributes(self.attrs, xhtml)

    def start_tag(self, xhtml: Optional[bool] = None) -> str:
        if not self.name:
            return ""
        close = " />" if self.is_void and _use_xhtml(xhtml) else ">"
        return f"<{self.name}{self.attributes(xhtml)}{close}"

    def end_tag(self) -> str:
        if not self.name or self.is_void:
            return ""
        return f"</{self.name}>"

    def render(self, xhtml: Optional[bool] = None) -> Markup:
        if self.is_void:
            return Markup(self.start_tag(xhtml))
        return Markup(self.start_tag(xhtml) + str(self._html) + self.end_tag())

    def __str__(self) -> str:
        return str(self.render())

    def __html__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"<HtmlElement {self.name!r} attrs={self.attrs!r}>"
