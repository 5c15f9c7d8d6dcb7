"""Markup for choice controls: radio/checkbox lists and select boxes.

Both builders render one element per item of an ordered ``value ->
caption`` mapping. Attributes are given as :class:`AttrSpec` objects:

* ``AttrMode.STATIC`` – rendered identically on every item.
* ``AttrMode.BOOLEAN_SET`` – set on the items whose value is in the set
  (``checked``, ``selected``, ``disabled``).
* ``AttrMode.VALUE_MAP`` – looked up per item value (``title``,
  ``data-*``).

A plain mapping is accepted too and treated as static attributes.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from markupsafe import Markup, escape

from formkit.core.config import settings
from formkit.models.enums import AttrMode
from formkit.models.schemas import AttrSpec
from formkit.utils.html import HtmlElement, render_attributes

Attrs = Union[Mapping[str, Any], Iterable[AttrSpec], None]
Dynamic = Dict[str, Dict[str, Any]]


def _specs(attrs: Attrs) -> List[AttrSpec]:
    if attrs is None:
        return []
    if isinstance(attrs, Mapping):
        return [AttrSpec.static(name, value) for name, value in attrs.items()]
    return list(attrs)


def _as_values(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return [value]
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)


def prepare_attrs(attrs: Attrs, tag_name: str, xhtml: Optional[bool] = None) -> Tuple[Dynamic, str]:
    """Split ``attrs`` into per-item attributes and the static tag prefix.

    :returns: ``(dynamic, prefix)`` where ``dynamic`` maps attribute name to
        a ``{str(item value): attribute value}`` lookup and ``prefix`` is the
        opening of the tag with all static attributes (``'<input type="radio"'``),
        left unclosed so per-item attributes can follow.
    """
    static: Dict[str, Any] = {}
    dynamic: Dynamic = {}
    for spec in _specs(attrs):
        if spec.mode is AttrMode.BOOLEAN_SET:
            dynamic[spec.name] = {str(v): True for v in _as_values(spec.value)}
        elif spec.mode is AttrMode.VALUE_MAP and isinstance(spec.value, Mapping) and spec.value:
            dynamic[spec.name] = {str(k): v for k, v in spec.value.items()}
        else:
            static[spec.name] = spec.value
    for name in dynamic:
        static.pop(name, None)
    return dynamic, "<" + tag_name + render_attributes(static, xhtml)


def _item_attrs(dynamic: Dynamic, value: Any) -> Dict[str, Any]:
    key = str(value)
    return {name: values.get(key) for name, values in dynamic.items()}


def _caption(caption: Any) -> str:
    if caption is None:
        return ""
    # Markup (anything with __html__) passes through, plain text is escaped.
    # Quotes are escaped too (it's -> it&#39;s), which is valid in element content.
    return str(escape(caption))


def create_input_list(
    items: Mapping[Any, Any],
    input_attrs: Attrs = None,
    label_attrs: Attrs = None,
    wrapper: Union[str, HtmlElement, None] = None,
    *,
    xhtml: Optional[bool] = None,
) -> Markup:
    """Render ``<label><input>caption</label>`` for every item.

    ``wrapper`` is either raw HTML put between items (``"<br>"``) or an
    element whose start and end tags enclose each item.
    """
    xhtml = settings.XHTML if xhtml is None else xhtml
    input_dynamic, input_tag = prepare_attrs(input_attrs, "input", xhtml)
    label_dynamic, label_tag = prepare_attrs(label_attrs, "label", xhtml)
    if isinstance(wrapper, HtmlElement):
        wrapper_start, wrapper_end = wrapper.start_tag(xhtml), wrapper.end_tag()
    else:
        wrapper_start, wrapper_end = ("" if wrapper is None else str(wrapper)), ""
    close = " />" if xhtml else ">"

    parts: List[str] = []
    for value, caption in items.items():
        input_item = _item_attrs(input_dynamic, value)
        input_item["value"] = value
        label_item = _item_attrs(label_dynamic, value)
        parts.append(
            (wrapper_start if parts or wrapper_end else "")
            + label_tag + render_attributes(label_item, xhtml) + ">"
            + input_tag + render_attributes(input_item, xhtml) + close
            + _caption(caption)
            + "</label>"
            + wrapper_end
        )
    return Markup("".join(parts))


def create_select_box(
    items: Mapping[Any, Any],
    option_attrs: Attrs = None,
    selected: Any = None,
    *,
    xhtml: Optional[bool] = None,
) -> HtmlElement:
    """Render a ``<select>`` with ``<option>`` and ``<optgroup>`` children.

    A mapping value renders as an option group labelled with its key.
    ``HtmlElement`` captions are copied and turned into the option, with
    the per-item attributes merged over their own.
    """
    specs = _specs(option_attrs)
    if selected is not None:
        specs.append(AttrSpec.boolean_set("selected", selected))
    dynamic, option_tag = prepare_attrs(specs, "option", xhtml)

    parts: List[str] = []
    for group, subitems in items.items():
        end = ""
        if isinstance(subitems, Mapping):
            parts.append(HtmlElement.el("optgroup", label=group).start_tag(xhtml))
            end = "</optgroup>"
        else:
            subitems = {group: subitems}

        for value, caption in subitems.items():
            option = {"value": value}
            option.update(_item_attrs(dynamic, value))
            if isinstance(caption, HtmlElement):
                parts.append(str(caption.copy().set_name("option").add_attributes(option).render(xhtml)))
            else:
                parts.append(
                    option_tag + render_attributes(option, xhtml) + ">"
                    + str(escape("" if caption is None else str(caption)))
                    + "</option>"
                )
        parts.append(end)
    return HtmlElement.el("select").set_html("".join(parts))
