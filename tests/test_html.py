from markupsafe import Markup, escape

from formkit.utils.html import HtmlElement, render_attributes


def test_render_attributes():
    attrs = {
        "class": ["a", "b"],
        "style": {"color": "red"},
        "hidden": True,
        "skip": None,
        "off": False,
        "n": 5,
    }
    assert render_attributes(attrs, xhtml=False) == ' class="a b" style="color: red;" hidden n="5"'


def test_render_attributes_xhtml_boolean():
    assert render_attributes({"checked": True}, xhtml=True) == ' checked="checked"'


def test_render_attributes_escapes_values():
    assert render_attributes({"title": 'say "hi" & <go>'}) == ' title="say &#34;hi&#34; &amp; &lt;go&gt;"'


def test_class_mapping_keeps_truthy_keys():
    assert render_attributes({"class": {"active": True, "muted": False}}) == ' class="active"'


def test_void_element_tags():
    el = HtmlElement.el("input", type="text")
    assert el.start_tag(xhtml=False) == '<input type="text">'
    assert el.start_tag(xhtml=True) == '<input type="text" />'
    assert el.end_tag() == ""


def test_text_is_escaped_html_is_not():
    el = HtmlElement.el("div", class_="box").set_text("<b>")
    assert str(el) == '<div class="box">&lt;b&gt;</div>'
    el.set_html("<b>bold</b>")
    assert str(el) == '<div class="box"><b>bold</b></div>'


def test_element_is_trusted_markup():
    el = HtmlElement.el("span").set_text("x")
    assert escape(el) == Markup("<span>x</span>")


def test_add_attributes_given_attributes_win():
    el = HtmlElement.el("option", value="old", disabled=True)
    el.add_attributes({"value": "new"})
    assert el.attrs == {"value": "new", "disabled": True}


def test_copy_is_independent():
    el = HtmlElement.el("option", disabled=True).set_text("Kiwi")
    clone = el.copy().set_name("li")
    clone.attrs["disabled"] = False
    assert el.name == "option"
    assert el.attrs == {"disabled": True}
    assert str(clone) == "<li>Kiwi</li>"
