"""
Unit tests for the attribute-bag helpers every widget renders through.
"""
from __future__ import annotations

import pytest
from markupsafe import Markup

from bootstrap_widgets import html as h
from bootstrap_widgets.components.enums import BackgroundColor
from bootstrap_widgets.errors import WidgetConfigError


def test_render_attributes_uses_fixed_order_for_known_names():
    """type/id/class come first regardless of insertion order."""
    rendered = h.render_attributes({"data-x": "1", "class": ["btn", "btn-primary"], "id": "b", "type": "button"})
    assert rendered == ' type="button" id="b" class="btn btn-primary" data-x="1"'


def test_render_attributes_boolean_and_empty_values():
    rendered = h.render_attributes({"disabled": True, "hidden": False, "title": None, "alt": ""})
    assert rendered == ' disabled alt=""'


def test_render_attributes_style_dict_and_data_expansion():
    rendered = h.render_attributes({"style": {"color": "red", "margin": "0"}, "data": {"id": 5, "role": "x"}})
    assert rendered == ' style="color: red; margin: 0;" data-id="5" data-role="x"'


def test_render_attributes_escapes_values():
    assert h.render_attributes({"title": 'say "hi" <b>'}) == ' title="say &quot;hi&quot; &lt;b&gt;"'


def test_render_attributes_empty_bag():
    assert h.render_attributes({}) == ""
    assert h.render_attributes(None) == ""


def test_add_css_class_skips_empty_and_duplicates():
    result = h.add_css_class({"class": "a"}, "b", None, "", "a", BackgroundColor.PRIMARY)
    assert result["class"] == ["a", "b", "bg-primary"]


def test_add_css_class_does_not_mutate_input():
    original = {"class": ["a"]}
    h.add_css_class(original, "b")
    assert original == {"class": ["a"]}


def test_add_css_class_splits_space_separated_values():
    assert h.add_css_class({}, "fade show")["class"] == ["fade", "show"]


def test_add_css_style_overwrite_false_keeps_existing():
    result = h.add_css_style({"style": "color: red;"}, "color: blue; margin: 0", overwrite=False)
    assert h.render_attributes(result) == ' style="color: red; margin: 0;"'


def test_add_css_style_overwrite_replaces_existing():
    result = h.add_css_style({"style": {"color": "red"}}, {"color": "blue"})
    assert result["style"] == {"color": "blue"}


def test_merge_defaults_respects_explicit_none():
    result = h.merge_defaults({"aria-label": None}, {"aria-label": "Close", "role": "button"})
    assert result == {"aria-label": None, "role": "button"}
    assert h.render_attributes(result) == ' role="button"'


def test_tag_void_element_has_no_closing_tag():
    assert h.tag("img", "ignored", {"src": "/a.png", "alt": ""}) == '<img src="/a.png" alt="">'
    assert h.tag("hr", attributes={"class": "dropdown-divider"}) == '<hr class="dropdown-divider">'


def test_tag_encodes_content_on_request():
    assert h.tag("span", "<b>", encode_content=True) == "<span>&lt;b&gt;</span>"
    assert h.tag("span", "<b>") == "<span><b></span>"


@pytest.mark.parametrize("func", [lambda: h.tag(""), lambda: h.open_tag(""), lambda: h.close_tag("")])
def test_empty_tag_name_raises(func):
    with pytest.raises(WidgetConfigError, match="Tag cannot be empty string."):
        func()


def test_encode_trusts_markup_objects():
    assert h.encode("<i>x</i>") == "&lt;i&gt;x&lt;/i&gt;"
    assert h.encode(Markup("<i>x</i>")) == "<i>x</i>"
    assert h.encode("it's") == "it's"
    assert h.encode(None) == ""


def test_generate_id_counter_is_shared_and_resettable():
    assert h.generate_id() == "w0"
    assert h.generate_id("alert-") == "alert-1"
    h.reset_id_counter(10)
    assert h.generate_id("x") == "x10"
