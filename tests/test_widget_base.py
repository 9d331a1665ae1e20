"""
Shared widget behaviour: copy-on-write setters, ids and nesting.
"""
from __future__ import annotations

from bootstrap_widgets import Alert, Button, NavBar
from bootstrap_widgets import html as h


def test_setters_never_touch_the_original():
    base = Alert.widget().body("x")
    base.add_class("a").attribute("title", "t").id("alert").add_css_style("color: red")
    assert base.render() == '<div class="alert alert-secondary" role="alert">\nx\n</div>'


def test_shared_attribute_dicts_are_not_aliased():
    base = Alert.widget().body("x").add_attributes({"title": "base"})
    derived = base.add_attributes({"lang": "de"})
    assert 'lang="de"' not in base.render()
    assert 'lang="de"' in derived.render()
    assert 'title="base"' in derived.render()


def test_class_replaces_user_classes_only():
    html = Alert.widget().body("x").add_class("a", "b").class_("c").render()
    assert html.startswith('<div class="alert alert-secondary c" role="alert">')


def test_attributes_replace_everything():
    html = Alert.widget().body("x").attribute("title", "old").attributes({"lang": "en"}).render()
    assert 'title="old"' not in html
    assert 'lang="en"' in html


def test_css_style_is_merged():
    html = Alert.widget().body("x").add_css_style("color: red").add_css_style({"margin": "0"}).render()
    assert 'style="color: red; margin: 0;"' in html


def test_explicit_id_attribute_wins_over_generation():
    html = Alert.widget().body("x").attribute("id", "fixed").id(True).render()
    assert html.startswith('<div id="fixed"')
    assert h.generate_id() == "w0"


def test_id_can_be_removed():
    html = Alert.widget().body("x").id(True).id(False).render()
    assert "id=" not in html


def test_str_and_html_protocol_render():
    button = Button.widget().label("OK")
    assert str(button) == button.render() == button.__html__()


def test_block_widget_render_is_begin_content_end():
    navbar = NavBar.widget().id("n")
    assert navbar.render("<p>x</p>") == navbar.begin() + "<p>x</p>" + navbar.end()


def test_navbar_id_attribute_is_used_for_collapse_only():
    begin = NavBar.widget().attribute("id", "top").begin()
    assert '<nav class="navbar navbar-expand-lg">' in begin
    assert '<div id="top" class="collapse navbar-collapse">' in begin
