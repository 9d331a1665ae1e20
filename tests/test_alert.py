from __future__ import annotations

import pytest

from bootstrap_widgets import Alert, Variant, WidgetConfigError

CLOSE_BUTTON = '<button type="button" class="btn-close" data-bs-dismiss="alert" aria-label="Close"></button>'


def test_alert_renders_body_with_default_variant():
    html = Alert.widget().body("Body").render()
    assert html == '<div class="alert alert-secondary" role="alert">\nBody\n</div>'


def test_alert_header_and_dismiss_button():
    html = Alert.widget().header("Heads up").body("Body").dismissable().render()
    assert html == (
        '<div class="alert alert-secondary alert-dismissible" role="alert">\n'
        '<h4 class="alert-heading">Heads up</h4>\n'
        "Body\n"
        f"{CLOSE_BUTTON}\n"
        "</div>"
    )


def test_alert_fade_variant_and_user_classes():
    html = Alert.widget().body("x").variant(Variant.DANGER).add_class("mt-3").fade().render()
    assert html.startswith('<div class="alert alert-danger mt-3 fade show" role="alert">')


def test_alert_generated_id_uses_prefix():
    html = Alert.widget().body("x").id(True).render()
    assert html.startswith('<div id="alert-0" class="alert alert-secondary"')


def test_alert_body_is_encoded_unless_disabled():
    assert "&lt;b&gt;" in Alert.widget().body("<b>hi</b>").render()
    assert "<b>hi</b>" in Alert.widget().body("<b>hi</b>", encode=False).render()


def test_alert_custom_header_tag_and_template():
    html = (
        Alert.widget()
        .header("Title")
        .header_tag("h2")
        .body("Body")
        .template("{body}\n{header}")
        .render()
    )
    assert html == '<div class="alert alert-secondary" role="alert">Body\n<h2 class="alert-heading">Title</h2></div>'


def test_alert_empty_header_tag_rejected():
    with pytest.raises(WidgetConfigError, match="Header tag cannot be empty string."):
        Alert.widget().header_tag("")


def test_alert_setters_return_copies():
    base = Alert.widget().body("Base")
    changed = base.variant(Variant.SUCCESS)
    assert base is not changed
    assert "alert-secondary" in base.render()
    assert "alert-success" in changed.render()


def test_alert_close_button_label_is_encoded():
    html = Alert.widget().body("x").dismissable().close_button_label("<x>").render()
    assert '<button type="button" class="btn-close" data-bs-dismiss="alert" aria-label="Close">&lt;x&gt;</button>' in html


def test_alert_custom_close_tag_has_no_type():
    html = (
        Alert.widget()
        .body("x")
        .dismissable()
        .close_button_tag("span")
        .close_button_attributes({"role": "button"})
        .render()
    )
    assert '<span class="btn-close" role="button" data-bs-dismiss="alert" aria-label="Close"></span>' in html
    assert 'type="button"' not in html
