from __future__ import annotations

import pytest

from bootstrap_widgets import Toast, WidgetConfigError

CLOSE = '<button type="button" class="btn-close" data-bs-dismiss="toast" aria-label="Close"></button>'


def test_toast_render():
    html = Toast.widget().id("t").title("Saved").date_time("now").render("Stored.")
    assert html == (
        '<div id="t" class="toast" role="alert" aria-live="assertive" aria-atomic="true">\n'
        '<div class="toast-header">\n'
        '<strong class="me-auto">Saved</strong>\n'
        "<small>now</small>\n"
        f"{CLOSE}\n"
        "</div>\n"
        '<div class="toast-body">Stored.\n'
        "</div></div>"
    )


def test_toast_without_date_time():
    begin = Toast.widget().id("t").title("Hi").begin()
    assert "<small>" not in begin
    assert f'<strong class="me-auto">Hi</strong>\n{CLOSE}' in begin


def test_toast_user_classes_come_first():
    begin = Toast.widget().id("t").add_class("position-fixed").begin()
    assert begin.startswith('<div id="t" class="position-fixed toast"')


def test_toast_generated_id_and_escaped_title():
    begin = Toast.widget().title("<b>").begin()
    assert begin.startswith('<div id="toast-0" class="toast"')
    assert "&lt;b&gt;" in begin


def test_toast_title_tag():
    assert '<h6 class="me-auto">T</h6>' in Toast.widget().title("T").title_tag("h6").begin()
    with pytest.raises(WidgetConfigError):
        Toast.widget().title_tag("")
