from __future__ import annotations

import pytest

from bootstrap_widgets import Modal, ModalFullscreen, ModalSize, WidgetConfigError

CLOSE = '<button type="button" class="btn-close" data-bs-dismiss="modal" aria-label="Close"></button>'


def test_modal_begin_and_end():
    modal = Modal.widget().id("m").title("Hello")
    assert modal.begin() == (
        '<div id="m" class="modal fade" role="dialog" tabindex="-1" aria-hidden="true" aria-labelledby="m-label">\n'
        '<div class="modal-dialog">\n'
        '<div class="modal-content">\n'
        f'<div class="modal-header">\n<h5 id="m-label" class="modal-title">Hello</h5>\n{CLOSE}\n</div>\n'
        '<div class="modal-body">\n'
    )
    assert modal.end() == "\n</div>\n</div>\n</div>\n</div>"


def test_modal_render_with_footer():
    html = Modal.widget().id("m").footer('<button class="btn">OK</button>').render("Body")
    assert html.endswith(
        '<div class="modal-body">\nBody\n</div>\n<div class="modal-footer"><button class="btn">OK</button></div>\n'
        "</div>\n</div>\n</div>"
    )


def test_modal_toggle_button():
    html = Modal.widget().id("m").toggle_button("Open").begin()
    assert html.startswith(
        '<button type="button" class="btn btn-primary" data-bs-toggle="modal" data-bs-target="#m">Open</button>\n'
        '<div id="m" class="modal fade"'
    )


def test_modal_has_no_toggle_by_default():
    assert Modal.widget().id("m").begin().startswith('<div id="m"')


def test_modal_dialog_options():
    begin = (
        Modal.widget()
        .id("m")
        .size(ModalSize.LARGE)
        .fullscreen(ModalFullscreen.BELOW_MD)
        .scrollable()
        .centered()
        .static_backdrop()
        .fade(False)
        .begin()
    )
    assert '<div id="m" class="modal" role="dialog" tabindex="-1" aria-hidden="true" data-bs-backdrop="static">' in begin
    assert (
        '<div class="modal-dialog modal-lg modal-fullscreen-md-down modal-dialog-scrollable modal-dialog-centered">'
    ) in begin


def test_modal_without_title_and_close_button_has_no_header():
    begin = Modal.widget().id("m").close_button(False).begin()
    assert "modal-header" not in begin
    assert "aria-labelledby" not in begin


def test_modal_title_is_escaped_and_tag_configurable():
    begin = Modal.widget().id("m").title("<Hi>").title_tag("h2").begin()
    assert '<h2 id="m-label" class="modal-title">&lt;Hi&gt;</h2>' in begin


def test_modal_generates_id():
    assert 'id="modal-0"' in Modal.widget().begin()


def test_modal_empty_title_tag_rejected():
    with pytest.raises(WidgetConfigError):
        Modal.widget().title_tag("")
