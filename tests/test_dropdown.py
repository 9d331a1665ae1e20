from __future__ import annotations

import pytest

from bootstrap_widgets import (
    ButtonVariant,
    Dropdown,
    DropdownAlignment,
    DropdownAutoClose,
    DropdownDirection,
    DropdownItem,
    Theme,
    WidgetConfigError,
)

TOGGLER = (
    '<button type="button" class="btn btn-secondary dropdown-toggle" data-bs-toggle="dropdown" '
    'aria-expanded="false">Dropdown button</button>'
)


def _dropdown():
    return Dropdown.widget().items(DropdownItem.link("Action", "/action"))


def test_dropdown_markup():
    assert _dropdown().render() == (
        '<div class="dropdown">\n'
        f"{TOGGLER}\n"
        '<ul class="dropdown-menu">\n<li>\n<a class="dropdown-item" href="/action">Action</a>\n</li>\n</ul>\n'
        "</div>"
    )


def test_dropdown_without_items_renders_nothing():
    assert Dropdown.widget().render() == ""


def test_dropdown_without_container():
    html = _dropdown().container(False).render()
    assert html.startswith(TOGGLER)
    assert html.endswith("</ul>")


def test_dropdown_item_kinds():
    assert DropdownItem.divider().render() == '<li>\n<hr class="dropdown-divider">\n</li>'
    assert DropdownItem.header("Head").render() == '<li>\n<h6 class="dropdown-header">Head</h6>\n</li>'
    assert DropdownItem.header("Head", header_tag="h5").render() == '<li>\n<h5 class="dropdown-header">Head</h5>\n</li>'
    assert DropdownItem.text("Plain").render() == '<li>\n<span class="dropdown-item-text">Plain</span>\n</li>'
    assert DropdownItem.button("Run").render() == '<li>\n<button type="button" class="dropdown-item">Run</button>\n</li>'
    assert DropdownItem.list_content("<form></form>").render() == "<li>\n<form></form>\n</li>"


def test_dropdown_link_states():
    active = DropdownItem.link("A", "/a", active=True).render()
    assert '<a class="dropdown-item active" href="/a" aria-current="true">A</a>' in active
    disabled = DropdownItem.link("D", "/d", disabled=True).render()
    assert '<a class="dropdown-item disabled" href="/d" aria-disabled="true">D</a>' in disabled


def test_dropdown_item_validation():
    with pytest.raises(WidgetConfigError, match="cannot be active and disabled"):
        DropdownItem.link("x", active=True, disabled=True)
    with pytest.raises(WidgetConfigError, match="The header tag cannot be empty."):
        DropdownItem.header("x", header_tag="")


def test_dropdown_item_is_immutable():
    item = DropdownItem.link("A", "/a")
    changed = item.with_active(True).with_url("/b")
    assert item.active is False and item.url == "/a"
    assert changed.active is True and changed.url == "/b"


def test_dropdown_split_button():
    html = _dropdown().toggler_content("Save").split().render()
    assert html.startswith('<div class="btn-group dropdown">\n<button type="button" class="btn btn-secondary">Save</button>\n')
    assert (
        '<button type="button" class="btn btn-secondary dropdown-toggle dropdown-toggle-split" '
        'data-bs-toggle="dropdown" aria-expanded="false">'
        '<span class="visually-hidden">Toggle Dropdown</span></button>'
    ) in html


def test_dropdown_direction_alignment_theme():
    html = (
        _dropdown()
        .direction(DropdownDirection.UP_CENTER)
        .alignment(DropdownAlignment.END)
        .theme(Theme.DARK)
        .render()
    )
    assert html.startswith('<div class="dropup-center dropup">')
    assert '<ul class="dropdown-menu dropdown-menu-end" data-bs-theme="dark">' in html


def test_dropdown_auto_close_and_variant():
    html = _dropdown().auto_close(DropdownAutoClose.INSIDE).toggler_variant(ButtonVariant.PRIMARY).render()
    assert (
        '<button type="button" class="btn btn-primary dropdown-toggle" data-bs-toggle="dropdown" '
        'aria-expanded="false" data-bs-auto-close="inside">Dropdown button</button>'
    ) in html


def test_dropdown_link_toggler():
    html = _dropdown().toggler_tag("a").toggler_url("/menu").render()
    assert (
        '<a class="btn btn-secondary dropdown-toggle" href="/menu" role="button" '
        'data-bs-toggle="dropdown" aria-expanded="false">Dropdown button</a>'
    ) in html


def test_dropdown_empty_toggler_tag_rejected():
    with pytest.raises(WidgetConfigError, match="Toggler tag cannot be empty string."):
        Dropdown.widget().toggler_tag("")
