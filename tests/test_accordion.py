from __future__ import annotations

import pytest

from bootstrap_widgets import Accordion, AccordionItem, WidgetConfigError


def _items():
    return (
        AccordionItem.to("Shipping", "Worldwide", id="c1", active=True),
        AccordionItem.to("Returns", "30 days", id="c2"),
    )


def test_accordion_markup():
    html = Accordion.widget().id("faq").items(*_items()).render()
    assert html == (
        '<div id="faq" class="accordion">\n'
        '<div class="accordion-item">\n'
        '<h2 class="accordion-header">\n'
        '<button type="button" class="accordion-button" data-bs-toggle="collapse" data-bs-target="#c1" '
        'aria-expanded="true" aria-controls="c1">\nShipping\n</button>\n'
        "</h2>\n"
        '<div id="c1" class="accordion-collapse collapse show" data-bs-parent="#faq">\n'
        '<div class="accordion-body">\nWorldwide\n</div>\n'
        "</div>\n"
        "</div>\n"
        '<div class="accordion-item">\n'
        '<h2 class="accordion-header">\n'
        '<button type="button" class="accordion-button collapsed" data-bs-toggle="collapse" data-bs-target="#c2" '
        'aria-expanded="false" aria-controls="c2">\nReturns\n</button>\n'
        "</h2>\n"
        '<div id="c2" class="accordion-collapse collapse" data-bs-parent="#faq">\n'
        '<div class="accordion-body">\n30 days\n</div>\n'
        "</div>\n"
        "</div>\n"
        "</div>"
    )


def test_accordion_generates_ids():
    html = Accordion.widget().items(AccordionItem.to("H", "B")).render()
    assert '<div id="accordion-0" class="accordion">' in html
    assert 'data-bs-target="#collapse-1"' in html
    assert 'data-bs-parent="#accordion-0"' in html


def test_accordion_always_open_and_flush():
    html = Accordion.widget().id("a").items(*_items()).always_open().flush().render()
    assert html.startswith('<div id="a" class="accordion accordion-flush">')
    assert "data-bs-parent" not in html


def test_accordion_custom_toggler_tag_has_no_type():
    html = Accordion.widget().id("a").items(*_items()).toggler_tag("div").render()
    assert '<div class="accordion-button collapsed" data-bs-toggle="collapse"' in html
    assert 'type="button"' not in html


def test_accordion_toggler_defaults_can_be_overridden():
    html = Accordion.widget().id("a").items(*_items()).add_toggler_attribute("data-bs-toggle", None).render()
    assert 'data-bs-toggle' not in html


def test_accordion_header_and_body_encoding():
    item = AccordionItem.to("<b>H</b>", "<p>B</p>", id="x", encode_body=False)
    html = Accordion.widget().id("a").items(item).render()
    assert "&lt;b&gt;H&lt;/b&gt;" in html
    assert "\n<p>B</p>\n" in html


def test_accordion_without_items_renders_nothing():
    assert Accordion.widget().render() == ""


@pytest.mark.parametrize("setter", ["header_tag", "toggler_tag"])
def test_accordion_empty_tags_rejected(setter):
    with pytest.raises(WidgetConfigError):
        getattr(Accordion.widget(), setter)("")


def test_accordion_item_is_immutable():
    item = AccordionItem.to("H", "B")
    assert item.with_active(True).active is True
    assert item.active is False
