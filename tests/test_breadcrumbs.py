"""
Breadcrumb trail tests: explicit links and path-derived crumbs.
"""
from __future__ import annotations

import pytest

from bootstrap_widgets import BreadcrumbLink, Breadcrumbs, WidgetConfigError


def _links():
    return (
        BreadcrumbLink.to("Home", "/"),
        BreadcrumbLink.to("Library", active=True),
    )


def test_breadcrumbs_markup():
    html = Breadcrumbs.widget().links(*_links()).list_id(False).render()
    assert html == (
        '<nav aria-label="breadcrumb">\n'
        '<ol class="breadcrumb">\n'
        '<li class="breadcrumb-item"><a href="/">Home</a></li>\n'
        '<li class="breadcrumb-item active" aria-current="page">Library</li>\n'
        "</ol>\n"
        "</nav>"
    )


def test_breadcrumbs_without_links_render_nothing():
    assert Breadcrumbs.widget().render() == ""


def test_breadcrumbs_divider_sets_css_variable():
    html = Breadcrumbs.widget().links(*_links()).divider(">").render()
    assert html.startswith('<nav style="--bs-breadcrumb-divider: &#x27;&gt;&#x27;;" aria-label="breadcrumb">')


def test_breadcrumbs_empty_divider_rejected():
    with pytest.raises(WidgetConfigError):
        Breadcrumbs.widget().divider("")


def test_breadcrumbs_list_id_and_tag():
    html = Breadcrumbs.widget().links(*_links()).list_id(True).list_tag_name("ul").render()
    assert '<ul id="breadcrumb-0" class="breadcrumb">' in html
    assert html.endswith("</ul>\n</nav>")


def test_breadcrumbs_empty_list_tag_rejected():
    with pytest.raises(WidgetConfigError, match="List tag cannot be empty."):
        Breadcrumbs.widget().list_tag_name("")


def test_breadcrumbs_only_one_active_link():
    crumbs = Breadcrumbs.widget().links(
        BreadcrumbLink.to("A", active=True),
        BreadcrumbLink.to("B", active=True),
    )
    with pytest.raises(WidgetConfigError, match='Only one "link" can be active.'):
        crumbs.render()


def test_breadcrumbs_custom_active_class_and_link_attributes():
    html = (
        Breadcrumbs.widget()
        .links(BreadcrumbLink.to("Home", "/", attributes={"title": "Start"}), BreadcrumbLink.to("Now", active=True))
        .item_active_class("current")
        .link_attributes({"class": "text-decoration-none"})
        .render()
    )
    assert '<a class="text-decoration-none" href="/" title="Start">Home</a>' in html
    assert '<li class="breadcrumb-item current" aria-current="page">Now</li>' in html


def test_breadcrumb_labels_are_escaped():
    html = Breadcrumbs.widget().links(BreadcrumbLink.to("<script>", active=True)).render()
    assert "&lt;script&gt;" in html
    assert "<script>" not in html


def test_from_path_humanises_segments_and_marks_last_active():
    html = Breadcrumbs.from_path("/courses/my-course/42", labels={"/courses": "Kurse"}).render()
    assert '<li class="breadcrumb-item"><a href="/">Home</a></li>' in html
    assert '<li class="breadcrumb-item"><a href="/courses">Kurse</a></li>' in html
    assert '<li class="breadcrumb-item"><a href="/courses/my-course">My Course</a></li>' in html
    assert '<li class="breadcrumb-item active" aria-current="page">ID 42</li>' in html


def test_from_path_root_only_and_query_ignored():
    root = Breadcrumbs.from_path("/").render()
    assert '<li class="breadcrumb-item active" aria-current="page">Home</li>' in root
    assert root.count("<li") == 1

    with_query = Breadcrumbs.from_path("/widgets?x=1").render()
    assert '<li class="breadcrumb-item active" aria-current="page">Widgets</li>' in with_query


def test_breadcrumb_link_is_immutable():
    link = BreadcrumbLink.to("Home", "/")
    active = link.with_active(True)
    assert link.active is False
    assert active.active is True
    assert link.with_url(None).url is None
    assert link.url == "/"


def test_breadcrumbs_list_gets_generated_id_by_default():
    html = Breadcrumbs.widget().links(BreadcrumbLink.to("Home", "/")).render()
    assert '<ol id="breadcrumb-0" class="breadcrumb">' in html
    assert 'id="trail"' in Breadcrumbs.widget().links(*_links()).list_id("trail").render()
