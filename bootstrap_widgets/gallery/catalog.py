"""
Example widgets shown by the gallery.

Each entry maps a url slug to a title and a factory returning the rendered
demo markup. Factories build fresh widgets on every call so generated ids stay
unique per page.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..components import (
    Accordion,
    AccordionItem,
    Alert,
    Breadcrumbs,
    BreadcrumbLink,
    Button,
    ButtonGroup,
    ButtonToolbar,
    ButtonVariant,
    Carousel,
    CarouselItem,
    Dropdown,
    DropdownItem,
    Modal,
    Nav,
    NavBar,
    NavLink,
    NavStyle,
    Offcanvas,
    Toast,
    Variant,
)
from ..markdown import render_markdown_safe


@dataclass(frozen=True)
class Example:
    slug: str
    title: str
    render: Callable[[], str]


def _alert() -> str:
    return "\n".join(
        [
            Alert.widget()
            .variant(Variant.SUCCESS)
            .header("Well done!")
            .body(render_markdown_safe("You successfully read this **important** alert message."))
            .render(),
            Alert.widget().variant(Variant.WARNING).body("Holy guacamole!").dismissable(True).fade(True).render(),
        ]
    )


def _buttons() -> str:
    group = ButtonGroup.widget().aria_label("Basic example").buttons(
        Button.widget().label("Left").variant(ButtonVariant.PRIMARY),
        Button.widget().label("Middle").variant(ButtonVariant.PRIMARY),
        Button.widget().label("Right").variant(ButtonVariant.PRIMARY),
    )
    links = ButtonGroup.widget().aria_label("Links").buttons(
        Button.link("Docs", "https://getbootstrap.com/docs/5.3/"),
        Button.submit_input("Send"),
    )
    return ButtonToolbar.widget().aria_label("Toolbar with button groups").groups(group, links).render()


def _breadcrumbs() -> str:
    return Breadcrumbs.widget().links(
        BreadcrumbLink.to("Home", "/"),
        BreadcrumbLink.to("Library", "#"),
        BreadcrumbLink.to("Data", active=True),
    ).render()


def _nav() -> str:
    return Nav.widget().styles(NavStyle.TABS).current_path("/widgets/nav").items(
        NavLink.to("Active", "/widgets/nav"),
        NavLink.to("Link", "/widgets/alert"),
        Dropdown.widget().toggler_content("More").items(
            DropdownItem.link("Action", "#"),
            DropdownItem.divider(),
            DropdownItem.link("Separated link", "#"),
        ),
        NavLink.to("Disabled", "#", disabled=True),
    ).render()


def _dropdown() -> str:
    return Dropdown.widget().toggler_content("Dropdown button").items(
        DropdownItem.header("Dropdown header"),
        DropdownItem.link("Action", "#"),
        DropdownItem.link("Another action", "#", active=True),
        DropdownItem.divider(),
        DropdownItem.text("Dropdown item text"),
    ).render()


def _navbar() -> str:
    navbar = NavBar.widget().id("gallery-navbar-demo").brand_text("Navbar").brand_url("#")
    nav = Nav.widget().styles(NavStyle.NAVBAR).items(
        NavLink.to("Home", "#", active=True),
        NavLink.to("Link", "#"),
    )
    return navbar.render(nav)


def _accordion() -> str:
    return Accordion.widget().items(
        AccordionItem.to("Accordion Item #1", "This is the first item's accordion body.", active=True),
        AccordionItem.to("Accordion Item #2", render_markdown_safe("A *Markdown* body."), encode_body=False),
    ).render()


def _carousel() -> str:
    return Carousel.widget().items(
        CarouselItem.to('<div class="d-block w-100 p-5 bg-primary text-white">First slide</div>'),
        CarouselItem.to('<div class="d-block w-100 p-5 bg-secondary text-white">Second slide</div>'),
    ).render()


def _modal() -> str:
    modal = (
        Modal.widget()
        .title("Modal title")
        .toggle_button("Launch demo modal")
        .footer(Button.widget().label("Close").attribute("data-bs-dismiss", "modal"))
    )
    return modal.render("Woohoo, you're reading this text in a modal!")


def _offcanvas() -> str:
    return Offcanvas.widget().title("Offcanvas").toggler_content("Open offcanvas").render(
        "Content for the offcanvas goes here."
    )


def _toast() -> str:
    return Toast.widget().title("Bootstrap").date_time("11 mins ago").render("Hello, world! This is a toast message.")


EXAMPLES: List[Example] = [
    Example("accordion", "Accordion", _accordion),
    Example("alert", "Alert", _alert),
    Example("breadcrumbs", "Breadcrumbs", _breadcrumbs),
    Example("buttons", "Buttons", _buttons),
    Example("carousel", "Carousel", _carousel),
    Example("dropdown", "Dropdown", _dropdown),
    Example("modal", "Modal", _modal),
    Example("nav", "Nav", _nav),
    Example("navbar", "NavBar", _navbar),
    Example("offcanvas", "Offcanvas", _offcanvas),
    Example("toast", "Toast", _toast),
]

EXAMPLES_BY_SLUG: Dict[str, Example] = {example.slug: example for example in EXAMPLES}
