# Bootstrap 5 widget set
# Immutable builders rendering Bootstrap-compliant HTML fragments

from .base import Widget, BlockWidget
from .enums import (
    AlertVariant,
    BackgroundColor,
    Breakpoint,
    ButtonSize,
    ButtonType,
    ButtonVariant,
    DropdownAlignment,
    DropdownAutoClose,
    DropdownDirection,
    DropdownItemType,
    ModalFullscreen,
    ModalSize,
    NavBarExpand,
    NavBarPlacement,
    NavLayout,
    NavStyle,
    OffcanvasPlacement,
    Theme,
    Variant,
)
from .accordion import Accordion, AccordionItem
from .alert import Alert
from .breadcrumbs import Breadcrumbs, BreadcrumbLink
from .button import Button
from .button_group import ButtonGroup, ButtonToolbar
from .carousel import Carousel, CarouselItem
from .dropdown import Dropdown, DropdownItem
from .modal import Modal
from .nav import Nav, NavLink
from .navbar import NavBar
from .offcanvas import Offcanvas
from .toast import Toast

__all__ = [
    "Widget",
    "BlockWidget",
    "Accordion",
    "AccordionItem",
    "Alert",
    "AlertVariant",
    "BackgroundColor",
    "BreadcrumbLink",
    "Breadcrumbs",
    "Breakpoint",
    "Button",
    "ButtonGroup",
    "ButtonSize",
    "ButtonToolbar",
    "ButtonType",
    "ButtonVariant",
    "Carousel",
    "CarouselItem",
    "Dropdown",
    "DropdownAlignment",
    "DropdownAutoClose",
    "DropdownDirection",
    "DropdownItem",
    "DropdownItemType",
    "Modal",
    "ModalFullscreen",
    "ModalSize",
    "Nav",
    "NavBar",
    "NavBarExpand",
    "NavBarPlacement",
    "NavLayout",
    "NavLink",
    "NavStyle",
    "Offcanvas",
    "OffcanvasPlacement",
    "Theme",
    "Toast",
    "Variant",
]
