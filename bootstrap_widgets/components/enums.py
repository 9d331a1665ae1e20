"""
Enumerations of Bootstrap class names and option values.

Member values are the exact strings Bootstrap expects, so they can be passed
straight into attribute bags.
"""
from __future__ import annotations

from enum import Enum


class Variant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"


AlertVariant = Variant


class ButtonVariant(Enum):
    PRIMARY = "btn-primary"
    SECONDARY = "btn-secondary"
    SUCCESS = "btn-success"
    DANGER = "btn-danger"
    WARNING = "btn-warning"
    INFO = "btn-info"
    LIGHT = "btn-light"
    DARK = "btn-dark"
    LINK = "btn-link"
    OUTLINE_PRIMARY = "btn-outline-primary"
    OUTLINE_SECONDARY = "btn-outline-secondary"
    OUTLINE_SUCCESS = "btn-outline-success"
    OUTLINE_DANGER = "btn-outline-danger"
    OUTLINE_WARNING = "btn-outline-warning"
    OUTLINE_INFO = "btn-outline-info"
    OUTLINE_LIGHT = "btn-outline-light"
    OUTLINE_DARK = "btn-outline-dark"


class ButtonSize(Enum):
    LARGE = "btn-lg"
    SMALL = "btn-sm"


class ButtonType(Enum):
    BUTTON = "button"
    LINK = "link"
    RESET = "reset"
    RESET_INPUT = "reset-input"
    SUBMIT = "submit"
    SUBMIT_INPUT = "submit-input"


class BackgroundColor(Enum):
    PRIMARY = "bg-primary"
    SECONDARY = "bg-secondary"
    SUCCESS = "bg-success"
    DANGER = "bg-danger"
    WARNING = "bg-warning"
    INFO = "bg-info"
    LIGHT = "bg-light"
    DARK = "bg-dark"
    BODY = "bg-body"
    BODY_SECONDARY = "bg-body-secondary"
    BODY_TERTIARY = "bg-body-tertiary"
    WHITE = "bg-white"
    BLACK = "bg-black"
    TRANSPARENT = "bg-transparent"


class NavStyle(Enum):
    NAVBAR = "navbar-nav me-auto mb-2 mb-lg-0"
    PILLS = "nav-pills"
    TABS = "nav-tabs"
    UNDERLINE = "nav-underline"


class NavLayout(Enum):
    CENTER = "justify-content-center"
    FILL = "nav-fill"
    JUSTIFY = "nav-justified"
    RIGHT = "justify-content-end"
    VERTICAL = "flex-column"


class NavBarExpand(Enum):
    SM = "navbar-expand-sm"
    MD = "navbar-expand-md"
    LG = "navbar-expand-lg"
    XL = "navbar-expand-xl"
    XXL = "navbar-expand-xxl"


class NavBarPlacement(Enum):
    FIXED_TOP = "fixed-top"
    FIXED_BOTTOM = "fixed-bottom"
    STICKY_TOP = "sticky-top"
    STICKY_BOTTOM = "sticky-bottom"


class DropdownDirection(Enum):
    DOWN = "dropdown"
    DOWN_CENTER = "dropdown-center"
    UP = "dropup"
    UP_CENTER = "dropup-center dropup"
    END = "dropend"
    START = "dropstart"


class DropdownAlignment(Enum):
    END = "dropdown-menu-end"
    START = "dropdown-menu-start"
    SM_END = "dropdown-menu-sm-end"
    MD_END = "dropdown-menu-md-end"
    LG_END = "dropdown-menu-lg-end"
    XL_END = "dropdown-menu-xl-end"
    XXL_END = "dropdown-menu-xxl-end"


class DropdownAutoClose(Enum):
    DEFAULT = "true"
    INSIDE = "inside"
    OUTSIDE = "outside"
    MANUAL = "false"


class DropdownItemType(Enum):
    BUTTON = "button"
    DIVIDER = "divider"
    HEADER = "header"
    LINK = "link"
    LIST_CONTENT = "list-content"
    TEXT = "text"


class ModalSize(Enum):
    SMALL = "modal-sm"
    LARGE = "modal-lg"
    EXTRA_LARGE = "modal-xl"


class ModalFullscreen(Enum):
    ALWAYS = "modal-fullscreen"
    BELOW_SM = "modal-fullscreen-sm-down"
    BELOW_MD = "modal-fullscreen-md-down"
    BELOW_LG = "modal-fullscreen-lg-down"
    BELOW_XL = "modal-fullscreen-xl-down"
    BELOW_XXL = "modal-fullscreen-xxl-down"


class OffcanvasPlacement(Enum):
    START = "offcanvas-start"
    END = "offcanvas-end"
    TOP = "offcanvas-top"
    BOTTOM = "offcanvas-bottom"


class Breakpoint(Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"
