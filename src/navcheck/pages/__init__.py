"""Page definitions: element registry, locators and the mock server."""

from navcheck.pages.home import (
    DOCUMENT_ROOT,
    HERO_HEADING,
    HERO_TEXT,
    NAV_ELEMENTS,
    THEME_ATTRIBUTE,
    THEME_SEQUENCE,
    THEME_SWITCH,
    ElementDescriptor,
    HomePage,
    PageConfig,
    with_href,
    with_text,
)
from navcheck.pages.locators import CssLocator, LocatorStrategy, RoleLocator
from navcheck.pages.mock import MockServer, get_mock_pages_dir

__all__ = [
    "CssLocator",
    "DOCUMENT_ROOT",
    "ElementDescriptor",
    "HERO_HEADING",
    "HERO_TEXT",
    "HomePage",
    "LocatorStrategy",
    "MockServer",
    "NAV_ELEMENTS",
    "PageConfig",
    "RoleLocator",
    "THEME_ATTRIBUTE",
    "THEME_SEQUENCE",
    "THEME_SWITCH",
    "get_mock_pages_dir",
    "with_href",
    "with_text",
]
