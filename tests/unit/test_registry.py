"""Tests for the home page element registry and locator types."""

import dataclasses
from unittest.mock import MagicMock

import pytest

from navcheck.pages.home import (
    DOCUMENT_ROOT,
    HERO_HEADING,
    HERO_TEXT,
    NAV_ELEMENTS,
    THEME_SEQUENCE,
    THEME_SWITCH,
    ElementDescriptor,
    HomePage,
    with_href,
    with_text,
)
from navcheck.pages.locators import CssLocator, RoleLocator
from navcheck.utils.config import DEFAULT_BASE_URL


class TestRoleLocator:
    """Tests for RoleLocator."""

    def test_resolve_uses_get_by_role(self) -> None:
        page = MagicMock()
        locator = RoleLocator("link", "Docs")

        result = locator.resolve(page)

        page.get_by_role.assert_called_once_with("link", name="Docs", exact=False)
        assert result is page.get_by_role.return_value

    def test_resolve_passes_exact(self) -> None:
        page = MagicMock()
        RoleLocator("button", "Node.js", exact=True).resolve(page)
        page.get_by_role.assert_called_once_with("button", name="Node.js", exact=True)

    def test_describe(self) -> None:
        assert RoleLocator("link", "API").describe() == 'role=link name="API"'

    @pytest.mark.parametrize("role,name", [("", "Docs"), ("link", "")])
    def test_empty_fields_rejected(self, role: str, name: str) -> None:
        with pytest.raises(ValueError):
            RoleLocator(role, name)

    def test_is_frozen(self) -> None:
        locator = RoleLocator("link", "Docs")
        with pytest.raises(dataclasses.FrozenInstanceError):
            locator.name = "API"  # type: ignore[misc]


class TestCssLocator:
    """Tests for CssLocator."""

    def test_resolve_uses_locator(self) -> None:
        page = MagicMock()
        CssLocator("html").resolve(page)
        page.locator.assert_called_once_with("html")

    def test_empty_selector_rejected(self) -> None:
        with pytest.raises(ValueError):
            CssLocator("")


class TestElementDescriptor:
    """Tests for ElementDescriptor validation."""

    def test_optional_fields_default_to_none(self) -> None:
        descriptor = ElementDescriptor(RoleLocator("button", "Search"), "Search")
        assert descriptor.text is None
        assert descriptor.href is None

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="name"):
            ElementDescriptor(RoleLocator("link", "Docs"), "")

    def test_missing_locator_rejected(self) -> None:
        with pytest.raises(ValueError, match="locator"):
            ElementDescriptor(None, "Docs")  # type: ignore[arg-type]


class TestNavElements:
    """Tests for the registered header elements."""

    def test_registry_order(self) -> None:
        assert [d.name for d in NAV_ELEMENTS] == [
            "Playwright logo Playwright",
            "Docs",
            "API",
            "Node.js",
            "Community",
            "GitHub repository",
            "Discord server",
            "Switch between dark and light",
            "Search (Ctrl+K)",
        ]

    def test_names_are_unique(self) -> None:
        names = [d.name for d in NAV_ELEMENTS]
        assert len(names) == len(set(names))

    def test_registry_is_immutable(self) -> None:
        assert isinstance(NAV_ELEMENTS, tuple)

    def test_docs_descriptor(self) -> None:
        docs = NAV_ELEMENTS[1]
        assert docs.locator == RoleLocator("link", "Docs")
        assert docs.text == "Docs"
        assert docs.href == "/docs/intro"

    def test_github_href(self) -> None:
        github = NAV_ELEMENTS[5]
        assert github.text is None
        assert github.href == "https://github.com/microsoft/playwright"

    def test_with_text_keeps_order(self) -> None:
        assert [d.name for d in with_text()] == [
            "Playwright logo Playwright",
            "Docs",
            "API",
            "Node.js",
            "Community",
        ]

    def test_with_href_keeps_order(self) -> None:
        assert [d.name for d in with_href()] == [
            "Playwright logo Playwright",
            "Docs",
            "API",
            "Community",
            "GitHub repository",
            "Discord server",
        ]

    def test_descriptors_without_expectations_are_in_neither_filter(self) -> None:
        checked = {d.name for d in with_text()} | {d.name for d in with_href()}
        assert "Switch between dark and light" not in checked
        assert "Search (Ctrl+K)" not in checked


class TestFixedLocators:
    """Tests for the theme and hero constants."""

    def test_theme_switch(self) -> None:
        assert THEME_SWITCH == RoleLocator("button", "Switch between dark and light")
        assert DOCUMENT_ROOT == CssLocator("html")

    def test_theme_sequence_alternates(self) -> None:
        assert THEME_SEQUENCE == ("light", "dark", "light")

    def test_hero(self) -> None:
        assert HERO_HEADING == RoleLocator("heading", "Playwright enables reliable")
        assert HERO_TEXT == (
            "Playwright enables reliable end-to-end testing for modern web apps."
        )


class TestHomePage:
    """Tests for HomePage URL selection."""

    def test_live_url_defaults_to_configured_base(self) -> None:
        assert HomePage().url_for("live") == DEFAULT_BASE_URL

    def test_live_url_follows_entry_url(self) -> None:
        page = HomePage(entry_url="https://staging.playwright.dev/")
        assert page.url_for("live") == "https://staging.playwright.dev/"
        assert page.config.entry_url == "https://staging.playwright.dev/"

    def test_mock_url(self) -> None:
        page = HomePage(mock_base_url="http://localhost:9123")
        assert page.url_for("mock") == "http://localhost:9123/"

    def test_mock_without_server(self) -> None:
        assert HomePage().config.mock_entry_url is None
        with pytest.raises(ValueError, match="No mock server"):
            HomePage().url_for("mock")

    def test_unknown_target(self) -> None:
        with pytest.raises(ValueError, match="Unknown target"):
            HomePage().url_for("staging")
