"""Element registry for the Playwright documentation home page."""

from dataclasses import dataclass

from navcheck.pages.locators import CssLocator, LocatorStrategy, RoleLocator
from navcheck.utils.config import DEFAULT_BASE_URL


@dataclass(frozen=True)
class ElementDescriptor:
    """One page element to verify and its expected properties.

    ``text`` and ``href`` are independent: a missing value means the
    property is not checked for this element, not that it must be empty.
    """

    locator: LocatorStrategy
    name: str
    text: str | None = None
    href: str | None = None

    def __post_init__(self) -> None:
        """Validate that the element has a locator and a report name."""
        if self.locator is None:
            raise ValueError("locator cannot be empty")
        if not self.name:
            raise ValueError("name cannot be empty")


NAV_ELEMENTS: tuple[ElementDescriptor, ...] = (
    ElementDescriptor(
        locator=RoleLocator("link", "Playwright logo Playwright"),
        name="Playwright logo Playwright",
        text="Playwright",
        href="/",
    ),
    ElementDescriptor(
        locator=RoleLocator("link", "Docs"),
        name="Docs",
        text="Docs",
        href="/docs/intro",
    ),
    ElementDescriptor(
        locator=RoleLocator("link", "API"),
        name="API",
        text="API",
        href="/docs/api/class-playwright",
    ),
    ElementDescriptor(
        locator=RoleLocator("button", "Node.js"),
        name="Node.js",
        text="Node.js",
    ),
    ElementDescriptor(
        locator=RoleLocator("link", "Community"),
        name="Community",
        text="Community",
        href="/community/welcome",
    ),
    ElementDescriptor(
        locator=RoleLocator("link", "GitHub repository"),
        name="GitHub repository",
        href="https://github.com/microsoft/playwright",
    ),
    ElementDescriptor(
        locator=RoleLocator("link", "Discord server"),
        name="Discord server",
        href="https://aka.ms/playwright/discord",
    ),
    ElementDescriptor(
        locator=RoleLocator("button", "Switch between dark and light"),
        name="Switch between dark and light",
    ),
    ElementDescriptor(
        locator=RoleLocator("button", "Search (Ctrl+K)"),
        name="Search (Ctrl+K)",
    ),
)

THEME_SWITCH = RoleLocator("button", "Switch between dark and light")
DOCUMENT_ROOT = CssLocator("html")
THEME_ATTRIBUTE = "data-theme"
# Observed data-theme after each successive click, starting from dark
THEME_SEQUENCE: tuple[str, ...] = ("light", "dark", "light")

HERO_HEADING = RoleLocator("heading", "Playwright enables reliable")
HERO_TEXT = "Playwright enables reliable end-to-end testing for modern web apps."


def with_text() -> list[ElementDescriptor]:
    """Descriptors that carry an expected text, in registry order."""
    return [d for d in NAV_ELEMENTS if d.text is not None]


def with_href() -> list[ElementDescriptor]:
    """Descriptors that carry an expected link target, in registry order."""
    return [d for d in NAV_ELEMENTS if d.href is not None]


@dataclass(frozen=True)
class PageConfig:
    """Where a checked page lives.

    ``mock_entry_url`` is None until a mock server is running.
    """

    entry_url: str
    mock_entry_url: str | None = None


class HomePage:
    """The Playwright documentation home page."""

    def __init__(
        self, entry_url: str = DEFAULT_BASE_URL, mock_base_url: str | None = None
    ) -> None:
        """Initialize the home page config.

        Args:
            entry_url: Page root on the live site, usually AppConfig.base_url.
            mock_base_url: Root URL of the local mock server, if one is running.
        """
        self._config = PageConfig(
            entry_url=entry_url,
            mock_entry_url=mock_base_url.rstrip("/") + "/" if mock_base_url else None,
        )

    @property
    def config(self) -> PageConfig:
        return self._config

    def url_for(self, target: str) -> str:
        """Entry URL for a target.

        Args:
            target: "live" for the real site, "mock" for the mock server.

        Raises:
            ValueError: If target is unknown, or "mock" without a mock server.
        """
        if target == "live":
            return self._config.entry_url
        if target == "mock":
            if self._config.mock_entry_url is None:
                raise ValueError("No mock server URL for target 'mock'")
            return self._config.mock_entry_url
        raise ValueError(f"Unknown target '{target}'. Expected 'live' or 'mock'")
