"""Playwright-based browser page session.

This module wraps Playwright's async API into a single-page session used by
the assertion runner. Each scenario gets its own PlaywrightBrowser, so no
page state leaks between scenarios.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import (
    Browser,
    BrowserContext,
    Locator,
    Page,
    Playwright,
    async_playwright,
)
from playwright_stealth import Stealth

from navcheck.utils.exceptions import ElementNotFound, NavigationError

if TYPE_CHECKING:
    from navcheck.pages.locators import LocatorStrategy

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class PlaywrightBrowser:
    """One isolated browser page session.

    Attributes:
        headless: Whether to run browser in headless mode.
        stealth: Whether to apply playwright-stealth evasions to the page.
        browser_name: Playwright browser type to launch.

    Example:
        >>> browser = PlaywrightBrowser(headless=True)
        >>> await browser.launch()
        >>> await browser.navigate("https://playwright.dev/")
        >>> locator = browser.locate(RoleLocator("link", "Docs"))
        >>> await browser.close()
    """

    def __init__(
        self,
        headless: bool = True,
        stealth: bool = False,
        browser_name: str = "chromium",
    ) -> None:
        """Initialize the browser wrapper.

        Args:
            headless: Whether to run browser in headless mode.
            stealth: Apply playwright-stealth to the page after launch.
            browser_name: One of "chromium", "firefox" or "webkit".

        Raises:
            ValueError: If browser_name is not supported.
        """
        if browser_name not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser_name}'. "
                f"Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.headless = headless
        self.stealth = stealth
        self.browser_name = browser_name
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def launch(self) -> None:
        """Launch the browser in a fresh context and open one page."""
        self._playwright = await async_playwright().start()
        browser_type = getattr(self._playwright, self.browser_name)
        self._browser = await browser_type.launch(headless=self.headless)
        self._context = await self._browser.new_context()
        self._page = await self._context.new_page()
        if self.stealth:
            await Stealth().apply_stealth_async(self._page)
        logger.debug(f"Launched {self.browser_name} (headless={self.headless})")

    async def navigate(self, url: str, timeout: int = 30000) -> None:
        """Navigate to URL and wait for load.

        Args:
            url: The URL to navigate to.
            timeout: Maximum time to wait for navigation in milliseconds.

        Raises:
            RuntimeError: If browser not launched.
            NavigationError: If navigation fails.
        """
        if not self._page:
            raise RuntimeError("Browser not launched")
        try:
            await self._page.goto(url, timeout=timeout, wait_until="load")
        except Exception as e:
            raise NavigationError(f"Failed to navigate to {url}: {e}") from e

    def locate(self, locator: LocatorStrategy) -> Locator:
        """Resolve a locator strategy against the current page.

        Raises:
            RuntimeError: If browser not launched.
        """
        if not self._page:
            raise RuntimeError("Browser not launched")
        return locator.resolve(self._page)

    async def click(self, locator: LocatorStrategy, timeout: int = 5000) -> None:
        """Click the element found by locator.

        Args:
            locator: Strategy for finding the element.
            timeout: Maximum time to wait for the element in milliseconds.

        Raises:
            RuntimeError: If browser not launched.
            ElementNotFound: If the element cannot be clicked in time.
        """
        target = self.locate(locator)
        try:
            await target.click(timeout=timeout)
        except Exception as e:
            raise ElementNotFound(
                f"Could not click {locator.describe()}: {e}"
            ) from e

    async def screenshot(self, path: str | None = None) -> bytes:
        """Capture screenshot. Returns bytes, optionally saves to path.

        Raises:
            RuntimeError: If browser not launched.
        """
        if not self._page:
            raise RuntimeError("Browser not launched")
        return await self._page.screenshot(path=path, full_page=True)

    async def close(self) -> None:
        """Close browser and clean up resources. Safe to call twice."""
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()

        self._browser = None
        self._context = None
        self._page = None
        self._playwright = None
