"""Locator types for finding page elements.

A locator is a small frozen record that knows how to turn a live page into a
Playwright ``Locator``. Resolution is lazy: nothing touches the page until a
check waits on the returned locator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, cast

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page


class LocatorStrategy(Protocol):
    """Anything that can find one element on a page."""

    def resolve(self, page: Page) -> Locator:
        """Return a Playwright locator for the element on ``page``."""
        ...

    def describe(self) -> str:
        """Return a short description for reports."""
        ...


@dataclass(frozen=True)
class RoleLocator:
    """Find an element by ARIA role and accessible name.

    Attributes:
        role: ARIA role, e.g. "link", "button" or "heading".
        name: Accessible name. Matched as a case-insensitive substring
            unless ``exact`` is set, the same as Playwright's get_by_role.
        exact: Require the accessible name to match exactly.
    """

    role: str
    name: str
    exact: bool = False

    def __post_init__(self) -> None:
        """Validate that role and name are not empty."""
        if not self.role:
            raise ValueError("role cannot be empty")
        if not self.name:
            raise ValueError("name cannot be empty")

    def resolve(self, page: Page) -> Locator:
        # Playwright expects a Literal role type; the registry stores plain strings
        return page.get_by_role(cast(Any, self.role), name=self.name, exact=self.exact)

    def describe(self) -> str:
        return f'role={self.role} name="{self.name}"'


@dataclass(frozen=True)
class CssLocator:
    """Find an element by CSS selector."""

    selector: str

    def __post_init__(self) -> None:
        if not self.selector:
            raise ValueError("selector cannot be empty")

    def resolve(self, page: Page) -> Locator:
        return page.locator(self.selector)

    def describe(self) -> str:
        return f"css={self.selector}"
