"""Shared pytest fixtures for navcheck tests.

Fixtures include a mock page session, a mock Playwright locator, a patched
``expect``, a session logger and a config with short timeouts.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from navcheck.core.protocols import PageSessionProtocol
from navcheck.utils.config import AppConfig
from navcheck.utils.session import SessionLogger


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Test configuration with short timeouts.

    Returns:
        AppConfig: A configuration object for testing.
    """
    return AppConfig(
        base_url="https://playwright.dev/",
        output_dir=tmp_path / "output",
        headless=True,
        page_timeout=5000,
        element_timeout=2000,
        expect_timeout=1000,
    )


@pytest.fixture
def mock_locator() -> MagicMock:
    """Mock Playwright locator that resolves to one element."""
    locator = MagicMock()
    locator.wait_for = AsyncMock()
    locator.count = AsyncMock(return_value=1)
    locator.text_content = AsyncMock(return_value="text")
    locator.get_attribute = AsyncMock(return_value=None)
    return locator


@pytest.fixture
def mock_browser(mock_locator: MagicMock) -> MagicMock:
    """Mock page session conforming to PageSessionProtocol.

    ``locate`` is synchronous and always returns ``mock_locator``.
    """
    browser = MagicMock(spec=PageSessionProtocol)
    browser.launch = AsyncMock()
    browser.navigate = AsyncMock()
    browser.locate = MagicMock(return_value=mock_locator)
    browser.click = AsyncMock()
    browser.screenshot = AsyncMock(return_value=b"fake_screenshot_data")
    browser.close = AsyncMock()
    return browser


@pytest.fixture
def mock_expect():
    """Patch the runner's ``expect`` so every assertion passes by default.

    Set ``side_effect`` on the returned assertion methods to simulate
    mismatches.
    """
    with patch("navcheck.core.runner.expect") as expect:
        assertions = expect.return_value
        assertions.to_be_visible = AsyncMock()
        assertions.to_have_text = AsyncMock()
        assertions.to_have_attribute = AsyncMock()
        assertions.to_contain_text = AsyncMock()
        yield expect


@pytest.fixture
def mock_session(tmp_path: Path) -> SessionLogger:
    """Session logger writing into a temporary directory."""
    return SessionLogger(
        output_dir=tmp_path,
        base_url="https://playwright.dev/",
        target="live",
    )


@pytest.fixture
def mock_pages_dir() -> Path:
    """Path to the bundled mock home page directory."""
    return Path(__file__).parent.parent / "mock_pages" / "playwright_dev"
