"""Fixtures for integration tests.

These tests launch a real Chromium against the local MockServer. They are
skipped when Playwright's Chromium build is not installed.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from navcheck.pages.mock import MockServer
from navcheck.utils.config import AppConfig


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if "integration/" in item.nodeid:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session", autouse=True)
def require_chromium() -> None:
    """Skip the integration suite when Chromium is not installed."""
    from playwright.sync_api import sync_playwright

    with sync_playwright() as p:
        executable = Path(p.chromium.executable_path)
    if not executable.exists():
        pytest.skip("Chromium not installed; run `playwright install chromium`")


@pytest.fixture
def site_dir(tmp_path: Path, mock_pages_dir: Path) -> Path:
    """A writable copy of the bundled mock home page."""
    target = tmp_path / "site"
    target.mkdir()
    (target / "index.html").write_text((mock_pages_dir / "index.html").read_text())
    return target


@pytest.fixture
def edit_page(site_dir: Path) -> Callable[[str, str], None]:
    """Replace a fragment of the served mock page's HTML."""

    def edit(old: str, new: str) -> None:
        index = site_dir / "index.html"
        html = index.read_text()
        assert old in html, f"fragment not found in mock page: {old}"
        index.write_text(html.replace(old, new, 1))

    return edit


@pytest.fixture
def mock_server(site_dir: Path) -> Iterator[MockServer]:
    """Start mock server on a free port."""
    server = MockServer(site_dir, port=0)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def live_config(tmp_path: Path, mock_server: MockServer) -> AppConfig:
    """Config pointed at the mock server with short waits."""
    return AppConfig(
        base_url=mock_server.base_url + "/",
        output_dir=tmp_path / "output",
        headless=True,
        page_timeout=15000,
        element_timeout=2000,
        expect_timeout=2000,
    )
