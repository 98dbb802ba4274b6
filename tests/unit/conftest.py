"""Unit test fixtures for navcheck.

Pytest discovers fixtures from the parent conftest.py automatically:
- app_config: AppConfig with short timeouts
- mock_locator: Playwright locator mock resolving to one element
- mock_browser: Page session mock returning mock_locator
- mock_expect: patched runner ``expect`` with passing assertions
- mock_session: SessionLogger using tmp_path
- mock_pages_dir: Path to mock_pages/playwright_dev
"""
