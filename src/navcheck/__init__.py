"""navcheck - browser checks for the Playwright documentation home page."""

__version__ = "0.1.0"
