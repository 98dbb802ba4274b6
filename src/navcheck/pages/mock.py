"""Mock server for serving a local copy of the home page."""

import http.server
import logging
import socketserver
import threading
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class MockRequestHandler(http.server.SimpleHTTPRequestHandler):
    """Serves files from pages_dir, with index.html at the root path."""

    def __init__(self, *args: Any, pages_dir: Path, **kwargs: Any) -> None:
        self.pages_dir = pages_dir
        super().__init__(*args, directory=str(pages_dir), **kwargs)

    def do_GET(self) -> None:
        """Handle GET, mapping the site root to index.html."""
        parsed = urlparse(self.path)
        if parsed.path in ("", "/"):
            self.path = "/index.html"
        super().do_GET()

    def log_message(self, format: str, *args: Any) -> None:
        """Route request logs to the module logger at debug level."""
        logger.debug(format, *args)


class MockServer:
    """Local HTTP server serving the mock home page."""

    def __init__(self, pages_dir: Path, port: int = 8000):
        self.pages_dir = pages_dir
        self.port = port
        self._server: socketserver.TCPServer | None = None
        self._thread: threading.Thread | None = None

    def _create_handler(self) -> type[MockRequestHandler]:
        """Create a request handler class with pages_dir bound."""
        pages_dir = self.pages_dir

        class BoundHandler(MockRequestHandler):
            def __init__(self, *args: Any, **kwargs: Any) -> None:
                super().__init__(*args, pages_dir=pages_dir, **kwargs)

        return BoundHandler

    def start(self) -> None:
        """Start mock server in background thread.

        A port of 0 binds a free port; ``port`` is updated to the bound one.
        """
        handler_class = self._create_handler()
        self._server = socketserver.ThreadingTCPServer(
            ("localhost", self.port), handler_class
        )
        self._server.daemon_threads = True
        self.port = self._server.server_address[1]
        self._thread = threading.Thread(target=self._server.serve_forever)
        self._thread.daemon = True
        self._thread.start()
        logger.info(f"Mock server serving {self.pages_dir} at {self.base_url}")

    def stop(self) -> None:
        """Stop mock server."""
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            if self._thread:
                self._thread.join(timeout=5)
            self._server = None
            self._thread = None

    @property
    def base_url(self) -> str:
        """Get base URL for the mock server."""
        return f"http://localhost:{self.port}"


def get_mock_pages_dir() -> Path:
    """Path to the bundled mock home page directory."""
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / "mock_pages" / "playwright_dev"
