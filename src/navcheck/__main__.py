"""Allow running navcheck as ``python -m navcheck``."""

from navcheck.cli.main import app

if __name__ == "__main__":
    app()
