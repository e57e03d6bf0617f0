"""Module entry point: ``python -m theater``."""

from theater.cli import app

if __name__ == "__main__":
    app()
