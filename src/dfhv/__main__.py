"""Entry point for running the viewer as a module.

Usage:
    python -m dfhv serve
    python -m dfhv serve --host 0.0.0.0 --port 8080
"""

from dfhv.cli import app

if __name__ == "__main__":
    app()
