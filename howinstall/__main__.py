"""Entry point for running how-install as a module.

Usage:
    python -m howinstall curl
    python -m howinstall --help
"""

from howinstall.cli import app

if __name__ == "__main__":
    app()
