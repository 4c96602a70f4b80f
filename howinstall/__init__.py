"""how-install - Find out how to install a command on your system.

A CLI tool that looks up a command on command-not-found.com, picks the
install instruction matching the local Linux distribution and optionally
runs it.
"""

__version__ = "0.3.0"
__author__ = "how-install Team"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
