"""Logging setup for how-install.

Called once by the CLI. Modules log through
``logger = logging.getLogger(__name__)`` and inherit this configuration.
"""

import logging

from rich.logging import RichHandler

from howinstall.utils.display import err_console

# Third-party loggers that are noisy below WARNING
_NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_path=numeric_level <= logging.DEBUG,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
