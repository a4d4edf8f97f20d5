"""Logging setup for boilergen.

Every module obtains its logger through :func:`get_logger` so that all
records end up under the ``boilergen`` namespace.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "boilergen"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Configured ``logging.Logger`` instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.WARNING, rich_output: bool = True) -> None:
    """Configure the package root logger.

    Args:
        level: Log level name or number.
        rich_output: Render records with rich instead of plain text.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    if rich_output:
        handler: logging.Handler = RichHandler(
            show_path=False, rich_tracebacks=True, markup=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    root.addHandler(handler)
    root.propagate = False
