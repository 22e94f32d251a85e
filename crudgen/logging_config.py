"""Logging setup for crudgen.

Every module obtains its logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once to attach a rich handler.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "crudgen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the ``crudgen`` root logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a RichHandler to the root crudgen logger.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The configured root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Repeated calls must not stack handlers
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    return logger
