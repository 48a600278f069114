"""Library logger for uniplan.

Every module logs through ``get_logger(__name__)`` under the ``UNIPLAN``
logger. Nothing is printed until the application calls ``setup_logging``.
"""

import logging
from typing import Any, Optional, Union

from uniplan.utils.custom_logger import CustomLogger

_LOGGER_NAME = "UNIPLAN"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Send uniplan's log records to a handler.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Threshold as a number or a name such as "DEBUG"
        format_string: Record format (default: ``[LEVEL] logger - msg="..." key="..."``)
        handler: Destination of the records (default: stderr)

    Example:
        Trace every mutation and sync stage:
        >>> import logging, uniplan
        >>> uniplan.setup_logging(level="DEBUG")

        Keep a sync log next to the application:
        >>> uniplan.setup_logging(level=logging.INFO, handler=logging.FileHandler("sync.log"))
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    library_logger = logging.getLogger(_LOGGER_NAME)
    library_logger.setLevel(level)
    library_logger.handlers.clear()

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    library_logger.addHandler(handler)


def get_logger(name: str, **items: Any) -> CustomLogger:
    """Structured logger for one module.

    Args:
        name: Module name, usually ``__name__``
        **items: Key-value pairs attached to every line

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Plan imported", semesters=4)
        # msg="Plan imported" semesters="4"
    """
    return CustomLogger(f"{_LOGGER_NAME}.{name}", **items)


# Silent until setup_logging is called
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
logging.getLogger(_LOGGER_NAME).setLevel(logging.WARNING)
