"""Structured key-value logger used across UniPlan."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class LogItem:
    """A single key-value pair appended to a log line."""

    name: str
    value: str

    def __str__(self):
        escaped = self.value.replace('"', '\\"')
        return f'{self.name}="{escaped}"'


class CustomLogger:
    """Structured logger with key-value pair support.

    Messages are rendered as ``msg="..." key="value"`` so that plan and sync
    events can be grepped by identifier.

    Example:
        >>> logger = CustomLogger("UNIPLAN.engine.planner")
        >>> logger.info("Course added", semester_id="s1", course_id="c9")
        # Output: msg="Course added" semester_id="s1" course_id="c9"
    """

    def __init__(self, name: str, **items: Any):
        """Initialize custom logger.

        Args:
            name: Logger name (typically module name)
            **items: Default items included in every message
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.items: List[LogItem] = self._to_items(items)

    @staticmethod
    def _to_items(items: Dict[str, Any]) -> List[LogItem]:
        return [LogItem(key, str(value)) for key, value in items.items()]

    def _log(self, level: int, message: str, items: Dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        parts = [f'msg="{message}"'] + [str(item) for item in self.items + self._to_items(items)]
        self.logger.log(level, " ".join(parts))

    def debug(self, message: str, **items: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, items)

    def info(self, message: str, **items: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, items)

    def warning(self, message: str, **items: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, items)

    def error(self, message: str, **items: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, items)

    def with_items(self, **items: Any) -> "CustomLogger":
        """Return a child logger carrying extra default items.

        Args:
            **items: Items added to every message of the child logger

        Returns:
            New CustomLogger sharing the same underlying logger
        """
        child = CustomLogger(self.name)
        child.items = self.items + self._to_items(items)
        return child
