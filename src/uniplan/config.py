"""Configuration values for the planning engine and the remote store."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

# Display colors handed out to new courses, round-robin by sibling count
COURSE_COLORS = [
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#06B6D4",
    "#84CC16",
    "#F97316",
    "#EC4899",
    "#6366F1",
]

HISTORY_LIMIT = 50

MIN_YEAR = 2020
MAX_YEAR = 2030

# Relative template years are clamped to this range
MAX_TEMPLATE_YEAR = 8

EXPORT_VERSION = "1.0"

DEFAULT_SYNC_TIMEOUT = 30.0

# Seconds of quiet after the last change before an automatic push
AUTO_SAVE_DELAY = 30.0


@dataclass
class EngineConfig:
    """Tunables of a Planner instance.

    Attributes:
        history_limit: Maximum number of undo entries kept
        palette: Colors assigned to new courses
        sync_timeout: Seconds a pull or push may run before it is aborted
        auto_save_delay: Seconds after the last change before an auto-save push
    """

    history_limit: int = HISTORY_LIMIT
    palette: List[str] = field(default_factory=lambda: list(COURSE_COLORS))
    sync_timeout: float = DEFAULT_SYNC_TIMEOUT
    auto_save_delay: float = AUTO_SAVE_DELAY


@dataclass
class RemoteSettings:
    """Connection settings for the HTTP remote store.

    Attributes:
        base_url: REST endpoint root (e.g. "https://project.example.co/rest/v1")
        api_key: Key sent as ``apikey`` header and bearer token
        timeout: HTTP request timeout in seconds
    """

    base_url: str
    api_key: Optional[str] = None
    timeout: int = 30

    @classmethod
    def from_env(cls) -> "RemoteSettings":
        """Build settings from ``UNIPLAN_REMOTE_URL``, ``UNIPLAN_REMOTE_KEY``
        and ``UNIPLAN_HTTP_TIMEOUT``.

        Raises:
            RuntimeError: If ``UNIPLAN_REMOTE_URL`` is not set
        """
        base_url = os.getenv("UNIPLAN_REMOTE_URL")
        if not base_url:
            raise RuntimeError("UNIPLAN_REMOTE_URL environment variable is not set.")

        return cls(
            base_url=base_url,
            api_key=os.getenv("UNIPLAN_REMOTE_KEY"),
            timeout=int(os.getenv("UNIPLAN_HTTP_TIMEOUT", "30")),
        )
