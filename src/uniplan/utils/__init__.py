"""Utility functions for UniPlan."""

from uniplan.utils.ids import generate_id
from uniplan.utils.time_utils import (
    is_valid_time,
    minutes_to_time,
    normalize_remote_time,
    time_to_minutes,
)

__all__ = [
    "generate_id",
    "is_valid_time",
    "minutes_to_time",
    "normalize_remote_time",
    "time_to_minutes",
]
