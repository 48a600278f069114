"""Weekday enumeration."""

from enum import Enum


class Weekday(Enum):
    """Day of the week a course meets on, in calendar order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        """Position in the week, Monday being 0."""
        return list(Weekday).index(self)
