"""Derived schedule models (never stored in the plan)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from uniplan.enums import Weekday
from uniplan.models.course import Course


@dataclass(frozen=True)
class TimeOverlap:
    """Intersection of two meetings, as clock time strings."""

    start: str
    end: str


@dataclass
class ScheduleConflict:
    """Two courses meeting at the same time on the same day.

    Attributes:
        courses: The conflicting pair, in plan order
        day: The shared day
        time_overlap: The intersecting interval
    """

    courses: Tuple[Course, Course]
    day: Weekday
    time_overlap: TimeOverlap

    def __str__(self) -> str:
        first, second = self.courses
        return (
            f"{first.name} / {second.name} on {self.day.value} "
            f"{self.time_overlap.start}-{self.time_overlap.end}"
        )


@dataclass
class TimeSlot:
    """One weekly meeting of a course."""

    day: Weekday
    start_time: str
    end_time: str
    course: Course
