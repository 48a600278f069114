"""Course data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from uniplan.enums import Weekday
from uniplan.utils.time_utils import time_to_minutes


@dataclass
class Course:
    """A single course taken in one semester.

    Attributes:
        id: Opaque identifier, assigned at creation and never changed
        name: Course name (1-100 characters)
        credits: Credit weight (1-6)
        days_of_week: Weekdays the course meets on, without duplicates
        start_time: Start clock time ("HH:MM")
        end_time: End clock time ("HH:MM"), strictly after start_time
        grade: Grade points on the 0.0-4.0 scale; None while ungraded
        color: Display color from the course palette
        notes: Free text
    """

    id: str
    name: str
    credits: int
    days_of_week: Optional[List[Weekday]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    grade: Optional[float] = None
    color: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_graded(self) -> bool:
        """Whether the course counts towards GPA and completed credits."""
        return self.grade is not None

    @property
    def is_scheduled(self) -> bool:
        """Whether the course has meeting days and both clock times."""
        return bool(self.days_of_week) and bool(self.start_time) and bool(self.end_time)

    @property
    def start_minutes(self) -> Optional[int]:
        return time_to_minutes(self.start_time) if self.start_time else None

    @property
    def end_minutes(self) -> Optional[int]:
        return time_to_minutes(self.end_time) if self.end_time else None

    @property
    def duration_minutes(self) -> int:
        """Length of one meeting in minutes, 0 when unscheduled."""
        if not self.start_time or not self.end_time:
            return 0
        return self.end_minutes - self.start_minutes

    def to_dict(self) -> Dict[str, Any]:
        """Portable (camelCase) representation; absent optionals are omitted."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "credits": self.credits,
        }
        if self.days_of_week is not None:
            data["daysOfWeek"] = [day.value for day in self.days_of_week]
        if self.start_time is not None:
            data["startTime"] = self.start_time
        if self.end_time is not None:
            data["endTime"] = self.end_time
        if self.grade is not None:
            data["grade"] = self.grade
        if self.color is not None:
            data["color"] = self.color
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    def __str__(self) -> str:
        """String representation of the course."""
        return f"{self.name} ({self.credits} cr)"
