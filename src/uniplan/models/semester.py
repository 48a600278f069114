"""Semester data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from uniplan.enums import Season
from uniplan.models.course import Course


@dataclass
class Semester:
    """A semester holding an ordered list of courses.

    Attributes:
        id: Opaque identifier
        name: Display name (1-50 characters)
        year: Calendar year (2020-2030)
        season: Autumn, Spring or Summer
        courses: Courses in display order
        notes: Free text
        is_active: Whether this is the semester the student is currently in
    """

    id: str
    name: str
    year: int
    season: Season
    courses: List[Course] = field(default_factory=list)
    notes: Optional[str] = None
    is_active: Optional[bool] = None

    @property
    def total_credits(self) -> int:
        return sum(course.credits for course in self.courses)

    @property
    def completed_credits(self) -> int:
        return sum(course.credits for course in self.courses if course.is_graded)

    def find_course(self, course_id: str) -> Optional[Course]:
        """Get a course of this semester by ID.

        Args:
            course_id: Course identifier

        Returns:
            Course or None if not found
        """
        for course in self.courses:
            if course.id == course_id:
                return course
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Portable (camelCase) representation including courses."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "year": self.year,
            "season": self.season.label,
        }
        if self.notes is not None:
            data["notes"] = self.notes
        if self.is_active is not None:
            data["isActive"] = self.is_active
        data["courses"] = [course.to_dict() for course in self.courses]
        return data

    def __str__(self) -> str:
        """String representation of the semester."""
        return f"{self.name} ({self.season.label} {self.year})"
