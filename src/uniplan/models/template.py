"""Degree template models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from uniplan.enums import Season


@dataclass
class TemplateCourse:
    """A course suggested by a degree template.

    Attributes:
        name: Course name
        credits: Credit weight
        code: Catalog code (e.g. "CSE115")
        description: Short description, copied to course notes when applied
        is_required: Whether the course is mandatory for the degree
    """

    name: str
    credits: int
    code: Optional[str] = None
    description: Optional[str] = None
    is_required: bool = False


@dataclass
class TemplateSemester:
    """A semester of a degree template.

    Attributes:
        name: Semester name
        season: Season within the academic year
        year: Relative academic year (1 = first year of study, at most 8)
        notes: Free text
        courses: Suggested courses
    """

    name: str
    season: Season
    year: int
    notes: Optional[str] = None
    courses: List[TemplateCourse] = field(default_factory=list)


@dataclass
class DegreeTemplate:
    """A reusable plan expressed in relative academic years.

    Attributes:
        name: Template name
        semesters: Semesters sorted by relative year and season
        total_credits: Credits required by the degree, if known
        university: Institution the template was written for
        major: Major the template covers
        description: Free text
    """

    name: str
    semesters: List[TemplateSemester] = field(default_factory=list)
    total_credits: Optional[int] = None
    university: Optional[str] = None
    major: Optional[str] = None
    description: Optional[str] = None

    @property
    def course_count(self) -> int:
        return sum(len(semester.courses) for semester in self.semesters)
