"""Degree templates: plans expressed in relative academic years."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from uniplan.config import MAX_TEMPLATE_YEAR, MAX_YEAR, MIN_YEAR
from uniplan.models import DegreeTemplate, Semester, TemplateCourse, TemplateSemester
from uniplan.validation import CourseSchema, SemesterSchema, validate


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def default_base_year(reference_date: Optional[datetime] = None) -> int:
    """Calendar year a template's first academic year is placed in.

    Args:
        reference_date: Reference date (default: today)

    Returns:
        The reference year, clamped to the supported year range
    """
    if reference_date is None:
        reference_date = datetime.now()
    return _clamp(reference_date.year, MIN_YEAR, MAX_YEAR)


def calendar_year(relative_year: int, base_year: int) -> int:
    """Map a relative academic year (1-8) to a supported calendar year.

    Example:
        >>> calendar_year(3, 2025)
        2027
        >>> calendar_year(8, 2026)
        2030
    """
    return _clamp(base_year + relative_year - 1, MIN_YEAR, MAX_YEAR)


def template_from_semesters(
    name: str,
    semesters: List[Semester],
    total_credits: Optional[int] = None,
    **details: Optional[str],
) -> DegreeTemplate:
    """Build a template from plan semesters.

    Semesters are sorted by calendar year then season, and each distinct
    calendar year becomes the next relative year (1, 2, ...), capped at 8.
    Grades, schedules and colors are not part of a template.

    Args:
        name: Template name
        semesters: Plan semesters to capture
        total_credits: Credits required by the degree
        **details: Optional ``university``, ``major`` and ``description``

    Returns:
        DegreeTemplate
    """
    ordered = sorted(semesters, key=lambda semester: (semester.year, semester.season.order))

    relative_years: Dict[int, int] = {}
    for semester in ordered:
        relative_years.setdefault(semester.year, len(relative_years) + 1)

    template_semesters = [
        TemplateSemester(
            name=semester.name,
            season=semester.season,
            year=_clamp(relative_years[semester.year], 1, MAX_TEMPLATE_YEAR),
            notes=semester.notes,
            courses=[
                TemplateCourse(name=course.name, credits=course.credits, description=course.notes)
                for course in semester.courses
            ],
        )
        for semester in ordered
    ]

    return DegreeTemplate(
        name=name,
        semesters=template_semesters,
        total_credits=total_credits,
        university=details.get("university"),
        major=details.get("major"),
        description=details.get("description"),
    )


def validate_template(
    template: DegreeTemplate,
    base_year: int,
) -> List[Tuple[SemesterSchema, List[CourseSchema]]]:
    """Validate every semester and course a template would create.

    Args:
        template: Template to apply
        base_year: Calendar year of relative year 1

    Returns:
        Validated (semester, courses) pairs in template order

    Raises:
        ValidationError: If any template semester or course is invalid
    """
    validated = []
    for i, template_semester in enumerate(template.semesters):
        semester_schema = validate(
            SemesterSchema,
            {
                "name": template_semester.name,
                "year": calendar_year(template_semester.year, base_year),
                "season": template_semester.season.label,
                "notes": template_semester.notes,
            },
            prefix=f"template.semesters.{i}",
        )
        course_schemas = [
            validate(
                CourseSchema,
                {"name": course.name, "credits": course.credits, "notes": course.description},
                prefix=f"template.semesters.{i}.courses.{j}",
            )
            for j, course in enumerate(template_semester.courses)
        ]
        validated.append((semester_schema, course_schemas))
    return validated
