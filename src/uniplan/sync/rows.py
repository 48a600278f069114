"""Conversion between plan models and remote rows."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from uniplan.exceptions import SyncError, ValidationError
from uniplan.logging import get_logger
from uniplan.models import Course, Degree, Semester
from uniplan.sync.remote import Row
from uniplan.utils.time_utils import normalize_remote_time
from uniplan.validation import CourseSchema, DegreeSchema, SemesterSchema, validate, validate_notes

logger = get_logger(__name__)


def semester_to_row(semester: Semester, user_id: str) -> Row:
    return {
        "id": semester.id,
        "user_id": user_id,
        "name": semester.name,
        "year": semester.year,
        "season": semester.season.label,
        "is_active": bool(semester.is_active),
        "notes": semester.notes,
    }


def course_to_row(course: Course, semester_id: str, user_id: str) -> Row:
    return {
        "id": course.id,
        "user_id": user_id,
        "semester_id": semester_id,
        "name": course.name,
        "credits": course.credits,
        "days_of_week": [day.value for day in course.days_of_week] if course.days_of_week is not None else None,
        "start_time": course.start_time,
        "end_time": course.end_time,
        "grade": course.grade,
        "color": course.color,
        "notes": course.notes,
    }


def profile_to_row(user_id: str, notes: str, degree: Optional[Degree]) -> Row:
    return {
        "user_id": user_id,
        "notes": notes,
        "degree_name": degree.name if degree else None,
        "degree_total_credits": degree.total_credits_required if degree else None,
    }


def _remote_time(value: Any) -> Any:
    # Non-string values are left for the schema to reject
    if isinstance(value, str):
        return normalize_remote_time(value)
    return value


def _row_id(row: Row, table: str) -> str:
    row_id = row.get("id")
    if not isinstance(row_id, str) or not row_id:
        raise ValidationError("Row has no ID", field=table)
    return row_id


def _semester_from_row(row: Row) -> Semester:
    row_id = _row_id(row, "semesters")
    data = {
        "name": row.get("name"),
        "year": row.get("year"),
        "season": row.get("season"),
        "notes": row.get("notes"),
        "is_active": row.get("is_active"),
    }
    return validate(SemesterSchema, data, prefix=f"semesters.{row_id}").to_semester(row_id)


def _course_from_row(row: Row) -> Course:
    row_id = _row_id(row, "courses")
    data = {
        "name": row.get("name"),
        "credits": row.get("credits"),
        "days_of_week": row.get("days_of_week"),
        "start_time": _remote_time(row.get("start_time")),
        "end_time": _remote_time(row.get("end_time")),
        "grade": row.get("grade"),
        "color": row.get("color"),
        "notes": row.get("notes"),
    }
    schema = validate(CourseSchema, data, prefix=f"courses.{row_id}")
    return schema.to_course(row_id, schema.color)


def _degree_from_profile(profile: Row) -> Optional[Degree]:
    name = profile.get("degree_name")
    total = profile.get("degree_total_credits")
    if name is None or total is None:
        return None
    data = {"name": name, "totalCreditsRequired": total}
    return validate(DegreeSchema, data, prefix="profile.degree").to_degree()


def plan_from_rows(
    profile: Optional[Row],
    semester_rows: List[Row],
    course_rows: List[Row],
) -> Tuple[List[Semester], str, Optional[Degree]]:
    """Assemble plan content from remote rows.

    Courses are attached to their semester in row order. Courses whose
    semester is not among ``semester_rows`` are dropped.

    Args:
        profile: The user's profile row, if any
        semester_rows: Semester rows in creation order
        course_rows: Course rows in creation order

    Returns:
        Tuple of (semesters, notes, degree)

    Raises:
        SyncError: If any row fails validation
    """
    try:
        semesters = [_semester_from_row(row) for row in semester_rows]
        by_id: Dict[str, Semester] = {semester.id: semester for semester in semesters}

        dropped = 0
        for row in course_rows:
            course = _course_from_row(row)
            semester = by_id.get(row.get("semester_id"))
            if semester is None:
                dropped += 1
                continue
            semester.courses.append(course)

        notes = ""
        degree = None
        if profile is not None:
            notes = validate_notes(content=profile.get("notes") or "").content
            degree = _degree_from_profile(profile)
    except ValidationError as e:
        raise SyncError("pull", f"invalid remote data: {e}", stage="validate rows", retryable=False) from e

    if dropped:
        logger.warning("Dropped courses without a semester", count=dropped)

    if sum(1 for semester in semesters if semester.is_active) > 1:
        raise SyncError("pull", "more than one remote semester is active", stage="validate rows", retryable=False)

    return semesters, notes, degree
