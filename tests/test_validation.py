"""Tests for schema validation of untrusted input."""

import pytest

from uniplan.enums import NoteScope, Weekday
from uniplan.exceptions import ValidationError
from uniplan.validation import (
    CourseSchema,
    merge_update,
    validate_course,
    validate_degree,
    validate_import,
    validate_notes,
    validate_semester,
)


def test_course_accepts_portable_and_python_names() -> None:
    portable = validate_course({"name": "Calculus", "credits": 4, "daysOfWeek": ["Monday"], "startTime": "9:00", "endTime": "10:30"})
    pythonic = validate_course({"name": "Calculus", "credits": 4, "days_of_week": ["Monday"], "start_time": "9:00", "end_time": "10:30"})

    assert portable == pythonic
    assert portable.days_of_week == [Weekday.MONDAY]


def test_course_name_is_trimmed() -> None:
    assert validate_course({"name": "  Linear Algebra  ", "credits": 3}).name == "Linear Algebra"


@pytest.mark.parametrize(
    "data, field",
    [
        ({"name": "", "credits": 3}, "name"),
        ({"name": "   ", "credits": 3}, "name"),
        ({"name": "x" * 101, "credits": 3}, "name"),
        ({"name": "Calc", "credits": 0}, "credits"),
        ({"name": "Calc", "credits": 7}, "credits"),
        ({"name": "Calc", "credits": "3"}, "credits"),
        ({"name": "Calc", "credits": 3.5}, "credits"),
        ({"name": "Calc", "credits": 3, "grade": 4.3}, "grade"),
        ({"name": "Calc", "credits": 3, "grade": -0.1}, "grade"),
        ({"name": "Calc", "credits": 3, "startTime": "25:00"}, "startTime"),
        ({"name": "Calc", "credits": 3, "daysOfWeek": ["Funday"]}, "daysOfWeek.0"),
        ({"name": "Calc", "credits": 3, "notes": "n" * 1001}, "notes"),
        ({"credits": 3}, "name"),
    ],
)
def test_course_rejections(data: dict, field: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_course(data)

    assert exc_info.value.field == field


def test_course_end_must_follow_start() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_course({"name": "Calc", "credits": 3, "startTime": "10:00", "endTime": "10:00"})

    assert exc_info.value.field == "endTime"
    assert exc_info.value.reason == "End time must be after start time"


def test_course_days_are_deduplicated_in_order() -> None:
    course = validate_course({"name": "Calc", "credits": 3, "daysOfWeek": ["Friday", "Monday", "Friday"]})

    assert course.days_of_week == [Weekday.FRIDAY, Weekday.MONDAY]


def test_course_empty_times_mean_absent() -> None:
    course = validate_course({"name": "Calc", "credits": 3, "startTime": "", "endTime": ""})

    assert course.start_time is None
    assert course.end_time is None


def test_integer_grade_is_accepted() -> None:
    assert validate_course({"name": "Calc", "credits": 3, "grade": 4}).grade == 4.0


@pytest.mark.parametrize(
    "data, field",
    [
        ({"name": "Fall", "year": 2019, "season": "Autumn"}, "year"),
        ({"name": "Fall", "year": 2031, "season": "Autumn"}, "year"),
        ({"name": "Fall", "year": 2024, "season": "Winter"}, "season"),
        ({"name": "x" * 51, "year": 2024, "season": "Autumn"}, "name"),
        ({"name": "Fall", "year": 2024, "season": "Autumn", "isActive": "yes"}, "isActive"),
    ],
)
def test_semester_rejections(data: dict, field: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_semester(data)

    assert exc_info.value.field == field


def test_degree_maps_legacy_total() -> None:
    degree = validate_degree({"name": "Computer Science", "totalCredits": 120})

    assert degree.total_credits_required == 120


def test_degree_prefers_current_field_over_legacy() -> None:
    degree = validate_degree({"name": "CS", "totalCredits": 90, "totalCreditsRequired": 180})

    assert degree.total_credits_required == 180


def test_degree_without_total_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_degree({"name": "Computer Science"})

    assert exc_info.value.field == "degree.totalCreditsRequired"
    assert str(exc_info.value).startswith("degree.totalCreditsRequired: ")


@pytest.mark.parametrize("total", [59, 201])
def test_degree_total_bounds(total: int) -> None:
    with pytest.raises(ValidationError):
        validate_degree({"name": "CS", "totalCreditsRequired": total})


def test_notes_scope_requires_ids() -> None:
    with pytest.raises(ValidationError):
        validate_notes(scope="semester")
    with pytest.raises(ValidationError):
        validate_notes(scope="course", semester_id="s1")

    selection = validate_notes(scope="course", semester_id="s1", course_id="c1").to_selection()
    assert selection.scope is NoteScope.COURSE


def test_notes_length_limit() -> None:
    validate_notes(content="n" * 10000)
    with pytest.raises(ValidationError):
        validate_notes(content="n" * 10001)


def test_non_object_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Expected an object, got list"):
        validate_import([])


def test_import_reports_nested_field_path() -> None:
    data = {"semesters": [{"id": "s1", "name": "Fall", "year": 2035, "season": "Autumn"}]}

    with pytest.raises(ValidationError) as exc_info:
        validate_import(data)

    assert exc_info.value.field == "semesters.0.year"


def test_import_rejects_duplicate_ids() -> None:
    semester = {"id": "s1", "name": "Fall", "year": 2024, "season": "Autumn"}

    with pytest.raises(ValidationError, match="Semester IDs must be unique"):
        validate_import({"semesters": [semester, dict(semester)]})


def test_import_rejects_two_active_semesters() -> None:
    semesters = [
        {"id": "s1", "name": "Fall", "year": 2024, "season": "Autumn", "isActive": True},
        {"id": "s2", "name": "Spring", "year": 2025, "season": "Spring", "isActive": True},
    ]

    with pytest.raises(ValidationError, match="At most one semester can be active"):
        validate_import({"semesters": semesters})


def test_merge_update_revalidates_merged_entity() -> None:
    current = {"id": "c1", "name": "Calc", "credits": 3, "startTime": "10:00", "endTime": "11:00"}

    merged = merge_update(CourseSchema, current, {"end_time": "12:00"})
    assert merged.end_time == "12:00"
    assert merged.start_time == "10:00"

    with pytest.raises(ValidationError) as exc_info:
        merge_update(CourseSchema, current, {"start_time": "11:30"})
    assert exc_info.value.field == "endTime"


def test_merge_update_requires_an_object() -> None:
    current = {"id": "c1", "name": "Calc", "credits": 3}

    with pytest.raises(ValidationError, match="Expected an object, got NoneType"):
        merge_update(CourseSchema, current, None)
