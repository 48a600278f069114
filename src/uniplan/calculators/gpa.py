"""GPA calculation over plan courses."""

from typing import Iterable, List

from uniplan.models import Course, Semester


def calculate_gpa(courses: Iterable[Course]) -> float:
    """Credit-weighted GPA of the graded courses.

    Ungraded courses are ignored. A set without graded courses has a GPA of
    exactly 0.

    Args:
        courses: Courses to average

    Returns:
        ``sum(grade * credits) / sum(credits)`` over graded courses

    Example:
        >>> calculate_gpa([Course("a", "Math", 3, grade=4.0), Course("b", "CS", 3, grade=3.0)])
        3.5
    """
    graded = [course for course in courses if course.grade is not None]
    total_credits = sum(course.credits for course in graded)
    if total_credits == 0:
        return 0.0

    total_points = sum(course.grade * course.credits for course in graded)
    return total_points / total_credits


def semester_gpa(semesters: List[Semester], semester_id: str) -> float:
    """GPA of one semester; 0 if the semester does not exist."""
    for semester in semesters:
        if semester.id == semester_id:
            return calculate_gpa(semester.courses)
    return 0.0


def cumulative_gpa(semesters: List[Semester]) -> float:
    """GPA across the flattened courses of all semesters."""
    return calculate_gpa(course for semester in semesters for course in semester.courses)
