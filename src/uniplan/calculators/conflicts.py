"""Schedule conflict detection."""

from typing import List, Optional

from uniplan.models import Course, ScheduleConflict, Semester, TimeOverlap


def scoped_courses(semesters: List[Semester], semester_id: Optional[str] = None) -> List[Course]:
    """Flatten the courses of one semester, or of all semesters if no ID is given."""
    if semester_id is not None:
        semesters = [semester for semester in semesters if semester.id == semester_id]
    return [course for semester in semesters for course in semester.courses]


def find_conflict(first: Course, second: Course) -> List[ScheduleConflict]:
    """Conflicts between two scheduled courses, one per shared day.

    Meetings are half-open intervals: a course ending at 10:00 does not clash
    with one starting at 10:00. The overlap is reported with the original
    strings of the later start and the earlier end.

    Args:
        first: Course appearing first in plan order
        second: Course appearing later in plan order

    Returns:
        Conflicts, possibly empty
    """
    start1, end1 = first.start_minutes, first.end_minutes
    start2, end2 = second.start_minutes, second.end_minutes

    if not (start1 < end2 and end1 > start2):
        return []

    overlap = TimeOverlap(
        start=first.start_time if start1 > start2 else second.start_time,
        end=first.end_time if end1 < end2 else second.end_time,
    )

    conflicts = []
    for day in first.days_of_week:
        if day in second.days_of_week:
            conflicts.append(ScheduleConflict(courses=(first, second), day=day, time_overlap=overlap))
    return conflicts


def find_schedule_conflicts(
    semesters: List[Semester],
    semester_id: Optional[str] = None,
) -> List[ScheduleConflict]:
    """Detect overlapping meetings.

    Every unordered pair of scheduled courses in scope is compared once, so
    a clash between A and B is reported as (A, B) and never again as (B, A).
    Courses without days, start or end time are skipped.

    Args:
        semesters: Plan semesters
        semester_id: Restrict the check to one semester

    Returns:
        Conflicts in plan order

    Example:
        >>> conflicts = find_schedule_conflicts(plan.semesters, semester_id="fall-24")
        >>> [str(c) for c in conflicts]
        ['Math 101 / Physics 101 on Monday 10:30-11:30']
    """
    courses = [course for course in scoped_courses(semesters, semester_id) if course.is_scheduled]

    conflicts: List[ScheduleConflict] = []
    for i, first in enumerate(courses):
        for second in courses[i + 1:]:
            conflicts.extend(find_conflict(first, second))
    return conflicts
