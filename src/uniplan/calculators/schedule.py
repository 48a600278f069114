"""Weekly schedule views."""

from typing import Dict, List, Optional

from uniplan.calculators.conflicts import scoped_courses
from uniplan.enums import Weekday
from uniplan.models import Semester, TimeSlot


def current_schedule(semesters: List[Semester], semester_id: Optional[str] = None) -> List[TimeSlot]:
    """All weekly meetings in scope, ordered by weekday then start time.

    The sort is stable: meetings starting at the same time on the same day
    keep plan order.

    Args:
        semesters: Plan semesters
        semester_id: Restrict to one semester

    Returns:
        Time slots sorted Monday to Sunday
    """
    slots = [
        TimeSlot(day=day, start_time=course.start_time, end_time=course.end_time, course=course)
        for course in scoped_courses(semesters, semester_id)
        if course.is_scheduled
        for day in course.days_of_week
    ]
    return sorted(slots, key=lambda slot: (slot.day.index, slot.course.start_minutes))


def group_slots_by_day(slots: List[TimeSlot]) -> Dict[Weekday, List[TimeSlot]]:
    """Group time slots by weekday, keeping their order.

    Args:
        slots: Time slots, usually from :func:`current_schedule`

    Returns:
        Dictionary mapping each weekday with meetings to its slots
    """
    grouped: Dict[Weekday, List[TimeSlot]] = {}
    for slot in slots:
        grouped.setdefault(slot.day, []).append(slot)
    return grouped


def weekly_hours(semesters: List[Semester], semester_id: Optional[str] = None) -> float:
    """Hours of class per week in scope.

    Example:
        A course meeting Mon/Wed/Fri 10:00-11:00 and one meeting Tue/Thu
        14:00-15:30 add up to 6.0 hours.
    """
    minutes = sum(
        course.duration_minutes * len(course.days_of_week)
        for course in scoped_courses(semesters, semester_id)
        if course.is_scheduled
    )
    return minutes / 60
