"""Facts derived on demand from the plan."""

from uniplan.calculators.conflicts import find_schedule_conflicts
from uniplan.calculators.gpa import calculate_gpa, cumulative_gpa, semester_gpa
from uniplan.calculators.progress import plan_progress
from uniplan.calculators.schedule import current_schedule, group_slots_by_day, weekly_hours

__all__ = [
    "calculate_gpa",
    "cumulative_gpa",
    "current_schedule",
    "find_schedule_conflicts",
    "group_slots_by_day",
    "plan_progress",
    "semester_gpa",
    "weekly_hours",
]
