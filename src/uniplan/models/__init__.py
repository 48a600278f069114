"""Data models for UniPlan."""

from uniplan.models.course import Course
from uniplan.models.degree import Degree
from uniplan.models.history import ActionHistoryItem
from uniplan.models.plan import NoteSelection, Plan, PlanSnapshot
from uniplan.models.result import OperationResult, ProgressStats, SyncReport
from uniplan.models.schedule import ScheduleConflict, TimeOverlap, TimeSlot
from uniplan.models.semester import Semester
from uniplan.models.template import DegreeTemplate, TemplateCourse, TemplateSemester

__all__ = [
    "ActionHistoryItem",
    "Course",
    "Degree",
    "DegreeTemplate",
    "NoteSelection",
    "OperationResult",
    "Plan",
    "PlanSnapshot",
    "ProgressStats",
    "ScheduleConflict",
    "Semester",
    "SyncReport",
    "TemplateCourse",
    "TemplateSemester",
    "TimeOverlap",
    "TimeSlot",
]
