"""UniPlan - planning state engine for multi-semester academic plans."""

from uniplan.clients import HTTPClient
from uniplan.config import EngineConfig, RemoteSettings
from uniplan.engine import ActionHistory, Planner, template_from_semesters
from uniplan.enums import ActionType, NoteScope, Season, Weekday
from uniplan.exceptions import (
    NotFoundError,
    ParseError,
    SyncError,
    SyncInProgressError,
    UniplanError,
    ValidationError,
)
from uniplan.logging import setup_logging
from uniplan.models import (
    Course,
    Degree,
    DegreeTemplate,
    OperationResult,
    Plan,
    ProgressStats,
    ScheduleConflict,
    Semester,
    SyncReport,
    TemplateCourse,
    TemplateSemester,
    TimeSlot,
)
from uniplan.sync import AutoSaver, InMemoryRemoteStore, RemoteStore, RestRemoteStore, SyncReconciler

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HTTPClient",
    "EngineConfig",
    "RemoteSettings",
    "ActionHistory",
    "Planner",
    "template_from_semesters",
    "ActionType",
    "NoteScope",
    "Season",
    "Weekday",
    "Course",
    "Degree",
    "DegreeTemplate",
    "OperationResult",
    "Plan",
    "ProgressStats",
    "ScheduleConflict",
    "Semester",
    "SyncReport",
    "TemplateCourse",
    "TemplateSemester",
    "TimeSlot",
    "AutoSaver",
    "InMemoryRemoteStore",
    "RemoteStore",
    "RestRemoteStore",
    "SyncReconciler",
    "setup_logging",
    "UniplanError",
    "ValidationError",
    "NotFoundError",
    "ParseError",
    "SyncError",
    "SyncInProgressError",
]
