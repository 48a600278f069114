"""Result models returned across the engine boundary."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class OperationResult:
    """Outcome of a mutation or import.

    Validation, parse and not-found failures are reported here instead of
    being raised, so callers can show ``message`` next to the offending field.

    Attributes:
        success: Whether the operation was applied
        message: Human-readable outcome
        value: Operation payload (e.g. the new semester or course ID)
        field: Dotted path of the rejected field, when known
    """

    success: bool
    message: str
    value: Any = None
    field: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class ProgressStats:
    """Credit and GPA progress over the whole plan.

    Attributes:
        total_credits: Credits of all planned courses
        completed_credits: Credits of graded courses
        cumulative_gpa: Credit-weighted GPA of graded courses
        degree_progress: Percentage of the degree requirement completed (0 without a degree)
        plan_progress: Percentage of planned credits completed
    """

    total_credits: int
    completed_credits: int
    cumulative_gpa: float
    degree_progress: float
    plan_progress: float


@dataclass
class SyncReport:
    """What a push changed on the remote store.

    Attributes:
        deleted_course_ids: Remote courses removed because they no longer exist locally
        deleted_semester_ids: Remote semesters removed for the same reason
        upserted_semesters: Number of semester rows written
        upserted_courses: Number of course rows written
    """

    deleted_course_ids: List[str] = field(default_factory=list)
    deleted_semester_ids: List[str] = field(default_factory=list)
    upserted_semesters: int = 0
    upserted_courses: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "deleted_course_ids": self.deleted_course_ids,
            "deleted_semester_ids": self.deleted_semester_ids,
            "upserted_semesters": self.upserted_semesters,
            "upserted_courses": self.upserted_courses,
        }
