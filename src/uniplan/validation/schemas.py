"""Pydantic schemas for every piece of data entering the plan.

Schemas accept both the portable camelCase names (``daysOfWeek``) and the
Python field names (``days_of_week``). Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    StringConstraints,
    ValidationInfo,
    field_validator,
    model_validator,
)

from uniplan.config import MAX_YEAR, MIN_YEAR
from uniplan.enums import NoteScope, Season, Weekday
from uniplan.models import Course, Degree, NoteSelection, Semester
from uniplan.utils.time_utils import is_valid_time, time_to_minutes

SeasonLabel = Literal["Autumn", "Spring", "Summer"]

CourseName = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=100)]
SemesterName = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=50)]
DegreeName = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=100)]
EntityNotes = Annotated[str, StringConstraints(strict=True, max_length=1000)]
PlanNotes = Annotated[str, StringConstraints(strict=True, max_length=10000)]
EntityId = Annotated[str, StringConstraints(strict=True, min_length=1)]


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def aliased(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Rename Python field names in ``data`` to their portable aliases."""
        renamed = {}
        for key, value in data.items():
            info = cls.model_fields.get(key)
            renamed[info.alias if info is not None and info.alias else key] = value
        return renamed


class CourseSchema(_Schema):
    """Course form data."""

    name: CourseName
    credits: int = Field(strict=True, ge=1, le=6)
    days_of_week: Optional[List[Weekday]] = Field(default=None, alias="daysOfWeek")
    start_time: Optional[StrictStr] = Field(default=None, alias="startTime")
    end_time: Optional[StrictStr] = Field(default=None, alias="endTime")
    grade: Optional[float] = Field(default=None, strict=True, ge=0.0, le=4.0)
    color: Optional[StrictStr] = None
    notes: Optional[EntityNotes] = None

    @field_validator("days_of_week")
    @classmethod
    def _unique_days(cls, days: Optional[List[Weekday]]) -> Optional[List[Weekday]]:
        if days is None:
            return None
        if len(days) > 7:
            raise ValueError("Cannot select more than 7 days")
        unique: List[Weekday] = []
        for day in days:
            if day not in unique:
                unique.append(day)
        return unique

    @field_validator("start_time", "end_time")
    @classmethod
    def _clock_time(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if not value:
            return None
        if not is_valid_time(value):
            label = "Start time" if info.field_name == "start_time" else "End time"
            raise ValueError(f"{label} must be in HH:MM format")
        return value

    @field_validator("end_time")
    @classmethod
    def _end_after_start(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        start = info.data.get("start_time")
        if value and start and time_to_minutes(value) <= time_to_minutes(start):
            raise ValueError("End time must be after start time")
        return value

    def to_course(self, course_id: str, color: Optional[str]) -> Course:
        return Course(
            id=course_id,
            name=self.name,
            credits=self.credits,
            days_of_week=self.days_of_week,
            start_time=self.start_time,
            end_time=self.end_time,
            grade=self.grade,
            color=color,
            notes=self.notes,
        )


class SemesterSchema(_Schema):
    """Semester form data."""

    name: SemesterName
    year: int = Field(strict=True, ge=MIN_YEAR, le=MAX_YEAR)
    season: SeasonLabel
    notes: Optional[EntityNotes] = None
    is_active: Optional[StrictBool] = Field(default=None, alias="isActive")

    def to_semester(self, semester_id: str, courses: Optional[List[Course]] = None) -> Semester:
        return Semester(
            id=semester_id,
            name=self.name,
            year=self.year,
            season=Season.from_label(self.season),
            courses=courses if courses is not None else [],
            notes=self.notes,
            is_active=self.is_active,
        )


class DegreeSchema(_Schema):
    """Degree goal.

    Older exports stored the credit total as ``totalCredits``; it is mapped
    onto ``totalCreditsRequired`` when the new name is absent.
    """

    name: DegreeName
    total_credits_required: int = Field(strict=True, ge=60, le=200, alias="totalCreditsRequired")

    @model_validator(mode="before")
    @classmethod
    def _legacy_total(cls, data: Any) -> Any:
        if isinstance(data, dict) and not {"totalCreditsRequired", "total_credits_required"} & data.keys():
            if "totalCredits" in data:
                data = {**data, "totalCreditsRequired": data["totalCredits"]}
        return data

    def to_degree(self) -> Degree:
        return Degree(name=self.name, total_credits_required=self.total_credits_required)


class NotesSchema(_Schema):
    """Notes content and the scope they are attached to."""

    content: PlanNotes = ""
    scope: NoteScope = NoteScope.GLOBAL
    semester_id: Optional[StrictStr] = Field(default=None, alias="semesterId")
    course_id: Optional[StrictStr] = Field(default=None, alias="courseId")

    @model_validator(mode="after")
    def _scope_ids(self) -> "NotesSchema":
        if self.scope is NoteScope.SEMESTER and not self.semester_id:
            raise ValueError("Semester ID is required for semester scope")
        if self.scope is NoteScope.COURSE and not (self.semester_id and self.course_id):
            raise ValueError("Both semester and course IDs are required for course scope")
        return self

    def to_selection(self) -> NoteSelection:
        return NoteSelection(scope=self.scope, semester_id=self.semester_id, course_id=self.course_id)


class ImportCourseSchema(CourseSchema):
    id: EntityId


class ImportSemesterSchema(SemesterSchema):
    id: EntityId
    courses: List[ImportCourseSchema] = Field(default_factory=list)

    def to_imported_semester(self) -> Semester:
        courses = [course.to_course(course.id, course.color) for course in self.courses]
        return self.to_semester(self.id, courses)


class ImportEnvelopeSchema(_Schema):
    """Portable export envelope."""

    semesters: List[ImportSemesterSchema] = Field(default_factory=list)
    notes: Optional[PlanNotes] = None
    degree: Optional[DegreeSchema] = None
    export_date: Optional[StrictStr] = Field(default=None, alias="exportDate")
    version: Optional[StrictStr] = None

    @model_validator(mode="after")
    def _plan_invariants(self) -> "ImportEnvelopeSchema":
        semester_ids = [semester.id for semester in self.semesters]
        if len(set(semester_ids)) != len(semester_ids):
            raise ValueError("Semester IDs must be unique")

        course_ids = [course.id for semester in self.semesters for course in semester.courses]
        if len(set(course_ids)) != len(course_ids):
            raise ValueError("Course IDs must be unique")

        if sum(1 for semester in self.semesters if semester.is_active) > 1:
            raise ValueError("At most one semester can be active")
        return self
