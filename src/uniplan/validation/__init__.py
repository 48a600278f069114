"""Schema validation for data entering the plan."""

from uniplan.validation.schemas import (
    CourseSchema,
    DegreeSchema,
    ImportEnvelopeSchema,
    NotesSchema,
    SemesterSchema,
)
from uniplan.validation.validator import (
    merge_update,
    validate,
    validate_course,
    validate_degree,
    validate_import,
    validate_notes,
    validate_semester,
)

__all__ = [
    "CourseSchema",
    "DegreeSchema",
    "ImportEnvelopeSchema",
    "NotesSchema",
    "SemesterSchema",
    "merge_update",
    "validate",
    "validate_course",
    "validate_degree",
    "validate_import",
    "validate_notes",
    "validate_semester",
]
