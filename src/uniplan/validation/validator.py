"""Entry points that turn untrusted data into validated schemas.

Every function either returns a fully validated schema object or raises
:class:`uniplan.exceptions.ValidationError` naming the first offending field.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

import pydantic

from uniplan.exceptions import ValidationError
from uniplan.logging import get_logger
from uniplan.validation.schemas import (
    CourseSchema,
    DegreeSchema,
    ImportEnvelopeSchema,
    NotesSchema,
    SemesterSchema,
    _Schema,
)

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=_Schema)

_VALUE_ERROR_PREFIX = "Value error, "


def _field_path(loc: tuple, prefix: Optional[str]) -> Optional[str]:
    parts = [str(part) for part in loc]
    if prefix:
        parts.insert(0, prefix)
    return ".".join(parts) or None


def _to_validation_error(exc: pydantic.ValidationError, prefix: Optional[str]) -> ValidationError:
    """Convert the first pydantic error into a ValidationError.

    Args:
        exc: Pydantic validation error
        prefix: Path prepended to the error location (e.g. "degree")

    Returns:
        ValidationError with a dotted field path
    """
    error = exc.errors()[0]
    reason = error["msg"]
    if reason.startswith(_VALUE_ERROR_PREFIX):
        reason = reason[len(_VALUE_ERROR_PREFIX):]
    return ValidationError(reason, field=_field_path(error["loc"], prefix))


def validate(schema: Type[SchemaT], data: Any, prefix: Optional[str] = None) -> SchemaT:
    """Validate ``data`` against ``schema``.

    Args:
        schema: Schema class
        data: Untrusted input, usually a dict
        prefix: Optional path used in error messages

    Returns:
        Validated schema instance

    Raises:
        ValidationError: If the data violates the schema
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Expected an object, got {type(data).__name__}", field=prefix)

    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as e:
        error = _to_validation_error(e, prefix)
        logger.debug("Validation failed", schema=schema.__name__, error=str(error))
        raise error from e


def validate_course(data: Dict[str, Any]) -> CourseSchema:
    return validate(CourseSchema, data)


def validate_semester(data: Dict[str, Any]) -> SemesterSchema:
    return validate(SemesterSchema, data)


def validate_degree(data: Dict[str, Any]) -> DegreeSchema:
    return validate(DegreeSchema, data, prefix="degree")


def validate_notes(
    content: str = "",
    scope: Any = "global",
    semester_id: Optional[str] = None,
    course_id: Optional[str] = None,
) -> NotesSchema:
    """Validate notes content together with the scope they belong to."""
    data = {"content": content, "scope": scope, "semesterId": semester_id, "courseId": course_id}
    return validate(NotesSchema, data)


def validate_import(data: Any) -> ImportEnvelopeSchema:
    """Validate a decoded import payload.

    Args:
        data: Decoded JSON document

    Returns:
        Validated envelope

    Raises:
        ValidationError: If the root is not an object or any entity is invalid
    """
    return validate(ImportEnvelopeSchema, data)


def merge_update(schema: Type[SchemaT], current: Dict[str, Any], updates: Dict[str, Any]) -> SchemaT:
    """Apply a partial update on top of an entity's portable dict and revalidate.

    ``updates`` may use Python field names or portable aliases.

    Args:
        schema: Schema class of the entity
        current: Portable dict of the entity as stored
        updates: Fields to change

    Returns:
        Validated schema of the merged entity
    """
    if not isinstance(updates, dict):
        raise ValidationError(f"Expected an object, got {type(updates).__name__}")
    merged = {**current, **schema.aliased(updates)}
    return validate(schema, merged)
