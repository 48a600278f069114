"""Portable JSON export and import of a plan."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from uniplan.config import EXPORT_VERSION
from uniplan.exceptions import ParseError
from uniplan.models import Degree, Plan, Semester
from uniplan.validation import validate_import


@dataclass
class ImportedPlan:
    """Validated content of an import payload, ready to replace the plan."""

    semesters: List[Semester]
    notes: str
    degree: Optional[Degree]
    version: Optional[str] = None


def export_plan(plan: Plan, export_date: Optional[datetime] = None) -> str:
    """Serialize a plan into the versioned export envelope.

    Args:
        plan: Plan to export
        export_date: Timestamp written to ``exportDate`` (default: now, UTC)

    Returns:
        JSON text with two-space indentation

    Example output:
        {
          "semesters": [{"id": "...", "name": "Fall 2024", "year": 2024, "season": "Autumn", "courses": [...]}],
          "notes": "",
          "degree": {"name": "Computer Science", "totalCreditsRequired": 120},
          "exportDate": "2024-09-01T12:00:00+00:00",
          "version": "1.0"
        }
    """
    if export_date is None:
        export_date = datetime.now(timezone.utc)

    envelope = {
        "semesters": [semester.to_dict() for semester in plan.semesters],
        "notes": plan.notes,
        "degree": plan.degree.to_dict() if plan.degree else None,
        "exportDate": export_date.isoformat(),
        "version": EXPORT_VERSION,
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False)


def parse_plan(raw: str) -> ImportedPlan:
    """Parse and validate an export envelope.

    Missing ``semesters`` defaults to an empty list, missing ``notes`` to an
    empty string and a missing or null ``degree`` to no degree.

    Args:
        raw: JSON text

    Returns:
        ImportedPlan

    Raises:
        ParseError: If the text is not valid JSON
        ValidationError: If the root is not an object or any entity is invalid
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise ParseError("nesting is too deep") from e

    envelope = validate_import(data)

    return ImportedPlan(
        semesters=[semester.to_imported_semester() for semester in envelope.semesters],
        notes=envelope.notes or "",
        degree=envelope.degree.to_degree() if envelope.degree else None,
        version=envelope.version,
    )
