"""Planning engine: state, history, templates and portable export."""

from uniplan.engine.history import ActionHistory
from uniplan.engine.planner import Planner
from uniplan.engine.serializer import ImportedPlan, export_plan, parse_plan
from uniplan.engine.templates import (
    calendar_year,
    default_base_year,
    template_from_semesters,
    validate_template,
)

__all__ = [
    "ActionHistory",
    "ImportedPlan",
    "Planner",
    "calendar_year",
    "default_base_year",
    "export_plan",
    "parse_plan",
    "template_from_semesters",
    "validate_template",
]
