"""Enumerations for UniPlan."""

from uniplan.enums.action_type import ActionType
from uniplan.enums.note_scope import NoteScope
from uniplan.enums.season import Season
from uniplan.enums.weekday import Weekday

__all__ = ["ActionType", "NoteScope", "Season", "Weekday"]
