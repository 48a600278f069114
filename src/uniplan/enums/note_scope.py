"""Note scope enumeration."""

from enum import Enum


class NoteScope(Enum):
    """What the notes panel is currently attached to."""

    GLOBAL = "global"
    SEMESTER = "semester"
    COURSE = "course"
