"""Plan aggregate and snapshot models."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from uniplan.enums import NoteScope
from uniplan.models.course import Course
from uniplan.models.degree import Degree
from uniplan.models.semester import Semester


@dataclass
class NoteSelection:
    """What the notes panel is attached to.

    Attributes:
        scope: Global, semester or course notes
        semester_id: Semester of a semester- or course-scoped selection
        course_id: Course of a course-scoped selection
    """

    scope: NoteScope = NoteScope.GLOBAL
    semester_id: Optional[str] = None
    course_id: Optional[str] = None


@dataclass(frozen=True)
class PlanSnapshot:
    """Deep copy of the undoable part of a plan.

    Snapshots never share objects with the live plan: they are cloned when
    taken and cloned again when restored.
    """

    semesters: Tuple[Semester, ...]
    degree: Optional[Degree]
    notes: str
    current_semester_id: Optional[str]


@dataclass
class Plan:
    """The aggregate root: everything one student has planned.

    Attributes:
        semesters: Semesters in display order
        degree: Degree goal, if set
        notes: Global notes
        note_scope: Current notes panel selection
        current_semester_id: Semester the UI is focused on
    """

    semesters: List[Semester] = field(default_factory=list)
    degree: Optional[Degree] = None
    notes: str = ""
    note_scope: NoteSelection = field(default_factory=NoteSelection)
    current_semester_id: Optional[str] = None

    def find_semester(self, semester_id: str) -> Optional[Semester]:
        """Get a semester by ID.

        Args:
            semester_id: Semester identifier

        Returns:
            Semester or None if not found
        """
        for semester in self.semesters:
            if semester.id == semester_id:
                return semester
        return None

    def iter_courses(self) -> Iterator[Course]:
        """Iterate over the courses of all semesters in display order."""
        for semester in self.semesters:
            yield from semester.courses

    @property
    def semester_ids(self) -> List[str]:
        return [semester.id for semester in self.semesters]

    @property
    def course_ids(self) -> List[str]:
        return [course.id for course in self.iter_courses()]

    def snapshot(self) -> PlanSnapshot:
        """Take a deep copy of semesters, degree, notes and current semester."""
        return PlanSnapshot(
            semesters=tuple(copy.deepcopy(self.semesters)),
            degree=copy.deepcopy(self.degree),
            notes=self.notes,
            current_semester_id=self.current_semester_id,
        )

    def restore(self, snapshot: PlanSnapshot) -> None:
        """Replace the undoable state wholesale with a copy of a snapshot."""
        self.semesters = list(copy.deepcopy(snapshot.semesters))
        self.degree = copy.deepcopy(snapshot.degree)
        self.notes = snapshot.notes
        self.current_semester_id = snapshot.current_semester_id
