"""The planning engine: one authoritative plan per session."""

from __future__ import annotations

import functools
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional

from uniplan.calculators import (
    cumulative_gpa,
    current_schedule,
    find_schedule_conflicts,
    plan_progress,
    semester_gpa,
    weekly_hours,
)
from uniplan.config import EngineConfig
from uniplan.engine.history import ActionHistory
from uniplan.engine.serializer import export_plan, parse_plan
from uniplan.engine.templates import default_base_year, validate_template
from uniplan.enums import ActionType
from uniplan.exceptions import NotFoundError, ParseError, SyncError, ValidationError
from uniplan.logging import get_logger
from uniplan.models import (
    Course,
    Degree,
    DegreeTemplate,
    NoteSelection,
    OperationResult,
    Plan,
    ProgressStats,
    ScheduleConflict,
    Semester,
    SyncReport,
    TimeSlot,
)
from uniplan.sync.autosave import AutoSaver, plan_state
from uniplan.utils.ids import generate_id
from uniplan.validation import (
    CourseSchema,
    SemesterSchema,
    merge_update,
    validate_course,
    validate_degree,
    validate_notes,
    validate_semester,
)

if TYPE_CHECKING:
    from uniplan.sync.reconciler import SyncReconciler

logger = get_logger(__name__)


def operation(success_message: str):
    """Report a mutation's outcome as an OperationResult.

    Validation, parse and not-found errors become ``success=False`` results;
    the wrapped method's return value becomes ``result.value``.
    """

    def decorator(method: Callable[..., Any]) -> Callable[..., OperationResult]:
        @functools.wraps(method)
        def wrapper(self: "Planner", *args: Any, **kwargs: Any) -> OperationResult:
            try:
                value = method(self, *args, **kwargs)
            except (ValidationError, ParseError, NotFoundError) as e:
                logger.warning("Operation rejected", operation=method.__name__, error=str(e))
                return OperationResult(success=False, message=str(e), field=getattr(e, "field", None))
            return OperationResult(success=True, message=success_message, value=value)

        return wrapper

    return decorator


def _move(items: List[Any], from_index: int, to_index: int) -> None:
    for name, index in (("from_index", from_index), ("to_index", to_index)):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError("Index must be an integer", field=name)
        if not 0 <= index < len(items):
            raise ValidationError(f"Index {index} is out of range", field=name)
    items.insert(to_index, items.pop(from_index))


class Planner:
    """Planning state engine.

    Owns the plan, its undo history and the mutation primitives. Every
    mutation validates its input before touching state, runs inside a single
    history checkpoint, and reports its outcome as an OperationResult.
    Calculators are evaluated on demand against the current plan.

    Create one instance per session and drop it on logout.

    Example:
        >>> planner = Planner()
        >>> result = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"})
        >>> planner.add_course(result.value, {"name": "Calculus I", "credits": 4, "grade": 3.7})
        >>> planner.cumulative_gpa()
        3.7
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        sync: Optional["SyncReconciler"] = None,
        id_factory: Callable[[], str] = generate_id,
    ):
        """Initialize an empty planner.

        Args:
            config: Engine tunables (history limit, palette, sync timeout)
            sync: Reconciler used by sync_from_remote/sync_to_remote
            id_factory: Generator of new semester and course IDs
        """
        self.config = config or EngineConfig()
        self.plan = Plan()
        self.history = ActionHistory(limit=self.config.history_limit)
        self.sync = sync
        self._new_id = id_factory
        self.auto_saver: Optional[AutoSaver] = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _checkpoint(self, action: ActionType) -> Iterator[None]:
        """Record one history entry around a mutation.

        If the block raises, the plan is restored to its state before the
        block and nothing is recorded.
        """
        before = self.plan.snapshot()
        try:
            yield
        except Exception:
            self.plan.restore(before)
            raise
        self.history.record(action, before, self.plan.snapshot())
        self._changed()

    def _changed(self) -> None:
        if self.auto_saver is not None:
            self.auto_saver.schedule()

    def _get_semester(self, semester_id: str) -> Semester:
        semester = self.plan.find_semester(semester_id)
        if semester is None:
            raise NotFoundError("semester", semester_id)
        return semester

    def _get_course(self, semester: Semester, course_id: str) -> Course:
        course = semester.find_course(course_id)
        if course is None:
            raise NotFoundError("course", course_id)
        return course

    def _set_exclusive_active(self, semester_id: str) -> None:
        for semester in self.plan.semesters:
            semester.is_active = semester.id == semester_id

    def _next_color(self, semester: Semester) -> str:
        palette = self.config.palette
        return palette[len(semester.courses) % len(palette)]

    def _forget_note_scope(self, semester_id: str, course_id: Optional[str] = None) -> None:
        selection = self.plan.note_scope
        if selection.semester_id == semester_id and (course_id is None or selection.course_id == course_id):
            self.plan.note_scope = NoteSelection()

    def _drop_stale_note_scope(self) -> None:
        selection = self.plan.note_scope
        if selection.semester_id is None:
            return
        semester = self.plan.find_semester(selection.semester_id)
        if semester is None or (selection.course_id and semester.find_course(selection.course_id) is None):
            self.plan.note_scope = NoteSelection()

    # ------------------------------------------------------------------
    # Semesters
    # ------------------------------------------------------------------

    @operation("Semester added")
    def add_semester(self, data: Dict[str, Any]) -> str:
        """Add a semester and make it the current one.

        Args:
            data: Semester fields (name, year, season, notes, isActive)

        Returns:
            ID of the new semester (as ``result.value``)
        """
        semester = validate_semester(data).to_semester(self._new_id())

        with self._checkpoint(ActionType.ADD_SEMESTER):
            if semester.is_active:
                self._set_exclusive_active(semester.id)
            self.plan.semesters.append(semester)
            self.plan.current_semester_id = semester.id

        logger.debug("Semester added", semester_id=semester.id, name=semester.name)
        return semester.id

    @operation("Semester removed")
    def remove_semester(self, semester_id: str) -> None:
        semester = self._get_semester(semester_id)

        with self._checkpoint(ActionType.REMOVE_SEMESTER):
            self.plan.semesters.remove(semester)
            if self.plan.current_semester_id == semester_id:
                self.plan.current_semester_id = None
            self._forget_note_scope(semester_id)

        logger.debug("Semester removed", semester_id=semester_id)

    @operation("Semester updated")
    def update_semester(self, semester_id: str, updates: Dict[str, Any]) -> None:
        """Merge ``updates`` into a semester and revalidate the result.

        Setting ``is_active`` to True clears the flag on every other semester
        in the same update.
        """
        semester = self._get_semester(semester_id)
        schema = merge_update(SemesterSchema, semester.to_dict(), updates)
        updated = schema.to_semester(semester.id, semester.courses)

        with self._checkpoint(ActionType.UPDATE_SEMESTER):
            index = self.plan.semesters.index(semester)
            self.plan.semesters[index] = updated
            if updated.is_active:
                self._set_exclusive_active(updated.id)

        logger.debug("Semester updated", semester_id=semester_id)

    @operation("Semesters reordered")
    def reorder_semesters(self, from_index: int, to_index: int) -> None:
        if from_index == to_index:
            return

        semesters = list(self.plan.semesters)
        _move(semesters, from_index, to_index)

        with self._checkpoint(ActionType.REORDER_SEMESTERS):
            self.plan.semesters = semesters

    @operation("Semesters arranged")
    def auto_layout_semesters(self) -> None:
        """Sort semesters chronologically: by year, then Autumn, Spring, Summer."""
        ordered = sorted(self.plan.semesters, key=lambda semester: (semester.year, semester.season.order))
        if [s.id for s in ordered] == self.plan.semester_ids:
            return

        with self._checkpoint(ActionType.AUTO_LAYOUT_SEMESTERS):
            self.plan.semesters = ordered

    @operation("Active semester set")
    def set_active_semester(self, semester_id: str) -> None:
        """Mark one semester active and every other inactive, atomically."""
        self._get_semester(semester_id)

        with self._checkpoint(ActionType.SET_ACTIVE_SEMESTER):
            self._set_exclusive_active(semester_id)
            self.plan.current_semester_id = semester_id

    @operation("Current semester set")
    def set_current_semester(self, semester_id: Optional[str]) -> None:
        """Focus a semester (or none). Not recorded in history."""
        if semester_id is not None:
            self._get_semester(semester_id)
        self.plan.current_semester_id = semester_id

    def active_semester(self) -> Optional[Semester]:
        """The current semester, else the one flagged active."""
        if self.plan.current_semester_id is not None:
            current = self.plan.find_semester(self.plan.current_semester_id)
            if current is not None:
                return current
        for semester in self.plan.semesters:
            if semester.is_active:
                return semester
        return None

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    @operation("Course added")
    def add_course(self, semester_id: str, data: Dict[str, Any]) -> str:
        """Add a course at the end of a semester.

        The course color is taken from the palette by the semester's current
        course count; it is never reassigned later.

        Returns:
            ID of the new course (as ``result.value``)
        """
        semester = self._get_semester(semester_id)
        schema = validate_course(data)
        course = schema.to_course(self._new_id(), self._next_color(semester))

        with self._checkpoint(ActionType.ADD_COURSE):
            semester.courses.append(course)

        logger.debug("Course added", semester_id=semester_id, course_id=course.id, color=course.color)
        return course.id

    @operation("Course removed")
    def remove_course(self, semester_id: str, course_id: str) -> None:
        semester = self._get_semester(semester_id)
        course = self._get_course(semester, course_id)

        with self._checkpoint(ActionType.REMOVE_COURSE):
            semester.courses.remove(course)
            self._forget_note_scope(semester_id, course_id)

        logger.debug("Course removed", semester_id=semester_id, course_id=course_id)

    @operation("Course updated")
    def update_course(self, semester_id: str, course_id: str, updates: Dict[str, Any]) -> None:
        """Merge ``updates`` into a course and revalidate the result."""
        semester = self._get_semester(semester_id)
        course = self._get_course(semester, course_id)
        schema = merge_update(CourseSchema, course.to_dict(), updates)
        updated = schema.to_course(course.id, schema.color)

        with self._checkpoint(ActionType.UPDATE_COURSE):
            semester.courses[semester.courses.index(course)] = updated

        logger.debug("Course updated", semester_id=semester_id, course_id=course_id)

    @operation("Courses reordered")
    def reorder_courses(self, semester_id: str, from_index: int, to_index: int) -> None:
        semester = self._get_semester(semester_id)
        if from_index == to_index:
            return

        courses = list(semester.courses)
        _move(courses, from_index, to_index)

        with self._checkpoint(ActionType.REORDER_COURSES):
            semester.courses = courses

    # ------------------------------------------------------------------
    # Degree and notes
    # ------------------------------------------------------------------

    @operation("Degree saved")
    def set_degree(self, data: Optional[Dict[str, Any]]) -> None:
        """Set the degree goal, or clear it with None.

        Legacy ``totalCredits`` is accepted in place of ``totalCreditsRequired``.
        """
        degree: Optional[Degree] = validate_degree(data).to_degree() if data is not None else None

        with self._checkpoint(ActionType.SET_DEGREE):
            self.plan.degree = degree

    @operation("Notes saved")
    def set_notes(self, notes: str) -> None:
        validate_notes(content=notes)
        if notes == self.plan.notes:
            return

        with self._checkpoint(ActionType.SET_NOTES):
            self.plan.notes = notes

    @operation("Note scope selected")
    def set_note_scope(
        self,
        scope: Any,
        semester_id: Optional[str] = None,
        course_id: Optional[str] = None,
    ) -> None:
        """Attach the notes panel to the plan, a semester or a course.

        This is view state and is not recorded in history.
        """
        selection = validate_notes(scope=scope, semester_id=semester_id, course_id=course_id).to_selection()
        if selection.semester_id is not None:
            semester = self._get_semester(selection.semester_id)
            if selection.course_id is not None:
                self._get_course(semester, selection.course_id)
        self.plan.note_scope = selection

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    @operation("Template applied")
    def apply_template(
        self,
        template: DegreeTemplate,
        override: bool = False,
        base_year: Optional[int] = None,
    ) -> Dict[str, int]:
        """Add a degree template's semesters and courses to the plan.

        With ``override`` the plan's semesters are replaced. Otherwise
        template semesters are merged into existing semesters of the same
        year and season, skipping courses whose name (case-insensitive)
        already exists there.

        Args:
            template: Template to apply
            override: Replace existing semesters instead of merging
            base_year: Calendar year of relative year 1 (default: this year)

        Returns:
            Counts of created semesters and added courses (as ``result.value``)
        """
        if base_year is None:
            base_year = default_base_year()
        validated = validate_template(template, base_year)

        created = added = 0
        with self._checkpoint(ActionType.APPLY_TEMPLATE):
            if override:
                self.plan.semesters = []
                self.plan.current_semester_id = None
                self.plan.note_scope = NoteSelection()

            for semester_schema, course_schemas in validated:
                target = None
                if not override:
                    target = next(
                        (
                            s for s in self.plan.semesters
                            if s.year == semester_schema.year and s.season.label == semester_schema.season
                        ),
                        None,
                    )
                if target is None:
                    target = semester_schema.to_semester(self._new_id())
                    self.plan.semesters.append(target)
                    created += 1

                existing = {course.name.lower() for course in target.courses}
                for course_schema in course_schemas:
                    if course_schema.name.lower() in existing:
                        continue
                    target.courses.append(course_schema.to_course(self._new_id(), self._next_color(target)))
                    existing.add(course_schema.name.lower())
                    added += 1

            if override and self.plan.semesters:
                self.plan.current_semester_id = self.plan.semesters[0].id

        logger.info("Template applied", template=template.name, semesters_created=created, courses_added=added)
        return {"semesters_created": created, "courses_added": added}

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> bool:
        """Revert the most recent checkpoint.

        Returns:
            True if something was undone
        """
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.plan.restore(snapshot)
        self._drop_stale_note_scope()
        self._changed()
        return True

    def redo(self) -> bool:
        """Reapply the next undone checkpoint.

        Returns:
            True if something was redone
        """
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        self.plan.restore(snapshot)
        self._drop_stale_note_scope()
        self._changed()
        return True

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def reset(self) -> None:
        """Drop the whole plan and its history."""
        self.plan = Plan()
        self.history.clear()
        logger.info("Plan reset")

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------

    def export_data(self) -> str:
        """Serialize the plan into the portable JSON envelope."""
        return export_plan(self.plan)

    @operation("Data imported successfully")
    def import_data(self, raw: str) -> None:
        """Replace the plan with an exported one.

        The payload is validated completely before anything changes. The
        import is a single checkpoint, so one undo restores the previous plan.
        """
        imported = parse_plan(raw)

        with self._checkpoint(ActionType.IMPORT):
            self.plan.semesters = imported.semesters
            self.plan.notes = imported.notes
            self.plan.degree = imported.degree
            self.plan.current_semester_id = imported.semesters[0].id if imported.semesters else None
            self.plan.note_scope = NoteSelection()

        logger.info(
            "Plan imported",
            semesters=len(imported.semesters),
            courses=len(self.plan.course_ids),
            version=imported.version,
        )

    # ------------------------------------------------------------------
    # Remote sync
    # ------------------------------------------------------------------

    def load_remote_plan(self, semesters: List[Semester], notes: str, degree: Optional[Degree]) -> None:
        """Replace the plan with a pulled remote snapshot.

        This is a full replace; history is cleared because its snapshots
        describe a plan that no longer exists locally.
        """
        self.plan = Plan(semesters=semesters, notes=notes, degree=degree)
        self.plan.current_semester_id = next((s.id for s in semesters if s.is_active), None)
        self.history.clear()
        if self.auto_saver is not None:
            self.auto_saver.cancel()
            self.auto_saver.mark_saved()

    @property
    def is_syncing(self) -> bool:
        return self.sync is not None and self.sync.is_syncing

    async def sync_from_remote(self) -> None:
        """Pull the remote plan and replace the local one.

        Raises:
            SyncError: If no reconciler is configured or the pull fails
        """
        if self.sync is None:
            raise SyncError("pull", "no remote store configured", retryable=False)
        await self.sync.pull(self)

    async def sync_to_remote(self) -> SyncReport:
        """Push the local plan to the remote store.

        Raises:
            SyncError: If no reconciler is configured or the push fails
        """
        if self.sync is None:
            raise SyncError("push", "no remote store configured", retryable=False)
        state = plan_state(self.plan)
        report = await self.sync.push(self)
        if self.auto_saver is not None:
            self.auto_saver.mark_saved(state)
        return report

    def enable_auto_save(self, delay: Optional[float] = None) -> AutoSaver:
        """Push the plan automatically after every burst of changes.

        Each recorded mutation, undo and redo restarts a countdown of
        ``delay`` seconds (default: ``config.auto_save_delay``). Pulls and
        manual pushes count as saved state.

        Returns:
            The AutoSaver now attached to this planner

        Raises:
            SyncError: If no reconciler is configured
        """
        if self.sync is None:
            raise SyncError("push", "no remote store configured", retryable=False)
        if self.auto_saver is not None:
            self.auto_saver.cancel()
        self.auto_saver = AutoSaver(self, delay)
        return self.auto_saver

    # ------------------------------------------------------------------
    # Derived facts
    # ------------------------------------------------------------------

    def semester_gpa(self, semester_id: str) -> float:
        return semester_gpa(self.plan.semesters, semester_id)

    def cumulative_gpa(self) -> float:
        return cumulative_gpa(self.plan.semesters)

    def schedule_conflicts(self, semester_id: Optional[str] = None) -> List[ScheduleConflict]:
        return find_schedule_conflicts(self.plan.semesters, semester_id)

    def current_schedule(self, semester_id: Optional[str] = None) -> List[TimeSlot]:
        return current_schedule(self.plan.semesters, semester_id)

    def weekly_hours(self, semester_id: Optional[str] = None) -> float:
        return weekly_hours(self.plan.semesters, semester_id)

    def progress(self) -> ProgressStats:
        return plan_progress(self.plan.semesters, self.plan.degree)
