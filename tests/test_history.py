"""Tests for the undo/redo history."""

import pytest

from uniplan import Planner
from uniplan.engine import ActionHistory
from uniplan.enums import ActionType, NoteScope
from uniplan.models import Plan

from conftest import sequential_ids


def snapshot_with_notes(notes: str):
    return Plan(notes=notes).snapshot()


def test_empty_history_cannot_move() -> None:
    history = ActionHistory()

    assert not history.can_undo
    assert not history.can_redo
    assert history.undo() is None
    assert history.redo() is None
    assert history.index == -1


def test_record_undo_redo_cursor() -> None:
    history = ActionHistory()
    first, second, third = (snapshot_with_notes(n) for n in ("a", "b", "c"))

    history.record(ActionType.SET_NOTES, first, second)
    history.record(ActionType.SET_NOTES, second, third)

    assert history.index == 1
    assert history.undo() is second
    assert history.undo() is first
    assert history.undo() is None
    assert history.redo() is second
    assert history.redo() is third
    assert history.redo() is None


def test_recording_after_undo_discards_redo_branch() -> None:
    history = ActionHistory()
    a, b, c, d = (snapshot_with_notes(n) for n in "abcd")

    history.record(ActionType.SET_NOTES, a, b)
    history.record(ActionType.SET_NOTES, b, c)
    history.undo()
    history.record(ActionType.SET_NOTES, b, d)

    assert len(history) == 2
    assert not history.can_redo
    assert history.entries[-1].after is d


def test_history_keeps_most_recent_entries() -> None:
    history = ActionHistory(limit=3)
    snapshots = [snapshot_with_notes(str(i)) for i in range(6)]

    for before, after in zip(snapshots, snapshots[1:]):
        history.record(ActionType.SET_NOTES, before, after)

    assert len(history) == 3
    assert history.index == 2
    assert [entry.before.notes for entry in history.entries] == ["2", "3", "4"]


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ActionHistory(limit=0)


def test_history_cap_after_sixty_mutations() -> None:
    planner = Planner()

    for i in range(60):
        assert planner.set_notes(f"note {i}").success

    assert len(planner.history) == 50

    undone = 0
    while planner.undo():
        undone += 1

    assert undone == 50
    assert planner.plan.notes == "note 9"


def test_undo_redo_round_trip() -> None:
    planner = Planner(id_factory=sequential_ids())
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    planner.add_course(semester_id, {"name": "Calculus", "credits": 4, "grade": 3.3})
    planner.set_degree({"name": "Mathematics", "totalCreditsRequired": 120})
    final = planner.plan.snapshot()

    assert planner.undo() and planner.undo() and planner.undo()
    assert planner.plan.semesters == []
    assert planner.plan.degree is None
    assert not planner.undo()

    assert planner.redo() and planner.redo() and planner.redo()
    assert not planner.redo()
    assert planner.plan.snapshot() == final


def test_undo_restores_clones() -> None:
    planner = Planner(id_factory=sequential_ids())
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    planner.add_course(semester_id, {"name": "Calculus", "credits": 4})

    planner.undo()
    planner.plan.semesters[0].name = "Mutated"
    planner.redo()

    assert planner.plan.semesters[0].name == "Fall 2024"
    assert planner.history.entries[0].after.semesters[0].name == "Fall 2024"


def test_undo_clears_note_scope_of_removed_semester() -> None:
    planner = Planner(id_factory=sequential_ids())
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    assert planner.set_note_scope("semester", semester_id).success

    assert planner.undo()

    assert planner.plan.semesters == []
    assert planner.plan.note_scope.scope is NoteScope.GLOBAL
    assert planner.plan.note_scope.semester_id is None


def test_undo_clears_note_scope_of_removed_course() -> None:
    planner = Planner(id_factory=sequential_ids())
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    course_id = planner.add_course(semester_id, {"name": "Calculus", "credits": 4}).value
    assert planner.set_note_scope("course", semester_id, course_id).success

    assert planner.undo()

    assert planner.plan.note_scope.scope is NoteScope.GLOBAL


def test_undo_keeps_note_scope_that_still_resolves() -> None:
    planner = Planner(id_factory=sequential_ids())
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    planner.set_notes("Plan ahead")
    planner.set_note_scope("semester", semester_id)

    assert planner.undo()

    assert planner.plan.note_scope.semester_id == semester_id
