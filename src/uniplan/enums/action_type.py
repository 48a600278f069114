"""Mutation kinds recorded in the action history."""

from enum import Enum


class ActionType(Enum):
    """Tag of an action history entry."""

    ADD_SEMESTER = "add_semester"
    REMOVE_SEMESTER = "remove_semester"
    UPDATE_SEMESTER = "update_semester"
    REORDER_SEMESTERS = "reorder_semesters"
    AUTO_LAYOUT_SEMESTERS = "auto_layout_semesters"
    SET_ACTIVE_SEMESTER = "set_active_semester"
    ADD_COURSE = "add_course"
    REMOVE_COURSE = "remove_course"
    UPDATE_COURSE = "update_course"
    REORDER_COURSES = "reorder_courses"
    SET_NOTES = "set_notes"
    SET_DEGREE = "set_degree"
    APPLY_TEMPLATE = "apply_template"
    IMPORT = "import"
