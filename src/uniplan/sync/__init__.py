"""Reconciliation of the local plan with a remote store."""

from uniplan.sync.autosave import AutoSaver, plan_state
from uniplan.sync.memory import InMemoryRemoteStore
from uniplan.sync.reconciler import SyncReconciler
from uniplan.sync.remote import COURSES, PROFILES, SEMESTERS, RemoteStore
from uniplan.sync.rest import RestRemoteStore
from uniplan.sync.rows import course_to_row, plan_from_rows, profile_to_row, semester_to_row

__all__ = [
    "COURSES",
    "PROFILES",
    "SEMESTERS",
    "AutoSaver",
    "InMemoryRemoteStore",
    "RemoteStore",
    "RestRemoteStore",
    "SyncReconciler",
    "course_to_row",
    "plan_from_rows",
    "plan_state",
    "profile_to_row",
    "semester_to_row",
]
