"""Shared fixtures for the uniplan test suite."""

import itertools
import json
import typing as t

import pytest

from uniplan import EngineConfig, InMemoryRemoteStore, Planner, SyncReconciler


class RecordingRemoteStore(InMemoryRemoteStore):
    """In-memory store that records calls and can be told to fail.

    Every call lands in ``calls`` as ``(method, table)``.
    """

    def __init__(self, delay: float = 0.0) -> None:
        super().__init__(delay=delay)
        self.calls: t.List[t.Tuple[str, str]] = []
        self._failures: t.Dict[t.Tuple[str, str], Exception] = {}

    def fail_on(self, method: str, table: str, error: Exception) -> None:
        """Make every later ``method`` call on ``table`` raise ``error``."""
        self._failures[(method, table)] = error

    async def _call(self, method: str, table: str) -> None:
        self.calls.append((method, table))
        await super()._call(method, table)
        error = self._failures.get((method, table))
        if error is not None:
            raise error


def sequential_ids(prefix: str = "id") -> t.Callable[[], str]:
    """Deterministic ID factory: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


def plan_json(semesters: list, notes: str = "", degree: t.Optional[dict] = None) -> str:
    """Build an import payload."""
    return json.dumps({"semesters": semesters, "notes": notes, "degree": degree, "version": "1.0"})


@pytest.fixture
def planner() -> Planner:
    return Planner(id_factory=sequential_ids())


@pytest.fixture
def semester_id(planner: Planner) -> str:
    """A semester with no courses in the planner fixture."""
    result = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"})
    assert result.success
    return result.value


@pytest.fixture
def remote() -> RecordingRemoteStore:
    return RecordingRemoteStore()


@pytest.fixture
def synced_planner(remote: RecordingRemoteStore) -> Planner:
    reconciler = SyncReconciler(remote, lambda: "user-1")
    return Planner(config=EngineConfig(sync_timeout=1.0), sync=reconciler, id_factory=sequential_ids())
