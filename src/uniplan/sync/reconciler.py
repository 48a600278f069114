"""Pull and push of the local plan against a remote store."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, TypeVar

from uniplan.exceptions import SyncError, SyncInProgressError
from uniplan.logging import get_logger
from uniplan.models import SyncReport
from uniplan.sync.remote import COURSES, SEMESTERS, RemoteStore
from uniplan.sync.rows import course_to_row, plan_from_rows, profile_to_row, semester_to_row

if TYPE_CHECKING:
    from uniplan.engine.planner import Planner

logger = get_logger(__name__)

T = TypeVar("T")


class SyncReconciler:
    """Keeps a planner's plan reconciled with a remote store.

    Pull replaces the local plan with the remote one. Push makes the remote
    rows equal to the local plan: rows missing locally are deleted, every
    local row is upserted. Only one pull or push runs at a time.

    A push is not transactional. If a stage fails, earlier stages stay
    applied and the error names the failed stage; pushing again converges.

    Example:
        >>> reconciler = SyncReconciler(InMemoryRemoteStore(), lambda: "user-1")
        >>> planner = Planner(sync=reconciler)
        >>> report = await planner.sync_to_remote()
        >>> report.upserted_semesters
        0
    """

    def __init__(
        self,
        remote: RemoteStore,
        user_id_provider: Callable[[], Optional[str]],
        timeout: Optional[float] = None,
    ):
        """Initialize the reconciler.

        Args:
            remote: Store to pull from and push to
            user_id_provider: Returns the signed-in user's ID, or None
            timeout: Seconds a pull or push may take before it is aborted
                (default: the planner's ``config.sync_timeout``)
        """
        self.remote = remote
        self.user_id_provider = user_id_provider
        self.timeout = timeout
        self._syncing = False

    @property
    def is_syncing(self) -> bool:
        return self._syncing

    def _require_user(self, operation: str) -> str:
        user_id = self.user_id_provider()
        if not user_id:
            raise SyncError(operation, "no user is signed in", retryable=False)
        return user_id

    async def _run(self, operation: str, planner: "Planner", job: Callable[[], Awaitable[T]]) -> T:
        if self._syncing:
            raise SyncInProgressError(operation)

        timeout = self.timeout if self.timeout is not None else planner.config.sync_timeout
        self._syncing = True
        try:
            return await asyncio.wait_for(job(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error("Sync timed out", operation=operation, timeout=timeout)
            raise SyncError(operation, f"timed out after {timeout} seconds") from e
        finally:
            self._syncing = False

    async def _stage(self, operation: str, stage: str, step: Awaitable[T]) -> T:
        try:
            return await step
        except Exception as e:
            logger.error("Sync stage failed", operation=operation, stage=stage, error=str(e))
            raise SyncError(operation, str(e) or type(e).__name__, stage=stage) from e

    async def pull(self, planner: "Planner") -> None:
        """Replace the planner's plan with the user's remote plan.

        Remote rows are validated before anything changes locally. The
        planner's history is cleared and the active semester becomes the
        current one.

        Raises:
            SyncInProgressError: If a pull or push is already running
            SyncError: If there is no user, a request fails, rows are invalid
                or the timeout expires
        """
        user_id = self._require_user("pull")
        log = logger.with_items(operation="pull", user_id=user_id)

        async def job() -> None:
            profile = await self._stage("pull", "fetch profile", self.remote.fetch_profile(user_id))
            semester_rows = await self._stage("pull", "fetch semesters", self.remote.fetch_rows(SEMESTERS, user_id))
            course_rows = await self._stage("pull", "fetch courses", self.remote.fetch_rows(COURSES, user_id))

            semesters, notes, degree = plan_from_rows(profile, semester_rows, course_rows)
            planner.load_remote_plan(semesters, notes, degree)

            log.info(
                "Plan pulled",
                semesters=len(semesters),
                courses=sum(len(semester.courses) for semester in semesters),
            )

        await self._run("pull", planner, job)

    async def push(self, planner: "Planner") -> SyncReport:
        """Write the planner's plan to the remote store.

        Stages run in foreign-key order: delete stale courses, delete stale
        semesters, upsert the profile, upsert semesters, upsert courses.

        Returns:
            SyncReport describing the deletions and upserts

        Raises:
            SyncInProgressError: If a pull or push is already running
            SyncError: If there is no user, a stage fails or the timeout expires
        """
        user_id = self._require_user("push")
        log = logger.with_items(operation="push", user_id=user_id)
        snapshot = planner.plan.snapshot()

        semester_rows = [semester_to_row(semester, user_id) for semester in snapshot.semesters]
        course_rows = [
            course_to_row(course, semester.id, user_id)
            for semester in snapshot.semesters
            for course in semester.courses
        ]
        local_semester_ids = {row["id"] for row in semester_rows}
        local_course_ids = {row["id"] for row in course_rows}

        async def job() -> SyncReport:
            remote_course_ids = await self._stage("push", "fetch course ids", self.remote.fetch_ids(COURSES, user_id))
            remote_semester_ids = await self._stage(
                "push", "fetch semester ids", self.remote.fetch_ids(SEMESTERS, user_id)
            )

            report = SyncReport(
                deleted_course_ids=[row_id for row_id in remote_course_ids if row_id not in local_course_ids],
                deleted_semester_ids=[row_id for row_id in remote_semester_ids if row_id not in local_semester_ids],
            )

            if report.deleted_course_ids:
                await self._stage(
                    "push", "delete courses", self.remote.delete_rows(COURSES, user_id, report.deleted_course_ids)
                )
            if report.deleted_semester_ids:
                await self._stage(
                    "push", "delete semesters", self.remote.delete_rows(SEMESTERS, user_id, report.deleted_semester_ids)
                )

            profile = profile_to_row(user_id, snapshot.notes, snapshot.degree)
            await self._stage("push", "upsert profile", self.remote.upsert_profile(profile))

            if semester_rows:
                await self._stage("push", "upsert semesters", self.remote.upsert_rows(SEMESTERS, semester_rows))
                report.upserted_semesters = len(semester_rows)
            if course_rows:
                await self._stage("push", "upsert courses", self.remote.upsert_rows(COURSES, course_rows))
                report.upserted_courses = len(course_rows)

            log.info("Plan pushed", **report.as_dict())
            return report

        return await self._run("push", planner, job)
