"""Debounced background push of a planner's plan."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Optional, Set

from uniplan.exceptions import SyncError
from uniplan.logging import get_logger
from uniplan.models import Plan, SyncReport

if TYPE_CHECKING:
    from uniplan.engine.planner import Planner

logger = get_logger(__name__)


def plan_state(plan: Plan) -> str:
    """Serialize the synced part of a plan (semesters, notes, degree).

    Two plans with the same state push the same rows.
    """
    return json.dumps(
        {
            "semesters": [semester.to_dict() for semester in plan.semesters],
            "notes": plan.notes,
            "degree": plan.degree.to_dict() if plan.degree else None,
        },
        sort_keys=True,
    )



class AutoSaver:
    """Pushes a planner's plan some time after its last change.

    Every ``schedule()`` call restarts the countdown, so a burst of edits
    ends in one push. When the countdown ends, the push is skipped if the
    plan equals the last pushed or pulled state. If another sync is running
    the countdown starts over.

    A failed auto-save is logged and kept in ``last_error``; the next change
    schedules a new attempt.

    Example:
        >>> planner = Planner(sync=SyncReconciler(store, lambda: "user-1"))
        >>> saver = planner.enable_auto_save(delay=5)
        >>> planner.set_notes("Thesis in year 3")  # pushed about 5 seconds later
        >>> await saver.close()
    """

    def __init__(self, planner: "Planner", delay: Optional[float] = None):
        """Initialize the saver.

        Args:
            planner: Planner whose plan is pushed
            delay: Seconds of quiet before a push (default: the planner's
                ``config.auto_save_delay``)
        """
        self.planner = planner
        self.delay = delay if delay is not None else planner.config.auto_save_delay
        self.last_error: Optional[SyncError] = None
        self._last_saved: Optional[str] = None
        self._countdown: Optional[asyncio.Task] = None
        # Pushes started by a finished countdown; a new change never cancels them
        self._running: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._countdown is not None

    @property
    def is_dirty(self) -> bool:
        """True if the plan differs from the last pushed or pulled state."""
        return plan_state(self.planner.plan) != self._last_saved

    def mark_saved(self, state: Optional[str] = None) -> None:
        """Record ``state`` (default: the current plan) as equal to the remote one."""
        self._last_saved = state if state is not None else plan_state(self.planner.plan)

    def schedule(self) -> None:
        """Restart the countdown to the next push.

        Outside a running event loop nothing is scheduled; ``flush()`` still
        pushes pending changes.
        """
        if self._closed:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, auto-save deferred")
            return

        self.cancel()
        self._countdown = loop.create_task(self._save_later())
        self._running.add(self._countdown)
        self._countdown.add_done_callback(self._running.discard)

    def cancel(self) -> None:
        """Drop the pending countdown, if any."""
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    async def _save_later(self) -> None:
        await asyncio.sleep(self.delay)
        self._countdown = None
        if self.planner.is_syncing:
            logger.debug("Auto-save postponed", reason="sync in progress")
            self.schedule()
            return
        await self.save()

    async def save(self) -> Optional[SyncReport]:
        """Push now unless the plan is unchanged or a sync is running.

        Returns:
            SyncReport of the push, or None if it was skipped or failed
        """
        state = plan_state(self.planner.plan)
        if state == self._last_saved:
            logger.debug("Auto-save skipped", reason="unchanged")
            return None
        if self.planner.is_syncing:
            logger.debug("Auto-save skipped", reason="sync in progress")
            return None

        try:
            report = await self.planner.sync_to_remote()
        except SyncError as e:
            self.last_error = e
            logger.error("Auto-save failed", error=str(e), stage=e.stage, retryable=e.retryable)
            return None

        self._last_saved = state
        self.last_error = None
        logger.info("Plan auto-saved", **report.as_dict())
        return report

    async def flush(self) -> Optional[SyncReport]:
        """Cancel the countdown and push pending changes right away.

        Waits for a push already started by a countdown before deciding.
        """
        self.cancel()
        if self._running:
            await asyncio.gather(*self._running, return_exceptions=True)
        return await self.save()

    async def close(self) -> Optional[SyncReport]:
        """Flush pending changes and stop scheduling new pushes."""
        self._closed = True
        return await self.flush()
