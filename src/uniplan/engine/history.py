"""Linear undo/redo history over plan snapshots."""

from __future__ import annotations

import time
from typing import List, Optional

from uniplan.config import HISTORY_LIMIT
from uniplan.enums import ActionType
from uniplan.logging import get_logger
from uniplan.models import ActionHistoryItem, PlanSnapshot

logger = get_logger(__name__)


class ActionHistory:
    """Bounded, non-branching action history with a single cursor.

    The cursor points at the most recently applied entry, or is -1 when no
    entry is applied (empty history, or everything undone). Recording after
    an undo discards the entries past the cursor.

    Example:
        >>> history = ActionHistory(limit=50)
        >>> history.record(ActionType.ADD_SEMESTER, before, after)
        >>> history.undo() is before
        True
    """

    def __init__(self, limit: int = HISTORY_LIMIT):
        """Initialize an empty history.

        Args:
            limit: Maximum number of entries kept; the oldest are dropped
        """
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self.limit = limit
        self._entries: List[ActionHistoryItem] = []
        self._index = -1

    @property
    def entries(self) -> List[ActionHistoryItem]:
        return list(self._entries)

    @property
    def index(self) -> int:
        """Position of the most recently applied entry (-1 if none)."""
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index >= 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, action: ActionType, before: PlanSnapshot, after: PlanSnapshot) -> ActionHistoryItem:
        """Append a checkpoint after the cursor.

        Args:
            action: Mutation kind
            before: Plan state before the mutation
            after: Plan state after the mutation

        Returns:
            The recorded entry
        """
        item = ActionHistoryItem(type=action, before=before, after=after, timestamp=time.time())

        del self._entries[self._index + 1:]
        self._entries.append(item)
        if len(self._entries) > self.limit:
            dropped = len(self._entries) - self.limit
            del self._entries[:dropped]
            logger.debug("History trimmed", dropped=dropped)
        self._index = len(self._entries) - 1

        logger.debug("Checkpoint recorded", action=action.value, index=self._index)
        return item

    def undo(self) -> Optional[PlanSnapshot]:
        """Step the cursor back one entry.

        Returns:
            Snapshot to restore (the state before the undone entry), or None
            if there is nothing to undo
        """
        if not self.can_undo:
            return None

        item = self._entries[self._index]
        self._index -= 1
        logger.debug("Undo", action=item.type.value, index=self._index)
        return item.before

    def redo(self) -> Optional[PlanSnapshot]:
        """Step the cursor forward one entry.

        Returns:
            Snapshot to restore (the state after the redone entry), or None
            if there is nothing to redo
        """
        if not self.can_redo:
            return None

        self._index += 1
        item = self._entries[self._index]
        logger.debug("Redo", action=item.type.value, index=self._index)
        return item.after

    def clear(self) -> None:
        """Forget all entries."""
        self._entries.clear()
        self._index = -1
