"""Action history entry model."""

from dataclasses import dataclass

from uniplan.enums import ActionType
from uniplan.models.plan import PlanSnapshot


@dataclass(frozen=True)
class ActionHistoryItem:
    """One checkpoint: the plan before and after a single logical mutation.

    Attributes:
        type: Kind of mutation
        before: Plan state before the mutation
        after: Plan state after the mutation
        timestamp: Unix time the entry was recorded
    """

    type: ActionType
    before: PlanSnapshot
    after: PlanSnapshot
    timestamp: float
