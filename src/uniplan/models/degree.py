"""Degree goal model."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Degree:
    """The degree the plan works towards.

    Attributes:
        name: Degree name
        total_credits_required: Credits needed to graduate (60-200)
    """

    name: str
    total_credits_required: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "totalCreditsRequired": self.total_credits_required}
