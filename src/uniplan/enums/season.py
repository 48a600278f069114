"""Academic season enumeration."""

from enum import Enum


class Season(Enum):
    """Season a semester takes place in.

    Members are declared in academic order: a year starts in Autumn and
    ends with the Summer session.
    """

    AUTUMN = ("Autumn", 0)
    SPRING = ("Spring", 1)
    SUMMER = ("Summer", 2)

    def __init__(self, label: str, order: int):
        self.label = label
        self.order = order

    @classmethod
    def from_label(cls, label: str):
        """Get Season by its display label.

        Args:
            label: "Autumn", "Spring" or "Summer"

        Returns:
            Season enum value or None if not found
        """
        for season in cls:
            if season.label == label:
                return season
        return None
