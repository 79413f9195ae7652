from __future__ import annotations
from dataclasses import dataclass
from math import isfinite


@dataclass(frozen=True, order=True)
class Record:
    """
    tree payload. ordered by title, ties broken by rating, so two records
    only compare equal when both fields match. non finite ratings are
    stored as 0.0 to keep the order total
    """

    title: str
    rating: float = 0.0

    def __post_init__(self):
        """override"""

        if not self.title:
            raise ValueError("title must be non-empty")
        if not isfinite(self.rating):
            object.__setattr__(self, "rating", 0.0)

    def __str__(self) -> str:
        return f"{self.title} ({self.rating:g})"
