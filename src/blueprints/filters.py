"""Read-time blueprint filters.

A filter maps a Blueprint to a new Blueprint with possibly fewer points.
Author and name are always preserved. Exactly one filter is active per
running service; it is resolved from configuration at startup.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from blueprints.models import Blueprint

DEFAULT_FILTER = "identity"


class BlueprintFilter(ABC):
    name: str = ""

    @abstractmethod
    def apply(self, bp: Blueprint) -> Blueprint:
        """Return a filtered copy of bp. Never mutates the input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IdentityFilter(BlueprintFilter):
    """Returns the blueprint unchanged."""
    name = "identity"

    def apply(self, bp: Blueprint) -> Blueprint:
        return bp.with_points(bp.points)


class RedundancyFilter(BlueprintFilter):
    """
    Collapse runs of consecutive equal points into their first point.

    Only the immediate predecessor is compared, so a point that reappears
    after a different point is kept: (1,1),(2,2),(1,1) is unchanged.
    """
    name = "redundancy"

    def apply(self, bp: Blueprint) -> Blueprint:
        kept = []
        for point in bp.points:
            if kept and kept[-1] == point:
                continue
            kept.append(point)
        return bp.with_points(kept)


class UndersamplingFilter(BlueprintFilter):
    """
    Keep one point out of two (even zero-based indices).

    Blueprints with two or fewer points are returned as they are.
    """
    name = "undersampling"
    min_points = 3

    def apply(self, bp: Blueprint) -> Blueprint:
        if len(bp.points) < self.min_points:
            return bp.with_points(bp.points)
        return bp.with_points(bp.points[::2])


FILTERS: Dict[str, Type[BlueprintFilter]] = {
    IdentityFilter.name: IdentityFilter,
    RedundancyFilter.name: RedundancyFilter,
    UndersamplingFilter.name: UndersamplingFilter,
}


def get_filter(name: Optional[str] = None) -> BlueprintFilter:
    """
    Resolve the active filter by configuration name.

    Args:
        name: One of FILTERS' keys. None or empty resolves to identity.

    Returns:
        A new filter instance

    Raises:
        ValueError: If the name is not a known filter
    """
    key = (name or DEFAULT_FILTER).strip().lower()
    try:
        return FILTERS[key]()
    except KeyError:
        allowed = ", ".join(sorted(FILTERS))
        raise ValueError(f"Unknown blueprint filter '{name}' (allowed: {allowed})") from None
