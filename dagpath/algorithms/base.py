"""Base constants and enums for the graph algorithms."""

from __future__ import annotations

from enum import Enum

#: Largest distance representable by the path engine (signed 64-bit).
INT64_MAX = 2**63 - 1

#: Smallest distance representable by the path engine (signed 64-bit).
INT64_MIN = -(2**63)

#: Shortest-mode distance of a vertex not reachable from the source.
UNREACHABLE = INT64_MAX

#: Longest-mode distance of a vertex not reachable from the source.
UNBOUNDED = INT64_MIN

#: Discovery index of a vertex the SCC search has not visited yet.
UNVISITED = -1


class PathMode(str, Enum):
    """Relaxation direction of the path engine."""

    SHORTEST = "shortest"
    LONGEST = "longest"

    @property
    def sentinel(self) -> int:
        """Distance value reserved for "not reached" in this mode."""
        return UNREACHABLE if self is PathMode.SHORTEST else UNBOUNDED

    def improves(self, candidate: int, current: int) -> bool:
        """Return True if ``candidate`` strictly improves on ``current``."""
        if self is PathMode.SHORTEST:
            return candidate < current
        return candidate > current


def fits_distance(value: int) -> bool:
    """Return True if ``value`` is a representable, non-sentinel distance."""
    return INT64_MIN < value < INT64_MAX
