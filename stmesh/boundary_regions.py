"""Assigning boundary region ids from a list of regions."""

from __future__ import annotations

from typing import Protocol

__all__ = ["SignedDistanceRegion", "HypercubeBoundaryManager"]


class SignedDistanceRegion(Protocol):
    """A region described by a signed distance, negative inside."""

    def signed_distance(self, point) -> float: ...


class HypercubeBoundaryManager:
    """Ordered list of regions; later regions take precedence over earlier ones."""

    def __init__(self) -> None:
        self._regions: list[SignedDistanceRegion] = []

    def add_boundary_region(self, boundary_region: SignedDistanceRegion) -> int:
        """Add a region and return its id (ids start at 1)."""
        self._regions.append(boundary_region)
        return len(self._regions)

    def point_boundary_region(self, point) -> int:
        """Return the id of the last added region containing point, or 0 if none does."""
        for region_id in range(len(self._regions), 0, -1):
            if self._regions[region_id - 1].signed_distance(point) < 0.0:
                return region_id
        return 0

    def __len__(self) -> int:
        return len(self._regions)