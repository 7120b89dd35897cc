"""Bookkeeping of which mesh cells must be re-checked when the mesh changes.

Two kinds of dependency are tracked. A neighbour dependency is a bit in a
small mask held by a cell, naming which of its five neighbours depend on
it. A point dependency ties a cell to a spherical region: when a vertex is
inserted into (or removed from) that region, the cell has to be re-checked.
"""

from __future__ import annotations

import operator
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from stmesh.geometry import Box, Sphere

__all__ = ["DependencyTracker", "add_neighbor_dependency", "dependent_neighbors"]

NEIGHBOR_COUNT = 5
_MASK_LIMIT = 1 << 8


def _check_neighbor_index(neighbor_index) -> int:
    index = operator.index(neighbor_index)
    if not 0 <= index < NEIGHBOR_COUNT:
        raise ValueError(f"neighbor index must be in 0..{NEIGHBOR_COUNT - 1}")
    return index


def _check_mask(mask) -> int:
    value = operator.index(mask)
    if not 0 <= value < _MASK_LIMIT:
        raise ValueError("mask must fit in one unsigned byte")
    return value


def add_neighbor_dependency(mask: int, neighbor_index: int) -> int:
    """Return mask with the bit of the given neighbour set."""
    return _check_mask(mask) | (1 << _check_neighbor_index(neighbor_index))


def dependent_neighbors(mask: int) -> list[int]:
    """Return the indices of the neighbours whose bits are set in mask, ascending."""
    value = _check_mask(mask)
    return [index for index in range(NEIGHBOR_COUNT) if value & (1 << index)]


@dataclass(frozen=True, eq=False)
class _Entry:
    box: Box
    sphere: Sphere
    dependency: Any

    def matches(self, sphere: Sphere, dependency: Any) -> bool:
        return self.sphere == sphere and self.dependency == dependency


class DependencyTracker:
    """Regions that cells are sensitive to, separately for insertion and removal."""

    def __init__(self) -> None:
        self._on_insert: list[_Entry] = []
        self._on_remove: list[_Entry] = []

    def _entries(self, on_insert: bool) -> list[_Entry]:
        return self._on_insert if on_insert else self._on_remove

    def add_point_dependency(self, sphere: Sphere, dependency: Hashable, on_insert: bool = True) -> None:
        """Make dependency sensitive to a vertex change strictly inside sphere."""
        self._entries(on_insert).append(_Entry(sphere.bounding_box(), sphere, dependency))

    def remove_point_dependency(self, sphere: Sphere, dependency: Hashable, on_insert: bool = True) -> bool:
        """Drop one matching registration; return whether one was found."""
        entries = self._entries(on_insert)
        for position, entry in enumerate(entries):
            if entry.matches(sphere, dependency):
                del entries[position]
                return True
        return False

    def potentials_in_radius(self, point: Iterable[float], on_insert: bool = True) -> list:
        """Return the dependencies whose regions hold point strictly inside, in registration order."""
        p = np.asarray(point, dtype=float).ravel()
        return [
            entry.dependency
            for entry in self._entries(on_insert)
            if entry.box.contains(p) and entry.sphere.signed_distance(p) < 0
        ]

    def __len__(self) -> int:
        return len(self._on_insert) + len(self._on_remove)