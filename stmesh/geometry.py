"""Axis-aligned boxes and hyperspheres in any dimension."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

__all__ = ["Box", "Sphere"]


def _as_vector(values: Iterable[float], name: str) -> np.ndarray:
    vec = np.array(values, dtype=float).ravel()
    if vec.size == 0:
        raise ValueError(f"{name} must not be empty")
    vec.setflags(write=False)
    return vec


class Box:
    """An axis-aligned box given by its minimum and maximum corners."""

    def __init__(self, minimum: Iterable[float], maximum: Iterable[float]) -> None:
        self._min = _as_vector(minimum, "minimum")
        self._max = _as_vector(maximum, "maximum")
        if self._min.shape != self._max.shape:
            raise ValueError("minimum and maximum must have the same dimension")

    @property
    def minimum(self) -> np.ndarray:
        """The minimum corner."""
        return self._min

    @property
    def maximum(self) -> np.ndarray:
        """The maximum corner."""
        return self._max

    @property
    def dimension(self) -> int:
        """The number of dimensions of the box."""
        return int(self._min.size)

    def contains(self, point: Iterable[float]) -> bool:
        """Whether point lies in the box, boundary included."""
        p = np.asarray(point, dtype=float).ravel()
        if p.shape != self._min.shape:
            raise ValueError("point has the wrong dimension")
        return bool(np.all(self._min <= p) and np.all(p <= self._max))

    def sizes(self) -> np.ndarray:
        """The extent of the box along every axis."""
        return self._max - self._min

    def diagonal(self) -> np.ndarray:
        """The vector from the minimum to the maximum corner."""
        return self._max - self._min

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return bool(np.array_equal(self._min, other._min) and np.array_equal(self._max, other._max))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Box({self._min.tolist()!r}, {self._max.tolist()!r})"


class Sphere:
    """A solid hypersphere with a signed distance that is negative inside."""

    def __init__(self, radius: float, center: Iterable[float]) -> None:
        self._radius = float(radius)
        self._center = _as_vector(center, "center")

    @property
    def radius(self) -> float:
        """The radius of the sphere."""
        return self._radius

    @property
    def center(self) -> np.ndarray:
        """The center of the sphere."""
        return self._center

    @property
    def dimension(self) -> int:
        """The number of dimensions of the sphere."""
        return int(self._center.size)

    def signed_distance(self, point: Iterable[float]) -> float:
        """Distance from the surface, negative inside the sphere."""
        p = np.asarray(point, dtype=float).ravel()
        if p.shape != self._center.shape:
            raise ValueError("point has the wrong dimension")
        return float(np.linalg.norm(p - self._center) - self._radius)

    def distance(self, point: Iterable[float]) -> float:
        """Unsigned distance from the surface."""
        return abs(self.signed_distance(point))

    def bounding_box(self) -> Box:
        """The smallest axis-aligned box holding the sphere."""
        return Box(self._center - self._radius, self._center + self._radius)

    def scale(self, factor: float) -> None:
        """Scale the radius by factor, keeping the center."""
        self._radius *= float(factor)

    def sample(self, rng: np.random.Generator) -> np.ndarray:
        """Draw a point uniformly from the solid sphere."""
        direction = rng.standard_normal(self.dimension)
        norm = float(np.linalg.norm(direction))
        while norm == 0.0:
            direction = rng.standard_normal(self.dimension)
            norm = float(np.linalg.norm(direction))
        length = self._radius * float(rng.random()) ** (1.0 / self.dimension)
        return self._center + direction / norm * length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self._radius == other._radius and bool(np.array_equal(self._center, other._center))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Sphere({self._radius!r}, {self._center.tolist()!r})"