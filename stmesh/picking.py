"""Picking regions: where candidate vertices for refinement are drawn from."""

from __future__ import annotations

import numpy as np

from stmesh.geometry import Box, Sphere

__all__ = ["expand_bounding_box", "sample_picking_region"]


def expand_bounding_box(box: Box, max_delta: float) -> Box:
    """Grow box by twice max_delta on every side.

    This keeps the corners of the enclosing triangulation far enough from
    a surface whose local feature size never exceeds max_delta.
    """
    margin = 2 * float(max_delta)
    return Box(box.minimum - margin, box.maximum + margin)


def _distance_to_box(point: np.ndarray, box: Box) -> float:
    closest = np.clip(point, box.minimum, box.maximum)
    return float(np.linalg.norm(point - closest))


def sample_picking_region(
    sphere: Sphere, zeta: float, bounding_box: Box, rng: np.random.Generator
) -> tuple[np.ndarray, float]:
    """Draw a point from sphere scaled by zeta, restricted to bounding_box.

    Points are drawn uniformly from the scaled sphere until one lies in the
    box. Returns the point and the radius of the scaled sphere. The sphere
    passed in is left unchanged.
    """
    zeta = float(zeta)
    if zeta < 0:
        raise ValueError("zeta must be non-negative")
    if sphere.dimension != bounding_box.dimension:
        raise ValueError("sphere and bounding box must have the same dimension")
    region = Sphere(sphere.radius, sphere.center)
    region.scale(zeta)
    gap = _distance_to_box(region.center, bounding_box)
    reachable = gap < region.radius or (gap == 0.0 and region.radius == 0.0)
    if not reachable:
        raise ValueError("picking region does not overlap the bounding box")
    while True:
        sample = region.sample(rng)
        if bounding_box.contains(sample):
            return sample, region.radius