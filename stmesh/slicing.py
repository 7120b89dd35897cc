"""Cutting a space-time mesh into constant-time slices, grouped into blocks."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from stmesh.geometry import Box
from stmesh.transform import apply_transform

__all__ = [
    "BlockInfo",
    "plan_blocks",
    "slice_index_range",
    "slice_times",
    "transformed_bounding_box",
]


@dataclass(frozen=True)
class BlockInfo:
    """A run of consecutive time slices processed together."""

    block_pos: int
    n_positions: int
    start_time: float


def plan_blocks(time_min: float, time_max: float, dt: float, blocks: int = 1) -> list[BlockInfo]:
    """Split the time span into blocks of slices spaced dt apart.

    Slice numbers run on from block to block; every block holds at least one slice.
    """
    if dt <= 0:
        raise ValueError("dt must be positive")
    if blocks < 1:
        raise ValueError("there must be at least one block")
    time_step = (time_max - time_min) / blocks
    dt_per_step = time_step / dt
    result = []
    curr_pos = 0
    dt_pos = 0.0
    for _ in range(blocks):
        start_time = time_min + dt * curr_pos
        dt_pos += dt_per_step
        n_positions = int(dt_pos) + 1
        dt_pos -= n_positions
        result.append(BlockInfo(curr_pos, n_positions, start_time))
        curr_pos += n_positions
    return result


def slice_index_range(
    min_time: float, max_time: float, start_time: float, dt: float, n_positions: int
) -> range:
    """Indices of the slices of a block that fall in [min_time, max_time)."""
    if dt <= 0:
        raise ValueError("dt must be positive")
    if n_positions < 0:
        raise ValueError("n_positions must be non-negative")
    min_idx = int(max(0.0, math.ceil((min_time - start_time) / dt)))
    max_idx = min(n_positions, int(max(0.0, math.ceil((max_time - start_time) / dt))))
    return range(min_idx, max_idx)


def slice_times(start_time: float, dt: float, n_positions: int) -> list[float]:
    """The times of the slices of a block."""
    if n_positions < 0:
        raise ValueError("n_positions must be non-negative")
    return [i * dt + start_time for i in range(n_positions)]


def transformed_bounding_box(
    box_min: Iterable[float], box_max: Iterable[float], matrix
) -> Box:
    """The box spanned by the two transformed corners of a box."""
    return Box(apply_transform(matrix, list(box_min)), apply_transform(matrix, list(box_max)))