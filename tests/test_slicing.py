import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from stmesh.slicing import (
    BlockInfo,
    plan_blocks,
    slice_index_range,
    slice_times,
    transformed_bounding_box,
)
from stmesh.transform import TransformData


def test_single_block():
    blocks = plan_blocks(0.0, 10.0, 0.5, 1)
    assert blocks == [BlockInfo(0, 21, 0.0)]


@given(
    time_min=st.floats(-100, 100),
    span=st.floats(0.0, 100),
    dt=st.floats(0.05, 5.0),
    count=st.integers(1, 8),
)
def test_blocks_are_contiguous_and_cover_span(time_min, span, dt, count):
    blocks = plan_blocks(time_min, time_min + span, dt, count)
    assert len(blocks) == count
    expected_pos = 0
    for block in blocks:
        assert block.block_pos == expected_pos
        assert block.n_positions >= 1
        assert block.start_time == pytest.approx(time_min + dt * block.block_pos)
        expected_pos += block.n_positions
    assert expected_pos * dt >= span - 1e-9


def test_plan_blocks_errors():
    with pytest.raises(ValueError):
        plan_blocks(0.0, 1.0, 0.0, 1)
    with pytest.raises(ValueError):
        plan_blocks(0.0, 1.0, 0.1, 0)


@given(
    lo=st.floats(-20, 20),
    extent=st.floats(0, 20),
    start=st.floats(-10, 10),
    dt=st.floats(0.1, 2.0),
    n=st.integers(0, 50),
)
def test_slice_index_range_selects_times_in_span(lo, extent, start, dt, n):
    hi = lo + extent
    indices = slice_index_range(lo, hi, start, dt, n)
    assert indices.start >= 0
    assert indices.stop <= max(n, indices.start)
    times = slice_times(start, dt, n)
    for i in indices:
        assert lo - 1e-9 <= times[i] < hi + 1e-9
    for i in range(n):
        if i not in indices:
            assert times[i] < lo + 1e-9 or times[i] >= hi - 1e-9


def test_slice_index_range_clamps():
    assert slice_index_range(-100.0, 100.0, 0.0, 1.0, 7) == range(0, 7)
    assert len(slice_index_range(-5.0, -1.0, 0.0, 1.0, 7)) == 0


def test_slice_index_range_errors():
    with pytest.raises(ValueError):
        slice_index_range(0.0, 1.0, 0.0, -1.0, 3)
    with pytest.raises(ValueError):
        slice_index_range(0.0, 1.0, 0.0, 1.0, -1)


def test_slice_times():
    times = slice_times(2.0, 0.25, 5)
    assert len(times) == 5
    assert times[0] == 2.0
    assert np.allclose(np.diff(times), 0.25)
    assert slice_times(1.0, 1.0, 0) == []


def test_transformed_box_identity():
    matrix = TransformData().matrix()
    box = transformed_bounding_box([0.0, 1.0, 2.0, 3.0], [4.0, 5.0, 6.0, 7.0], matrix)
    assert np.allclose(box.minimum, [0.0, 1.0, 2.0, 3.0])
    assert np.allclose(box.maximum, [4.0, 5.0, 6.0, 7.0])


def test_transformed_box_translation():
    shift = np.array([1.0, -2.0, 0.5, 10.0])
    matrix = TransformData(translation=tuple(shift)).matrix()
    lo = np.zeros(4)
    hi = np.ones(4)
    box = transformed_bounding_box(lo, hi, matrix)
    assert np.allclose(box.minimum, lo + shift)
    assert np.allclose(box.maximum, hi + shift)
    assert np.allclose(box.sizes(), hi - lo)


def test_transformed_box_time_scale():
    matrix = TransformData(scale=(1.0, 1.0, 1.0, 2.0)).matrix()
    box = transformed_bounding_box([0.0] * 4, [1.0] * 4, matrix)
    assert math.isclose(box.sizes()[3], 2.0)