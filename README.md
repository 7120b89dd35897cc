# stmesh

Building blocks for meshing four-dimensional space-time domains with
pentatopes (4-simplices). Vectors and matrices are NumPy arrays; the only
runtime dependency is NumPy.

## Modules

- `stmesh.utility`: small combinatorial and numerical helpers.
  `factorial`, `n_choose_k` (0 when `k > n`), `exp_n(x, n)` (`n ** x`),
  `sgn`, `newton_sqrt` (Newton-Raphson square root, NaN for negative or
  infinite input), `all_corners` (the `2**D` corners of a box, bit `j` of
  the row index picking the maximum along axis `j`), `kernel` (an
  orthonormal basis of the complement of a matrix's column space, via
  SVD) and `vector_hash`.
- `stmesh.bitset`: `Bitset`, a fixed-size set of bits that can be set but
  never cleared. Reads and writes are bounds-checked and raise
  `IndexError`; `set_range` sets both ends inclusive, in either order.
  Also `from_bools`, `set_from`, `copy`, iteration and equality.
- `stmesh.boundary_regions`: `HypercubeBoundaryManager`, an ordered list
  of regions (anything with a `signed_distance` method, negative inside).
  `add_boundary_region` returns ids starting at 1;
  `point_boundary_region` returns the id of the last added region that
  contains the point, or 0 if none does.
- `stmesh.lfs_schemes`: `Constant`, a local feature size that is the same
  everywhere, with `max()` returning that value.
- `stmesh.transform`: 4D affine transforms as 4x5 matrices
  `[linear | translation]`. `TransformData.matrix()` builds the matrix
  from a translation, six plane rotations (XY, XZ, XW, YZ, YW, ZW, applied
  in that order) and per-axis scaling, or reads a 20-element custom matrix
  column by column. `rotation_matrix`, `apply_transform`, and
  `add_transform_arguments` / `transform_from_namespace` for reading the
  transform from `argparse` options (`-t/--translate`, `--rotate-xy` and
  the other planes, `-s/--scale`, `--matrix`; `--matrix` excludes the
  others and raises `ValueError` if combined with them).
- `stmesh.geometry`: axis-aligned `Box` (`contains`, `sizes`, `diagonal`)
  and solid `Sphere` (`signed_distance`, `distance`, `bounding_box`,
  `scale`, uniform `sample`) in any dimension.
- `stmesh.slicing`: cutting a time span into constant-time slices grouped
  into blocks: `BlockInfo`, `plan_blocks`, `slice_index_range`,
  `slice_times`, `transformed_bounding_box`.
- `stmesh.dependencies`: `DependencyTracker`, which records cells that
  must be re-checked when a vertex is inserted into or removed from a
  spherical region, and the neighbour bitmask helpers
  `add_neighbor_dependency` and `dependent_neighbors`.
- `stmesh.picking`: `expand_bounding_box` (grow a box by twice a given
  delta on every side) and `sample_picking_region` (draw a point from a
  sphere scaled by `zeta`, retrying until it lies in a bounding box).

## Examples

```python
from stmesh.utility import factorial, n_choose_k

factorial(10)      # 3628800
n_choose_k(10, 5)  # 252
```

```python
from stmesh.bitset import Bitset

bits = Bitset(100)
bits.set(3)
bits.set_range(20, 10)   # same as set_range(10, 20)
bits[15]                 # True
len(bits)                # 100
bits[100]                # raises IndexError
```

```python
import numpy as np
from stmesh.geometry import Sphere

sphere = Sphere(1.0, [0.0, 0.0, 0.0, 1.0])
sphere.signed_distance([0.0, 0.0, 0.0, 3.0])  # 1.0
sphere.scale(2.0)
point = sphere.sample(np.random.default_rng(0))  # uniformly inside the ball
```

```python
import math
import numpy as np
from stmesh.transform import TransformData, apply_transform, rotation_matrix

rot = rotation_matrix(0, 1, math.pi / 2)   # rotation in the XY plane
rot @ np.array([1.0, 0.0, 0.0, 0.0])       # approximately [0, 1, 0, 0]

data = TransformData(translation=(1.0, 0.0, 0.0, 0.0))
apply_transform(data.matrix(), [0.0, 0.0, 0.0, 0.0])  # [1, 0, 0, 0]
```

```python
from stmesh.slicing import plan_blocks, slice_times

plan_blocks(0.0, 1.0, 0.5)   # [BlockInfo(block_pos=0, n_positions=3, start_time=0.0)]
slice_times(0.0, 0.5, 3)     # [0.0, 0.5, 1.0]
```

```python
from stmesh.dependencies import DependencyTracker
from stmesh.geometry import Sphere

tracker = DependencyTracker()
tracker.add_point_dependency(Sphere(1.0, [0, 0, 0, 0]), "cell-a")
tracker.potentials_in_radius([0.5, 0, 0, 0])   # ["cell-a"]
```

## What the package does not do

The package holds the supporting pieces only. It does not build a
Delaunay triangulation, run the refinement loop that inserts vertices,
read image or mesh files, or write VTK or other output files, and it
installs no command-line programs.

## Tests

The test suite uses pytest and hypothesis, available through the `test`
extra.