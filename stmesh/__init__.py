"""Building blocks for 4D space-time meshing: numeric helpers, bitsets,
boundary regions, affine transforms, geometry, time slicing, dependency
tracking and picking regions."""

__version__ = "1.0.0"

__all__ = [
    "bitset",
    "boundary_regions",
    "dependencies",
    "geometry",
    "lfs_schemes",
    "picking",
    "slicing",
    "transform",
    "utility",
]