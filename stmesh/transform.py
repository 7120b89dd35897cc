"""Four-dimensional affine transformations given on the command line."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

import numpy as np

__all__ = [
    "TransformData",
    "rotation_matrix",
    "apply_transform",
    "add_transform_arguments",
    "transform_from_namespace",
]

_PLANES = ("xy", "xz", "xw", "yz", "yw", "zw")
_AXES = {"x": 0, "y": 1, "z": 2, "w": 3}


def rotation_matrix(plane1: int, plane2: int, angle: float) -> np.ndarray:
    """Return the 4x4 rotation by angle (radians) in the plane spanned by two axes."""
    if plane1 == plane2 or not (0 <= plane1 < 4 and 0 <= plane2 < 4):
        raise ValueError("planes must be two distinct axes in 0..3")
    rot = np.eye(4)
    c, s = math.cos(angle), math.sin(angle)
    rot[plane1, plane1] = c
    rot[plane1, plane2] = -s
    rot[plane2, plane1] = s
    rot[plane2, plane2] = c
    return rot


@dataclass
class TransformData:
    """Parameters of a 4D affine transformation."""

    translation: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)
    rotate_xy: float = 0.0
    rotate_xz: float = 0.0
    rotate_xw: float = 0.0
    rotate_yz: float = 0.0
    rotate_yw: float = 0.0
    rotate_zw: float = 0.0
    scale: tuple[float, ...] = (1.0, 1.0, 1.0, 1.0)
    custom_matrix: list[float] = field(default_factory=list)

    def matrix(self) -> np.ndarray:
        """Return the 4x5 affine matrix [linear | translation].

        A custom matrix, if given, is read column by column. Otherwise the
        result is translation, then the rotations in plane order, then scaling.
        """
        if self.custom_matrix:
            if len(self.custom_matrix) != 20:
                raise ValueError("custom matrix needs exactly 20 elements")
            return np.array(self.custom_matrix, dtype=float).reshape((4, 5), order="F")
        if len(self.translation) != 4 or len(self.scale) != 4:
            raise ValueError("translation and scale need exactly 4 elements")
        linear = np.eye(4)
        for name in _PLANES:
            linear = linear @ rotation_matrix(_AXES[name[0]], _AXES[name[1]], getattr(self, f"rotate_{name}"))
        linear = linear @ np.diag(np.asarray(self.scale, dtype=float))
        return np.hstack([linear, np.asarray(self.translation, dtype=float).reshape(4, 1)])


def apply_transform(matrix, points) -> np.ndarray:
    """Apply a 4x5 affine matrix to a point or to an array of points (one per row)."""
    mat = np.asarray(matrix, dtype=float)
    if mat.shape != (4, 5):
        raise ValueError("matrix must be 4x5")
    pts = np.asarray(points, dtype=float)
    if pts.shape[-1] != 4:
        raise ValueError("points must be four-dimensional")
    return pts @ mat[:, :4].T + mat[:, 4]


def add_transform_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the transformation options to parser and return it."""
    group = parser.add_argument_group("transform", "Apply 4D affine transformation")
    group.add_argument(
        "-t", "--translate", nargs=4, type=float, default=None, metavar=("X", "Y", "Z", "W"),
        help="4D translation vector (x,y,z,w)",
    )
    for name in _PLANES:
        group.add_argument(
            f"--rotate-{name}", type=float, default=None,
            help=f"Rotation angle in radians for {name.upper()} plane",
        )
    group.add_argument(
        "-s", "--scale", nargs=4, type=float, default=None, metavar=("X", "Y", "Z", "W"),
        help="Scale factors (x,y,z,w)",
    )
    group.add_argument(
        "--matrix", nargs=20, type=float, default=None,
        help="Custom transform matrix (20 elements, column by column)",
    )
    return parser


def transform_from_namespace(namespace: argparse.Namespace) -> TransformData:
    """Build TransformData from parsed options; --matrix excludes all others."""
    translate = getattr(namespace, "translate", None)
    scale = getattr(namespace, "scale", None)
    rotations = {name: getattr(namespace, f"rotate_{name}", None) for name in _PLANES}
    custom = getattr(namespace, "matrix", None)
    if custom is not None:
        if translate is not None or scale is not None or any(v is not None for v in rotations.values()):
            raise ValueError("--matrix excludes --translate, --scale and --rotate-* options")
        return TransformData(custom_matrix=list(custom))
    data = TransformData()
    if translate is not None:
        data.translation = tuple(translate)
    if scale is not None:
        data.scale = tuple(scale)
    for name, value in rotations.items():
        if value is not None:
            setattr(data, f"rotate_{name}", value)
    return data