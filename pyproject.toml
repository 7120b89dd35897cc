[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stmesh"
version = "1.0.0"
description = "Building blocks for 4D space-time meshing: numeric helpers, bitsets, boundary regions, affine transforms, time slicing, dependency tracking and picking regions."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "mesh",
    "meshing",
    "space-time",
    "delaunay",
    "4d",
    "finite-elements",
    "geometry",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["stmesh"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
