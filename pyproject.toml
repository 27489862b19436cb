[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robopoker"
version = "0.1.1"
description = "Building blocks for No-Limit Texas Hold'em solvers: betting edges and paths, showdown settlement, card abstractions and optimal-transport distances."
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "holdem", "cfr", "optimal-transport", "sinkhorn", "emd"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robopoker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
