[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matstats"
version = "0.1.0"
description = "Row- and column-wise statistics on matrices and vectors, with subsetting and missing-value handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["statistics", "matrix", "variance", "median", "mad", "logsumexp", "ranges", "bins"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["matstats"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
