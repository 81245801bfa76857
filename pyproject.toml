[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small numerical and concurrency toolkit: matrices, polynomials, vectors, integration, statistics, expression evaluation, thread pools and merge sort"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix",
    "polynomial",
    "newton-raphson",
    "numerical-integration",
    "monte-carlo",
    "statistics",
    "expression-parser",
    "thread-pool",
    "merge-sort",
    "work-stealing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-matrix = "labkit.matrix:main"
labkit-pi = "labkit.montecarlo:main"
labkit-stats = "labkit.stats:main"
labkit-expr = "labkit.expression:main"
labkit-poly = "labkit.polynomial:main"
labkit-integrate = "labkit.integration:main"
labkit-vector = "labkit.vector3:main"
labkit-threadpool = "labkit.threadpool:main"
labkit-mergesort = "labkit.mergesort:main"
labkit-workstealing = "labkit.workstealing:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
addopts = "-ra"
