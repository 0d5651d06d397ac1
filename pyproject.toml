[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bsqsolver"
version = "1.0.0"
description = "Find and draw a largest empty square on an obstacle map"
requires-python = ">=3.10"
keywords = ["bsq", "biggest square", "puzzle", "map", "grid"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bsq = "bsqsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bsqsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
