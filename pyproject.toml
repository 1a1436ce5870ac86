[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "analysistree"
version = "0.1.0"
description = "In-memory event data model for heavy-ion physics analysis: branch configurations, containers, tracks, particles, hits, modules and matchings"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "heavy-ion", "analysis", "event data", "particles", "tracks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["analysistree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
