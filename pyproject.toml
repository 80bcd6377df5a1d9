[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocutils"
version = "0.1.0"
description = "Small helpers for puzzle solving: sequence and mapping utilities, grid coordinates and directions, containers and timing."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "utilities", "grid", "coordinates", "directions", "linked-list", "timing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aocutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
