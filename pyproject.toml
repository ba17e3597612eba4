[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libraryauto"
version = "1.0.0"
description = "Small library management: members, books, borrowing and returns with late fees, stored in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "members", "borrowing", "sqlite", "lending"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libraryauto = "libraryauto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libraryauto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
