[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarydesk"
version = "0.1.0"
description = "Front-desk tool for a small lending library: books, clients, loans and returns."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "lending", "books", "loans", "circulation", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
librarydesk = "librarydesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["librarydesk"]

[tool.hatch.build.targets.sdist]
include = ["librarydesk", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
