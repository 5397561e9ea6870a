[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workflowstats"
version = "0.1.0"
description = "Record CI workflow runs per repository in a database, seed sample data and count it back"
requires-python = ">=3.10"
keywords = ["sqlalchemy", "postgres", "workflow", "ci", "time-series", "seed-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database",
]
dependencies = [
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
workflowstats = "workflowstats.cli:main"
workflowstats-seed = "workflowstats.seed:main"

[tool.hatch.build.targets.wheel]
packages = ["workflowstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
