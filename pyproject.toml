[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tamboon"
version = "0.1.0"
description = "Charity donation processing: ROT-128 encoded CSV imports, card charging and donation summaries"
requires-python = ">=3.10"
keywords = ["donation", "charity", "payment", "credit-card", "rot128", "csv", "money"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tamboon-api = "tamboon.webapp:main"

[tool.hatch.build.targets.wheel]
packages = ["tamboon"]

[tool.hatch.build.targets.sdist]
include = ["tamboon", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
