[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterkit"
version = "0.1.0"
description = "Lazy iterator adaptors and helpers: grouping, chunking, combinations, merging, deduplication and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "iterator",
    "iterators",
    "itertools",
    "adaptors",
    "combinations",
    "group-by",
    "functional",
]
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
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
iterkit-iris = "iterkit.iris:main"

[tool.hatch.build.targets.wheel]
packages = ["iterkit"]

[tool.hatch.build.targets.sdist]
include = [
    "iterkit",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
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
