[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studynotes"
version = "0.0.1"
description = "Worked study exercises: design patterns, puzzle solutions, list structures, INI helpers and small tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "algorithms",
    "exercises",
    "ini",
    "linked-list",
    "education",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studynotes = "studynotes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studynotes"]

[tool.hatch.build.targets.sdist]
include = ["studynotes", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
