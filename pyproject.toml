[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to short competitive programming problems as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "practice", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
