[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reme"
version = "0.1.0"
description = "A small reminder tool: record timers and appointments in a JSON file and get alerted by a daemon when they are due."
requires-python = ">=3.10"
dependencies = []
keywords = ["reminder", "timer", "appointment", "notification", "daemon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reme = "reme.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["reme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
