[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubdesk"
version = "0.1.0"
description = "Replay a day of computer-club events and report table revenue and occupancy"
requires-python = ">=3.10"
dependencies = []
keywords = ["computer club", "event log", "billing", "scheduling", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clubdesk = "clubdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clubdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
