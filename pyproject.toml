[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitui"
version = "0.1.10"
description = "Props validation, context values, lifecycle hooks, update scheduling and event delegation for UI component trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "components", "props", "validation", "events", "delegation", "lifecycle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbitui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
