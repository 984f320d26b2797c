[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventbooking"
version = "0.1.0"
description = "Event booking core: SQLite storage for events and registrations, bcrypt password hashing and request handlers"
requires-python = ">=3.10"
keywords = ["events", "booking", "registration", "sqlite", "scheduling"]
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
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "bcrypt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eventbooking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
