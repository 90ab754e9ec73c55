[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whooshrail"
version = "0.1.0"
description = "Interactive console ticket booking for a high-speed rail service: schedules, seat maps, bookings and cancellations"
requires-python = ">=3.10"
dependencies = []
keywords = ["booking", "tickets", "railway", "schedule", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
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
whooshrail = "whooshrail.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["whooshrail"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
