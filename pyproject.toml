[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightplan"
version = "0.1.0"
description = "Plan multi-leg flight itineraries that arrive as early as possible under layover and duration limits"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "itinerary", "travel", "routing", "scheduling", "airports"]
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
flightplan = "flightplan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flightplan"]

[tool.pytest.ini_options]
addopts = "-ra"
