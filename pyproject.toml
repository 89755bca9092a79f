[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shegerbus"
version = "0.1.0"
description = "A console bus ticket reservation system with seat booking, cancellation, tickets and an admin dashboard."
requires-python = ">=3.10"
dependencies = []
keywords = ["bus", "ticket", "reservation", "booking", "seats", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
shegerbus = "shegerbus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shegerbus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
