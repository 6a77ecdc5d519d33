[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demostats"
version = "0.1.0"
description = "Load regional demography CSV data, compute min/max/median of a column and plot the series."
requires-python = ">=3.10"
dependencies = []
keywords = ["demography", "statistics", "csv", "median", "population", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
demostats = "demostats.app:main"

[tool.hatch.build.targets.wheel]
packages = ["demostats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
