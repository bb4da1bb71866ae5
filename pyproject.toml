[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transit-catalogue"
version = "0.1.0"
description = "A catalogue of bus stops and routes that answers queries about route lengths and the buses serving each stop"
requires-python = ">=3.10"
dependencies = []
keywords = ["transport", "bus", "routes", "stops", "geodesy", "catalogue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transit-catalogue = "transit_catalogue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["transit_catalogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
