[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fallingsand"
version = "0.1.0"
description = "A falling-sand particle simulation with sand, water and snow"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["falling sand", "particles", "cellular automaton", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fallingsand = "fallingsand.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fallingsand"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
