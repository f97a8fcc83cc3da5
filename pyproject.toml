[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nsengine"
version = "0.1.0"
description = "Core building blocks of a small game engine: vectors, matrices, timers, interpolators, colours, input state, logging and memory accounting"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "engine", "interpolation", "easing", "timer", "color", "input", "vector", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nsengine"]

[tool.pytest.ini_options]
addopts = "-ra"
