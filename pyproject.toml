[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubbletea"
version = "0.17.0"
description = "Building blocks for terminal user interfaces in the Elm Architecture style"
requires-python = ">=3.10"
keywords = ["tui", "terminal", "elm-architecture", "ansi", "keyboard", "mouse"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bubbletea"]

[tool.pytest.ini_options]
addopts = "-ra"
