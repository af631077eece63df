[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "menukit"
version = "0.1.0"
description = "Curses dialog widgets and a Makefile-style string preprocessor for configuration menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["curses", "dialog", "menu", "configuration", "preprocessor", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
packages = ["menukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
