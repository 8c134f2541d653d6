[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practica"
version = "0.1.0"
description = "Search and hashing exercises, a concurrent kitchen simulation and a terminal weather viewer"
requires-python = ">=3.10"
keywords = ["binary-search", "algorithms", "exercises", "weather", "terminal", "tui", "fuzzy-search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
practica-restaurant = "practica.restaurant:main"
practica-weather = "practica.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["practica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
