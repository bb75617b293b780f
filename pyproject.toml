[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seeschlacht"
version = "0.1.0"
description = "Two-player battleship game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "game", "terminal", "curses", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seeschlacht = "seeschlacht.game:main"

[tool.hatch.build.targets.wheel]
packages = ["seeschlacht"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
