[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "mazo"
version = "0.1.0"
description = "Generate, explore and solve n-dimensional wrap-around mazes in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "puzzle", "terminal", "game", "torus", "a-star", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazo = "mazo.app:main"

[tool.setuptools.packages.find]
include = ["mazo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
