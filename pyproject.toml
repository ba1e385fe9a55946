[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solong"
version = "0.1.0"
description = "A small top-down tile game: collect every item, then reach the exit."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tile", "puzzle", "pygame", "ber"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
solong = "solong.display:main"

[tool.hatch.build.targets.wheel]
packages = ["solong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
