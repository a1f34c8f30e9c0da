[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phantom_mansion"
version = "0.1.0"
description = "Game logic for a haunted-mansion puzzle adventure: character movement, item pickup, code locks and menu navigation"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "adventure", "escape-room"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["phantom_mansion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
