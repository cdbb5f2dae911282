[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textadv"
version = "0.1.0"
description = "A small console text adventure: explore rooms, pick up objects, and save or load your progress."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "game", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textadv = "textadv.game:main"

[tool.hatch.build.targets.wheel]
packages = ["textadv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
