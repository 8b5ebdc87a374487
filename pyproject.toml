[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "mtmchkin"
version = "1.0.0"
description = "A turn-based console card game for 2 to 6 players, driven by a deck file and a players file"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "cards", "role-playing", "dungeon", "turn-based", "console"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mtmchkin = "mtmchkin.game:main"

[tool.setuptools.packages.find]
include = ["mtmchkin*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
