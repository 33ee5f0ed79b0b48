[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harbourpoly"
version = "0.1.0"
description = "Game logic for a harbour-themed property trading board game: board, players, dice, cards, money transfers and on-screen control state."
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "property trading", "dice", "game logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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

[tool.hatch.build.targets.wheel]
packages = ["harbourpoly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
