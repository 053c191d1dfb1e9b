[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chompview"
version = "0.1.0"
description = "Renderer for a multiplayer grid-eating board game: board, player panels and results screen on an in-memory character canvas."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["game", "board game", "terminal", "renderer", "leaderboard", "canvas"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chompview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
