[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainchess"
version = "0.1.0"
description = "A chess rules engine with player accounts, balances, wagers, Elo ratings, draw offers and clocks."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "elo", "wager", "time control"]
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
packages = ["chainchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
